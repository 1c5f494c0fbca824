"""Two-dimensional layout composition and panel grid materialization.

Combines the best width and height axis solutions into ranked layout
options, and turns a chosen option into a centered grid of panel instances.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Sequence

from ..value_objects import (
    AxisSolution,
    LayoutOption,
    PanelInstance,
    PanelSizeCatalog,
    WallSpecification,
    format_length,
)
from .axis_solver import COVERAGE_TIE, solve_axis

logger = logging.getLogger(__name__)

MAX_AXIS_CANDIDATES = 6
MAX_LAYOUT_OPTIONS = 15


@dataclass(frozen=True)
class PanelGrid:
    """Materialized panels plus the arranged length sequence on each axis.

    Attributes:
        panels: Panels in row-major order (top row first).
        col_widths: Column widths left to right.
        row_heights: Row heights top to bottom.
    """

    panels: tuple[PanelInstance, ...] = ()
    col_widths: tuple[float, ...] = ()
    row_heights: tuple[float, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.panels


@dataclass(frozen=True)
class LayoutResult:
    """Outcome of solving and materializing a wall layout.

    Attributes:
        options: Ranked layout options (empty when no layout is possible).
        selected_index: Index of the option that was materialized.
        grid: The materialized panel grid.
    """

    options: tuple[LayoutOption, ...] = ()
    selected_index: int = 0
    grid: PanelGrid = field(default_factory=PanelGrid)

    @property
    def selected(self) -> LayoutOption | None:
        if not self.options:
            return None
        return self.options[self.selected_index]


def _compare_options(a: LayoutOption, b: LayoutOption) -> int | float:
    coverage_delta = b.total_coverage - a.total_coverage
    if abs(coverage_delta) > COVERAGE_TIE:
        return coverage_delta
    return a.total_panels - b.total_panels


def compose_layouts(
    width_solutions: Sequence[AxisSolution],
    height_solutions: Sequence[AxisSolution],
) -> list[LayoutOption]:
    """Cross the top axis solutions into ranked 2-D layout options.

    Args:
        width_solutions: Ranked solutions for the wall width.
        height_solutions: Ranked solutions for the wall height.

    Returns:
        Up to ``MAX_LAYOUT_OPTIONS`` options, best coverage first, fewer
        panels first among coverage ties.
    """
    combos: list[LayoutOption] = []
    for w in width_solutions[:MAX_AXIS_CANDIDATES]:
        for h in height_solutions[:MAX_AXIS_CANDIDATES]:
            combos.append(
                LayoutOption(
                    width=w,
                    height=h,
                    total_coverage=(w.coverage + h.coverage) / 2,
                    total_panels=w.num_panels * h.num_panels,
                    description=f"W: {w.description} | H: {h.description}",
                )
            )
    combos.sort(key=cmp_to_key(_compare_options))
    return combos[:MAX_LAYOUT_OPTIONS]


def arrange_axis(counts: Sequence[tuple[float, int]]) -> list[float]:
    """Expand a count map into an ordered run of panel lengths.

    The dominant length (most panels, largest on a tie) forms one contiguous
    central run. The remaining lengths, in ascending order, are split with
    the first ``ceil(n / 2)`` placed before the run and the rest after it.
    When the most frequent length is not the largest, the larger lengths
    end up at the edges: ``{24: 3, 48: 2}`` arranges as
    ``[48, 24, 24, 24, 48]`` rather than centering the 48s.

    Args:
        counts: ``(length, count)`` pairs.

    Returns:
        Panel lengths from the low edge of the axis to the high edge.
    """
    ordered = sorted((size, n) for size, n in counts if n > 0)
    expanded = [size for size, n in ordered for _ in range(n)]
    if len(expanded) <= 2:
        return expanded

    dominant, _ = max(ordered, key=lambda item: (item[1], item[0]))
    middle = [size for size in expanded if size == dominant]
    edges = [size for size in expanded if size != dominant]
    split = math.ceil(len(edges) / 2)
    return edges[:split] + middle + edges[split:]


def row_label(index: int) -> str:
    """Spreadsheet-style row letters: A..Z, then AA, AB, ..."""
    letters = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def _span(lengths: Sequence[float], gap: float) -> float:
    if not lengths:
        return 0.0
    return sum(lengths) + (len(lengths) - 1) * gap


def materialize(option: LayoutOption, wall: WallSpecification) -> PanelGrid:
    """Lay out the panels of ``option`` as a grid centered on the wall.

    Any wall length the grid does not cover becomes an equal margin on both
    sides of the axis.
    """
    col_widths = arrange_axis(option.width.counts)
    row_heights = arrange_axis(option.height.counts)
    gap = wall.gap

    offset_x = (wall.width - _span(col_widths, gap)) / 2
    offset_y = (wall.height - _span(row_heights, gap)) / 2

    panels: list[PanelInstance] = []
    y = offset_y
    for r, ph in enumerate(row_heights):
        x = offset_x
        for c, pw in enumerate(col_widths):
            panels.append(
                PanelInstance(
                    x=x,
                    y=y,
                    width=pw,
                    height=ph,
                    col=c,
                    row=r,
                    label=f"{row_label(r)}{c + 1}",
                    size_label=f'{format_length(pw)}"x{format_length(ph)}"',
                )
            )
            x += pw + gap
        y += ph + gap

    return PanelGrid(
        panels=tuple(panels),
        col_widths=tuple(col_widths),
        row_heights=tuple(row_heights),
    )


def select_layout(options: Sequence[LayoutOption], index: int) -> int:
    """Clamp a requested layout index into the available range."""
    return min(max(0, index), max(0, len(options) - 1))


def build_layout(
    wall: WallSpecification,
    catalog: PanelSizeCatalog,
    selected_index: int = 0,
) -> LayoutResult:
    """Solve both axes, compose options and materialize the selected one.

    Returns an empty result when either axis has no tiling; callers should
    treat that as "no layout possible" rather than an error.
    """
    width_solutions = solve_axis(wall.width, wall.gap, catalog.widths)
    height_solutions = solve_axis(wall.height, wall.gap, catalog.heights)
    if not width_solutions or not height_solutions:
        logger.warning(
            "No layout possible for %sx%s wall with the enabled panel sizes",
            format_length(wall.width),
            format_length(wall.height),
        )
        return LayoutResult()

    options = compose_layouts(width_solutions, height_solutions)
    index = select_layout(options, selected_index)
    grid = materialize(options[index], wall)
    logger.debug(
        "Selected layout %d of %d: %s (%d panels)",
        index,
        len(options),
        options[index].description,
        len(grid.panels),
    )
    return LayoutResult(options=tuple(options), selected_index=index, grid=grid)
