"""Aperture lattice generation (image-to-hole halftoning).

Every panel gets a lattice of candidate points over its margin-trimmed
interior. Each point samples the wall-wide grayscale field; points darker
than the threshold receive a hole whose diameter grows with darkness
(shaped by a gamma curve) and is snapped to the nearest enabled catalog
diameter.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from ..grayscale import GrayscaleField, sample
from ..value_objects import (
    Aperture,
    GridInfo,
    GridPattern,
    GridSpecification,
    HoleSizeCatalog,
    PanelInstance,
    SpacingMode,
    WallSpecification,
)

logger = logging.getLogger(__name__)

# Reference panel used for COUNT mode when no layout has been arranged.
DEFAULT_REFERENCE_SIZE: tuple[float, float] = (48.0, 120.0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def snap_diameter(raw: float, diameters: Sequence[float]) -> float:
    """Return the catalog diameter closest to ``raw``.

    ``diameters`` is scanned in ascending order and a later entry only wins
    when it is strictly closer, so an exact tie goes to the smaller size.
    """
    best = diameters[0]
    best_dist = abs(raw - best)
    for candidate in diameters[1:]:
        dist = abs(raw - candidate)
        if dist < best_dist:
            best, best_dist = candidate, dist
    return best


def reference_size(
    col_widths: Sequence[float], row_heights: Sequence[float]
) -> tuple[float, float]:
    """Largest arranged panel width and height, for COUNT mode scaling."""
    ref_w = max(col_widths) if col_widths else DEFAULT_REFERENCE_SIZE[0]
    ref_h = max(row_heights) if row_heights else DEFAULT_REFERENCE_SIZE[1]
    return ref_w, ref_h


@dataclass(frozen=True)
class HoleResult:
    """Panels with freshly generated apertures.

    Attributes:
        panels: Panels in the same order as the input.
        grid_info: Lattice density of the last panel that had an interior.
    """

    panels: tuple[PanelInstance, ...]
    grid_info: GridInfo

    @property
    def total_apertures(self) -> int:
        return sum(len(p.apertures) for p in self.panels)


class HoleGridGenerator:
    """Builds aperture lattices for panels from a grayscale field.

    Attributes:
        grid: Lattice configuration.
        holes: Enabled hole diameters.
        wall: Wall the panels are placed on (for UV mapping).
        threshold: Brightness gate on a 0-255 scale.
        gamma: Exponent applied to normalized darkness.
        reference: Reference panel width/height for COUNT mode.
    """

    def __init__(
        self,
        grid: GridSpecification,
        holes: HoleSizeCatalog,
        wall: WallSpecification,
        threshold: float = 245,
        gamma: float = 1.0,
        reference: tuple[float, float] = DEFAULT_REFERENCE_SIZE,
    ) -> None:
        """Initialize the generator.

        Raises:
            ValueError: If threshold is outside [0, 255] or gamma is not
                positive.
        """
        if not 0 <= threshold <= 255:
            raise ValueError("Threshold must be between 0 and 255")
        if gamma <= 0:
            raise ValueError("Gamma must be positive")
        self.grid = grid
        self.holes = holes
        self.wall = wall
        self.threshold = threshold
        self.gamma = gamma
        self.reference = reference

    def lattice_size(self, panel: PanelInstance) -> tuple[int, int] | None:
        """Columns and rows of the candidate lattice for ``panel``.

        Returns None when the margin leaves no interior.
        """
        area_w, area_h = panel.interior(self.grid.margin)
        if area_w <= 0 or area_h <= 0:
            return None

        min_sp = self.grid.min_spacing
        if self.grid.mode is SpacingMode.SPACING:
            sx, sy = self.grid.effective_spacing
            cols = max(1, math.floor(area_w / sx) + 1)
            rows = max(1, math.floor(area_h / sy) + 1)
            return cols, rows

        ref_w = self.reference[0] - 2 * self.grid.margin
        ref_h = self.reference[1] - 2 * self.grid.margin
        # A reference narrower than the margin cannot scale anything.
        scale_w = area_w / ref_w if ref_w > 0 else 1.0
        scale_h = area_h / ref_h if ref_h > 0 else 1.0
        cols = max(1, _round_half_up(self.grid.cols * scale_w))
        rows = max(1, _round_half_up(self.grid.rows * scale_h))
        cols = min(cols, math.floor(area_w / min_sp) + 1)
        rows = min(rows, math.floor(area_h / min_sp) + 1)
        return cols, rows

    def lattice_points(
        self, panel: PanelInstance, cols: int, rows: int
    ) -> Iterator[tuple[float, float]]:
        """Yield panel-local candidate points row by row."""
        m = self.grid.margin
        area_w, area_h = panel.interior(m)
        pitch_x = area_w / (cols - 1) if cols > 1 else 0.0
        pitch_y = area_h / (rows - 1) if rows > 1 else 0.0
        staggered = self.grid.pattern is GridPattern.STAGGERED

        for r in range(rows):
            offset_row = staggered and r % 2 == 1
            row_cols = cols - 1 if offset_row else cols
            x_off = pitch_x * 0.5 if offset_row else 0.0
            ly = m + (r * pitch_y if rows > 1 else area_h / 2)
            for c in range(row_cols):
                lx = m + (c * pitch_x if cols > 1 else area_w / 2) + x_off
                yield lx, ly

    def diameter_for(self, brightness: float) -> float | None:
        """Map a sampled brightness to a catalog diameter.

        Returns None when the point is brighter than the threshold admits.
        """
        gate = self.threshold / 255
        if brightness > gate:
            return None
        if gate > 0:
            t = min(1.0, max(0.0, 1 - brightness / gate))
        else:
            # Only pure black passes a zero gate.
            t = 1.0
        t = t**self.gamma
        lo, hi = self.holes.min_diameter, self.holes.max_diameter
        return snap_diameter(lo + t * (hi - lo), self.holes.diameters)

    def generate(
        self, panel: PanelInstance, field: GrayscaleField | None
    ) -> tuple[Aperture, ...]:
        """Compute the apertures for a single panel.

        Args:
            panel: Panel to perforate.
            field: Wall-wide grayscale field, or None when no image is loaded.

        Returns:
            Apertures in lattice order; empty for a degenerate interior,
            an empty hole catalog or a missing field.
        """
        if not self._can_perforate(field):
            return ()
        size = self.lattice_size(panel)
        if size is None:
            return ()
        return tuple(self._apertures(panel, field, *size))

    def _can_perforate(self, field: GrayscaleField | None) -> bool:
        return (
            field is not None
            and not self.holes.is_empty
            and self.wall.width > 0
            and self.wall.height > 0
        )

    def _apertures(
        self, panel: PanelInstance, field: GrayscaleField, cols: int, rows: int
    ) -> Iterator[Aperture]:
        for lx, ly in self.lattice_points(panel, cols, rows):
            if lx < 0 or lx > panel.width or ly < 0 or ly > panel.height:
                continue
            u = (panel.x + lx) / self.wall.width
            v = (panel.y + ly) / self.wall.height
            diameter = self.diameter_for(sample(field, u, v))
            if diameter is not None:
                yield Aperture(x=lx, y=ly, diameter=diameter)

    def apply(
        self, panels: Sequence[PanelInstance], field: GrayscaleField | None
    ) -> HoleResult:
        """Regenerate apertures for every panel.

        Each panel's aperture list is replaced wholesale; the input panels
        are not modified.
        """
        if not self._can_perforate(field):
            if self.holes.is_empty:
                logger.warning("Hole size catalog is empty; no apertures generated")
            return HoleResult(
                panels=tuple(p.with_apertures(()) for p in panels),
                grid_info=GridInfo(),
            )

        grid_info = GridInfo()
        result: list[PanelInstance] = []
        for panel in panels:
            size = self.lattice_size(panel)
            if size is None:
                logger.debug("Panel %s has no interior inside the margin", panel.label)
                result.append(panel.with_apertures(()))
                continue
            grid_info = GridInfo(cols=size[0], rows=size[1])
            apertures = tuple(self._apertures(panel, field, *size))
            logger.debug(
                "Panel %s: %dx%d lattice, %d apertures",
                panel.label,
                size[0],
                size[1],
                len(apertures),
            )
            result.append(panel.with_apertures(apertures))

        return HoleResult(panels=tuple(result), grid_info=grid_info)
