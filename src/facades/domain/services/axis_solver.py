"""Axis tiling solver.

Finds ways to cover one linear wall dimension with a multiset of catalog
panel lengths separated by a uniform gap. The search is a bounded
depth-first enumeration over per-size counts; every feasible non-empty
assignment becomes a candidate, and candidates are ranked by coverage, then
by how few distinct sizes they use, then by how few panels they need.

Example:
    >>> solutions = solve_axis(120.0, 0.25, [96, 120, 144])
    >>> solutions[0].description
    '120"'
"""

from __future__ import annotations

import logging
import math
from functools import cmp_to_key
from typing import Iterable

from ..value_objects import AxisSolution

logger = logging.getLogger(__name__)

# Search bounds. These are tunables, not correctness limits.
MAX_COUNT_PER_SIZE = 30
MAX_AXIS_SOLUTIONS = 12

# A tiling may overshoot the wall by at most one gap plus this slack.
FIT_TOLERANCE = 0.01

# Coverage differences at or below this are ranked as ties.
COVERAGE_TIE = 0.003


def _compare_solutions(a: AxisSolution, b: AxisSolution) -> int | float:
    coverage_delta = b.coverage - a.coverage
    if abs(coverage_delta) > COVERAGE_TIE:
        return coverage_delta
    distinct_delta = a.distinct_sizes - b.distinct_sizes
    if distinct_delta != 0:
        return distinct_delta
    return a.num_panels - b.num_panels


def rank_solutions(solutions: Iterable[AxisSolution]) -> list[AxisSolution]:
    """Order solutions by coverage, distinct sizes, then panel count.

    The sort is stable, so equally ranked solutions keep their discovery
    order.
    """
    return sorted(solutions, key=cmp_to_key(_compare_solutions))


def solve_axis(
    extent: float,
    gap: float,
    sizes: Iterable[float],
    limit: int = MAX_AXIS_SOLUTIONS,
) -> list[AxisSolution]:
    """Enumerate and rank ways to tile ``extent`` with catalog lengths.

    Args:
        extent: Wall dimension to cover, in inches.
        gap: Gap between neighbouring panels, in inches.
        sizes: Allowed panel lengths along this axis.
        limit: Maximum number of ranked solutions to return.

    Returns:
        Up to ``limit`` unique solutions, best first. Empty when ``sizes``
        is empty, ``extent`` is not positive, or nothing fits.
    """
    ordered = sorted({float(s) for s in sizes if s > 0}, reverse=True)
    if not ordered or extent <= 0:
        return []

    ceiling = extent + gap + FIT_TOLERANCE
    candidates: list[AxisSolution] = []
    counts: dict[float, int] = {}

    def recurse(index: int, length_sum: float, num_panels: int) -> None:
        total = length_sum + max(0, num_panels - 1) * gap
        if total > ceiling:
            return
        if num_panels > 0:
            candidates.append(
                AxisSolution(
                    counts=tuple(sorted(counts.items())),
                    total=total,
                    coverage=total / extent,
                    num_panels=num_panels,
                )
            )
        if index >= len(ordered):
            return

        size = ordered[index]
        step = size + (gap if num_panels > 0 else 0)
        max_n = min(math.floor((extent - total + gap) / step), MAX_COUNT_PER_SIZE)
        for n in range(max_n + 1):
            if n:
                counts[size] = n
            recurse(index + 1, length_sum + n * size, num_panels + n)
            counts.pop(size, None)

    recurse(0, 0.0, 0)

    seen: set[str] = set()
    unique: list[AxisSolution] = []
    for solution in rank_solutions(candidates):
        if solution.signature in seen:
            continue
        seen.add(solution.signature)
        unique.append(solution)

    logger.debug(
        "Axis %.2f: %d candidates, %d unique, keeping %d",
        extent,
        len(candidates),
        len(unique),
        min(limit, len(unique)),
    )
    return unique[:limit]
