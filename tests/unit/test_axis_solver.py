"""Unit tests for the axis tiling solver.

These tests verify:
- Empty results for missing sizes and non-positive extents
- The one-gap overshoot bound on every solution
- Ranking by coverage, distinct sizes, then panel count
- Deduplication, the per-size count cap and the result limit
"""

import pytest

from facades.domain.services import (
    COVERAGE_TIE,
    FIT_TOLERANCE,
    MAX_AXIS_SOLUTIONS,
    MAX_COUNT_PER_SIZE,
    rank_solutions,
    solve_axis,
)
from facades.domain.value_objects import AxisSolution


def _solution(counts: dict[float, int], extent: float, gap: float = 0.0) -> AxisSolution:
    n = sum(counts.values())
    total = sum(s * c for s, c in counts.items()) + max(0, n - 1) * gap
    return AxisSolution(
        counts=tuple(sorted(counts.items())),
        total=total,
        coverage=total / extent,
        num_panels=n,
    )


class TestSolveAxisEdgeCases:
    """Tests for degenerate solver inputs."""

    def test_no_sizes_returns_empty(self) -> None:
        assert solve_axis(240.0, 0.25, []) == []

    def test_zero_extent_returns_empty(self) -> None:
        assert solve_axis(0.0, 0.25, [24, 48]) == []

    def test_negative_extent_returns_empty(self) -> None:
        assert solve_axis(-10.0, 0.25, [24, 48]) == []

    def test_non_positive_sizes_are_ignored(self) -> None:
        solutions = solve_axis(48.0, 0.0, [0, -24, 48])
        assert [s.signature for s in solutions] == ["48:1"]

    def test_nothing_fits(self) -> None:
        """A wall narrower than every panel has no solution."""
        assert solve_axis(20.0, 0.25, [24, 48]) == []


class TestSolveAxisBounds:
    """Tests for the covered-length bound."""

    @pytest.mark.parametrize(
        "extent,gap,sizes",
        [
            (240.0, 0.25, [24, 48]),
            (120.0, 0.25, [96, 120, 144]),
            (100.0, 0.5, [24, 36, 48]),
            (37.0, 1.0, [12, 18]),
        ],
    )
    def test_total_never_exceeds_extent_plus_gap(
        self, extent: float, gap: float, sizes: list[float]
    ) -> None:
        for solution in solve_axis(extent, gap, sizes):
            assert solution.total <= extent + gap + FIT_TOLERANCE

    def test_overshoot_by_one_gap_is_allowed(self) -> None:
        """Two 48" panels plus a 0.25" gap fit a 96" wall."""
        solutions = solve_axis(96.0, 0.25, [48])
        assert solutions[0].signature == "48:2"
        assert solutions[0].total == pytest.approx(96.25)
        assert solutions[0].coverage > 1.0

    def test_oversized_panel_is_excluded(self) -> None:
        """144" panels never fit a 120" wall."""
        solutions = solve_axis(120.0, 0.25, [96, 120, 144])
        assert all(144.0 not in s.as_dict() for s in solutions)

    def test_count_per_size_is_capped(self) -> None:
        solutions = solve_axis(1000.0, 0.0, [1])
        assert solutions[0].num_panels == MAX_COUNT_PER_SIZE
        assert max(s.num_panels for s in solutions) == MAX_COUNT_PER_SIZE


class TestSolveAxisRanking:
    """Tests for solution ordering."""

    def test_full_coverage_single_size_ranks_first(self) -> None:
        solutions = solve_axis(120.0, 0.25, [96, 120, 144])
        assert solutions[0].signature == "120:1"
        assert solutions[0].coverage == pytest.approx(1.0)

    def test_order_for_two_sizes_without_gap(self) -> None:
        """Coverage first, then fewer distinct sizes, then fewer panels."""
        solutions = solve_axis(96.0, 0.0, [24, 48])
        assert [s.signature for s in solutions] == [
            "48:2",
            "24:4",
            "24:2,48:1",
            "24:3",
            "24:1,48:1",
            "48:1",
            "24:2",
            "24:1",
        ]

    def test_coverage_within_tie_prefers_fewer_distinct_sizes(self) -> None:
        mixed = _solution({24: 1, 48: 1}, extent=72.0)
        single = AxisSolution(
            counts=((36.0, 2),),
            total=72.0 - COVERAGE_TIE * 72.0 / 2,
            coverage=1.0 - COVERAGE_TIE / 2,
            num_panels=2,
        )
        assert rank_solutions([mixed, single]) == [single, mixed]

    def test_coverage_beyond_tie_wins(self) -> None:
        full = _solution({24: 1, 48: 1}, extent=72.0)
        short = _solution({48: 1}, extent=72.0)
        assert rank_solutions([short, full]) == [full, short]

    def test_ranking_is_stable_for_equal_keys(self) -> None:
        a = _solution({24: 2}, extent=96.0)
        b = _solution({48: 1}, extent=96.0)
        b = AxisSolution(counts=b.counts, total=48.0, coverage=0.5, num_panels=2)
        assert rank_solutions([a, b]) == [a, b]
        assert rank_solutions([b, a]) == [b, a]


class TestSolveAxisResults:
    """Tests for deduplication and truncation."""

    def test_results_are_unique(self) -> None:
        solutions = solve_axis(240.0, 0.25, [24, 36, 48])
        signatures = [s.signature for s in solutions]
        assert len(signatures) == len(set(signatures))

    def test_results_truncated_to_limit(self) -> None:
        assert len(solve_axis(240.0, 0.25, [24, 36, 48])) == MAX_AXIS_SOLUTIONS

    def test_custom_limit(self) -> None:
        assert len(solve_axis(240.0, 0.25, [24, 36, 48], limit=3)) == 3

    def test_duplicate_sizes_collapse(self) -> None:
        assert solve_axis(96.0, 0.0, [48, 48.0]) == solve_axis(96.0, 0.0, [48])

    def test_counts_sorted_ascending(self) -> None:
        for solution in solve_axis(240.0, 0.25, [48, 24, 36]):
            sizes = [size for size, _ in solution.counts]
            assert sizes == sorted(sizes)
