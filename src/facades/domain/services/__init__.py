"""Domain services for facade layout and perforation.

This package provides:
- Axis tiling (covering one wall dimension with catalog panel lengths)
- Layout composition and panel grid materialization
- Aperture lattice generation from a grayscale field
"""

from .axis_solver import (
    COVERAGE_TIE,
    FIT_TOLERANCE,
    MAX_AXIS_SOLUTIONS,
    MAX_COUNT_PER_SIZE,
    rank_solutions,
    solve_axis,
)
from .hole_grid import (
    DEFAULT_REFERENCE_SIZE,
    HoleGridGenerator,
    HoleResult,
    reference_size,
    snap_diameter,
)
from .layout_composer import (
    MAX_AXIS_CANDIDATES,
    MAX_LAYOUT_OPTIONS,
    LayoutResult,
    PanelGrid,
    arrange_axis,
    build_layout,
    compose_layouts,
    materialize,
    row_label,
    select_layout,
)

__all__ = [
    "COVERAGE_TIE",
    "DEFAULT_REFERENCE_SIZE",
    "FIT_TOLERANCE",
    "HoleGridGenerator",
    "HoleResult",
    "LayoutResult",
    "MAX_AXIS_CANDIDATES",
    "MAX_AXIS_SOLUTIONS",
    "MAX_COUNT_PER_SIZE",
    "MAX_LAYOUT_OPTIONS",
    "PanelGrid",
    "arrange_axis",
    "build_layout",
    "compose_layouts",
    "materialize",
    "rank_solutions",
    "reference_size",
    "row_label",
    "select_layout",
    "snap_diameter",
    "solve_axis",
]
