"""Domain layer - facade layout and perforation logic."""

from .exceptions import FacadeError, ImageLoadError
from .grayscale import GrayscaleField, as_field, sample
from .services import (
    HoleGridGenerator,
    HoleResult,
    LayoutResult,
    PanelGrid,
    arrange_axis,
    build_layout,
    compose_layouts,
    materialize,
    solve_axis,
)
from .value_objects import (
    STANDARD_HEIGHTS,
    STANDARD_HOLE_SIZES,
    STANDARD_WIDTHS,
    Aperture,
    AxisSolution,
    GridInfo,
    GridPattern,
    GridSpecification,
    HoleSizeCatalog,
    LayoutOption,
    PanelInstance,
    PanelSizeCatalog,
    SpacingMode,
    WallSpecification,
)

__all__ = [
    "Aperture",
    "AxisSolution",
    "FacadeError",
    "GrayscaleField",
    "GridInfo",
    "GridPattern",
    "GridSpecification",
    "HoleGridGenerator",
    "HoleResult",
    "HoleSizeCatalog",
    "ImageLoadError",
    "LayoutOption",
    "LayoutResult",
    "PanelGrid",
    "PanelInstance",
    "PanelSizeCatalog",
    "STANDARD_HEIGHTS",
    "STANDARD_HOLE_SIZES",
    "STANDARD_WIDTHS",
    "SpacingMode",
    "WallSpecification",
    "arrange_axis",
    "as_field",
    "build_layout",
    "compose_layouts",
    "materialize",
    "sample",
    "solve_axis",
]
