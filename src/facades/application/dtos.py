"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from facades.domain import (
    STANDARD_HOLE_SIZES,
    GridInfo,
    GridSpecification,
    HoleSizeCatalog,
    LayoutOption,
    LayoutResult,
    PanelInstance,
    PanelSizeCatalog,
    WallSpecification,
)
from facades.domain.grayscale import GrayscaleField

if TYPE_CHECKING:
    from PIL import Image


@dataclass
class ImageAdjustments:
    """Input DTO for tone adjustments applied to the source image."""

    brightness: float = 0.0
    contrast: float = 0.0
    invert: bool = False

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not -100 <= self.brightness <= 100:
            errors.append("Brightness must be between -100 and 100")
        if not -100 <= self.contrast <= 100:
            errors.append("Contrast must be between -100 and 100")
        return errors


@dataclass
class HoleSettings:
    """Input DTO for hole sizing."""

    sizes: list[float] = field(default_factory=lambda: list(STANDARD_HOLE_SIZES))
    threshold: float = 245
    gamma: float = 1.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if any(s <= 0 for s in self.sizes):
            errors.append("Hole sizes must be positive")
        if not 0 <= self.threshold <= 255:
            errors.append("Threshold must be between 0 and 255")
        if self.gamma <= 0:
            errors.append("Gamma must be positive")
        return errors

    def to_catalog(self) -> HoleSizeCatalog:
        """Convert to HoleSizeCatalog value object."""
        return HoleSizeCatalog(diameters=tuple(self.sizes))


@dataclass
class DesignInput:
    """Everything needed to design one facade.

    Attributes:
        wall: Wall dimensions and panel gap.
        catalog: Enabled panel widths and heights.
        grid: Aperture lattice configuration.
        holes: Hole catalog, threshold and gamma.
        adjustments: Image tone adjustments.
        selected_layout: Requested index into the ranked layout options.
        image: Source image, or None to design panels without apertures.
    """

    wall: WallSpecification
    catalog: PanelSizeCatalog = field(default_factory=PanelSizeCatalog)
    grid: GridSpecification = field(default_factory=GridSpecification)
    holes: HoleSettings = field(default_factory=HoleSettings)
    adjustments: ImageAdjustments = field(default_factory=ImageAdjustments)
    selected_layout: int = 0
    image: Image.Image | None = None

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors = self.holes.validate() + self.adjustments.validate()
        if self.selected_layout < 0:
            errors.append("Selected layout index cannot be negative")
        return errors


@dataclass
class DesignOutput:
    """Output DTO containing the designed facade.

    Attributes:
        layout: Ranked layout options and the materialized grid.
        panels: Panels with their apertures.
        grid_info: Lattice density of the last perforated panel.
        grayscale: Grayscale field the apertures were sampled from.
        errors: Input validation errors, if generation was refused.
    """

    layout: LayoutResult = field(default_factory=LayoutResult)
    panels: tuple[PanelInstance, ...] = ()
    grid_info: GridInfo = field(default_factory=GridInfo)
    grayscale: GrayscaleField | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def layout_options(self) -> tuple[LayoutOption, ...]:
        return self.layout.options

    @property
    def selected_index(self) -> int:
        return self.layout.selected_index

    @property
    def col_widths(self) -> tuple[float, ...]:
        return self.layout.grid.col_widths

    @property
    def row_heights(self) -> tuple[float, ...]:
        return self.layout.grid.row_heights

    @property
    def has_image(self) -> bool:
        return self.grayscale is not None

    @property
    def total_apertures(self) -> int:
        return sum(len(p.apertures) for p in self.panels)
