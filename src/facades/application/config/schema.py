"""Pydantic models for facade configuration files.

A configuration file describes the wall, the enabled panel and hole
catalogs, the aperture lattice and the source image adjustments. Every
section except ``schema_version`` is optional and falls back to the same
defaults the interactive designer starts with.

Example:
    >>> config = FacadeConfiguration.model_validate(
    ...     {"schema_version": "1.0", "wall": {"width": 240, "height": 120}}
    ... )
    >>> config.grid.spacing_y
    2.0
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from facades.domain.value_objects import (
    STANDARD_HOLE_SIZES,
    GridPattern,
    SpacingMode,
)

# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class WallConfig(BaseModel):
    """Wall dimensions in inches.

    Attributes:
        width: Wall width.
        height: Wall height.
        gap: Gap between neighbouring panels.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=240.0, gt=0)
    height: float = Field(default=120.0, gt=0)
    gap: float = Field(default=0.25, ge=0)


class PanelsConfig(BaseModel):
    """Enabled panel sizes and the layout option to build.

    Attributes:
        widths: Enabled panel widths in inches.
        heights: Enabled panel heights in inches.
        selected_layout: Index into the ranked layout options (clamped).
    """

    model_config = ConfigDict(extra="forbid")

    widths: list[float] = Field(default_factory=lambda: [24.0, 48.0])
    heights: list[float] = Field(default_factory=lambda: [96.0, 120.0, 144.0])
    selected_layout: int = Field(default=0, ge=0)

    @field_validator("widths", "heights")
    @classmethod
    def validate_sizes(cls, v: list[float]) -> list[float]:
        """Validate that every panel size is positive."""
        if any(size <= 0 for size in v):
            raise ValueError("panel sizes must be positive")
        return v


class GridConfig(BaseModel):
    """Aperture lattice settings.

    When ``lock_ratio`` is on and ``spacing_y`` is omitted, the vertical
    pitch follows ``spacing_x``.

    Attributes:
        mode: "spacing" for explicit pitch, "count" for explicit counts.
        spacing_x: Horizontal pitch in inches.
        spacing_y: Vertical pitch in inches.
        lock_ratio: Keep horizontal and vertical pitch equal.
        min_spacing: Structural minimum pitch in inches.
        cols: Columns on the reference panel in count mode.
        rows: Rows on the reference panel in count mode.
        pattern: "rect" or "hex" (staggered).
        margin: Unperforated border around each panel, in inches.
    """

    model_config = ConfigDict(extra="forbid")

    mode: SpacingMode = SpacingMode.SPACING
    spacing_x: float = Field(default=2.0, gt=0)
    spacing_y: float | None = Field(default=None, gt=0)
    lock_ratio: bool = True
    min_spacing: float = Field(default=2.0, gt=0)
    cols: int = Field(default=46, ge=1)
    rows: int = Field(default=118, ge=1)
    pattern: GridPattern = GridPattern.RECTANGULAR
    margin: float = Field(default=1.0, ge=0)

    @model_validator(mode="after")
    def resolve_locked_spacing(self) -> "GridConfig":
        """Fill in or check spacing_y against the ratio lock."""
        if self.spacing_y is None:
            self.spacing_y = self.spacing_x if self.lock_ratio else 2.0
        elif self.lock_ratio and self.spacing_y != self.spacing_x:
            raise ValueError(
                f"spacing_y ({self.spacing_y}) must equal spacing_x "
                f"({self.spacing_x}) when lock_ratio is enabled"
            )
        return self


class HolesConfig(BaseModel):
    """Hole catalog and tone mapping.

    Attributes:
        sizes: Enabled hole diameters in inches.
        threshold: Brightness gate on a 0-255 scale.
        gamma: Exponent applied to normalized darkness.
    """

    model_config = ConfigDict(extra="forbid")

    sizes: list[float] = Field(default_factory=lambda: list(STANDARD_HOLE_SIZES))
    threshold: float = Field(default=245, ge=0, le=255)
    gamma: float = Field(default=1.0, gt=0)

    @field_validator("sizes")
    @classmethod
    def validate_sizes(cls, v: list[float]) -> list[float]:
        """Validate that every hole diameter is positive."""
        if any(size <= 0 for size in v):
            raise ValueError("hole sizes must be positive")
        return v


class ImageConfig(BaseModel):
    """Source image and tone adjustments.

    Attributes:
        path: Image file, relative to the configuration file.
        brightness: Brightness shift in [-100, 100].
        contrast: Contrast adjustment in [-100, 100].
        invert: Invert the grayscale field.
    """

    model_config = ConfigDict(extra="forbid")

    path: str | None = None
    brightness: float = Field(default=0.0, ge=-100, le=100)
    contrast: float = Field(default=0.0, ge=-100, le=100)
    invert: bool = False


class FacadeConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor".
        wall: Wall dimensions.
        panels: Panel catalog and layout selection.
        grid: Aperture lattice settings.
        holes: Hole catalog and tone mapping.
        image: Source image and adjustments.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    wall: WallConfig = Field(default_factory=WallConfig)
    panels: PanelsConfig = Field(default_factory=PanelsConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    holes: HolesConfig = Field(default_factory=HolesConfig)
    image: ImageConfig = Field(default_factory=ImageConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
