"""Value objects for the facade domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Catalog defaults, in inches.
STANDARD_WIDTHS: tuple[float, ...] = (24, 36, 48)
STANDARD_HEIGHTS: tuple[float, ...] = (48, 60, 72, 96, 120, 144)
STANDARD_HOLE_SIZES: tuple[float, ...] = (1.5, 1.25, 1.0, 0.75, 0.625, 0.5, 0.25)


def format_length(value: float) -> str:
    """Format a length without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class SpacingMode(str, Enum):
    """How the aperture lattice density is chosen.

    Attributes:
        SPACING: Explicit pitch between apertures in each direction.
        COUNT: Explicit column/row counts for the reference panel, scaled
            to every other panel by interior size.
    """

    SPACING = "spacing"
    COUNT = "count"


class GridPattern(str, Enum):
    """Aperture lattice topology.

    Attributes:
        RECTANGULAR: Uniform lattice over the interior rectangle.
        STAGGERED: Odd rows shifted by half a column pitch (hex-like).
    """

    RECTANGULAR = "rect"
    STAGGERED = "hex"


@dataclass(frozen=True)
class WallSpecification:
    """Wall to be clad with panels.

    Non-positive dimensions are accepted; the solvers return empty results
    for them rather than failing.

    Attributes:
        width: Wall width in inches.
        height: Wall height in inches.
        gap: Gap between neighbouring panels in inches.
    """

    width: float
    height: float
    gap: float = 0.25

    def __post_init__(self) -> None:
        if self.gap < 0:
            raise ValueError("Panel gap must be non-negative")


@dataclass(frozen=True)
class PanelSizeCatalog:
    """Manufacturable panel lengths for each axis.

    Attributes:
        widths: Allowed panel widths in inches.
        heights: Allowed panel heights in inches.
    """

    widths: tuple[float, ...] = (24, 48)
    heights: tuple[float, ...] = (96, 120, 144)

    def __post_init__(self) -> None:
        if any(w <= 0 for w in self.widths):
            raise ValueError("Panel widths must be positive")
        if any(h <= 0 for h in self.heights):
            raise ValueError("Panel heights must be positive")
        object.__setattr__(self, "widths", tuple(self.widths))
        object.__setattr__(self, "heights", tuple(self.heights))


@dataclass(frozen=True)
class HoleSizeCatalog:
    """Enabled aperture diameters, stored ascending and deduplicated.

    Attributes:
        diameters: Diameters in inches.
    """

    diameters: tuple[float, ...] = STANDARD_HOLE_SIZES

    def __post_init__(self) -> None:
        if any(d <= 0 for d in self.diameters):
            raise ValueError("Hole diameters must be positive")
        object.__setattr__(self, "diameters", tuple(sorted(set(self.diameters))))

    @property
    def is_empty(self) -> bool:
        return not self.diameters

    @property
    def min_diameter(self) -> float:
        return self.diameters[0]

    @property
    def max_diameter(self) -> float:
        return self.diameters[-1]


@dataclass(frozen=True)
class GridSpecification:
    """Aperture lattice configuration shared by every panel.

    Attributes:
        mode: Whether spacing or counts drive the lattice density.
        spacing_x: Horizontal pitch in inches (SPACING mode).
        spacing_y: Vertical pitch in inches (SPACING mode).
        cols: Column count on the reference panel (COUNT mode).
        rows: Row count on the reference panel (COUNT mode).
        min_spacing: Structural minimum pitch in inches.
        pattern: Lattice topology.
        margin: Unperforated border kept around each panel edge, in inches.
    """

    mode: SpacingMode = SpacingMode.SPACING
    spacing_x: float = 2.0
    spacing_y: float = 2.0
    cols: int = 46
    rows: int = 118
    min_spacing: float = 2.0
    pattern: GridPattern = GridPattern.RECTANGULAR
    margin: float = 1.0

    def __post_init__(self) -> None:
        if self.spacing_x <= 0 or self.spacing_y <= 0:
            raise ValueError("Grid spacing must be positive")
        if self.min_spacing <= 0:
            raise ValueError("Minimum spacing must be positive")
        if self.cols < 1 or self.rows < 1:
            raise ValueError("Grid counts must be at least 1")
        if self.margin < 0:
            raise ValueError("Margin must be non-negative")

    @property
    def effective_spacing(self) -> tuple[float, float]:
        """Pitch actually used in SPACING mode, clamped to the minimum."""
        return (
            max(self.min_spacing, self.spacing_x),
            max(self.min_spacing, self.spacing_y),
        )


@dataclass(frozen=True)
class AxisSolution:
    """One way to cover a single wall dimension.

    Attributes:
        counts: ``(length, count)`` pairs sorted ascending by length.
        total: Covered length including internal gaps.
        coverage: ``total / extent``.
        num_panels: Number of panels along the axis.
    """

    counts: tuple[tuple[float, int], ...]
    total: float
    coverage: float
    num_panels: int

    @property
    def distinct_sizes(self) -> int:
        return len(self.counts)

    @property
    def signature(self) -> str:
        """Canonical key used for deduplication, e.g. ``24:2,48:4``."""
        return ",".join(f"{format_length(size)}:{n}" for size, n in self.counts)

    @property
    def description(self) -> str:
        """Human description such as ``24" + 4x48"``."""
        parts = []
        for size, n in self.counts:
            label = f'{format_length(size)}"'
            parts.append(label if n == 1 else f"{n}x{label}")
        return " + ".join(parts)

    def as_dict(self) -> dict[float, int]:
        return dict(self.counts)


@dataclass(frozen=True)
class LayoutOption:
    """A width solution paired with a height solution.

    Attributes:
        width: Solution along the wall width.
        height: Solution along the wall height.
        total_coverage: Mean of the two axis coverages.
        total_panels: Product of the two panel counts.
        description: Human readable summary of both axes.
    """

    width: AxisSolution
    height: AxisSolution
    total_coverage: float
    total_panels: int
    description: str


@dataclass(frozen=True)
class Aperture:
    """A single hole, positioned relative to its panel's top-left corner."""

    x: float
    y: float
    diameter: float


@dataclass(frozen=True)
class PanelInstance:
    """A physical panel placed on the wall.

    Attributes:
        x: Left edge from the wall's left edge, in inches.
        y: Top edge from the wall's top edge, in inches.
        width: Panel width in inches.
        height: Panel height in inches.
        col: Zero-based column index.
        row: Zero-based row index.
        label: Grid label such as ``B2``.
        size_label: Size label such as ``48"x120"``.
        apertures: Holes cut in this panel.
    """

    x: float
    y: float
    width: float
    height: float
    col: int
    row: int
    label: str
    size_label: str
    apertures: tuple[Aperture, ...] = field(default=())

    @property
    def area(self) -> float:
        return self.width * self.height

    def interior(self, margin: float) -> tuple[float, float]:
        """Width and height left after insetting by ``margin`` on all sides."""
        return self.width - 2 * margin, self.height - 2 * margin

    def with_apertures(self, apertures: tuple[Aperture, ...]) -> PanelInstance:
        """Return a copy whose aperture list is replaced wholesale."""
        return PanelInstance(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            col=self.col,
            row=self.row,
            label=self.label,
            size_label=self.size_label,
            apertures=tuple(apertures),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "size": self.size_label,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "col": self.col,
            "row": self.row,
            "apertures": [
                {"x": a.x, "y": a.y, "d": a.diameter} for a in self.apertures
            ],
        }


@dataclass(frozen=True)
class GridInfo:
    """Lattice density chosen for the last processed panel."""

    cols: int = 0
    rows: int = 0
