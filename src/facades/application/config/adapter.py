"""Adapters from configuration models to domain objects and DTOs."""

from __future__ import annotations

from pathlib import Path

from facades.application.config.schema import FacadeConfiguration
from facades.application.dtos import DesignInput, HoleSettings, ImageAdjustments
from facades.domain import (
    GridSpecification,
    HoleSizeCatalog,
    PanelSizeCatalog,
    WallSpecification,
)


def config_to_wall(config: FacadeConfiguration) -> WallSpecification:
    """Convert the wall section to a WallSpecification."""
    wall = config.wall
    return WallSpecification(width=wall.width, height=wall.height, gap=wall.gap)


def config_to_catalog(config: FacadeConfiguration) -> PanelSizeCatalog:
    """Convert the panels section to a PanelSizeCatalog."""
    return PanelSizeCatalog(
        widths=tuple(config.panels.widths),
        heights=tuple(config.panels.heights),
    )


def config_to_grid(config: FacadeConfiguration) -> GridSpecification:
    """Convert the grid section to a GridSpecification."""
    grid = config.grid
    return GridSpecification(
        mode=grid.mode,
        spacing_x=grid.spacing_x,
        spacing_y=grid.spacing_y if grid.spacing_y is not None else grid.spacing_x,
        cols=grid.cols,
        rows=grid.rows,
        min_spacing=grid.min_spacing,
        pattern=grid.pattern,
        margin=grid.margin,
    )


def config_to_hole_catalog(config: FacadeConfiguration) -> HoleSizeCatalog:
    """Convert the enabled hole sizes to a HoleSizeCatalog."""
    return HoleSizeCatalog(diameters=tuple(config.holes.sizes))


def resolve_image_path(
    config: FacadeConfiguration, config_path: Path | None = None
) -> Path | None:
    """Resolve ``image.path`` relative to the configuration file's directory."""
    if config.image.path is None:
        return None
    image_path = Path(config.image.path)
    if not image_path.is_absolute() and config_path is not None:
        image_path = config_path.parent / image_path
    return image_path


def config_to_design_input(config: FacadeConfiguration) -> DesignInput:
    """Build a DesignInput (without the decoded image) from configuration."""
    return DesignInput(
        wall=config_to_wall(config),
        catalog=config_to_catalog(config),
        grid=config_to_grid(config),
        holes=HoleSettings(
            sizes=list(config.holes.sizes),
            threshold=config.holes.threshold,
            gamma=config.holes.gamma,
        ),
        adjustments=ImageAdjustments(
            brightness=config.image.brightness,
            contrast=config.image.contrast,
            invert=config.image.invert,
        ),
        selected_layout=config.panels.selected_layout,
    )
