"""Configuration loading and adaptation for facade designs."""

from facades.application.config.adapter import (
    config_to_catalog,
    config_to_design_input,
    config_to_grid,
    config_to_hole_catalog,
    config_to_wall,
    resolve_image_path,
)
from facades.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from facades.application.config.schema import (
    SUPPORTED_VERSIONS,
    FacadeConfiguration,
    GridConfig,
    HolesConfig,
    ImageConfig,
    PanelsConfig,
    WallConfig,
)

__all__ = [
    "ConfigError",
    "FacadeConfiguration",
    "GridConfig",
    "HolesConfig",
    "ImageConfig",
    "PanelsConfig",
    "SUPPORTED_VERSIONS",
    "WallConfig",
    "config_to_catalog",
    "config_to_design_input",
    "config_to_grid",
    "config_to_hole_catalog",
    "config_to_wall",
    "load_config",
    "load_config_from_dict",
    "resolve_image_path",
]
