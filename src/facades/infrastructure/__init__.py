"""Infrastructure layer - image I/O, formatters and exporters."""

from .formatters import LayoutOptionsFormatter, PanelScheduleFormatter
from .imaging import (
    ImagePreprocessor,
    contrast_factor,
    load_image,
    luma,
    process_image,
)

__all__ = [
    "ImagePreprocessor",
    "LayoutOptionsFormatter",
    "PanelScheduleFormatter",
    "contrast_factor",
    "load_image",
    "luma",
    "process_image",
]
