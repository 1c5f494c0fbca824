"""Source image loading and grayscale preprocessing.

Turns a raster image into the normalized grayscale field the aperture
generator samples. Brightness, contrast and inversion are applied once here
so that per-point sampling stays a pure lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from facades.domain.exceptions import ImageLoadError
from facades.domain.grayscale import GrayscaleField

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma weights.
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float32)

# Keeps the contrast factor finite at contrast == 100.
CONTRAST_EPSILON = 0.001

# Single-channel integer modes holding 16-bit samples (e.g. 16-bit PNG).
HIGH_BIT_DEPTH_MODES = frozenset({"I", "I;16", "I;16B", "I;16L", "I;16N"})
HIGH_BIT_DEPTH_MAX = 65535.0


def load_image(path: Path) -> Image.Image:
    """Open an image file and fully decode it.

    The EXIF orientation tag is applied, so the returned image is upright
    the way viewers display it.

    Raises:
        ImageLoadError: If the file is missing or not a readable image.
    """
    if not path.is_file():
        raise ImageLoadError(f"Image not found: {path}", path=path)
    try:
        with Image.open(path) as img:
            img.load()
            return ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Cannot read image {path}: {e}", path=path) from e


def luma(image: Image.Image) -> GrayscaleField:
    """Relative luminance of ``image`` in ``[0, 1]``, shape ``(height, width)``.

    16-bit grayscale is rescaled from its full range and float images are
    read on the 0-255 scale; everything else is flattened to RGB first.
    """
    if image.mode in HIGH_BIT_DEPTH_MODES:
        return np.asarray(image, dtype=np.float32) / HIGH_BIT_DEPTH_MAX
    if image.mode == "F":
        return np.asarray(image, dtype=np.float32) / 255.0
    rgb = np.asarray(image.convert("RGB"), dtype=np.float32)
    return (rgb @ LUMA_WEIGHTS) / 255.0


def contrast_factor(contrast: float) -> float:
    """Slope applied around mid-gray for a contrast setting in [-100, 100]."""
    co = contrast / 100
    return (1 + co) / (1 - co + CONTRAST_EPSILON)


@dataclass(frozen=True)
class ImagePreprocessor:
    """Converts images into brightness fields.

    Attributes:
        brightness: Additive brightness shift in [-100, 100].
        contrast: Contrast adjustment in [-100, 100].
        invert: Whether to invert the result.
    """

    brightness: float = 0.0
    contrast: float = 0.0
    invert: bool = False

    def __post_init__(self) -> None:
        if not -100 <= self.brightness <= 100:
            raise ValueError("Brightness must be between -100 and 100")
        if not -100 <= self.contrast <= 100:
            raise ValueError("Contrast must be between -100 and 100")

    def process(self, image: Image.Image) -> GrayscaleField:
        """Compute the grayscale field of ``image`` at source resolution.

        Alpha is discarded; every pixel is treated as opaque.

        Returns:
            ``float32`` array of shape ``(height, width)`` in ``[0, 1]``.
        """
        cf = contrast_factor(self.contrast)
        values = (luma(image) + self.brightness / 100 - 0.5) * cf + 0.5
        values = np.clip(values, 0.0, 1.0)
        if self.invert:
            values = 1.0 - values

        logger.debug(
            "Processed %dx%d image (brightness=%s, contrast=%s, invert=%s)",
            image.width,
            image.height,
            self.brightness,
            self.contrast,
            self.invert,
        )
        return values.astype(np.float32)


def process_image(
    image: Image.Image,
    brightness: float = 0.0,
    contrast: float = 0.0,
    invert: bool = False,
) -> GrayscaleField:
    """Functional shortcut for :meth:`ImagePreprocessor.process`."""
    return ImagePreprocessor(brightness, contrast, invert).process(image)
