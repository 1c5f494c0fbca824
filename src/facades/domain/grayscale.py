"""Grayscale brightness field and bilinear aperture sampling.

A grayscale field is a ``float32`` numpy array of shape ``(height, width)``
holding brightness values in ``[0, 1]``. It is produced once per image by the
image preprocessor and then looked up continuously by normalized ``(u, v)``
coordinates while aperture lattices are being populated.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

GrayscaleField = NDArray[np.float32]

# Brightness reported when no image is loaded: fully lit, no aperture.
NO_FIELD_BRIGHTNESS = 1.0


def as_field(values: object) -> GrayscaleField:
    """Coerce array-like brightness values into a validated field.

    Raises:
        ValueError: If the values are not two-dimensional.
    """
    field = np.asarray(values, dtype=np.float32)
    if field.ndim != 2:
        raise ValueError(f"Grayscale field must be 2-D, got shape {field.shape}")
    return np.clip(field, 0.0, 1.0)


def sample(field: GrayscaleField | None, u: float, v: float) -> float:
    """Bilinearly sample ``field`` at normalized coordinates.

    ``u`` runs left to right and ``v`` top to bottom; both are clamped to
    ``[0, 1]`` before lookup. Returns 1.0 when there is no field.

    Args:
        field: Brightness field, or None when no image is loaded.
        u: Horizontal coordinate in ``[0, 1]``.
        v: Vertical coordinate in ``[0, 1]``.

    Returns:
        Interpolated brightness in ``[0, 1]``.
    """
    if field is None or field.size == 0:
        return NO_FIELD_BRIGHTNESS

    h, w = field.shape
    fx = min(1.0, max(0.0, u)) * (w - 1)
    fy = min(1.0, max(0.0, v)) * (h - 1)
    x0, y0 = int(math.floor(fx)), int(math.floor(fy))
    x1, y1 = min(x0 + 1, w - 1), min(y0 + 1, h - 1)
    dx, dy = fx - x0, fy - y0

    return float(
        field[y0, x0] * (1 - dx) * (1 - dy)
        + field[y0, x1] * dx * (1 - dy)
        + field[y1, x0] * (1 - dx) * dy
        + field[y1, x1] * dx * dy
    )
