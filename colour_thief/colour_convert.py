# colour_thief/colour_convert.py
from __future__ import annotations

"""
Colour conversions.

Exports:
  rgb_to_linear(srgb)
  rgb_u8_to_linear(rgb)
  rgb_to_hsl(rgb)
"""

from typing import Sequence

import numpy as np

from .core_types import HslColour, clamp_value


# sRGB to linear


def rgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    Convert sRGB (non-linear 0..1) to linear RGB (0..1). Vectorised.
    Args:
      srgb: array[...] in 0..1 (float)
    Returns:
      float64 array with the same shape
    """
    srgb_f = np.asarray(srgb, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        linear = np.where(
            srgb_f <= 0.04045, srgb_f / 12.92, ((srgb_f + 0.055) / 1.055) ** 2.4
        )
    return linear.astype(np.float64, copy=False)


def rgb_u8_to_linear(rgb: Sequence[int] | np.ndarray) -> np.ndarray:
    """uint8-range RGB (0..255) to linear RGB (0..1)."""
    return rgb_to_linear(np.asarray(rgb, dtype=np.float64) / 255.0)


# sRGB to HSL


def rgb_to_hsl(rgb: Sequence[int]) -> HslColour:
    """
    8-bit RGB to HSL.
    Hue in degrees [0, 360); saturation and lightness in [0, 1].
    """
    r, g, b = (int(c) / 255.0 for c in rgb[:3])
    hi = max(r, g, b)
    lo = min(r, g, b)
    chroma = hi - lo

    if chroma == 0.0:
        hue = 0.0
    elif hi == r:
        hue = ((g - b) / chroma) % 6.0
    elif hi == g:
        hue = 2.0 + (b - r) / chroma
    else:
        hue = 4.0 + (r - g) / chroma

    lightness = 0.5 * (hi + lo)
    if chroma == 0.0:
        saturation = 0.0
    else:
        saturation = chroma / (1.0 - abs(2.0 * lightness - 1.0))

    return HslColour(
        h=(60.0 * hue) % 360.0,
        s=clamp_value(saturation, 0.0, 1.0),
        l=clamp_value(lightness, 0.0, 1.0),
    )


__all__ = [
    "rgb_to_linear",
    "rgb_u8_to_linear",
    "rgb_to_hsl",
]
