# colour_thief/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str
Bounds = Tuple[int, int, int, int, int, int]  # (r1, r2, g1, g2, b1, b2), inclusive

U8Image = NDArray[np.uint8]  # (H, W, 3) or (H, W, 4)
U8Rows = NDArray[np.uint8]  # (N, 3)
BoolRows = NDArray[np.bool_]  # (N,)

# Value objects


class Sample(NamedTuple):
    """One pixel handed to the histogram. Ignored samples are never counted."""

    r: int
    g: int
    b: int
    ignored: bool = False


@dataclass(frozen=True)
class HslColour:
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class QuantizedColour:
    """Palette entry: averaged colour of one cluster and its pixel count."""

    rgb: RGBTuple
    population: int
    is_dark: bool

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.rgb)

    def to_hsl(self) -> HslColour:
        from .colour_convert import rgb_to_hsl

        return rgb_to_hsl(self.rgb)

    def __str__(self) -> str:
        return self.hex


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3-length sequence or array to an (int, int, int) RGB tuple.
    Helpful when extracting values from NumPy rows.
    """
    if isinstance(value, np.ndarray):
        if value.size < 3:
            raise ValueError("array too small for RGB")
        flat = value.reshape(-1)
        return (int(flat[0]), int(flat[1]), int(flat[2]))
    if len(value) < 3:
        raise ValueError("sequence too small for RGB")
    return (int(value[0]), int(value[1]), int(value[2]))


def assert_u8_image(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,3 or 4) image and return it typed as U8Image."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] not in (3, 4):
        raise TypeError("expected uint8 (H,W,3/4) image")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "Bounds",
    "U8Image",
    "U8Rows",
    "BoolRows",
    # value objects
    "Sample",
    "HslColour",
    "QuantizedColour",
    # helpers
    "clamp_value",
    "rgb_to_hex",
    "coerce_to_rgb_tuple",
    "assert_u8_image",
]
