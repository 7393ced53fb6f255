# colour_thief/luma.py
from __future__ import annotations

"""
Luma strategies used to flag palette colours as dark or light.

Exports:
  LumaStrategy            : YIQ (legacy, 0..255), LINEAR_BT601 / LINEAR_BT709 (0..1000)
  yiq_luma(rgb)           -> int
  linear_luma(rgb, coeffs)-> float
  luma(rgb, strategy)     -> float
  is_dark(rgb, strategy)  -> bool
  parse_luma_strategy(name)
"""

from enum import Enum
from typing import Sequence, Tuple

import numpy as np

from .colour_convert import rgb_u8_to_linear
from .constants import LINEAR_DARK_THRESHOLD, LINEAR_LUMA_SCALE, YIQ_DARK_THRESHOLD

Coefficients = Tuple[float, float, float]

BT601: Coefficients = (0.299, 0.587, 0.114)
BT709: Coefficients = (0.2126, 0.7152, 0.0722)


def yiq_luma(rgb: Sequence[int]) -> int:
    """YIQ luma on gamma-encoded channels, 0..255. Half-way values round to even."""
    r, g, b = int(rgb[0]), int(rgb[1]), int(rgb[2])
    return int(round((299 * r + 587 * g + 114 * b) / 1000.0))


def linear_luma(rgb: Sequence[int], coeffs: Coefficients) -> float:
    """Relative luminance of linearised sRGB, scaled to 0..1000."""
    lin = rgb_u8_to_linear(np.asarray(rgb[:3], dtype=np.float64))
    y = float(np.dot(lin, np.asarray(coeffs, dtype=np.float64)))
    return y * LINEAR_LUMA_SCALE


class LumaStrategy(Enum):
    YIQ = "yiq"
    LINEAR_BT601 = "bt601"
    LINEAR_BT709 = "bt709"

    @property
    def threshold(self) -> int:
        """Values strictly below this are dark."""
        if self is LumaStrategy.YIQ:
            return YIQ_DARK_THRESHOLD
        return LINEAR_DARK_THRESHOLD

    def luma(self, rgb: Sequence[int]) -> float:
        if self is LumaStrategy.YIQ:
            return float(yiq_luma(rgb))
        if self is LumaStrategy.LINEAR_BT601:
            return linear_luma(rgb, BT601)
        return linear_luma(rgb, BT709)

    def is_dark(self, rgb: Sequence[int]) -> bool:
        return self.luma(rgb) < self.threshold


def luma(rgb: Sequence[int], strategy: LumaStrategy = LumaStrategy.YIQ) -> float:
    return strategy.luma(rgb)


def is_dark(rgb: Sequence[int], strategy: LumaStrategy = LumaStrategy.YIQ) -> bool:
    return strategy.is_dark(rgb)


def parse_luma_strategy(name: str | LumaStrategy) -> LumaStrategy:
    """Accept an enum member or its value ('yiq', 'bt601', 'bt709')."""
    if isinstance(name, LumaStrategy):
        return name
    key = str(name).strip().lower()
    for member in LumaStrategy:
        if member.value == key or member.name.lower() == key:
            return member
    raise ValueError(f"unknown luma strategy: {name!r}")


__all__ = [
    "Coefficients",
    "BT601",
    "BT709",
    "LumaStrategy",
    "yiq_luma",
    "linear_luma",
    "luma",
    "is_dark",
    "parse_luma_strategy",
]
