# colour_thief/pixels.py
from __future__ import annotations

"""
Pixel extraction: turn uint8 RGB/RGBA arrays into histogram input.

Exports:
  normalise_quality(quality) -> int
  sample_grid(height, width, quality) -> Iterator[(y, xs)]
  iter_samples(image, quality=10, ignore_white=True) -> Iterator[Sample]
  sample_pixels(image, quality=10, ignore_white=True) -> (rgb (N,3), keep (N,))

Notes:
  - Every `quality`-th row is visited. Within a row every `quality`-th pixel is
    taken, and the overshoot past the row end carries into the next visited row
    as its starting column (kept below the row width).
  - A pixel is ignored when alpha < ALPHA_MIN, or with ignore_white when all
    three channels exceed WHITE_MIN.
"""

from typing import Iterator, List, Tuple

import numpy as np

from .constants import ALPHA_MIN, DEFAULT_IGNORE_WHITE, DEFAULT_QUALITY, WHITE_MIN
from .core_types import BoolRows, Sample, U8Image, U8Rows, assert_u8_image


def normalise_quality(quality: int) -> int:
    q = int(quality)
    return DEFAULT_QUALITY if q < 1 else q


def sample_grid(
    height: int, width: int, quality: int
) -> Iterator[Tuple[int, np.ndarray]]:
    """Yield (row, column indices) of the pixels visited at this quality."""
    step_x = 0
    for y in range(0, height, quality):
        xs = np.arange(step_x, width, quality, dtype=np.intp)
        if xs.size:
            last = int(xs[-1])
            if width - last < quality:
                step_x = (quality - (width - last)) % width
        yield y, xs


def _ignored_mask(rows: np.ndarray, ignore_white: bool) -> BoolRows:
    """rows: (N, 3|4) uint8 -> True where the pixel must not be counted."""
    if rows.shape[-1] == 4:
        ignored = rows[:, 3] < ALPHA_MIN
    else:
        ignored = np.zeros(rows.shape[0], dtype=bool)
    if ignore_white:
        ignored = ignored | np.all(rows[:, :3] > WHITE_MIN, axis=1)
    return ignored


def iter_samples(
    image: U8Image,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
) -> Iterator[Sample]:
    """Lazily yield one Sample per visited pixel, in row-major order."""
    img = assert_u8_image(np.asarray(image))
    q = normalise_quality(quality)
    height, width = img.shape[0], img.shape[1]
    has_alpha = img.shape[-1] == 4
    for y, xs in sample_grid(height, width, q):
        for x in xs.tolist():
            px = img[y, x]
            r, g, b = int(px[0]), int(px[1]), int(px[2])
            alpha = int(px[3]) if has_alpha else 255
            ignored = alpha < ALPHA_MIN or (
                ignore_white and r > WHITE_MIN and g > WHITE_MIN and b > WHITE_MIN
            )
            yield Sample(r, g, b, ignored)


def sample_pixels(
    image: U8Image,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
) -> Tuple[U8Rows, BoolRows]:
    """Vectorised form of iter_samples: (rgb rows, keep mask) in the same order."""
    img = assert_u8_image(np.asarray(image))
    q = normalise_quality(quality)
    height, width = img.shape[0], img.shape[1]

    ys_parts: List[np.ndarray] = []
    xs_parts: List[np.ndarray] = []
    for y, xs in sample_grid(height, width, q):
        if xs.size:
            ys_parts.append(np.full(xs.shape[0], y, dtype=np.intp))
            xs_parts.append(xs)

    if not xs_parts:
        return np.zeros((0, 3), dtype=np.uint8), np.zeros((0,), dtype=bool)

    rows = img[np.concatenate(ys_parts), np.concatenate(xs_parts)]
    keep = ~_ignored_mask(rows, ignore_white)
    rgb = np.ascontiguousarray(rows[:, :3], dtype=np.uint8)
    return rgb, keep


__all__ = [
    "normalise_quality",
    "sample_grid",
    "iter_samples",
    "sample_pixels",
]
