# colour_thief/api.py
from __future__ import annotations

"""
Public entry points.

Provides:
  get_palette(image, colour_count=5, quality=10, ignore_white=True, *, luma, debug)
    -> List[QuantizedColour]
  get_palette_iter(...) -> Iterator[QuantizedColour]
  get_colour(image, quality=10, ignore_white=True, *, luma, debug)
    -> Optional[QuantizedColour]
  get_colour_map(...) -> ColourMap

  image : uint8 array [H,W,3|4], PIL.Image.Image, or a path Pillow can open.

Notes:
  - colour_count <= 0 becomes 1; quality < 1 becomes DEFAULT_QUALITY.
  - colour_count counts every returned colour; there is no implicit base colour.
  - Palette order is box creation order; sort by population if needed.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Union

import numpy as np
from PIL import Image

from .colour_map import ColourMap
from .constants import (
    DEFAULT_COLOUR_COUNT,
    DEFAULT_IGNORE_WHITE,
    DEFAULT_QUALITY,
    DOMINANT_COLOUR_COUNT,
)
from .core_types import QuantizedColour, U8Image, assert_u8_image
from .histogram import Histogram
from .image_io import image_to_rgba, load_image_rgba
from .luma import LumaStrategy
from .pixels import normalise_quality, sample_pixels
from .quantizer import MedianCutQuantizer

ImageSource = Union[U8Image, Image.Image, Path, str]


def as_pixel_array(image: ImageSource) -> U8Image:
    """Coerce any accepted image source to a uint8 (H,W,3|4) array."""
    if isinstance(image, Image.Image):
        return image_to_rgba(image)
    if isinstance(image, (str, Path)):
        return load_image_rgba(Path(image))
    arr = np.asarray(image)
    if arr.ndim == 2 and arr.dtype == np.uint8:
        arr = np.repeat(arr[..., None], 3, axis=2)
    return assert_u8_image(arr)


def get_colour_map(
    image: ImageSource,
    colour_count: int = DEFAULT_COLOUR_COUNT,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
    *,
    luma: LumaStrategy = LumaStrategy.YIQ,
    debug: bool = False,
) -> ColourMap:
    count = 1 if int(colour_count) <= 0 else int(colour_count)
    pixels = as_pixel_array(image)
    rgb, keep = sample_pixels(pixels, normalise_quality(quality), ignore_white)
    histogram = Histogram.from_pixels(rgb, keep)
    quantizer = MedianCutQuantizer(luma=luma, debug=debug)
    return quantizer.quantize_histogram(histogram, count)


def get_palette(
    image: ImageSource,
    colour_count: int = DEFAULT_COLOUR_COUNT,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
    *,
    luma: LumaStrategy = LumaStrategy.YIQ,
    debug: bool = False,
) -> List[QuantizedColour]:
    """Cluster the image into at most `colour_count` colours."""
    cmap = get_colour_map(
        image, colour_count, quality, ignore_white, luma=luma, debug=debug
    )
    return cmap.generate_palette_list()


def get_palette_iter(
    image: ImageSource,
    colour_count: int = DEFAULT_COLOUR_COUNT,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
    *,
    luma: LumaStrategy = LumaStrategy.YIQ,
    debug: bool = False,
) -> Iterator[QuantizedColour]:
    """Lazy form of get_palette; entries are built as they are consumed."""
    cmap = get_colour_map(
        image, colour_count, quality, ignore_white, luma=luma, debug=debug
    )
    return cmap.generate_palette()


def get_colour(
    image: ImageSource,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
    *,
    luma: LumaStrategy = LumaStrategy.YIQ,
    debug: bool = False,
) -> Optional[QuantizedColour]:
    """
    Base colour of the image: quantise to DOMINANT_COLOUR_COUNT boxes, then take
    the plain mean of the palette colours and of their populations.
    Returns None when no pixel was retained.
    """
    palette = get_palette(
        image, DOMINANT_COLOUR_COUNT, quality, ignore_white, luma=luma, debug=debug
    )
    if not palette:
        return None
    channels = np.array([entry.rgb for entry in palette], dtype=np.float64)
    mean = channels.mean(axis=0)
    rgb = (int(mean[0]), int(mean[1]), int(mean[2]))
    population = int(np.mean([entry.population for entry in palette]))
    return QuantizedColour(rgb=rgb, population=population, is_dark=luma.is_dark(rgb))


__all__ = [
    "ImageSource",
    "as_pixel_array",
    "get_colour_map",
    "get_palette",
    "get_palette_iter",
    "get_colour",
]
