"""
colour_thief package.

Purpose:
  Extract a small representative colour palette from an image with a modified
  median cut (MMCQ). See colour_thief/cli.py for the command line.

Public API:
  get_palette        : list of QuantizedColour (rgb, population, is_dark).
  get_palette_iter   : lazy form of get_palette.
  get_colour         : single base colour of an image.
  MedianCutQuantizer : the engine, for callers that bring their own samples.
  Histogram          : reduced-RGB count table.
  ColourBox          : region of the reduced cube; population, average, split.
  ColourMap          : final boxes and the palette built from them.
  LumaStrategy       : YIQ (legacy) or linear BT.601 / BT.709 dark flag.

Quick start:
  from colour_thief import get_palette
  for colour in get_palette("photo.jpg", colour_count=6):
      print(colour.hex, colour.population, colour.is_dark)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import colour_convert
from . import luma
from . import utils

from .api import get_colour, get_colour_map, get_palette, get_palette_iter
from .colour_box import ColourBox
from .colour_map import ColourMap
from .core_types import HslColour, QuantizedColour, Sample
from .histogram import Histogram
from .luma import LumaStrategy
from .pixels import iter_samples, sample_pixels
from .quantizer import MedianCutQuantizer, quantize

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "colour_convert",
    "luma",
    "utils",
    "get_palette",
    "get_palette_iter",
    "get_colour",
    "get_colour_map",
    "ColourBox",
    "ColourMap",
    "Histogram",
    "HslColour",
    "QuantizedColour",
    "Sample",
    "LumaStrategy",
    "MedianCutQuantizer",
    "quantize",
    "iter_samples",
    "sample_pixels",
]
