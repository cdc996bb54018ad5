# dominant_colour/__init__.py
"""
dominant_colour package.

Purpose:
  Pick representative opaque, non-background pixels from an image and
  cluster them into a small palette or a single dominant colour.
  See extract_colours.py for the CLI.

Public API:
  get_palette   : image -> List[QuantizedColor], largest population first.
  get_color     : image -> Optional[QuantizedColor], averaged 3-colour palette.
  sample_candidate_pixels : image -> uint8 [M,3] candidate RGB rows.
  pixel         : sampler, filter and collector building blocks.
  quantize      : Quantizer protocol and Pillow median-cut backend.
  image_io      : decoding to PixelBuffer, swatch output.
  core_types    : PixelBuffer, QuantizedColor, InvalidBufferLength, aliases.
  constants     : defaults and thresholds.
  utils         : logging and formatting helpers.

Quick start:
  from dominant_colour import get_palette, get_color
  palette = get_palette("photo.jpg", color_count=5, quality=1)
"""

__version__ = "0.1.0"

from . import constants
from . import core_types
from . import image_io
from . import pixel
from . import quantize
from . import utils

from .core_types import InvalidBufferLength, PixelBuffer, QuantizedColor
from .palette import average_palette, get_color, get_palette
from .pipeline import sample_candidate_pixels
from .quantize import MedianCutQuantizer, Quantizer

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "image_io",
    "pixel",
    "quantize",
    "utils",
    "InvalidBufferLength",
    "PixelBuffer",
    "QuantizedColor",
    "average_palette",
    "get_color",
    "get_palette",
    "sample_candidate_pixels",
    "MedianCutQuantizer",
    "Quantizer",
]
