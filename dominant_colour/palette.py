# dominant_colour/palette.py
from __future__ import annotations

"""
Public entry points: palette and dominant colour of an image.

  get_palette(image, color_count=3, quality=10, ignore_white=False) -> List[QuantizedColor]
  get_color(image, quality=10, ignore_white=False) -> Optional[QuantizedColor]

An empty palette is a normal outcome (e.g. a fully transparent image, or an
all-white one with ignore_white). get_palette() returns [] and get_color()
returns None in that case.
"""

from typing import List, Optional, Sequence

from .constants import DEFAULT_COLOR_COUNT, DEFAULT_IGNORE_WHITE, DEFAULT_QUALITY
from .core_types import QuantizedColor
from .image_io import ImageHandle
from .pipeline import sample_candidate_pixels
from .quantize import Quantizer, check_color_count, default_quantizer
from .utils import debug_log


def get_palette(
    image: ImageHandle,
    color_count: int = DEFAULT_COLOR_COUNT,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
    *,
    quantizer: Optional[Quantizer] = None,
    premultiplied: bool = False,
    debug: bool = False,
) -> List[QuantizedColor]:
    """
    Cluster the image's candidate pixels into at most color_count colours.

    Args:
      image        : path, encoded bytes, file object, PIL image or PixelBuffer
      color_count  : palette size, 1..256
      quality      : sampling stride; 1 inspects every pixel, < 1 means default
      ignore_white : drop near-white pixels (R, G and B all > 250)
      quantizer    : clustering backend; Pillow median-cut when omitted

    Returns:
      QuantizedColor list, largest population first. Empty when no pixel
      survived filtering.
    """
    k = check_color_count(color_count)
    candidates = sample_candidate_pixels(
        image, quality, ignore_white, premultiplied=premultiplied, debug=debug
    )
    if candidates.shape[0] == 0:
        if debug:
            debug_log("no candidate pixels; palette is empty")
        return []
    backend = quantizer if quantizer is not None else default_quantizer()
    return list(backend.quantize(candidates, k))


def average_palette(palette: Sequence[QuantizedColor]) -> Optional[QuantizedColor]:
    """
    Channel-wise mean of the palette colours and mean population, rounded
    half to even. None for an empty palette.
    """
    if not palette:
        return None
    n = len(palette)
    channels = tuple(
        int(round(sum(qc.color[c] for qc in palette) / n)) for c in range(4)
    )
    population = int(round(sum(qc.population for qc in palette) / n))
    return QuantizedColor(color=channels, population=population)  # type: ignore[arg-type]


def get_color(
    image: ImageHandle,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
    *,
    quantizer: Optional[Quantizer] = None,
    premultiplied: bool = False,
    debug: bool = False,
) -> Optional[QuantizedColor]:
    """
    Dominant colour: the average of a DEFAULT_COLOR_COUNT-colour palette.

    Returns None when no pixel survived filtering.
    """
    palette = get_palette(
        image,
        DEFAULT_COLOR_COUNT,
        quality,
        ignore_white,
        quantizer=quantizer,
        premultiplied=premultiplied,
        debug=debug,
    )
    return average_palette(palette)


__all__ = ["get_palette", "get_color", "average_palette"]
