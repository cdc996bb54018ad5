# dominant_colour/pipeline.py
from __future__ import annotations

"""
Decode -> sample -> filter -> collect.

sample_candidate_pixels() is the pixel acquisition step that feeds the
quantiser. Each call owns its own buffer and result, so calls on different
images can run on separate threads.
"""

import time

from .constants import DEFAULT_IGNORE_WHITE, DEFAULT_QUALITY
from .core_types import Candidates
from .image_io import ImageHandle, decode_rgba
from .pixel.collect import collect_candidates
from .utils import debug_log, format_seconds_compact


def normalise_quality(quality: int) -> int:
    """Stride values below 1 fall back to DEFAULT_QUALITY."""
    quality = int(quality)
    return DEFAULT_QUALITY if quality < 1 else quality


def sample_candidate_pixels(
    image: ImageHandle,
    quality: int = DEFAULT_QUALITY,
    ignore_white: bool = DEFAULT_IGNORE_WHITE,
    *,
    premultiplied: bool = False,
    debug: bool = False,
) -> Candidates:
    """
    Return the (M, 3) uint8 RGB rows of the image's sampled candidate pixels.

    Decoder errors propagate unchanged. A decoded buffer whose length is not
    width * height * 4 raises InvalidBufferLength before any sampling.
    """
    quality = normalise_quality(quality)
    t0 = time.perf_counter()
    buffer = decode_rgba(image, premultiplied=premultiplied)
    t1 = time.perf_counter()
    candidates = collect_candidates(
        buffer, buffer.pixel_count, quality, ignore_white, debug=debug
    )
    if debug:
        debug_log(
            f"decoded {buffer.width}x{buffer.height} in {format_seconds_compact(t1 - t0)}, "
            f"sampled in {format_seconds_compact(time.perf_counter() - t1)}"
        )
    return candidates


__all__ = ["normalise_quality", "sample_candidate_pixels"]
