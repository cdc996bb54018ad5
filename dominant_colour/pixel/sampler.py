# dominant_colour/pixel/sampler.py
from __future__ import annotations

"""
Strided pixel sampling over a flat RGBA buffer.

The sample set for pixel_count n and quality q is the index range
{0, q, 2q, ...} below n, i.e. ceil(n / q) pixels. Byte offsets are
index * COLOUR_DEPTH.
"""

from typing import Iterator

import numpy as np

from ..constants import COLOUR_DEPTH
from ..core_types import InvalidBufferLength, PixelBuffer, U8Pixels


def sample_count(pixel_count: int, quality: int) -> int:
    """Number of pixels visited for a given stride: ceil(n / q)."""
    if quality < 1:
        raise ValueError(f"quality must be >= 1, got {quality}")
    if pixel_count <= 0:
        return 0
    return (pixel_count + quality - 1) // quality


def sample_offsets(pixel_count: int, quality: int) -> range:
    """Pixel indices visited at stride `quality`. A range, so lazy and restartable."""
    if quality < 1:
        raise ValueError(f"quality must be >= 1, got {quality}")
    return range(0, max(0, pixel_count), quality)


def byte_offsets(pixel_count: int, quality: int) -> Iterator[int]:
    """Byte offset of the first channel (R) of each sampled pixel."""
    for i in sample_offsets(pixel_count, quality):
        yield i * COLOUR_DEPTH


def validate_buffer(buffer: PixelBuffer, pixel_count: int) -> None:
    """Raise InvalidBufferLength unless the buffer holds exactly pixel_count RGBA pixels."""
    expected = pixel_count * COLOUR_DEPTH
    actual = len(buffer.data)
    if expected != actual:
        raise InvalidBufferLength(expected, actual)


def sample_pixels(buffer: PixelBuffer, pixel_count: int, quality: int) -> U8Pixels:
    """
    Validate the buffer, then gather the sampled pixels as an (N, 4) uint8 view.

    N == sample_count(pixel_count, quality). The length check runs once,
    before any pixel is read.
    """
    validate_buffer(buffer, pixel_count)
    flat = np.frombuffer(buffer.data, dtype=np.uint8).reshape(-1, COLOUR_DEPTH)
    return flat[::quality]


__all__ = [
    "sample_count",
    "sample_offsets",
    "byte_offsets",
    "validate_buffer",
    "sample_pixels",
]
