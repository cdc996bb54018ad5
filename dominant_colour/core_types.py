# dominant_colour/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, errors, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .constants import COLOUR_DEPTH, DARK_LUMA_THRESHOLD

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HexStr = str

U8Pixels = NDArray[np.uint8]  # (N, 4) sampled RGBA rows
Candidates = NDArray[np.uint8]  # (M, 3) RGB rows in scan order
BoolMask = NDArray[np.bool_]  # (N,)

# Errors


class InvalidBufferLength(ValueError):
    """Decoded buffer size does not match width * height * COLOUR_DEPTH."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = int(expected)
        self.actual = int(actual)
        super().__init__(
            f"(expected data length = {self.expected}) != (buffer length = {self.actual})"
        )


# Value objects


@dataclass(frozen=True)
class PixelBuffer:
    """Flat row-major RGBA bytes plus image dimensions."""

    data: bytes
    width: int
    height: int

    @property
    def stride(self) -> int:
        return COLOUR_DEPTH

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def expected_length(self) -> int:
        return self.pixel_count * self.stride


@dataclass(frozen=True)
class QuantizedColor:
    """Palette entry: RGBA colour and the number of pixels it stands for."""

    color: RGBATuple
    population: int

    @property
    def rgb(self) -> RGBTuple:
        return (self.color[0], self.color[1], self.color[2])

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.rgb)

    @property
    def is_dark(self) -> bool:
        return yiq_luma(self.rgb) < DARK_LUMA_THRESHOLD


# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def yiq_luma(rgb: RGBTuple) -> float:
    """Perceived brightness (YIQ Y) in 0..255."""
    return (rgb[0] * 299 + rgb[1] * 587 + rgb[2] * 114) / 1000.0


def coerce_to_rgba_tuple(value, alpha: int = 255) -> RGBATuple:
    """
    Coerce a 3- or 4-length sequence or array row to an (r, g, b, a) int tuple.
    A missing alpha channel is filled with `alpha`.
    """
    if len(value) < 3:
        raise ValueError("sequence too small for RGB")
    a = int(value[3]) if len(value) > 3 else int(alpha)
    return (int(value[0]), int(value[1]), int(value[2]), a)
