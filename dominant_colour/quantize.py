# dominant_colour/quantize.py
from __future__ import annotations

"""
Quantiser boundary.

Quantizer is the capability the palette step depends on:
  quantize(candidates, color_count) -> List[QuantizedColor]

MedianCutQuantizer is the default implementation, backed by Pillow's
median-cut palette reduction. Results are ordered by population, largest
first, and are empty when there are no candidates.
"""

from typing import List, Protocol, Sequence, Union

import numpy as np
from PIL import Image

from .constants import MAX_COLOR_COUNT, MIN_COLOR_COUNT, OPAQUE_ALPHA
from .core_types import Candidates, QuantizedColor, coerce_to_rgba_tuple

CandidateInput = Union[Candidates, Sequence[Sequence[int]]]


class Quantizer(Protocol):
    def quantize(
        self, candidates: CandidateInput, color_count: int
    ) -> List[QuantizedColor]: ...


def check_color_count(color_count: int) -> int:
    """Validate the requested palette size; returns it as int."""
    k = int(color_count)
    if not MIN_COLOR_COUNT <= k <= MAX_COLOR_COUNT:
        raise ValueError(
            f"color_count must be in [{MIN_COLOR_COUNT}, {MAX_COLOR_COUNT}], got {color_count}"
        )
    return k


def sort_by_population(palette: List[QuantizedColor]) -> List[QuantizedColor]:
    """Largest population first; ties broken by colour for a stable order."""
    return sorted(palette, key=lambda qc: (-qc.population, qc.color))


class MedianCutQuantizer:
    """Median-cut clustering via PIL.Image.quantize(method=MEDIANCUT)."""

    def quantize(
        self, candidates: CandidateInput, color_count: int
    ) -> List[QuantizedColor]:
        k = check_color_count(color_count)
        rows = np.array(candidates, dtype=np.uint8)
        if rows.size == 0:
            return []
        if rows.ndim != 2 or rows.shape[1] != 3:
            raise TypeError("expected (M, 3) RGB candidates")

        # One-row RGB strip; geometry is irrelevant to the histogram.
        strip = Image.fromarray(rows.reshape(1, -1, 3))
        paletted = strip.quantize(colors=k, method=Image.Quantize.MEDIANCUT)
        flat_palette = paletted.getpalette() or []
        counts = paletted.getcolors(maxcolors=MAX_COLOR_COUNT) or []

        out: List[QuantizedColor] = []
        for count, index in counts:
            rgb = flat_palette[index * 3 : index * 3 + 3]
            out.append(
                QuantizedColor(
                    color=coerce_to_rgba_tuple(rgb, alpha=OPAQUE_ALPHA),
                    population=int(count),
                )
            )
        return sort_by_population(out)


def default_quantizer() -> Quantizer:
    return MedianCutQuantizer()


__all__ = [
    "Quantizer",
    "MedianCutQuantizer",
    "check_color_count",
    "sort_by_population",
    "default_quantizer",
]
