# dominant_colour/pixel/collect.py
from __future__ import annotations

"""
Candidate collection: sample -> filter -> compact RGB rows.
"""

import numpy as np

from ..core_types import Candidates, PixelBuffer
from ..utils import debug_log, key_value_pairs_to_string
from .filters import candidate_mask
from .sampler import sample_count, sample_pixels


def collect_candidates(
    buffer: PixelBuffer,
    pixel_count: int,
    quality: int,
    ignore_white: bool,
    debug: bool = False,
) -> Candidates:
    """
    Return the RGB rows of every sampled pixel that passes the filter.

    Shape is (M, 3) uint8 in scan order with M <= ceil(n / quality); alpha is
    dropped. The result owns its memory and is marked read-only.

    Raises InvalidBufferLength before sampling if the buffer size is wrong.
    """
    samples = sample_pixels(buffer, pixel_count, quality)
    mask = candidate_mask(samples, ignore_white)
    out = np.ascontiguousarray(samples[mask, :3])
    out.setflags(write=False)

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Pixels", pixel_count),
                    ("Quality", quality),
                    ("Sampled", sample_count(pixel_count, quality)),
                    ("Candidates", int(out.shape[0])),
                ]
            )
        )
    return out


__all__ = ["collect_candidates"]
