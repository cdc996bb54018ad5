# dominant_colour/pixel/filters.py
from __future__ import annotations

"""
Candidate pixel predicate.

A pixel is a candidate when it is mostly opaque (alpha >= ALPHA_THRESHOLD)
and, with ignore_white, not near-white (any of R, G, B <= WHITE_THRESHOLD).
is_candidate() and candidate_mask() apply the same rule, scalar and vectorised.
"""

import numpy as np

from ..constants import ALPHA_THRESHOLD, WHITE_THRESHOLD
from ..core_types import BoolMask, U8Pixels


def is_candidate(r: int, g: int, b: int, a: int, ignore_white: bool) -> bool:
    if a < ALPHA_THRESHOLD:
        return False
    if ignore_white and r > WHITE_THRESHOLD and g > WHITE_THRESHOLD and b > WHITE_THRESHOLD:
        return False
    return True


def candidate_mask(samples: U8Pixels, ignore_white: bool) -> BoolMask:
    """Boolean mask over (N, 4) RGBA rows; True where is_candidate() would accept."""
    if samples.ndim != 2 or samples.shape[1] != 4:
        raise TypeError("expected (N, 4) RGBA samples")
    mask = samples[:, 3] >= ALPHA_THRESHOLD
    if ignore_white:
        near_white = np.all(samples[:, :3] > WHITE_THRESHOLD, axis=1)
        mask &= ~near_white
    return mask


__all__ = ["is_candidate", "candidate_mask"]
