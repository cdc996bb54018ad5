"""
Pixel acquisition API.

Provides:
  sample_offsets(pixel_count, quality) -> range
    Pixel indices visited at the given stride, ceil(n / q) of them.

  validate_buffer(buffer, pixel_count) -> None
    Raise InvalidBufferLength when len(buffer.data) != pixel_count * 4.

  is_candidate(r, g, b, a, ignore_white) -> bool
  candidate_mask(samples, ignore_white) -> bool [N]
    Opacity / near-white predicate, scalar and vectorised.

  collect_candidates(buffer, pixel_count, quality, ignore_white) -> uint8 [M,3]
    Sampled, filtered RGB rows in scan order with no unused slots.
"""

from .collect import collect_candidates
from .filters import candidate_mask, is_candidate
from .sampler import (
    byte_offsets,
    sample_count,
    sample_offsets,
    sample_pixels,
    validate_buffer,
)

__all__ = [
    "collect_candidates",
    "candidate_mask",
    "is_candidate",
    "byte_offsets",
    "sample_count",
    "sample_offsets",
    "sample_pixels",
    "validate_buffer",
]
