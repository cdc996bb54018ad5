import math

import numpy as np
import pytest

from dominant_colour.core_types import InvalidBufferLength, PixelBuffer
from dominant_colour.pixel import collect as collect_mod
from dominant_colour.pixel.collect import collect_candidates
from dominant_colour.pixel.filters import is_candidate
from dominant_colour.pixel.sampler import sample_offsets


def _mixed_pixels(n):
    rng = np.random.default_rng(3)
    rows = rng.integers(0, 256, size=(n, 4), dtype=np.uint8)
    rows[::5] = (255, 255, 255, 255)
    return [tuple(int(v) for v in row) for row in rows]


@pytest.mark.parametrize("quality", [1, 2, 7, 50])
@pytest.mark.parametrize("ignore_white", [False, True])
def test_length_matches_accepted_samples(buffer_factory, quality, ignore_white):
    pixels = _mixed_pixels(120)
    buf = buffer_factory(pixels, 12, 10)

    out = collect_candidates(buf, buf.pixel_count, quality, ignore_white)

    accepted = [
        pixels[i][:3]
        for i in sample_offsets(120, quality)
        if is_candidate(*pixels[i], ignore_white)
    ]
    assert out.shape == (len(accepted), 3)
    assert out.shape[0] <= math.ceil(120 / quality)
    assert [tuple(row) for row in out.tolist()] == accepted


def test_drops_alpha_and_keeps_scan_order(buffer_factory):
    pixels = [(1, 2, 3, 255), (9, 9, 9, 0), (4, 5, 6, 200), (7, 8, 9, 125)]
    buf = buffer_factory(pixels, 2, 2)
    out = collect_candidates(buf, 4, 1, False)
    assert out.tolist() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_result_is_read_only(buffer_factory):
    buf = buffer_factory([(1, 2, 3, 255)] * 4, 2, 2)
    out = collect_candidates(buf, 4, 1, False)
    with pytest.raises(ValueError):
        out[0, 0] = 0


def test_all_transparent_gives_empty_result(buffer_factory):
    buf = buffer_factory([(50, 60, 70, 0)] * 9, 3, 3)
    out = collect_candidates(buf, 9, 1, False)
    assert out.shape == (0, 3)


def test_length_mismatch_fails_before_sampling(monkeypatch):
    def fail(*_args, **_kwargs):
        raise AssertionError("filter should not run")

    monkeypatch.setattr(collect_mod, "candidate_mask", fail)
    buf = PixelBuffer(data=bytes(10), width=2, height=2)
    with pytest.raises(InvalidBufferLength) as exc:
        collect_candidates(buf, 4, 1, False)
    assert (exc.value.expected, exc.value.actual) == (16, 10)


def test_debug_reports_counts(buffer_factory, capsys):
    buf = buffer_factory([(1, 2, 3, 255)] * 6, 3, 2)
    collect_candidates(buf, 6, 2, False, debug=True)
    out = capsys.readouterr().out
    assert "[debug]" in out
    assert "Sampled: 3" in out
    assert "Candidates: 3" in out
