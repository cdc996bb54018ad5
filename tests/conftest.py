from pathlib import Path
from typing import Sequence, Tuple

import pytest
from PIL import Image

from dominant_colour.core_types import PixelBuffer


def make_buffer(pixels: Sequence[Tuple[int, int, int, int]], width: int, height: int) -> PixelBuffer:
    data = bytes(channel for px in pixels for channel in px)
    return PixelBuffer(data=data, width=width, height=height)


@pytest.fixture
def solid_image():
    return Image.new("RGBA", (7, 5), (10, 20, 30, 255))


@pytest.fixture
def transparent_image():
    return Image.new("RGBA", (4, 4), (200, 0, 0, 0))


@pytest.fixture
def white_image():
    return Image.new("RGBA", (6, 6), (255, 255, 255, 255))


@pytest.fixture
def two_tone_image():
    # 3 red pixels for every blue one, row by row.
    im = Image.new("RGBA", (4, 4), (255, 0, 0, 255))
    for y in range(4):
        im.putpixel((3, y), (0, 0, 255, 255))
    return im


@pytest.fixture
def png_path(tmp_path: Path, two_tone_image) -> Path:
    path = tmp_path / "two_tone.png"
    two_tone_image.save(path)
    return path


@pytest.fixture
def buffer_factory():
    return make_buffer
