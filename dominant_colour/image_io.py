# dominant_colour/image_io.py
from __future__ import annotations

import io
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, List, Sequence, Union

import numpy as np
from PIL import Image, ImageOps

from .constants import SWATCH_HEIGHT, SWATCH_WIDTH
from .core_types import PixelBuffer, QuantizedColor

"""
Image decoding into flat RGBA pixel buffers (sRGB), plus small output helpers.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]

ImageHandle = Union[str, Path, bytes, bytearray, BinaryIO, Image.Image, PixelBuffer]


@contextmanager
def opened_image(handle: ImageHandle) -> Iterator[Image.Image]:
    """
    Yield a Pillow image for `handle`.

    Images opened here are closed on exit, including when decoding fails.
    A caller-supplied Image.Image is yielded as-is and left open.
    """
    if isinstance(handle, Image.Image):
        yield handle
        return
    if isinstance(handle, (str, Path)):
        source: Union[Path, BinaryIO] = Path(handle)
    elif isinstance(handle, (bytes, bytearray)):
        source = io.BytesIO(bytes(handle))
    elif hasattr(handle, "read"):
        source = handle  # type: ignore[assignment]
    else:
        raise TypeError(f"unsupported image handle: {type(handle).__name__}")
    with Image.open(source) as im:
        yield im


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def decode_rgba(handle: ImageHandle, premultiplied: bool = False) -> PixelBuffer:
    """
    Decode an image handle into a PixelBuffer of row-major RGBA bytes.

    Accepts a path, encoded bytes, a binary file object, a Pillow image, or
    an existing PixelBuffer (returned unchanged). EXIF orientation is applied
    and an embedded ICC profile is converted to sRGB. With premultiplied=True
    colour channels are scaled by alpha.

    Decoder errors (FileNotFoundError, UnidentifiedImageError, OSError)
    propagate to the caller.
    """
    if isinstance(handle, PixelBuffer):
        return handle
    with opened_image(handle) as im0:
        im = _convert_to_srgb_rgba(im0)
    if premultiplied:
        im = im.convert("RGBa")
    width, height = im.size
    return PixelBuffer(data=im.tobytes(), width=int(width), height=int(height))


def _band_widths(populations: Sequence[int], total_width: int) -> List[int]:
    """
    Split total_width into bands proportional to populations, at least 1px
    each, summing exactly to total_width. Requires total_width >= len(populations).
    """
    n = len(populations)
    total = sum(populations)
    if total > 0:
        widths = [max(1, total_width * p // total) for p in populations]
    else:
        widths = [1] * n
    # Settle the rounding remainder on the widest bands first.
    diff = total_width - sum(widths)
    order = sorted(range(n), key=lambda i: -widths[i])
    i = 0
    while diff != 0:
        j = order[i % n]
        if diff > 0:
            widths[j] += 1
            diff -= 1
        elif widths[j] > 1:
            widths[j] -= 1
            diff += 1
        i += 1
    return widths


def save_palette_swatch(
    path: Path,
    palette: Sequence[QuantizedColor],
    width: int = SWATCH_WIDTH,
    height: int = SWATCH_HEIGHT,
) -> Path:
    """
    Save a horizontal strip with one band per palette colour, widths
    proportional to population. Always written as PNG. Every colour gets at
    least one column, so width must be >= len(palette).
    """
    if not palette:
        raise ValueError("cannot draw a swatch for an empty palette")
    if len(palette) > width:
        raise ValueError(
            f"swatch width {width} is too narrow for {len(palette)} colours"
        )
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    out = np.zeros((height, width, 4), dtype=np.uint8)
    x = 0
    for qc, band in zip(palette, _band_widths([qc.population for qc in palette], width)):
        out[:, x : x + band] = qc.color
        x += band
    Image.fromarray(out).save(path)
    return path


__all__ = [
    "ImageHandle",
    "opened_image",
    "decode_rgba",
    "save_palette_swatch",
]
