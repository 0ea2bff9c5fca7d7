from __future__ import annotations

from typing import List, Tuple

from PIL import Image

from ..blocks import Raster
from .view import DEFAULT_OPAQUE, DEFAULT_TRANSPARENT, RasterImage


def image_to_pixels(img: Image.Image, dither: bool) -> List[int]:
    """Threshold an image to row-major 0/1 values, 1 for dark pixels."""
    if dither:
        img = img.convert("1")
        data = list(img.getdata())
        return [1 if p == 0 else 0 for p in data]
    img = img.convert("L")
    data = list(img.getdata())
    avg = sum(data) / len(data) if data else 0
    threshold = int(max(0, min(255, avg - 13)))
    return [1 if p <= threshold else 0 for p in data]


def image_to_raster(img: Image.Image, dither: bool = True, invert: bool = False) -> Raster:
    pixels = image_to_pixels(img, dither)
    if invert:
        pixels = [1 - p for p in pixels]
    return Raster.from_pixels(pixels, img.width)


def raster_to_image(
    raster: Raster,
    scale_width: int = 0,
    scale_height: int = 0,
    opaque: Tuple[int, int, int, int] = DEFAULT_OPAQUE,
    transparent: Tuple[int, int, int, int] = DEFAULT_TRANSPARENT,
) -> Image.Image:
    return RasterImage(raster, scale_width, scale_height, opaque, transparent).to_image()
