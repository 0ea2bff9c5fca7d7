"""Tests for the Pillow collaborators."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from glyphraster.blocks import Raster
from glyphraster.rendering import RasterImage, image_to_pixels, image_to_raster, raster_to_image
from glyphraster.rendering.view import DEFAULT_OPAQUE, DEFAULT_TRANSPARENT


def _two_pixel_image() -> Image.Image:
    img = Image.new("L", (2, 1), 255)
    img.putpixel((0, 0), 0)
    return img


class TestRasterImage:
    def test_default_scale(self) -> None:
        view = RasterImage(Raster.from_pixels([1, 0], 2))
        assert view.size == (48, 24)
        assert view.bounds() == (0, 0, 48, 24)
        assert view.mode == "RGBA"

    def test_at(self) -> None:
        view = RasterImage(Raster.from_pixels([1, 0], 2), 2, 3)
        assert view.at(1, 2) == DEFAULT_OPAQUE
        assert view.at(2, 0) == DEFAULT_TRANSPARENT
        with pytest.raises(IndexError):
            view.at(4, 0)

    def test_to_image(self) -> None:
        img = RasterImage(Raster.from_pixels([0, 1], 2), 3, 3, opaque=(255, 0, 0, 255)).to_image()
        assert img.size == (6, 3)
        assert img.mode == "RGBA"
        assert img.getpixel((0, 0)) == DEFAULT_TRANSPARENT
        assert img.getpixel((5, 2)) == (255, 0, 0, 255)

    def test_save(self, tmp_path: Path) -> None:
        path = tmp_path / "out.png"
        RasterImage(Raster.from_pixels([1, 0, 0, 1], 2), 1, 1).save(str(path))
        with Image.open(path) as img:
            assert img.size == (2, 2)

    def test_raster_to_image_shortcut(self) -> None:
        img = raster_to_image(Raster.from_pixels([1], 1), 2, 2)
        assert img.size == (2, 2)
        assert img.getpixel((1, 1)) == DEFAULT_OPAQUE


class TestImageToRaster:
    def test_threshold(self) -> None:
        assert image_to_pixels(_two_pixel_image(), dither=False) == [1, 0]

    def test_dither(self) -> None:
        assert image_to_pixels(_two_pixel_image(), dither=True) == [1, 0]

    def test_invert(self) -> None:
        r = image_to_raster(_two_pixel_image(), dither=False, invert=True)
        assert r.pixels() == [0, 1]

    def test_dimensions(self) -> None:
        r = image_to_raster(Image.new("RGB", (5, 3), "white"))
        assert (r.width, r.height) == (5, 3)
        assert r.pixels() == [0] * 15
