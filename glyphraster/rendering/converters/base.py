from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from PIL import Image, ImageOps

TRANSPARENT_MODES = ("RGBA", "LA", "PA")


@dataclass(frozen=True)
class Page:
    """One rendered input page. ``dither`` is False for pages that are already two-tone."""

    image: Image.Image
    dither: bool


class PageConverter:
    def load(self, path: str, width: Optional[int]) -> List[Page]:
        raise NotImplementedError


class RasterConverter(PageConverter):
    """Loading steps shared by bitmap image formats."""

    @staticmethod
    def open_image(path: str) -> Image.Image:
        with Image.open(path) as img:
            img.load()
            return ImageOps.exif_transpose(img)

    @staticmethod
    def flatten(img: Image.Image) -> Image.Image:
        """Return an RGB or L image, compositing any alpha onto white."""
        if img.mode in TRANSPARENT_MODES or "transparency" in img.info:
            rgba = img.convert("RGBA")
            flat = Image.new("RGB", rgba.size, "white")
            flat.paste(rgba, mask=rgba.getchannel("A"))
            return flat
        if img.mode in ("RGB", "L"):
            return img
        return img.convert("RGB")

    @staticmethod
    def fit_width(img: Image.Image, width: Optional[int]) -> Image.Image:
        if width is None or width == img.width:
            return img
        height = max(1, round(img.height * width / img.width))
        return img.resize((width, height), Image.LANCZOS)
