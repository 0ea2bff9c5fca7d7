from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image

from ..blocks import Raster

Color = Tuple[int, int, int, int]

# Used when a view is created with a scale of zero.
DEFAULT_SCALE_WIDTH = 24
DEFAULT_SCALE_HEIGHT = 24
DEFAULT_OPAQUE: Color = (0, 0, 0, 255)
DEFAULT_TRANSPARENT: Color = (0, 0, 0, 0)


class RasterImage:
    """Scaled two-color image view of a raster.

    Each source pixel covers a ``scale_width`` x ``scale_height`` cell of the
    view. Set pixels render as ``opaque``, clear ones as ``transparent``.
    """

    mode = "RGBA"

    def __init__(
        self,
        raster: Raster,
        scale_width: int = 0,
        scale_height: int = 0,
        opaque: Color = DEFAULT_OPAQUE,
        transparent: Color = DEFAULT_TRANSPARENT,
    ) -> None:
        self.raster = raster
        self.scale_width = scale_width
        self.scale_height = scale_height
        self.opaque = opaque
        self.transparent = transparent

    def scale(self) -> Tuple[int, int]:
        w, h = self.scale_width, self.scale_height
        if w <= 0:
            w = max(1, DEFAULT_SCALE_WIDTH)
        if h <= 0:
            h = max(1, DEFAULT_SCALE_HEIGHT)
        return w, h

    @property
    def size(self) -> Tuple[int, int]:
        w, h = self.scale()
        return self.raster.width * w, self.raster.height * h

    def bounds(self) -> Tuple[int, int, int, int]:
        return (0, 0) + self.size

    def at(self, x: int, y: int) -> Color:
        width, height = self.size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"Point ({x}, {y}) is outside the {width}x{height} image")
        w, h = self.scale()
        if self.raster.get(x // w, y // h):
            return self.opaque
        return self.transparent

    def to_image(self) -> Image.Image:
        mask = Image.new("L", (self.raster.width, self.raster.height))
        mask.putdata([255 if p else 0 for p in self.raster.pixels()])
        mask = mask.resize(self.size, Image.NEAREST)
        fg = Image.new(self.mode, self.size, self.opaque)
        bg = Image.new(self.mode, self.size, self.transparent)
        return Image.composite(fg, bg, mask)

    def save(self, path: str, format: Optional[str] = None) -> None:
        self.to_image().save(path, format=format)
