from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from .blocks import BlockType, GeometryRegistry, Raster, decode_stream, encode_to_string
from .rendering.converters import SUPPORTED_EXTENSIONS, Page, PageLoader, TextConverter
from .rendering.renderer import image_to_raster
from .rendering.view import DEFAULT_SCALE_HEIGHT, DEFAULT_SCALE_WIDTH, RasterImage

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_TYPE = BlockType.AUTO
DEFAULT_DITHER = True
DEFAULT_INVERT = False
PAGE_SEPARATOR = "\n\n"


@dataclass
class RenderSettings:
    block_type: Any = DEFAULT_BLOCK_TYPE
    width: Optional[int] = None
    dither: bool = DEFAULT_DITHER
    invert: bool = DEFAULT_INVERT
    scale_width: int = DEFAULT_SCALE_WIDTH
    scale_height: int = DEFAULT_SCALE_HEIGHT
    text_columns: Optional[int] = None
    font_path: Optional[str] = None

    def __post_init__(self) -> None:
        self.block_type = BlockType.parse(self.block_type)
        if self.width is not None and self.width <= 0:
            raise ValueError("Width must be greater than zero")


class RenderJobBuilder:
    """Turns files or text into block glyph text."""

    def __init__(
        self,
        settings: Optional[RenderSettings] = None,
        registry: Optional[GeometryRegistry] = None,
        loader: Optional[PageLoader] = None,
    ) -> None:
        self.settings = settings or RenderSettings()
        self.registry = registry or GeometryRegistry.default()
        self.text_converter = TextConverter(self.settings.text_columns, self.settings.font_path)
        self.loader = loader or PageLoader(text_converter=self.text_converter)

    def build_from_file(self, path: str) -> str:
        self._validate_input_path(path)
        pages = self.loader.load(path, self.settings.width)
        return PAGE_SEPARATOR.join(self.render_page(page) for page in pages)

    def build_from_text(self, text: str) -> str:
        page = self.text_converter.render_page(text, self.settings.width)
        return self.render_page(page)

    def rasterize(self, page: Page) -> Raster:
        return image_to_raster(page.image, dither=self._use_dither(page), invert=self.settings.invert)

    def render_page(self, page: Page) -> str:
        raster = self.rasterize(page)
        logger.debug(
            "Rendering %dx%d raster as %s",
            raster.width,
            raster.height,
            self.registry.resolve(self.settings.block_type, raster.height).tag.label,
        )
        return encode_to_string(raster, self.settings.block_type, self.registry)

    def decode_file(self, path: str, width: int, height: int) -> RasterImage:
        """Decode a glyph text file back into a scaled image view."""
        with open(path, "r", encoding="utf-8") as handle:
            raster = decode_stream(handle, self.settings.block_type, width, height, self.registry)
        logger.debug("Decoded %s into a %dx%d raster", path, width, height)
        return RasterImage(raster, self.settings.scale_width, self.settings.scale_height)

    def _use_dither(self, page: Page) -> bool:
        return self.settings.dither and page.dither

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
