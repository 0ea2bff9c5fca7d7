from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional, Set

from .base import Page, PageConverter
from .image import ImageConverter
from .text import TextConverter

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp")
SUPPORTED_EXTENSIONS: Set[str] = set(IMAGE_EXTENSIONS) | {".txt"}


class PageLoader:
    def __init__(
        self,
        converters: Optional[Dict[str, PageConverter]] = None,
        text_converter: Optional[TextConverter] = None,
    ) -> None:
        if converters is None:
            converters = {}
            image_converter = ImageConverter()
            for ext in IMAGE_EXTENSIONS:
                converters[ext] = image_converter
            converters[".txt"] = text_converter or TextConverter()
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str, width: Optional[int]) -> List[Page]:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        pages = converter.load(path, width)
        logger.debug("Loaded %d page(s) from %s with %s", len(pages), path, type(converter).__name__)
        return pages


def load_pages(path: str, width: Optional[int]) -> List[Page]:
    return PageLoader().load(path, width)


__all__ = ["ImageConverter", "Page", "PageConverter", "PageLoader", "SUPPORTED_EXTENSIONS", "TextConverter", "load_pages"]
