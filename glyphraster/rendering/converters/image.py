from __future__ import annotations

from typing import List, Optional

from .base import Page, RasterConverter


class ImageConverter(RasterConverter):
    def load(self, path: str, width: Optional[int]) -> List[Page]:
        img = self.fit_width(self.flatten(self.open_image(path)), width)
        return [Page(img, dither=True)]
