from __future__ import annotations

import textwrap
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from ...font_utils import Font, find_monospace_font, load_font
from .base import Page, PageConverter

DEFAULT_TEXT_WIDTH = 128
PIXELS_PER_COLUMN = 10
TAB_SIZE = 4
MIN_FONT_SIZE = 6
MAX_FONT_SIZE = 80


def columns_for_width(width: int) -> int:
    return max(1, round(width / PIXELS_PER_COLUMN))


def wrap_lines(text: str, columns: int) -> List[str]:
    """Hard-wrap text to columns, breaking at spaces where possible.

    Blank lines and a trailing newline are kept as empty lines.
    """
    wrapper = textwrap.TextWrapper(width=columns, expand_tabs=False, replace_whitespace=False)
    paragraphs = text.split("\n")
    lines: List[str] = []
    for paragraph in paragraphs:
        lines.extend(wrapper.wrap(paragraph) or [""])
    return lines


def line_metrics(font: Font) -> Tuple[int, int]:
    """Return (ascent, descent) of font."""
    if hasattr(font, "getmetrics"):
        return font.getmetrics()
    _left, top, _right, bottom = font.getbbox("Ag")
    return bottom - top, 0


class TextConverter(PageConverter):
    """Draws text black on white with a monospace font sized to the page width.

    ``columns`` fixes the characters per line; by default it follows the
    width. ``font_path`` overrides font discovery.
    """

    def __init__(self, columns: Optional[int] = None, font_path: Optional[str] = None) -> None:
        if columns is not None and columns <= 0:
            raise ValueError("Columns must be greater than zero")
        self.columns = columns
        self.font_path = font_path

    def load(self, path: str, width: Optional[int]) -> List[Page]:
        with open(path, "r", encoding="utf-8", errors="replace") as handle:
            return [self.render_page(handle.read(), width)]

    def render_page(self, text: str, width: Optional[int]) -> Page:
        return Page(self.render(text, width or DEFAULT_TEXT_WIDTH), dither=False)

    def render(self, text: str, width: int) -> Image.Image:
        columns = self.columns or columns_for_width(width)
        lines = wrap_lines(text.expandtabs(TAB_SIZE), columns)
        font = self.fit_font(width, columns)
        ascent, descent = line_metrics(font)
        step = ascent + descent
        img = Image.new("L", (width, max(1, step * len(lines))), 255)
        draw = ImageDraw.Draw(img)
        for row, line in enumerate(lines):
            draw.text((0, row * step), line, font=font, fill=0)
        return img

    def fit_font(self, width: int, columns: int) -> Font:
        """Return the largest font size whose ``columns`` characters fit in width."""
        path = self.font_path or find_monospace_font()
        if path is None:
            return load_font(None, MIN_FONT_SIZE)
        sample = "M" * columns
        low, high = MIN_FONT_SIZE, MAX_FONT_SIZE
        while low < high:
            mid = (low + high + 1) // 2
            if load_font(path, mid).getlength(sample) <= width:
                low = mid
            else:
                high = mid - 1
        return load_font(path, low)
