from __future__ import annotations

import logging
import os
import shutil
import subprocess
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Union

from PIL import ImageFont

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

FONT_DIRS = (
    "/usr/share/fonts",
    "/usr/local/share/fonts",
    os.path.expanduser("~/.local/share/fonts"),
    "/Library/Fonts",
    "/System/Library/Fonts",
    os.path.join(os.environ.get("WINDIR", "C:\\Windows"), "Fonts"),
)

# Searched in order when fontconfig is unavailable.
BOLD_FONT_NAMES = (
    "DejaVuSansMono-Bold.ttf",
    "LiberationMono-Bold.ttf",
    "FreeMonoBold.ttf",
    "UbuntuMono-B.ttf",
    "Menlo.ttc",
    "consolab.ttf",
    "courbd.ttf",
)
REGULAR_FONT_NAMES = (
    "DejaVuSansMono.ttf",
    "LiberationMono-Regular.ttf",
    "FreeMono.ttf",
    "UbuntuMono-R.ttf",
    "Menlo.ttc",
    "consola.ttf",
    "cour.ttf",
)


@lru_cache(maxsize=None)
def find_monospace_font(bold: bool = True) -> Optional[str]:
    """Locate a monospace TrueType font file, or None to use Pillow's bitmap font."""
    path = _fontconfig_lookup("monospace:style=Bold" if bold else "monospace")
    if path is None:
        path = next(_installed_fonts(BOLD_FONT_NAMES if bold else REGULAR_FONT_NAMES), None)
    if path is None:
        logger.debug("No monospace font found, using the default bitmap font")
    else:
        logger.debug("Using monospace font %s", path)
    return path


def _fontconfig_lookup(pattern: str) -> Optional[str]:
    executable = shutil.which("fc-match")
    if executable is None:
        return None
    try:
        result = subprocess.run(
            [executable, "--format=%{file}", pattern],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("fc-match failed: %s", exc)
        return None
    path = result.stdout.strip()
    return path if path and os.path.isfile(path) else None


def _installed_fonts(names: Iterable[str]) -> Iterator[str]:
    wanted = tuple(names)
    for directory in FONT_DIRS:
        for root, _dirs, files in os.walk(directory):
            for name in wanted:
                if name in files:
                    yield os.path.join(root, name)


def load_font(path: Optional[str], size: int) -> Font:
    if path is None:
        return ImageFont.load_default()
    return ImageFont.truetype(path, size)
