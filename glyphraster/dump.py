from __future__ import annotations

import io
from typing import Any, List, Optional, TextIO

from .blocks import GeometryRegistry

STRIP_WIDTH = 8


def split_mask(pattern: int, bits: int) -> List[str]:
    """Draw the bits of pattern in canonical order, split into block lines.

    Bit ``j`` is character ``j`` of the mask, ``X`` when set. Masks of one or
    two bits are drawn one cell per line, wider ones two cells per line.
    """
    mask = "".join("X" if pattern >> j & 1 else " " for j in range(bits))
    step = 1 if bits <= 2 else 2
    return [mask[i : i + step] for i in range(0, len(mask), step)]


def dump(block_type: Any, out: TextIO, registry: Optional[GeometryRegistry] = None) -> None:
    """Write a diagram of the alphabet for block_type to out."""
    registry = registry or GeometryRegistry.default()
    alphabet = registry.alphabet(block_type)
    glyphs = alphabet.glyphs
    for start in range(0, len(glyphs), STRIP_WIDTH):
        out.write("   |" + "".join(glyphs[start : start + STRIP_WIDTH]) + "|\n")
    out.write("\n")
    for pattern, glyph in alphabet.items():
        if pattern:
            out.write("\n")
        lines = split_mask(pattern, alphabet.bits)
        out.write(f"{pattern:3d}: |{lines[0]}| │{glyph}│\n")
        for line in lines[1:]:
            out.write(f"     |{line}|\n")


def dump_string(block_type: Any, registry: Optional[GeometryRegistry] = None) -> str:
    buf = io.StringIO()
    dump(block_type, buf, registry)
    return buf.getvalue()
