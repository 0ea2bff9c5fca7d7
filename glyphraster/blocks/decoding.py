from __future__ import annotations

from typing import Any, Iterable, Optional, TextIO

from .encoding import ROW_SEPARATOR
from .errors import MalformedStream, SourceError, UnknownSymbol
from .registry import GeometryRegistry
from .shapes import BlockType
from .types import Raster


def decode(
    glyphs: Iterable[str],
    block_type: Any,
    width: int,
    height: int,
    registry: Optional[GeometryRegistry] = None,
) -> Raster:
    """Decode a glyph stream into a width x height raster.

    Raster dimensions are not recoverable from the stream, so the
    caller supplies them. Blocks are scattered into the raster and bits that
    fall past width or height are dropped. One trailing row separator is
    accepted.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be greater than zero")
    registry = registry or GeometryRegistry.default()
    geometry = registry.resolve(block_type, height)
    alphabet = registry.alphabet(geometry.tag)
    columns = geometry.blocks(width)
    rows = geometry.rows(height)

    raster = Raster(width, height)
    bx = by = 0
    pending: Optional[str] = None
    carriage = False
    for glyph in glyphs:
        if carriage and glyph != ROW_SEPARATOR:
            raise UnknownSymbol("\r", by, bx)
        if glyph == "\r":
            carriage = True
            continue
        if glyph == ROW_SEPARATOR:
            carriage = False
            if pending is not None:
                raise MalformedStream(f"Row {by} ends inside a double-wide glyph pair")
            if by >= rows or bx != columns:
                raise MalformedStream(f"Row {by} has {bx} blocks, expected {columns}")
            by, bx = by + 1, 0
            continue
        if by >= rows:
            raise MalformedStream(f"Stream has more than {rows} rows")
        try:
            pattern = alphabet.pattern(glyph)
        except UnknownSymbol:
            raise UnknownSymbol(glyph, by, bx) from None
        if geometry.double_wide:
            if pending is None:
                pending = glyph
                continue
            if glyph != pending:
                raise MalformedStream(
                    f"Double-wide pair {pending!r}, {glyph!r} at row {by}, column {bx} does not match"
                )
            pending = None
        if bx >= columns:
            raise MalformedStream(f"Row {by} has more than {columns} blocks")
        geometry.scatter(raster, bx, by, pattern)
        bx += 1

    if pending is not None:
        raise MalformedStream("Stream ends inside a double-wide glyph pair")
    if carriage:
        raise MalformedStream("Stream ends with a bare carriage return")
    if not ((by == rows - 1 and bx == columns) or (by == rows and bx == 0)):
        raise MalformedStream(
            f"Stream ends at row {by}, block {bx}; expected {rows} rows of {columns} blocks"
        )
    return raster


def decode_stream(
    stream: TextIO,
    block_type: Any,
    width: int,
    height: int,
    registry: Optional[GeometryRegistry] = None,
) -> Raster:
    """Read a text stream to EOF and decode it."""
    try:
        text = stream.read()
    except OSError as exc:
        raise SourceError(f"Reading glyphs failed: {exc}") from exc
    return decode(text, block_type, width, height, registry)


class BlockDecoder:
    """Decoder bound to one block type and registry."""

    def __init__(self, block_type: Any = BlockType.AUTO, registry: Optional[GeometryRegistry] = None) -> None:
        self.block_type = BlockType.parse(block_type)
        self.registry = registry or GeometryRegistry.default()
        if self.block_type is not BlockType.AUTO:
            self.registry.geometry(self.block_type)

    def decode(self, glyphs: Iterable[str], width: int, height: int) -> Raster:
        return decode(glyphs, self.block_type, width, height, self.registry)
