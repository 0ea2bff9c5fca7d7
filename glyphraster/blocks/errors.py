from __future__ import annotations

from typing import Any, Optional


class BlockError(Exception):
    """Base class for block codec failures."""


class InvalidGeometry(BlockError, ValueError):
    """Raised for an unregistered or malformed block type."""

    def __init__(self, tag: Any, detail: Optional[str] = None) -> None:
        self.tag = tag
        message = f"Unknown block type: {tag!r}"
        if detail:
            message = f"Invalid block type {tag!r}: {detail}"
        super().__init__(message)


class EncodeError(BlockError):
    pass


class SinkError(EncodeError):
    """The output sink rejected a write. The cause is chained."""


class DecodeError(BlockError):
    pass


class UnknownSymbol(DecodeError):
    """A glyph that is not part of the alphabet being decoded."""

    def __init__(self, glyph: str, row: Optional[int] = None, column: Optional[int] = None) -> None:
        self.glyph = glyph
        self.row = row
        self.column = column
        message = f"Unknown symbol {glyph!r}"
        if row is not None and column is not None:
            message += f" at row {row}, column {column}"
        super().__init__(message)


class MalformedStream(DecodeError):
    """The glyph stream does not have the shape implied by the block type and size."""


class SourceError(BlockError):
    """Reading the input stream failed. The cause is chained."""
