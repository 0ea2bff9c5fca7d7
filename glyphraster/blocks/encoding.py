from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO

from .errors import SinkError
from .registry import Alphabet, GeometryRegistry
from .shapes import BlockType, Geometry
from .types import Raster

ROW_SEPARATOR = "\n"


def iter_blocks(
    raster: Raster,
    block_type: Any = BlockType.AUTO,
    registry: Optional[GeometryRegistry] = None,
) -> Iterator[str]:
    """Return the glyph stream for a raster.

    Each item is one glyph write or one row separator. The block type is
    resolved before iteration starts, so an unknown type fails immediately.
    """
    registry = registry or GeometryRegistry.default()
    geometry = registry.resolve(block_type, raster.height)
    return _walk_blocks(raster, geometry, registry.alphabet(geometry.tag))


def _walk_blocks(raster: Raster, geometry: Geometry, alphabet: Alphabet) -> Iterator[str]:
    columns = geometry.blocks(raster.width)
    for by in range(geometry.rows(raster.height)):
        if by:
            yield ROW_SEPARATOR
        for bx in range(columns):
            glyph = alphabet.glyph(geometry.compose(raster, bx, by))
            for _ in range(geometry.repeat):
                yield glyph


def encode(
    raster: Raster,
    block_type: Any,
    sink: TextIO,
    registry: Optional[GeometryRegistry] = None,
) -> None:
    """Encode a raster as block glyphs written to sink.

    Output already written when the sink fails is left in place.
    """
    for chunk in iter_blocks(raster, block_type, registry):
        try:
            sink.write(chunk)
        except (OSError, ValueError) as exc:
            raise SinkError(f"Writing glyphs failed: {exc}") from exc


def encode_to_string(
    raster: Raster,
    block_type: Any = BlockType.AUTO,
    registry: Optional[GeometryRegistry] = None,
) -> str:
    return "".join(iter_blocks(raster, block_type, registry))


class BlockEncoder:
    """Encoder bound to one block type and registry."""

    def __init__(self, block_type: Any = BlockType.AUTO, registry: Optional[GeometryRegistry] = None) -> None:
        self.block_type = BlockType.parse(block_type)
        self.registry = registry or GeometryRegistry.default()
        if self.block_type is not BlockType.AUTO:
            self.registry.geometry(self.block_type)

    def encode(self, raster: Raster, sink: TextIO) -> None:
        encode(raster, self.block_type, sink, self.registry)

    def encode_to_string(self, raster: Raster) -> str:
        return encode_to_string(raster, self.block_type, self.registry)
