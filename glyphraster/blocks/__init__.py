from .decoding import BlockDecoder, decode, decode_stream
from .encoding import ROW_SEPARATOR, BlockEncoder, encode, encode_to_string, iter_blocks
from .errors import (
    BlockError,
    DecodeError,
    EncodeError,
    InvalidGeometry,
    MalformedStream,
    SinkError,
    SourceError,
    UnknownSymbol,
)
from .shapes import BlockType, Geometry, block_types
from .registry import Alphabet, BlockSpec, GeometryRegistry, alphabet, geometry, is_contiguous
from .selection import best
from .types import Raster

__all__ = [
    "Alphabet",
    "best",
    "BlockDecoder",
    "BlockEncoder",
    "BlockError",
    "BlockSpec",
    "block_types",
    "BlockType",
    "decode",
    "decode_stream",
    "DecodeError",
    "encode",
    "encode_to_string",
    "EncodeError",
    "alphabet",
    "geometry",
    "Geometry",
    "GeometryRegistry",
    "InvalidGeometry",
    "is_contiguous",
    "iter_blocks",
    "MalformedStream",
    "Raster",
    "ROW_SEPARATOR",
    "SinkError",
    "SourceError",
    "UnknownSymbol",
]
