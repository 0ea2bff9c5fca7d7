from .blocks import (
    Alphabet,
    BlockDecoder,
    BlockEncoder,
    BlockError,
    BlockType,
    DecodeError,
    EncodeError,
    Geometry,
    GeometryRegistry,
    InvalidGeometry,
    MalformedStream,
    Raster,
    SinkError,
    SourceError,
    UnknownSymbol,
    alphabet,
    best,
    block_types,
    decode,
    encode,
    encode_to_string,
    geometry,
    is_contiguous,
)

__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "best",
    "BlockDecoder",
    "BlockEncoder",
    "BlockError",
    "block_types",
    "BlockType",
    "decode",
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
    "MalformedStream",
    "Raster",
    "SinkError",
    "SourceError",
    "UnknownSymbol",
]
