from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, BinaryIO, List, Optional, Sequence

from .errors import SourceError

if TYPE_CHECKING:
    from .shapes import BlockType

READ_CHUNK_SIZE = 512


def packed_length(width: int, height: int) -> int:
    """Return the number of bytes needed to hold width x height bits."""
    return (width * height + 7) // 8


@dataclass
class Raster:
    """Packed 1-bit-per-pixel bitmap.

    Bits are addressed row-major: pixel ``(x, y)`` is bit ``i = y * width + x``,
    stored in byte ``i // 8`` at position ``i % 8`` (least significant bit
    first). Bits past ``width * height`` in the last byte are always zero.
    """

    width: int
    height: int
    pix: Optional[bytearray] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.validate()
        size = packed_length(self.width, self.height)
        pix = bytearray((self.pix or b"")[:size])
        pix.extend(bytes(size - len(pix)))
        rem = self.width * self.height % 8
        if rem:
            pix[-1] &= 0xFF >> (8 - rem)
        self.pix = pix

    def validate(self) -> None:
        """Validate raster dimensions."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if self.height <= 0:
            raise ValueError("Height must be greater than zero")

    @classmethod
    def blank(cls, width: int, height: int) -> "Raster":
        return cls(width, height)

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: Optional[int] = None) -> "Raster":
        """Build a raster from packed bytes.

        When height is omitted it covers every bit in data, with the last
        partial row zero-padded.
        """
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        if height is None:
            height = max(1, (len(data) * 8 + width - 1) // width)
        return cls(width, height, bytearray(data))

    @classmethod
    def from_reader(cls, stream: BinaryIO, width: int, height: Optional[int] = None) -> "Raster":
        """Read packed bytes from a binary stream until EOF."""
        data = bytearray()
        while True:
            try:
                chunk = stream.read(READ_CHUNK_SIZE)
            except OSError as exc:
                raise SourceError(f"Reading bitmap data failed: {exc}") from exc
            if not chunk:
                break
            data += chunk
        return cls.from_bytes(bytes(data), width, height)

    @classmethod
    def from_value(
        cls,
        value: Any,
        width: int,
        height: Optional[int] = None,
        byteorder: str = "little",
    ) -> "Raster":
        """Build a raster from an int or any buffer-protocol object.

        Ints are marshaled in the given byte order using as few bytes as
        possible. Buffers (bytes, array.array, ...) are used in their native
        memory layout.
        """
        if isinstance(value, int):
            if value < 0:
                raise ValueError("Negative values cannot be used as bitmap data")
            length = max(1, (value.bit_length() + 7) // 8)
            data = value.to_bytes(length, byteorder)
        else:
            try:
                data = memoryview(value).tobytes()
            except TypeError as exc:
                raise TypeError(f"Cannot build a bitmap from {type(value).__name__}") from exc
        return cls.from_bytes(data, width, height)

    @classmethod
    def from_pixels(cls, pixels: Sequence[int], width: int) -> "Raster":
        """Build a raster from a row-major sequence of 0/1 values."""
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        if not pixels or len(pixels) % width != 0:
            raise ValueError("Pixels length must be a non-zero multiple of width")
        raster = cls(width, len(pixels) // width)
        for i, pix in enumerate(pixels):
            if pix:
                raster.pix[i >> 3] |= 1 << (i & 7)
        return raster

    def get(self, x: int, y: int) -> bool:
        i = self._index(x, y)
        return bool(self.pix[i >> 3] & (1 << (i & 7)))

    def set(self, x: int, y: int, value: bool) -> None:
        i = self._index(x, y)
        if value:
            self.pix[i >> 3] |= 1 << (i & 7)
        else:
            self.pix[i >> 3] &= ~(1 << (i & 7)) & 0xFF

    def pixels(self) -> List[int]:
        """Return the row-major 0/1 values of the raster."""
        return [self.pix[i >> 3] >> (i & 7) & 1 for i in range(self.width * self.height)]

    def best(self) -> "BlockType":
        from .selection import best

        return best(self.height)

    def columns(self, block_type: Any = "") -> int:
        """Return the glyph columns per output row for the block type."""
        from .registry import GeometryRegistry

        return GeometryRegistry.default().resolve(block_type, self.height).columns(self.width)

    def rows(self, block_type: Any = "") -> int:
        """Return the number of output rows for the block type."""
        from .registry import GeometryRegistry

        return GeometryRegistry.default().resolve(block_type, self.height).rows(self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} raster")
        return y * self.width + x

    def __format__(self, spec: str) -> str:
        from .encoding import encode_to_string

        return encode_to_string(self, spec)

    def __str__(self) -> str:
        return format(self, "")

    def __bytes__(self) -> bytes:
        return str(self).encode("utf-8")
