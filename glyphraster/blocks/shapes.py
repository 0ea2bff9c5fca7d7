from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Tuple

from .errors import InvalidGeometry

if TYPE_CHECKING:
    from .types import Raster

Offsets = Tuple[Tuple[int, int], ...]

# Canonical bit-weight layouts: offset j is the (dx, dy) of pattern bit j.
OFFSETS_1X1: Offsets = ((0, 0),)
OFFSETS_1X2: Offsets = ((0, 0), (0, 1))
OFFSETS_2X2: Offsets = ((0, 0), (1, 0), (0, 1), (1, 1))
OFFSETS_2X3: Offsets = ((0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2))
OFFSETS_2X4: Offsets = ((0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2), (0, 3), (1, 3))


class BlockType(str, enum.Enum):
    """Block type tag. The value is the format verb for the type."""

    AUTO = "v"
    SOLIDS = "l"
    BINARIES = "b"
    XXS = "L"
    DOUBLES = "D"
    HALVES = "e"
    ASCIIS = "E"
    QUADS = "q"
    QUADS_SEPARATED = "Q"
    SEXTANTS = "x"
    SEXTANTS_SEPARATED = "X"
    OCTANTS = "o"
    BRAILLE = "O"

    @classmethod
    def parse(cls, value: Any) -> "BlockType":
        """Resolve a member, verb or member name to a block type."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value in ("", "s"):
                return cls.AUTO
            try:
                return cls(value)
            except ValueError:
                pass
            try:
                return cls[value.strip().upper().replace("-", "_")]
            except KeyError:
                pass
        raise InvalidGeometry(value)

    @property
    def verb(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()


def block_types() -> Tuple[BlockType, ...]:
    """Return every concrete block type, in registry order."""
    return tuple(typ for typ in BlockType if typ is not BlockType.AUTO)


@dataclass(frozen=True)
class Geometry:
    """Block shape: dimensions and the canonical bit-weight layout."""

    tag: BlockType
    width: int
    height: int
    offsets: Offsets
    double_wide: bool = False
    contiguous: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometry(self.tag, "block dimensions must be positive")
        for dx, dy in self.offsets:
            if not (0 <= dx < self.width and 0 <= dy < self.height):
                raise InvalidGeometry(self.tag, f"offset ({dx}, {dy}) lies outside the block")
        if len(self.offsets) != self.width * self.height or len(set(self.offsets)) != len(self.offsets):
            raise InvalidGeometry(self.tag, "offsets must cover every block cell exactly once")

    @property
    def bits(self) -> int:
        return len(self.offsets)

    @property
    def size(self) -> int:
        """Number of distinct patterns, 2 ** bits."""
        return 1 << self.bits

    @property
    def repeat(self) -> int:
        """How many times each glyph is emitted."""
        return 2 if self.double_wide else 1

    def columns(self, width: int) -> int:
        """Glyph columns for a raster of the given pixel width."""
        return self.blocks(width) * self.repeat

    def blocks(self, width: int) -> int:
        """Blocks per block row for a raster of the given pixel width."""
        return (width + self.width - 1) // self.width

    def rows(self, height: int) -> int:
        return (height + self.height - 1) // self.height

    def compose(self, raster: "Raster", bx: int, by: int) -> int:
        """Compose the pattern of block (bx, by).

        Pixels past the raster's width or height read as zero.
        """
        x0, y0 = bx * self.width, by * self.height
        pattern = 0
        for bit, (dx, dy) in enumerate(self.offsets):
            x, y = x0 + dx, y0 + dy
            if x < raster.width and y < raster.height and raster.get(x, y):
                pattern |= 1 << bit
        return pattern

    def scatter(self, raster: "Raster", bx: int, by: int, pattern: int) -> None:
        """Write the bits of pattern into block (bx, by), dropping any past the raster bounds."""
        x0, y0 = bx * self.width, by * self.height
        for bit, (dx, dy) in enumerate(self.offsets):
            x, y = x0 + dx, y0 + dy
            if x < raster.width and y < raster.height:
                raster.set(x, y, bool(pattern >> bit & 1))
