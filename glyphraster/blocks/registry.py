from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from . import alphabets
from .errors import InvalidGeometry, UnknownSymbol
from .selection import best
from .shapes import (
    OFFSETS_1X1,
    OFFSETS_1X2,
    OFFSETS_2X2,
    OFFSETS_2X3,
    OFFSETS_2X4,
    BlockType,
    Geometry,
)


class Alphabet:
    """Exhaustive, bijective pattern to glyph table for one block type."""

    def __init__(self, tag: BlockType, glyphs: Iterable[str], bits: int) -> None:
        glyphs = tuple(glyphs)
        if len(glyphs) != 1 << bits:
            raise InvalidGeometry(tag, f"expected {1 << bits} glyphs, got {len(glyphs)}")
        patterns: Dict[str, int] = {}
        for pattern, glyph in enumerate(glyphs):
            if len(glyph) != 1:
                raise InvalidGeometry(tag, f"glyph {glyph!r} is not a single character")
            if glyph in patterns:
                raise InvalidGeometry(tag, f"glyph {glyph!r} is used by patterns {patterns[glyph]} and {pattern}")
            patterns[glyph] = pattern
        self.tag = tag
        self.bits = bits
        self._glyphs = glyphs
        self._patterns = patterns

    @property
    def glyphs(self) -> Tuple[str, ...]:
        return self._glyphs

    def glyph(self, pattern: int) -> str:
        return self._glyphs[pattern]

    def pattern(self, glyph: str) -> int:
        try:
            return self._patterns[glyph]
        except KeyError:
            raise UnknownSymbol(glyph) from None

    def items(self) -> Iterator[Tuple[int, str]]:
        return enumerate(self._glyphs)

    def as_dict(self) -> Dict[int, str]:
        """Return an ordered pattern to glyph copy of the table."""
        return dict(self.items())

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f"Alphabet({self.tag.name}, {len(self)} glyphs)"


@dataclass(frozen=True)
class BlockSpec:
    geometry: Geometry
    glyphs: str


DEFAULT_SPECS: Tuple[BlockSpec, ...] = (
    BlockSpec(Geometry(BlockType.SOLIDS, 1, 1, OFFSETS_1X1, contiguous=True), alphabets.SOLIDS),
    BlockSpec(Geometry(BlockType.BINARIES, 1, 1, OFFSETS_1X1), alphabets.BINARIES),
    BlockSpec(Geometry(BlockType.XXS, 1, 1, OFFSETS_1X1), alphabets.XXS),
    BlockSpec(
        Geometry(BlockType.DOUBLES, 1, 1, OFFSETS_1X1, double_wide=True, contiguous=True),
        alphabets.SOLIDS,
    ),
    BlockSpec(Geometry(BlockType.HALVES, 1, 2, OFFSETS_1X2, contiguous=True), alphabets.HALVES),
    BlockSpec(Geometry(BlockType.ASCIIS, 1, 2, OFFSETS_1X2), alphabets.ASCIIS),
    BlockSpec(Geometry(BlockType.QUADS, 2, 2, OFFSETS_2X2, contiguous=True), alphabets.QUADS),
    BlockSpec(Geometry(BlockType.QUADS_SEPARATED, 2, 2, OFFSETS_2X2), alphabets.QUADS_SEPARATED),
    BlockSpec(Geometry(BlockType.SEXTANTS, 2, 3, OFFSETS_2X3, contiguous=True), alphabets.SEXTANTS),
    BlockSpec(Geometry(BlockType.SEXTANTS_SEPARATED, 2, 3, OFFSETS_2X3), alphabets.SEXTANTS_SEPARATED),
    BlockSpec(Geometry(BlockType.OCTANTS, 2, 4, OFFSETS_2X4, contiguous=True), alphabets.OCTANTS),
    BlockSpec(Geometry(BlockType.BRAILLE, 2, 4, OFFSETS_2X4), alphabets.BRAILLE),
)


class GeometryRegistry:
    """Block type to (Geometry, Alphabet) catalog.

    Alphabets are built on first use. The build runs under a lock so each one
    is built at most once; reads of an already built alphabet take no lock.
    """

    _default: Optional["GeometryRegistry"] = None
    _default_lock = threading.Lock()

    def __init__(self, specs: Iterable[BlockSpec] = DEFAULT_SPECS) -> None:
        self._specs: Dict[BlockType, BlockSpec] = {}
        for spec in specs:
            tag = spec.geometry.tag
            if tag is BlockType.AUTO or tag in self._specs:
                raise InvalidGeometry(tag, "cannot be registered")
            self._specs[tag] = spec
        self._alphabets: Dict[BlockType, Alphabet] = {}
        self._lock = threading.Lock()

    @classmethod
    def default(cls) -> "GeometryRegistry":
        registry = cls._default
        if registry is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
                registry = cls._default
        return registry

    @property
    def types(self) -> List[BlockType]:
        return list(self._specs)

    def geometry(self, tag: Any) -> Geometry:
        return self._spec(tag).geometry

    def alphabet(self, tag: Any) -> Alphabet:
        spec = self._spec(tag)
        tag = spec.geometry.tag
        alphabet = self._alphabets.get(tag)
        if alphabet is None:
            with self._lock:
                alphabet = self._alphabets.get(tag)
                if alphabet is None:
                    alphabet = self._build_alphabet(spec)
                    self._alphabets[tag] = alphabet
        return alphabet

    def is_contiguous(self, tag: Any) -> bool:
        return self._spec(tag).geometry.contiguous

    def resolve(self, tag: Any, height: int) -> Geometry:
        """Return the geometry for tag, resolving AUTO from the image height."""
        block_type = BlockType.parse(tag)
        if block_type is BlockType.AUTO:
            block_type = best(height)
        return self.geometry(block_type)

    @staticmethod
    def _build_alphabet(spec: BlockSpec) -> Alphabet:
        return Alphabet(spec.geometry.tag, spec.glyphs, spec.geometry.bits)

    def _spec(self, tag: Any) -> BlockSpec:
        spec = self._specs.get(BlockType.parse(tag))
        if spec is None:
            raise InvalidGeometry(tag)
        return spec


def geometry(tag: Any) -> Geometry:
    return GeometryRegistry.default().geometry(tag)


def alphabet(tag: Any) -> Alphabet:
    return GeometryRegistry.default().alphabet(tag)


def is_contiguous(tag: Any) -> bool:
    return GeometryRegistry.default().is_contiguous(tag)
