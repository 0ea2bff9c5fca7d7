from __future__ import annotations

from .shapes import BlockType


def best(height: int) -> BlockType:
    """Return the best contiguous block type for an image of the given height."""
    if height == 1:
        return BlockType.SOLIDS
    if height <= 3:
        return BlockType.HALVES
    if height < 6:
        return BlockType.QUADS
    if height <= 24:
        return BlockType.SEXTANTS
    return BlockType.OCTANTS
