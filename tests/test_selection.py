"""Tests for block type selection by image height."""

from __future__ import annotations

import pytest

from glyphraster.blocks import BlockType, best, is_contiguous


class TestBest:
    def test_boundaries(self) -> None:
        assert best(1) is BlockType.SOLIDS
        assert best(5) is BlockType.QUADS
        assert best(25) is BlockType.OCTANTS

    @pytest.mark.parametrize(
        "height, expected",
        [
            (2, BlockType.HALVES),
            (3, BlockType.HALVES),
            (4, BlockType.QUADS),
            (6, BlockType.SEXTANTS),
            (24, BlockType.SEXTANTS),
            (1000, BlockType.OCTANTS),
        ],
    )
    def test_thresholds(self, height: int, expected: BlockType) -> None:
        assert best(height) is expected

    @pytest.mark.parametrize("height", range(1, 40))
    def test_always_contiguous(self, height: int) -> None:
        assert is_contiguous(best(height))
