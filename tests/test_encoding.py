"""Tests for the block encoder."""

from __future__ import annotations

import io
from typing import List

import pytest

from glyphraster.blocks import (
    BlockEncoder,
    BlockType,
    InvalidGeometry,
    Raster,
    SinkError,
    alphabet,
    best,
    encode,
    encode_to_string,
    iter_blocks,
)


class _FailingSink:
    def __init__(self, fail_after: int, exc: Exception) -> None:
        self.written: List[str] = []
        self.fail_after = fail_after
        self.exc = exc

    def write(self, chunk: str) -> int:
        if len(self.written) >= self.fail_after:
            raise self.exc
        self.written.append(chunk)
        return len(chunk)


class TestScenarios:
    def test_full_quad(self) -> None:
        r = Raster.from_pixels([1, 1, 1, 1], 2)
        assert encode_to_string(r, "q") == alphabet("q").glyph(15) == "█"

    def test_single_row_solids(self) -> None:
        r = Raster.from_pixels([1, 0, 1], 3)
        a = alphabet("l")
        assert list(iter_blocks(r, "l")) == [a.glyph(1), a.glyph(0), a.glyph(1)]

    def test_double_wide_repeats_glyph(self) -> None:
        r = Raster.from_pixels([1], 1)
        assert list(iter_blocks(r, BlockType.DOUBLES)) == ["█", "█"]
        assert encode_to_string(r, "D") == "██"


class TestEncoder:
    def test_rows_are_separated(self) -> None:
        r = Raster.from_pixels([1, 0, 0, 1], 2)
        assert encode_to_string(r, "l") == "█ \n █"

    def test_no_trailing_separator(self) -> None:
        r = Raster.from_pixels([1] * 8, 2)
        assert not encode_to_string(r, "e").endswith("\n")

    def test_halves(self) -> None:
        r = Raster.from_pixels([1, 0, 0, 1], 2)
        assert encode_to_string(r, "e") == "▀▄"

    def test_padding_reads_as_clear(self) -> None:
        r = Raster.from_pixels([1] * 9, 3)
        assert encode_to_string(r, "q") == "█▌\n▀▘"

    def test_double_wide_rows(self) -> None:
        r = Raster.from_pixels([1, 0], 1)
        assert encode_to_string(r, "D") == "██\n  "

    def test_braille(self) -> None:
        r = Raster.from_pixels([1, 1] * 4, 2)
        assert encode_to_string(r, "O") == "⣿"

    def test_deterministic(self) -> None:
        r = Raster.from_bytes(bytes(range(40)), 10)
        assert encode_to_string(r, "x") == encode_to_string(r, "x")

    @pytest.mark.parametrize("height", [1, 2, 3, 5, 6, 24, 25])
    def test_auto_matches_best(self, height: int) -> None:
        r = Raster.from_bytes(bytes(range(64)), 7, height)
        assert encode_to_string(r) == encode_to_string(r, best(height))

    def test_unknown_type_fails_before_iteration(self) -> None:
        with pytest.raises(InvalidGeometry):
            iter_blocks(Raster.blank(1, 1), "z")

    def test_encode_to_sink(self) -> None:
        sink = io.StringIO()
        encode(Raster.from_pixels([1, 0], 2), "b", sink)
        assert sink.getvalue() == "10"


class TestSinkFailures:
    def test_os_error_is_wrapped(self) -> None:
        sink = _FailingSink(1, OSError("broken pipe"))
        with pytest.raises(SinkError) as excinfo:
            encode(Raster.from_pixels([1, 0, 1], 3), "l", sink)
        assert isinstance(excinfo.value.__cause__, OSError)
        assert sink.written == ["█"]

    def test_closed_stream(self) -> None:
        sink = io.StringIO()
        sink.close()
        with pytest.raises(SinkError):
            encode(Raster.blank(1, 1), "l", sink)


class TestBlockEncoder:
    def test_bound_type(self) -> None:
        encoder = BlockEncoder("q")
        assert encoder.encode_to_string(Raster.from_pixels([1, 1, 1, 1], 2)) == "█"
        sink = io.StringIO()
        encoder.encode(Raster.from_pixels([0, 0, 0, 0], 2), sink)
        assert sink.getvalue() == " "

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(InvalidGeometry):
            BlockEncoder("z")
