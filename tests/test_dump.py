"""Tests for the alphabet diagram."""

from __future__ import annotations

import io

from glyphraster.dump import dump, dump_string, split_mask


class TestSplitMask:
    def test_one_bit(self) -> None:
        assert split_mask(1, 1) == ["X"]

    def test_two_bits_one_per_line(self) -> None:
        assert split_mask(0b01, 2) == ["X", " "]

    def test_wide_masks_two_per_line(self) -> None:
        assert split_mask(0b0101, 4) == ["X ", "X "]
        assert split_mask(0b10000001, 8) == ["X ", "  ", "  ", " X"]


class TestDump:
    def test_solids(self) -> None:
        assert dump_string("l") == "   | █|\n\n  0: | | │ │\n\n  1: |X| │█│\n"

    def test_doubles_use_solid_glyphs(self) -> None:
        assert dump_string("D") == dump_string("l")

    def test_quads_layout(self) -> None:
        lines = dump_string("q").split("\n")
        assert lines[0] == "   | ▘▝▀▖▌▞▛|"
        assert lines[1] == "   |▗▚▐▜▄▙▟█|"
        assert lines[2] == ""
        assert lines[3] == "  0: |  | │ │"
        assert lines[4] == "     |  |"
        assert "  9: |X | │▚│" in lines
        assert lines.count("") == 17

    def test_writes_to_stream(self) -> None:
        out = io.StringIO()
        dump("b", out)
        assert out.getvalue().startswith("   |01|\n")
