"""Tests for the packed Raster type."""

from __future__ import annotations

import array
import io

import pytest

from glyphraster.blocks import BlockType, Raster, SourceError


class _BrokenReader:
    def read(self, size: int = -1) -> bytes:
        raise OSError("disk on fire")


class TestRasterConstruction:
    def test_blank_is_all_clear(self) -> None:
        r = Raster.blank(5, 3)
        assert r.pixels() == [0] * 15
        assert len(r.pix) == 2

    def test_rejects_non_positive_dimensions(self) -> None:
        with pytest.raises(ValueError):
            Raster(0, 1)
        with pytest.raises(ValueError):
            Raster(1, -2)

    def test_none_pix_is_blank(self) -> None:
        r = Raster(2, 2, None)
        assert bytes(r.pix) == b"\x00"
        assert r.pixels() == [0] * 4

    def test_tail_bits_are_cleared(self) -> None:
        r = Raster(3, 1, bytearray(b"\xff"))
        assert bytes(r.pix) == b"\x07"

    def test_short_data_is_zero_extended(self) -> None:
        r = Raster(8, 2, bytearray(b"\x01"))
        assert bytes(r.pix) == b"\x01\x00"

    def test_from_bytes_infers_height(self) -> None:
        r = Raster.from_bytes(b"\xff", 3)
        assert (r.width, r.height) == (3, 3)
        assert r.pixels() == [1] * 8 + [0]

    def test_from_bytes_bit_order_is_lsb_first(self) -> None:
        r = Raster.from_bytes(b"\x05", 3, 1)
        assert r.pixels() == [1, 0, 1]

    def test_from_reader(self) -> None:
        r = Raster.from_reader(io.BytesIO(b"\x0f\xf0"), 4, 4)
        assert r.pixels() == [1] * 4 + [0] * 4 + [0] * 4 + [1] * 4

    def test_from_reader_wraps_os_errors(self) -> None:
        with pytest.raises(SourceError) as excinfo:
            Raster.from_reader(_BrokenReader(), 4)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_from_value_int(self) -> None:
        assert Raster.from_value(5, 3, 1).pixels() == [1, 0, 1]

    def test_from_value_int_big_endian(self) -> None:
        r = Raster.from_value(0x0100, 8, 2, byteorder="big")
        assert r.pixels() == [1] + [0] * 15

    def test_from_value_buffer(self) -> None:
        r = Raster.from_value(array.array("B", [3]), 2, 1)
        assert r.pixels() == [1, 1]

    def test_from_value_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            Raster.from_value("not bits", 2)

    def test_from_value_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            Raster.from_value(-1, 2)

    def test_from_pixels_requires_whole_rows(self) -> None:
        with pytest.raises(ValueError):
            Raster.from_pixels([1, 0, 1], 2)


class TestRasterAccess:
    def test_set_and_get(self) -> None:
        r = Raster.blank(3, 3)
        r.set(2, 1, True)
        assert r.get(2, 1)
        assert r.pix[0] == 1 << 5
        r.set(2, 1, False)
        assert not r.get(2, 1)

    def test_out_of_range(self) -> None:
        r = Raster.blank(2, 2)
        with pytest.raises(IndexError):
            r.get(2, 0)
        with pytest.raises(IndexError):
            r.set(0, -1, True)

    def test_best_uses_height(self) -> None:
        assert Raster.blank(4, 1).best() is BlockType.SOLIDS
        assert Raster.blank(4, 30).best() is BlockType.OCTANTS

    def test_columns_and_rows(self) -> None:
        r = Raster.blank(5, 5)
        assert r.columns("q") == 3
        assert r.rows("q") == 3
        assert r.columns("D") == 10
        assert r.rows("o") == 2


class TestRasterFormatting:
    def test_format_verbs(self) -> None:
        r = Raster.from_pixels([1, 0, 1], 3)
        assert format(r, "l") == "█ █"
        assert f"{r:b}" == "101"
        assert f"{r:L}" == "X X"

    def test_str_uses_best_type(self) -> None:
        r = Raster.from_pixels([1, 0, 1], 3)
        assert str(r) == "█ █"

    def test_bytes_is_utf8(self) -> None:
        r = Raster.from_pixels([1, 1], 2)
        assert bytes(r) == "██".encode("utf-8")
