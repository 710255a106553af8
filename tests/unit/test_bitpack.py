"""Unit tests for header bit packing."""

from __future__ import annotations

import pytest

from ucgas.codec.bitpack import BitPacker, BitUnpacker


class TestBitPacker:
    """Test writing header fields."""

    def test_nibble_fields(self) -> None:
        """Test fields are placed MSB-first."""
        packer = BitPacker()
        packer.write_uint(0xA, 4)
        packer.write_uint(1, 2)
        packer.write_uint(2, 2)

        assert packer.to_bytes() == b"\xa6"  # 1010 01 10

    def test_address_layout(self) -> None:
        """Test a 5/3 bit split lands in one byte."""
        packer = BitPacker()
        packer.write_uint(3, 5)
        packer.write_uint(4, 3)

        assert packer.to_bytes() == b"\x1c"  # 00011 100

    def test_length_split(self) -> None:
        """Test an opcode and 11-bit length fill two bytes."""
        packer = BitPacker()
        packer.write_uint(18, 5)
        packer.write_uint(0x2A5 >> 8, 3)
        packer.write_uint(0x2A5 & 0xFF, 8)

        assert packer.to_bytes() == b"\x92\xa5"

    @pytest.mark.parametrize(
        ("value", "num_bits", "match"),
        [
            (-1, 5, "negative"),
            (0x20, 5, "more than"),
            (8, 3, "more than"),
            (0, 0, "num_bits"),
            (0, 65, "num_bits"),
        ],
    )
    def test_rejects_bad_fields(self, value: int, num_bits: int, match: str) -> None:
        """Test values that cannot be carried in the field."""
        with pytest.raises(ValueError, match=match):
            BitPacker().write_uint(value, num_bits)

    def test_partial_byte_padding(self) -> None:
        """Test a partial final byte is zero-filled."""
        packer = BitPacker()
        packer.write_uint(0x1F, 5)

        assert packer.to_bytes() == b"\xf8"  # 11111 000

    def test_empty(self) -> None:
        """Test nothing written gives no bytes."""
        packer = BitPacker()
        assert packer.to_bytes() == b""


class TestBitUnpacker:
    """Test reading header fields."""

    def test_read_header_fields(self) -> None:
        """Test reading 5/3 and 8 bit fields from a header."""
        unpacker = BitUnpacker(b"\x1c\xff\x08\x01")

        assert [unpacker.read_uint(n) for n in (5, 3, 5, 3, 5, 3, 8)] == [3, 4, 31, 7, 1, 0, 1]
        assert unpacker.bits_remaining() == 0

    def test_bits_remaining(self) -> None:
        """Test the remaining bit count drops by field width."""
        unpacker = BitUnpacker(b"\x92\xa5")

        assert unpacker.read_uint(5) == 18
        assert unpacker.bits_remaining() == 11
        assert unpacker.read_uint(11) == 0x2A5

    def test_past_end(self) -> None:
        """Test reading beyond the buffer."""
        unpacker = BitUnpacker(b"\x1c")
        unpacker.read_uint(5)

        with pytest.raises(IndexError, match="Not enough bits"):
            unpacker.read_uint(4)

    def test_rejects_bad_width(self) -> None:
        """Test zero-width reads."""
        with pytest.raises(ValueError, match="num_bits"):
            BitUnpacker(b"\x00").read_uint(0)

    def test_packer_output(self) -> None:
        """Test fields written by BitPacker read back unchanged."""
        packer = BitPacker()
        for value, width in ((0x1F, 5), (0, 3), (9, 5), (6, 3), (0xAB, 8)):
            packer.write_uint(value, width)

        unpacker = BitUnpacker(packer.to_bytes())
        assert [unpacker.read_uint(w) for w in (5, 3, 5, 3, 8)] == [0x1F, 0, 9, 6, 0xAB]
