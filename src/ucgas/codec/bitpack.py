"""Bit-level packing and unpacking utilities.

UCGv2 headers are built from 5-bit/3-bit address pairs and an 11-bit length
split across two bytes. These helpers write and read such fields MSB-first
into a byte buffer.
"""

from __future__ import annotations


class BitPacker:
    """Accumulates fixed-width unsigned fields into bytes.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_uint(3, num_bits=5)
        >>> packer.write_uint(4, num_bits=3)
        >>> packer.to_bytes()
        b'\\x1c'
    """

    def __init__(self) -> None:
        self._value = 0
        self._num_bits = 0

    def write_uint(self, value: int, num_bits: int) -> None:
        """Append ``value`` as a ``num_bits``-wide field after the bits already written.

        Args:
            value: Field value (non-negative)
            num_bits: Field width in bits, 1 to 64

        Raises:
            ValueError: If the width is invalid or the value does not fit
        """
        if value < 0:
            raise ValueError(f"Field value must not be negative, got {value}")
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Field value {value} needs more than {num_bits} bits (max: {max_value})")

        self._value = (self._value << num_bits) | value
        self._num_bits += num_bits

    def to_bytes(self) -> bytes:
        """Return the fields as bytes, most significant bit first.

        A partial final byte is filled with zero bits on its low end.
        """
        if not self._num_bits:
            return b""

        padding = (-self._num_bits) % 8
        num_bytes = (self._num_bits + padding) // 8
        return (self._value << padding).to_bytes(num_bytes, "big")


class BitUnpacker:
    """Reads fixed-width unsigned fields back out of bytes.

    Example:
        >>> unpacker = BitUnpacker(b"\\x1c")
        >>> unpacker.read_uint(5), unpacker.read_uint(3)
        (3, 4)
    """

    def __init__(self, data: bytes) -> None:
        self._value = int.from_bytes(data, "big")
        self._total_bits = len(data) * 8
        self._position = 0

    def read_uint(self, num_bits: int) -> int:
        """Consume the next ``num_bits``-wide field and return its value.

        Args:
            num_bits: Field width in bits, 1 to 64

        Raises:
            ValueError: If the width is invalid
            IndexError: If the buffer ends before the field does
        """
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        if num_bits > self.bits_remaining():
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {self.bits_remaining()}"
            )

        shift = self._total_bits - self._position - num_bits
        self._position += num_bits
        return (self._value >> shift) & ((1 << num_bits) - 1)

    def bits_remaining(self) -> int:
        """Bits left to read."""
        return self._total_bits - self._position
