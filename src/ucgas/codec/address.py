"""Address byte packing.

Every UCGv2 address is one byte: a 5-bit main unit id in bits 3-7 and a
3-bit sub unit id in bits 0-2. The same packing is reused for the
opcode/high-length byte of the header.
"""

from __future__ import annotations

import re
from typing import Optional

from .bitpack import BitPacker, BitUnpacker

MAIN_MASK = 0x1F
SUB_MASK = 0x07

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


def pack_address(main: int, sub: int) -> int:
    """Pack a (main, sub) pair into one address byte.

    Bits beyond the 5-bit main and 3-bit sub fields are masked off, not
    saturated.

    Example:
        >>> hex(pack_address(3, 4))
        '0x1c'
    """
    packer = BitPacker()
    packer.write_uint(main & MAIN_MASK, 5)
    packer.write_uint(sub & SUB_MASK, 3)
    return packer.to_bytes()[0]


def unpack_address(b: int) -> tuple[int, int]:
    """Split an address byte into its (main, sub) pair."""
    unpacker = BitUnpacker(bytes([b & 0xFF]))
    main = unpacker.read_uint(5)
    sub = unpacker.read_uint(3)
    return main, sub


def address_from_text(s: str) -> Optional[tuple[int, int]]:
    """Parse a ``"<hex>/<hex>"`` address string.

    Both sides are case-insensitive hexadecimal and must fit in one byte.
    No range clamping to the 5/3-bit fields happens here.

    Returns:
        (main, sub) tuple, or None if the string is malformed

    Example:
        >>> address_from_text("1f/7")
        (31, 7)
        >>> address_from_text("1F") is None
        True
    """
    parts = s.split("/")
    if len(parts) != 2:
        return None

    values = []
    for part in parts:
        if not _HEX_RE.fullmatch(part):
            return None
        value = int(part, 16)
        if value > 0xFF:
            return None
        values.append(value)

    return values[0], values[1]


def address_to_text(main: int, sub: int) -> str:
    """Format an address pair the way assembly text writes it."""
    return f"{main:02X}/{sub:1X}"
