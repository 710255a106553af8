"""Size calculation utilities.

This module picks the byte width used for integer literals in assembly text
and calculates the encoded size of messages without encoding them.
"""

from __future__ import annotations

from ..codec.encoder import HEADER_SIZE, TIMESTAMP_SIZE
from ..models.base import UcgMessage
from ..models.scripted import ScriptedMessage

# (width in bytes, smallest signed value, largest unsigned value)
_WIDTHS = (
    (1, -(1 << 7), (1 << 8) - 1),
    (2, -(1 << 15), (1 << 16) - 1),
    (4, -(1 << 31), (1 << 32) - 1),
)

MAX_WIDTH = 8


def minimal_width(value: int) -> int:
    """Return the smallest of 1, 2, 4 or 8 bytes that can hold ``value``.

    Negative values are measured against signed ranges, non-negative values
    against unsigned ranges. Both bounds are inclusive, so 255 fits in one
    byte and -128 fits in one byte.

    Values outside the 64-bit range still return 8; the caller truncates.

    Example:
        >>> minimal_width(255), minimal_width(256), minimal_width(-129)
        (1, 2, 2)
    """
    for width, signed_min, unsigned_max in _WIDTHS:
        if value < 0:
            if value >= signed_min:
                return width
        elif value <= unsigned_max:
            return width
    return MAX_WIDTH


def encoded_size(message: UcgMessage) -> int:
    """Calculate the encoded size of a message in bytes.

    Example:
        >>> encoded_size(Frame(target=3, subtarget=4, source=0x1F, subsource=7,
        ...                    op=1, length=2, data=b"\\x01\\x02"))
        6
    """
    if isinstance(message, ScriptedMessage):
        return TIMESTAMP_SIZE + encoded_size(message.frame)
    return HEADER_SIZE + len(message.data)
