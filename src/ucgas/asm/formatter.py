"""Assembly-text formatter for UCGv2 messages."""

from __future__ import annotations

from ..codec.address import address_to_text
from ..models.frame import Frame
from ..models.scripted import ScriptedMessage


def _format_byte(value: int, print_decimal: bool) -> str:
    return f"D{value}" if print_decimal else f"{value:02X}"


def _format_data(frame: Frame, print_decimal: bool) -> list[str]:
    if frame.length == 0 or not frame.data:
        return []

    # First byte is usually a register or subroutine index
    parts = [f"{frame.data[0]:02X}"]
    rest = frame.data[1:]

    if (frame.length - 1) % 2 == 0:
        # Little-endian 16-bit groups
        for i in range(0, len(rest) - 1, 2):
            value = rest[i] | (rest[i + 1] << 8)
            parts.append(f"D{value}" if print_decimal else f"{value:04X}")
        if len(rest) % 2:
            parts.append(_format_byte(rest[-1], print_decimal))
    else:
        parts.extend(_format_byte(b, print_decimal) for b in rest)

    return parts


def format_frame(frame: Frame, print_decimal: bool = False) -> str:
    """Format a Frame as one assembly line (no trailing newline).

    The header is always ``TT/t SS/s MNEMONIC LLL``. For the payload, the
    first byte is printed alone; the remaining bytes are grouped into
    little-endian 16-bit values when ``length - 1`` is even and printed one
    by one otherwise.

    Args:
        frame: Frame to format
        print_decimal: Print payload values as ``D<decimal>`` instead of hex

    Examples:
        >>> frame = Frame(target=3, subtarget=4, source=0x1F, subsource=7,
        ...               op=1, length=3, data=b"\\x01\\x39\\x30")
        >>> format_frame(frame)
        '03/4 1F/7 RQRY 003 01 3039'
        >>> format_frame(frame, print_decimal=True)
        '03/4 1F/7 RQRY 003 01 D12345'
    """
    parts = [
        address_to_text(frame.target, frame.subtarget),
        address_to_text(frame.source, frame.subsource),
        frame.mnemonic,
        f"{frame.length:03d}",
    ]
    parts.extend(_format_data(frame, print_decimal))
    return " ".join(parts)


def format_scripted(message: ScriptedMessage, print_decimal: bool = False) -> str:
    """Format a ScriptedMessage as one assembly line.

    Example:
        >>> format_scripted(ScriptedMessage(frame=frame, timestamp=5))
        '+5s 03/4 1F/7 RQRY 003 01 3039'
    """
    prefix = f"+{message.timestamp}s" if message.is_relative else "ABSOLUTE"
    return f"{prefix} {format_frame(message.frame, print_decimal)}"
