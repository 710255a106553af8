"""Binary decoder for UCGv2 messages.

This module provides the decode() function that converts a binary frame back
to a Frame or ScriptedMessage.
"""

from __future__ import annotations

import logging
import struct
from typing import Optional, TypeVar

from ..exceptions import DecodeError
from ..models.base import UcgMessage
from ..models.frame import Frame
from ..models.scripted import ScriptedMessage
from ..opcodes import MAX_OPCODE
from .bitpack import BitUnpacker
from .encoder import HEADER_SIZE, RELATIVE_FLAG, TIMESTAMP_SIZE

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=UcgMessage)


def decode(message_class: type[M], data: bytes) -> M:
    """Decode a binary frame to a UCGv2 message.

    Everything after the 4-byte header becomes the payload verbatim; the
    declared length is not enforced against it.

    Args:
        message_class: Frame or ScriptedMessage
        data: Binary data to decode

    Returns:
        Decoded message instance

    Raises:
        DecodeError: If data is truncated or the opcode is out of range.
            No partial message is returned.

    Examples:
        ```python
        from ucgas import Frame, decode

        frame = decode(Frame, b"\\x1c\\xff\\x08\\x01\\x01")
        frame.op      # 1
        frame.data    # b'\\x01'
        ```
    """
    data = bytes(data)

    if issubclass(message_class, ScriptedMessage):
        return message_class(**_decode_scripted_fields(data))
    if issubclass(message_class, Frame):
        return message_class(**_decode_frame_fields(data))

    raise DecodeError(f"Cannot decode to {message_class.__name__}: not a UCGv2 message")


def try_decode(message_class: type[M], data: bytes) -> Optional[M]:
    """Decode a binary frame, returning None instead of raising on failure.

    Example:
        >>> try_decode(Frame, b"\\x1c\\xff") is None
        True
    """
    try:
        return decode(message_class, data)
    except DecodeError as e:
        logger.debug("Rejected %d-byte record: %s", len(data), e)
        return None


def _decode_frame_fields(data: bytes) -> dict:
    if len(data) < HEADER_SIZE:
        raise DecodeError(
            f"Truncated frame: need at least {HEADER_SIZE} header bytes, got {len(data)}"
        )

    unpacker = BitUnpacker(data[:HEADER_SIZE])
    target = unpacker.read_uint(5)
    subtarget = unpacker.read_uint(3)
    source = unpacker.read_uint(5)
    subsource = unpacker.read_uint(3)
    op = unpacker.read_uint(5)
    length_high = unpacker.read_uint(3)
    length_low = unpacker.read_uint(8)

    if op > MAX_OPCODE:
        raise DecodeError(f"Invalid opcode {op} (max: {MAX_OPCODE})")

    return {
        "target": target,
        "subtarget": subtarget,
        "source": source,
        "subsource": subsource,
        "op": op,
        "length": (length_high << 8) | length_low,
        "data": data[HEADER_SIZE:],
    }


def _decode_scripted_fields(data: bytes) -> dict:
    if len(data) < TIMESTAMP_SIZE:
        raise DecodeError(
            f"Truncated scripted message: need {TIMESTAMP_SIZE} timestamp bytes, got {len(data)}"
        )

    (word,) = struct.unpack("<I", data[:TIMESTAMP_SIZE])

    return {
        "frame": Frame(**_decode_frame_fields(data[TIMESTAMP_SIZE:])),
        "is_relative": bool(word & RELATIVE_FLAG),
        "timestamp": word & ~RELATIVE_FLAG,
    }
