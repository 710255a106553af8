"""Binary encoder for UCGv2 messages.

This module provides the encode() function that converts a Frame or
ScriptedMessage to its wire representation.
"""

from __future__ import annotations

import struct

from ..exceptions import EncodeError
from ..models.base import UcgMessage
from ..models.frame import Frame
from ..models.scripted import ScriptedMessage
from .address import MAIN_MASK, SUB_MASK
from .bitpack import BitPacker

HEADER_SIZE = 4
TIMESTAMP_SIZE = 4

RELATIVE_FLAG = 0x80000000


def encode(message: UcgMessage) -> bytes:
    """Encode a UCGv2 message to its binary frame.

    Frame layout:
        - byte 0: target (5 bits) / subtarget (3 bits)
        - byte 1: source (5 bits) / subsource (3 bits)
        - byte 2: opcode (5 bits) / length bits 8-10 (3 bits)
        - byte 3: length bits 0-7
        - payload bytes

    A scripted message prepends a little-endian 32-bit timestamp word whose
    top bit is set for relative timestamps.

    Args:
        message: Frame or ScriptedMessage instance

    Returns:
        Binary representation

    Raises:
        EncodeError: If message is not a UCGv2 message

    Examples:
        ```python
        from ucgas import Frame, ScriptedMessage, encode

        frame = Frame(target=3, subtarget=4, source=0x1F, subsource=7,
                      op=1, length=2, data=b"\\x01\\x02")
        encode(frame)  # b'\\x1c\\xff\\x08\\x02\\x01\\x02'

        scripted = ScriptedMessage(frame=frame, is_relative=True, timestamp=10)
        encode(scripted)  # b'\\x0a\\x00\\x00\\x80' + encode(frame)
        ```
    """
    if isinstance(message, ScriptedMessage):
        return _encode_scripted(message)
    if isinstance(message, Frame):
        return _encode_frame(message)
    raise EncodeError(f"Cannot encode {type(message).__name__}: not a UCGv2 message")


def _encode_frame(frame: Frame) -> bytes:
    packer = BitPacker()
    packer.write_uint(frame.target & MAIN_MASK, 5)
    packer.write_uint(frame.subtarget & SUB_MASK, 3)
    packer.write_uint(frame.source & MAIN_MASK, 5)
    packer.write_uint(frame.subsource & SUB_MASK, 3)
    packer.write_uint(frame.op & MAIN_MASK, 5)
    # Upper 3 bits of the 11-bit length share a byte with the opcode
    packer.write_uint((frame.length >> 8) & SUB_MASK, 3)
    packer.write_uint(frame.length & 0xFF, 8)

    return packer.to_bytes() + bytes(frame.data)


def _encode_scripted(message: ScriptedMessage) -> bytes:
    word = message.timestamp & ~RELATIVE_FLAG
    if message.is_relative:
        word |= RELATIVE_FLAG

    return struct.pack("<I", word) + _encode_frame(message.frame)
