"""Scripted UCGv2 message model: a frame paired with a timestamp."""

from __future__ import annotations

from pydantic import Field

from .base import UcgMessage
from .frame import Frame

# Top bit of the wire word carries the relative flag
MAX_TIMESTAMP = 0x7FFFFFFF


class ScriptedMessage(UcgMessage):
    """A Frame scheduled for sequenced or offline playback.

    Attributes:
        frame: The wrapped immediate frame (exclusively owned)
        is_relative: True if timestamp is an offset from a reference instant
        timestamp: 31-bit unsigned timestamp
    """

    frame: Frame
    is_relative: bool = True
    timestamp: int = Field(ge=0, le=MAX_TIMESTAMP)

    def to_bytes(self) -> bytes:
        from ..codec.encoder import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> ScriptedMessage:
        from ..codec.decoder import decode

        return decode(cls, data)

    def to_asm(self, print_decimal: bool = False) -> str:
        from ..asm.formatter import format_scripted

        return format_scripted(self, print_decimal)

    @classmethod
    def from_asm(cls, line: str, emit_comments: bool = False) -> ScriptedMessage:
        from ..asm.parser import parse_scripted

        return parse_scripted(line, emit_comments)
