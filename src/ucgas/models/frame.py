"""Immediate-mode UCGv2 frame model."""

from __future__ import annotations

from pydantic import Field

from ..opcodes import MAX_OPCODE, text_of
from .base import UcgMessage

MAX_MAIN_ADDRESS = 0x1F
MAX_SUB_ADDRESS = 0x07

# 11-bit header field; assembly text only accepts values below this
MAX_LENGTH_FIELD = 0x7FF


class Frame(UcgMessage):
    """One immediate command-grammar message (4-byte header + payload).

    ``length`` is the declared payload size carried in the header. It is not
    necessarily equal to ``len(data)``: assembly text may supply fewer bytes
    than declared, and binary decode keeps whatever follows the header.

    Example:
        >>> frame = Frame(target=3, subtarget=4, source=0x1F, subsource=7,
        ...               op=1, length=2, data=b"\\x01\\x02")
        >>> frame.to_asm()
        '03/4 1F/7 RQRY 002 01 02'
        >>> frame.to_bytes()
        b'\\x1c\\xff\\x08\\x02\\x01\\x02'
    """

    target: int = Field(ge=0, le=MAX_MAIN_ADDRESS)
    subtarget: int = Field(ge=0, le=MAX_SUB_ADDRESS)
    source: int = Field(ge=0, le=MAX_MAIN_ADDRESS)
    subsource: int = Field(ge=0, le=MAX_SUB_ADDRESS)
    op: int = Field(ge=0, le=MAX_OPCODE)
    length: int = Field(ge=0, le=MAX_LENGTH_FIELD)
    data: bytes = b""

    @property
    def mnemonic(self) -> str:
        """Opcode mnemonic, e.g. "RQRY"."""
        return text_of(self.op)

    def to_bytes(self) -> bytes:
        # Import here to avoid circular dependency
        from ..codec.encoder import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> Frame:
        from ..codec.decoder import decode

        return decode(cls, data)

    def to_asm(self, print_decimal: bool = False) -> str:
        from ..asm.formatter import format_frame

        return format_frame(self, print_decimal)

    @classmethod
    def from_asm(cls, line: str, emit_comments: bool = False) -> Frame:
        from ..asm.parser import parse_frame

        return parse_frame(line, emit_comments)
