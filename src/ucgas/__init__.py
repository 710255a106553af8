"""ucgas: UCGv2 Command Grammar Assembler

A Python codec for UCGv2 command-grammar messages: the compact 4-byte-header
binary frame used by the embedded control protocol, and the human-readable
assembly-text line describing the same frame.

Key Features:
- Pydantic-based Frame and ScriptedMessage models
- Byte-exact binary encode/decode
- Assembly parser with typed literals (hex, D decimal, F float, L double, C string)
- Readable disassembly with register/16-bit payload grouping

Quick Start:
    >>> from ucgas import Frame, decode, encode
    >>>
    >>> frame = Frame.from_asm("03/4 1F/7 RVAL 003 01 D10000")
    >>> data = encode(frame)
    >>> decode(Frame, data).to_asm(print_decimal=True)
    '03/4 1F/7 RVAL 003 01 D10000'
"""

from __future__ import annotations

from .asm import format_line, parse_line, parse_literal
from .codec import (
    address_from_text,
    decode,
    encode,
    pack_address,
    try_decode,
    unpack_address,
)
from .config import CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    FramingError,
    ParseError,
    UcgError,
)
from .framing import frame_record, iter_records
from .models import Frame, ScriptedMessage, UcgMessage
from .opcodes import MAX_OPCODE, Opcode, opcode_of, text_of
from .utils import encoded_size, minimal_width

__version__ = "0.2.0"

__all__ = [
    # Core API
    "Frame",
    "ScriptedMessage",
    "UcgMessage",
    "encode",
    "decode",
    "try_decode",
    "parse_line",
    "format_line",
    # Opcodes
    "Opcode",
    "MAX_OPCODE",
    "text_of",
    "opcode_of",
    # Addresses and literals
    "pack_address",
    "unpack_address",
    "address_from_text",
    "parse_literal",
    "minimal_width",
    "encoded_size",
    # Exceptions
    "UcgError",
    "EncodeError",
    "DecodeError",
    "ParseError",
    "FramingError",
    # Framing
    "frame_record",
    "iter_records",
    # Configuration
    "CodecConfig",
    # Version
    "__version__",
]
