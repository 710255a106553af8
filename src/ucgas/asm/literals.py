"""Typed literal parsing for assembly data arguments.

Each data token after the frame header encodes one value. The first
character selects its kind:

- ``D``: signed decimal integer, minimal width
- ``F``: single-precision float, 4 bytes
- ``L``: double-precision float, 8 bytes
- ``C``: character string, raw bytes
- anything else: hexadecimal integer (up to 32 digits), minimal width.
  Hex values whose first digit is C, D or F need a leading zero ("0FF").

All multi-byte values are little-endian.
"""

from __future__ import annotations

import logging
import math
import re
import struct
from typing import Iterable

from ..exceptions import ParseError
from ..utils.sizing import MAX_WIDTH, minimal_width

logger = logging.getLogger(__name__)

MAX_HEX_DIGITS = 32

_INT128_MIN = -(1 << 127)
_INT128_MAX = (1 << 127) - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


def _int_bytes(value: int, token: str) -> bytes:
    width = minimal_width(value)
    if width == MAX_WIDTH and not -(1 << 63) <= value < (1 << 64):
        logger.warning("Literal %s exceeds 64 bits; truncated to its low 8 bytes", token)
    mask = (1 << (8 * width)) - 1
    return (value & mask).to_bytes(width, "little")


def _parse_decimal(token: str) -> bytes:
    body = token[1:]
    if not _DECIMAL_RE.fullmatch(body):
        raise ParseError(f'Malformed decimal data argument: "{token}"')
    value = int(body)
    if not _INT128_MIN <= value <= _INT128_MAX:
        raise ParseError(f'Malformed decimal data argument: "{token}"')
    return _int_bytes(value, token)


def _parse_hex(token: str) -> bytes:
    if len(token) > MAX_HEX_DIGITS:
        raise ParseError(f'Integer argument too large: "{token}"')
    if not _HEX_RE.fullmatch(token):
        raise ParseError(f'Malformed hexadecimal data argument: "{token}"')
    return _int_bytes(int(token, 16), token)


def _parse_float(token: str, fmt: str, kind: str) -> bytes:
    body = token[1:]
    # float() also accepts digit separators, which token syntax does not
    if "_" in body:
        raise ParseError(f'Malformed {kind} data argument: "{token}"')
    try:
        value = float(body)
    except ValueError as e:
        raise ParseError(f'Malformed {kind} data argument: "{token}"') from e

    try:
        return struct.pack(fmt, value)
    except OverflowError:
        # Out of float32 range rounds to infinity
        return struct.pack(fmt, math.copysign(math.inf, value))


def parse_literal(token: str) -> bytes:
    """Convert one data token to its little-endian byte encoding.

    Args:
        token: Whitespace-free data token (already uppercased by the line parser)

    Returns:
        Encoded bytes

    Raises:
        ParseError: If the token body is malformed

    Examples:
        >>> parse_literal("D10000")
        b"\\x10'"
        >>> parse_literal("F202.5")
        b'\\x00\\x80JC'
        >>> parse_literal("CHI")
        b'HI'
        >>> parse_literal("0FF00")
        b'\\x00\\xff'
    """
    if not token:
        raise ParseError("Empty data argument")

    prefix = token[0]
    if prefix == "D":
        return _parse_decimal(token)
    if prefix == "F":
        return _parse_float(token, "<f", "floating-point")
    if prefix == "L":
        return _parse_float(token, "<d", "double-precision")
    if prefix == "C":
        return token[1:].encode("utf-8")
    return _parse_hex(token)


def parse_literals(tokens: Iterable[str]) -> bytes:
    """Concatenate the encodings of several data tokens in order."""
    data = bytearray()
    for token in tokens:
        data.extend(parse_literal(token))
    return bytes(data)

