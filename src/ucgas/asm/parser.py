"""Assembly-text parser for UCGv2 messages.

Immediate-mode line grammar (case-insensitive, whitespace separated)::

    <target>/<sub> <source>/<sub> <MNEMONIC> <length> [data ...]

Scripted-mode lines are prefixed by a timestamp token, ``+<decimal>`` for a
relative offset. Lines whose first token starts with ``#`` are comments.
"""

from __future__ import annotations

import re
import string

from ..codec.address import address_from_text
from ..exceptions import ParseError
from ..models.frame import MAX_LENGTH_FIELD, MAX_MAIN_ADDRESS, MAX_SUB_ADDRESS, Frame
from ..models.scripted import MAX_TIMESTAMP, ScriptedMessage
from ..opcodes import opcode_of
from .literals import parse_literals

_LENGTH_RE = re.compile(r"[0-9]+")
_RELATIVE_RE = re.compile(r"\+([0-9]+)S?")
_ABSOLUTE_RE = re.compile(r"[0-9]+")

# Only ASCII letters fold; string literal bodies keep other characters
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _check_skip(line: str, tokens: list[str], emit_comments: bool) -> None:
    """Raise the skip signal for blank lines and comments."""
    if not tokens:
        raise ParseError("")
    if tokens[0].startswith("#"):
        raise ParseError(line if emit_comments else "")


def _parse_address(tokens: list[str], index: int, field: str) -> tuple[int, int]:
    if index >= len(tokens):
        raise ParseError(f"Missing {field} address.")

    token = tokens[index]
    address = None
    if 3 <= len(token) <= 4 and "/" in token:
        address = address_from_text(token)
    if address is None:
        raise ParseError(f'Invalid {field} address syntax: "{token}".')

    main, sub = address
    if main > MAX_MAIN_ADDRESS or sub > MAX_SUB_ADDRESS:
        raise ParseError(
            f'{field.capitalize()} address out of range: "{token}" '
            f"(max {MAX_MAIN_ADDRESS:02X}/{MAX_SUB_ADDRESS:1X})."
        )
    return main, sub


def _parse_tokens(tokens: list[str]) -> Frame:
    target, subtarget = _parse_address(tokens, 0, "target")
    source, subsource = _parse_address(tokens, 1, "source")

    if len(tokens) < 3:
        raise ParseError("Missing opcode.")
    op = opcode_of(tokens[2])
    if op is None:
        raise ParseError(f'Invalid opcode: "{tokens[2]}".')

    if len(tokens) < 4:
        raise ParseError("Missing length specifier.")
    if not _LENGTH_RE.fullmatch(tokens[3]):
        raise ParseError(f'Invalid length specifier: "{tokens[3]}".')
    length = int(tokens[3])
    if length >= MAX_LENGTH_FIELD:
        raise ParseError(f"Payload length {length} too large.")

    data = parse_literals(tokens[4:])
    if len(data) > length:
        raise ParseError(
            f"Data arguments of size {len(data)} exceed payload length {length}."
        )

    return Frame(
        target=target,
        subtarget=subtarget,
        source=source,
        subsource=subsource,
        op=op,
        length=length,
        data=data,
    )


def parse_frame(line: str, emit_comments: bool = False) -> Frame:
    """Parse one immediate-mode assembly line.

    Args:
        line: Assembly text (ASCII case-insensitive)
        emit_comments: If True, a comment line raises ParseError carrying the
            uppercased line instead of the empty skip signal

    Returns:
        Parsed Frame

    Raises:
        ParseError: Naming the offending token and field, or the skip signal
            (empty message) for comments and blank lines

    Example:
        >>> frame = parse_frame("03/4 1f/7 rval 003 01 D10000")
        >>> frame.op, frame.length, frame.data
        (5, 3, b"\\x01\\x10'")
    """
    upper = line.translate(_ASCII_UPPER)
    tokens = upper.split()
    _check_skip(upper, tokens, emit_comments)
    return _parse_tokens(tokens)


def parse_scripted(line: str, emit_comments: bool = False) -> ScriptedMessage:
    """Parse one scripted-mode assembly line.

    The first token is the timestamp. ``+<decimal>`` (optionally followed by
    ``S``, as formatted output writes it) is a relative offset. A bare
    decimal is an absolute timestamp, which is recognised but not supported.

    Example:
        >>> msg = parse_scripted("+250 03/4 1F/7 NOP 000")
        >>> msg.is_relative, msg.timestamp, msg.frame.op
        (True, 250, 0)
    """
    upper = line.translate(_ASCII_UPPER)
    tokens = upper.split()
    _check_skip(upper, tokens, emit_comments)

    stamp = tokens[0]
    match = _RELATIVE_RE.fullmatch(stamp)
    if match is None:
        if _ABSOLUTE_RE.fullmatch(stamp):
            raise ParseError(f'Absolute timestamps are unsupported: "{stamp}".')
        raise ParseError(
            f'Invalid timestamp: "{stamp}". Use immediate mode for lines without timestamps.'
        )

    timestamp = int(match.group(1))
    if timestamp > MAX_TIMESTAMP:
        raise ParseError(f"Timestamp {timestamp} too large (max {MAX_TIMESTAMP}).")

    if len(tokens) < 2:
        raise ParseError("Missing target address.")

    frame = parse_frame(" ".join(tokens[1:]), emit_comments)
    return ScriptedMessage(frame=frame, is_relative=True, timestamp=timestamp)
