"""Assembly-text representation of UCGv2 messages.

This module provides the line parser, the line formatter and the typed
literal parser used for payload arguments.
"""

from __future__ import annotations

from typing import TypeVar

from ..models.base import UcgMessage
from .formatter import format_frame, format_scripted
from .literals import parse_literal, parse_literals
from .parser import parse_frame, parse_scripted

M = TypeVar("M", bound=UcgMessage)


def parse_line(message_class: type[M], line: str, emit_comments: bool = False) -> M:
    """Parse one assembly line as the given message kind.

    Raises:
        ParseError: If the line is malformed, or the skip signal
    """
    return message_class.from_asm(line, emit_comments)


def format_line(message: UcgMessage, print_decimal: bool = False) -> str:
    """Format a message as one assembly line."""
    return message.to_asm(print_decimal)


__all__ = [
    "parse_line",
    "format_line",
    "parse_frame",
    "parse_scripted",
    "format_frame",
    "format_scripted",
    "parse_literal",
    "parse_literals",
]
