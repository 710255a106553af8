"""Base message class and ucgas-specific Pydantic configuration.

This module provides the UcgMessage class that both message kinds inherit
from. It fixes the four-operation contract shared by immediate frames and
scripted messages: binary encode/decode and assembly parse/format.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="UcgMessage")


class UcgMessage(BaseModel, ABC):
    """Base class for UCGv2 messages.

    Messages are immutable value objects: they compare equal when their
    fields are equal and are constructed fresh per input line or record.
    """

    model_config = ConfigDict(
        # Value objects, never mutated after construction
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Encode this message as a binary frame."""

    @classmethod
    @abstractmethod
    def from_bytes(cls: type[M], data: bytes) -> M:
        """Decode a binary frame.

        Raises:
            DecodeError: If the frame is truncated or invalid
        """

    @abstractmethod
    def to_asm(self, print_decimal: bool = False) -> str:
        """Format this message as one assembly-text line (no newline)."""

    @classmethod
    @abstractmethod
    def from_asm(cls: type[M], line: str, emit_comments: bool = False) -> M:
        """Parse one assembly-text line.

        Raises:
            ParseError: If the line is malformed, or the skip signal for
                comment and blank lines
        """
