"""Exception hierarchy for ucgas.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UcgError for easy catching of any ucgas-specific error.
"""

from __future__ import annotations


class UcgError(Exception):
    """Base exception for all ucgas errors."""

    pass


class EncodeError(UcgError):
    """Raised when a message cannot be serialized to a binary frame.

    Examples:
        - Field value outside the width the header can carry
        - Object passed to encode() is not a UCG message
    """

    pass


class DecodeError(UcgError):
    """Raised when a binary frame cannot be decoded.

    Examples:
        - Truncated data (fewer than 4 header bytes)
        - Opcode field greater than MAX_OPCODE
        - Missing timestamp word on a scripted message
    """

    pass


class ParseError(UcgError):
    """Raised when an assembly-text line cannot be parsed.

    The message names the offending token and field. A ParseError with an
    empty message is the skip signal for comment and blank lines; it is not
    a failure and callers should move on to the next line.

    Examples:
        - Malformed address or length token
        - Unknown opcode mnemonic
        - Data arguments exceeding the declared payload length
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    @property
    def is_skip(self) -> bool:
        """True if this is the skip signal rather than a real error."""
        return not self.message


class FramingError(UcgError):
    """Raised when record framing operations fail.

    Examples:
        - Truncated length prefix or record body
        - Hex record line containing non-hex characters
    """

    pass
