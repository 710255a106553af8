"""Configuration for the assembler and disassembler front ends.

The codec itself is stateless and takes plain keyword arguments; this
dataclass collects the options a batch run over many lines or records needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .framing import RECORD_FORMATS
from .models import Frame, ScriptedMessage, UcgMessage


@dataclass
class CodecConfig:
    """Options for assembling or disassembling a stream of messages.

    Attributes:
        immediate: Use immediate-mode frames instead of scripted messages
            (default False, i.e. every line carries a timestamp)
        record_format: Binary stream framing, "length" (4-byte big-endian
            prefix per record) or "hex" (one hex line per record)
        print_decimal: Disassemble payload values as D<decimal> instead of hex
        emit_comments: Report comment lines instead of silently skipping them
        keep_going: Report errors and continue instead of stopping at the first

    Examples:
        ```python
        from ucgas.config import CodecConfig

        # Immediate frames written as hex lines
        config = CodecConfig(immediate=True, record_format="hex")
        ```
    """

    immediate: bool = False
    record_format: str = "length"
    print_decimal: bool = False
    emit_comments: bool = False
    keep_going: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.record_format not in RECORD_FORMATS:
            raise ValueError(
                f"record_format must be one of {', '.join(RECORD_FORMATS)}, "
                f"got {self.record_format!r}"
            )

    @property
    def message_class(self) -> type[UcgMessage]:
        """Message kind selected by ``immediate``."""
        return Frame if self.immediate else ScriptedMessage
