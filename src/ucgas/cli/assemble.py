"""Assembler CLI command: assembly text in, framed binary records out."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Iterable, Iterator

from ..config import CodecConfig
from ..exceptions import ParseError
from ..framing import frame_record

logger = logging.getLogger(__name__)

PROMPT = "ucgas> "


def interactive_lines() -> Iterator[str]:
    """Read lines from the terminal until EOF (Ctrl-D)."""
    print("ucgas: UCGv2 Command Grammar Assembler.", file=sys.stderr)
    print("Enter one message per line; Ctrl-D to finish.", file=sys.stderr)
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            print(file=sys.stderr)
            return


def assemble_lines(lines: Iterable[str], out: BinaryIO, config: CodecConfig) -> int:
    """Assemble lines and write one record per message.

    Args:
        lines: Assembly text lines
        out: Binary stream to write records to
        config: Mode and framing options

    Returns:
        Number of lines that failed to parse
    """
    message_class = config.message_class
    errors = 0

    for line_number, line in enumerate(lines, 1):
        try:
            message = message_class.from_asm(line, config.emit_comments)
        except ParseError as e:
            if e.is_skip:
                continue
            if line.lstrip().startswith("#"):
                print(e.message.rstrip("\r\n"), file=sys.stderr)
                continue

            errors += 1
            logger.error("line %d: %s", line_number, e.message)
            if not config.keep_going:
                break
            continue

        logger.debug("line %d: %r", line_number, message)
        out.write(frame_record(message.to_bytes(), record_format=config.record_format))
        out.flush()

    return errors
