"""Disassembler CLI command: framed binary records in, assembly text out."""

from __future__ import annotations

import logging
from typing import TextIO

from ..codec import decode
from ..config import CodecConfig
from ..exceptions import DecodeError, FramingError
from ..framing import iter_records

logger = logging.getLogger(__name__)


def disassemble_records(data: bytes, out: TextIO, config: CodecConfig) -> int:
    """Decode every record in ``data`` and write one assembly line each.

    Args:
        data: Framed binary records
        out: Text stream to write assembly lines to
        config: Mode, framing and formatting options

    Returns:
        Number of records (or framing failures) that could not be decoded
    """
    message_class = config.message_class
    errors = 0

    try:
        for index, record in enumerate(iter_records(data, record_format=config.record_format), 1):
            try:
                message = decode(message_class, record)
            except DecodeError as e:
                errors += 1
                logger.error("record %d: %s", index, e)
                if not config.keep_going:
                    break
                continue

            logger.debug("record %d: %r", index, message)
            out.write(message.to_asm(config.print_decimal) + "\n")
    except FramingError as e:
        errors += 1
        logger.error("%s", e)

    return errors
