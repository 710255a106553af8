"""Record framing for streams of binary frames.

A UCGv2 frame carries no total-size field (its payload may be shorter than
the declared length), so a stream of frames needs an outer record boundary.
Two record formats are supported:

- ``"length"``: [Length (4 bytes, big-endian)] [Record]
- ``"hex"``: one uppercase hex string per line
"""

from __future__ import annotations

import struct
from typing import Iterator, Literal

from ..exceptions import FramingError

RecordFormat = Literal["length", "hex"]

RECORD_FORMATS: tuple[str, ...] = ("length", "hex")

LENGTH_PREFIX_SIZE = 4


def frame_record(payload: bytes, *, record_format: RecordFormat = "length") -> bytes:
    """Wrap one encoded message for writing to a stream.

    Args:
        payload: Encoded frame or scripted message
        record_format: "length" for a 4-byte big-endian length prefix,
            "hex" for a newline-terminated hex line

    Returns:
        Framed record

    Example:
        >>> frame_record(b"\\x1c\\xff\\x08\\x00")
        b'\\x00\\x00\\x00\\x04\\x1c\\xff\\x08\\x00'
        >>> frame_record(b"\\x1c\\xff\\x08\\x00", record_format="hex")
        b'1CFF0800\\n'
    """
    if record_format == "length":
        return struct.pack(">I", len(payload)) + payload
    if record_format == "hex":
        return payload.hex().upper().encode("ascii") + b"\n"
    raise ValueError(f"Invalid record format: {record_format}. Must be 'length' or 'hex'")


def iter_records(data: bytes, *, record_format: RecordFormat = "length") -> Iterator[bytes]:
    """Split a stream buffer back into encoded messages.

    Args:
        data: Concatenated records
        record_format: Format used by frame_record()

    Yields:
        Each record's payload, in order

    Raises:
        FramingError: If a record is truncated or a hex line is malformed

    Example:
        >>> list(iter_records(b"1CFF0800\\n\\n1CFF0801AA\\n", record_format="hex"))
        [b'\\x1c\\xff\\x08\\x00', b'\\x1c\\xff\\x08\\x01\\xaa']
    """
    if record_format == "length":
        yield from _iter_length_prefixed(data)
    elif record_format == "hex":
        yield from _iter_hex_lines(data)
    else:
        raise ValueError(f"Invalid record format: {record_format}. Must be 'length' or 'hex'")


def _iter_length_prefixed(data: bytes) -> Iterator[bytes]:
    position = 0
    while position < len(data):
        if len(data) - position < LENGTH_PREFIX_SIZE:
            raise FramingError(
                f"Record too short for length prefix at offset {position}: "
                f"{len(data) - position} bytes"
            )

        (length,) = struct.unpack(">I", data[position : position + LENGTH_PREFIX_SIZE])
        position += LENGTH_PREFIX_SIZE

        if len(data) - position < length:
            raise FramingError(
                f"Length mismatch: prefix says {length} bytes, "
                f"but only {len(data) - position} bytes remain"
            )

        yield data[position : position + length]
        position += length


def _iter_hex_lines(data: bytes) -> Iterator[bytes]:
    for line_number, line in enumerate(data.splitlines(), 1):
        text = line.strip()
        if not text:
            continue
        try:
            yield bytes.fromhex(text.decode("ascii"))
        except (UnicodeDecodeError, ValueError) as e:
            raise FramingError(f"Invalid hex record on line {line_number}: {e}") from e
