"""Record framing utilities for ucgas.

This module provides utilities for delimiting streams of binary frames with
length prefixes or hex lines.
"""

from __future__ import annotations

from .records import RECORD_FORMATS, RecordFormat, frame_record, iter_records

__all__ = [
    "frame_record",
    "iter_records",
    "RecordFormat",
    "RECORD_FORMATS",
]
