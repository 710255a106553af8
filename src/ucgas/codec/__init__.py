"""Binary codec for ucgas.

This module provides encoding and decoding of UCGv2 wire frames and the
address-byte packing they are built from.
"""

from __future__ import annotations

from .address import address_from_text, address_to_text, pack_address, unpack_address
from .decoder import decode, try_decode
from .encoder import HEADER_SIZE, TIMESTAMP_SIZE, encode

__all__ = [
    "encode",
    "decode",
    "try_decode",
    "pack_address",
    "unpack_address",
    "address_from_text",
    "address_to_text",
    "HEADER_SIZE",
    "TIMESTAMP_SIZE",
]
