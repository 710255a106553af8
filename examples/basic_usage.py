#!/usr/bin/env python3
"""Basic usage example for ucgas.

This example demonstrates:
1. Parsing an assembly line into a Frame
2. Encoding to the compact binary format
3. Decoding back to a Frame and formatting it as text
4. Wrapping a frame in a timestamped ScriptedMessage
"""

from __future__ import annotations

from ucgas import (
    Frame,
    ParseError,
    ScriptedMessage,
    decode,
    encode,
    encoded_size,
    frame_record,
    iter_records,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ucgas Basic Usage Example")
    print("=" * 60)
    print()

    # Parse an immediate-mode line
    print("1. Parsing an assembly line...")
    line = "03/4 1F/7 RVAL 005 02 F202.5"
    frame = Frame.from_asm(line)

    print(f"   Line: {line}")
    print(f"   Target: {frame.target:02X}/{frame.subtarget}")
    print(f"   Source: {frame.source:02X}/{frame.subsource}")
    print(f"   Opcode: {frame.mnemonic} ({frame.op})")
    print(f"   Length: {frame.length}")
    print(f"   Data: {frame.data.hex()}")
    print()

    # Encode the frame
    print("2. Encoding to binary...")
    encoded = encode(frame)

    print(f"   Encoded size: {len(encoded)} bytes (expected {encoded_size(frame)})")
    print(f"   Hex: {encoded.hex()}")
    print(f"   Header: {' '.join(format(b, '08b') for b in encoded[:4])}")
    print()

    # Decode and format
    print("3. Decoding and formatting...")
    decoded = decode(Frame, encoded)

    print(f"   Hex view:     {decoded.to_asm()}")
    print(f"   Decimal view: {decoded.to_asm(print_decimal=True)}")
    if decoded == frame:
        print("   ✓ Round-trip successful!")
    else:
        print("   ✗ Round-trip failed!")
    print()

    # Scripted mode
    print("4. Scripted messages...")
    script = [
        "# Pump start-up",
        "+0 03/4 1F/7 RQRY 002 01 02",
        "+250 03/4 1F/7 RVAL 003 01 D10000",
        "+250 03/4 1F/7 JUMP 000",
    ]

    stream = b""
    for text in script:
        try:
            message = ScriptedMessage.from_asm(text)
        except ParseError as e:
            if not e.is_skip:
                print(f"   Skipped {text!r}: {e.message}")
            continue
        stream += frame_record(message.to_bytes())

    print(f"   Stream size: {len(stream)} bytes")
    for record in iter_records(stream):
        print(f"   {ScriptedMessage.from_bytes(record).to_asm(print_decimal=True)}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
