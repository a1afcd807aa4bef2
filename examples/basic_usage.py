#!/usr/bin/env python3
"""Basic usage example for wiremsg.

This example demonstrates:
1. Building a message with headers and a payload
2. Encoding to the binary wire format
3. Decoding back to a Message
4. Handling malformed input
"""

from __future__ import annotations

import json

from wiremsg import DecodeError, Message, decode, encode, encoded_size, header_sizes


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("wiremsg Basic Usage Example")
    print("=" * 60)
    print()

    # Create a message instance
    print("1. Creating a request message...")
    body = json.dumps({"key": "value"}, separators=(",", ":")).encode("utf-8")
    msg = Message(
        headers={"X-Request-Id": "12345", "Content-Type": "application/json"},
        payload=body,
    )

    for name, value in msg.headers.items():
        print(f"   {name}: {value}")
    print(f"   Payload: {len(msg.payload)} bytes")
    print()

    # Analyze sizes
    print("2. Analyzing the size table...")
    for name, (name_len, value_len) in header_sizes(msg).items():
        print(f"   {name}: name {name_len} bytes, value {value_len} bytes")
    print(f"   Total: {encoded_size(msg)} bytes")
    print()

    # Encode the message
    print("3. Encoding to binary...")
    encoded_data = encode(msg)

    print(f"   Encoded size: {len(encoded_data)} bytes")
    print(f"   Hex: {encoded_data.hex()}")
    print()

    # Decode the message
    print("4. Decoding from binary...")
    decoded_msg = decode(encoded_data)

    for name, value in decoded_msg.headers.items():
        print(f"   {name}: {value}")
    print(f"   Payload: {decoded_msg.payload.decode('utf-8')}")
    print()

    # Verify round-trip
    print("5. Verifying round-trip...")
    if decoded_msg == msg:
        print("   ✓ Round-trip successful! Messages match.")
    else:
        print("   ✗ Round-trip failed! Messages don't match.")
    print()

    # Malformed input
    print("6. Decoding a truncated buffer...")
    try:
        decode(encoded_data[:10])
    except DecodeError as e:
        print(f"   Rejected: {type(e).__name__}: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
