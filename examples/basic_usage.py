#!/usr/bin/env python3
"""Basic usage example for pbwire.

This example demonstrates:
1. Encoding a tag-indexed mapping to wire bytes
2. Decoding wire bytes without a schema
3. Bridging JSON payloads that carry raw bytes as hex
"""

from __future__ import annotations

import json

from pbwire import decode, encode, prepare_payload, to_jsonable


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("pbwire Basic Usage Example")
    print("=" * 60)
    print()

    # Build a message: tags map to ints, strings, bytes or nested mappings
    print("1. Encoding a message...")
    message = {1: 150, 2: "testing", 3: {1: True, 2: b"\xff\xfe"}, 4: [7, 8, 9]}
    data = encode(message)
    print(f"   Message: {message}")
    print(f"   Encoded: {data.hex()} ({len(data)} bytes)")
    print()

    # Decoding guesses what each length-delimited field holds
    print("2. Decoding without a schema...")
    decoded = decode(data)
    print(f"   Decoded: {decoded}")
    print("   Note: True comes back as 1; bytes that are not UTF-8 stay bytes")
    print()

    # JSON has no bytes: use "hex->" strings
    print("3. Bridging a JSON payload...")
    text = '{"1": {"1": "hello"}, "2": "hex->deadbeef"}'
    payload = prepare_payload(json.loads(text))
    print(f"   JSON:    {text}")
    print(f"   Payload: {payload}")
    print(f"   Encoded: {encode(payload).hex()}")
    print(f"   As JSON: {json.dumps(to_jsonable(decode(encode(payload))))}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
