"""Base-128 varint encoding and decoding.

Varints are little-endian groups of 7 value bits; the high bit of each byte
(0x80) marks that another byte follows. Values are unsigned 32-bit: encoding
masks its input to 32 bits, and decoding rejects any varint whose value
would need more.
"""

from __future__ import annotations

from ..exceptions import TruncatedFieldError, VarintOverflowError
from .wire import VARINT_BITS, VARINT_MASK, Payload


def encode_varint(value: int) -> bytes:
    """Encode an unsigned 32-bit integer as a varint.

    Inputs outside ``[0, 2**32 - 1]`` are masked to their low 32 bits, so
    ``-1`` encodes like ``0xFFFFFFFF`` and ``2**32 + 5`` encodes like ``5``.

    Args:
        value: Integer to encode

    Returns:
        Encoded varint (1-5 bytes)

    Example:
        >>> encode_varint(300).hex()
        'ac02'
    """
    value &= VARINT_MASK
    result = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            result.append(byte | 0x80)
        else:
            result.append(byte)
            return bytes(result)


def write_varint(buffer: bytearray, value: int) -> None:
    """Append the varint encoding of ``value`` to ``buffer``."""
    buffer.extend(encode_varint(value))


def decode_varint(data: Payload, offset: int = 0) -> tuple[int, int]:
    """Decode a varint starting at ``offset``.

    Args:
        data: Buffer to read from
        offset: Position of the first varint byte

    Returns:
        Tuple of (value, offset just past the varint)

    Raises:
        VarintOverflowError: If the varint continues past 32 value bits
        TruncatedFieldError: If the buffer ends before the last varint byte

    Example:
        >>> decode_varint(bytes.fromhex("ac02"))
        (300, 2)
    """
    value = 0
    shift = 0
    position = offset
    length = len(data)
    while True:
        if position >= length:
            raise TruncatedFieldError(offset, position - offset + 1, length - offset)
        byte = data[position]
        value |= (byte & 0x7F) << shift
        position += 1
        if not byte & 0x80:
            return value & VARINT_MASK, position
        shift += 7
        if shift >= VARINT_BITS:
            raise VarintOverflowError(offset)
