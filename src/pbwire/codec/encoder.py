"""Schema-less wire format encoder.

This module provides the encode() function that converts a tag-indexed
mapping into Protocol Buffers wire format without any .proto schema. The
wire type of each field is chosen from the Python type of its value.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, List, Union

from ..exceptions import EncodeError, UnsupportedTypeError
from .varint import write_varint
from .wire import MAX_TAG, FieldKey, WireType


def encode(message: Union[Mapping[Any, Any], List[Any]]) -> bytes:
    """Encode a tag-indexed mapping to wire format.

    Fields are written in ascending numeric tag order regardless of the
    mapping's insertion order. Keys may be ints or decimal strings. A list
    value is a repeated field: the tag is written once per element.

    A list anywhere else (the message itself, or an element of a repeated
    field) is encoded as a message keyed by 0-based index, so
    ``encode([5, 6])`` equals ``encode({0: 5, 1: 6})``.

    Value dispatch:
        - bool: varint 0 or 1
        - int: varint, masked to 32 bits
        - float: truncated toward zero, then as int (NaN and infinity are
          rejected rather than sent as 0)
        - str: UTF-8 bytes, length-delimited
        - bytes, bytearray, memoryview: length-delimited, unchanged
        - Mapping: encoded recursively, then length-delimited
        - list inside a repeated field: encoded as an index-keyed message
        - None: field omitted

    Args:
        message: Mapping from tag to value or list of values, or a list
            treated as an index-keyed mapping

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If a tag is invalid
        UnsupportedTypeError: If a value has an unsupported type

    Example:
        >>> encode({1: 150}).hex()
        '089601'
        >>> encode({"2": "hi", "1": [1, 2]}).hex()
        '0801080212026869'
    """
    if isinstance(message, list):
        message = dict(enumerate(message))
    if not isinstance(message, Mapping):
        raise EncodeError(f"Expected a mapping of tags to values, got {type(message).__name__}")

    buffer = bytearray()
    fields = [(_parse_tag(key), value) for key, value in message.items()]
    for tag, value in sorted(fields, key=lambda field: field[0]):
        if isinstance(value, list):
            for item in value:
                _encode_value(buffer, tag, item)
        else:
            _encode_value(buffer, tag, value)
    return bytes(buffer)


def encode_hex(message: Mapping[Any, Any]) -> str:
    """Encode a mapping and return the wire bytes as lowercase hex text."""
    return encode(message).hex()


def _parse_tag(key: Any) -> int:
    """Convert a mapping key to a field tag.

    Raises:
        EncodeError: If the key is not a non-negative integer within range
    """
    if isinstance(key, bool):
        raise EncodeError(f"Invalid field tag {key!r}")
    if isinstance(key, int):
        tag = key
    elif isinstance(key, str) and key.strip().isdecimal():
        tag = int(key)
    else:
        raise EncodeError(f"Invalid field tag {key!r}: expected a non-negative integer")

    if tag < 0 or tag > MAX_TAG:
        raise EncodeError(f"Field tag {tag} out of range [0, {MAX_TAG}]")
    return tag


def _encode_value(buffer: bytearray, tag: int, value: Any) -> None:
    """Encode a single value under ``tag``.

    Raises:
        UnsupportedTypeError: If the value cannot be carried by the wire format
    """
    if value is None:
        return

    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        _write_varint_field(buffer, tag, 1 if value else 0)
        return

    if isinstance(value, int):
        _write_varint_field(buffer, tag, value)
        return

    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedTypeError(tag, value)
        _write_varint_field(buffer, tag, int(value))
        return

    if isinstance(value, str):
        _write_bytes_field(buffer, tag, value.encode("utf-8"))
        return

    if isinstance(value, (bytes, bytearray, memoryview)):
        _write_bytes_field(buffer, tag, bytes(value))
        return

    if isinstance(value, (Mapping, list)):
        _write_bytes_field(buffer, tag, encode(value))
        return

    raise UnsupportedTypeError(tag, value)


def _write_varint_field(buffer: bytearray, tag: int, value: int) -> None:
    write_varint(buffer, FieldKey(tag, WireType.VARINT).pack())
    write_varint(buffer, value)


def _write_bytes_field(buffer: bytearray, tag: int, data: bytes) -> None:
    write_varint(buffer, FieldKey(tag, WireType.LENGTH_DELIMITED).pack())
    write_varint(buffer, len(data))
    buffer.extend(data)
