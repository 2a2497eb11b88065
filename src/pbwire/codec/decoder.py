"""Schema-less wire format decoder.

This module provides the decode() function that converts wire format bytes
back to a tag-indexed mapping. Without a schema, length-delimited payloads
are ambiguous; they are interpreted by trying, in order:

1. a nested message (the span parses completely as wire format)
2. text (the span is strictly valid UTF-8)
3. raw bytes

The order is fixed. A short UTF-8 string whose bytes also happen to parse
as wire format comes back as a nested message, not as text.
"""

from __future__ import annotations

from typing import Optional, Union

from ..exceptions import DecodeError, TruncatedFieldError, UnsupportedWireTypeError
from ..framing import unframe_hex
from .varint import decode_varint
from .wire import (
    MAX_NESTING_DEPTH,
    FieldKey,
    Message,
    Payload,
    PayloadKind,
    Recovered,
    WireType,
    WireValue,
)


def decode(data: Payload, *, always_list: bool = False) -> Message:
    """Decode wire format bytes to a tag-indexed mapping.

    Fields are read until the end of the buffer. A tag seen once maps to its
    bare value; a tag seen several times maps to a list in wire order. This
    collapse is lossy: a one-element repeated field decodes as a bare value.
    Pass ``always_list=True`` to map every tag (at every nesting level) to a
    list instead.

    Varints come back as ints; booleans are not reconstructed.

    Args:
        data: Wire format bytes
        always_list: If True, never collapse single occurrences

    Returns:
        Mapping from tag to value (or list of values)

    Raises:
        VarintOverflowError: If a varint exceeds 32 bits
        TruncatedFieldError: If a field runs past the end of the buffer
        UnsupportedWireTypeError: If a wire type other than 0 or 2 appears

    Example:
        >>> decode(bytes.fromhex("082a120568656c6c6f1801"))
        {1: 42, 2: 'hello', 3: 1}
    """
    return _decode(memoryview(bytes(data)), always_list, 0)


def decode_hex(text: str, *, always_list: bool = False) -> Message:
    """Decode wire format given as hex text.

    Raises:
        FramingError: If the text is not valid hex
        DecodeError: If the bytes are not valid wire format
    """
    return decode(unframe_hex(text), always_list=always_list)


def recover_payload(span: Payload, *, always_list: bool = False) -> Recovered:
    """Interpret a length-delimited payload as message, text, or bytes.

    Example:
        >>> recover_payload(b"\\xff").kind
        <PayloadKind.BYTES: 'bytes'>
    """
    return _recover(memoryview(bytes(span)), always_list, 0)


def _decode(data: memoryview, always_list: bool, depth: int) -> Message:
    fields: dict[int, list[WireValue]] = {}
    offset = 0
    while offset < len(data):
        tag, value, offset = _read_field(data, offset, always_list, depth)
        fields.setdefault(tag, []).append(value)

    if always_list:
        return fields
    return {tag: values[0] if len(values) == 1 else values for tag, values in fields.items()}


def _read_field(
    data: memoryview, offset: int, always_list: bool, depth: int
) -> tuple[int, WireValue, int]:
    """Read one field starting at ``offset``.

    Returns:
        Tuple of (tag, value, offset just past the field)
    """
    key, position = decode_varint(data, offset)
    field_key = FieldKey.unpack(key)

    if field_key.wire_type == WireType.VARINT:
        value, position = decode_varint(data, position)
        return field_key.tag, value, position

    if field_key.wire_type == WireType.LENGTH_DELIMITED:
        length, start = decode_varint(data, position)
        end = start + length
        if end > len(data):
            raise TruncatedFieldError(start, length, len(data) - start)
        recovered = _recover(data[start:end], always_list, depth + 1)
        return field_key.tag, recovered.value, end

    raise UnsupportedWireTypeError(field_key.wire_type, field_key.tag, offset)


def _recover(span: memoryview, always_list: bool, depth: int) -> Recovered:
    message = _try_message(span, always_list, depth)
    if message is not None:
        return Recovered(PayloadKind.MESSAGE, message)

    text = _try_text(span)
    if text is not None:
        return Recovered(PayloadKind.TEXT, text)

    return Recovered(PayloadKind.BYTES, span.tobytes())


def _try_message(span: memoryview, always_list: bool, depth: int) -> Optional[Message]:
    if depth > MAX_NESTING_DEPTH:
        return None
    try:
        return _decode(span, always_list, depth)
    except DecodeError:
        return None


def _try_text(span: memoryview) -> Optional[str]:
    try:
        return span.tobytes().decode("utf-8")
    except UnicodeDecodeError:
        return None


def find_field(data: Payload, *path: int) -> Union[int, bytes, None]:
    """Return the raw value at ``path`` without type recovery.

    Each step takes the first field carrying the tag at that level. The
    result is an int for varint fields and the exact payload bytes for
    length-delimited ones, so a field known to hold text or bytes can be read
    without the message/text/bytes guess that decode() applies.

    Args:
        data: Wire format bytes
        path: Tags to follow, outermost first

    Returns:
        Raw value, or None if any step is missing or not a nested message

    Raises:
        ValueError: If ``path`` is empty
        DecodeError: If the top-level buffer is not valid wire format

    Example:
        >>> find_field(bytes.fromhex("12051a03616263"), 2, 3)
        b'abc'
    """
    if not path:
        raise ValueError("find_field requires at least one tag")

    current: Union[int, memoryview] = memoryview(bytes(data))
    for depth, tag in enumerate(path):
        if not isinstance(current, memoryview):
            return None
        try:
            found = _first_field(current, tag)
        except DecodeError:
            if depth == 0:
                raise
            return None
        if found is None:
            return None
        current = found

    if isinstance(current, memoryview):
        return current.tobytes()
    return current


def _first_field(data: memoryview, tag: int) -> Union[int, memoryview, None]:
    offset = 0
    while offset < len(data):
        key, position = decode_varint(data, offset)
        field_key = FieldKey.unpack(key)

        if field_key.wire_type == WireType.VARINT:
            value, offset = decode_varint(data, position)
            if field_key.tag == tag:
                return value
        elif field_key.wire_type == WireType.LENGTH_DELIMITED:
            length, start = decode_varint(data, position)
            offset = start + length
            if offset > len(data):
                raise TruncatedFieldError(start, length, len(data) - start)
            if field_key.tag == tag:
                return data[start:offset]
        else:
            raise UnsupportedWireTypeError(field_key.wire_type, field_key.tag, offset)
    return None
