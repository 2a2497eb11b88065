"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from pbwire import (
    DecodeError,
    decode,
    decode_varint,
    encode,
    encode_varint,
    find_field,
    frame_hex,
    unframe_hex,
)

uint32 = st.integers(min_value=0, max_value=2**32 - 1)
tags = st.integers(min_value=1, max_value=2**29 - 1)
int_messages = st.dictionaries(tags, uint32, max_size=20)


class TestVarintProperties:
    """Property-based tests for varints."""

    @given(value=uint32)
    def test_roundtrip(self, value: int) -> None:
        """Test every 32-bit value decodes to itself and consumes its bytes."""
        data = encode_varint(value)

        assert 1 <= len(data) <= 5
        assert decode_varint(data) == (value, len(data))

    @given(value=st.integers(min_value=-(2**40), max_value=2**40))
    def test_masked_to_32_bits(self, value: int) -> None:
        """Test encoding only depends on the low 32 bits."""
        assert encode_varint(value) == encode_varint(value & 0xFFFFFFFF)

    @given(value=uint32, prefix=st.binary(max_size=8))
    def test_offset(self, value: int, prefix: bytes) -> None:
        """Test decoding at an offset ignores the preceding bytes."""
        data = prefix + encode_varint(value)

        assert decode_varint(data, len(prefix)) == (value, len(data))


class TestCodecProperties:
    """Property-based tests for codec."""

    @given(message=int_messages)
    def test_int_message_roundtrip(self, message: dict[int, int]) -> None:
        """Test messages of varint fields are invertible."""
        assert decode(encode(message)) == message

    @given(message=int_messages)
    def test_encode_order_independent(self, message: dict[int, int]) -> None:
        """Test insertion order does not affect the encoding."""
        reordered = dict(reversed(list(message.items())))

        assert encode(message) == encode(reordered)

    @given(tag=tags, payload=st.binary(max_size=200))
    def test_find_field_returns_raw_bytes(self, tag: int, payload: bytes) -> None:
        """Test raw lookup returns length-delimited payloads exactly."""
        assert find_field(encode({tag: payload}), tag) == payload

    @given(tag=tags, values=st.lists(uint32, min_size=2, max_size=10))
    def test_repeated_varints(self, tag: int, values: list[int]) -> None:
        """Test repeated varint fields keep order."""
        assert decode(encode({tag: values})) == {tag: values}

    @given(data=st.binary(max_size=200))
    def test_decode_arbitrary_bytes(self, data: bytes) -> None:
        """Test arbitrary input either decodes or raises DecodeError."""
        try:
            decode(data)
        except DecodeError:
            pass


class TestFramingProperties:
    """Property-based tests for hex framing."""

    @given(payload=st.binary(max_size=1000))
    def test_frame_unframe_roundtrip(self, payload: bytes) -> None:
        assert unframe_hex(frame_hex(payload)) == payload

    @given(payload=st.binary(max_size=100))
    def test_uppercase_accepted(self, payload: bytes) -> None:
        assert unframe_hex(frame_hex(payload).upper()) == payload
