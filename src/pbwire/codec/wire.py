"""Wire format constants and types.

This module holds the vocabulary shared by the encoder and decoder: the two
supported wire types, the field key layout, and the tagged result of
length-delimited payload recovery.

A field on the wire is ``varint(tag << 3 | wire_type)`` followed by its
payload. Only varint (0) and length-delimited (2) payloads are supported.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, List, Union

# Varints carry at most 32 value bits
VARINT_BITS = 32
VARINT_MASK = (1 << VARINT_BITS) - 1

# Tag must survive the 3-bit wire type shift inside a 32-bit key
WIRE_TYPE_BITS = 3
MAX_TAG = (1 << (VARINT_BITS - WIRE_TYPE_BITS)) - 1

# Nested submessage recovery gives up past this depth
MAX_NESTING_DEPTH = 64

# Decoded values: int, str, bytes, Message, or a list of those
WireValue = Any
Message = Dict[int, WireValue]
MessageList = List[WireValue]
Payload = Union[bytes, bytearray, memoryview]


class WireType(enum.IntEnum):
    """Supported wire types."""

    VARINT = 0
    LENGTH_DELIMITED = 2


class PayloadKind(enum.Enum):
    """Interpretation chosen for a length-delimited payload."""

    MESSAGE = "message"
    TEXT = "text"
    BYTES = "bytes"


@dataclass(frozen=True)
class FieldKey:
    """Decoded field key.

    Attributes:
        tag: Field number
        wire_type: Raw 3-bit wire type (may be unsupported)
    """

    tag: int
    wire_type: int

    @classmethod
    def unpack(cls, key: int) -> FieldKey:
        return cls(tag=key >> WIRE_TYPE_BITS, wire_type=key & 0x7)

    def pack(self) -> int:
        return (self.tag << WIRE_TYPE_BITS) | self.wire_type


@dataclass(frozen=True)
class Recovered:
    """Result of interpreting a length-delimited payload.

    Attributes:
        kind: Which interpretation succeeded
        value: Decoded message, text, or the raw bytes
    """

    kind: PayloadKind
    value: WireValue
