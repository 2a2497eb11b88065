"""Schema-less Protocol Buffers wire codec for pbwire.

This module provides varint primitives and encoding/decoding of tag-indexed
mappings to and from the Protocol Buffers wire format (wire types 0 and 2).
"""

from __future__ import annotations

from .decoder import decode, decode_hex, find_field, recover_payload
from .encoder import encode, encode_hex
from .varint import decode_varint, encode_varint
from .wire import FieldKey, Message, PayloadKind, Recovered, WireType

__all__ = [
    "encode",
    "encode_hex",
    "decode",
    "decode_hex",
    "recover_payload",
    "find_field",
    "encode_varint",
    "decode_varint",
    "FieldKey",
    "Message",
    "PayloadKind",
    "Recovered",
    "WireType",
]
