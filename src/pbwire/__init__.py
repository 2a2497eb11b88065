"""pbwire: Schema-less Protocol Buffers wire codec

A Python library for encoding and decoding the Protocol Buffers wire format
without .proto schemas, plus a packet transport and a long-message protocol
built on top of it.

Key Features:
- Tag-indexed mappings in, wire bytes out (varint and length-delimited only)
- Heuristic decoding of length-delimited fields: message, then text, then bytes
- Hex bridging of JSON payloads (``"hex->..."`` strings become bytes)
- Async packet client over a host ``send_packet`` RPC
- gzip-compressed long messages stored behind a resource id

Quick Start:
    >>> from pbwire import decode, encode
    >>>
    >>> data = encode({1: 42, 2: "hello", 3: True})
    >>> decode(data)
    {1: 42, 2: 'hello', 3: 1}
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    decode,
    decode_hex,
    decode_varint,
    encode,
    encode_hex,
    encode_varint,
    find_field,
    recover_payload,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    FramingError,
    MissingResourceIdError,
    PbwireError,
    TransportError,
    TruncatedFieldError,
    UnsupportedTypeError,
    UnsupportedWireTypeError,
    VarintOverflowError,
)
from .framing import frame_hex, unframe_hex
from .hexbridge import (
    HexBridge,
    PathSuffixRule,
    PredicateRule,
    SentinelRule,
    prepare_payload,
    to_jsonable,
)
from .ids import CounterSequence, RandomSequence, SequenceGenerator
from .longmsg import LongMessageConfig, LongMessageService
from .transport import MockPacketDriver, MockTransportConfig, PacketClient, PacketDriver, Target

__all__ = [
    # Core API
    "encode",
    "encode_hex",
    "decode",
    "decode_hex",
    "recover_payload",
    "find_field",
    "encode_varint",
    "decode_varint",
    # Exceptions
    "PbwireError",
    "EncodeError",
    "UnsupportedTypeError",
    "DecodeError",
    "VarintOverflowError",
    "TruncatedFieldError",
    "UnsupportedWireTypeError",
    "FramingError",
    "TransportError",
    "MissingResourceIdError",
    # Framing
    "frame_hex",
    "unframe_hex",
    # Hex bridge
    "HexBridge",
    "SentinelRule",
    "PathSuffixRule",
    "PredicateRule",
    "prepare_payload",
    "to_jsonable",
    # Sequence numbers
    "SequenceGenerator",
    "RandomSequence",
    "CounterSequence",
    # Transport
    "PacketDriver",
    "PacketClient",
    "MockPacketDriver",
    "MockTransportConfig",
    "Target",
    # Long messages
    "LongMessageService",
    "LongMessageConfig",
    # Version
    "__version__",
]
