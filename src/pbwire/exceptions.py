"""Exception hierarchy for pbwire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PbwireError for easy catching of any pbwire-specific error.
"""

from __future__ import annotations


class PbwireError(Exception):
    """Base exception for all pbwire errors."""

    pass


class EncodeError(PbwireError):
    """Raised when encoding a message fails.

    Examples:
        - Field tag is negative, non-numeric or above the 29-bit ceiling
        - Value of a type the wire format cannot carry
    """

    pass


class UnsupportedTypeError(EncodeError):
    """Raised when a value has a type the encoder cannot serialize.

    Supported values are ints, bools, strings, bytes-like buffers,
    mappings (nested messages), lists (repeated fields) and None.
    """

    def __init__(self, tag: int, value: object) -> None:
        self.tag = tag
        self.value = value
        super().__init__(f"Field {tag}: unsupported type {type(value).__name__}")


class DecodeError(PbwireError):
    """Raised when decoding wire data fails.

    Examples:
        - Varint longer than the 32-bit ceiling
        - Length-delimited field running past the end of the buffer
        - Wire type other than varint (0) or length-delimited (2)
        - Compressed payload that is not valid gzip
    """

    pass


class VarintOverflowError(DecodeError):
    """Raised when a varint needs more than 32 value bits."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"Varint at offset {offset} exceeds 32 bits")


class TruncatedFieldError(DecodeError):
    """Raised when a field runs past the end of the buffer."""

    def __init__(self, offset: int, needed: int, available: int) -> None:
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated field at offset {offset}: need {needed} bytes, "
            f"have {available} bytes"
        )


class UnsupportedWireTypeError(DecodeError):
    """Raised when a field key carries a wire type other than 0 or 2."""

    def __init__(self, wire_type: int, tag: int, offset: int) -> None:
        self.wire_type = wire_type
        self.tag = tag
        self.offset = offset
        super().__init__(f"Unsupported wire type {wire_type} for field {tag} at offset {offset}")


class FramingError(PbwireError):
    """Raised when hex framing operations fail.

    Examples:
        - Odd number of hex digits
        - Characters outside [0-9a-fA-F]
    """

    pass


class TransportError(PbwireError):
    """Raised by bundled packet drivers when the RPC call itself fails.

    Errors raised by a driver are never wrapped or retried by the client;
    they reach the caller unchanged.
    """

    pass


class MissingResourceIdError(PbwireError):
    """Raised when a long message could not be embedded for lack of a resource id."""

    pass
