"""Hex text framing.

The host packet RPC carries payloads as hex text. This module converts wire
bytes to that text and back, validating the text strictly.
"""

from __future__ import annotations

import re

from ..exceptions import FramingError

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def is_hex_string(text: str) -> bool:
    """Return True if ``text`` is a non-empty, even-length run of hex digits.

    Example:
        >>> is_hex_string("68656c6c6f")
        True
        >>> is_hex_string("abc")
        False
    """
    return len(text) % 2 == 0 and _HEX_RE.fullmatch(text) is not None


def frame_hex(payload: bytes) -> str:
    """Render wire bytes as lowercase hex text.

    Example:
        >>> frame_hex(b"\\x08\\x01")
        '0801'
    """
    return bytes(payload).hex()


def unframe_hex(text: str) -> bytes:
    """Parse hex text back to bytes.

    An empty string yields empty bytes. Upper and lower case digits are
    accepted; whitespace is not.

    Args:
        text: Hex text from the packet RPC

    Returns:
        Decoded bytes

    Raises:
        FramingError: If the text has odd length or non-hex characters
    """
    if not isinstance(text, str):
        raise FramingError(f"Expected hex text, got {type(text).__name__}")
    if text and not is_hex_string(text):
        raise FramingError(f"Invalid hex text ({len(text)} characters)")
    return bytes.fromhex(text)
