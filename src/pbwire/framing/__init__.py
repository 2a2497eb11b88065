"""Hex framing utilities for pbwire.

This module provides conversion between wire format bytes and the hex text
carried by the host packet RPC.
"""

from __future__ import annotations

from .hexframe import frame_hex, is_hex_string, unframe_hex

__all__ = [
    "frame_hex",
    "unframe_hex",
    "is_hex_string",
]
