"""Hex-to-bytes bridging for JSON-like payloads.

This module provides the pre-encode transform that turns selected string
values into raw byte buffers, and the inverse JSON view of decoded messages.
"""

from __future__ import annotations

from .convert import (
    DEFAULT_RULES,
    HEX_SENTINEL,
    HexBridge,
    HexRule,
    PathSuffixRule,
    PredicateRule,
    SentinelRule,
    prepare_payload,
    to_jsonable,
)

__all__ = [
    "HexBridge",
    "HexRule",
    "SentinelRule",
    "PathSuffixRule",
    "PredicateRule",
    "DEFAULT_RULES",
    "HEX_SENTINEL",
    "prepare_payload",
    "to_jsonable",
]
