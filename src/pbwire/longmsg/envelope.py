"""Packet shapes of the long-message protocol.

Builders for the payload envelope and the store, retrieve and reference
packets. All return plain tag-indexed mappings ready for the encoder.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..transport.models import Target

# Response paths
RESID_PATH = (2, 3)
COMPRESSED_PATH = (1, 4)


def build_envelope(content: Any, label: str = "MultiMsg") -> dict[int, Any]:
    """Wrap message content in the envelope that gets compressed and stored.

    Example:
        >>> build_envelope([{1: {1: "hi"}}])
        {2: {1: 'MultiMsg', 2: {1: [{3: {1: {2: [{1: {1: 'hi'}}]}}}]}}}
    """
    return {2: {1: label, 2: {1: [{3: {1: {2: content}}}]}}}


def build_store_request(
    target: Target, compressed: bytes, metadata: Mapping[int, int]
) -> dict[int, Any]:
    """Build the request persisting ``compressed`` for ``target``."""
    return {
        2: {
            1: 3 if target.is_group else 1,
            2: {2: target.peer_id},
            3: str(target.peer_id),
            4: compressed,
        },
        15: dict(metadata),
    }


def build_reference_element(resid: str) -> dict[int, Any]:
    """Build the message element pointing at a stored long message."""
    return {
        37: {
            6: 1,
            7: resid,
            17: 0,
            19: {15: 0, 31: 0, 41: 0},
        }
    }


def build_retrieve_request(resid: str, metadata: Mapping[int, int]) -> dict[int, Any]:
    """Build the request fetching the long message stored under ``resid``."""
    return {
        1: {2: resid, 3: True},
        15: dict(metadata),
    }
