"""Long-message protocol for pbwire.

This module provides storage of oversized payloads behind a resource id,
the reference element that embeds them in an ordinary message, and
retrieval by resource id.
"""

from __future__ import annotations

from .config import RETRIEVE_COMMAND, STORE_COMMAND, LongMessageConfig
from .envelope import (
    build_envelope,
    build_reference_element,
    build_retrieve_request,
    build_store_request,
)
from .service import LongMessageService

__all__ = [
    "LongMessageService",
    "LongMessageConfig",
    "STORE_COMMAND",
    "RETRIEVE_COMMAND",
    "build_envelope",
    "build_store_request",
    "build_reference_element",
    "build_retrieve_request",
]
