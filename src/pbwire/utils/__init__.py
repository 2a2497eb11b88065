"""Utility functions for pbwire.

This module provides gzip compression helpers that keep CPU-bound work off
the event loop.
"""

from __future__ import annotations

from .compression import gzip_compress, gzip_decompress

__all__ = [
    "gzip_compress",
    "gzip_decompress",
]
