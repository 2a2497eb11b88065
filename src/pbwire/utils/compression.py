"""Async gzip helpers.

Compression is CPU-bound, so both directions run in a worker thread via
asyncio.to_thread() instead of blocking the event loop.
"""

from __future__ import annotations

import asyncio
import gzip
import zlib

from ..exceptions import DecodeError

DEFAULT_COMPRESSION_LEVEL = 6


async def gzip_compress(data: bytes, level: int = DEFAULT_COMPRESSION_LEVEL) -> bytes:
    """Compress ``data`` into an RFC 1952 gzip member.

    Args:
        data: Bytes to compress
        level: zlib compression level (0-9)

    Returns:
        Gzip-compressed bytes
    """
    if not 0 <= level <= 9:
        raise ValueError(f"level must be 0-9, got {level}")
    return await asyncio.to_thread(gzip.compress, bytes(data), level)


async def gzip_decompress(data: bytes) -> bytes:
    """Decompress gzip bytes.

    Raises:
        DecodeError: If ``data`` is not a valid gzip stream
    """
    try:
        return await asyncio.to_thread(gzip.decompress, bytes(data))
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError(f"Invalid gzip payload: {e}") from e
