"""Unit tests for async gzip helpers."""

from __future__ import annotations

import gzip

import pytest

from pbwire import DecodeError
from pbwire.utils import gzip_compress, gzip_decompress


@pytest.mark.asyncio
async def test_round_trip() -> None:
    """Test compressed data decompresses to the input."""
    data = b"long message " * 100

    compressed = await gzip_compress(data)

    assert compressed[:2] == b"\x1f\x8b"
    assert len(compressed) < len(data)
    assert await gzip_decompress(compressed) == data


@pytest.mark.asyncio
async def test_interoperates_with_gzip_module() -> None:
    """Test output is a standard gzip member."""
    assert gzip.decompress(await gzip_compress(b"abc", level=9)) == b"abc"
    assert await gzip_decompress(gzip.compress(b"abc")) == b"abc"


@pytest.mark.asyncio
async def test_level_zero_stores() -> None:
    data = b"x" * 64

    assert await gzip_decompress(await gzip_compress(data, level=0)) == data


@pytest.mark.asyncio
@pytest.mark.parametrize("level", [-1, 10])
async def test_invalid_level(level: int) -> None:
    with pytest.raises(ValueError, match="level must be 0-9"):
        await gzip_compress(b"abc", level=level)


@pytest.mark.asyncio
async def test_not_gzip() -> None:
    """Test data without the gzip magic fails with DecodeError."""
    with pytest.raises(DecodeError):
        await gzip_decompress(b"\xff\xfe")


@pytest.mark.asyncio
async def test_truncated_gzip() -> None:
    """Test a cut-off gzip stream fails with DecodeError."""
    compressed = gzip.compress(b"payload" * 10)

    with pytest.raises(DecodeError):
        await gzip_decompress(compressed[:-6])
