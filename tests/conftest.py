"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import gzip
from typing import Any

import pytest

from pbwire import CounterSequence, MockPacketDriver, PacketClient, Target
from pbwire.longmsg import RETRIEVE_COMMAND, STORE_COMMAND


class FakeLongMessageStore:
    """In-memory stand-in for the remote long-message service.

    Store requests keep the compressed blob under a fresh resid; retrieve
    requests return it at the response path the client reads.
    """

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}

    def store(self, request: dict[int, Any]) -> dict[int, Any]:
        resid = f"resid-{len(self.blobs) + 1:04d}"
        self.blobs[resid] = request[2][4]
        return {2: {3: resid}}

    def retrieve(self, request: dict[int, Any]) -> dict[int, Any] | None:
        blob = self.blobs.get(request[1][2])
        if blob is None:
            return None
        return {1: {4: blob}}

    def payload(self, resid: str) -> bytes:
        return gzip.decompress(self.blobs[resid])


@pytest.fixture
def sample_message() -> dict[int, Any]:
    """Flat message with one field of each scalar kind."""
    return {1: 42, 2: "hello", 3: True}


@pytest.fixture
def group_target() -> Target:
    return Target(group_id=123456)


@pytest.fixture
def user_target() -> Target:
    return Target(user_id=987654)


@pytest.fixture
def driver() -> MockPacketDriver:
    return MockPacketDriver()


@pytest.fixture
def client(driver: MockPacketDriver) -> PacketClient:
    return PacketClient(driver, sequence=CounterSequence(start=100))


@pytest.fixture
def remote_store(driver: MockPacketDriver) -> FakeLongMessageStore:
    """Long-message service registered on the mock driver."""
    store = FakeLongMessageStore()
    driver.register(STORE_COMMAND, store.store)
    driver.register(RETRIEVE_COMMAND, store.retrieve)
    return store
