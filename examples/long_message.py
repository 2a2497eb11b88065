#!/usr/bin/env python3
"""Long-message example for pbwire.

This example demonstrates:
1. Serving the long-message commands from an in-process mock host
2. Storing a long message and embedding its resource id in a chat message
3. Retrieving and decoding the stored message
"""

from __future__ import annotations

import asyncio
from typing import Any

from pbwire import LongMessageService, MockPacketDriver, PacketClient, Target
from pbwire.longmsg import RETRIEVE_COMMAND, STORE_COMMAND


def make_host() -> MockPacketDriver:
    """Create a mock host that keeps stored blobs in memory."""
    blobs: dict[str, bytes] = {}

    def store(request: dict[int, Any]) -> dict[int, Any]:
        resid = f"demo-{len(blobs) + 1}"
        blobs[resid] = request[2][4]
        return {2: {3: resid}}

    def retrieve(request: dict[int, Any]) -> dict[int, Any]:
        return {1: {4: blobs[request[1][2]]}}

    return MockPacketDriver(handlers={STORE_COMMAND: store, RETRIEVE_COMMAND: retrieve})


async def main() -> None:
    """Run the long-message example."""
    driver = make_host()
    service = LongMessageService(PacketClient(driver))
    target = Target(group_id=123456)

    print("1. Storing and embedding a long message...")
    resid = await service.send_long_element(target, [{1: {1: "a long paragraph " * 20}}])
    print(f"   Resource id: {resid}")
    print(f"   Commands sent: {driver.commands()}")
    print()

    print("2. Retrieving it...")
    retrieved = await service.retrieve(resid)
    print(f"   Envelope label: {retrieved[2][1] if retrieved else None}")
    print()


if __name__ == "__main__":
    asyncio.run(main())
