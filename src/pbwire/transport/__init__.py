"""Packet transport over the host ``send_packet`` RPC.

This module provides the client that sends wire-encoded payloads as hex
packets, the driver interface it talks to, and an in-process mock driver.

## Quick Start

```python
from pbwire.transport import MockPacketDriver, PacketClient, Target

driver = MockPacketDriver()
driver.register("Echo", lambda request: request)

client = PacketClient(driver)
reply = await client.send_packet("Echo", {1: "ping", 2: "hex->00ff"})
await client.send_elements(Target(group_id=123456), [{1: {1: "hello"}}])
```
"""

from __future__ import annotations

from .client import SEND_MESSAGE_COMMAND, PacketClient
from .config import MockTransportConfig
from .driver import PacketDriver
from .mock import MockPacketDriver, SentPacket
from .models import PacketResponse, Target

__all__ = [
    "PacketDriver",
    "PacketClient",
    "MockPacketDriver",
    "MockTransportConfig",
    "SentPacket",
    "PacketResponse",
    "Target",
    "SEND_MESSAGE_COMMAND",
]
