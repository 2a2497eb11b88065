"""Abstract interface for the host packet RPC.

The codec talks to its remote peer through a single host primitive,
``send_packet(cmd, hex) -> {"data": hex, ...}``. Drivers adapt whatever
host provides that primitive (a bot framework connection, an HTTP bridge,
a test double) to this interface.

Design Pattern: Strategy Pattern / Adapter Pattern
- PacketDriver: Abstract interface
- MockPacketDriver: In-process simulation for tests
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional


class PacketDriver(ABC):
    """Abstract interface for the host ``send_packet`` RPC.

    Implementations perform one round trip per call. They impose whatever
    timeout the host connection has; the client adds none and never retries.

    Examples:
        ```python
        class BotDriver(PacketDriver):
            def __init__(self, bot):
                self.bot = bot

            async def send_packet(self, cmd, data):
                return await self.bot.call_api("send_packet", cmd=cmd, data=data)
        ```
    """

    @abstractmethod
    async def send_packet(self, cmd: str, data: str) -> Optional[Mapping[str, Any]]:
        """Send one packet and return the host's reply.

        Args:
            cmd: Remote command (service) name
            data: Wire format payload as hex text

        Returns:
            Reply mapping, normally carrying the response hex under ``"data"``,
            or None when the host returns nothing

        Raises:
            Exception: Any failure of the RPC itself; propagated unchanged
        """
