"""Mock packet driver for tests and local development.

MockPacketDriver answers send_packet calls in-process. Each remote command
is served by a registered handler that receives the decoded request and
returns a response message, which the driver encodes back to hex exactly as
a real host would.
"""

from __future__ import annotations

import asyncio
import inspect
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from ..codec import Message, decode_hex, encode_hex
from ..exceptions import TransportError
from .._logging import get_logger
from .config import MockTransportConfig
from .driver import PacketDriver

logger = get_logger(__name__)

HandlerResult = Optional[Mapping[Any, Any]]
Handler = Callable[[Message], Union[HandlerResult, Awaitable[HandlerResult]]]


@dataclass(frozen=True)
class SentPacket:
    """A packet received by the mock driver.

    Attributes:
        cmd: Remote command name
        data: Payload hex text as sent
        message: Decoded payload
    """

    cmd: str
    data: str
    message: Message


class MockPacketDriver(PacketDriver):
    """Simulated host RPC.

    Commands without a handler get an empty reply (no ``data``). Handlers may
    be plain functions or coroutines; returning None also yields an empty
    reply.

    Attributes:
        config: Mock transport configuration
        handlers: Registered handlers by command name
        sent: Every packet received, in call order

    Examples:
        ```python
        from pbwire.transport import MockPacketDriver, PacketClient

        driver = MockPacketDriver()
        driver.register("Echo", lambda request: request)

        client = PacketClient(driver)
        reply = await client.send_packet("Echo", {1: "ping"})
        assert reply == {1: "ping"}
        ```
    """

    def __init__(
        self,
        config: MockTransportConfig | None = None,
        handlers: Mapping[str, Handler] | None = None,
    ) -> None:
        self.config = config if config is not None else MockTransportConfig()
        self.handlers: dict[str, Handler] = dict(handlers or {})
        self.sent: list[SentPacket] = []
        self._rng = random.Random(self.config.seed)

    def register(self, cmd: str, handler: Handler) -> None:
        """Register the handler serving ``cmd``, replacing any previous one."""
        self.handlers[cmd] = handler
        logger.debug("mock_handler_registered", cmd=cmd, total=len(self.handlers))

    async def send_packet(self, cmd: str, data: str) -> Optional[Mapping[str, Any]]:
        if self.config.latency > 0:
            await asyncio.sleep(self.config.latency)

        if self._rng.random() < self.config.failure_probability:
            logger.debug("mock_packet_dropped", cmd=cmd, size=len(data) // 2)
            raise TransportError(f"Simulated transport failure for {cmd}")

        message = decode_hex(data)
        self.sent.append(SentPacket(cmd=cmd, data=data, message=message))
        logger.debug("mock_packet_received", cmd=cmd, size=len(data) // 2)

        handler = self.handlers.get(cmd)
        if handler is None:
            return {}

        result = handler(message)
        if inspect.isawaitable(result):
            result = await result
        if result is None:
            return {}
        return {"data": encode_hex(result)}

    def commands(self) -> list[str]:
        """Return the command of every packet received, in call order."""
        return [packet.cmd for packet in self.sent]
