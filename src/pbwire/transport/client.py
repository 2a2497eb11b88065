"""Packet client: wire codec over the host packet RPC.

PacketClient turns payload mappings into hex packets for a PacketDriver and
decodes the replies. Every outgoing payload passes through a HexBridge first,
so JSON-built payloads can carry raw bytes as hex strings.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..codec import Message, decode, encode
from ..exceptions import DecodeError, EncodeError
from ..framing import frame_hex, unframe_hex
from ..hexbridge import HexBridge
from ..ids import RandomSequence, SequenceGenerator
from .._logging import get_logger
from .driver import PacketDriver
from .models import PacketResponse, Target

logger = get_logger(__name__)

SEND_MESSAGE_COMMAND = "MessageSvc.PbSendMsg"


class PacketClient:
    """Send wire-encoded packets through a host driver.

    Attributes:
        driver: Host RPC adapter
        bridge: Pre-encode hex transform
        sequence: Generator for the two sequence numbers of sent messages
        send_command: Command used by send_elements()

    Examples:
        ```python
        client = PacketClient(driver, sequence=CounterSequence())
        reply = await client.send_packet("Some.Service", {1: {2: "hex->00ff"}})
        await client.send_elements(Target(group_id=123), [{1: {1: "hello"}}])
        ```
    """

    def __init__(
        self,
        driver: PacketDriver,
        *,
        bridge: Optional[HexBridge] = None,
        sequence: Optional[SequenceGenerator] = None,
        send_command: str = SEND_MESSAGE_COMMAND,
    ) -> None:
        self.driver = driver
        self.bridge = bridge if bridge is not None else HexBridge()
        self.sequence = sequence if sequence is not None else RandomSequence()
        self.send_command = send_command

    async def request(self, cmd: str, payload: Mapping[Any, Any]) -> Optional[bytes]:
        """Send ``payload`` under ``cmd`` and return the raw reply bytes.

        Returns:
            Reply wire bytes, or None when the reply carries no data

        Raises:
            EncodeError: If the payload cannot be encoded
            FramingError: If the reply data is not valid hex
            DecodeError: If the reply is not a mapping
            Exception: Any failure raised by the driver, unchanged
        """
        encoded = encode(self.bridge.transform(payload))
        logger.debug("packet_send", cmd=cmd, size=len(encoded))

        reply = await self.driver.send_packet(cmd, frame_hex(encoded))
        if reply is None:
            logger.debug("packet_reply_empty", cmd=cmd)
            return None

        try:
            response = PacketResponse.model_validate(dict(reply) if isinstance(reply, Mapping) else reply)
        except ValidationError as e:
            raise DecodeError(f"Malformed reply to {cmd}: {e}") from e

        if not response.has_data:
            logger.debug("packet_reply_empty", cmd=cmd)
            return None

        data = unframe_hex(response.data or "")
        logger.debug("packet_reply", cmd=cmd, size=len(data))
        return data

    async def send_packet(self, cmd: str, payload: Mapping[Any, Any]) -> Optional[Message]:
        """Send ``payload`` under ``cmd`` and decode the reply.

        Args:
            cmd: Remote command name
            payload: Tag-indexed mapping (hex strings bridged to bytes)

        Returns:
            Decoded reply, or None when the reply carries no data

        Raises:
            EncodeError: If the payload cannot be encoded
            DecodeError: If the reply is not valid wire format
            Exception: Any failure raised by the driver, unchanged
        """
        data = await self.request(cmd, payload)
        if data is None:
            return None
        return decode(data)

    async def send_raw_packet(
        self, cmd: str, content: Union[Mapping[Any, Any], str]
    ) -> Optional[Message]:
        """Like send_packet(), but also accepts the payload as JSON text.

        Raises:
            EncodeError: If the JSON text is invalid or not an object
        """
        return await self.send_packet(cmd, _load_mapping(content))

    async def send_elements(
        self, target: Target, elements: Sequence[Any]
    ) -> Optional[Message]:
        """Send message elements to a chat peer as an ordinary message.

        Args:
            target: Group or user receiving the message
            elements: Element payloads, sent as a repeated field

        Returns:
            Decoded reply, or None
        """
        routing_tag = 2 if target.is_group else 1
        packet = {
            1: {routing_tag: {1: target.peer_id}},
            2: {1: 1, 2: 0, 3: 0},
            3: {1: {2: list(elements)}},
            4: self.sequence.next(),
            5: self.sequence.next(),
        }
        logger.debug(
            "elements_send",
            peer=target.peer_id,
            group=target.is_group,
            count=len(elements),
            seq=packet[4],
        )
        return await self.send_packet(self.send_command, packet)


def _load_mapping(content: Union[Mapping[Any, Any], str]) -> Mapping[Any, Any]:
    if not isinstance(content, str):
        return content

    try:
        loaded = json.loads(content)
    except json.JSONDecodeError as e:
        raise EncodeError(f"Invalid JSON payload: {e}") from e
    if not isinstance(loaded, Mapping):
        raise EncodeError(f"JSON payload must be an object, got {type(loaded).__name__}")
    return loaded
