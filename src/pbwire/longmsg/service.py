"""Long-message protocol.

Payloads too large for an inline message are stored remotely and referenced
by a resource id (resid):

1. store: wrap the content in an envelope, encode, gzip, and send it to the
   long-message service, which answers with a resid
2. embed: send an ordinary message carrying a small element that names
   the resid
3. retrieve: ask the service for the resid, gunzip the payload and decode it

The flows share nothing but the resid. Store must complete before embed or
retrieve; sequencing is the caller's job.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from ..codec import Message, decode, encode, find_field
from ..exceptions import EncodeError, MissingResourceIdError
from ..transport.client import PacketClient
from ..transport.models import Target
from ..utils.compression import gzip_compress, gzip_decompress
from .._logging import get_logger
from .config import LongMessageConfig
from .envelope import (
    COMPRESSED_PATH,
    RESID_PATH,
    build_envelope,
    build_reference_element,
    build_retrieve_request,
    build_store_request,
)

logger = get_logger(__name__)


class LongMessageService:
    """Store, reference and retrieve long messages through a PacketClient.

    Attributes:
        client: Packet client used for every remote call
        config: Command names, envelope label, compression and metadata

    Examples:
        ```python
        service = LongMessageService(PacketClient(driver))
        target = Target(group_id=123456)

        resid = await service.send_long_element(target, [{1: {1: "long text"}}])
        content = await service.retrieve(resid)
        ```
    """

    def __init__(self, client: PacketClient, config: Optional[LongMessageConfig] = None) -> None:
        self.client = client
        self.config = config if config is not None else LongMessageConfig()

    async def store(self, target: Target, content: Any) -> Optional[str]:
        """Persist ``content`` remotely and return its resource id.

        Args:
            target: Group or user the long message is addressed to
            content: Message content (structure or its JSON text); hex strings
                are bridged to bytes like any outgoing payload

        Returns:
            Resource id, or None if the service answered without one

        Raises:
            EncodeError: If the content cannot be encoded
            Exception: Any failure raised by the driver, unchanged
        """
        envelope = build_envelope(_load_content(content), self.config.envelope_label)
        encoded = encode(self.client.bridge.transform(envelope))
        compressed = await gzip_compress(encoded, self.config.compression_level)
        logger.debug(
            "long_message_store",
            peer=target.peer_id,
            encoded_size=len(encoded),
            compressed_size=len(compressed),
        )

        request = build_store_request(target, compressed, self.config.store_metadata)
        reply = await self.client.request(self.config.store_command, request)
        resid = _read_resid(reply)
        if resid is None:
            logger.warning("long_message_store_no_resid", peer=target.peer_id)
        return resid

    async def embed(self, target: Target, resid: Optional[str]) -> Optional[Message]:
        """Send an ordinary message referencing the stored long message.

        Raises:
            MissingResourceIdError: If ``resid`` is empty or None
        """
        if not resid:
            raise MissingResourceIdError("Cannot embed a long message without a resource id")
        logger.debug("long_message_embed", peer=target.peer_id, resid=resid)
        return await self.client.send_elements(target, [build_reference_element(resid)])

    async def send_long_element(self, target: Target, content: Any) -> str:
        """Store ``content`` and send a message referencing it.

        Returns:
            The resource id of the stored content

        Raises:
            MissingResourceIdError: If the store flow produced no resource id;
                nothing is sent in that case
        """
        resid = await self.store(target, content)
        if resid is None:
            raise MissingResourceIdError("Long message store returned no resource id")
        await self.embed(target, resid)
        return resid

    async def retrieve(self, resid: str, *, always_list: bool = False) -> Optional[Message]:
        """Fetch and decode the long message stored under ``resid``.

        Args:
            resid: Resource id returned by store()
            always_list: Passed to decode() for the payload

        Returns:
            Decoded envelope, or None if the reply or its payload is absent

        Raises:
            DecodeError: If the payload is not valid gzip or wire format
            Exception: Any failure raised by the driver, unchanged
        """
        request = build_retrieve_request(resid, self.config.retrieve_metadata)
        reply = await self.client.request(self.config.retrieve_command, request)
        if reply is None:
            logger.warning("long_message_retrieve_empty", resid=resid)
            return None

        compressed = find_field(reply, *COMPRESSED_PATH)
        if not isinstance(compressed, bytes) or not compressed:
            logger.warning("long_message_retrieve_no_payload", resid=resid)
            return None

        data = await gzip_decompress(compressed)
        logger.debug(
            "long_message_retrieve",
            resid=resid,
            compressed_size=len(compressed),
            size=len(data),
        )
        return decode(data, always_list=always_list)


def _load_content(content: Any) -> Any:
    if not isinstance(content, str):
        return content
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise EncodeError(f"Invalid JSON content: {e}") from e


def _read_resid(reply: Optional[bytes]) -> Optional[str]:
    if reply is None:
        return None
    raw = find_field(reply, *RESID_PATH)
    if not isinstance(raw, bytes) or not raw:
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
