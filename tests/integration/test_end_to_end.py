"""End-to-end integration tests."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest

from pbwire import (
    CounterSequence,
    LongMessageService,
    MockPacketDriver,
    MockTransportConfig,
    PacketClient,
    Target,
    decode,
    decode_hex,
    encode,
    encode_hex,
    prepare_payload,
    to_jsonable,
)
from pbwire.longmsg import RETRIEVE_COMMAND, STORE_COMMAND
from pbwire.transport import SEND_MESSAGE_COMMAND


class ChatServer:
    """Minimal long-message host: stores blobs and records chat messages."""

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}
        self.messages: list[dict[int, Any]] = []

    async def store(self, request: dict[int, Any]) -> dict[int, Any]:
        await asyncio.sleep(0)
        resid = f"lm{len(self.blobs):08x}"
        self.blobs[resid] = request[2][4]
        return {1: 0, 2: {3: resid, 4: 1}}

    def retrieve(self, request: dict[int, Any]) -> dict[int, Any]:
        return {1: {3: request[1][2], 4: self.blobs[request[1][2]]}}

    def send(self, request: dict[int, Any]) -> dict[int, Any]:
        self.messages.append(request)
        return {1: 0, 11: request[4]}

    def attach(self, driver: MockPacketDriver) -> None:
        driver.register(STORE_COMMAND, self.store)
        driver.register(RETRIEVE_COMMAND, self.retrieve)
        driver.register(SEND_MESSAGE_COMMAND, self.send)


@pytest.fixture
def server(driver: MockPacketDriver) -> ChatServer:
    chat = ChatServer()
    chat.attach(driver)
    return chat


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_json_payload_workflow(self) -> None:
        """Test JSON text to wire hex and back to an equivalent JSON view."""
        # 1. Payload as a JSON producer would write it
        text = '{"1": {"1": "hello world"}, "2": "hex->deadbeef", "3": [1, 2, 3]}'

        # 2. Bridge and encode
        wire_hex = encode_hex(prepare_payload(json.loads(text)))

        # 3. Decode on the other side
        message = decode_hex(wire_hex)
        assert message == {1: {1: "hello world"}, 2: b"\xde\xad\xbe\xef", 3: [1, 2, 3]}

        # 4. The JSON view re-encodes to the same bytes
        assert encode_hex(prepare_payload(to_jsonable(message))) == wire_hex

    @pytest.mark.asyncio
    async def test_long_message_workflow(
        self,
        driver: MockPacketDriver,
        client: PacketClient,
        server: ChatServer,
        group_target: Target,
    ) -> None:
        """Test store, embed and retrieve of a long message."""
        service = LongMessageService(client)
        content = [{1: {1: "first paragraph " * 50}}, {1: {1: "second paragraph"}}]

        # 1. Store and reference
        resid = await service.send_long_element(group_target, content)
        assert resid == "lm00000000"

        # 2. The chat message names the resid
        assert len(server.messages) == 1
        element = server.messages[0][3][1][2]
        assert element[37][7] == resid
        assert server.messages[0][1] == {2: {1: 123456}}

        # 3. The blob is compressed
        assert len(server.blobs[resid]) < len(encode({1: content[0][1][1]}))

        # 4. Retrieve returns the envelope with both elements
        retrieved = await service.retrieve(resid)
        assert retrieved is not None
        assert retrieved[2][1] == "MultiMsg"
        assert retrieved[2][2][1][3][1][2] == [
            {1: {1: "first paragraph " * 50}},
            {1: {1: "second paragraph"}},
        ]

        assert driver.commands() == [STORE_COMMAND, SEND_MESSAGE_COMMAND, RETRIEVE_COMMAND]

    @pytest.mark.asyncio
    async def test_send_reply_decoded(
        self, client: PacketClient, server: ChatServer, user_target: Target
    ) -> None:
        """Test an ordinary send returns the decoded host reply."""
        reply = await client.send_elements(user_target, [{1: {1: "hello"}}])

        assert reply == {1: 0, 11: 100}
        assert server.messages[0][1] == {1: {1: 987654}}

    @pytest.mark.asyncio
    async def test_concurrent_sends(self, driver: MockPacketDriver, server: ChatServer) -> None:
        """Test concurrent sends all reach the host with distinct sequence numbers."""
        client = PacketClient(driver, sequence=CounterSequence())
        target = Target(group_id=1)

        await asyncio.gather(
            *(client.send_elements(target, [{1: {1: f"message {i}"}}]) for i in range(10))
        )

        seqs = [message[4] for message in server.messages]
        assert len(server.messages) == 10
        assert len(set(seqs)) == 10

    @pytest.mark.asyncio
    async def test_latency_simulation(self, group_target: Target) -> None:
        """Test the workflow under simulated latency."""
        driver = MockPacketDriver(MockTransportConfig(latency=0.01))
        server = ChatServer()
        server.attach(driver)
        service = LongMessageService(PacketClient(driver))

        resid = await service.send_long_element(group_target, [{1: {1: "delayed text"}}])
        retrieved = await service.retrieve(resid)

        assert retrieved is not None
        assert retrieved[2][2][1][3][1][2] == {1: {1: "delayed text"}}

    def test_decode_wire_dump(self) -> None:
        """Test decoding a captured packet with mixed field kinds."""
        data = encode({1: {2: {1: 5}}, 3: {1: {2: [{1: {1: "x y"}}]}}, 4: 77, 5: 78})

        assert decode(data) == {1: {2: {1: 5}}, 3: {1: {2: {1: {1: "x y"}}}}, 4: 77, 5: 78}
