"""Shared fixtures: fake sockets for the relay, and a TestClient per test."""
import asyncio
import json

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketState

from slide_relay.server.app import create_app
from slide_relay.server.config import Settings
from slide_relay.server.registry import Peer
from slide_relay.server.relay import Relay

DEFAULT_STATE = {"type": "state", "currentSlide": 1, "totalSlides": 10, "isAutoMode": False}


class FakeSocket:
    """Stands in for a starlette WebSocket on the send side."""

    def __init__(self, fail: bool = False):
        self.sent: list[str] = []
        self.fail = fail
        self.client = None
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED

    async def send_text(self, data: str) -> None:
        if self.fail:
            raise RuntimeError("socket is broken")
        self.sent.append(data)

    def received(self) -> list[dict]:
        return [json.loads(s) for s in self.sent]


def make_peer(label: str, fail: bool = False) -> Peer:
    return Peer(ws=FakeSocket(fail=fail), label=label)


async def settle(*peers: Peer) -> None:
    """Wait until every queued frame has been handed to the peers' sockets."""
    await asyncio.wait_for(asyncio.gather(*(p.outbox.join() for p in peers)), timeout=2)


@pytest_asyncio.fixture
async def relay():
    r = Relay()
    yield r
    for peer in list(r.registry):
        await r.disconnect(peer)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
