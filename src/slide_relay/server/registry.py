from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator

from fastapi import WebSocket
from starlette.websockets import WebSocketState

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Peer:
    """One registered connection. Identity is the object itself."""

    ws: WebSocket
    label: str = "?"
    outbox: asyncio.Queue[str] = field(default_factory=asyncio.Queue)
    open: bool = True
    _writer: asyncio.Task | None = field(default=None, init=False, repr=False)

    @classmethod
    def for_socket(cls, ws: WebSocket) -> Peer:
        client = ws.client
        label = f"{client.host}:{client.port}" if client else "?"
        return cls(ws=ws, label=label)

    def start(self) -> None:
        if self._writer is None:
            self._writer = asyncio.create_task(self._write_loop())

    def deliver(self, data: str) -> bool:
        """Queue a frame for this peer; never blocks. False once the peer is closed."""
        if not self.open:
            return False
        self.outbox.put_nowait(data)
        return True

    def _ready(self) -> bool:
        return (
            self.open
            and self.ws.client_state == WebSocketState.CONNECTED
            and self.ws.application_state == WebSocketState.CONNECTED
        )

    async def _write_loop(self) -> None:
        while True:
            data = await self.outbox.get()
            try:
                if not self._ready():
                    log.debug("peer %s not open, dropping frame", self.label)
                    continue
                try:
                    await self.ws.send_text(data)
                except Exception as e:
                    # Send failures never close the peer; its receive loop does that.
                    log.debug("send to %s failed: %s", self.label, e)
            finally:
                self.outbox.task_done()

    async def close(self) -> None:
        self.open = False
        if self._writer is not None:
            self._writer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._writer
            self._writer = None


class PeerRegistry:
    def __init__(self) -> None:
        # dict keeps registration order, which makes fan-out order deterministic
        self._peers: dict[Peer, None] = {}

    def register(self, peer: Peer) -> None:
        self._peers[peer] = None

    def unregister(self, peer: Peer) -> bool:
        if peer not in self._peers:
            return False
        del self._peers[peer]
        return True

    def for_each_except(self, sender: Peer | None, fn: Callable[[Peer], object]) -> int:
        n = 0
        for peer in list(self._peers):
            if peer is sender:
                continue
            fn(peer)
            n += 1
        return n

    def __contains__(self, peer: object) -> bool:
        return peer in self._peers

    def __iter__(self) -> Iterator[Peer]:
        return iter(list(self._peers))

    def __len__(self) -> int:
        return len(self._peers)
