from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from slide_relay.protocol.constants import T_COMMAND, T_STATE
from slide_relay.protocol.messages import DecodeError, decode, encode, state_frame

from .registry import Peer, PeerRegistry
from .state import StateStore

log = logging.getLogger(__name__)


class Relay:
    """
    Hub between all connected peers.

    - Keeps the peer registry and the single shared presentation state
    - Every state mutation and fan-out happens under one lock, in arrival order
    - Fan-out only queues frames; each peer's writer task does the socket I/O
    """

    def __init__(
        self,
        initial_state: Mapping[str, Any] | None = None,
        *,
        debug_log_msgs: bool = False,
    ) -> None:
        self.registry = PeerRegistry()
        self.state = StateStore(initial_state)
        self.debug_log_msgs = debug_log_msgs
        self._lock = asyncio.Lock()

    @property
    def peer_count(self) -> int:
        return len(self.registry)

    def snapshot(self) -> dict[str, Any]:
        return self.state.snapshot()

    async def connect(self, peer: Peer) -> None:
        # Prime and register in one step so no broadcast can overtake the snapshot.
        async with self._lock:
            peer.deliver(encode(state_frame(self.state.snapshot())))
            self.registry.register(peer)
            total = len(self.registry)
        peer.start()
        log.info("peer connected: %s (%d connected)", peer.label, total)

    async def handle(self, peer: Peer, raw: str | bytes) -> int:
        """Dispatch one inbound frame. Returns how many peers it was queued for."""
        try:
            msg = decode(raw)
        except DecodeError as e:
            log.warning("dropping malformed frame from %s: %s", peer.label, e)
            return 0

        t = msg.get("type")
        if self.debug_log_msgs:
            log.info("in type=%s from=%s msg=%s", t, peer.label, msg)

        async with self._lock:
            if t == T_STATE:
                merged = self.state.merge(msg)
                data = encode(state_frame(merged))
            elif t == T_COMMAND:
                # Commands are opaque to the relay: forward the frame as received.
                data = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            else:
                log.debug("ignoring frame with type=%r from %s", t, peer.label)
                return 0
            return self.registry.for_each_except(peer, lambda p: p.deliver(data))

    async def disconnect(self, peer: Peer) -> None:
        async with self._lock:
            removed = self.registry.unregister(peer)
            total = len(self.registry)
        await peer.close()
        if removed:
            log.info("peer disconnected: %s (%d connected)", peer.label, total)
