from __future__ import annotations

import logging
import time

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse

from .config import Settings, get_settings
from .pages import render_control_html, render_index_html
from .registry import Peer
from .relay import Relay

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the HTTP/WebSocket app around a fresh relay."""
    settings = settings or get_settings()
    relay = Relay(settings.initial_state(), debug_log_msgs=settings.debug_log_msgs)
    started = time.monotonic()

    app = FastAPI(title="slide-relay")
    app.state.relay = relay
    app.state.settings = settings

    @app.get("/healthz")
    def healthz():
        return {
            "ok": True,
            "peers": relay.peer_count,
            "uptime_s": round(time.monotonic() - started, 3),
        }

    @app.get("/state")
    def state():
        return relay.snapshot()

    @app.get("/", response_class=HTMLResponse)
    def index():
        return HTMLResponse(render_index_html(settings.ws_path))

    @app.get("/control", response_class=HTMLResponse)
    @app.get("/control.html", response_class=HTMLResponse)
    def control():
        return HTMLResponse(render_control_html(settings.ws_path))

    @app.websocket(settings.ws_path)
    async def presentation(ws: WebSocket):
        await ws.accept()
        peer = Peer.for_socket(ws)
        await relay.connect(peer)
        try:
            while True:
                msg = await ws.receive()
                if msg["type"] == "websocket.disconnect":
                    break
                raw = msg.get("text")
                if raw is None:
                    raw = msg.get("bytes")
                if raw is None:
                    continue
                await relay.handle(peer, raw)
        except WebSocketDisconnect:
            pass
        except Exception:
            log.exception("transport error on %s", peer.label)
        finally:
            await relay.disconnect(peer)

    return app


_app: FastAPI | None = None


def __getattr__(name: str):
    # `uvicorn slide_relay.server.app:app` builds the default app on first access only.
    if name == "app":
        global _app
        if _app is None:
            _app = create_app()
        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
