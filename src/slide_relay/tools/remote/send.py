from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any

import websockets

from slide_relay.protocol.constants import KNOWN_COMMANDS
from slide_relay.protocol.messages import CommandMsg, StateMsg, encode


def _json_or_str(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def _on_off(value: str) -> bool:
    v = value.lower()
    if v in ("1", "true", "on", "yes"):
        return True
    if v in ("0", "false", "off", "no"):
        return False
    raise argparse.ArgumentTypeError(f"expected on/off, got {value!r}")


def build_message(args: argparse.Namespace) -> dict[str, Any]:
    if args.kind == "command":
        params = _json_or_str(args.params) if args.params is not None else None
        return CommandMsg(command=args.name, params=params).model_dump()

    extra: dict[str, Any] = {}
    for item in args.set or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise SystemExit(f"--set expects key=value, got {item!r}")
        extra[key] = _json_or_str(value)
    msg = StateMsg(currentSlide=args.slide, totalSlides=args.total, isAutoMode=args.auto, **extra)
    return msg.model_dump(exclude_none=True)


async def send(ws_url: str, msg: dict[str, Any], *, wait: bool) -> None:
    async with websockets.connect(ws_url) as ws:
        # The relay always greets with the current state.
        greeting = await ws.recv()
        if wait:
            print(f"[send] state: {greeting}")
        await ws.send(encode(msg))
        print(f"[send] sent: {encode(msg)}")


def make_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Send one command or state update to the relay.")
    ap.add_argument("--ws", default="ws://127.0.0.1:8080/presentation", help="Relay WebSocket URL")
    ap.add_argument("--wait", action="store_true", help="Print the relay's current state before sending")
    sub = ap.add_subparsers(dest="kind", required=True)

    cmd = sub.add_parser("command", help="Broadcast a remote-control command")
    cmd.add_argument("name", help=f"Command name ({', '.join(KNOWN_COMMANDS)}, or any other)")
    cmd.add_argument("--params", default=None, help="Command params (JSON, or a plain string)")

    st = sub.add_parser("state", help="Merge fields into the shared presentation state")
    st.add_argument("--slide", type=int, default=None, help="currentSlide")
    st.add_argument("--total", type=int, default=None, help="totalSlides")
    st.add_argument("--auto", type=_on_off, default=None, help="isAutoMode (on/off)")
    st.add_argument("--set", action="append", metavar="KEY=VALUE", help="Extra field; may repeat")
    return ap


def main() -> None:
    args = make_parser().parse_args()
    asyncio.run(send(args.ws, build_message(args), wait=args.wait))


if __name__ == "__main__":
    main()
