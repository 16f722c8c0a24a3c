from __future__ import annotations

import argparse
import asyncio
import json
import time
from pathlib import Path

import websockets

from slide_relay.protocol.messages import DecodeError, decode


def _now_ms() -> int:
    return int(time.time() * 1000)


def record_line(raw: str | bytes, ts: int | None = None) -> str | None:
    """One JSONL line for a received frame, or None if the frame isn't a JSON object."""
    try:
        msg = decode(raw)
    except DecodeError:
        return None
    return json.dumps({"ts": _now_ms() if ts is None else ts, "msg": msg}, ensure_ascii=False)


async def record(ws_url: str, out_path: Path, *, echo: bool) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("a", encoding="utf-8") as f:
        async with websockets.connect(ws_url) as ws:
            async for raw in ws:
                line = record_line(raw)
                if line is None:
                    continue
                if echo:
                    print(f"[record] {line}")
                f.write(line + "\n")
                f.flush()


def main() -> None:
    ap = argparse.ArgumentParser(description="Record relay traffic to a JSONL file.")
    ap.add_argument("--ws", required=True, help="WebSocket URL, e.g. ws://127.0.0.1:8080/presentation")
    ap.add_argument("--out", required=True, help="Output JSONL path")
    ap.add_argument("--print", action="store_true", help="Print received messages to stdout")
    args = ap.parse_args()

    try:
        asyncio.run(record(args.ws, Path(args.out), echo=args.print))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
