from __future__ import annotations

import argparse
import logging

import uvicorn

from .app import create_app
from .config import get_settings


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logging with the specified level."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Run the presentation state relay.")
    ap.add_argument("--host", default=settings.host, help=f"Bind address (default {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Listen port (default {settings.port})")
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level, e.g. DEBUG or INFO")
    args = ap.parse_args()

    setup_logging(args.log_level)
    settings = settings.model_copy(update={"host": args.host, "port": args.port, "log_level": args.log_level})
    log = logging.getLogger(__name__)
    log.info("presentation relay on http://%s:%d (websocket %s)", settings.host, settings.port, settings.ws_path)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
