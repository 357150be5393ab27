from __future__ import annotations

import argparse
from typing import Sequence

import uvicorn

from todo_backend.api.players import create_app
from todo_backend.config.settings import settings
from todo_backend.logging_config import get_logger


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Serve GET /players/{name} score lookups")
    p.add_argument("--host", default=settings.players_host, help="Interface to bind")
    p.add_argument("--port", type=int, default=settings.players_port, help="Port to listen on")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = get_logger()
    logger.info("Starting players server", extra={"host": args.host, "port": args.port})
    uvicorn.run(create_app(), host=args.host, port=int(args.port), log_level="warning")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
