"""Run the AIOS Brain HTTP server."""

from __future__ import annotations

import argparse

from aios_brain.config import Config
from aios_brain.log_utils import setup_logging
from aios_brain.server import start_server


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aios_brain", description=__doc__)
    parser.add_argument("--host", default=Config.server.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=Config.server.PORT, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes")
    parser.add_argument("--log-level", default=None, help="Root log level (default from AIOS_LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level)
    start_server(host=args.host, port=args.port, reload=args.reload or Config.server.RELOAD)


if __name__ == "__main__":
    main()
