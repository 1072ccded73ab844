#!/usr/bin/env python3
"""Launch the todo API server.

Usage:
    ./start_server.py                  # Serve on 0.0.0.0:4567 backed by MongoDB
    ./start_server.py --port 8080      # Use custom port
    ./start_server.py --store memory   # Run without MongoDB
"""

import argparse
import dataclasses
import logging
import sys

from todo_api.config import STORE_BACKENDS, Settings
from todo_api.exceptions import ConfigError
from todo_api.logging_config import configure_logging

logger = logging.getLogger("todo_api.start")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Launch the todo API server")
    parser.add_argument("--host", help="Server host (default: $TODO_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Server port (default: $TODO_PORT or 4567)")
    parser.add_argument("--store", choices=STORE_BACKENDS, help="Store backend (default: $TODO_STORE or mongo)")
    parser.add_argument("--mongo-url", help="MongoDB connection URL (default: $MONGO_URL)")
    parser.add_argument("--log-level", help="Log level (default: $TODO_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def build_settings(args) -> Settings:
    """Environment settings with command-line flags applied on top."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "store_backend": args.store,
        "mongo_url": args.mongo_url,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    return dataclasses.replace(Settings.from_env(), **overrides)


def main(argv=None):
    args = parse_args(argv)

    try:
        settings = build_settings(args)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    import uvicorn
    from todo_api.server import create_app

    logger.info("Starting todo API on %s:%d (store=%s)", settings.host, settings.port, settings.store_backend)
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
