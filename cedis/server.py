"""Command-line entry point: serve a single client."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from cedis.connection import Connection

DEFAULT_IP = "127.0.0.1"
DEFAULT_PORT = 6969
GREETING = "Hello\n"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cedis", description="Serve one client.")
    parser.add_argument("--ip", default=DEFAULT_IP, help="address shown in messages")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Accept one client, greet it, answer one command and exit."""
    args = _parse_args(argv)
    print("Hello, server!")
    with Connection(args.ip, args.port) as connection:
        started = connection.start()
        if not started:
            print("Connection failed.", file=sys.stderr)
        if connection.send_response(GREETING) <= 0:
            print("packet send failed.", file=sys.stderr)
        connection.handle_client()
    return 0 if started else 1


if __name__ == "__main__":
    sys.exit(main())