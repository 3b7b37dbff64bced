"""Command line entry for the TCP client and server."""

from __future__ import annotations

import sys

from tinkerbox.tcp_client import run_client
from tinkerbox.tcp_server import run_server

_USAGE = (
    "Usage:\n"
    "  tcp server <bind-address> <port>\n"
    "  tcp client <server-address> <port>\n"
)


def _usage() -> int:
    print(_USAGE, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Start the client or server named by the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        return _usage()

    mode, host, port = args
    try:
        if mode == "client":
            run_client(host, port)
        elif mode == "server":
            run_server(host, port)
        else:
            print(f"Invalid option: {mode}", file=sys.stderr)
            return _usage()
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())