"""Line-based TCP client: send each input line, print the server's reply."""

from __future__ import annotations

import socket
import sys
from collections.abc import Callable, Iterable


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def run_client(
    host: str,
    port: str | int,
    lines: Iterable[str] = sys.stdin,
    write: Callable[[str], object] = _stdout_write,
) -> None:
    """Connect to ``host:port`` and exchange lines until input or the server ends.

    Each line is sent as given; the server's one-line reply is written as
    ``[host:port]: reply``. Connection and read failures raise ``ConnectionError``.
    """
    write("TCP client\n")
    full_addr = f"{host}:{port}"
    try:
        sock = socket.create_connection((host, int(port)))
    except (OSError, ValueError) as err:
        raise ConnectionError(f"Failed to connect to {full_addr}: {err}") from err

    with sock, sock.makefile("rb") as reader:
        write(f"Connected to server at: {full_addr}\n")
        for line in lines:
            try:
                sock.sendall(line.encode("utf-8"))
            except OSError as err:
                raise ConnectionError(f"Failed to send message to server: {err}") from err
            try:
                raw = reader.readline()
                response = raw.decode("utf-8")
            except (OSError, UnicodeDecodeError) as err:
                raise ConnectionError(f"Failed to read server response: {err}") from err
            if not raw:
                return
            write(f"[{full_addr}]: {response}")