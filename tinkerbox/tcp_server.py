"""Threaded TCP server: show each client message and reply with a typed line."""

from __future__ import annotations

import socket
import sys
import threading
from collections.abc import Callable, Iterable

_BUFFER_SIZE = 1024


def _format_addr(addr: tuple) -> str:
    host, port = addr[0], addr[1]
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def handle_client(
    conn: socket.socket,
    addr: tuple,
    lines: Iterable[str],
    write: Callable[[str], object],
) -> None:
    """Serve one client until it closes the connection.

    Every message received is written out, then the next line from ``lines``
    is sent back. Read and write failures raise ``OSError``.
    """
    peer = _format_addr(addr)
    replies = iter(lines)
    write(f"Received connection: {peer}\n")
    while True:
        data = conn.recv(_BUFFER_SIZE)
        if not data:
            write(f"Connection closed: {peer}\n")
            return
        write(f"[{peer}] {data.decode('utf-8', errors='replace')}\n")
        write(">>> ")
        reply = next(replies, "")
        conn.sendall(reply.encode("utf-8"))


def _client_thread(conn: socket.socket, addr: tuple) -> None:
    with conn:
        try:
            handle_client(conn, addr, sys.stdin, _stdout_write)
        except OSError as err:
            print(f"Failed to handle client: {err!r}", file=sys.stderr)


def run_server(host: str, port: str | int) -> None:
    """Listen on ``host:port`` and serve each client in its own thread.

    Raises ``OSError`` when the address cannot be bound. Never returns otherwise.
    """
    full_addr = f"{host}:{port}"
    try:
        listener = socket.create_server((host, int(port)))
    except (OSError, ValueError) as err:
        raise OSError(f"Could not bind to address: {full_addr}: {err}") from err

    with listener:
        print(f"TCP server listening on {full_addr}")
        while True:
            try:
                conn, addr = listener.accept()
            except OSError as err:
                print(f"Connection failed: {err}", file=sys.stderr)
                continue
            threading.Thread(target=_client_thread, args=(conn, addr), daemon=True).start()