import socket

import pytest

from tinkerbox.netcli import main


@pytest.mark.parametrize("argv", [[], ["client"], ["server", "127.0.0.1"], ["a", "b", "c", "d"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 1
    err = capsys.readouterr().err
    assert err.startswith("Usage:")
    assert "tcp client <server-address> <port>" in err


def test_invalid_option(capsys):
    assert main(["bogus", "127.0.0.1", "1"]) == 1
    err = capsys.readouterr().err
    assert "Invalid option: bogus" in err
    assert "Usage:" in err


def test_client_connection_failure(capsys):
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main(["client", "127.0.0.1", str(port)]) == 1
    assert f"Failed to connect to 127.0.0.1:{port}" in capsys.readouterr().err


def test_server_bind_failure(capsys):
    assert main(["server", "127.0.0.1", "notaport"]) == 1
    assert "Could not bind to address" in capsys.readouterr().err