import socket
import threading
import time

import pytest

from cedis.server import main


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _connect(port):
    deadline = time.monotonic() + 5
    while True:
        try:
            return socket.create_connection(("127.0.0.1", port), timeout=5)
        except OSError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.02)


def _recv_all(sock):
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def _run_session(request):
    port = _free_port()
    results = []
    thread = threading.Thread(
        target=lambda: results.append(main(["--port", str(port)]))
    )
    thread.start()
    client = _connect(port)
    try:
        client.sendall(request)
        received = _recv_all(client)
    finally:
        client.close()
    thread.join(timeout=5)
    return results, received


def test_session_with_resp_command():
    results, received = _run_session(b"*1\r\n$4\r\nPING\r\n")
    assert results == [0]
    assert received == b"Hello\nCommand is empty\r\nDISCONNECT"


def test_session_with_plain_command():
    results, received = _run_session(b"PING\r\n")
    assert results == [0]
    assert received == b"Hello\nCommand not found\r\nDISCONNECT"


def test_invalid_port_argument_exits():
    with pytest.raises(SystemExit):
        main(["--port", "not-a-number"])