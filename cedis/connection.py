"""A single-client TCP connection that reads a command and answers it."""

from __future__ import annotations

import socket
import sys

from cedis.commands import CommandHandler
from cedis.parser import Parser

_READ_SIZE = 1024
_DISCONNECT_MESSAGE = b"DISCONNECT"


def _error(message: str) -> None:
    print(message, file=sys.stderr)


class Connection:
    """Listens on a port, accepts one client and serves its command."""

    def __init__(self, server_ip: str, server_port: int) -> None:
        self._server_ip = server_ip
        self._server_port = server_port
        self._acceptor = socket.create_server(("0.0.0.0", server_port))
        self._socket: socket.socket | None = None
        self._connected = False
        self._parser = Parser()
        print(f"Connection object initialized with server: {server_ip}:{server_port}")

    @property
    def port(self) -> int:
        """The port the listening socket is bound to."""
        return self._acceptor.getsockname()[1]

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start(self) -> bool:
        """Block until a client connects; return whether it succeeded."""
        try:
            self._socket, _ = self._acceptor.accept()
        except OSError as exc:
            _error(f"Connection error: {exc}")
            self._connected = False
            return False
        self._connected = True
        print(f"TCP connection established to {self._server_ip}:{self._server_port}")
        return True

    def handle_client(self) -> None:
        """Read one complete command, run it and send the reply."""
        if not self._connected:
            _error("Cannot handle client: not connected")
        while not self._parser.is_command_valid():
            data = self.read()
            if not data and not self._connected:
                return
            self._parser.feed(data)
        command = self._parser.parse()

        print("received command:")
        for part in command:
            print(part)

        response = CommandHandler().execute(command)
        self.send_response(response)

    def read(self) -> bytes:
        """Read up to 1024 bytes from the client.

        Returns an empty result when the client closed the connection,
        on a receive error, or when the data starts with ``X``.
        """
        if not self._connected or self._socket is None:
            _error("Cannot receive data: not connected")
            return b""
        try:
            data = self._socket.recv(_READ_SIZE)
        except OSError as exc:
            _error(f"Error receiving data: {exc}")
            if isinstance(exc, (ConnectionResetError, BrokenPipeError)):
                self._connected = False
            return b""
        if not data:
            print("Server closed the connection")
            self._connected = False
            return b""
        if data[:1] == b"X":
            return b""
        sys.stdout.write(data.split(b"\0", 1)[0].decode("latin-1"))
        return data

    def send_response(self, response: str) -> int:
        """Send ``response`` to the client; return bytes sent or -1."""
        if not self._connected or self._socket is None:
            _error("Cannot send data: not connected")
            return -1
        payload = response.encode()
        try:
            self._socket.sendall(payload)
        except OSError as exc:
            _error(f"Error sending data: {exc}")
            if isinstance(exc, (ConnectionResetError, BrokenPipeError)):
                self._connected = False
            return -1
        if payload:
            print(f"Sent: {response}")
        return len(payload)

    def is_connected(self) -> bool:
        """Whether a client is connected and its socket is open."""
        return (
            self._connected
            and self._socket is not None
            and self._socket.fileno() != -1
        )

    def disconnect(self) -> None:
        """Tell the client goodbye and close its socket."""
        if not self._connected or self._socket is None:
            return
        try:
            self._socket.sendall(_DISCONNECT_MESSAGE)
            self._socket.close()
            print("Disconnected from client")
        except OSError as exc:
            _error(f"Error during disconnect: {exc}")
            self._socket.close()
        finally:
            self._connected = False

    def close(self) -> None:
        """Disconnect any client and stop listening."""
        if self._connected:
            self.disconnect()
        if self._socket is not None:
            self._socket.close()
        self._acceptor.close()
        print("Connection object destroyed")