"""Accumulates bytes received from a client and recognises RESP frames."""

from __future__ import annotations

PREFIX_ERROR = "Prefix Error"

_TERMINATOR = b"\r\n"
_RESP_PREFIXES = frozenset(b"+-:*$")


class Parser:
    """Buffers incoming data until a full command has arrived."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def feed(self, data: bytes) -> None:
        """Append received bytes to the internal buffer."""
        self._buffer.extend(data)

    def is_command_valid(self) -> bool:
        """Return True once the buffered data ends with CRLF."""
        return len(self._buffer) >= 2 and self._buffer.endswith(_TERMINATOR)

    def parse(self) -> list[str]:
        """Parse the buffered command.

        A buffer that does not start with a RESP type prefix yields
        ``["Prefix Error"]``; recognised prefixes yield no arguments yet.
        """
        if not self._buffer:
            raise ValueError("nothing to parse: buffer is empty")
        if self._buffer[0] not in _RESP_PREFIXES:
            return [PREFIX_ERROR]
        return []