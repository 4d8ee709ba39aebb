"""Command objects and the dispatcher that maps command names to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

EMPTY_COMMAND_REPLY = "Command is empty\r\n"
UNKNOWN_COMMAND_REPLY = "Command not found\r\n"


class Command(ABC):
    """A command that turns its arguments into a reply string."""

    @abstractmethod
    def execute(self, args: Sequence[str]) -> str:
        """Run the command; ``args[0]`` is the command name."""


class Ping(Command):
    """Replies with a PONG simple string."""

    def execute(self, args: Sequence[str]) -> str:
        return "+PONG\r\n"


class Echo(Command):
    """Replies with its first argument."""

    def execute(self, args: Sequence[str]) -> str:
        return args[1]


def _default_commands() -> dict[str, Command]:
    return {"PING": Ping()}


class CommandHandler:
    """Looks up a command by its case-insensitive name and runs it."""

    def __init__(self, commands: Mapping[str, Command] | None = None) -> None:
        source = _default_commands() if commands is None else commands
        self._commands = {name.upper(): command for name, command in source.items()}

    def execute(self, args: Sequence[str]) -> str:
        """Dispatch ``args`` to the command named by its first element."""
        if not args:
            return EMPTY_COMMAND_REPLY
        command = self._commands.get(args[0].upper())
        if command is None:
            return UNKNOWN_COMMAND_REPLY
        return command.execute(args)