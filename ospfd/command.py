"""Registry of named commands dispatched from a text line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

MAX_COMMANDS = 100
MAX_ARGS = 10


class CommandError(Exception):
    """Raised when a command cannot be registered or executed."""


class UnknownCommandError(CommandError):
    """Raised when a line names no registered command."""


@dataclass(frozen=True)
class Command:
    """A named handler; the handler receives the argument list, name first."""

    name: str
    handler: Callable[[list[str]], int]
    help: str = ""


class CommandRegistry:
    """Holds up to *max_commands* commands and runs them by name."""

    def __init__(self, max_commands: int = MAX_COMMANDS):
        self.max_commands = max_commands
        self._commands: list[Command] = []

    def register(self, command: Command) -> None:
        if len(self._commands) >= self.max_commands:
            raise CommandError("command table is full")
        self._commands.append(command)

    def execute(self, line: str) -> int:
        """Split *line* on spaces and run the matching command's handler."""
        tokens = [token for token in line.split(" ") if token]
        if not tokens:
            raise CommandError("empty command line")
        name = tokens[0]
        for command in self._commands:
            if command.name == name:
                return command.handler(tokens[:MAX_ARGS])
        raise UnknownCommandError(f"Unknown command: {line}")

    def clear(self) -> None:
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)