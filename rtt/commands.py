"""A queue of deferred terminal commands."""

from __future__ import annotations

from typing import Callable, Optional, TextIO

Command = Callable[[Optional[TextIO]], None]


class CommandsHolder:
    """Collects commands and runs them in the order they were added."""

    def __init__(self) -> None:
        self.commands: list[Command] = []

    def __len__(self) -> int:
        return len(self.commands)

    def __repr__(self) -> str:
        return f"CommandsHolder({len(self.commands)} commands)"

    def push(self, command: Command) -> None:
        """Queue a command; it is called with the output stream."""
        self.commands.append(command)

    def exec_all(self, stream: Optional[TextIO] = None) -> None:
        """Run every queued command, reporting I/O failures and carrying on."""
        for command in self.commands:
            try:
                command(stream)
            except OSError as exc:
                print(f"Error executing command: {exc}")