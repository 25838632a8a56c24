"""Console output and help text backed by Click."""

from __future__ import annotations

from typing import Sequence

import click


class TerminalOutput:
    """Write user-facing text through ``click.echo``.

    Strings styled with ``click.style`` keep their colors on a terminal; Click
    strips them when the stream is not a TTY.
    """

    def print(self, text: str) -> None:
        click.echo(text)


class ClickHelpProvider:
    """Render help for a command path inside a Click group."""

    def __init__(self, root: click.Group, prog_name: str = "ai") -> None:
        self.root = root
        self.prog_name = prog_name

    def help(self, command_path: Sequence[str]) -> str:
        parts: list[str] = []
        for element in command_path:
            parts.extend(element.split())
        if parts and parts[0] == self.prog_name:
            parts = parts[1:]

        ctx = click.Context(self.root, info_name=self.prog_name)
        command: click.Command = self.root
        for name in parts:
            if not isinstance(command, click.Group):
                raise LookupError(f"'{ctx.command_path}' has no sub-command '{name}'")
            sub_command = command.get_command(ctx, name)
            if sub_command is None:
                raise LookupError(f"No such command: {self.prog_name} {' '.join(parts)}")
            command = sub_command
            ctx = click.Context(command, info_name=name, parent=ctx)
        return command.get_help(ctx)
