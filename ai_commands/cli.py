"""Command-line interface for the ``ai`` command group."""

from __future__ import annotations

import sys
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

import click

from .dispatcher import Dispatcher
from .exceptions import AiCommandsError
from .handlers import DEFAULT_HANDLER, load_handler
from .models import CommandInvocation
from .terminal import ClickHelpProvider, TerminalOutput


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
PROG_NAME = "ai"

DESCRIPTION_HELP = (
    "The description of the code to create. This can be as short as a well known "
    "Spring project name, such as 'JPA'."
)
PATH_HELP = (
    "Path on which to run the command. Most of the time, you can not specify the path "
    "and use the default value, which is the current working directory."
)
REWRITE_HELP = (
    "Rewrite the 'description' option of the README.md file but do not apply the "
    "changes to the code base."
)


@dataclass
class CliSettings:
    """Group-level settings shared with every sub-command."""

    handler: str = DEFAULT_HANDLER
    verbose: bool = False


def _path_option(command: Callable) -> Callable:
    return click.option("--path", type=str, default=None, help=PATH_HELP)(command)


def _description_options(command: Callable) -> Callable:
    # Not required at the Click level: the dispatcher reports the omission itself.
    command = _path_option(command)
    return click.option("--description", type=str, default=None, help=DESCRIPTION_HELP)(command)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--handler",
    envvar="AI_COMMANDS_HANDLER",
    default=DEFAULT_HANDLER,
    show_default=True,
    help="AI handler to use: an installed handler name or a module:factory path.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    envvar="AI_COMMANDS_VERBOSE",
    help="Log dispatch details to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, handler: str, verbose: bool) -> None:
    """AI commands: generate code and prompts for a Spring project."""

    ctx.obj = CliSettings(handler=handler, verbose=verbose)


@click.command(name="add", context_settings=CONTEXT_SETTINGS)
@_description_options
@click.option(
    "--preview",
    is_flag=True,
    help="Create the README.md file but do not apply the changes to the code base.",
)
@click.option("--rewrite", is_flag=True, help=REWRITE_HELP)
@click.pass_context
def add_command(
    ctx: click.Context,
    description: Optional[str],
    path: Optional[str],
    preview: bool,
    rewrite: bool,
) -> None:
    """Add code to the project from AI for a Spring project."""

    _run(
        ctx,
        CommandInvocation(
            "add",
            OrderedDict(description=description, path=path, preview=preview, rewrite=rewrite),
        ),
    )


@click.command(name="prompt", context_settings=CONTEXT_SETTINGS)
@_description_options
@click.option("--rewrite", is_flag=True, help=REWRITE_HELP)
@click.option("--plain", is_flag=True, help="Disable syntax highlighting on stdout.")
@click.pass_context
def prompt_command(
    ctx: click.Context,
    description: Optional[str],
    path: Optional[str],
    rewrite: bool,
    plain: bool,
) -> None:
    """Prompt for the AI for a Spring project."""

    result = _run(
        ctx,
        CommandInvocation(
            "prompt", OrderedDict(description=description, path=path, rewrite=rewrite)
        ),
    )
    if result is None:
        return
    _write_json(result, plain)


@click.command(name="enhance-response", context_settings=CONTEXT_SETTINGS)
@click.option("--file", type=str, default=None, help="README.md file path containing the response from the AI.")
@_path_option
@click.pass_context
def enhance_response_command(ctx: click.Context, file: Optional[str], path: Optional[str]) -> None:
    """Enhance the AI response for a Spring project, i.e. make response Boot 3 compliant if necessary etc."""

    result = _run(ctx, CommandInvocation("enhance-response", OrderedDict(file=file, path=path)))
    click.echo(result, nl=not result.endswith("\n"))


COMMAND_MAP = {
    "add": add_command,
    "prompt": prompt_command,
    "enhance-response": enhance_response_command,
}
for name, command in COMMAND_MAP.items():
    cli.add_command(command, name=name)


def dispatch_cli(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    cli.main(args=args, prog_name=PROG_NAME)


# Helper utilities ---------------------------------------------------------------------------


def build_dispatcher(settings: CliSettings) -> Dispatcher:
    return Dispatcher(
        None,
        TerminalOutput(),
        ClickHelpProvider(cli, prog_name=PROG_NAME),
        handler_factory=lambda output: load_handler(settings.handler, output),
        verbose=settings.verbose,
    )


def apply_syntax_highlighting(text: str) -> str:
    try:
        from pygments import highlight
        from pygments.lexers import JsonLexer
        from pygments.formatters import TerminalFormatter

        return highlight(text, JsonLexer(), TerminalFormatter())
    except ImportError:
        return text


def should_use_colors(disable_colors: bool, is_tty: bool) -> bool:
    if disable_colors:
        return False
    return is_tty


def _run(ctx: click.Context, invocation: CommandInvocation) -> Any:
    settings = ctx.find_object(CliSettings) or CliSettings()
    try:
        dispatcher = build_dispatcher(settings)
        return dispatcher.dispatch(invocation)
    except AiCommandsError as exc:
        _bail(str(exc))


def _write_json(text: str, plain: bool) -> None:
    normalized = text if text.endswith("\n") else text + "\n"
    use_colors = should_use_colors(plain, sys.stdout.isatty())
    payload = apply_syntax_highlighting(normalized) if use_colors else normalized
    click.echo(payload, nl=False)


def _bail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    dispatch_cli()
