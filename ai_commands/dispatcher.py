"""Route ``ai`` sub-commands to an AI handler."""

from __future__ import annotations

import sys
from typing import Optional

import click

from .exceptions import UnknownCommandError
from .handlers import AiHandler, HandlerFactory, HelpProvider, OutputSink
from .models import CommandInvocation, encode_prompt_result


MISSING_DESCRIPTION_MESSAGE = "Error: Missing required argument: [description]"
ADD_HELP_PATH = ("ai add",)


class Dispatcher:
    """Validate options and forward each command to exactly one handler call.

    Collaborators are fixed at construction. When a ``handler_factory`` is
    given instead of a handler, the handler is built on the first call that
    reaches it, so invalid invocations never construct one.
    """

    def __init__(
        self,
        handler: Optional[AiHandler],
        output: OutputSink,
        help_provider: Optional[HelpProvider] = None,
        *,
        handler_factory: Optional[HandlerFactory] = None,
        verbose: bool = False,
    ) -> None:
        if handler is None and handler_factory is None:
            raise ValueError("Dispatcher requires a handler or a handler_factory")
        self._handler = handler
        self._handler_factory = handler_factory
        self.output = output
        self.help_provider = help_provider
        self.verbose = verbose

    @property
    def handler(self) -> AiHandler:
        if self._handler is None:
            self._log("building AI handler")
            self._handler = self._handler_factory(self.output)
        return self._handler

    def dispatch(self, invocation: CommandInvocation) -> Optional[str]:
        """Run the operation named by ``invocation.command``."""

        name = invocation.command
        if name == "add":
            self.add(
                invocation.get("description"),
                invocation.get("path"),
                bool(invocation.get("preview", False)),
                bool(invocation.get("rewrite", False)),
            )
            return None
        if name == "prompt":
            return self.prompt(
                invocation.get("description"),
                invocation.get("path"),
                bool(invocation.get("rewrite", False)),
            )
        if name == "enhance-response":
            return self.enhance_response(invocation.get("file"), invocation.get("path"))
        raise UnknownCommandError(f"Unknown ai command '{name}'")

    def add(
        self,
        description: Optional[str],
        path: Optional[str] = None,
        preview: bool = False,
        rewrite: bool = False,
    ) -> None:
        if not _has_text(description):
            self.print_missing_description_message()
            return
        self._log(f"add description={description!r} path={path or '<cwd>'} "
                  f"preview={preview} rewrite={rewrite}")
        self.handler.add(description, path, preview, rewrite, self.output)

    def prompt(
        self,
        description: Optional[str],
        path: Optional[str] = None,
        rewrite: bool = False,
    ) -> Optional[str]:
        """Return the handler's prompt result as JSON text."""

        if not _has_text(description):
            self.print_missing_description_message()
            return None
        self._log(f"prompt description={description!r} path={path or '<cwd>'} rewrite={rewrite}")
        result = self.handler.prompt(description, path, rewrite, self.output)
        return encode_prompt_result(result)

    def enhance_response(self, file: Optional[str] = None, path: Optional[str] = None) -> str:
        self._log(f"enhance-response file={file or '<default>'} path={path or '<cwd>'}")
        return self.handler.modify_ai_response(file, path)

    def print_missing_description_message(self) -> None:
        self.output.print(click.style(MISSING_DESCRIPTION_MESSAGE, fg="white"))
        if self.help_provider is None:
            return
        # Missing help text must never fail the command.
        try:
            help_text = self.help_provider.help(list(ADD_HELP_PATH))
        except Exception as exc:
            self._log(f"help lookup for {' '.join(ADD_HELP_PATH)!r} failed: {exc}")
            return
        self.output.print(help_text)

    def _log(self, message: str) -> None:
        if not self.verbose:
            return
        sys.stderr.write(f"[ai-commands][dispatch] {message}\n")
        sys.stderr.flush()


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value != ""
