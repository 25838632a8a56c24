"""Collaborator interfaces and AI handler loading."""

from __future__ import annotations

from importlib import metadata
from typing import Any, Callable, Optional, Protocol, Sequence

from .exceptions import HandlerLoadError


HANDLER_ENTRY_POINT_GROUP = "ai_commands.handlers"
DEFAULT_HANDLER = "default"


class OutputSink(Protocol):
    """User-facing console."""

    def print(self, text: str) -> None: ...


class HelpProvider(Protocol):
    def help(self, command_path: Sequence[str]) -> str: ...


class AiHandler(Protocol):
    """Performs the real work behind the ``ai`` commands.

    Implementations may call a language model and write to the project tree.
    ``path=None`` means the current working directory.
    """

    def add(
        self,
        description: str,
        path: Optional[str],
        preview: bool,
        rewrite: bool,
        output: OutputSink,
    ) -> None: ...

    def prompt(
        self,
        description: str,
        path: Optional[str],
        rewrite: bool,
        output: OutputSink,
    ) -> Any: ...

    def modify_ai_response(self, file: Optional[str], path: Optional[str]) -> str: ...


HandlerFactory = Callable[[OutputSink], AiHandler]


def load_handler(reference: str, output: OutputSink) -> AiHandler:
    """Resolve ``reference`` to a handler factory and build the handler.

    ``reference`` is either an entry point name registered under
    ``ai_commands.handlers`` or an explicit ``module:attribute`` path.
    """

    factory = resolve_handler_factory(reference)
    return factory(output)


def resolve_handler_factory(reference: str) -> HandlerFactory:
    reference = (reference or "").strip()
    if not reference:
        raise HandlerLoadError("No AI handler configured")

    if ":" in reference:
        entry_point = metadata.EntryPoint(
            name=reference, value=reference, group=HANDLER_ENTRY_POINT_GROUP
        )
    else:
        entry_point = _find_entry_point(reference)

    try:
        factory = entry_point.load()
    except (ImportError, AttributeError) as exc:
        raise HandlerLoadError(f"Cannot load AI handler '{reference}': {exc}") from exc

    if not callable(factory):
        raise HandlerLoadError(f"AI handler '{reference}' is not callable")
    return factory


def available_handlers() -> list[str]:
    return sorted(ep.name for ep in metadata.entry_points(group=HANDLER_ENTRY_POINT_GROUP))


def _find_entry_point(name: str) -> metadata.EntryPoint:
    for entry_point in metadata.entry_points(group=HANDLER_ENTRY_POINT_GROUP):
        if entry_point.name == name:
            return entry_point

    installed = ", ".join(available_handlers()) or "none installed"
    if name == DEFAULT_HANDLER:
        raise HandlerLoadError(
            "No default AI handler is installed. Install a package that registers one "
            f"under '{HANDLER_ENTRY_POINT_GROUP}' or pass --handler module:factory "
            f"(available: {installed})."
        )
    raise HandlerLoadError(f"Unknown AI handler '{name}' (available: {installed})")
