"""Exceptions shared by the CLI and the dispatcher."""


class AiCommandsError(Exception):
    """Base class for errors the CLI reports as ``Error: <message>``."""


class HandlerLoadError(AiCommandsError):
    """Raised when the configured AI handler cannot be resolved."""


class UnknownCommandError(AiCommandsError):
    """Raised when an invocation names a command the dispatcher does not know."""


class AiHandlerError(AiCommandsError):
    """Expected failure raised by an AI handler (missing README, bad model response, ...)."""
