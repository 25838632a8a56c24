"""AI Commands - the ``ai`` command group of the shell."""

from .dispatcher import Dispatcher
from .exceptions import AiCommandsError, AiHandlerError, HandlerLoadError, UnknownCommandError
from .handlers import AiHandler, HelpProvider, OutputSink, load_handler
from .models import CommandInvocation, PromptRequest, encode_prompt_result
from .terminal import ClickHelpProvider, TerminalOutput

__version__ = "0.1.0"
__all__ = [
    "Dispatcher",
    "AiCommandsError",
    "AiHandlerError",
    "HandlerLoadError",
    "UnknownCommandError",
    "AiHandler",
    "HelpProvider",
    "OutputSink",
    "load_handler",
    "CommandInvocation",
    "PromptRequest",
    "encode_prompt_result",
    "ClickHelpProvider",
    "TerminalOutput",
]
