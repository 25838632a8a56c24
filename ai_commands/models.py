"""Value types passed between the CLI, the dispatcher and AI handlers."""

from __future__ import annotations

import dataclasses
import json
from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class CommandInvocation:
    """One parsed user command: the sub-command name plus its options."""

    command: str
    options: "OrderedDict[str, Any]" = field(default_factory=OrderedDict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)


@dataclass
class PromptRequest:
    """System and user prompts an AI handler builds for a description."""

    system_prompt: str
    user_prompt: str


def encode_prompt_result(value: Any) -> str:
    """Serialize a prompt result to JSON text.

    Dataclasses are expanded field by field and paths become strings. Keys keep
    their insertion order. Values the JSON encoder rejects raise ``TypeError``,
    and NaN or infinite floats raise ``ValueError``.
    """

    return json.dumps(value, indent=2, allow_nan=False, default=_encode_default)


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
