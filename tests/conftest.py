"""Shared pytest fixtures."""

import pytest

from ai_commands.models import PromptRequest


class RecordingOutput:
    def __init__(self):
        self.lines = []

    def print(self, text):
        self.lines.append(text)


class RecordingHandler:
    """AI handler double that records every call."""

    def __init__(self, output=None):
        self.output = output
        self.calls = []
        self.prompt_result = PromptRequest(
            system_prompt="You are a Spring expert.",
            user_prompt="Add JPA to the project.",
        )
        self.enhanced = "# Enhanced README\n"

    def add(self, description, path, preview, rewrite, output):
        self.calls.append(("add", description, path, preview, rewrite, output))

    def prompt(self, description, path, rewrite, output):
        self.calls.append(("prompt", description, path, rewrite, output))
        return self.prompt_result

    def modify_ai_response(self, file, path):
        self.calls.append(("modify_ai_response", file, path))
        return self.enhanced


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture(autouse=True)
def cli_handler(monkeypatch, handler):
    """Route the CLI to the recording handler; individual tests can override."""

    from ai_commands import cli

    def _load(reference, output):
        handler.output = output
        handler.reference = reference
        return handler

    monkeypatch.setattr(cli, "load_handler", _load)
    return handler
