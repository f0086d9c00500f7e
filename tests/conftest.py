from __future__ import annotations

from typing import Iterable, List, Sequence

import pytest
from rich.console import Console
from rich.prompt import PromptBase


class FakeRunner:
    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: List[List[str]] = []

    def run(self, args: Sequence[str]) -> int:
        self.calls.append(list(args))
        return self.returncode


class ScriptedAnswers:
    """Feeds queued answers to rich prompts; an empty string means enter."""

    def __init__(self) -> None:
        self.pending: List[str] = []
        self.prompts: List[str] = []

    def queue(self, answers: Iterable[str]) -> None:
        self.pending.extend(answers)

    def __call__(self, console, prompt, password, stream=None) -> str:
        self.prompts.append(str(prompt))
        if not self.pending:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        return self.pending.pop(0)


@pytest.fixture()
def answers(monkeypatch: pytest.MonkeyPatch) -> ScriptedAnswers:
    scripted = ScriptedAnswers()

    def _get_input(cls, console, prompt, password, stream=None):
        return scripted(console, prompt, password, stream)

    monkeypatch.setattr(PromptBase, "get_input", classmethod(_get_input))
    return scripted


@pytest.fixture()
def console() -> Console:
    return Console(record=True, width=120, force_terminal=False)


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()
