"""Shared fixtures for the fsmenu test suite.

The menu is driven through a rich console that writes into a StringIO buffer
and a scripted replacement for builtins.input, so every prompt consumes the
next scripted answer. Running out of answers behaves like closing stdin.
"""

import io

import pytest
from rich.console import Console

from fsmenu.file_manager import FileManager
from fsmenu.menu import FileMenu


class ScriptedInput:
    """Callable standing in for builtins.input."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls = 0

    def __call__(self, prompt=""):
        self.calls += 1
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def remaining(self):
        return list(self.answers)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=1000, color_system=None, force_terminal=False)


@pytest.fixture
def output(console):
    """Return a function that reads everything printed so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def file_manager(console):
    return FileManager(console)


@pytest.fixture
def script(monkeypatch):
    """Install a list of answers as the user's input."""
    def install(*answers):
        scripted = ScriptedInput(answers)
        monkeypatch.setattr("builtins.input", scripted)
        return scripted
    return install


@pytest.fixture
def menu(console, file_manager):
    return FileMenu(console, file_manager=file_manager, clear_screen=False)
