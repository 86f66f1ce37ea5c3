"""CLI rendering and line input for shroom."""

from __future__ import annotations

import sys
from typing import TextIO

from prompt_toolkit import PromptSession
from rich.console import Console

PROGRAM_NAME = "shroom"


class Renderer:
    """Terminal output using Rich, diagnostics on stderr."""

    def __init__(self, *, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console: Console = console or Console(soft_wrap=True, highlight=False, emoji=False)
        self.error_console: Console = error_console or Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

    def error(self, message: str) -> None:
        """Render a diagnostic line."""
        self.error_console.print(f"{PROGRAM_NAME}: {message}", markup=False)

    def exit_code(self, code: int) -> None:
        """Render the exit code of a command that failed."""
        self.console.print(f"{PROGRAM_NAME}: exit code: {code}", markup=False)

    def prompt(self, text: str) -> None:
        self.console.print(text, end="", markup=False)


class PromptLineSource:
    """Interactive line input backed by prompt_toolkit."""

    def __init__(self) -> None:
        self._prompt_session: PromptSession[str] = PromptSession()

    def read_line(self, prompt: str) -> str:
        return self._prompt_session.prompt(prompt)


class StreamLineSource:
    """Line input from a plain text stream, used when stdin is not a terminal."""

    def __init__(self, stream: TextIO | None = None, renderer: Renderer | None = None) -> None:
        self._stream = stream
        self._renderer = renderer

    def read_line(self, prompt: str) -> str:
        if self._renderer is not None:
            self._renderer.prompt(prompt)
        line = (self._stream or sys.stdin).readline()
        if not line:
            raise EOFError
        return line


def create_cli_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()
