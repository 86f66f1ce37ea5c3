"""Read-eval loop tying the parser to the dispatcher."""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from shroom.core.dispatcher import Dispatcher
from shroom.core.parser import parse_line
from shroom.core.types import CommandResult
from shroom.errors import ParseError
from shroom.system import Environment, OsEnvironment

PARSE_ERROR_EXIT_CODE = 2
DEFAULT_PROMPT_SUFFIX = "> "


class Reporter(Protocol):
    """Output surface for diagnostics and status lines."""

    def error(self, message: str) -> None: ...

    def exit_code(self, code: int) -> None: ...


class LineSource(Protocol):
    """Blocking reader of one line of user input; raises EOFError at the end."""

    def read_line(self, prompt: str) -> str: ...


class Shell:
    """Interprets one line at a time and reports the outcome."""

    def __init__(
        self,
        reporter: Reporter,
        *,
        dispatcher: Dispatcher | None = None,
        environment: Environment | None = None,
        report_exit_codes: bool = True,
        prompt_suffix: str = DEFAULT_PROMPT_SUFFIX,
    ) -> None:
        self._reporter = reporter
        self._environment = environment or OsEnvironment()
        self._dispatcher = dispatcher or Dispatcher(environment=self._environment)
        self._report_exit_codes = report_exit_codes
        self._prompt_suffix = prompt_suffix

    def prompt(self) -> str:
        return f"{self._environment.current_directory()}{self._prompt_suffix}"

    def run_line(self, line: str) -> CommandResult:
        try:
            ast = parse_line(line)
        except ParseError as exc:
            logger.debug("line.parse.error position={} error={}", exc.position, exc)
            self._reporter.error(f"parse error: {exc}")
            return CommandResult(name="", exit_code=PARSE_ERROR_EXIT_CODE, error=f"parse error: {exc}")

        result = self._dispatcher.execute(ast)
        if result.error is not None:
            self._reporter.error(result.error)
        if result.exit_code != 0 and not result.terminate and self._report_exit_codes:
            self._reporter.exit_code(result.exit_code)
        return result

    def run_loop(self, source: LineSource) -> int:
        """Run until `exit` or end of input and return the interpreter's exit code."""

        while True:
            prompt = self.prompt()
            try:
                result = self.run_line(source.read_line(prompt))
            except KeyboardInterrupt:
                # Ctrl-C drops the current line and shows a fresh prompt.
                continue
            except EOFError:
                return 0

            if result.terminate:
                return result.exit_code
