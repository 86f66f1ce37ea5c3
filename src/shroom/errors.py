"""Application-level exception types for shroom."""

from __future__ import annotations


class ShroomError(Exception):
    """Base exception for shroom."""


class ConfigurationError(ShroomError):
    """Raised when settings or command-line options are invalid."""


class ParseError(ShroomError):
    """Base exception for lexical errors in one input line."""

    message = "parse error"

    def __init__(self, position: int) -> None:
        super().__init__(self.message)
        self.position = position


class UnclosedDelimiterError(ParseError):
    """Raised when a quote is opened but never closed before the input ends."""

    message = "unclosed delimiter"


class UnexpectedCharError(ParseError):
    """Raised for a character outside every token class."""

    message = "unexpected character"


class UnexpectedEndError(ParseError):
    """Raised when the input ends right after a backslash inside quotes."""

    message = "unexpected end of input"


class EmptyCommandError(ParseError):
    """Raised when the command word of a call is an empty quoted string."""

    message = "empty command name"


class BuiltinError(ShroomError):
    """Raised by a builtin handler when the requested operation fails."""


class ArityError(BuiltinError):
    """Raised when a builtin receives an argument count outside its bounds."""


class SpawnError(ShroomError):
    """Raised when an external command cannot be started."""

    def __init__(self, command: str, detail: str) -> None:
        super().__init__(f"{command}: {detail}")
        self.command = command
        self.detail = detail
