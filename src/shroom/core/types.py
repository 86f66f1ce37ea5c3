"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Newline:
    """Line terminator token."""


@dataclass(frozen=True)
class Whitespace:
    """Run of spaces and tabs separating words."""


@dataclass(frozen=True)
class Text:
    """Unquoted word run or the unescaped body of one quoted segment."""

    content: str


Token = Newline | Whitespace | Text


@dataclass(frozen=True)
class TextFragment:
    """Literal piece of an argument value."""

    content: str


# Only literal text exists today; interpolation variants join this union.
Fragment = TextFragment


@dataclass(frozen=True)
class Empty:
    """A line that produced no command."""


@dataclass(frozen=True)
class Call:
    """Command name plus arguments, each argument a list of fragments."""

    command: str
    args: list[list[Fragment]] = field(default_factory=list)


Ast = Empty | Call


@dataclass(frozen=True)
class Terminate:
    """Request to end the interpreter with the given exit code."""

    code: int


@dataclass(frozen=True)
class CommandResult:
    """Result of one dispatched command."""

    name: str
    exit_code: int
    error: str | None = None
    terminate: bool = False

    @property
    def ok(self) -> bool:
        return self.exit_code == 0 and self.error is None
