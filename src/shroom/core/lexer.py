"""Tokenizer for one line of shell input."""

from __future__ import annotations

import string
from collections.abc import Callable, Iterator

from shroom.core.types import Newline, Text, Token, Whitespace
from shroom.errors import ParseError, UnclosedDelimiterError, UnexpectedCharError, UnexpectedEndError

WHITESPACE = frozenset(" \t")
LINE_ENDINGS = frozenset("\r\n")
UNQUOTED_TEXT = frozenset(string.ascii_letters + string.digits + "-+/_.")
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
QUOTE_ESCAPABLE = frozenset((DOUBLE_QUOTE, BACKSLASH))


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_unquoted_text(char: str) -> bool:
    return char in UNQUOTED_TEXT


class Cursor:
    """Codepoint index into the source with one-step unread."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._source)

    def peek(self) -> str | None:
        if self.at_end:
            return None
        return self._source[self._position]

    def advance(self) -> str | None:
        char = self.peek()
        if char is not None:
            self._position += 1
        return char

    def retreat(self) -> None:
        """Step back one codepoint. Never called more often than `advance`."""
        if self._position == 0:
            raise ValueError("cursor is already at the start of the input")
        self._position -= 1

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._position
        while (char := self.peek()) is not None and predicate(char):
            self._position += 1
        return self._source[start : self._position]


class Lexer:
    """Lazy, non-restartable token stream over one source string.

    Iteration raises a `ParseError` in place of the offending token and the
    lexer is exhausted from then on.
    """

    def __init__(self, source: str) -> None:
        self._cursor = Cursor(source)
        self._failed = False

    @property
    def position(self) -> int:
        return self._cursor.position

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._failed:
            raise StopIteration
        char = self._cursor.advance()
        if char is None:
            raise StopIteration
        try:
            return self._lex(char)
        except ParseError:
            self._failed = True
            raise

    def _lex(self, char: str) -> Token:
        if is_whitespace(char):
            self._cursor.take_while(is_whitespace)
            return Whitespace()
        if is_unquoted_text(char):
            self._cursor.retreat()
            return Text(self._cursor.take_while(is_unquoted_text))
        if char in LINE_ENDINGS:
            return Newline()
        if char == DOUBLE_QUOTE:
            return self._lex_double_quoted_text()
        raise UnexpectedCharError(self._cursor.position - 1)

    def _lex_double_quoted_text(self) -> Text:
        opened_at = self._cursor.position - 1
        chunks: list[str] = []
        while (char := self._cursor.advance()) is not None:
            if char == DOUBLE_QUOTE:
                return Text("".join(chunks))
            if char == BACKSLASH:
                chunks.append(self._lex_double_quote_escape())
            else:
                chunks.append(char)
        raise UnclosedDelimiterError(opened_at)

    def _lex_double_quote_escape(self) -> str:
        escaped = self._cursor.advance()
        if escaped is None:
            raise UnexpectedEndError(self._cursor.position)
        if escaped in QUOTE_ESCAPABLE:
            return escaped
        # Only \" and \\ are escapes; anything else keeps its backslash.
        return BACKSLASH + escaped


def tokenize(source: str) -> list[Token]:
    """Lex the whole source, raising the first lexical error."""

    return list(Lexer(source))
