"""Command AST construction from the token stream."""

from __future__ import annotations

from shroom.core.lexer import Lexer
from shroom.core.types import Ast, Call, Empty, Fragment, Newline, Text, TextFragment, Whitespace
from shroom.errors import EmptyCommandError


class Parser:
    """Builds one command AST from a single line of input.

    A lexical error anywhere in the call aborts the whole line; no partial
    AST is returned.
    """

    def __init__(self, source: str) -> None:
        self._lexer = Lexer(source)

    def parse(self) -> Ast:
        start = self._lexer.position
        for token in self._lexer:
            if isinstance(token, Text):
                if not token.content:
                    # A quoted "" is a word, but never a command name.
                    raise EmptyCommandError(start)
                return self._parse_call(token.content)
            start = self._lexer.position
        return Empty()

    def _parse_call(self, command: str) -> Call:
        args: list[list[Fragment]] = []
        current_arg: list[Fragment] = []

        for token in self._lexer:
            if isinstance(token, Text):
                current_arg.append(TextFragment(token.content))
            elif isinstance(token, Whitespace):
                if current_arg:
                    args.append(current_arg)
                    current_arg = []
            elif isinstance(token, Newline):
                break

        # Input exhaustion finalizes the call like a newline does.
        if current_arg:
            args.append(current_arg)
        return Call(command=command, args=args)


def parse_line(source: str) -> Ast:
    """Parse one line of input into an AST."""

    return Parser(source).parse()
