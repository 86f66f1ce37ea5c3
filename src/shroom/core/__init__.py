"""Lexer, parser and evaluator for shroom command lines."""

from .evaluator import evaluate_arguments
from .lexer import Lexer, tokenize
from .parser import Parser, parse_line

__all__ = ["Lexer", "Parser", "evaluate_arguments", "parse_line", "tokenize"]
