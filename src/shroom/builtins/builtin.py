"""Built-in command definitions."""

from __future__ import annotations

import re
from pathlib import Path

from shroom.builtins.registry import BuiltinContext, BuiltinRegistry
from shroom.core.types import Terminate
from shroom.errors import BuiltinError

EXIT_CODE_RE = re.compile(r"[+-]?[0-9]+")
EXIT_CODE_MIN = -(2**31)
EXIT_CODE_MAX = 2**31 - 1


def change_directory(args: list[str], context: BuiltinContext) -> None:
    """Change the working directory to the argument, or home without one."""

    target: str | Path | None = args[0] if args else context.environment.home_directory()
    if target is None:
        raise BuiltinError("couldn't find home dir")

    try:
        context.environment.set_current_directory(target)
    except OSError as exc:
        raise BuiltinError(exc.strerror or str(exc)) from exc
    except ValueError as exc:
        # os.chdir rejects paths with an embedded NUL.
        raise BuiltinError(str(exc)) from exc


def exit_shell(args: list[str], _context: BuiltinContext) -> Terminate:
    """Ask the interpreter to terminate, with code 0 unless one is given."""

    if not args:
        return Terminate(0)
    try:
        return Terminate(parse_exit_code(args[0]))
    except ValueError as exc:
        raise BuiltinError(f"can't parse exit code: {exc}") from exc


def parse_exit_code(text: str) -> int:
    """Parse a signed 32-bit integer made of an optional sign and ASCII digits."""

    if not text:
        raise ValueError("cannot parse integer from empty string")
    if EXIT_CODE_RE.fullmatch(text) is None:
        raise ValueError("invalid digit found in string")

    value = int(text)
    if value > EXIT_CODE_MAX:
        raise ValueError("number too large to fit in target type")
    if value < EXIT_CODE_MIN:
        raise ValueError("number too small to fit in target type")
    return value


def build_builtin_registry() -> BuiltinRegistry:
    registry = BuiltinRegistry()
    registry.register(name="cd", min_args=0, max_args=1)(change_directory)
    registry.register(name="exit", min_args=0, max_args=1)(exit_shell)
    return registry
