"""Registry of commands implemented inside the interpreter."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from shroom.core.types import Terminate
from shroom.errors import ArityError
from shroom.system import Environment


def _shorten_text(text: str, width: int = 30, placeholder: str = "...") -> str:
    """Shorten text to width characters, cutting in the middle of words if needed."""
    if len(text) <= width:
        return text

    available = width - len(placeholder)
    if available <= 0:
        return placeholder

    return text[:available] + placeholder


@dataclass(frozen=True)
class BuiltinContext:
    """OS services a builtin may act on."""

    environment: Environment


BuiltinHandler = Callable[[list[str], BuiltinContext], Terminate | None]


@dataclass(frozen=True)
class BuiltinDescriptor:
    """Builtin metadata, arity bounds and handler."""

    name: str
    min_args: int
    max_args: int
    handler: BuiltinHandler

    def check_arity(self, count: int) -> None:
        if count < self.min_args:
            raise ArityError("not enough arguments")
        if count > self.max_args:
            raise ArityError("too many arguments")


class BuiltinRegistry:
    """Name-keyed builtins with inclusive argument-count bounds."""

    def __init__(self) -> None:
        self._builtins: dict[str, BuiltinDescriptor] = {}

    def register(
        self,
        *,
        name: str,
        min_args: int = 0,
        max_args: int = 0,
    ) -> Callable[[BuiltinHandler], BuiltinHandler]:
        if min_args < 0 or max_args < min_args:
            raise ValueError(f"invalid arity for builtin {name}: [{min_args}, {max_args}]")

        def decorator(handler: BuiltinHandler) -> BuiltinHandler:
            self._builtins[name] = BuiltinDescriptor(
                name=name,
                min_args=min_args,
                max_args=max_args,
                handler=self._wrap_handler(name, handler),
            )
            return handler

        return decorator

    def has(self, name: str) -> bool:
        return name in self._builtins

    def get(self, name: str) -> BuiltinDescriptor | None:
        return self._builtins.get(name)

    def execute(self, name: str, args: Sequence[str], *, context: BuiltinContext) -> Terminate | None:
        descriptor = self.get(name)
        if descriptor is None:
            raise KeyError(name)

        descriptor.check_arity(len(args))
        return descriptor.handler(list(args), context)

    def _wrap_handler(self, name: str, handler: BuiltinHandler) -> BuiltinHandler:
        def _handler(args: list[str], context: BuiltinContext) -> Terminate | None:
            rendered = " ".join(_shorten_text(repr(arg)) for arg in args)
            logger.info("builtin.call.start name={} {{ {} }}", name, rendered)

            start = time.monotonic()
            try:
                return handler(args, context)
            except Exception:
                logger.opt(exception=True).debug("builtin.call.error name={}", name)
                raise
            finally:
                duration = time.monotonic() - start
                logger.info("builtin.call.end name={} duration={:.3f}ms", name, duration * 1000)

        return _handler
