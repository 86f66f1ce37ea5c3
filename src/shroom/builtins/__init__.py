"""Commands implemented inside the interpreter."""

from .builtin import build_builtin_registry
from .registry import BuiltinContext, BuiltinDescriptor, BuiltinRegistry

__all__ = ["BuiltinContext", "BuiltinDescriptor", "BuiltinRegistry", "build_builtin_registry"]
