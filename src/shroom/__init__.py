"""shroom - a small interactive command interpreter."""

from .core.dispatcher import Dispatcher
from .shell import Shell

__version__ = "0.1.0"

__all__ = ["Dispatcher", "Shell"]
