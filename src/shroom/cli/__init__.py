"""Command-line surface for shroom."""

from .render import PromptLineSource, Renderer, StreamLineSource

__all__ = ["PromptLineSource", "Renderer", "StreamLineSource"]
