"""Argument expression evaluation."""

from __future__ import annotations

from collections.abc import Sequence

from shroom.core.types import Fragment, TextFragment


def evaluate_fragment(fragment: Fragment) -> str:
    if isinstance(fragment, TextFragment):
        return fragment.content
    raise TypeError(f"unsupported fragment: {fragment!r}")


def evaluate_argument(fragments: Sequence[Fragment]) -> str:
    """Concatenate the fragments of one argument in source order."""

    return "".join(evaluate_fragment(fragment) for fragment in fragments)


def evaluate_arguments(args: Sequence[Sequence[Fragment]]) -> list[str]:
    return [evaluate_argument(arg) for arg in args]
