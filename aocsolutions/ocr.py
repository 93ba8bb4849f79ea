"""Rendering of lit/unlit screens into the puzzle's character convention."""

from collections.abc import Iterable


def screen_to_string(screen: Iterable[Iterable[bool]]) -> str:
    """Render rows of booleans as '#' (lit) and '.' (unlit), one line per row."""
    return "\n".join("".join("#" if lit else "." for lit in row) for row in screen)