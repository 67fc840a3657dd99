"""ANSI rendering of highlighted lines.

Combines a line's rendered text with its categories, switching terminal
colors only where the color actually changes.

Usage:
    >>> from tinta.categories import HighlightCategory as H
    >>> render_line("x1", [H.NORMAL, H.NUMBER])
    'x\\x1b[91m1\\x1b[39;0m'

"""

from __future__ import annotations

from collections.abc import Sequence

from tinta.categories import Color, HighlightCategory


def render_line(text: str, categories: Sequence[HighlightCategory]) -> str:
    """Render text with ANSI color escapes for its categories.

    Missing trailing categories count as NORMAL; surplus ones are ignored.
    Output ends with a reset whenever a color was switched on.

    Args:
        text: Rendered line text
        categories: One category per character of text

    Returns:
        Text interleaved with escape sequences.
    """
    parts: list[str] = []
    current = Color.RESET
    for x, char in enumerate(text):
        color = categories[x].color if x < len(categories) else Color.RESET
        if color is not current:
            parts.append(color.sequence)
            current = color
        parts.append(char)
    if current is not Color.RESET:
        parts.append(Color.RESET.sequence)
    return "".join(parts)


__all__ = ["render_line"]
