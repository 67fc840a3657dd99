"""Highlight categories and their display colors.

Every rendered character carries exactly one HighlightCategory. Each category
maps to one Color, and each Color to one ANSI SGR escape sequence. Both
mappings are pure lookups.

Thread Safety:
Enums are immutable and safe to share across threads.

"""

from __future__ import annotations

from enum import Enum, auto


class Color(Enum):
    """Display colors used by the renderer.

    The value of each member is its ANSI escape sequence.
    """

    RESET = "\x1b[39;0m"
    RED = "\x1b[91m"
    GREEN = "\x1b[32m"
    GRAY = "\x1b[90m"
    YELLOW = "\x1b[93m"
    PURPLE = "\x1b[95m"
    BLUE = "\x1b[94m"
    CYAN_UNDERLINE = "\x1b[96;4m"

    @property
    def sequence(self) -> str:
        """ANSI escape sequence that switches the terminal to this color."""
        return self.value


class HighlightCategory(Enum):
    """Semantic class of a single rendered character."""

    NORMAL = auto()
    NUMBER = auto()
    STRING = auto()
    COMMENT = auto()
    KEYWORD = auto()
    TYPE = auto()
    CHAR = auto()
    STATEMENT = auto()
    MATCH = auto()  # Search overlay, restorable

    @property
    def color(self) -> Color:
        """Display color for this category."""
        return _CATEGORY_COLORS[self]


_CATEGORY_COLORS: dict[HighlightCategory, Color] = {
    HighlightCategory.NORMAL: Color.RESET,
    HighlightCategory.NUMBER: Color.RED,
    HighlightCategory.STRING: Color.GREEN,
    HighlightCategory.COMMENT: Color.GRAY,
    HighlightCategory.KEYWORD: Color.YELLOW,
    HighlightCategory.TYPE: Color.PURPLE,
    HighlightCategory.CHAR: Color.GREEN,
    HighlightCategory.STATEMENT: Color.BLUE,
    HighlightCategory.MATCH: Color.CYAN_UNDERLINE,
}


__all__ = ["Color", "HighlightCategory"]
