"""Scan state carried between lines and the result of one classification.

Thread Safety:
Both types are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from tinta.categories import HighlightCategory


@dataclass(frozen=True, slots=True)
class ScanState:
    """Lexical state at a line boundary.

    Attributes:
        open_quote: Quote character of a string still open, or None
        in_block_comment: A block comment is open

    """

    open_quote: str | None = None
    in_block_comment: bool = False


INITIAL_STATE = ScanState()


@dataclass(frozen=True, slots=True)
class Span:
    """A classification of the characters at the scan position.

    Attributes:
        category: Category for every character of the span
        length: Number of characters consumed as one unit

    """

    category: HighlightCategory
    length: int = 1


NORMAL_SPAN = Span(HighlightCategory.NORMAL)
MATCH_SPAN = Span(HighlightCategory.MATCH)
