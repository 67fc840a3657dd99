"""Per-line classification engine.

The LineScanner walks one rendered line left to right and assigns a
HighlightCategory to every character. Each position runs the classification
chain in priority order; the first classifier that applies decides the
category and how many characters it covers:

1. block comment delimiters
2. line comments (rest of the line)
3. block comment bodies
4. character literals
5. string literals
6. keywords, control statements and builtin types
7. numbers
8. NORMAL otherwise

A cell already holding MATCH keeps it and skips the chain, so a match
over a quote or comment opener opens nothing. Only a line comment leader
is still honored there. Spans recognized elsewhere cover their whole
length, MATCH cells included.

No regex in the hot path. String and comment state carry over from one
line to the next; everything else resets at each line start.

Thread Safety:
LineScanner instances are single-use per scan pass. All state is
instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from tinta.categories import HighlightCategory
from tinta.profiles import LexicalProfile
from tinta.scanner.charsets import LINE_START, is_separator
from tinta.scanner.classifiers import (
    BlockCommentClassifierMixin,
    CharLiteralClassifierMixin,
    LineCommentClassifierMixin,
    NumberClassifierMixin,
    StringClassifierMixin,
    WordClassifierMixin,
)
from tinta.scanner.state import INITIAL_STATE, MATCH_SPAN, NORMAL_SPAN, ScanState, Span

_MATCH = HighlightCategory.MATCH


class LineScanner(
    BlockCommentClassifierMixin,
    LineCommentClassifierMixin,
    CharLiteralClassifierMixin,
    StringClassifierMixin,
    WordClassifierMixin,
    NumberClassifierMixin,
):
    """Stateful character classifier for consecutive lines.

    Usage:
        >>> from tinta.profiles import C_PROFILE
        >>> scanner = LineScanner(C_PROFILE)
        >>> cells = [HighlightCategory.NORMAL] * 6
        >>> scanner.scan_line("/* a b", cells)
        >>> scanner.state.in_block_comment
        True

    Feed lines in buffer order; ``state`` tells what carries into the next
    line.

    """

    __slots__ = (
        "_profile",
        "_open_quote",
        "_in_block_comment",
        "_text",
        "_prev_char",
        "_prev_category",
        "_chain",
    )

    def __init__(self, profile: LexicalProfile, state: ScanState = INITIAL_STATE) -> None:
        """Initialize scanner.

        Args:
            profile: Lexical rules of the active language
            state: State at the start of the first line to scan
        """
        self._profile = profile
        self._open_quote: str | None = state.open_quote
        self._in_block_comment: bool = state.in_block_comment

        # Per-line state, reset by scan_line
        self._text: str = ""
        self._prev_char: str = LINE_START
        self._prev_category: HighlightCategory = HighlightCategory.NORMAL

        # Classification chain, highest priority first
        self._chain: tuple[Callable[[int], Span | None], ...] = (
            self._try_classify_block_delimiter,
            self._try_classify_line_comment,
            self._try_classify_block_body,
            self._try_classify_char_literal,
            self._try_classify_string,
            self._try_classify_word,
            self._try_classify_number,
        )

    @property
    def state(self) -> ScanState:
        """State that carries into the next line."""
        return ScanState(
            open_quote=self._open_quote,
            in_block_comment=self._in_block_comment,
        )

    def scan_line(self, text: str, cells: MutableSequence[HighlightCategory]) -> None:
        """Classify every character of a line into cells.

        Args:
            text: Rendered line text
            cells: Categories of the line, same length as text. Updated in
                place. A MATCH cell stays MATCH unless a span that
                starts before it, or a line comment starting on it, covers it.
        """
        self._text = text
        self._prev_char = LINE_START
        self._prev_category = HighlightCategory.NORMAL

        text_len = len(text)
        pos = 0
        while pos < text_len:
            if cells[pos] is _MATCH:
                span = self._try_classify_line_comment(pos) or MATCH_SPAN
            else:
                span = self._classify(pos)
            end = pos + span.length
            cells[pos:end] = [span.category] * span.length
            self._prev_category = span.category
            self._prev_char = text[end - 1]
            pos = end

    def _classify(self, pos: int) -> Span:
        """Run the classification chain at pos; NORMAL when nothing applies."""
        for classify in self._chain:
            span = classify(pos)
            if span is not None:
                return span
        return NORMAL_SPAN

    def _at_word_boundary(self, pos: int) -> bool:
        """Check whether separator-ness changes between pos - 1 and pos."""
        return is_separator(self._prev_char) != is_separator(self._text[pos])


__all__ = ["LineScanner"]
