"""Character and string literal classifier mixins."""

from tinta.categories import HighlightCategory
from tinta.profiles import LexicalProfile
from tinta.scanner.charsets import CHAR_QUOTE, ESCAPE_CHAR
from tinta.scanner.state import Span

_CHAR_SHORT = Span(HighlightCategory.CHAR, 3)  # 'x'
_CHAR_ESCAPED = Span(HighlightCategory.CHAR, 4)  # '\x'
_STRING_CHAR = Span(HighlightCategory.STRING)


class CharLiteralClassifierMixin:
    """Mixin providing character literal classification."""

    _profile: LexicalProfile
    _text: str

    def _try_classify_char_literal(self, pos: int) -> Span | None:
        """Try to classify a character literal starting at pos.

        Only two fixed shapes are recognized: quote, escape, any, quote and
        quote, any, quote. The shapes are tried inside open strings too; a
        literal found there leaves the string open.

        Returns:
            CHAR span covering the whole literal, or None.
        """
        if not self._profile.character:
            return None

        text = self._text
        if text[pos] != CHAR_QUOTE:
            return None
        if (
            pos + 3 < len(text)
            and text[pos + 1] == ESCAPE_CHAR
            and text[pos + 3] == CHAR_QUOTE
        ):
            return _CHAR_ESCAPED
        if pos + 2 < len(text) and text[pos + 2] == CHAR_QUOTE:
            return _CHAR_SHORT
        return None


class StringClassifierMixin:
    """Mixin providing string literal classification.

    A string stays open across lines until its quote reappears without a
    backslash right before it. Runs of backslashes are not counted.

    """

    _profile: LexicalProfile
    _text: str
    _open_quote: str | None
    _prev_char: str

    def _try_classify_string(self, pos: int) -> Span | None:
        """Classify one character as STRING, opening or closing as needed."""
        quotes = self._profile.string_quotes
        if not quotes:
            return None

        char = self._text[pos]
        if self._open_quote is not None:
            if char == self._open_quote and self._prev_char != ESCAPE_CHAR:
                self._open_quote = None
            return _STRING_CHAR

        if char in quotes:
            self._open_quote = char
            return _STRING_CHAR
        return None
