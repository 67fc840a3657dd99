"""Numeric literal classifier mixin."""

from tinta.categories import HighlightCategory
from tinta.profiles import LexicalProfile
from tinta.scanner.state import Span

_ASCII_DIGITS = frozenset("0123456789")
_NUMBER_CHAR = Span(HighlightCategory.NUMBER)


class NumberClassifierMixin:
    """Mixin providing numeric literal classification.

    Digits continue a number or start one at a word boundary; a dot
    continues a number. Exponents, suffixes and radix prefixes get no
    special treatment.

    """

    _profile: LexicalProfile
    _text: str
    _prev_category: HighlightCategory

    def _at_word_boundary(self, pos: int) -> bool:
        """Check for a separator change at pos. Implemented by LineScanner."""
        raise NotImplementedError

    def _try_classify_number(self, pos: int) -> Span | None:
        """Classify one character as NUMBER when it extends or starts a number."""
        if not self._profile.number:
            return None

        char = self._text[pos]
        after_number = self._prev_category is HighlightCategory.NUMBER
        if char in _ASCII_DIGITS and (after_number or self._at_word_boundary(pos)):
            return _NUMBER_CHAR
        if char == "." and after_number:
            return _NUMBER_CHAR
        return None
