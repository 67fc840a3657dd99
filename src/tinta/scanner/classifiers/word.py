"""Keyword, control statement and builtin type classifier mixin."""

from tinta.profiles import LexicalProfile
from tinta.scanner.charsets import is_separator
from tinta.scanner.state import Span


class WordClassifierMixin:
    """Mixin providing word classification against the profile word table."""

    _profile: LexicalProfile
    _text: str

    def _at_word_boundary(self, pos: int) -> bool:
        """Check for a separator change at pos. Implemented by LineScanner."""
        raise NotImplementedError

    def _try_classify_word(self, pos: int) -> Span | None:
        """Try to match a whole word from the profile at a word boundary.

        A word matches only when the text continues with a separator or ends
        right after it, so ``int`` never matches inside ``internal``. The
        first entry in table order wins.

        Returns:
            Span of the word's category covering the word, or None.
        """
        if not self._at_word_boundary(pos):
            return None

        text = self._text
        for word, category in self._profile.candidates(text[pos]):
            if not text.startswith(word, pos):
                continue
            end = pos + len(word)
            if end == len(text) or is_separator(text[end]):
                return Span(category, len(word))
        return None
