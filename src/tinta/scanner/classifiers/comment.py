"""Block and line comment classifier mixins."""

from tinta.categories import HighlightCategory
from tinta.profiles import LexicalProfile
from tinta.scanner.state import Span

_COMMENT_CHAR = Span(HighlightCategory.COMMENT)


class BlockCommentClassifierMixin:
    """Mixin providing block comment classification.

    Delimiters are consumed whole, so ``/*/`` opens a comment and leaves
    the trailing ``/`` inside it. Delimiters and comment bodies are two
    separate rules because a line comment leader ranks between them.

    """

    # These will be set by the LineScanner class
    _profile: LexicalProfile
    _text: str
    _open_quote: str | None
    _in_block_comment: bool

    def _try_classify_block_delimiter(self, pos: int) -> Span | None:
        """Classify a block comment delimiter starting at pos.

        Args:
            pos: Scan position in the current line

        Returns:
            COMMENT span covering the delimiter, or None when neither the
            closer (inside a comment) nor the opener (outside) starts here.
        """
        delimiters = self._profile.block_comment
        if delimiters is None or self._open_quote is not None:
            return None

        start, end = delimiters
        delimiter = end if self._in_block_comment else start
        if not self._text.startswith(delimiter, pos):
            return None
        self._in_block_comment = not self._in_block_comment
        return Span(HighlightCategory.COMMENT, len(delimiter))

    def _try_classify_block_body(self, pos: int) -> Span | None:
        """Classify a character inside an open block comment."""
        if self._in_block_comment and self._open_quote is None:
            return _COMMENT_CHAR
        return None


class LineCommentClassifierMixin:
    """Mixin providing line comment classification.

    A leader counts anywhere outside strings, including inside a block
    comment. The block comment then stays open past the end of the line.

    """

    _profile: LexicalProfile
    _text: str
    _open_quote: str | None

    def _try_classify_line_comment(self, pos: int) -> Span | None:
        """Classify the rest of the line as COMMENT when a leader starts here.

        The span always reaches the end of the line, which ends the line scan.
        """
        leader = self._profile.line_comment
        if leader is None or self._open_quote is not None:
            return None
        if not self._text.startswith(leader, pos):
            return None
        return Span(HighlightCategory.COMMENT, len(self._text) - pos)
