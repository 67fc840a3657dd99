"""Character classifiers for the Tinta scanner.

Each classifier is a mixin implementing one rule of the classification
chain. A classifier inspects the current line at a scan position and
returns a Span, or None when its rule does not apply.
"""

from tinta.scanner.classifiers.comment import (
    BlockCommentClassifierMixin,
    LineCommentClassifierMixin,
)
from tinta.scanner.classifiers.literal import (
    CharLiteralClassifierMixin,
    StringClassifierMixin,
)
from tinta.scanner.classifiers.number import (
    NumberClassifierMixin,
)
from tinta.scanner.classifiers.word import (
    WordClassifierMixin,
)

__all__ = [
    "BlockCommentClassifierMixin",
    "CharLiteralClassifierMixin",
    "LineCommentClassifierMixin",
    "NumberClassifierMixin",
    "StringClassifierMixin",
    "WordClassifierMixin",
]
