"""Character sets for O(1) separator classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from tinta.scanner.charsets import is_separator

    if is_separator(char):  # O(1) lookup
        ...
"""

# ASCII whitespace as used for word boundaries (no vertical tab)
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f")

# ASCII punctuation minus underscore, which belongs to identifiers
WORD_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^`{|}~")

# Characters that separate words; NUL marks the start of a line
SEPARATORS: frozenset[str] = ASCII_WHITESPACE | WORD_PUNCTUATION | frozenset("\0")

ESCAPE_CHAR = "\\"
CHAR_QUOTE = "'"
LINE_START = "\0"


def is_separator(char: str) -> bool:
    """Check if a character separates words."""
    return char in SEPARATORS
