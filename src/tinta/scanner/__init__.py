"""Character-level scanner for Tinta.

This package classifies rendered lines one character at a time, carrying
comment and string state across lines.

Architecture:
scanner/
├── __init__.py          # Re-exports LineScanner, ScanState, Span
├── core.py              # LineScanner (classification chain + line loop)
├── state.py             # ScanState (cross-line), Span (one classification)
├── charsets.py          # Separator sets for word boundaries
└── classifiers/         # One mixin per rule of the chain
    ├── comment.py       # Block and line comments
    ├── literal.py       # Character and string literals
    ├── word.py          # Keywords, statements, builtin types
    └── number.py        # Numeric literals

Usage:
    >>> from tinta.categories import HighlightCategory
    >>> from tinta.profiles import C_PROFILE
    >>> from tinta.scanner import LineScanner
    >>> cells = [HighlightCategory.NORMAL] * 5
    >>> LineScanner(C_PROFILE).scan_line("int x", cells)
    >>> [c.name for c in cells]
    ['TYPE', 'TYPE', 'TYPE', 'NORMAL', 'NORMAL']

"""

from tinta.scanner.core import LineScanner
from tinta.scanner.state import INITIAL_STATE, ScanState, Span

__all__ = ["INITIAL_STATE", "LineScanner", "ScanState", "Span"]
