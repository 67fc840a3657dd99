"""
Tinta: incremental per-character syntax highlighting for text editors.

Classifies every rendered character of a line buffer as keyword, type,
string, comment, number, character literal, statement or search match.
Comment and string state flow across lines, rescans only happen when the
buffer changed or more lines scroll into view, and a single search match
can be overlaid and later removed without losing the classification
underneath. Zero runtime dependencies.

Quick Start:
    >>> from tinta import Language, highlight_lines
    >>> cats = highlight_lines(["int x = 42;"], Language.C)
    >>> [c.name for c in cats[0][:3]]
    ['TYPE', 'TYPE', 'TYPE']

Editor Integration:
    >>> from tinta import Highlighter, Language
    >>> rows = ["/* header", " * more */", "return 0;"]
    >>> hl = Highlighter(Language.from_filename("main.c"), rows)
    >>> hl.rescan(rows, visible_bottom=3)
    >>> hl.set_match(2, 0, 6)       # search hit on "return"
    >>> hl.clear_match()            # line to redraw
    2
    >>> rows[2] = "return 1;"
    >>> hl.mark_dirty()             # after every edit
    >>> hl.rescan(rows, visible_bottom=3)
"""

from collections.abc import Iterable

from tinta.categories import Color, HighlightCategory
from tinta.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from tinta.errors import TintaError, UnknownLanguageError
from tinta.highlighter import Highlighter
from tinta.language import Language
from tinta.overlay import SavedMatch
from tinta.profiles import LexicalProfile, profile_for
from tinta.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from tinta.protocols import RenderedRow, Row
from tinta.render import render_line
from tinta.scanner import LineScanner, ScanState

__version__ = "0.1.0"


def highlight_lines(
    lines: Iterable[Row],
    language: Language,
) -> list[list[HighlightCategory]]:
    """Classify every character of every line in one pass.

    Args:
        lines: Rows as str or RenderedRow
        language: Language whose profile drives classification

    Returns:
        One list of categories per line, one category per character.

    Example:
        >>> cats = highlight_lines(['"a\\\\"b"'], Language.C)
        >>> {c.name for c in cats[0]}
        {'STRING'}
    """
    rows = list(lines)
    highlighter = Highlighter(language, rows)
    highlighter.rescan(rows, len(rows))
    return highlighter.lines


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "highlight_lines",
    "Highlighter",
    "render_line",
    # Categories
    "Color",
    "HighlightCategory",
    # Languages and profiles
    "Language",
    "LexicalProfile",
    "profile_for",
    # Overlay
    "SavedMatch",
    # Scanner components
    "LineScanner",
    "ScanState",
    # Host protocols
    "RenderedRow",
    "Row",
    # Profiling
    "ScanAccumulator",
    "profiled_scan",
    "get_scan_accumulator",
    # Configuration (ContextVar-based)
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
    # Errors
    "TintaError",
    "UnknownLanguageError",
]
