"""Per-buffer highlight state and the incremental rescan policy.

A Highlighter is created when a buffer opens and lives as long as the
buffer. It owns one list of categories per line, a dirty flag, the bottom
line of the last scan, and the match overlay.

Rescan policy:
    ``rescan(rows, visible_bottom)`` does work only when the buffer was
    marked dirty or more lines came into view than were scanned before.
    It then classifies lines 0..visible_bottom so comment and string state
    flow correctly from the top of the buffer. With
    ``HighlightConfig.resume_scans`` a clean scroll extension picks up from
    the state saved at the previous bottom line instead.

The host must call ``mark_dirty()`` after every text edit, before the next
rescan; otherwise stale categories persist.

Thread Safety:
    Not thread-safe. A Highlighter belongs to exactly one buffer and is
    driven from that buffer's thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tinta.categories import HighlightCategory
from tinta.config import HighlightConfig, get_highlight_config
from tinta.language import Language
from tinta.overlay import MatchOverlayMixin, SavedMatch
from tinta.profiles import LexicalProfile, profile_for
from tinta.profiling import get_scan_accumulator
from tinta.protocols import Row, rendered_text
from tinta.render import render_line
from tinta.scanner import INITIAL_STATE, LineScanner, ScanState
from tinta.utils.logger import get_logger

logger = get_logger(__name__)

_NORMAL = HighlightCategory.NORMAL


class Highlighter(MatchOverlayMixin):
    """Highlight state of one buffer.

    Usage:
        >>> rows = ["int x = 42; // note"]
        >>> highlighter = Highlighter(Language.C, rows)
        >>> highlighter.rescan(rows, 1)
        >>> highlighter.lines[0][0]
        <HighlightCategory.TYPE: 6>

    """

    __slots__ = (
        "_config",
        "_profile",
        "_lines",
        "_needs_update",
        "_scanned_bottom",
        "_saved_match",
        "_checkpoints",  # ScanState at the start of each scanned line
    )

    def __init__(
        self,
        language: Language | None = None,
        rows: Iterable[Row] = (),
        *,
        config: HighlightConfig | None = None,
    ) -> None:
        """Create all-NORMAL state for rows; the first rescan is a full scan.

        Args:
            language: Active language (config default_language if None)
            rows: Buffer rows as str or RenderedRow
            config: Configuration (current context config if None)
        """
        self._config = config if config is not None else get_highlight_config()
        if language is None:
            language = self._config.default_language
        self._profile: LexicalProfile = profile_for(language)
        self._lines: list[list[HighlightCategory]] = [
            [_NORMAL] * len(rendered_text(row)) for row in rows
        ]
        self._needs_update: bool = True
        self._scanned_bottom: int = 0
        self._saved_match: SavedMatch | None = None
        self._checkpoints: list[ScanState] = []

    # =========================================================================
    # State accessors
    # =========================================================================

    @property
    def language(self) -> Language:
        """Active language."""
        return self._profile.language

    @property
    def profile(self) -> LexicalProfile:
        """Lexical profile of the active language."""
        return self._profile

    @property
    def lines(self) -> list[list[HighlightCategory]]:
        """Categories per line, one per rendered character of scanned lines."""
        return self._lines

    @property
    def needs_update(self) -> bool:
        """True when the next rescan must rescan from the top."""
        return self._needs_update

    @property
    def scanned_bottom(self) -> int:
        """Visible bottom line passed to the last effective rescan."""
        return self._scanned_bottom

    def categories(self, line: int) -> list[HighlightCategory]:
        """Categories of one line; empty for lines that do not exist."""
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return []

    # =========================================================================
    # Invalidation
    # =========================================================================

    def mark_dirty(self) -> None:
        """Signal that buffer text changed since the last rescan."""
        self._needs_update = True

    def on_language_change(self, language: Language) -> None:
        """Switch to another language's profile; a no-op if unchanged."""
        if self._profile.language is language:
            return
        logger.debug(
            "Language changed from %s to %s", self._profile.language.name, language.name
        )
        self._profile = profile_for(language)
        self._needs_update = True

    # =========================================================================
    # Scanning
    # =========================================================================

    def rescan(self, rows: Sequence[Row], visible_bottom: int) -> None:
        """Bring categories up to date for lines above visible_bottom.

        Args:
            rows: All buffer rows, in order
            visible_bottom: Index one past the last visible line
        """
        acc = get_scan_accumulator()
        if not self._needs_update and visible_bottom <= self._scanned_bottom:
            if acc is not None:
                acc.record_skip()
            return

        lines = self._lines
        row_count = len(rows)
        if len(lines) > row_count:
            del lines[row_count:]
        else:
            lines.extend([] for _ in range(row_count - len(lines)))

        start = 0
        state = INITIAL_STATE
        record = self._config.resume_scans
        if record and not self._needs_update and self._checkpoints:
            start = len(self._checkpoints) - 1
            state = self._checkpoints[start]
        checkpoints = self._checkpoints[:start]

        end = min(visible_bottom, row_count)
        logger.debug("Scanning lines %d..%d of %d", start, end, row_count)

        scanner = LineScanner(self._profile, state)
        chars = 0
        for y in range(start, end):
            if record:
                checkpoints.append(scanner.state)
            text = rendered_text(rows[y])
            cells = lines[y]
            _fit(cells, len(text))
            scanner.scan_line(text, cells)
            chars += len(text)
        if record:
            checkpoints.append(scanner.state)
        self._checkpoints = checkpoints

        self._needs_update = False
        self._scanned_bottom = visible_bottom
        if acc is not None:
            acc.record_scan(max(end - start, 0), chars)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_line(self, row: Row, line: int) -> str:
        """Render a row with the stored categories of its line."""
        return render_line(rendered_text(row), self.categories(line))


def _fit(cells: list[HighlightCategory], length: int) -> None:
    """Resize cells in place to length, padding with NORMAL."""
    if len(cells) > length:
        del cells[length:]
    elif len(cells) < length:
        cells.extend([_NORMAL] * (length - len(cells)))


__all__ = ["Highlighter"]
