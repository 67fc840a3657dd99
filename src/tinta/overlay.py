"""Single-slot match overlay.

Search features mark the current hit by overwriting its span with MATCH.
The overwritten categories are saved so clearing the overlay puts back
exactly what the scanner produced. At most one span is saved at a time.

Usage:
    >>> highlighter.set_match(3, 4, 9)
    >>> highlighter.clear_match()  # line to redraw
    3

"""

from __future__ import annotations

from dataclasses import dataclass

from tinta.categories import HighlightCategory
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SavedMatch:
    """Categories hidden under an active match overlay.

    Attributes:
        line: Line index of the overlay
        start: First overlaid character offset
        saved: Categories the overlay replaced, in order

    """

    line: int
    start: int
    saved: tuple[HighlightCategory, ...]

    @property
    def end(self) -> int:
        """Offset one past the last overlaid character."""
        return self.start + len(self.saved)


class MatchOverlayMixin:
    """Mixin providing set_match/clear_match over per-line categories."""

    # These will be set by the Highlighter class
    _lines: list[list[HighlightCategory]]
    _saved_match: SavedMatch | None

    @property
    def saved_match(self) -> SavedMatch | None:
        """The active overlay, if any."""
        return self._saved_match

    def set_match(self, line: int, start: int, end: int) -> None:
        """Overlay MATCH on characters [start, end) of a line.

        Any previous overlay is cleared first. Empty or inverted ranges and
        ranges outside the line are ignored.

        Args:
            line: Line index
            start: First character offset
            end: Offset one past the last character
        """
        if start >= end:
            return
        if not 0 <= line < len(self._lines) or start < 0 or end > len(self._lines[line]):
            logger.debug("Ignoring match outside line %d: [%d, %d)", line, start, end)
            return

        self.clear_match()
        cells = self._lines[line]
        self._saved_match = SavedMatch(line=line, start=start, saved=tuple(cells[start:end]))
        cells[start:end] = [HighlightCategory.MATCH] * (end - start)

    def clear_match(self) -> int | None:
        """Restore the categories hidden by the active overlay.

        Returns:
            Index of the restored line, or None when no overlay was active
            or its line no longer exists.
        """
        saved_match = self._saved_match
        if saved_match is None:
            return None
        self._saved_match = None

        line = saved_match.line
        if line >= len(self._lines):
            logger.debug("Dropping match on vanished line %d", line)
            return None

        cells = self._lines[line]
        # The line may have shrunk since; restore only what still fits
        end = min(saved_match.end, len(cells))
        if saved_match.start < end:
            cells[saved_match.start : end] = saved_match.saved[: end - saved_match.start]
        return line


__all__ = ["MatchOverlayMixin", "SavedMatch"]
