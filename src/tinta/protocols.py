"""Protocols for host-provided rows.

A host may hand Tinta plain strings, or its own row objects that expose the
rendered text (tabs expanded, control characters resolved) as ``render``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RenderedRow(Protocol):
    """A buffer row exposing its text as shown on screen."""

    @property
    def render(self) -> str:
        """Rendered text; one character per displayed cell."""
        ...


Row = str | RenderedRow


def rendered_text(row: Row) -> str:
    """Return the rendered text of a row given as str or RenderedRow."""
    if isinstance(row, str):
        return row
    return row.render


__all__ = ["RenderedRow", "Row", "rendered_text"]
