"""Supported languages and how the host selects one.

The language set is closed: every Language has a lexical profile, and
PLAIN stands in for anything without syntax rules.

Usage:
    >>> from tinta.language import Language
    >>> Language.from_filename("src/main.rs")
    <Language.RUST: 'rust'>
    >>> Language.from_name("js")
    <Language.JAVASCRIPT: 'javascript'>

"""

from __future__ import annotations

from enum import Enum

from tinta.errors import UnknownLanguageError


class Language(Enum):
    """Languages with a lexical profile."""

    PLAIN = "plain"
    C = "c"
    RUST = "rust"
    JAVASCRIPT = "javascript"
    GO = "go"

    @property
    def display_name(self) -> str:
        """Human-readable name for status lines."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_filename(cls, path: str) -> Language:
        """Select a language by the extension of the final path component.

        Unknown or missing extensions select PLAIN.

        Args:
            path: File name or path (either separator style)

        Returns:
            The matching Language, never raises.
        """
        name = path.replace("\\", "/").rsplit("/", 1)[-1]
        dot = name.rfind(".")
        if dot <= 0:
            return cls.PLAIN
        return _EXTENSIONS.get(name[dot:], cls.PLAIN)

    @classmethod
    def from_name(cls, name: str) -> Language:
        """Resolve a language identifier or alias (case-insensitive).

        Args:
            name: Identifier such as "rust", "rs", "JavaScript" or "text"

        Returns:
            The matching Language.

        Raises:
            UnknownLanguageError: If name is not a known identifier or alias.
        """
        key = name.strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        language = _ALIASES.get(key)
        if language is None:
            raise UnknownLanguageError(name)
        return language


_DISPLAY_NAMES: dict[Language, str] = {
    Language.PLAIN: "Plain",
    Language.C: "C",
    Language.RUST: "Rust",
    Language.JAVASCRIPT: "JavaScript",
    Language.GO: "Go",
}

_EXTENSIONS: dict[str, Language] = {
    ".c": Language.C,
    ".h": Language.C,
    ".rs": Language.RUST,
    ".js": Language.JAVASCRIPT,
    ".mjs": Language.JAVASCRIPT,
    ".cjs": Language.JAVASCRIPT,
    ".go": Language.GO,
}

_ALIASES: dict[str, Language] = {
    "text": Language.PLAIN,
    "txt": Language.PLAIN,
    "rs": Language.RUST,
    "js": Language.JAVASCRIPT,
    "golang": Language.GO,
}


__all__ = ["Language"]
