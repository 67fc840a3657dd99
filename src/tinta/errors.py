"""Exception classes for Tinta.

Highlighting itself never raises: scans, language swaps and match overlays
are total over their inputs. Errors only surface where the host hands Tinta
free-form values, such as language names read from configuration.
"""

from __future__ import annotations


class TintaError(Exception):
    """Base exception for all Tinta errors.

    Subclass this for specific error categories.
    """

    pass


class UnknownLanguageError(TintaError, ValueError):
    """A language name does not match any supported language.

    Raised by Language.from_name and, through it, by config loading.
    """

    def __init__(self, name: str) -> None:
        """Initialize with the offending name.

        Args:
            name: The language name that could not be resolved
        """
        self.name = name
        super().__init__(f"Unknown language: {name!r}")
