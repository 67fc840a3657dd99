"""ContextVar-based highlighter configuration for Tinta.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Highlighter snapshots the active config when it is created, so changing
the config later never affects buffers that are already open.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tinta.config import HighlightConfig, highlight_config_context

    with highlight_config_context(HighlightConfig(resume_scans=True)):
        highlighter = Highlighter(Language.C, rows)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from tinta.language import Language


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlighter configuration.

    Attributes:
        resume_scans: When more lines scroll into view and nothing was
            edited, continue from the state saved at the old bottom line
            instead of rescanning from line 0. Results are identical.
        default_language: Language used when a Highlighter is created
            without one.

    """

    resume_scans: bool = False
    default_language: Language = Language.PLAIN

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> HighlightConfig:
        """Create HighlightConfig from dictionary.

        Useful for editors that keep settings in TOML or JSON files.
        Unknown keys are silently ignored; ``default_language`` may be given
        as a language name or alias.

        Args:
            config_dict: Dictionary with config values. Keys should match
                HighlightConfig attribute names.

        Returns:
            New HighlightConfig instance with values from dict.

        Raises:
            UnknownLanguageError: If default_language names no known language.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "resume_scans": True,
            ...     "default_language": "rs",
            ...     "theme": "ignored",
            ... })
            >>> config.default_language
            <Language.RUST: 'rust'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        language = filtered.get("default_language")
        if isinstance(language, str):
            filtered["default_language"] = Language.from_name(language)
        if "resume_scans" in filtered:
            filtered["resume_scans"] = bool(filtered["resume_scans"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlighter configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlighter configuration for current context.

    Args:
        config: HighlightConfig instance to use for this context.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Args:
        config: HighlightConfig to use within the context.

    Example:
        >>> with highlight_config_context(HighlightConfig(resume_scans=True)):
        ...     get_highlight_config().resume_scans
        True

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "highlight_config_context",
    "reset_highlight_config",
    "set_highlight_config",
]
