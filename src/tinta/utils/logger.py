"""Logging helpers for Tinta.

Every module logs through a child of the ``tinta`` logger. The package
installs a NullHandler on that logger and nothing else, so an editor that
never configures logging sees no output, while one that does can turn on
scan tracing for the whole package at once.

Example:
    >>> import logging
    >>> logging.basicConfig()
    >>> logging.getLogger("tinta").setLevel(logging.DEBUG)
    >>> # Highlighter.rescan now reports "Scanning lines 0..40 of 212"
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "tinta"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``tinta`` namespace.

    Module names already inside the package are used as is; anything else
    is nested under ``tinta.`` so host applications filter a single tree.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("tinta.highlighter").name
        'tinta.highlighter'
        >>> get_logger("scanner").name
        'tinta.scanner'
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
