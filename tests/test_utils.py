"""Tests for Tinta utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_bare_names(self) -> None:
        from tinta.utils.logger import get_logger

        assert get_logger("scanner").name == "tinta.scanner"

    def test_keeps_package_names(self) -> None:
        from tinta.utils.logger import get_logger

        assert get_logger("tinta.highlighter").name == "tinta.highlighter"
        assert get_logger("tinta").name == "tinta"

    def test_returns_stdlib_logger(self) -> None:
        from tinta.utils import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_language_change_logged(self, caplog) -> None:
        from tinta import Highlighter, Language

        highlighter = Highlighter(Language.C)
        with caplog.at_level(logging.DEBUG, logger="tinta"):
            highlighter.on_language_change(Language.GO)
        assert any("Language changed" in r.message for r in caplog.records)


class TestPackageLogger:
    """The package logger is silent until the host configures logging."""

    def test_null_handler_installed(self) -> None:
        from tinta.utils.logger import PACKAGE_LOGGER

        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_similar_prefix_is_nested(self) -> None:
        from tinta.utils.logger import get_logger

        assert get_logger("tintamarre").name == "tinta.tintamarre"
