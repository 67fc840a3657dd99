"""Tests for tinta.language: language identity and selection."""

import pytest

from tinta.errors import TintaError, UnknownLanguageError
from tinta.language import Language


class TestFromFilename:
    """Selection by filename extension."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("main.c", Language.C),
            ("include/util.h", Language.C),
            ("src/lib.rs", Language.RUST),
            ("app.js", Language.JAVASCRIPT),
            ("build.mjs", Language.JAVASCRIPT),
            ("config.cjs", Language.JAVASCRIPT),
            ("cmd/server/main.go", Language.GO),
            ("C:\\work\\tool.go", Language.GO),
        ],
    )
    def test_known_extensions(self, path: str, expected: Language) -> None:
        assert Language.from_filename(path) is expected

    @pytest.mark.parametrize(
        "path",
        ["README", "notes.txt", "archive.tar.gz", ".rs", "dir.c/Makefile", "", "main.C"],
    )
    def test_everything_else_is_plain(self, path: str) -> None:
        assert Language.from_filename(path) is Language.PLAIN


class TestFromName:
    """Lookup by identifier or alias."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("c", Language.C),
            ("Rust", Language.RUST),
            ("rs", Language.RUST),
            ("JavaScript", Language.JAVASCRIPT),
            ("js", Language.JAVASCRIPT),
            ("golang", Language.GO),
            (" go ", Language.GO),
            ("text", Language.PLAIN),
            ("plain", Language.PLAIN),
        ],
    )
    def test_known_names(self, name: str, expected: Language) -> None:
        assert Language.from_name(name) is expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownLanguageError) as exc_info:
            Language.from_name("cobol")
        assert exc_info.value.name == "cobol"
        assert "cobol" in str(exc_info.value)

    def test_error_hierarchy(self) -> None:
        with pytest.raises(TintaError):
            Language.from_name("")
        with pytest.raises(ValueError):
            Language.from_name("python")


class TestDisplayName:
    def test_every_language_has_display_name(self) -> None:
        for language in Language:
            assert language.display_name

    def test_javascript_display_name(self) -> None:
        assert Language.JAVASCRIPT.display_name == "JavaScript"
