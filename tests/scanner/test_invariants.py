"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from tinta import HighlightConfig, Highlighter, Language
from tinta.categories import HighlightCategory
from tinta.profiles import C_PROFILE, profile_for
from tinta.scanner import LineScanner

# Characters that exercise every rule of the chain
_SOURCE_ALPHABET = "intcharforgo_xyz0123456789.'\"\\/*; \t()"

_lines = st.lists(st.text(alphabet=_SOURCE_ALPHABET, max_size=40), max_size=12)
_languages = st.sampled_from(list(Language))


def _full(rows: list[str], language: Language) -> Highlighter:
    highlighter = Highlighter(language, rows)
    highlighter.rescan(rows, len(rows))
    return highlighter


class TestLengthInvariant:
    """Category count always equals character count after a scan."""

    @given(_lines, _languages)
    @settings(max_examples=200)
    def test_lengths_match(self, rows: list[str], language: Language) -> None:
        highlighter = _full(rows, language)
        assert len(highlighter.lines) == len(rows)
        for text, cells in zip(rows, highlighter.lines):
            assert len(cells) == len(text)

    @given(st.lists(st.text(max_size=30), max_size=8))
    @settings(max_examples=100)
    def test_lengths_match_for_arbitrary_unicode(self, rows: list[str]) -> None:
        highlighter = _full(rows, Language.RUST)
        for text, cells in zip(rows, highlighter.lines):
            assert len(cells) == len(text)

    @given(_lines, _lines)
    @settings(max_examples=100)
    def test_lengths_follow_edits(self, before: list[str], after: list[str]) -> None:
        highlighter = _full(before, Language.C)
        highlighter.mark_dirty()
        highlighter.rescan(after, len(after))
        assert [len(c) for c in highlighter.lines] == [len(t) for t in after]


class TestDeterminism:
    """Rescanning unchanged text gives identical results."""

    @given(_lines, _languages)
    @settings(max_examples=100)
    def test_rescan_idempotent(self, rows: list[str], language: Language) -> None:
        highlighter = _full(rows, language)
        first = [list(cells) for cells in highlighter.lines]
        highlighter.mark_dirty()
        highlighter.rescan(rows, len(rows))
        assert highlighter.lines == first

    @given(_lines, st.integers(min_value=0, max_value=12), st.integers(min_value=0, max_value=12))
    @settings(max_examples=100)
    def test_resume_matches_full_scan(self, rows: list[str], first: int, second: int) -> None:
        bottom, extended = min(first, second), max(first, second)
        reference = Highlighter(Language.C, rows)
        reference.rescan(rows, extended)

        resumed = Highlighter(Language.C, rows, config=HighlightConfig(resume_scans=True))
        resumed.rescan(rows, bottom)
        resumed.rescan(rows, extended)
        assert resumed.lines == reference.lines


class TestAtomicity:
    """Recognized multi-character tokens are classified as one unit."""

    @given(st.sampled_from(C_PROFILE.words), st.sampled_from(["", " ", "(", ";"]))
    def test_words_fully_classified(self, entry: tuple[str, HighlightCategory], tail: str) -> None:
        word, category = entry
        text = f" {word}{tail}"
        cells = [HighlightCategory.NORMAL] * len(text)
        LineScanner(C_PROFILE).scan_line(text, cells)
        assert cells[1 : 1 + len(word)] == [category] * len(word)

    @given(st.characters(exclude_categories=("Cs",)), st.booleans())
    def test_char_literals_fully_classified(self, char: str, escaped: bool) -> None:
        literal = f"'\\{char}'" if escaped else f"'{char}'"
        text = f"x = {literal};"
        cells = [HighlightCategory.NORMAL] * len(text)
        LineScanner(C_PROFILE).scan_line(text, cells)
        assert cells[4 : 4 + len(literal)] == [HighlightCategory.CHAR] * len(literal)


class TestOverlayRoundTrip:
    """set_match followed by clear_match is the identity."""

    @given(_lines, st.data())
    @settings(max_examples=100)
    def test_round_trip(self, rows: list[str], data: st.DataObject) -> None:
        highlighter = _full(rows, Language.C)
        before = [list(cells) for cells in highlighter.lines]
        line = data.draw(st.integers(min_value=0, max_value=len(rows)))
        start = data.draw(st.integers(min_value=-1, max_value=45))
        end = data.draw(st.integers(min_value=-1, max_value=45))

        highlighter.set_match(line, start, end)
        highlighter.clear_match()
        assert highlighter.lines == before
        assert highlighter.saved_match is None


class TestProfilesTotal:
    """Every language has a profile that scans without errors."""

    @given(_languages, st.text(max_size=60))
    def test_scan_never_raises(self, language: Language, text: str) -> None:
        cells = [HighlightCategory.NORMAL] * len(text)
        LineScanner(profile_for(language)).scan_line(text, cells)
        assert len(cells) == len(text)
