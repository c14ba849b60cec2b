"""Tests for keyword highlighting."""

from seo_blog_builder.highlighting import (
    HIGHLIGHT_CLOSE,
    HIGHLIGHT_OPEN,
    highlight_keywords,
    parse_keywords,
    strip_emphasis_markers,
)


def wrap(text: str) -> str:
    return f"{HIGHLIGHT_OPEN}{text}{HIGHLIGHT_CLOSE}"


class TestParseKeywords:
    """Tests for keyword list parsing."""

    def test_trims_and_sorts_longest_first(self):
        """Test that entries are trimmed and ordered by length."""
        assert parse_keywords(" kaart , houten kaart,hout ") == ["houten kaart", "kaart", "hout"]

    def test_drops_short_entries(self):
        """Test that entries of two characters or fewer are ignored."""
        assert parse_keywords("de, in, hout") == ["hout"]

    def test_empty_input(self):
        """Test empty and None input."""
        assert parse_keywords("") == []
        assert parse_keywords(None) == []

    def test_case_insensitive_duplicates_removed(self):
        """Test that the first spelling of a duplicate is kept."""
        assert parse_keywords("Kaart, kaart") == ["Kaart"]


class TestStripEmphasisMarkers:
    """Tests for Markdown bold marker removal."""

    def test_removes_all_markers(self):
        """Test that every ** is removed."""
        assert strip_emphasis_markers("**een** mooie **kaart**") == "een mooie kaart"

    def test_empty(self):
        """Test empty input."""
        assert strip_emphasis_markers("") == ""


class TestHighlightKeywords:
    """Tests for highlight_keywords."""

    def test_longer_phrase_wins(self):
        """Test that a phrase is wrapped once, not split by its substring."""
        result = highlight_keywords("een houten kaart", "houten kaart, houten")

        assert result == f"een {wrap('houten kaart')}"
        assert result.count(HIGHLIGHT_OPEN) == 1

    def test_shorter_keyword_still_matches_elsewhere(self):
        """Test that the substring keyword matches outside the phrase."""
        result = highlight_keywords("houten kaart en houten lijst", "houten kaart, houten")

        assert result == f"{wrap('houten kaart')} en {wrap('houten')} lijst"

    def test_preserves_original_casing(self):
        """Test that matched text keeps its casing."""
        assert highlight_keywords("Houten Kaart", "houten kaart") == wrap("Houten Kaart")

    def test_substring_matching_inside_words(self):
        """Test the known characteristic: no word boundaries, so compounds match."""
        assert highlight_keywords("een kaartje", "kaart") == f"een {wrap('kaart')}je"

    def test_idempotent(self):
        """Test that highlighting twice equals highlighting once."""
        text = "**Een** houten kaart is een kaart van hout."
        keywords = "houten kaart, kaart, hout"

        once = highlight_keywords(text, keywords)

        assert highlight_keywords(once, keywords) == once

    def test_attribute_values_untouched(self):
        """Test that keywords inside tags are not wrapped."""
        result = highlight_keywords('<a href="/kaart/">Bekijk de kaart</a>', "kaart")

        assert result == f'<a href="/kaart/">Bekijk de {wrap("kaart")}</a>'

    def test_bare_less_than_is_text(self):
        """Test that a literal "<" in prose does not hide the text after it."""
        result = highlight_keywords("3 < 5 kaarten, <a href='/kaart/'>meer</a>", "kaart")

        assert result == f"3 < 5 {wrap('kaart')}en, <a href='/kaart/'>meer</a>"

    def test_no_keywords_returns_cleaned_text(self):
        """Test that markers are stripped even without keywords."""
        assert highlight_keywords("**vet**", "") == "vet"
        assert highlight_keywords("**vet**", None) == "vet"

    def test_empty_text(self):
        """Test empty text."""
        assert highlight_keywords("", "kaart") == ""

    def test_regex_characters_are_literal(self):
        """Test that keywords with regex metacharacters match literally."""
        result = highlight_keywords("prijs (incl. btw) en prijs incl btw", "(incl. btw)")

        assert result == f"prijs {wrap('(incl. btw)')} en prijs incl btw"
