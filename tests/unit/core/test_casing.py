"""Tests for locale-aware casing."""

import pytest

from productive.core.casing import (
    language_of,
    lower,
    title_case_word,
    to_title_case,
)


class TestLanguageOf:
    """Tests for language_of function."""

    @pytest.mark.parametrize(
        "locale,expected",
        [
            ("tr-TR", "tr"),
            ("tr_TR", "tr"),
            ("en_US.UTF-8", "en"),
            ("AZ", "az"),
            ("de", "de"),
        ],
    )
    def test_extracts_language(self, locale, expected):
        """Language subtag is extracted and lowercased."""
        assert language_of(locale) == expected

    def test_none_for_absent_locale(self):
        assert language_of(None) is None
        assert language_of("  ") is None


class TestLower:
    """Tests for lower function."""

    def test_default_casing(self):
        assert lower("ISTANBUL") == "istanbul"

    def test_turkish_dotless_i(self):
        """Turkish maps I to ı when lower-casing."""
        assert lower("ISPARTA", "tr") == "ısparta"
        assert lower("İZMİR", "tr") == "izmir"


class TestTitleCaseWord:
    """Tests for title_case_word function."""

    def test_capitalizes_lowercase_word(self):
        assert title_case_word("hello") == "Hello"

    def test_lowercases_remainder(self):
        assert title_case_word("hELLO") == "Hello"

    def test_keeps_acronym(self):
        """Words that are entirely upper case are left unchanged."""
        assert title_case_word("NASA") == "NASA"

    def test_single_uppercase_letter(self):
        assert title_case_word("I") == "I"

    def test_leading_digit(self):
        """A word starting with a digit is lower-cased, not capitalized."""
        assert title_case_word("1st") == "1st"

    def test_apostrophe_within_word(self):
        assert title_case_word("o'neil") == "O'neil"


class TestToTitleCase:
    """Tests for to_title_case function."""

    def test_sentence(self):
        assert to_title_case("the quick brown fox") == "The Quick Brown Fox"

    def test_preserves_punctuation_and_spacing(self):
        assert to_title_case("hello,  world! (again)") == "Hello,  World! (Again)"

    def test_hyphenated_words(self):
        """Hyphens separate words."""
        assert to_title_case("state-of-the-art") == "State-Of-The-Art"

    def test_mixed_acronym(self):
        assert to_title_case("visit NASA today") == "Visit NASA Today"

    def test_turkish_locale(self):
        assert to_title_case("istanbul ve izmir", "tr-TR") == "İstanbul Ve İzmir"

    def test_empty_string(self):
        assert to_title_case("") == ""
