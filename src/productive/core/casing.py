"""Locale-aware casing and title-case conversion.

Only the casing table depends on the locale. Languages with special
dotted/dotless i rules (Turkish, Azerbaijani) get their own mappings;
every other locale uses default Unicode casing.
"""

from __future__ import annotations

import re

# Languages whose casing maps i <-> İ and ı <-> I
_DOTTED_I_LANGUAGES: frozenset[str] = frozenset({"tr", "az"})

# Word: run of word characters, optionally joined by apostrophes
_WORD_PATTERN = re.compile(r"[\w'’]+")


def language_of(locale: str | None) -> str | None:
    """Extract the lowercase language subtag from a locale name.

    Args:
        locale: Locale name such as "tr-TR", "en_US" or "de". May be None.

    Returns:
        Language subtag (e.g., "tr"), or None for an absent or blank locale.

    Example:
        >>> language_of("tr-TR")
        'tr'
        >>> language_of("en_US.UTF-8")
        'en'
    """
    if locale is None or not locale.strip():
        return None
    return re.split(r"[-_.@]", locale.strip(), maxsplit=1)[0].casefold()


def lower(text: str, locale: str | None = None) -> str:
    """Lower-case text using the casing table of a locale."""
    if language_of(locale) in _DOTTED_I_LANGUAGES:
        text = text.replace("I", "ı").replace("İ", "i")
    return text.lower()


def _title_char(char: str, locale: str | None) -> str:
    if language_of(locale) in _DOTTED_I_LANGUAGES and char == "i":
        return "İ"
    # str.title() on one character yields its titlecase form (e.g. ǆ -> ǅ)
    return char.title()


def _is_acronym(word: str) -> bool:
    letters = [c for c in word if c.isalpha()]
    return len(letters) > 1 and all(c.isupper() for c in letters)


def title_case_word(word: str, locale: str | None = None) -> str:
    """Title-case a single word.

    Words that are entirely upper case (acronyms such as "NASA") are
    returned unchanged. Otherwise a leading letter is converted to title
    case and the remainder is lower-cased.

    Args:
        word: A single word without surrounding whitespace.
        locale: Locale whose casing table applies.

    Returns:
        The title-cased word.
    """
    if not word or _is_acronym(word):
        return word
    if word[0].isalpha():
        return _title_char(word[0], locale) + lower(word[1:], locale)
    return lower(word, locale)


def to_title_case(text: str, locale: str | None = None) -> str:
    """Convert text to title case.

    Non-word characters (spaces, punctuation) are copied unchanged.

    Args:
        text: Text to convert.
        locale: Locale whose casing table applies (None for default casing).

    Returns:
        Title-cased text.

    Examples:
        >>> to_title_case("the quick brown fox")
        'The Quick Brown Fox'
        >>> to_title_case("visit NASA today")
        'Visit NASA Today'
        >>> to_title_case("istanbul", "tr-TR")
        'İstanbul'
    """
    return _WORD_PATTERN.sub(lambda m: title_case_word(m.group(0), locale), text)
