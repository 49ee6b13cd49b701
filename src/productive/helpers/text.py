"""Text helpers: title casing and search-term highlighting."""

from __future__ import annotations

import logging
import re

from markupsafe import Markup

from productive.core.casing import to_title_case
from productive.core.string_utils import is_blank

logger = logging.getLogger(__name__)

DEFAULT_HIGHLIGHT_CLASS = "highlight"


def title_case(text: str | None, locale: str | None = None) -> str:
    """Convert text to title case using a locale's casing rules.

    No escaping is performed; escape the result before display if the
    source text is untrusted.

    Args:
        text: Text to convert, or None.
        locale: Locale name (e.g., "en-US", "tr-TR"). None uses default
            Unicode casing.

    Returns:
        Title-cased text, or "" when text is None.

    Examples:
        >>> title_case("war and peace")
        'War And Peace'
        >>> title_case(None)
        ''
    """
    if text is None:
        return ""
    return to_title_case(text, locale)


def highlight_word(
    needle: str | None,
    haystack: str | None,
    css_class: str = DEFAULT_HIGHLIGHT_CLASS,
) -> Markup:
    """Wrap every case-insensitive occurrence of needle in a span.

    Matches keep their original characters; only the wrapping tag is added.
    The needle is matched literally, so characters such as "." or "*" carry
    no pattern meaning.

    The haystack is not escaped: it must already be safe to embed.

    Args:
        needle: Search term. None or blank leaves the haystack untouched.
        haystack: Text to search in. None yields empty markup.
        css_class: Class attribute for the wrapping span.

    Returns:
        Haystack markup with matches wrapped in ``<span class="...">``.

    Examples:
        >>> highlight_word("fox", "The Fox and the fox")
        Markup('The <span class="highlight">Fox</span> and the <span class="highlight">fox</span>')
        >>> highlight_word("", "unchanged")
        Markup('unchanged')
    """
    if haystack is None:
        return Markup("")
    if is_blank(needle):
        return Markup(haystack)

    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    open_tag = f'<span class="{css_class}">'

    def wrap(match: re.Match[str]) -> str:
        return f"{open_tag}{match.group(0)}</span>"

    result, count = pattern.subn(wrap, str(haystack))
    logger.debug("Highlighted %d occurrence(s) of %r", count, needle)
    return Markup(result)
