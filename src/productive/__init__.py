"""Productive view helpers.

Presentation-formatting helpers used while rendering server-side views into
HTML. Every markup-producing helper returns a ``markupsafe.Markup`` so the
result can be embedded in a page without being escaped again.
"""

from productive.helpers import (
    BackLinkRequest,
    DateDisplayRequest,
    OptionRequest,
    RecencyHighlightRequest,
    SearchHighlightRequest,
    drop_down_option,
    highlight_word,
    js_history_back_button,
    short_date,
    short_date_highlight_new,
    title_case,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # helpers
    "title_case",
    "highlight_word",
    "short_date",
    "short_date_highlight_new",
    "drop_down_option",
    "js_history_back_button",
    # request models
    "SearchHighlightRequest",
    "DateDisplayRequest",
    "RecencyHighlightRequest",
    "OptionRequest",
    "BackLinkRequest",
]
