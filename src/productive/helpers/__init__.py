"""View helpers package.

Stateless formatting helpers for server-rendered HTML views. Markup-producing
helpers return ``markupsafe.Markup`` and never escape their inputs; callers
supply display-ready values.
"""

from productive.helpers.dates import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_NEW_THRESHOLD_DAYS,
    NEW_CSS_CLASS,
    short_date,
    short_date_highlight_new,
)
from productive.helpers.models import (
    BackLinkRequest,
    DateDisplayRequest,
    OptionRequest,
    RecencyHighlightRequest,
    SearchHighlightRequest,
)
from productive.helpers.tags import (
    DEFAULT_BACK_CLASS,
    DEFAULT_BACK_LABEL,
    HISTORY_BACK_HREF,
    drop_down_option,
    is_selected_option,
    js_history_back_button,
)
from productive.helpers.text import (
    DEFAULT_HIGHLIGHT_CLASS,
    highlight_word,
    title_case,
)

__all__ = [
    # text
    "DEFAULT_HIGHLIGHT_CLASS",
    "title_case",
    "highlight_word",
    # dates
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_NEW_THRESHOLD_DAYS",
    "NEW_CSS_CLASS",
    "short_date",
    "short_date_highlight_new",
    # tags
    "DEFAULT_BACK_CLASS",
    "DEFAULT_BACK_LABEL",
    "HISTORY_BACK_HREF",
    "drop_down_option",
    "is_selected_option",
    "js_history_back_button",
    # models
    "SearchHighlightRequest",
    "DateDisplayRequest",
    "RecencyHighlightRequest",
    "OptionRequest",
    "BackLinkRequest",
]
