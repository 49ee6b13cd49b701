"""Core utilities package.

This package contains pure utility functions with no external dependencies.
These utilities back the view helpers: locale-aware casing, case-insensitive
comparison, custom date patterns, and day arithmetic.
"""

from productive.core.casing import (
    language_of,
    lower,
    title_case_word,
    to_title_case,
)
from productive.core.date_patterns import (
    STANDARD_PATTERNS,
    DateFormatError,
    format_datetime,
)
from productive.core.datetime_utils import (
    current_time_for,
    parse_iso_datetime,
    whole_days,
    whole_days_between,
)
from productive.core.string_utils import (
    compare_strings_ci,
    is_blank,
)

__all__ = [
    # casing
    "language_of",
    "lower",
    "title_case_word",
    "to_title_case",
    # date_patterns
    "STANDARD_PATTERNS",
    "DateFormatError",
    "format_datetime",
    # datetime_utils
    "current_time_for",
    "parse_iso_datetime",
    "whole_days",
    "whole_days_between",
    # string_utils
    "compare_strings_ci",
    "is_blank",
]
