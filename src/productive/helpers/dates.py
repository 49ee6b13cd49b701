"""Date display helpers."""

from __future__ import annotations

import logging
from datetime import datetime

from markupsafe import Markup

from productive.core.date_patterns import format_datetime
from productive.core.datetime_utils import current_time_for, whole_days_between

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "MM/d/yy"
DEFAULT_NEW_THRESHOLD_DAYS = 7
NEW_CSS_CLASS = "new"


def short_date(
    value: datetime | None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> Markup:
    """Format an optional date for display.

    An absent value renders as empty markup; the current time is never
    substituted for it.

    Args:
        value: Date to format, or None.
        date_format: Custom date pattern (see productive.core.date_patterns).

    Returns:
        Formatted date markup, or empty markup when value is None.

    Raises:
        DateFormatError: If date_format is not a valid pattern.
    """
    if value is None:
        return Markup("")
    return Markup(format_datetime(value, date_format))


def short_date_highlight_new(
    value: datetime | None,
    threshold_days: int = DEFAULT_NEW_THRESHOLD_DAYS,
    date_format: str = DEFAULT_DATE_FORMAT,
    *,
    now: datetime | None = None,
) -> Markup:
    """Format an optional date and mark it when it counts as new.

    The date is wrapped in ``<span class="new">`` when the whole days in
    ``value - now`` reach threshold_days. The difference is value minus
    now, so only dates at least threshold_days in the future are marked.

    Args:
        value: Date to format, or None.
        threshold_days: Minimum whole-day difference for the marker.
        date_format: Custom date pattern.
        now: Moment to compare against. Defaults to the current time, naive
            or aware to match value.

    Returns:
        Formatted date markup, optionally wrapped; empty markup when value
        is None.

    Raises:
        DateFormatError: If date_format is not a valid pattern.
        TypeError: If now and value mix naive and aware datetimes.
    """
    if value is None:
        return Markup("")

    formatted = format_datetime(value, date_format)
    reference = now if now is not None else current_time_for(value)
    days = whole_days_between(value, reference)

    if days >= threshold_days:
        logger.debug(
            "Date %s is %d day(s) ahead (threshold %d), marking as new",
            value.isoformat(),
            days,
            threshold_days,
        )
        return Markup(f'<span class="{NEW_CSS_CLASS}">{formatted}</span>')
    return Markup(formatted)
