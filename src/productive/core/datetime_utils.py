"""Datetime utilities.

This module provides clock access and day arithmetic for the date helpers.
The clock is always read through current_time_for() so callers can inject
a fixed moment instead.
"""

from __future__ import annotations

from datetime import datetime, timedelta

_ONE_DAY_US = 86_400_000_000


def parse_iso_datetime(timestamp: str) -> datetime:
    """Parse an ISO-8601 date or timestamp, accepting a Z suffix.

    Naive timestamps stay naive (local wall-clock time).

    Args:
        timestamp: ISO-8601 string (e.g., "2024-01-15", "2024-01-15T10:30:00Z").

    Returns:
        Parsed datetime.

    Raises:
        ValueError: If the string is not valid ISO-8601.
    """
    normalized = timestamp.strip()
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    return datetime.fromisoformat(normalized)


def current_time_for(value: datetime) -> datetime:
    """Read the current time in the same zone convention as a value.

    Naive values are compared against local wall-clock time; aware values
    against the current time in their own zone.

    Args:
        value: Datetime that the current time will be compared with.

    Returns:
        Current datetime, naive or aware to match value.
    """
    return datetime.now(value.tzinfo)


def whole_days(delta: timedelta) -> int:
    """Count the whole days in a timedelta, truncating toward zero.

    timedelta.days floors negative spans (-12h is -1 day); this counts
    whole elapsed days instead (-12h is 0 days).

    Args:
        delta: Time span, positive or negative.

    Returns:
        Number of complete days in the span, with the span's sign.

    Examples:
        >>> whole_days(timedelta(days=7, hours=23))
        7
        >>> whole_days(timedelta(hours=-12))
        0
        >>> whole_days(timedelta(days=-2, hours=-1))
        -2
    """
    micros = delta // timedelta(microseconds=1)
    days = abs(micros) // _ONE_DAY_US
    return -days if micros < 0 else days


def whole_days_between(later: datetime, earlier: datetime) -> int:
    """Whole days in ``later - earlier``, truncated toward zero.

    Raises:
        TypeError: If one datetime is naive and the other aware.
    """
    return whole_days(later - earlier)
