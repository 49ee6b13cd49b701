"""Custom date/time pattern formatting.

Formats datetime values with the classic custom date/time pattern syntax
("MM/d/yy", "dddd, MMMM d, yyyy", "HH:mm:ss.fff" ...). Names and separators
are invariant (English); there is no culture selection.

Pattern tokens:
    d, dd           Day of month (unpadded / two digits)
    ddd, dddd       Abbreviated / full weekday name
    M, MM           Month (unpadded / two digits)
    MMM, MMMM       Abbreviated / full month name
    y, yy, yyy...   Year (mod 100 unpadded, two digits, min 3/4/5 digits)
    h, hh, H, HH    Hour (12-hour / 24-hour)
    m, mm, s, ss    Minute, second
    f..fffffff      Fraction of a second, fixed digits
    F..FFFFFFF      Fraction of a second, trailing zeros removed
    t, tt           A/P, AM/PM designator
    z, zz, zzz      UTC offset
    K               Time zone information (Z, +hh:mm or empty)
    g, gg           Era (A.D.)
    : /             Time and date separator
    '...' "..."     Quoted literal
    \\c             Escaped literal character
    %c              Single custom specifier

A pattern of exactly one character is a standard format specifier.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Standard single-character specifiers and their invariant patterns
STANDARD_PATTERNS: dict[str, str] = {
    "d": "MM/dd/yyyy",
    "D": "dddd, dd MMMM yyyy",
    "f": "dddd, dd MMMM yyyy HH:mm",
    "F": "dddd, dd MMMM yyyy HH:mm:ss",
    "g": "MM/dd/yyyy HH:mm",
    "G": "MM/dd/yyyy HH:mm:ss",
    "m": "MMMM dd",
    "M": "MMMM dd",
    "o": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
    "O": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
    "r": "ddd, dd MMM yyyy HH':'mm':'ss 'GMT'",
    "R": "ddd, dd MMM yyyy HH':'mm':'ss 'GMT'",
    "s": "yyyy'-'MM'-'dd'T'HH':'mm':'ss",
    "t": "HH:mm",
    "T": "HH:mm:ss",
    "u": "yyyy'-'MM'-'dd HH':'mm':'ss'Z'",
    "U": "dddd, dd MMMM yyyy HH:mm:ss",
    "y": "yyyy MMMM",
    "Y": "yyyy MMMM",
}

# Standard specifiers that render in UTC
_UTC_SPECIFIERS: frozenset[str] = frozenset({"r", "R", "u", "U"})

# Characters that repeat to form a single token
_REPEATABLE = frozenset("dMyhHmsfFtzgK")


class DateFormatError(ValueError):
    """Raised when a date pattern cannot be interpreted."""


def _offset_of(value: datetime) -> timedelta:
    offset = value.utcoffset()
    if offset is None:
        # Naive values are treated as local time; outside the platform's
        # local-time range (e.g. year 1) they are treated as UTC
        try:
            offset = value.astimezone().utcoffset() or timedelta(0)
        except (ValueError, OverflowError, OSError):
            offset = timedelta(0)
    return offset


def _format_offset(offset: timedelta, width: int) -> str:
    total_minutes = int(offset.total_seconds() // 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if width == 1:
        return f"{sign}{hours}"
    if width == 2:
        return f"{sign}{hours:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _fraction(value: datetime, digits: int) -> str:
    # Seven digits of precision (100ns ticks); datetime stops at microseconds
    return f"{value.microsecond:06d}0"[:digits]


def _format_token(value: datetime, char: str, count: int) -> str:
    if char == "d":
        if count == 1:
            return str(value.day)
        if count == 2:
            return f"{value.day:02d}"
        name = DAY_NAMES[value.weekday()]
        return name[:3] if count == 3 else name
    if char == "M":
        if count == 1:
            return str(value.month)
        if count == 2:
            return f"{value.month:02d}"
        name = MONTH_NAMES[value.month - 1]
        return name[:3] if count == 3 else name
    if char == "y":
        if count == 1:
            return str(value.year % 100)
        if count == 2:
            return f"{value.year % 100:02d}"
        return str(value.year).zfill(count)
    if char == "h":
        hour = value.hour % 12 or 12
        return str(hour) if count == 1 else f"{hour:02d}"
    if char == "H":
        return str(value.hour) if count == 1 else f"{value.hour:02d}"
    if char == "m":
        return str(value.minute) if count == 1 else f"{value.minute:02d}"
    if char == "s":
        return str(value.second) if count == 1 else f"{value.second:02d}"
    if char == "f":
        if count > 7:
            raise DateFormatError(f"Too many fraction digits: {'f' * count}")
        return _fraction(value, count)
    if char == "F":
        if count > 7:
            raise DateFormatError(f"Too many fraction digits: {'F' * count}")
        return _fraction(value, count).rstrip("0")
    if char == "t":
        designator = "AM" if value.hour < 12 else "PM"
        return designator[0] if count == 1 else designator
    if char == "z":
        return _format_offset(_offset_of(value), min(count, 3))
    if char == "K":
        offset = value.utcoffset()
        if offset is None:
            return ""
        if value.tzinfo is timezone.utc:
            return "Z"
        return _format_offset(offset, 3)
    if char == "g":
        return "A.D."
    raise DateFormatError(f"Unknown pattern token: {char}")


def _expand_standard(value: datetime, pattern: str) -> tuple[datetime, str]:
    expanded = STANDARD_PATTERNS.get(pattern)
    if expanded is None:
        raise DateFormatError(
            f"Unknown standard format specifier '{pattern}'. "
            f"Expected one of: {' '.join(STANDARD_PATTERNS)}"
        )
    if pattern in _UTC_SPECIFIERS and value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value, expanded


def format_datetime(value: datetime, pattern: str) -> str:
    """Format a datetime with a custom date/time pattern.

    Args:
        value: Datetime to format (naive or timezone-aware).
        pattern: Custom pattern such as "MM/d/yy", or a single-character
            standard specifier such as "d" or "s".

    Returns:
        Formatted string.

    Raises:
        DateFormatError: If the pattern is an unknown standard specifier or
            ends inside a quoted literal or escape sequence.

    Examples:
        >>> format_datetime(datetime(2024, 3, 5), "MM/d/yy")
        '03/5/24'
        >>> format_datetime(datetime(2024, 3, 5, 14, 7), "dddd h:mm tt")
        'Tuesday 2:07 PM'
    """
    if len(pattern) == 1:
        value, pattern = _expand_standard(value, pattern)

    parts: list[str] = []
    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]

        if char in ("'", '"'):
            end = pattern.find(char, i + 1)
            if end == -1:
                raise DateFormatError(f"Unterminated quoted literal in '{pattern}'")
            parts.append(pattern[i + 1 : end])
            i = end + 1
            continue

        if char == "\\":
            if i + 1 >= length:
                raise DateFormatError(f"Trailing escape character in '{pattern}'")
            parts.append(pattern[i + 1])
            i += 2
            continue

        if char == "%":
            # %c forces c to be read as a one-character custom token
            if i + 1 < length and pattern[i + 1] in _REPEATABLE:
                parts.append(_format_token(value, pattern[i + 1], 1))
                i += 2
            else:
                raise DateFormatError(f"Invalid '%' specifier in '{pattern}'")
            continue

        if char in _REPEATABLE:
            count = 1
            while i + count < length and pattern[i + count] == char:
                count += 1
            parts.append(_format_token(value, char, count))
            i += count
            continue

        # ':' and '/' are the invariant separators; everything else is literal
        parts.append(char)
        i += 1

    return "".join(parts)
