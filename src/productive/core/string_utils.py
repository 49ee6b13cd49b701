"""String manipulation utilities.

This module provides Unicode-safe string operations used by the helpers.
All case-insensitive operations use casefold() for proper Unicode handling.
"""

from __future__ import annotations


def compare_strings_ci(a: str, b: str) -> bool:
    """Compare strings case-insensitively.

    Surrounding whitespace is significant; only case is ignored.

    Args:
        a: First string.
        b: Second string.

    Returns:
        True if strings are equal (case-insensitive).

    Example:
        >>> compare_strings_ci("Pending", "pending")
        True
        >>> compare_strings_ci("Pending", " pending")
        False
    """
    return a.casefold() == b.casefold()


def is_blank(s: str | None) -> bool:
    """Check whether a string is absent or contains only whitespace.

    Example:
        >>> is_blank(None)
        True
        >>> is_blank("  \\t")
        True
        >>> is_blank(" x ")
        False
    """
    return s is None or not s.strip()
