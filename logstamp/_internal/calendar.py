"""Calendar rules for Logstamp.

Month lengths for four-digit Gregorian years (0000-9999), used to
reject impossible days such as 2023-02-29 or 2024-04-31.

This module is not part of the public API.
"""

from __future__ import annotations

from logstamp._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Return True if February of ``year`` has 29 days.

    Every fourth year is a leap year, except century years, which are
    leap years only when divisible by 400.

    Examples:
        >>> is_leap_year(2000), is_leap_year(2100), is_leap_year(2024)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the last valid day of ``month`` in ``year``.

    Args:
        year: Four-digit year; only consulted for February.
        month: Month number, 1-12.

    Returns:
        31, 30, 29 or 28.

    Raises:
        ValueError: If month is not in 1-12. The parser checks the month
            range first, so this never escapes a parse.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


__all__ = [
    "is_leap_year",
    "days_in_month",
]
