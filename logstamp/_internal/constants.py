"""Internal constants for Logstamp.

These constants describe the fixed textual date layout and the calendar
tables used throughout the library. This module is not part of the
public API.
"""

from __future__ import annotations

# Textual layout: YYYY-MM-DD
DATE_LENGTH: int = 10
DATE_TEMPLATE: bytes = b"0000-00-00"
DATE_SEPARATOR: int = ord("-")

YEAR_OFFSET: int = 0
FIRST_SEPARATOR_OFFSET: int = 4
MONTH_OFFSET: int = 5
SECOND_SEPARATOR_OFFSET: int = 7
DAY_OFFSET: int = 8

ASCII_ZERO: int = ord("0")
ASCII_NINE: int = ord("9")

# Four decimal digits
MIN_YEAR: int = 0
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "DATE_LENGTH",
    "DATE_TEMPLATE",
    "DATE_SEPARATOR",
    "YEAR_OFFSET",
    "FIRST_SEPARATOR_OFFSET",
    "MONTH_OFFSET",
    "SECOND_SEPARATOR_OFFSET",
    "DAY_OFFSET",
    "ASCII_ZERO",
    "ASCII_NINE",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
]
