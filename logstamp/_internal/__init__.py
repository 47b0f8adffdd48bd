"""Internal utilities for Logstamp.

This module contains private implementation details:
    - Constants describing the textual date layout
    - Calendar helpers (leap years, month lengths)
    - Fixed-offset digit decoding
    - Constructor validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from logstamp._internal.calendar import days_in_month, is_leap_year
from logstamp._internal.digits import digit_at, expect_separator, put_digits
from logstamp._internal.validation import (
    validate_day,
    validate_int,
    validate_month,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "digit_at",
    "expect_separator",
    "put_digits",
    "validate_day",
    "validate_int",
    "validate_month",
    "validate_year",
]
