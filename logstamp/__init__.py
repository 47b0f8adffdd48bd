"""Logstamp: the calendar date component of a log timestamp toolkit.

Logstamp parses the fixed-width ``YYYY-MM-DD`` date that opens a log
timestamp into a validated value, and formats that value back into the
exact same 10 characters.

Core Types:
    Date: Calendar date (year, mon, day)
    SupportsDateFields: Protocol for timestamps a Date can be derived from

Format Functions:
    parse_date: Parse a date from the start of a string
    parse_date_bytes: Parse a date from the first 10 bytes of a buffer
    format_date: Format a Date as YYYY-MM-DD
    write_date: Write a Date into a text sink

Exceptions:
    LogstampError: Base exception
    ValidationError: Invalid constructor values
    ParseError: Failed to parse input, with a ParseErrorKind

Example:
    >>> from logstamp import Date
    >>> d = Date.parse("2024-01-15 14:30:45.123456")
    >>> str(d)
    '2024-01-15'
    >>> d < Date(2024, 2, 1)
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from logstamp.core.date import Date, SupportsDateFields

# Exceptions
from logstamp.errors import (
    LogstampError,
    ParseError,
    ParseErrorKind,
    ValidationError,
)

# Format functions
from logstamp.format import format_date, parse_date, parse_date_bytes, write_date

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "SupportsDateFields",
    # Exceptions
    "LogstampError",
    "ValidationError",
    "ParseError",
    "ParseErrorKind",
    # Format functions
    "parse_date",
    "parse_date_bytes",
    "format_date",
    "write_date",
]
