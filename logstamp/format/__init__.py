"""Date text formatting and parsing.

This module provides functions for converting dates to and from the
fixed-width ``YYYY-MM-DD`` layout:

Functions:
    parse_date: Parse a date from the start of a string.
    parse_date_bytes: Parse a date from the first 10 bytes of a buffer.
    format_date: Format a Date as ``YYYY-MM-DD``.
    write_date: Write a Date into a text sink.

Examples:
    >>> from logstamp.format import parse_date, format_date

    >>> d = parse_date("2024-01-15 08:00:00")
    >>> d.year
    2024

    >>> format_date(d)
    '2024-01-15'
"""

from __future__ import annotations

from logstamp.format.text import format_date, parse_date, parse_date_bytes, write_date

__all__: list[str] = [
    "parse_date",
    "parse_date_bytes",
    "format_date",
    "write_date",
]
