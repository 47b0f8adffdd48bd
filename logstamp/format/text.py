"""YYYY-MM-DD text formatting and parsing.

This module provides function-style access to the Date codec. The
layout is fixed: a 4-digit zero-padded year, ``-``, a 2-digit month,
``-``, a 2-digit day. Parsing reads only the first 10 characters, so a
date can be pulled off the front of a longer log timestamp.

Examples:
    >>> from logstamp.format import parse_date, format_date

    >>> parse_date("1234-12-13 11:12:13.123456")
    Date(1234, 12, 13)

    >>> format_date(parse_date("0999-01-02"))
    '0999-01-02'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logstamp._internal.digits import BytesLike
    from logstamp.core.date import Date


def parse_date(s: str) -> Date:
    """Parse a date from the start of a string.

    Args:
        s: Text beginning with ``YYYY-MM-DD``. Trailing text is ignored.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If the text does not start with a valid date.
    """
    # Import here to avoid circular imports
    from logstamp.core.date import Date

    return Date.parse(s)


def parse_date_bytes(data: BytesLike) -> Date:
    """Parse a date from the first 10 bytes of ``data``.

    Raises:
        ParseError: If the prefix is not a valid date.
    """
    from logstamp.core.date import Date

    return Date.parse_bytes(data)


def format_date(value: Date) -> str:
    """Format a Date as ``YYYY-MM-DD``.

    Args:
        value: The Date to format.

    Returns:
        The 10-character canonical form.

    Raises:
        TypeError: If value is not a Date.

    Examples:
        >>> from logstamp import Date
        >>> format_date(Date(2024, 1, 15))
        '2024-01-15'
    """
    from logstamp.core.date import Date

    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")
    return value.to_text()


def write_date(value: Date, sink: Any) -> int:
    """Write a Date into a text sink and return the characters written.

    Raises:
        TypeError: If value is not a Date.
    """
    from logstamp.core.date import Date

    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")
    return value.write_to(sink)


__all__ = ["parse_date", "parse_date_bytes", "format_date", "write_date"]
