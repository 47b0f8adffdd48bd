"""JSON serialization and deserialization for dates.

This module provides functions for converting dates to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a Date to a JSON-serializable dict.
    from_json: Create a Date from a JSON dict.

The JSON format uses the canonical text form with a type tag, so the
record can sit next to other tagged values in a log payload:

    {"_type": "Date", "value": "2024-01-15"}

Examples:
    >>> from logstamp import Date
    >>> from logstamp.convert import to_json, from_json

    >>> data = to_json(Date(2024, 1, 15))
    >>> data['_type']
    'Date'

    >>> from_json(data) == Date(2024, 1, 15)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logstamp.core.date import Date


def to_json(value: Date) -> dict[str, Any]:
    """Convert a Date to a JSON-serializable dictionary.

    Args:
        value: The Date to convert.

    Returns:
        A dictionary with ``_type`` and ``value`` keys.

    Raises:
        TypeError: If value is not a Date.
    """
    # Import here to avoid circular imports
    from logstamp.core.date import Date

    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")
    return value.to_json()


def from_json(data: dict[str, Any]) -> Date:
    """Create a Date from a JSON dictionary.

    Args:
        data: A dictionary with ``_type`` and ``value`` keys.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If the data is not a tagged Date record, or its
            value is not a valid date.

    Examples:
        >>> from_json({"_type": "Date", "value": "2024-02-29"})
        Date(2024, 2, 29)

        >>> from_json({"_type": "Time", "value": "12:00:00"})
        Traceback (most recent call last):
        ...
        logstamp.errors.ParseError: unknown type: 'Time'
    """
    # Import here to avoid circular imports
    from logstamp.core.date import Date

    return Date.from_json(data)


__all__ = ["to_json", "from_json"]
