"""Conversion utilities for dates.

This module provides functions for converting dates to and from
other representations.

Functions:
    to_json: Convert a Date to a JSON-serializable dict.
    from_json: Create a Date from a JSON dict.

Examples:
    >>> from logstamp import Date
    >>> from logstamp.convert import to_json, from_json

    >>> data = to_json(Date(2024, 1, 15))
    >>> data
    {'_type': 'Date', 'value': '2024-01-15'}

    >>> from_json(data)
    Date(2024, 1, 15)
"""

from __future__ import annotations

from logstamp.convert.json import from_json, to_json

__all__: list[str] = [
    "to_json",
    "from_json",
]
