"""Core temporal types.

This module provides the fundamental value types:
    - Date: Calendar date parsed from and formatted to YYYY-MM-DD
    - SupportsDateFields: Protocol for timestamps a Date can be derived from
"""

from __future__ import annotations

from logstamp.core.date import Date, SupportsDateFields

__all__: list[str] = [
    "Date",
    "SupportsDateFields",
]
