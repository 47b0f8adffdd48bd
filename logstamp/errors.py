"""Logstamp exception hierarchy.

All Logstamp-specific exceptions inherit from LogstampError.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Classified reason for a failed parse.

    Each member names the first check an input failed. The string
    values are stable and safe to log or compare against.

    Examples:
        >>> ParseErrorKind.TOO_SHORT.value
        'TooShort'
    """

    TOO_SHORT = "TooShort"
    INVALID_CHAR_YEAR = "InvalidCharYear"
    INVALID_CHAR_MONTH = "InvalidCharMonth"
    INVALID_CHAR_DAY = "InvalidCharDay"
    INVALID_CHAR_DATE_SEP = "InvalidCharDateSep"
    OUT_OF_RANGE_MONTH = "OutOfRangeMonth"
    OUT_OF_RANGE_DAY = "OutOfRangeDay"
    INVALID_JSON = "InvalidJson"


class LogstampError(Exception):
    """Base exception for all Logstamp errors."""

    pass


class ValidationError(LogstampError):
    """Invalid input values.

    Raised when a date component passed to a constructor is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Year that does not fit in four digits
    """

    pass


class ParseError(LogstampError):
    """Failed to parse a textual or serialized date.

    The ``kind`` attribute tells callers which check failed, so they
    can decide whether to surface, default or abort without matching
    on the message text.

    Examples:
        - Fewer than 10 bytes of input
        - A letter where a year digit belongs
        - A month of 13
    """

    def __init__(self, kind: ParseErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message if message is not None else kind.value)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.value!r}, {str(self)!r})"


__all__ = [
    "LogstampError",
    "ValidationError",
    "ParseError",
    "ParseErrorKind",
]
