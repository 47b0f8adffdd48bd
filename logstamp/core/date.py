"""Date class representing a calendar date.

This module provides the Date class, the date component of a log
timestamp. A Date is parsed from the fixed-width ``YYYY-MM-DD`` layout
and formatted back into exactly that layout.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from logstamp._internal.calendar import days_in_month, is_leap_year
from logstamp._internal.constants import (
    DATE_LENGTH,
    DATE_TEMPLATE,
    DAY_OFFSET,
    FIRST_SEPARATOR_OFFSET,
    MONTH_OFFSET,
    SECOND_SEPARATOR_OFFSET,
    YEAR_OFFSET,
)
from logstamp._internal.digits import BytesLike, digit_at, expect_separator, put_digits
from logstamp._internal.validation import (
    validate_day,
    validate_int,
    validate_month,
    validate_year,
)
from logstamp.errors import ParseError, ParseErrorKind


@runtime_checkable
class SupportsDateFields(Protocol):
    """Anything carrying ``day``, ``mon`` and ``year`` fields.

    A timestamp type that composes a date with a time of day satisfies
    this protocol and can be projected onto a Date with
    :meth:`Date.from_timestamp`.
    """

    @property
    def day(self) -> int: ...

    @property
    def mon(self) -> int: ...

    @property
    def year(self) -> int: ...


class Date:
    """A calendar date in the Gregorian calendar.

    Date represents one calendar day with year, month and day
    components. Years are limited to what fits in four decimal digits
    (0-9999), which is exactly what the textual layout can carry.

    Dates are immutable values. Equality, hashing and ordering compare
    ``(year, mon, day)`` in that order, so sorting a list of dates puts
    them in chronological order.

    Attributes:
        year: The year (0-9999).
        mon: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date.parse("2024-01-15")
        >>> d.year, d.mon, d.day
        (2024, 1, 15)

        >>> Date.parse("1234-12-13 11:12:13.123456")
        Date(1234, 12, 13)

        >>> str(Date(2024, 2, 29))
        '2024-02-29'
    """

    __slots__ = ("_year", "_mon", "_day")

    def __init__(self, year: int, mon: int, day: int) -> None:
        """Create a Date from year, month and day.

        Args:
            year: The year (0-9999).
            mon: The month (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2024, 1, 15)
            Date(2024, 1, 15)

            >>> Date(2023, 2, 29)  # Not a leap year
            Traceback (most recent call last):
            ...
            logstamp.errors.ValidationError: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_int("year", year)
        validate_int("month", mon)
        validate_int("day", day)
        validate_year(year)
        validate_month(mon)
        validate_day(year, mon, day)

        self._year = year
        self._mon = mon
        self._day = day

    @classmethod
    def _from_fields(cls, year: int, mon: int, day: int) -> Date:
        """Create a Date from components without validating them.

        This is an internal factory for callers that have already
        established the invariants.
        """
        instance = object.__new__(cls)
        instance._year = year
        instance._mon = mon
        instance._day = day
        return instance

    @classmethod
    def parse_bytes(cls, data: BytesLike) -> Date:
        """Parse a date from the first 10 bytes of ``data``.

        The input is read as ``YYYY-MM-DD``. Anything after the tenth
        byte is ignored without being inspected, so a full log
        timestamp such as ``b"1234-12-13 11:12:13.123456"`` can be
        passed as is.

        Checks run in a fixed order and the first failure is reported:
        length, year digits, first separator, month digits, second
        separator, day digits, month range, day range.

        Args:
            data: A bytes-like object.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If the prefix is not a valid date. The error's
                ``kind`` names the failed check.
            TypeError: If ``data`` is not bytes-like.

        Examples:
            >>> Date.parse_bytes(b"2024-02-29")
            Date(2024, 2, 29)

            >>> Date.parse_bytes(b"2024-13-01")
            Traceback (most recent call last):
            ...
            logstamp.errors.ParseError: OutOfRangeMonth: month must be between 1 and 12, got 13
        """
        if isinstance(data, memoryview):
            if data.format != "B":
                data = data.cast("B")
        elif not isinstance(data, (bytes, bytearray)):
            raise TypeError(
                f"expected bytes-like object, got {type(data).__name__}"
            )

        if len(data) < DATE_LENGTH:
            raise ParseError(
                ParseErrorKind.TOO_SHORT,
                f"TooShort: need at least {DATE_LENGTH} bytes, got {len(data)}",
            )

        kind = ParseErrorKind.INVALID_CHAR_YEAR
        year = (
            digit_at(data, YEAR_OFFSET, kind) * 1000
            + digit_at(data, YEAR_OFFSET + 1, kind) * 100
            + digit_at(data, YEAR_OFFSET + 2, kind) * 10
            + digit_at(data, YEAR_OFFSET + 3, kind)
        )

        expect_separator(data, FIRST_SEPARATOR_OFFSET)

        kind = ParseErrorKind.INVALID_CHAR_MONTH
        mon = digit_at(data, MONTH_OFFSET, kind) * 10 + digit_at(
            data, MONTH_OFFSET + 1, kind
        )

        expect_separator(data, SECOND_SEPARATOR_OFFSET)

        kind = ParseErrorKind.INVALID_CHAR_DAY
        day = digit_at(data, DAY_OFFSET, kind) * 10 + digit_at(
            data, DAY_OFFSET + 1, kind
        )

        if mon < 1 or mon > 12:
            raise ParseError(
                ParseErrorKind.OUT_OF_RANGE_MONTH,
                f"OutOfRangeMonth: month must be between 1 and 12, got {mon}",
            )

        max_day = days_in_month(year, mon)
        if day < 1 or day > max_day:
            raise ParseError(
                ParseErrorKind.OUT_OF_RANGE_DAY,
                f"OutOfRangeDay: day must be between 1 and {max_day} "
                f"for {year:04d}-{mon:02d}, got {day}",
            )

        return cls._from_fields(year, mon, day)

    @classmethod
    def parse(cls, s: str) -> Date:
        """Parse a date from text starting with ``YYYY-MM-DD``.

        Behaves exactly like :meth:`parse_bytes` over the UTF-8 encoding
        of ``s``, including tolerating trailing content. Only the first
        10 characters are encoded, so anything after them (lone
        surrogates from ``surrogateescape`` decoding included) is never
        looked at. A surrogate inside the date fails on its lead byte
        like any other non-digit.

        Args:
            s: The text to parse.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If the text does not start with a valid date.
            TypeError: If ``s`` is not a string.

        Examples:
            >>> Date.parse("2000-02-29")
            Date(2000, 2, 29)

            >>> Date.parse("1234x12-13")
            Traceback (most recent call last):
            ...
            logstamp.errors.ParseError: InvalidCharDateSep: expected '-' at offset 4, got b'x'
        """
        if not isinstance(s, str):
            raise TypeError(f"expected str, got {type(s).__name__}")
        # Ten characters always encode to at least ten bytes
        return cls.parse_bytes(s[:DATE_LENGTH].encode("utf-8", "surrogatepass"))

    from_str = parse

    @classmethod
    def from_timestamp(cls, ts: SupportsDateFields) -> Date:
        """Project a timestamp onto its date.

        The ``year``, ``mon`` and ``day`` fields are copied verbatim and
        the time of day is dropped. No validation is performed: the
        timestamp is trusted to hold a valid date already, so this must
        not be used to check untrusted values.

        Args:
            ts: Any object with ``day``, ``mon`` and ``year`` attributes.

        Returns:
            A Date with the same three fields.
        """
        return cls._from_fields(ts.year, ts.mon, ts.day)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Date:
        """Create a Date from a JSON dictionary.

        Args:
            data: Dictionary with ``_type`` and ``value`` keys.

        Returns:
            A Date parsed from the dictionary.

        Raises:
            ParseError: If the data is invalid.

        Examples:
            >>> Date.from_json({'_type': 'Date', 'value': '2024-01-15'})
            Date(2024, 1, 15)
        """
        kind = ParseErrorKind.INVALID_JSON
        if not isinstance(data, dict):
            raise ParseError(kind, f"expected dict, got {type(data).__name__}")

        type_name = data.get("_type")
        if type_name is None:
            raise ParseError(kind, "missing '_type' field")
        if type_name != "Date":
            raise ParseError(kind, f"unknown type: {type_name!r}")

        value = data.get("value")
        if not isinstance(value, str):
            raise ParseError(kind, "missing or non-string 'value' field for Date")

        return cls.parse(value)

    @property
    def year(self) -> int:
        """Return the year component (0-9999)."""
        return self._year

    @property
    def mon(self) -> int:
        """Return the month component (1-12)."""
        return self._mon

    @property
    def month(self) -> int:
        """Alias for :attr:`mon`."""
        return self._mon

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> Date(2000, 1, 1).is_leap_year  # Divisible by 400
            True
            >>> Date(1900, 1, 1).is_leap_year  # Divisible by 100 but not 400
            False
        """
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return days_in_month(self._year, self._mon)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return ``(year, mon, day)``."""
        return (self._year, self._mon, self._day)

    def to_bytes(self) -> bytes:
        """Return the canonical ``YYYY-MM-DD`` form as ASCII bytes.

        Each digit is recovered from the fields with integer division
        and modulo and written into a ``0000-00-00`` template.

        Examples:
            >>> Date(987, 6, 5).to_bytes()
            b'0987-06-05'
        """
        buf = bytearray(DATE_TEMPLATE)
        put_digits(buf, YEAR_OFFSET, self._year, 4)
        put_digits(buf, MONTH_OFFSET, self._mon, 2)
        put_digits(buf, DAY_OFFSET, self._day, 2)
        return bytes(buf)

    def to_text(self) -> str:
        """Return the canonical ``YYYY-MM-DD`` form.

        Examples:
            >>> Date(2024, 1, 15).to_text()
            '2024-01-15'
        """
        return self.to_bytes().decode("ascii")

    def write_to(self, sink: Any) -> int:
        """Write the canonical form into a text sink.

        Args:
            sink: Any object with a ``write(str)`` method.

        Returns:
            The number of characters written, always 10.
        """
        text = self.to_text()
        sink.write(text)
        return len(text)

    def to_json(self) -> dict[str, Any]:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> Date(2024, 1, 15).to_json()
            {'_type': 'Date', 'value': '2024-01-15'}
        """
        return {"_type": "Date", "value": self.to_text()}

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> Date(2024, 1, 15) == Date(2024, 1, 15)
            True
            >>> Date(2024, 1, 15) == Date(2024, 1, 16)
            False
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> Date(2023, 12, 31) < Date(2024, 1, 1)
            True
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() < other.to_tuple()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() <= other.to_tuple()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() > other.to_tuple()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() >= other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __copy__(self) -> Date:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Date:
        return self

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        return f"Date({self._year}, {self._mon}, {self._day})"

    def __str__(self) -> str:
        """Return the canonical ``YYYY-MM-DD`` representation."""
        return self.to_text()

    def __format__(self, format_spec: str) -> str:
        """Format the canonical text with a string format spec.

        Examples:
            >>> f"[{Date(2024, 1, 15):>12}]"
            '[  2024-01-15]'
        """
        if not format_spec:
            return self.to_text()
        return format(self.to_text(), format_spec)

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date", "SupportsDateFields"]
