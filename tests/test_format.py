"""Tests for the format module functions."""

from __future__ import annotations

import io

import pytest

from logstamp import Date
from logstamp.errors import ParseError, ParseErrorKind
from logstamp.format import format_date, parse_date, parse_date_bytes, write_date


class TestParseDate:
    """Tests for parse_date and parse_date_bytes."""

    def test_parse_date(self) -> None:
        """Test parsing text."""
        assert parse_date("2024-01-15") == Date(2024, 1, 15)

    def test_parse_date_timestamp(self) -> None:
        """Test parsing the date off a full timestamp."""
        assert parse_date("2024-01-15 14:30:45.123") == Date(2024, 1, 15)

    def test_parse_date_bytes(self) -> None:
        """Test parsing bytes."""
        assert parse_date_bytes(b"2024-01-15") == Date(2024, 1, 15)

    def test_parse_date_error(self) -> None:
        """Test that errors carry the same kind as Date.parse."""
        with pytest.raises(ParseError) as exc_info:
            parse_date("2024-02-30")
        assert exc_info.value.kind is ParseErrorKind.OUT_OF_RANGE_DAY

    def test_entry_points_agree(self) -> None:
        """Test that text and byte entry points accept the same inputs."""
        text = "1234-12-13 11:12:13.123456"
        assert parse_date(text) == parse_date_bytes(text.encode())


class TestFormatDate:
    """Tests for format_date and write_date."""

    def test_format_date(self) -> None:
        """Test formatting a Date."""
        assert format_date(Date(2024, 1, 15)) == "2024-01-15"

    def test_format_date_wrong_type(self) -> None:
        """Test that non-Date values raise TypeError."""
        with pytest.raises(TypeError, match="expected Date"):
            format_date("2024-01-15")  # type: ignore[arg-type]

    def test_write_date(self) -> None:
        """Test writing a Date into a sink."""
        sink = io.StringIO()
        assert write_date(Date(999, 9, 9), sink) == 10
        assert sink.getvalue() == "0999-09-09"

    def test_write_date_wrong_type(self) -> None:
        """Test that non-Date values raise TypeError."""
        with pytest.raises(TypeError, match="expected Date"):
            write_date(None, io.StringIO())  # type: ignore[arg-type]

    def test_roundtrip(self) -> None:
        """Test parse_date(format_date(d)) == d."""
        for d in [Date(0, 1, 1), Date(2000, 2, 29), Date(9999, 12, 31), Date(1970, 1, 1)]:
            assert parse_date(format_date(d)) == d
