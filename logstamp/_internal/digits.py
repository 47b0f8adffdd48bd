"""Fixed-offset digit decoding and encoding.

The textual date layout has its digits and separators at constant
offsets. Callers check the input length once, then read each position
with these helpers. Decoding never looks at any byte other than the one
at the requested offset.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Union

from logstamp._internal.constants import ASCII_NINE, ASCII_ZERO, DATE_SEPARATOR
from logstamp.errors import ParseError, ParseErrorKind

# Anything indexable to ints in 0-255
BytesLike = Union[bytes, bytearray, memoryview]


def digit_at(data: BytesLike, offset: int, kind: ParseErrorKind) -> int:
    """Return the value of the ASCII digit at ``offset``.

    Args:
        data: The input bytes. Must be longer than ``offset``.
        offset: Position of the digit.
        kind: Error kind to report if the byte is not a digit.

    Returns:
        The digit value, 0-9.

    Raises:
        ParseError: If the byte is not ``0``-``9``.

    Examples:
        >>> digit_at(b"2024", 1, ParseErrorKind.INVALID_CHAR_YEAR)
        0
    """
    byte = data[offset]
    if byte < ASCII_ZERO or byte > ASCII_NINE:
        raise ParseError(
            kind,
            f"{kind.value}: expected digit at offset {offset}, got {bytes([byte])!r}",
        )
    return byte - ASCII_ZERO


def expect_separator(data: BytesLike, offset: int) -> None:
    """Require the date separator ``-`` at ``offset``.

    Raises:
        ParseError: With kind INVALID_CHAR_DATE_SEP if the byte differs.
    """
    byte = data[offset]
    if byte != DATE_SEPARATOR:
        kind = ParseErrorKind.INVALID_CHAR_DATE_SEP
        raise ParseError(
            kind,
            f"{kind.value}: expected '-' at offset {offset}, got {bytes([byte])!r}",
        )


def put_digits(buf: bytearray, offset: int, value: int, width: int) -> None:
    """Write ``value`` as ``width`` zero-padded ASCII digits into ``buf``.

    Digits are filled right to left using modulo and integer division,
    so only the lowest ``width`` decimal places of ``value`` are kept.

    Examples:
        >>> buf = bytearray(b"0000")
        >>> put_digits(buf, 0, 42, 4)
        >>> bytes(buf)
        b'0042'
    """
    for position in range(offset + width - 1, offset - 1, -1):
        buf[position] = ASCII_ZERO + value % 10
        value //= 10


__all__ = [
    "BytesLike",
    "digit_at",
    "expect_separator",
    "put_digits",
]
