"""Extended ISO 8601 formatting for time values.

This module provides functions for converting time values to and from
the extended ISO 8601 timestamp used as the wire format:

    +00000001985-01-01T00:00:00Z
    -00000000100-06-15T00:00:00Z

The year always carries a sign and is zero-padded to 11 digits, which
covers the very large magnitudes needed at coarse precisions. The
timestamp is always expressed in the Gregorian calendar and in UTC.

Functions:
    format_timestamp: Render date and time fields as a timestamp.
    format_iso8601: Render a TimeValue as a timestamp.
    normalize_iso8601: Bring a timestamp into the form the text parser reads.

Examples:
    >>> format_timestamp(1985, 1, 1)
    '+00000001985-01-01T00:00:00Z'

    >>> normalize_iso8601("-00000000100-06-15T00:00:00Z")
    '-100-06-15'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from temporis._internal.constants import ISO_YEAR_DIGITS

if TYPE_CHECKING:
    from temporis.core.timevalue import TimeValue

# Time of day suffix; the text grammar does not read sub-day fields
_TIME_SUFFIX_PATTERN = re.compile(r"T.+$")

# Leading zeros of the year; one zero is kept when the year is 0
_YEAR_ZEROS_PATTERN = re.compile(r"^([\-+])?0*(0|[1-9]+)")


def _pad(number: int, digits: int) -> str:
    """Zero-pad the magnitude of number to at least digits characters."""
    return str(abs(number)).zfill(digits)


def format_timestamp(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> str:
    """Render date and time fields as an extended ISO 8601 timestamp.

    Args:
        year: The Gregorian year.
        month: The month.
        day: The day.
        hour: The hour.
        minute: The minute.
        second: The second.

    Returns:
        Timestamp such as '+00000002016-02-29T00:00:00Z'.

    Examples:
        >>> format_timestamp(-44, 3, 15, 12)
        '-00000000044-03-15T12:00:00Z'
    """
    sign = "-" if year < 0 else "+"
    return (
        f"{sign}{_pad(year, ISO_YEAR_DIGITS)}-{_pad(month, 2)}-{_pad(day, 2)}"
        f"T{_pad(hour, 2)}:{_pad(minute, 2)}:{_pad(second, 2)}Z"
    )


def format_iso8601(value: TimeValue) -> str | None:
    """Render a time value as an extended ISO 8601 timestamp.

    The Gregorian view of the value is used, so a Julian time value is
    converted first.

    Args:
        value: The TimeValue to format.

    Returns:
        The timestamp, or None if the value has no Gregorian view
        (unknown year or unsupported calendar).
    """
    gregorian = value.gregorian()
    if gregorian is None:
        return None
    return format_timestamp(
        gregorian.year,
        gregorian.month,
        gregorian.day,
        value.hour,
        value.minute,
        value.second,
    )


def normalize_iso8601(s: str) -> str:
    """Bring an ISO 8601 timestamp into the form read by the text parser.

    - The time of day is dropped.
    - Leading zeros of the year are dropped, keeping the sign and at
      least one digit ("-0005" becomes "-5", "0000" becomes "0").
    - A leading "+" is dropped.

    Input that does not look like a timestamp passes through with only
    whatever of these steps applies.

    Args:
        s: The timestamp.

    Returns:
        The normalized string.

    Examples:
        >>> normalize_iso8601("+00000002016-02-29T00:00:00Z")
        '2016-02-29'
        >>> normalize_iso8601("+0000-01-01")
        '0-01-01'
    """
    normalized = _TIME_SUFFIX_PATTERN.sub("", s)
    normalized = _YEAR_ZEROS_PATTERN.sub(r"\1\2", normalized, count=1)
    return normalized.replace("+", "", 1)


__all__ = ["format_timestamp", "format_iso8601", "normalize_iso8601"]
