"""Conversion between the Gregorian and Julian calendars.

This module provides exact conversion of date triples between the
proleptic Gregorian and Julian calendars, and the Julian Day Number
(JDN) of a date in either calendar.

Functions:
    gregorian_to_julian: Gregorian (y, m, d) -> Julian (y, m, d).
    julian_to_gregorian: Julian (y, m, d) -> Gregorian (y, m, d).
    gregorian_to_julian_day: Gregorian (y, m, d) -> JDN.
    julian_to_julian_day: Julian (y, m, d) -> JDN.
    julian_day_to_gregorian: JDN -> Gregorian (y, m, d).
    julian_day_to_julian: JDN -> Julian (y, m, d).
    to_julian_day: JDN of a date in a named calendar.
    from_julian_day: Date triple of a JDN in a named calendar.
    convert_date: Date triple from one named calendar to another.

Conversion goes through the JDN, so for every valid date d:

    julian_to_gregorian(*gregorian_to_julian(*d)) == d
    gregorian_to_julian_day(*d) == julian_to_julian_day(*gregorian_to_julian(*d))

Examples:
    >>> gregorian_to_julian(1582, 10, 15)
    (1582, 10, 5)

    >>> julian_to_gregorian(1582, 10, 4)
    (1582, 10, 14)

    >>> gregorian_to_julian_day(2016, 2, 29)
    2457448

    >>> convert_date(2016, 2, 29, "Gregorian", "Julian")
    (2016, 2, 16)
"""

from __future__ import annotations

from temporis._internal.calendar import (
    gregorian_to_jdn,
    jdn_to_gregorian,
    jdn_to_julian,
    julian_to_jdn,
)
from temporis.units.calendar import Calendar

DateTriple = tuple[int, int, int]


def gregorian_to_julian(year: int, month: int, day: int) -> DateTriple:
    """Convert a proleptic Gregorian date to the same day in the Julian calendar.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Tuple of (year, month, day) in the Julian calendar.
    """
    return jdn_to_julian(gregorian_to_jdn(year, month, day))


def julian_to_gregorian(year: int, month: int, day: int) -> DateTriple:
    """Convert a proleptic Julian date to the same day in the Gregorian calendar.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Tuple of (year, month, day) in the Gregorian calendar.
    """
    return jdn_to_gregorian(julian_to_jdn(year, month, day))


def gregorian_to_julian_day(year: int, month: int, day: int) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date."""
    return gregorian_to_jdn(year, month, day)


def julian_to_julian_day(year: int, month: int, day: int) -> int:
    """Return the Julian Day Number of a proleptic Julian date."""
    return julian_to_jdn(year, month, day)


def julian_day_to_gregorian(jdn: int) -> DateTriple:
    """Return the proleptic Gregorian date of a Julian Day Number."""
    return jdn_to_gregorian(jdn)


def julian_day_to_julian(jdn: int) -> DateTriple:
    """Return the proleptic Julian date of a Julian Day Number."""
    return jdn_to_julian(jdn)


def to_julian_day(calendar: Calendar | str, year: int, month: int, day: int) -> int:
    """Return the Julian Day Number of a date in the given calendar.

    Args:
        calendar: A Calendar member or calendar name.
        year: The year.
        month: The month.
        day: The day.

    Returns:
        The JDN.

    Raises:
        UnsupportedCalendarError: If calendar is not Gregorian or Julian.
    """
    if Calendar.from_name(calendar) is Calendar.GREGORIAN:
        return gregorian_to_jdn(year, month, day)
    return julian_to_jdn(year, month, day)


def from_julian_day(calendar: Calendar | str, jdn: int) -> DateTriple:
    """Return the date of a Julian Day Number in the given calendar.

    Raises:
        UnsupportedCalendarError: If calendar is not Gregorian or Julian.
    """
    if Calendar.from_name(calendar) is Calendar.GREGORIAN:
        return jdn_to_gregorian(jdn)
    return jdn_to_julian(jdn)


def convert_date(
    year: int,
    month: int,
    day: int,
    source: Calendar | str,
    target: Calendar | str,
) -> DateTriple:
    """Convert a date triple from one calendar to another.

    Converting a date to its own calendar returns it unchanged, even
    when month or day are out of range.

    Args:
        year: The year in the source calendar.
        month: The month in the source calendar.
        day: The day in the source calendar.
        source: Calendar the date is expressed in.
        target: Calendar to express the date in.

    Returns:
        Tuple of (year, month, day) in the target calendar.

    Raises:
        UnsupportedCalendarError: If either calendar is not supported.

    Examples:
        >>> convert_date(1582, 10, 5, Calendar.JULIAN, Calendar.GREGORIAN)
        (1582, 10, 15)
    """
    source_calendar = Calendar.from_name(source)
    target_calendar = Calendar.from_name(target)
    if source_calendar is target_calendar:
        return (year, month, day)
    return from_julian_day(target_calendar, to_julian_day(source_calendar, year, month, day))


__all__ = [
    "DateTriple",
    "gregorian_to_julian",
    "julian_to_gregorian",
    "gregorian_to_julian_day",
    "julian_to_julian_day",
    "julian_day_to_gregorian",
    "julian_day_to_julian",
    "to_julian_day",
    "from_julian_day",
    "convert_date",
]
