"""Calendar arithmetic for Temporis.

This module provides internal functions for proleptic Gregorian and
Julian calendar calculations: leap year rules and Julian Day Number
(JDN) conversion in both directions.

JDN 0 = -4712-01-01 in the proleptic Julian calendar
      = -4713-11-24 in the proleptic Gregorian calendar

Years use astronomical numbering (year 0 = 1 BCE). All divisions are
floor divisions, so the formulas hold for every integer year, including
years before the JDN epoch where day numbers become negative.

Month and day are not range-checked. Out-of-range values propagate
through the arithmetic.

This module is not part of the public API.
"""

from __future__ import annotations

from temporis._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_4_YEARS,
    DAYS_PER_400_YEARS,
    GREGORIAN_INVERSE_OFFSET,
    GREGORIAN_JDN_OFFSET,
    JDN_EPOCH_YEAR_OFFSET,
    JULIAN_INVERSE_OFFSET,
    JULIAN_JDN_OFFSET,
)


def is_gregorian_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_gregorian_leap_year(2000)  # Divisible by 400
        True
        >>> is_gregorian_leap_year(1900)  # Divisible by 100 but not 400
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Julian calendar.

    Every year divisible by 4 is a leap year.

    Examples:
        >>> is_julian_leap_year(1900)
        True
        >>> is_julian_leap_year(-1)
        False
    """
    return year % 4 == 0


def days_in_month(year: int, month: int, *, julian: bool = False) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).
        julian: Apply the Julian leap year rule instead of the Gregorian one.

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    leap = is_julian_leap_year(year) if julian else is_gregorian_leap_year(year)
    if month == 2 and leap:
        return 29
    return DAYS_IN_MONTH[month]


def _march_based(year: int, month: int) -> tuple[int, int]:
    """Shift a date so that the computational year starts on March 1.

    January and February become months 10 and 11 of the previous
    year, putting the leap day last.

    Returns:
        Tuple of (years since -4800, months since March).
    """
    a = (14 - month) // 12
    return year + JDN_EPOCH_YEAR_OFFSET - a, month + 12 * a - 3


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to a Julian Day Number.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The JDN.

    Examples:
        >>> gregorian_to_jdn(2000, 1, 1)
        2451545
        >>> gregorian_to_jdn(1582, 10, 15)
        2299161
    """
    y, m = _march_based(year, month)
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - GREGORIAN_JDN_OFFSET
    )


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Julian date to a Julian Day Number.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The JDN.

    Examples:
        >>> julian_to_jdn(-4712, 1, 1)
        0
        >>> julian_to_jdn(1582, 10, 4)
        2299160
    """
    y, m = _march_based(year, month)
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - JULIAN_JDN_OFFSET


def _from_march_based(centuries: int, c: int) -> tuple[int, int, int]:
    """Split a day count within a 4-year-cycle era into year, month, day.

    Args:
        centuries: Whole centuries already accounted for (Gregorian only).
        c: Days since March 1 of the first year of the era.

    Returns:
        Tuple of (year, month, day).
    """
    d = (4 * c + 3) // DAYS_PER_4_YEARS
    e = c - (DAYS_PER_4_YEARS * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * centuries + d - JDN_EPOCH_YEAR_OFFSET + m // 10
    return (year, month, day)


def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to a proleptic Gregorian date.

    Args:
        jdn: The JDN.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> jdn_to_gregorian(2451545)
        (2000, 1, 1)
    """
    a = jdn + GREGORIAN_INVERSE_OFFSET
    b = (4 * a + 3) // DAYS_PER_400_YEARS
    c = a - (DAYS_PER_400_YEARS * b) // 4
    return _from_march_based(b, c)


def jdn_to_julian(jdn: int) -> tuple[int, int, int]:
    """Convert a Julian Day Number to a proleptic Julian date.

    Args:
        jdn: The JDN.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> jdn_to_julian(0)
        (-4712, 1, 1)
    """
    return _from_march_based(0, jdn + JULIAN_INVERSE_OFFSET)


__all__ = [
    "is_gregorian_leap_year",
    "is_julian_leap_year",
    "days_in_month",
    "gregorian_to_jdn",
    "julian_to_jdn",
    "jdn_to_gregorian",
    "jdn_to_julian",
]
