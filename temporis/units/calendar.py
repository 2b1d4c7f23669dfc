"""Calendar enumeration for time values.

This module provides the Calendar enum, the closed set of calendar
models a time value can be declared in.
"""

from __future__ import annotations

from enum import Enum

from temporis._internal.calendar import (
    days_in_month,
    is_gregorian_leap_year,
    is_julian_leap_year,
)
from temporis._internal.constants import GREGORIAN_URI, JULIAN_URI
from temporis.errors import UnsupportedCalendarError


class Calendar(Enum):
    """Supported calendar models.

    Both calendars are proleptic: their rules are extended arbitrarily
    far into the past, with astronomical year numbering (year 0 exists
    and equals 1 BCE).

    The value of each member is the calendar name stored on a time
    value. Every calendar is identified externally by a fixed URI.

    Examples:
        >>> Calendar.GREGORIAN.value
        'Gregorian'

        >>> Calendar.from_name("Julian")
        <Calendar.JULIAN: 'Julian'>

        >>> Calendar.lookup("Hebrew") is None
        True
    """

    GREGORIAN = "Gregorian"
    JULIAN = "Julian"

    @property
    def uri(self) -> str:
        """Return the fixed external identifier of this calendar.

        Returns:
            The calendar model URI.
        """
        if self is Calendar.GREGORIAN:
            return GREGORIAN_URI
        return JULIAN_URI

    @classmethod
    def lookup(cls, calendar: object) -> Calendar | None:
        """Resolve a calendar name or member, returning None if unsupported.

        Args:
            calendar: A Calendar member or an exact calendar name.

        Returns:
            The matching Calendar, or None.
        """
        if isinstance(calendar, Calendar):
            return calendar
        for member in cls:
            if member.value == calendar:
                return member
        return None

    @classmethod
    def from_name(cls, calendar: object) -> Calendar:
        """Resolve a calendar name or member.

        Args:
            calendar: A Calendar member or an exact calendar name.

        Returns:
            The matching Calendar.

        Raises:
            UnsupportedCalendarError: If the name is not a supported calendar.
        """
        member = cls.lookup(calendar)
        if member is None:
            raise UnsupportedCalendarError(calendar)
        return member

    @classmethod
    def from_uri(cls, uri: str) -> Calendar:
        """Resolve a calendar model URI.

        Raises:
            UnsupportedCalendarError: If the URI identifies no supported calendar.
        """
        for member in cls:
            if member.uri == uri:
                return member
        raise UnsupportedCalendarError(uri)

    def is_leap_year(self, year: int) -> bool:
        """Return True if year is a leap year under this calendar's rule."""
        if self is Calendar.GREGORIAN:
            return is_gregorian_leap_year(year)
        return is_julian_leap_year(year)

    def days_in_month(self, year: int, month: int) -> int:
        """Return the number of days in a month under this calendar's rule.

        Raises:
            ValueError: If month is not in 1-12.
        """
        return days_in_month(year, month, julian=self is Calendar.JULIAN)


__all__ = ["Calendar"]
