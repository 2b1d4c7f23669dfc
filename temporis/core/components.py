"""Raw date fields and calendar date triples.

This module provides:
    - DateComponents: the raw fields a time value is built from, as
      produced by a parser or supplied by a caller.
    - CalendarDate: a (year, month, day) triple in a specific calendar,
      returned by the derived views of a time value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, NamedTuple


@dataclass(frozen=True)
class DateComponents:
    """Raw date fields of a time value.

    A field left as None is absent: the time value applies its own
    default (month and day 1, hour, minute and second 0, Gregorian
    calendar). An absent year means "no time". None of the fields are
    range-checked.

    Attributes:
        year: The year (astronomical numbering), or None if unknown.
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        precision: Precision code detected by the source.
        calendarname: Calendar name detected by the source.

    Examples:
        >>> DateComponents(year=2016, month=2, day=29)
        DateComponents(year=2016, month=2, day=29, hour=None, minute=None, second=None, precision=None, calendarname=None)

        >>> DateComponents.from_mapping({"year": 1985, "calendarname": "Julian"}).calendarname
        'Julian'
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    precision: int | None = None
    calendarname: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DateComponents:
        """Create DateComponents from a mapping of field names.

        Keys that are not DateComponents fields are ignored.

        Args:
            data: A mapping such as a decoded JSON object.

        Returns:
            New DateComponents holding copies of the known keys.
        """
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def finest_field(self) -> str | None:
        """Return the name of the finest time field that is present.

        Returns:
            One of "second", "minute", "hour", "day", "month", "year",
            or None if no year is present.
        """
        if self.year is None:
            return None
        for name in ("second", "minute", "hour", "day", "month"):
            if getattr(self, name) is not None:
                return name
        return "year"


class CalendarDate(NamedTuple):
    """A (year, month, day) triple in a specific calendar.

    Compares equal to a plain tuple with the same values.

    Examples:
        >>> CalendarDate(2016, 2, 29) == (2016, 2, 29)
        True
    """

    year: int
    month: int
    day: int


__all__ = ["DateComponents", "CalendarDate"]
