"""TimeValue class representing a point in time of explicit precision.

This module provides the TimeValue class, an immutable point in time
declared in a historical calendar, and TimeOptions, its construction
configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from temporis._internal.constants import UTC_OFFSET
from temporis.convert.calendar import (
    gregorian_to_julian,
    gregorian_to_julian_day,
    julian_to_gregorian,
    julian_to_julian_day,
)
from temporis.core.components import CalendarDate, DateComponents
from temporis.format.iso8601 import format_iso8601, normalize_iso8601
from temporis.format.text import TextFormatter
from temporis.infer import Parser
from temporis.units.calendar import Calendar
from temporis.units.precision import Precision

logger = logging.getLogger(__name__)

# What a TimeValue can be built from
TimeDefinition = Union[str, DateComponents, Mapping[str, Any], None]

_PRECISION_OF_FIELD: dict[str, Precision] = {
    "year": Precision.YEAR,
    "month": Precision.MONTH,
    "day": Precision.DAY,
    "hour": Precision.HOUR,
    "minute": Precision.MINUTE,
    "second": Precision.SECOND,
}


@dataclass(frozen=True)
class TimeOptions:
    """Configuration for constructing a TimeValue.

    Attributes:
        precision: Precision overruling the one detected from the
            definition. 0 (Precision.GY) is a real override.
        calendarname: Calendar overruling the one detected from the
            definition.

    Examples:
        >>> opts = TimeOptions(precision=Precision.YEAR)
        >>> TimeValue("1985-01-01", opts).precision
        <Precision.YEAR: 9>
    """

    precision: int | None = None
    calendarname: Calendar | str | None = None


class TimeValue:
    """A point in time with explicit precision in a declared calendar.

    A TimeValue stores date and time fields as given, together with a
    precision and the name of the calendar the fields are expressed in
    (Gregorian or Julian, both proleptic). It never changes once
    constructed; every other view is derived on demand.

    A TimeValue built from text that cannot be read, or from fields
    without a year, represents no time at all: is_valid() is False and
    every derived view returns None (or "" for text views). A TimeValue
    whose calendar name is not supported keeps the name but returns
    None from every view that depends on the calendar.

    Fields are not range-checked; out-of-range months or days propagate
    through calendar conversion arithmetically.

    Attributes:
        parser: Reads text definitions into DateComponents.
        formatter: Renders dates as display text.

    Examples:
        >>> t = TimeValue({"year": 2016, "month": 2, "day": 29})
        >>> t.gregorian()
        CalendarDate(year=2016, month=2, day=29)
        >>> t.jdn()
        2457448
        >>> t.iso8601()
        '+00000002016-02-29T00:00:00Z'

        >>> t = TimeValue("1582-10-05", TimeOptions(calendarname="Julian"))
        >>> t.gregorian()
        CalendarDate(year=1582, month=10, day=15)

        >>> TimeValue("not a date").is_valid()
        False
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_precision",
        "_calendarname",
    )

    parser: ClassVar[Parser] = Parser()
    formatter: ClassVar[TextFormatter] = TextFormatter()

    def __init__(
        self,
        definition: TimeDefinition = None,
        options: TimeOptions | None = None,
    ) -> None:
        """Create a TimeValue from text or raw fields.

        Args:
            definition: Text to be read by the parser, DateComponents, or
                a mapping with DateComponents field names. Structured
                definitions are copied, never aliased.
            options: Precision and calendar overrides.
        """
        if options is None:
            options = TimeOptions()

        if isinstance(definition, str):
            components = self.parser.parse(definition) or DateComponents()
        elif isinstance(definition, DateComponents):
            components = definition
        elif isinstance(definition, Mapping):
            components = DateComponents.from_mapping(definition)
        elif definition is None:
            components = DateComponents()
        else:
            raise TypeError(
                f"expected str, DateComponents or mapping, got {type(definition).__name__}"
            )

        self._year: int | None = components.year
        self._month: int = components.month if components.month is not None else 1
        self._day: int = components.day if components.day is not None else 1
        self._hour: int = components.hour if components.hour is not None else 0
        self._minute: int = components.minute if components.minute is not None else 0
        self._second: int = components.second if components.second is not None else 0

        if options.precision is not None:
            precision: int | None = options.precision
        elif components.precision is not None:
            precision = components.precision
        else:
            finest = components.finest_field()
            precision = _PRECISION_OF_FIELD[finest] if finest else None
        level = Precision.from_code(precision)
        self._precision: int | None = level if level is not None else precision

        calendarname = options.calendarname or components.calendarname or Calendar.GREGORIAN
        if isinstance(calendarname, Calendar):
            calendarname = calendarname.value
        self._calendarname: str = calendarname

        if self._year is None:
            logger.debug("TimeValue from %r represents no time", definition)

    @classmethod
    def new_from_iso8601(cls, iso8601: str, precision: int | None = None) -> TimeValue:
        """Create a TimeValue from an extended ISO 8601 timestamp.

        The time of day is dropped, since the text grammar reads dates
        only. Input that is not a timestamp passes through to the parser
        and typically yields an invalid TimeValue.

        Args:
            iso8601: Timestamp such as '+00000001985-01-01T00:00:00Z'.
            precision: Precision override. If not given, the precision
                is as fine as the timestamp's date part allows.

        Returns:
            A new Gregorian TimeValue.

        Examples:
            >>> t = TimeValue.new_from_iso8601("-0100-06-15", Precision.DAY)
            >>> t.year, t.month, t.day
            (-100, 6, 15)
        """
        return cls(normalize_iso8601(iso8601), TimeOptions(precision=precision))

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> TimeValue:
        """Create a TimeValue from its JSON data-value form.

        See temporis.convert.from_json.
        """
        from temporis.convert.json import from_json

        return from_json(data)

    @property
    def year(self) -> int | None:
        """Return the year, or None if this value represents no time."""
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def utcoffset(self) -> str:
        """Return the UTC offset, always '+00:00'."""
        return UTC_OFFSET

    @property
    def precision(self) -> int | None:
        """Return the precision.

        Returns:
            A Precision for codes on the precision scale, any other code
            unchanged, or None if no precision is known.
        """
        return self._precision

    @property
    def precision_text(self) -> str:
        """Return the name of the precision, as rendered by the formatter."""
        return self.formatter.precision_text(self._precision)

    @property
    def before(self) -> int:
        """Return the uncertainty before this time, always 0."""
        return 0

    @property
    def after(self) -> int:
        """Return the uncertainty after this time, always 0."""
        return 0

    @property
    def calendarname(self) -> str:
        """Return the name of the calendar the fields are expressed in."""
        return self._calendarname

    @property
    def calendar_text(self) -> str:
        """Return the calendar name, e.g. 'Gregorian'."""
        return self._calendarname

    @property
    def calendar(self) -> Calendar | None:
        """Return the calendar, or None if the calendar name is unsupported."""
        calendar = Calendar.lookup(self._calendarname)
        if calendar is None:
            logger.debug("Unsupported calendar %r", self._calendarname)
        return calendar

    @property
    def calendar_uri(self) -> str | None:
        """Return the calendar model URI, or None for an unsupported calendar.

        Examples:
            >>> TimeValue("1900").calendar_uri
            'http://wikidata.org/id/Q1985727'
        """
        calendar = self.calendar
        if calendar is None:
            return None
        return calendar.uri

    def is_valid(self) -> bool:
        """Return whether this value represents any time at all.

        This is False when the definition could not be read as a time.
        """
        return self._year is not None

    def gregorian(self) -> CalendarDate | None:
        """Return the date in the Gregorian calendar.

        Returns:
            The Gregorian date, or None if the year is unknown or the
            calendar is unsupported.
        """
        calendar = self.calendar
        if self._year is None or calendar is None:
            return None
        if calendar is Calendar.GREGORIAN:
            return CalendarDate(self._year, self._month, self._day)
        return CalendarDate(*julian_to_gregorian(self._year, self._month, self._day))

    def julian(self) -> CalendarDate | None:
        """Return the date in the Julian calendar.

        Returns:
            The Julian date, or None if the year is unknown or the
            calendar is unsupported.
        """
        calendar = self.calendar
        if self._year is None or calendar is None:
            return None
        if calendar is Calendar.JULIAN:
            return CalendarDate(self._year, self._month, self._day)
        return CalendarDate(*gregorian_to_julian(self._year, self._month, self._day))

    def jdn(self) -> int | None:
        """Return the Julian Day Number of the date.

        Returns:
            The JDN, or None if the year is unknown or the calendar is
            unsupported.
        """
        calendar = self.calendar
        if self._year is None or calendar is None:
            return None
        if calendar is Calendar.GREGORIAN:
            return gregorian_to_julian_day(self._year, self._month, self._day)
        return julian_to_julian_day(self._year, self._month, self._day)

    def iso8601(self) -> str | None:
        """Return the Gregorian date and time as an extended ISO 8601 timestamp.

        Returns:
            Timestamp such as '+00000001985-01-01T00:00:00Z', or None if
            there is no Gregorian view.
        """
        return format_iso8601(self)

    def text(self) -> str:
        """Return display text for the date in its own calendar."""
        return self.formatter.get_text_from_date(
            self._precision, self._year, self._month, self._day
        )

    def gregorian_text(self) -> str:
        """Return display text for the Gregorian date, or '' if there is none."""
        return self._text_of(self.gregorian())

    def julian_text(self) -> str:
        """Return display text for the Julian date, or '' if there is none."""
        return self._text_of(self.julian())

    def _text_of(self, date: CalendarDate | None) -> str:
        if date is None:
            return ""
        return self.formatter.get_text_from_date(
            self._precision, date.year, date.month, date.day
        )

    def to_json(self) -> dict[str, Any] | None:
        """Return the JSON data-value form, or None if there is no timestamp.

        See temporis.convert.to_json.
        """
        from temporis.convert.json import to_json

        return to_json(self)

    def _key(self) -> tuple[Any, ...]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._precision,
            self._calendarname,
        )

    def __eq__(self, other: object) -> bool:
        """Check equality of all stored fields.

        Two values for the same day in different calendars are not
        equal; compare jdn() for that.
        """
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self._year is None:
            return "TimeValue(invalid)"
        return (
            f"TimeValue(year={self._year}, month={self._month}, day={self._day}, "
            f"hour={self._hour}, minute={self._minute}, second={self._second}, "
            f"precision={self._precision!r}, calendarname={self._calendarname!r})"
        )

    def __str__(self) -> str:
        return self.text()


__all__ = ["TimeValue", "TimeOptions", "TimeDefinition"]
