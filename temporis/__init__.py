"""Temporis: points in time of explicit precision in historical calendars.

Temporis represents a single point in time whose precision may be as
coarse as a billion years or as fine as a second, declared in the
proleptic Gregorian or Julian calendar. It converts losslessly between
the two calendars and exposes a Julian Day Number for comparing dates
across them.

Core Types:
    TimeValue: Immutable point in time with precision and calendar
    TimeOptions: Precision and calendar overrides for TimeValue
    DateComponents: Raw date fields a TimeValue is built from
    CalendarDate: (year, month, day) triple in one calendar

Units:
    Precision: Granularity scale, GY (0) through SECOND (14)
    Calendar: GREGORIAN or JULIAN

Collaborators:
    Parser: Reads free text into DateComponents
    TextFormatter: Renders dates as precision-aware display text

Exceptions:
    TemporisError: Base exception
    UnsupportedCalendarError: Calendar outside Gregorian/Julian
    ParseError: Failed to parse a string or payload

Example:
    >>> from temporis import TimeValue, PRECISION
    >>> t = TimeValue.new_from_iso8601("+1985-01-01", PRECISION.DAY)
    >>> t.iso8601()
    '+00000001985-01-01T00:00:00Z'
    >>> t.julian()
    CalendarDate(year=1984, month=12, day=19)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Exceptions
from temporis.errors import ParseError, TemporisError, UnsupportedCalendarError

# Units
from temporis.units.calendar import Calendar
from temporis.units.precision import Precision

# Core types
from temporis.core.components import CalendarDate, DateComponents
from temporis.core.timevalue import TimeOptions, TimeValue

# Collaborators
from temporis.format.text import TextFormatter
from temporis.infer import Parser, ParserOptions

PRECISION = Precision
CALENDAR = Calendar

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "DateComponents",
    "TimeOptions",
    "TimeValue",
    # Units
    "Calendar",
    "Precision",
    "CALENDAR",
    "PRECISION",
    # Collaborators
    "Parser",
    "ParserOptions",
    "TextFormatter",
    # Exceptions
    "TemporisError",
    "UnsupportedCalendarError",
    "ParseError",
]
