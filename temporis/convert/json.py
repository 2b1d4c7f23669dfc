"""JSON serialization and deserialization for time values.

This module provides functions for converting time values to and from
the JSON data-value form used by structured-data stores.

Functions:
    to_json: Convert a TimeValue to a JSON-serializable dict.
    from_json: Create a TimeValue from a JSON dict.

The timestamp is always the Gregorian view; the calendar model URI says
which calendar the value was declared in:

    {
        "time": "+00000001582-10-15T00:00:00Z",
        "timezone": 0,
        "before": 0,
        "after": 0,
        "precision": 11,
        "calendarmodel": "http://wikidata.org/id/Q1985786"
    }

Examples:
    >>> from temporis import TimeValue
    >>> from temporis.convert import to_json, from_json

    >>> data = to_json(TimeValue("1985-01-01"))
    >>> data["time"]
    '+00000001985-01-01T00:00:00Z'

    >>> from_json(data) == TimeValue("1985-01-01")
    True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from temporis.convert.calendar import gregorian_to_julian
from temporis.core.components import DateComponents
from temporis.errors import ParseError
from temporis.format.iso8601 import normalize_iso8601
from temporis.units.calendar import Calendar

if TYPE_CHECKING:
    from temporis.core.timevalue import TimeValue

logger = logging.getLogger(__name__)


def to_json(value: TimeValue) -> dict[str, Any] | None:
    """Convert a time value to its JSON data-value form.

    Args:
        value: The TimeValue to convert.

    Returns:
        A JSON-serializable dictionary, or None if the value represents
        no time or is declared in an unsupported calendar.

    Raises:
        TypeError: If value is not a TimeValue.
    """
    # Import here to avoid circular imports
    from temporis.core.timevalue import TimeValue

    if not isinstance(value, TimeValue):
        raise TypeError(f"expected TimeValue, got {type(value).__name__}")

    timestamp = value.iso8601()
    if timestamp is None:
        return None

    return {
        "time": timestamp,
        "timezone": 0,
        "before": value.before,
        "after": value.after,
        "precision": None if value.precision is None else int(value.precision),
        "calendarmodel": value.calendar_uri,
    }


def from_json(data: dict[str, Any]) -> TimeValue:
    """Create a time value from its JSON data-value form.

    A Julian value with a full date is converted back from the Gregorian
    timestamp, so to_json and from_json round-trip. A timestamp whose
    month or day is "00" keeps its year (and month) as the Julian fields.
    The time of day is dropped.

    Args:
        data: Dictionary with "time" and optionally "precision" and
            "calendarmodel" keys. A missing calendar model means Gregorian.

    Returns:
        The TimeValue.

    Raises:
        ParseError: If the data is not a dict or the timestamp is unreadable.
        UnsupportedCalendarError: If the calendar model URI is unknown.
    """
    from temporis.core.timevalue import TimeOptions, TimeValue

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    timestamp = data.get("time")
    if not isinstance(timestamp, str) or not timestamp:
        raise ParseError("missing 'time' field for TimeValue")

    uri = data.get("calendarmodel")
    calendar = Calendar.GREGORIAN if uri is None else Calendar.from_uri(uri)

    components = TimeValue.parser.parse(normalize_iso8601(timestamp))
    if components is None or components.year is None:
        raise ParseError(f"invalid time value timestamp: {timestamp!r}")
    logger.debug("Decoded %r as %s %r", timestamp, calendar.value, components)

    # A timestamp without a day ("-00-00", "-05-00") names a Julian year or
    # month directly; only a full date is shifted from the Gregorian view.
    if calendar is Calendar.JULIAN and components.day is not None:
        year, month, day = gregorian_to_julian(components.year, components.month, components.day)
        components = DateComponents(
            year=year, month=month, day=day, precision=components.precision
        )

    return TimeValue(
        components,
        TimeOptions(precision=data.get("precision"), calendarname=calendar),
    )


__all__ = ["to_json", "from_json"]
