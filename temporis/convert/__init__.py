"""Time value conversion utilities.

This module provides functions for converting dates and time values to
and from other representations:
    - Gregorian <-> Julian calendar dates and Julian Day Numbers
    - JSON data-value serialization and deserialization

Examples:
    >>> from temporis.convert import gregorian_to_julian, julian_to_gregorian
    >>> gregorian_to_julian(2016, 2, 29)
    (2016, 2, 16)
    >>> julian_to_gregorian(2016, 2, 16)
    (2016, 2, 29)

    >>> from temporis import TimeValue
    >>> from temporis.convert import to_json, from_json
    >>> t = TimeValue("1850 Julian")
    >>> from_json(to_json(t)) == t
    True
"""

from __future__ import annotations

from temporis.convert.calendar import (
    convert_date,
    from_julian_day,
    gregorian_to_julian,
    gregorian_to_julian_day,
    julian_day_to_gregorian,
    julian_day_to_julian,
    julian_to_gregorian,
    julian_to_julian_day,
    to_julian_day,
)
from temporis.convert.json import from_json, to_json

__all__ = [
    # Calendars
    "gregorian_to_julian",
    "julian_to_gregorian",
    "gregorian_to_julian_day",
    "julian_to_julian_day",
    "julian_day_to_gregorian",
    "julian_day_to_julian",
    "to_julian_day",
    "from_julian_day",
    "convert_date",
    # JSON
    "to_json",
    "from_json",
]
