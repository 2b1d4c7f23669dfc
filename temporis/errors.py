"""Temporis exception hierarchy.

All Temporis-specific exceptions inherit from TemporisError.

TimeValue itself does not raise for bad input: unparseable text yields
an invalid value and an unsupported calendar yields None from every
calendar-dependent view. These exceptions surface from the lower-level
converter and serialization functions.
"""

from __future__ import annotations


class TemporisError(Exception):
    """Base exception for all Temporis errors."""

    pass


class UnsupportedCalendarError(TemporisError, ValueError):
    """Calendar name or URI outside the supported calendars.

    Raised when a calendar is given that is neither Gregorian nor
    Julian.

    Examples:
        - Calendar name "Hebrew"
        - Calendar model URI that does not identify a known calendar

    Attributes:
        calendar: The offending calendar name or URI.
    """

    def __init__(self, calendar: object) -> None:
        self.calendar = calendar
        super().__init__(f"unsupported calendar: {calendar!r}")


class ParseError(TemporisError, ValueError):
    """Failed to parse a textual or serialized time.

    Raised by the strict parsing entry points when input cannot be
    interpreted as a time.

    Examples:
        - Free text matching no known date grammar
        - JSON payload without a "time" field
    """

    pass


__all__ = [
    "TemporisError",
    "UnsupportedCalendarError",
    "ParseError",
]
