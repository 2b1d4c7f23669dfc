"""Core time value types.

This module provides:
    - DateComponents: Raw fields a time value is built from
    - CalendarDate: (year, month, day) triple in one calendar
    - TimeValue: Immutable point in time with precision and calendar
    - TimeOptions: Construction overrides for TimeValue
"""

from __future__ import annotations

from temporis.core.components import CalendarDate, DateComponents
from temporis.core.timevalue import TimeOptions, TimeValue

__all__: list[str] = [
    "CalendarDate",
    "DateComponents",
    "TimeOptions",
    "TimeValue",
]
