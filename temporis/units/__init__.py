"""Time value units and enumerations.

This module provides:
    - Precision: Ordered granularity scale (GY ... SECOND)
    - Calendar: Supported calendar models (GREGORIAN, JULIAN)
"""

from __future__ import annotations

from temporis.units.calendar import Calendar
from temporis.units.precision import Precision

__all__: list[str] = [
    "Calendar",
    "Precision",
]
