"""Internal utilities for Temporis.

This module contains private implementation details:
    - Julian Day Number arithmetic and leap year rules
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from temporis._internal.calendar import (
    gregorian_to_jdn,
    is_gregorian_leap_year,
    is_julian_leap_year,
    jdn_to_gregorian,
    jdn_to_julian,
    julian_to_jdn,
)

__all__: list[str] = [
    "gregorian_to_jdn",
    "is_gregorian_leap_year",
    "is_julian_leap_year",
    "jdn_to_gregorian",
    "jdn_to_julian",
    "julian_to_jdn",
]
