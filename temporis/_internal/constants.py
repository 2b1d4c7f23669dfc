"""Internal constants for Temporis.

These constants define the magic numbers and fixed identifiers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Julian Day Number arithmetic
# Days are counted from March 1 of year -4800, which puts every leap day
# at the end of a computational year.
JDN_EPOCH_YEAR_OFFSET: int = 4800
GREGORIAN_JDN_OFFSET: int = 32045
JULIAN_JDN_OFFSET: int = 32083
GREGORIAN_INVERSE_OFFSET: int = 32044
JULIAN_INVERSE_OFFSET: int = 32082

DAYS_PER_400_YEARS: int = 146097  # Gregorian cycle
DAYS_PER_4_YEARS: int = 1461  # Julian cycle

# Days in each month (common year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (common year)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Calendar model identifiers
GREGORIAN_URI: str = "http://wikidata.org/id/Q1985727"
JULIAN_URI: str = "http://wikidata.org/id/Q1985786"

# Extended ISO 8601 output
ISO_YEAR_DIGITS: int = 11
UTC_OFFSET: str = "+00:00"

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


__all__ = [
    "JDN_EPOCH_YEAR_OFFSET",
    "GREGORIAN_JDN_OFFSET",
    "JULIAN_JDN_OFFSET",
    "GREGORIAN_INVERSE_OFFSET",
    "JULIAN_INVERSE_OFFSET",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_IN_MONTH",
    "GREGORIAN_URI",
    "JULIAN_URI",
    "ISO_YEAR_DIGITS",
    "UTC_OFFSET",
    "MONTH_NAMES",
]
