"""Known text grammars for time inference.

This module provides format templates that define how to read various
textual time expressions. Each template specifies:
- A regex pattern for matching (against lowercased text)
- A component extractor
- The precision the expression asserts

Era and calendar markers are removed before templates are tried; see
temporis.infer.

Internal module - use Parser from temporis.infer instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Pattern

from temporis._internal.constants import MONTH_NAMES
from temporis.units.precision import Precision

Components = dict[str, int]


@dataclass(frozen=True)
class FormatTemplate:
    """A format template for matching time expressions.

    Attributes:
        name: Human-readable name for the format.
        pattern: Compiled regex pattern for matching.
        extractor: Function returning components from a regex match, or
            None when the match turns out not to be a time (for example
            an unknown month name). The components may carry their own
            "precision", overriding the template's.
        precision: Precision asserted by the expression.
    """

    name: str
    pattern: Pattern[str]
    extractor: Callable[[re.Match[str]], Components | None]
    precision: Precision


# Month name mappings
MONTH_LOOKUP: dict[str, int] = {}
for _number, _name in enumerate(MONTH_NAMES, start=1):
    MONTH_LOOKUP[_name.lower()] = _number
    MONTH_LOOKUP[_name[:3].lower()] = _number
MONTH_LOOKUP["sept"] = 9


def _month_to_int(month_str: str) -> int | None:
    """Convert month name to integer (1-12)."""
    return MONTH_LOOKUP.get(month_str.lower())


# Signed year with optional month and day: -100, 1985-01, 1985-01-01
_ISO_PATTERN = re.compile(
    r"^([+-]?\d+)(?:-(\d{1,2})(?:-(\d{1,2}))?)?$",
    re.ASCII,
)


def _extract_iso(match: re.Match[str]) -> Components | None:
    """Extract components from a numeric date.

    A zero month or day is unspecified: it is left out and the
    precision is lowered to match.
    """
    components: Components = {"year": int(match.group(1)), "precision": Precision.YEAR}
    month = int(match.group(2)) if match.group(2) else 0
    day = int(match.group(3)) if match.group(3) else 0
    if month:
        components["month"] = month
        components["precision"] = Precision.MONTH
        if day:
            components["day"] = day
            components["precision"] = Precision.DAY
    return components


# 15 January 1850, 15. jan 1850
_DAY_MONTH_YEAR_PATTERN = re.compile(r"^(\d{1,2})\.?\s+([a-z]+)\.?,?\s+(\d+)$")


def _extract_day_month_year(match: re.Match[str]) -> Components | None:
    month = _month_to_int(match.group(2))
    if month is None:
        return None
    return {"year": int(match.group(3)), "month": month, "day": int(match.group(1))}


# January 15, 1850
_MONTH_DAY_YEAR_PATTERN = re.compile(r"^([a-z]+)\.?\s+(\d{1,2}),?\s+(\d+)$")


def _extract_month_day_year(match: re.Match[str]) -> Components | None:
    month = _month_to_int(match.group(1))
    if month is None:
        return None
    return {"year": int(match.group(3)), "month": month, "day": int(match.group(2))}


# January 1850
_MONTH_YEAR_PATTERN = re.compile(r"^([a-z]+)\.?,?\s+(\d+)$")


def _extract_month_year(match: re.Match[str]) -> Components | None:
    month = _month_to_int(match.group(1))
    if month is None:
        return None
    return {"year": int(match.group(2)), "month": month}


# 1980s
_DECADE_PATTERN = re.compile(r"^(\d*0)'?s$")


def _extract_decade(match: re.Match[str]) -> Components | None:
    return {"year": int(match.group(1))}


# 13th century, 13. century
_CENTURY_PATTERN = re.compile(r"^(\d+)(?:st|nd|rd|th|\.)?\s+century$")

# 2nd millennium
_MILLENNIUM_PATTERN = re.compile(r"^(\d+)(?:st|nd|rd|th|\.)?\s+millenni(?:um|a)$")


def _first_year_extractor(length: int) -> Callable[[re.Match[str]], Components | None]:
    """Create an extractor mapping the n-th period to its first year."""

    def extract(match: re.Match[str]) -> Components | None:
        number = int(match.group(1))
        if number < 1:
            return None
        return {"year": (number - 1) * length + 1}

    return extract


# 5 million years ago, in 13 billion years, 10,000 years ago
_DEEP_TIME_PATTERN = re.compile(
    r"^(in\s+)?([\d,]+(?:\.\d+)?)\s+(?:(thousand|million|billion)\s+)?years?(\s+ago)?$"
)

_DEEP_TIME_UNITS: dict[str | None, tuple[int, Precision]] = {
    None: (1, Precision.KY10),
    "thousand": (10**3, Precision.KY),
    "million": (10**6, Precision.MY),
    "billion": (10**9, Precision.GY),
}


def _extract_deep_time(match: re.Match[str]) -> Components | None:
    future, amount, unit, past = match.groups()
    if future and past:
        return None
    try:
        number = Decimal(amount.replace(",", ""))
    except InvalidOperation:
        return None

    multiplier, precision = _DEEP_TIME_UNITS[unit]
    years = int(number * multiplier)
    if unit is None and years < Precision.KY10.years:
        # Plain year counts below ten thousand are not deep time
        return None
    return {"year": -years if past else years, "precision": precision}


DATE_TEMPLATES: list[FormatTemplate] = [
    FormatTemplate("iso_date", _ISO_PATTERN, _extract_iso, Precision.DAY),
    FormatTemplate(
        "day_month_year", _DAY_MONTH_YEAR_PATTERN, _extract_day_month_year, Precision.DAY
    ),
    FormatTemplate(
        "month_day_year", _MONTH_DAY_YEAR_PATTERN, _extract_month_day_year, Precision.DAY
    ),
    FormatTemplate("month_year", _MONTH_YEAR_PATTERN, _extract_month_year, Precision.MONTH),
    FormatTemplate("decade", _DECADE_PATTERN, _extract_decade, Precision.YEAR10),
    FormatTemplate(
        "century", _CENTURY_PATTERN, _first_year_extractor(100), Precision.YEAR100
    ),
    FormatTemplate(
        "millennium", _MILLENNIUM_PATTERN, _first_year_extractor(1000), Precision.KY
    ),
]

# Templates that carry their own sign and ignore era markers
DEEP_TIME_TEMPLATES: list[FormatTemplate] = [
    FormatTemplate("deep_time", _DEEP_TIME_PATTERN, _extract_deep_time, Precision.GY),
]


def match_templates(
    text: str, templates: list[FormatTemplate]
) -> tuple[FormatTemplate, Components] | None:
    """Return the first template matching text with its components.

    Args:
        text: Lowercased, stripped text.
        templates: Templates to try, in order.

    Returns:
        Tuple of (template, components), or None if nothing matched.
    """
    for template in templates:
        match = template.pattern.match(text)
        if not match:
            continue
        components = template.extractor(match)
        if components is not None:
            return template, components
    return None


__all__ = [
    "FormatTemplate",
    "MONTH_LOOKUP",
    "DATE_TEMPLATES",
    "DEEP_TIME_TEMPLATES",
    "match_templates",
]
