"""Precision-aware text rendering of dates.

This module provides the TextFormatter class, which turns a precision
and a (year, month, day) triple into display text. Only as much of the
date as the precision asserts is rendered:

    DAY      29 February 2016
    MONTH    February 2016
    YEAR     2016
    YEAR10   1980s
    YEAR100  20th century
    KY       2nd millennium
    KY10     10,000 years ago
    MY       5 million years ago
    GY       13 billion years ago

Years are astronomical: year 0 is written "1 BCE", year -43 "44 BCE".
"""

from __future__ import annotations

from collections.abc import Sequence

from temporis._internal.constants import MONTH_NAMES
from temporis.units.precision import Precision

_PRECISION_TEXTS: dict[Precision, str] = {
    Precision.GY: "billion years",
    Precision.MY100: "hundred million years",
    Precision.MY10: "ten million years",
    Precision.MY: "million years",
    Precision.KY100: "hundred thousand years",
    Precision.KY10: "ten thousand years",
    Precision.KY: "millennium",
    Precision.YEAR100: "century",
    Precision.YEAR10: "decade",
    Precision.YEAR: "year",
    Precision.MONTH: "month",
    Precision.DAY: "day",
    Precision.HOUR: "hour",
    Precision.MINUTE: "minute",
    Precision.SECOND: "second",
}


def ordinal(n: int) -> str:
    """Return n with its English ordinal suffix.

    Examples:
        >>> ordinal(1), ordinal(12), ordinal(23)
        ('1st', '12th', '23rd')
    """
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _era_year(year: int) -> int:
    """Return the year as counted in its era, 1 BCE for year 0."""
    return year if year > 0 else 1 - year


class TextFormatter:
    """Render dates as English display text according to their precision.

    Attributes:
        month_names: Twelve month names, January first.
        era_suffix: Text appended to years before the common era.

    Examples:
        >>> formatter = TextFormatter()
        >>> formatter.get_text_from_date(Precision.DAY, 2016, 2, 29)
        '29 February 2016'
        >>> formatter.get_text_from_date(Precision.YEAR100, -450, 1, 1)
        '5th century BCE'
        >>> formatter.precision_text(Precision.YEAR10)
        'decade'
    """

    __slots__ = ("_month_names", "_era_suffix")

    def __init__(
        self,
        month_names: Sequence[str] = MONTH_NAMES,
        era_suffix: str = "BCE",
    ) -> None:
        if len(month_names) != 12:
            raise ValueError(f"expected 12 month names, got {len(month_names)}")
        self._month_names: tuple[str, ...] = tuple(month_names)
        self._era_suffix: str = era_suffix

    @property
    def month_names(self) -> tuple[str, ...]:
        return self._month_names

    @property
    def era_suffix(self) -> str:
        return self._era_suffix

    def precision_text(self, code: int | None) -> str:
        """Return the name of a precision level.

        Args:
            code: A precision code.

        Returns:
            The name, or "" for a code outside the precision scale.
        """
        precision = Precision.from_code(code)
        if precision is None:
            return ""
        return _PRECISION_TEXTS[precision]

    def get_text_from_date(
        self,
        precision: int | None,
        year: int | None,
        month: int,
        day: int,
    ) -> str:
        """Render a date as display text.

        Args:
            precision: The precision code. Unknown codes render as YEAR.
            year: The year, or None for an unknown time.
            month: The month.
            day: The day.

        Returns:
            The display text, or "" if year is None.
        """
        if year is None:
            return ""

        level = Precision.from_code(precision)
        if level is None:
            level = Precision.YEAR

        if level <= Precision.KY10:
            return self._deep_time(level, year)
        era_year = _era_year(year)
        if level == Precision.KY:
            return self._with_era(f"{ordinal((era_year - 1) // 1000 + 1)} millennium", year)
        if level == Precision.YEAR100:
            return self._with_era(f"{ordinal((era_year - 1) // 100 + 1)} century", year)
        if level == Precision.YEAR10:
            return self._with_era(f"{era_year // 10 * 10}s", year)

        text = self._with_era(str(era_year), year)
        if level >= Precision.MONTH:
            text = f"{self._month_name(month)} {text}"
        if level >= Precision.DAY:
            text = f"{day} {text}"
        return text

    def _month_name(self, month: int) -> str:
        if 1 <= month <= 12:
            return self._month_names[month - 1]
        return str(month)

    def _with_era(self, text: str, year: int) -> str:
        if year <= 0:
            return f"{text} {self._era_suffix}"
        return text

    @staticmethod
    def _deep_time(level: Precision, year: int) -> str:
        """Render a year at KY10 or coarser as a rounded span from now."""
        step = level.years
        magnitude = (abs(year) + step // 2) // step * step

        if step >= 10**9:
            amount = f"{magnitude // 10**9:,} billion years"
        elif step >= 10**6:
            amount = f"{magnitude // 10**6:,} million years"
        else:
            amount = f"{magnitude:,} years"

        if year < 0:
            return f"{amount} ago"
        if year > 0:
            return f"in {amount}"
        return amount


__all__ = ["TextFormatter", "ordinal"]
