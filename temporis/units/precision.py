"""Precision enumeration for time values.

This module provides the Precision enum, the ordered scale of
granularities at which a point in time can be asserted to be known.
"""

from __future__ import annotations

from enum import IntEnum


class Precision(IntEnum):
    """Granularity of a time value, coarsest first.

    The integer codes are part of the serialized form and order the
    levels: a larger code is a finer precision. A Precision carries no
    unit conversion of its own; its meaning is ordinal and is used by
    the text formatter to decide how much of a date to render.

    Codes outside this enum are accepted wherever a precision is stored
    and are forwarded untouched to the formatter.

    Examples:
        >>> Precision.DAY
        <Precision.DAY: 11>

        >>> Precision.YEAR100 < Precision.YEAR
        True

        >>> Precision.from_code(14)
        <Precision.SECOND: 14>
    """

    GY = 0  # Gigayear
    MY100 = 1  # 100 Megayears
    MY10 = 2  # 10 Megayears
    MY = 3  # Megayear
    KY100 = 4  # 100 Kiloyears
    KY10 = 5  # 10 Kiloyears
    KY = 6  # Kiloyear
    YEAR100 = 7  # 100 years
    YEAR10 = 8  # 10 years
    YEAR = 9
    MONTH = 10
    DAY = 11
    HOUR = 12
    MINUTE = 13
    SECOND = 14

    @classmethod
    def from_code(cls, code: object) -> Precision | None:
        """Return the Precision for an integer code, or None if unknown.

        Args:
            code: A candidate precision code.

        Returns:
            The matching Precision, or None when code is not one of the
            fifteen defined levels.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def years(self) -> int | None:
        """Return the span in years of a year-or-coarser precision.

        Returns:
            10**9 for GY down to 1 for YEAR, or None for MONTH and finer.

        Examples:
            >>> Precision.KY10.years
            10000
            >>> Precision.DAY.years is None
            True
        """
        if self > Precision.YEAR:
            return None
        return 10 ** (Precision.YEAR - self)


__all__ = ["Precision"]
