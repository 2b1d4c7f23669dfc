"""Text to time inference.

This module turns free-form time expressions into raw date fields.

Public API:
    Parser: Reads text into DateComponents.
    ParserOptions: Configuration for the parser.
    parse: Parse with the default parser, returning None on failure.
    parse_strict: Parse with the default parser, raising on failure.

The grammar handles:
    - Signed numeric dates ("1985-01-01", "-100-06-15", "1985-03", "-5")
    - Named month dates ("15 January 1850", "January 15, 1850", "Jan 1850")
    - Decades, centuries and millennia ("1980s", "13th century", "2nd millennium")
    - Deep time ("5 million years ago", "in 13 billion years")
    - Era markers ("BCE", "BC", "B.C.", "CE", "AD"); n BCE is year 1 - n
    - Calendar markers ("Julian", "(Gregorian)")

Examples:
    >>> from temporis.infer import parse
    >>> parse("15 March 44 BCE Julian")
    DateComponents(year=-43, month=3, day=15, hour=None, minute=None, second=None, precision=11, calendarname='Julian')

    >>> parse("sometime") is None
    True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from temporis.core.components import DateComponents
from temporis.errors import ParseError
from temporis.infer._formats import (
    DATE_TEMPLATES,
    DEEP_TIME_TEMPLATES,
    match_templates,
)
from temporis.units.calendar import Calendar

logger = logging.getLogger(__name__)

_CALENDAR_MARKER_PATTERN = re.compile(r"(?<![a-z])\s*\(?\s*(julian|gregorian)\s*\)?$")
_ERA_SUFFIX_PATTERN = re.compile(
    r"(?<![a-z])\s*(b\.c\.e\.|b\.c\.|bce|bc|c\.e\.|ce|a\.d\.|ad)$"
)
_ERA_PREFIX_PATTERN = re.compile(r"^(a\.d\.|ad)\s+")
_BEFORE_COMMON_ERA = frozenset({"b.c.e.", "b.c.", "bce", "bc"})


@dataclass(frozen=True)
class ParserOptions:
    """Configuration for the time parser.

    Attributes:
        default_calendar: Calendar name assigned when the text names
            none. None leaves the calendar to the time value's default.

    Examples:
        >>> opts = ParserOptions(default_calendar="Julian")
        >>> Parser(opts).parse("1200").calendarname
        'Julian'
    """

    default_calendar: str | None = None


class Parser:
    """Read textual time expressions into DateComponents.

    Examples:
        >>> Parser().parse("1980s").precision
        8
    """

    __slots__ = ("_options",)

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options if options is not None else ParserOptions()

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self, text: str) -> DateComponents | None:
        """Parse text into raw date fields.

        Args:
            text: The expression to read.

        Returns:
            DateComponents with year and precision always set, or None
            if the text matches no known grammar.
        """
        remaining = text.strip().lower()
        if not remaining:
            logger.debug("Rejected empty time expression")
            return None

        calendarname = self._options.default_calendar
        match = _CALENDAR_MARKER_PATTERN.search(remaining)
        if match:
            calendarname = Calendar(match.group(1).capitalize()).value
            remaining = remaining[: match.start()].strip()

        era = None
        match = _ERA_SUFFIX_PATTERN.search(remaining)
        if match:
            era = match.group(1)
            remaining = remaining[: match.start()].strip()
        else:
            match = _ERA_PREFIX_PATTERN.match(remaining)
            if match:
                era = match.group(1)
                remaining = remaining[match.end() :].strip()

        found = None
        if era is None:
            found = match_templates(remaining, DEEP_TIME_TEMPLATES)
        if found is None:
            found = match_templates(remaining, DATE_TEMPLATES)
        if found is None:
            logger.debug("No time grammar matched %r", text)
            return None

        template, components = found
        year = components["year"]
        if era in _BEFORE_COMMON_ERA:
            # n BCE is astronomical year 1 - n; there is no year 0 BCE
            if year == 0:
                logger.debug("No year 0 before the common era in %r", text)
                return None
            year = 1 - abs(year)

        return DateComponents(
            year=year,
            month=components.get("month"),
            day=components.get("day"),
            precision=components.get("precision", template.precision),
            calendarname=calendarname,
        )


_default_parser = Parser()


def parse(text: str) -> DateComponents | None:
    """Parse text with the default parser.

    Returns:
        DateComponents, or None if the text is not a time expression.
    """
    return _default_parser.parse(text)


def parse_strict(text: str) -> DateComponents:
    """Parse text with the default parser.

    Raises:
        ParseError: If the text is not a time expression.
    """
    result = _default_parser.parse(text)
    if result is None:
        raise ParseError(f"cannot interpret {text!r} as a time")
    return result


__all__ = [
    "Parser",
    "ParserOptions",
    "parse",
    "parse_strict",
]
