"""Time value formatting.

This module provides functions and classes for converting time values
to string representations:
    - Extended ISO 8601 timestamps (the wire format)
    - Precision-aware display text

Functions:
    format_iso8601: Format a TimeValue as an extended ISO 8601 timestamp.
    format_timestamp: Format raw date and time fields as a timestamp.
    normalize_iso8601: Bring a timestamp into the text parser's form.

Classes:
    TextFormatter: Render (precision, year, month, day) as display text.

Examples:
    >>> from temporis import TimeValue
    >>> from temporis.format import format_iso8601

    >>> format_iso8601(TimeValue("1985-01-01"))
    '+00000001985-01-01T00:00:00Z'
"""

from __future__ import annotations

from temporis.format.iso8601 import format_iso8601, format_timestamp, normalize_iso8601
from temporis.format.text import TextFormatter, ordinal

__all__: list[str] = [
    # ISO 8601
    "format_iso8601",
    "format_timestamp",
    "normalize_iso8601",
    # Display text
    "TextFormatter",
    "ordinal",
]
