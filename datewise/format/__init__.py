"""Formatting and parsing.

This module provides functions for converting Instants to and from
string representations:
    - Fixed wire formats (ISO 8601, RSS, AltRSS) and custom patterns
    - Short / medium / long / full styles
    - Relative descriptions ("3 hours ago")

Functions:
    parse: Parse text in a DateFormat or custom pattern.
    try_parse: Like parse, returning None on failure.
    format_instant: Format an Instant in a DateFormat or custom pattern.
    to_iso_string: UTC ISO 8601 string with milliseconds.
    format_styled: Format with date and time styles.
    relative_description, format_relative: Relative descriptions.

Examples:
    >>> from datewise import Instant
    >>> from datewise.format import DateFormat, parse, format_instant

    >>> i = parse("2024-01-15T14:30:45Z", DateFormat.ISO8601)
    >>> format_instant(i, "d MMM yyyy", "UTC")
    '15 Jan 2024'
"""

from __future__ import annotations

from datewise.format.context import FormatContext
from datewise.format.dateformat import (
    Custom,
    DateFormat,
    format_instant,
    parse,
    to_iso_string,
    try_parse,
)
from datewise.format.pattern import format_pattern, parse_pattern
from datewise.format.relative import (
    ENGLISH,
    Direction,
    RelativeDescription,
    RelativeEntry,
    RelativeLabels,
    format_relative,
    relative_description,
    simple_relative_phrase,
)
from datewise.format.styles import (
    DateStyle,
    format_styled,
    to_long_date_string,
    to_long_string,
    to_long_time_string,
    to_medium_date_string,
    to_medium_string,
    to_medium_time_string,
    to_short_date_string,
    to_short_string,
    to_short_time_string,
)

__all__: list[str] = [
    "FormatContext",
    # Fixed formats
    "DateFormat",
    "Custom",
    "parse",
    "try_parse",
    "format_instant",
    "to_iso_string",
    # Patterns
    "format_pattern",
    "parse_pattern",
    # Styles
    "DateStyle",
    "format_styled",
    "to_short_string",
    "to_medium_string",
    "to_long_string",
    "to_short_date_string",
    "to_medium_date_string",
    "to_long_date_string",
    "to_short_time_string",
    "to_medium_time_string",
    "to_long_time_string",
    # Relative
    "Direction",
    "RelativeLabels",
    "ENGLISH",
    "RelativeEntry",
    "RelativeDescription",
    "relative_description",
    "format_relative",
    "simple_relative_phrase",
]
