"""Datewise: calendar arithmetic and relative formatting for instants.

Datewise decomposes absolute instants into calendar fields under a time
zone, adds calendar units with carry normalization, and describes
differences in words ("about 3 hours ago").

Core Types:
    Instant: Absolute point in time with millisecond precision
    FieldSet: Calendar fields of an Instant under a zone
    CalendarDelta: Signed amounts per calendar unit

Units:
    CalendarUnit: The arithmetic units (YEAR ... SECOND)
    Era: BCE/CE era designation
    TimeZone: Fixed-offset, IANA or system time zone

Functions:
    decompose, recompose: Instant <-> FieldSet
    add, subtract, set_fields: Calendar arithmetic
    parse, try_parse, format_instant: Wire formats and patterns
    format_relative, relative_description: Relative descriptions

Exceptions:
    DatewiseError: Base exception
    ValidationError: Invalid input values
    InvalidFieldCombination: Fields rejected by strict recomposition
    ParseError: Failed to parse string
    TimezoneError: Invalid zone
    UnknownTimeZone: Unresolvable zone identifier

Example:
    >>> from datewise import CalendarDelta, Instant
    >>> start = Instant.from_fields(2024, 1, 31, 9, timezone="UTC")
    >>> (start + CalendarDelta(months=1)).fields("UTC").ymd
    (2024, 3, 2)
    >>> format_relative(start, start - 5400, timezone="UTC")
    'about 1 hour ago'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datewise.core.delta import CalendarDelta
from datewise.core.fieldset import FieldSet
from datewise.core.instant import Instant
from datewise.core.resolver import decompose, recompose

# Units
from datewise.units.calendarunit import CalendarUnit
from datewise.units.era import Era
from datewise.units.timezone import TimeZone

# Exceptions
from datewise.errors import (
    DatewiseError,
    InvalidFieldCombination,
    ParseError,
    TimezoneError,
    UnknownTimeZone,
    ValidationError,
)

# Arithmetic
from datewise.arithmetic import add, calendar_difference, set_fields, subtract

# Formatting
from datewise.format import (
    DateFormat,
    FormatContext,
    format_instant,
    format_relative,
    parse,
    relative_description,
    to_iso_string,
    try_parse,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "FieldSet",
    "CalendarDelta",
    "decompose",
    "recompose",
    # Units
    "CalendarUnit",
    "Era",
    "TimeZone",
    # Exceptions
    "DatewiseError",
    "ValidationError",
    "InvalidFieldCombination",
    "ParseError",
    "TimezoneError",
    "UnknownTimeZone",
    # Arithmetic
    "add",
    "subtract",
    "set_fields",
    "calendar_difference",
    # Formatting
    "DateFormat",
    "FormatContext",
    "parse",
    "try_parse",
    "format_instant",
    "to_iso_string",
    "relative_description",
    "format_relative",
]
