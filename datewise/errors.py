"""Datewise exception hierarchy.

All Datewise-specific exceptions inherit from DatewiseError.
"""

from __future__ import annotations


class DatewiseError(Exception):
    """Base exception for all Datewise errors."""

    pass


class ValidationError(DatewiseError):
    """Invalid input values.

    Raised when an argument is out of range or otherwise unusable.

    Examples:
        - Month value outside 1-12 passed to days_in_month()
        - Unknown calendar unit name ("fortnight")
        - max_units below 1 for a relative description
    """

    pass


class InvalidFieldCombination(ValidationError):
    """Calendar fields that do not describe a real wall-clock time.

    Only raised by strict recomposition. The default recomposition
    policy carries overflowing fields into the next significant field
    (Feb 30 becomes Mar 1 or Mar 2) instead of raising.

    Examples:
        - day=30 with month=2
        - hour=24
    """

    pass


class ParseError(DatewiseError):
    """Failed to parse string representation.

    Raised when a string cannot be parsed into an Instant. No partial
    result is ever produced.

    Examples:
        - Empty input string
        - Text that does not match the requested pattern
        - Month name that is not recognised
    """

    pass


class TimezoneError(DatewiseError):
    """Invalid timezone specification."""

    pass


class UnknownTimeZone(TimezoneError):
    """Time zone identifier or abbreviation that cannot be resolved.

    Raised instead of silently substituting a default zone.

    Examples:
        - "Mars/Olympus_Mons"
        - "XYZ"
        - "GMT+99"
    """

    pass


__all__ = [
    "DatewiseError",
    "ValidationError",
    "InvalidFieldCombination",
    "ParseError",
    "TimezoneError",
    "UnknownTimeZone",
]
