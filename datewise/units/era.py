"""Era enumeration for BCE/CE designation.

This module provides the Era enum for distinguishing between
Before Common Era (BCE) and Common Era (CE) dates.
"""

from __future__ import annotations

from enum import IntEnum


class Era(IntEnum):
    """Historical era designation.

    The Era enum represents whether a date is in the Common Era (CE)
    or Before Common Era (BCE). Year 0 exists (astronomical convention)
    and is considered BCE. The integer values match the usual calendar
    era field: 0 for BCE and 1 for CE.

    Examples:
        >>> Era.for_year(2024)
        <Era.CE: 1>

        >>> Era.for_year(0).is_before_common_era
        True
    """

    BCE = 0  # Before Common Era
    CE = 1  # Common Era

    @classmethod
    def for_year(cls, year: int) -> Era:
        """Return the era of an astronomical year number."""
        return cls.CE if year >= 1 else cls.BCE

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this era is Before Common Era."""
        return self == Era.BCE

    @property
    def abbreviation(self) -> str:
        """Return the "AD"/"BC" form used in formatted dates."""
        return "AD" if self == Era.CE else "BC"


__all__ = ["Era"]
