"""Calendar units and enumerations.

This module provides:
    - CalendarUnit: The closed set of arithmetic units (YEAR ... SECOND)
    - Era: BCE/CE era designation enum
    - TimeZone: Fixed-offset, IANA and system time zone rules
"""

from __future__ import annotations

from datewise.units.calendarunit import CalendarUnit
from datewise.units.era import Era
from datewise.units.timezone import TimeZone, resolve_timezone

__all__: list[str] = [
    "CalendarUnit",
    "Era",
    "TimeZone",
    "resolve_timezone",
]
