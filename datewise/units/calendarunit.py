"""CalendarUnit enumeration for calendar arithmetic.

This module provides the closed CalendarUnit enum naming the units a
CalendarDelta can carry and a relative description can emit, from
seconds up to years.
"""

from __future__ import annotations

from enum import Enum

from datewise.errors import ValidationError


class CalendarUnit(Enum):
    """Calendar units for arithmetic and relative descriptions.

    Members are declared most-significant first; iterating the enum
    yields YEAR, MONTH, WEEK, DAY, HOUR, MINUTE, SECOND.

    YEAR and MONTH have no fixed length in seconds, so they are applied
    to calendar fields. WEEK and DAY are applied to the wall-clock date.
    HOUR, MINUTE and SECOND are exact elapsed time.

    Examples:
        >>> CalendarUnit.HOUR.to_seconds()
        3600

        >>> CalendarUnit.MONTH.to_seconds() is None
        True

        >>> CalendarUnit.from_name("weeks")
        <CalendarUnit.WEEK: 'week'>
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @classmethod
    def from_name(cls, name: str) -> CalendarUnit:
        """Resolve a unit name such as "month" or "days".

        Names are matched case-insensitively and a trailing plural "s"
        is accepted.

        Args:
            name: The unit name.

        Returns:
            The matching CalendarUnit.

        Raises:
            ValidationError: If the name does not name a calendar unit.
        """
        if isinstance(name, CalendarUnit):
            return name
        if not isinstance(name, str):
            raise ValidationError(
                f"unit name must be a string, got {type(name).__name__}"
            )

        key = name.strip().lower()
        if key.endswith("s") and key[:-1] in _BY_NAME:
            key = key[:-1]
        try:
            return _BY_NAME[key]
        except KeyError:
            raise ValidationError(
                f"unknown calendar unit {name!r}; expected one of "
                f"{', '.join(unit.value for unit in cls)}"
            ) from None

    @property
    def significance(self) -> int:
        """Rank of the unit, 0 for YEAR up to 6 for SECOND."""
        return _ORDER.index(self)

    @property
    def is_time_unit(self) -> bool:
        """Return True for units applied as exact elapsed seconds."""
        return self in (CalendarUnit.HOUR, CalendarUnit.MINUTE, CalendarUnit.SECOND)

    def to_seconds(self) -> int | None:
        """Convert one unit to seconds.

        Returns:
            The number of seconds in one unit, or None for variable-length
            units (MONTH and YEAR).
        """
        conversions: dict[CalendarUnit, int | None] = {
            CalendarUnit.SECOND: 1,
            CalendarUnit.MINUTE: 60,
            CalendarUnit.HOUR: 3600,
            CalendarUnit.DAY: 86400,
            CalendarUnit.WEEK: 604800,
            CalendarUnit.MONTH: None,  # Variable length
            CalendarUnit.YEAR: None,  # Variable length (leap years)
        }
        return conversions[self]


_ORDER: tuple[CalendarUnit, ...] = tuple(CalendarUnit)
_BY_NAME: dict[str, CalendarUnit] = {unit.value: unit for unit in CalendarUnit}


__all__ = ["CalendarUnit"]
