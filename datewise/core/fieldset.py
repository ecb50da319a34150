"""FieldSet: the calendar fields of an instant under a time zone."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from datewise.units.era import Era
from datewise.units.timezone import TimeZone


@dataclass
class FieldSet:
    """Calendar fields decomposed from an Instant under a TimeZone.

    The wall-clock fields (year through millisecond) are the ones
    recomposition reads. They may be set outside their natural ranges;
    recomposition carries the overflow into the next significant field.

    The week-based fields and era are derived during decomposition and
    are ignored by recomposition.

    utc_offset records the offset the fields were decomposed with. It
    lets recomposition pick the same side of a repeated (DST fall-back)
    hour, so decomposing and recomposing returns the original instant.

    Examples:
        >>> from datewise.core.resolver import decompose
        >>> fields = decompose(Instant.from_timestamp(0), TimeZone.utc())
        >>> (fields.year, fields.month, fields.day, fields.weekday)
        (1970, 1, 1, 5)
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    weekday: int = 0
    week_of_year: int = 0
    week_of_month: int = 0
    weekday_ordinal: int = 0
    era: Era = Era.CE
    timezone: TimeZone | None = None
    utc_offset: int | None = None

    def copy(self) -> FieldSet:
        """Return an independent copy of these fields."""
        return dataclasses.replace(self)

    def replace(self, **changes: object) -> FieldSet:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    @property
    def wall_clock(self) -> tuple[int, int, int, int, int, int, int]:
        """Return (year, month, day, hour, minute, second, millisecond)."""
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
        )

    @property
    def ymd(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return (self.year, self.month, self.day)


__all__ = ["FieldSet"]
