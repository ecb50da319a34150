"""Instant class representing an absolute point in time.

This module provides the Instant class, the base value type of the
library. An Instant carries no time zone; the zone is supplied
separately to every operation that needs calendar fields.
"""

from __future__ import annotations

import time as _time
from typing import TYPE_CHECKING, overload

from datewise._internal.constants import MILLIS_PER_SECOND
from datewise.errors import ValidationError

if TYPE_CHECKING:
    from datewise.core.delta import CalendarDelta
    from datewise.core.fieldset import FieldSet
    from datewise.units.era import Era
    from datewise.units.timezone import TimeZoneLike


class Instant:
    """An absolute point in time with millisecond precision.

    Instants are stored as an integer count of milliseconds since the
    Unix epoch (1970-01-01T00:00:00Z). Two Instants are equal exactly
    when those counts are equal, and they order by that count, whatever
    zone they were built in.

    The field properties (year, month, ..., era) decompose the instant
    under the default zone: DATEWISE_TIMEZONE when set, else the
    system zone. Use fields() to decompose under an explicit zone.

    Examples:
        >>> i = Instant.from_timestamp(1_705_329_045)
        >>> i.millis
        1705329045000
        >>> str(i)
        '2024-01-15T14:30:45.000Z'

        >>> Instant.from_fields(2024, 2, 29, timezone="UTC").timestamp
        1709164800.0

        >>> later = i + 90  # plain elapsed seconds
        >>> later - i
        90.0
    """

    __slots__ = ("_millis",)

    def __init__(self, millis: int = 0) -> None:
        """Create an Instant from milliseconds since the Unix epoch.

        Raises:
            ValidationError: If millis is not an integer.
        """
        if isinstance(millis, bool) or not isinstance(millis, int):
            raise ValidationError(f"millis must be an integer, got {type(millis).__name__}")
        self._millis: int = millis

    @classmethod
    def _from_internal(cls, millis: int) -> Instant:
        instance = object.__new__(cls)
        instance._millis = millis
        return instance

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant."""
        return cls._from_internal(_time.time_ns() // 1_000_000)

    @classmethod
    def from_timestamp(cls, seconds: int | float) -> Instant:
        """Create an Instant from seconds since the Unix epoch.

        Fractions below a millisecond are rounded to the nearest one.

        Examples:
            >>> Instant.from_timestamp(1.5).millis
            1500
        """
        if isinstance(seconds, int):
            return cls._from_internal(seconds * MILLIS_PER_SECOND)
        return cls._from_internal(round(seconds * MILLIS_PER_SECOND))

    @classmethod
    def from_millis(cls, millis: int) -> Instant:
        """Create an Instant from milliseconds since the Unix epoch."""
        return cls(millis)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        timezone: TimeZoneLike = None,
    ) -> Instant:
        """Create an Instant from wall-clock fields in a zone.

        Out-of-range fields carry into the next significant field, so
        from_fields(2023, 2, 30) is 2 March 2023.

        Raises:
            UnknownTimeZone: If the zone cannot be resolved.
        """
        from datewise.core.fieldset import FieldSet
        from datewise.core.resolver import recompose

        fields = FieldSet(year, month, day, hour, minute, second, millisecond)
        return recompose(fields, timezone)

    @property
    def millis(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return self._millis

    @property
    def timestamp(self) -> float:
        """Return seconds since the Unix epoch."""
        return self._millis / MILLIS_PER_SECOND

    def fields(self, timezone: TimeZoneLike = None) -> FieldSet:
        """Decompose this instant into calendar fields under a zone."""
        from datewise.core.resolver import decompose

        return decompose(self, timezone)

    @property
    def year(self) -> int:
        return self.fields().year

    @property
    def month(self) -> int:
        return self.fields().month

    @property
    def day(self) -> int:
        return self.fields().day

    @property
    def hour(self) -> int:
        return self.fields().hour

    @property
    def minute(self) -> int:
        return self.fields().minute

    @property
    def second(self) -> int:
        return self.fields().second

    @property
    def millisecond(self) -> int:
        """Return the millisecond of the second (0-999); zone independent."""
        return self._millis % MILLIS_PER_SECOND

    @property
    def weekday(self) -> int:
        """Return the weekday, 1 (Sunday) through 7 (Saturday)."""
        return self.fields().weekday

    @property
    def week_of_year(self) -> int:
        return self.fields().week_of_year

    @property
    def week_of_month(self) -> int:
        return self.fields().week_of_month

    @property
    def weekday_ordinal(self) -> int:
        """Return which occurrence of its weekday this day is in the month."""
        return self.fields().weekday_ordinal

    @property
    def era(self) -> Era:
        return self.fields().era

    def add(
        self,
        delta: CalendarDelta | None = None,
        *,
        timezone: TimeZoneLike = None,
        **amounts: int,
    ) -> Instant:
        """Return this instant moved by a calendar delta.

        Either pass a CalendarDelta or unit keywords (years=1, days=-2).

        Examples:
            >>> i = Instant.from_fields(2024, 1, 31, timezone="UTC")
            >>> i.add(months=1, timezone="UTC").fields("UTC").ymd
            (2024, 3, 2)
        """
        from datewise.arithmetic.ops import add
        from datewise.core.delta import CalendarDelta

        if delta is None:
            delta = CalendarDelta(**amounts)
        elif amounts:
            delta = delta + CalendarDelta(**amounts)
        return add(self, delta, timezone)

    def set(self, *, timezone: TimeZoneLike = None, **fields: int) -> Instant:
        """Return this instant with the given wall-clock fields replaced.

        Fields not named keep their current value.

        Examples:
            >>> i = Instant.from_fields(2024, 1, 15, 14, 30, timezone="UTC")
            >>> i.set(hour=9, timezone="UTC").fields("UTC").wall_clock
            (2024, 1, 15, 9, 30, 0, 0)
        """
        from datewise.arithmetic.ops import set_fields

        return set_fields(self, timezone, **fields)

    def to_string(self, fmt: object = None, context: object = None) -> str:
        """Format this instant; see datewise.format.format_instant."""
        from datewise.format.dateformat import DateFormat, format_instant

        return format_instant(self, DateFormat.ISO8601 if fmt is None else fmt, context)

    def relative_to(self, other: Instant, **options: object) -> str:
        """Describe this instant relative to other ("3 hours ago")."""
        from datewise.format.relative import format_relative

        return format_relative(other, self, **options)

    # Arithmetic operators

    @overload
    def __add__(self, other: int | float) -> Instant: ...

    @overload
    def __add__(self, other: CalendarDelta) -> Instant: ...

    def __add__(self, other: object) -> Instant:
        """Add elapsed seconds or a CalendarDelta.

        A number is an exact count of seconds. A CalendarDelta is applied
        with calendar arithmetic in the default zone.
        """
        from datewise.core.delta import CalendarDelta

        if isinstance(other, CalendarDelta):
            from datewise.arithmetic.ops import add

            return add(self, other)
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return Instant._from_internal(self._millis + round(other * MILLIS_PER_SECOND))

    def __radd__(self, other: object) -> Instant:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Instant) -> float: ...

    @overload
    def __sub__(self, other: int | float) -> Instant: ...

    @overload
    def __sub__(self, other: CalendarDelta) -> Instant: ...

    def __sub__(self, other: object) -> Instant | float:
        """Subtract seconds, a CalendarDelta, or another Instant.

        Subtracting an Instant returns the elapsed seconds between them.

        Examples:
            >>> Instant.from_timestamp(10) - Instant.from_timestamp(4)
            6.0
        """
        from datewise.core.delta import CalendarDelta

        if isinstance(other, Instant):
            return (self._millis - other._millis) / MILLIS_PER_SECOND
        if isinstance(other, CalendarDelta):
            from datewise.arithmetic.ops import add

            return add(self, -other)
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return Instant._from_internal(self._millis - round(other * MILLIS_PER_SECOND))

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis == other._millis

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis != other._millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        return hash(("Instant", self._millis))

    def __repr__(self) -> str:
        return f"Instant({str(self)!r})"

    def __str__(self) -> str:
        """Return the UTC ISO 8601 form with milliseconds."""
        from datewise.format.dateformat import to_iso_string

        return to_iso_string(self)

    def __bool__(self) -> bool:
        """Instants are always truthy, the epoch included."""
        return True


__all__ = ["Instant"]
