"""Calendar arithmetic on Instants.

This module provides the canonical implementation of calendar-aware
addition. The operators on Instant delegate here.

Addition decomposes the instant under a zone, adds the calendar part of
the delta to the wall-clock fields and recomposes:

    - years and months move the month field; the day is NOT clamped to
      the target month, it carries into the following month
    - weeks and days move the day field, keeping the wall time across
      DST transitions
    - hours, minutes and seconds are exact elapsed time

Examples:
    2024-02-29 + 1 year  -> 2025-03-01
    2024-01-31 + 1 month -> 2024-03-02
    2023-01-31 + 1 month -> 2023-03-03
"""

from __future__ import annotations

from typing import Mapping

from datewise._internal.constants import (
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from datewise._internal.calendar import ymd_to_ordinal
from datewise.core.delta import CalendarDelta, UnitKey
from datewise.core.instant import Instant
from datewise.core.resolver import decompose, recompose
from datewise.errors import ValidationError
from datewise.units.calendarunit import CalendarUnit
from datewise.units.timezone import TimeZone, TimeZoneLike, resolve_timezone


_SETTABLE = {
    CalendarUnit.YEAR: "year",
    CalendarUnit.MONTH: "month",
    CalendarUnit.DAY: "day",
    CalendarUnit.HOUR: "hour",
    CalendarUnit.MINUTE: "minute",
    CalendarUnit.SECOND: "second",
}


def add(instant: Instant, delta: CalendarDelta, timezone: TimeZoneLike = None) -> Instant:
    """Add a CalendarDelta to an Instant.

    Args:
        instant: The starting instant.
        delta: The amounts to add; negative amounts subtract.
        timezone: The zone whose calendar the addition follows.

    Returns:
        The moved instant.

    Raises:
        TypeError: If delta is not a CalendarDelta.
        UnknownTimeZone: If the zone cannot be resolved. The default
            zone is never substituted for an unknown one.

    Examples:
        >>> start = Instant.from_fields(2024, 2, 29, timezone="UTC")
        >>> add(start, CalendarDelta(years=1), "UTC").fields("UTC").ymd
        (2025, 3, 1)
    """
    if not isinstance(delta, CalendarDelta):
        raise TypeError(f"can only add CalendarDelta to Instant, not {type(delta).__name__}")

    zone = resolve_timezone(timezone)
    return _apply(instant, delta.total_months, delta.total_days, delta.time_seconds, zone)


def subtract(instant: Instant, delta: CalendarDelta, timezone: TimeZoneLike = None) -> Instant:
    """Subtract a CalendarDelta from an Instant.

    Equivalent to adding the negated delta. Month arithmetic does not
    invert exactly:

        >>> jan31 = Instant.from_fields(2023, 1, 31, timezone="UTC")
        >>> month = CalendarDelta(months=1)
        >>> subtract(add(jan31, month, "UTC"), month, "UTC").fields("UTC").ymd
        (2023, 2, 3)
    """
    if not isinstance(delta, CalendarDelta):
        raise TypeError(f"can only subtract CalendarDelta from Instant, not {type(delta).__name__}")
    return add(instant, -delta, timezone)


def _apply(instant: Instant, months: int, days: int, seconds: int, zone: TimeZone) -> Instant:
    result = instant
    if months or days:
        fields = decompose(instant, zone)
        fields.month += months
        fields.day += days
        result = recompose(fields, zone)
    if seconds:
        result = Instant.from_millis(result.millis + seconds * MILLIS_PER_SECOND)
    return result


def add_unit(
    instant: Instant,
    unit: UnitKey,
    value: int,
    timezone: TimeZoneLike = None,
) -> Instant:
    """Add value of a single named unit.

    Raises:
        ValidationError: If the unit name is not a calendar unit.

    Examples:
        >>> i = Instant.from_fields(2024, 1, 15, timezone="UTC")
        >>> add_unit(i, "weeks", 2, "UTC").fields("UTC").ymd
        (2024, 1, 29)
    """
    return add(instant, CalendarDelta.of(unit, value), timezone)


def add_mapping(
    instant: Instant,
    amounts: Mapping[UnitKey, int],
    timezone: TimeZoneLike = None,
) -> Instant:
    """Add a {unit name: amount} mapping; an empty mapping is a no-op."""
    if not amounts:
        return instant
    return add(instant, CalendarDelta.from_mapping(amounts), timezone)


def add_years(instant: Instant, years: int, timezone: TimeZoneLike = None) -> Instant:
    return add(instant, CalendarDelta(years=years), timezone)


def add_months(instant: Instant, months: int, timezone: TimeZoneLike = None) -> Instant:
    return add(instant, CalendarDelta(months=months), timezone)


def add_weeks(instant: Instant, weeks: int, timezone: TimeZoneLike = None) -> Instant:
    return add(instant, CalendarDelta(weeks=weeks), timezone)


def add_days(instant: Instant, days: int, timezone: TimeZoneLike = None) -> Instant:
    return add(instant, CalendarDelta(days=days), timezone)


def add_hours(instant: Instant, hours: int, timezone: TimeZoneLike = None) -> Instant:
    return add(instant, CalendarDelta(hours=hours), timezone)


def add_minutes(instant: Instant, minutes: int, timezone: TimeZoneLike = None) -> Instant:
    return add(instant, CalendarDelta(minutes=minutes), timezone)


def add_seconds(instant: Instant, seconds: int, timezone: TimeZoneLike = None) -> Instant:
    return add(instant, CalendarDelta(seconds=seconds), timezone)


def set_fields(
    instant: Instant,
    timezone: TimeZoneLike = None,
    *,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    second: int | None = None,
    millisecond: int | None = None,
) -> Instant:
    """Replace wall-clock fields and recompose.

    Each field left as None keeps the instant's own value for that
    field. Values are assigned verbatim; out-of-range values carry like
    any other recomposition (day=31 in April is 1 May).

    Args:
        instant: The instant to modify.
        timezone: The zone whose wall clock the fields describe.
        year, month, day, hour, minute, second, millisecond: New values.

    Raises:
        ValidationError: If a value is not an integer.
        UnknownTimeZone: If the zone cannot be resolved.

    Examples:
        >>> i = Instant.from_fields(2024, 1, 15, 14, 30, 45, timezone="UTC")
        >>> set_fields(i, "UTC", hour=9).fields("UTC").wall_clock
        (2024, 1, 15, 9, 30, 45, 0)
    """
    changes = {
        name: value
        for name, value in (
            ("year", year),
            ("month", month),
            ("day", day),
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("millisecond", millisecond),
        )
        if value is not None
    }
    for name, value in changes.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")

    zone = resolve_timezone(timezone)
    if not changes:
        return instant
    fields = decompose(instant, zone).replace(**changes)
    return recompose(fields, zone)


def set_field(
    instant: Instant,
    unit: UnitKey,
    value: int,
    timezone: TimeZoneLike = None,
) -> Instant:
    """Replace a single named field.

    Raises:
        ValidationError: If the name is not a settable unit (weeks are
            not a wall-clock field).
    """
    return set_mapping(instant, {unit: value}, timezone)


def set_mapping(
    instant: Instant,
    values: Mapping[UnitKey, int],
    timezone: TimeZoneLike = None,
) -> Instant:
    """Replace fields from a {unit name: value} mapping.

    An empty mapping returns the instant unchanged.

    Examples:
        >>> i = Instant.from_fields(2024, 1, 15, timezone="UTC")
        >>> set_mapping(i, {"month": 6, "day": 1}, "UTC").fields("UTC").ymd
        (2024, 6, 1)
    """
    if not values:
        return instant
    changes: dict[str, int] = {}
    for key, value in values.items():
        unit = CalendarUnit.from_name(key)
        if unit not in _SETTABLE:
            raise ValidationError(f"{unit.value} is not a settable field")
        changes[_SETTABLE[unit]] = value
    return set_fields(instant, timezone, **changes)


def calendar_difference(
    start: Instant,
    end: Instant,
    timezone: TimeZoneLike = None,
) -> CalendarDelta:
    """Return the calendar difference from start to end.

    The difference is measured in whole calendar units, not by dividing
    elapsed seconds: the largest number of months that fits between the
    two instants is split into years and months, then the largest number
    of days into weeks and days, and the remaining elapsed time into
    hours, minutes and seconds. Milliseconds are dropped.

    Every unit is present in the result. All amounts share the sign of
    end - start; a past end is measured from the earlier instant so
    that both directions give the same magnitudes.

    Examples:
        >>> a = Instant.from_fields(2024, 1, 15, 10, timezone="UTC")
        >>> b = Instant.from_fields(2025, 3, 20, 12, 30, timezone="UTC")
        >>> calendar_difference(a, b, "UTC")
        CalendarDelta(years=1, months=2, weeks=0, days=5, hours=2, minutes=30, seconds=0)
    """
    zone = resolve_timezone(timezone)
    sign = 1 if end >= start else -1
    earlier, later = (start, end) if sign > 0 else (end, start)

    first = decompose(earlier, zone)
    last = decompose(later, zone)

    months = (last.year - first.year) * 12 + (last.month - first.month)
    while months > 0 and _apply(earlier, months, 0, 0, zone) > later:
        months -= 1
    anchor = _apply(earlier, months, 0, 0, zone)

    anchor_fields = decompose(anchor, zone)
    days = max(ymd_to_ordinal(*last.ymd) - ymd_to_ordinal(*anchor_fields.ymd), 0)
    while days > 0 and _apply(anchor, 0, days, 0, zone) > later:
        days -= 1
    anchor = _apply(anchor, 0, days, 0, zone)

    years, months = divmod(months, 12)
    weeks, days = divmod(days, 7)
    hours, rest = divmod(later.millis - anchor.millis, MILLIS_PER_HOUR)
    minutes, rest = divmod(rest, MILLIS_PER_MINUTE)
    seconds = rest // MILLIS_PER_SECOND

    return CalendarDelta(
        years=sign * years,
        months=sign * months,
        weeks=sign * weeks,
        days=sign * days,
        hours=sign * hours,
        minutes=sign * minutes,
        seconds=sign * seconds,
    )


__all__ = [
    "add",
    "subtract",
    "add_unit",
    "add_mapping",
    "add_years",
    "add_months",
    "add_weeks",
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "set_fields",
    "set_field",
    "set_mapping",
    "calendar_difference",
]
