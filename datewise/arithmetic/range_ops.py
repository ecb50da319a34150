"""Range queries: calendar boundaries and day classification.

This module provides boundary computations built on the field resolver
and calendar arithmetic:
    - start_of_day / end_of_day, start_of_week / end_of_week,
      start_of_month / end_of_month, start_of_year / end_of_year
    - is_weekend / is_weekday, is_same_week
    - is_today / is_tomorrow / is_yesterday / is_this_week
    - today / yesterday / tomorrow
    - is_leap_year, days_in_month, days_in_month_of

Every boundary is taken in the instant's wall clock under the given
zone. Starts are at 00:00:00.000 and ends at 23:59:59.999.
"""

from __future__ import annotations

from datewise._internal.calendar import days_in_month, is_leap_year
from datewise._internal.constants import (
    FIRST_WEEKDAY,
    LAST_WEEKDAY,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)
from datewise._internal.decorators import superseded_by
from datewise.arithmetic.comparisons import equal
from datewise.arithmetic.ops import add_days, set_fields
from datewise.core.fieldset import FieldSet
from datewise.core.instant import Instant
from datewise.core.resolver import decompose, recompose
from datewise.units.timezone import TimeZoneLike, resolve_timezone


def _at_boundary(fields: FieldSet, end: bool) -> Instant:
    if end:
        fields.hour, fields.minute, fields.second, fields.millisecond = 23, 59, 59, 999
    else:
        fields.hour, fields.minute, fields.second, fields.millisecond = 0, 0, 0, 0
    return recompose(fields)


def days_in_month_of(instant: Instant, timezone: TimeZoneLike = None) -> int:
    """Return the number of days in the instant's month.

    Examples:
        >>> days_in_month_of(Instant.from_fields(2024, 2, 10, timezone="UTC"), "UTC")
        29
    """
    fields = decompose(instant, timezone)
    return days_in_month(fields.year, fields.month)


def start_of_day(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    """Return midnight at the start of the instant's day."""
    return set_fields(instant, timezone, hour=0, minute=0, second=0, millisecond=0)


def end_of_day(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    """Return the last millisecond of the instant's day."""
    return set_fields(instant, timezone, hour=23, minute=59, second=59, millisecond=999)


def start_of_month(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    return _at_boundary(decompose(instant, timezone).replace(day=1), end=False)


def end_of_month(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    """Return the last millisecond of the instant's month.

    Examples:
        >>> i = Instant.from_fields(2023, 2, 10, timezone="UTC")
        >>> end_of_month(i, "UTC").fields("UTC").wall_clock
        (2023, 2, 28, 23, 59, 59, 999)
    """
    fields = decompose(instant, timezone)
    fields.day = days_in_month(fields.year, fields.month)
    return _at_boundary(fields, end=True)


def start_of_year(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    return _at_boundary(decompose(instant, timezone).replace(month=1, day=1), end=False)


def end_of_year(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    return _at_boundary(decompose(instant, timezone).replace(month=12, day=31), end=True)


def start_of_week(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    """Return midnight at the start of the instant's week.

    The instant is rolled back (weekday - FIRST_WEEKDAY) days, so the
    result always falls on FIRST_WEEKDAY (Sunday).

    Examples:
        >>> wednesday = Instant.from_fields(2024, 1, 17, 15, timezone="UTC")
        >>> start_of_week(wednesday, "UTC").fields("UTC").wall_clock
        (2024, 1, 14, 0, 0, 0, 0)
    """
    fields = decompose(instant, timezone)
    fields.day -= fields.weekday - FIRST_WEEKDAY
    return _at_boundary(fields, end=False)


def end_of_week(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    """Return the last millisecond of the instant's week (Saturday)."""
    fields = decompose(instant, timezone)
    fields.day += LAST_WEEKDAY - fields.weekday
    return _at_boundary(fields, end=True)


@superseded_by("start_of_week(instant).fields().day")
def first_day_of_week(instant: Instant, timezone: TimeZoneLike = None) -> int:
    """Return the day of month on which the instant's week starts."""
    return decompose(start_of_week(instant, timezone), timezone).day


@superseded_by("end_of_week(instant).fields().day")
def last_day_of_week(instant: Instant, timezone: TimeZoneLike = None) -> int:
    """Return the day of month on which the instant's week ends."""
    return decompose(end_of_week(instant, timezone), timezone).day


def is_weekend(instant: Instant, timezone: TimeZoneLike = None) -> bool:
    """Return True on the first and last weekday values (Sunday, Saturday)."""
    return decompose(instant, timezone).weekday in (FIRST_WEEKDAY, LAST_WEEKDAY)


def is_weekday(instant: Instant, timezone: TimeZoneLike = None) -> bool:
    return not is_weekend(instant, timezone)


def is_same_week(left: Instant, right: Instant, timezone: TimeZoneLike = None) -> bool:
    """Return True if both instants fall in the same week.

    Both the week-of-year numbers must match and the instants must be
    less than a week apart. 31 December and 1 January share week 1 when
    they fall in the same week, while the same week number a year apart
    does not count.
    """
    if decompose(left, timezone).week_of_year != decompose(right, timezone).week_of_year:
        return False
    return abs(left - right) < SECONDS_PER_WEEK


def is_today(
    instant: Instant,
    timezone: TimeZoneLike = None,
    *,
    now: Instant | None = None,
) -> bool:
    """Return True if the instant falls on the current day.

    Args:
        instant: The instant to test.
        timezone: The zone whose calendar day counts.
        now: The current instant; defaults to Instant.now().
    """
    current = Instant.now() if now is None else now
    return equal(instant, current, ignore_time=True, timezone=timezone)


def is_tomorrow(
    instant: Instant,
    timezone: TimeZoneLike = None,
    *,
    now: Instant | None = None,
) -> bool:
    current = Instant.now() if now is None else now
    return equal(instant, add_days(current, 1, timezone), ignore_time=True, timezone=timezone)


def is_yesterday(
    instant: Instant,
    timezone: TimeZoneLike = None,
    *,
    now: Instant | None = None,
) -> bool:
    current = Instant.now() if now is None else now
    return equal(instant, add_days(current, -1, timezone), ignore_time=True, timezone=timezone)


def is_this_week(
    instant: Instant,
    timezone: TimeZoneLike = None,
    *,
    now: Instant | None = None,
) -> bool:
    current = Instant.now() if now is None else now
    return is_same_week(instant, current, timezone)


def today(timezone: TimeZoneLike = None) -> Instant:
    """Return midnight at the start of the current day in a zone."""
    return start_of_day(Instant.now(), timezone)


def yesterday(timezone: TimeZoneLike = None) -> Instant:
    zone = resolve_timezone(timezone)
    return add_days(today(zone), -1, zone)


def tomorrow(timezone: TimeZoneLike = None) -> Instant:
    zone = resolve_timezone(timezone)
    return add_days(today(zone), 1, zone)


def nearest_hour(instant: Instant, timezone: TimeZoneLike = None) -> int:
    """Return the hour of day the instant rounds to.

    Examples:
        >>> nearest_hour(Instant.from_fields(2024, 1, 15, 14, 29, timezone="UTC"), "UTC")
        14
        >>> nearest_hour(Instant.from_fields(2024, 1, 15, 14, 30, timezone="UTC"), "UTC")
        15
    """
    return decompose(instant + 30 * SECONDS_PER_MINUTE, timezone).hour


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_month_of",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    "first_day_of_week",
    "last_day_of_week",
    "is_weekend",
    "is_weekday",
    "is_same_week",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "is_this_week",
    "today",
    "yesterday",
    "tomorrow",
    "nearest_hour",
]
