"""Comparison operations for Instants.

This module provides explicit comparison functions for Instants. They
serve as the canonical implementation with clear semantics for the
day-granularity comparisons that depend on a zone.

Comparison Rules:
    - Ordering and plain equality follow the absolute millisecond
      offset and never depend on a zone.
    - Day-granularity equality (ignore_time=True) compares the
      (year, month, day) of each side, each decomposed under its own
      zone. No zone normalization happens between the two sides.
    - Elapsed-unit helpers (minutes_after, ...) truncate toward zero.

Supported Operations:
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal, greater_than, greater_equal: Test ordering
    - compare: Return -1, 0, or 1
    - earliest, latest: Find extremes
    - minutes/hours/days after/before: Whole elapsed units
    - is_in_time_range: Time-of-day window test
"""

from __future__ import annotations

import logging

from datewise._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datewise.core.instant import Instant
from datewise.core.resolver import decompose
from datewise.errors import ParseError
from datewise.units.timezone import TimeZone, TimeZoneLike

logger = logging.getLogger(__name__)


def _check_instants(*values: object) -> None:
    for value in values:
        if not isinstance(value, Instant):
            raise TypeError(f"expected Instant, got {type(value).__name__}")


def equal(
    left: Instant,
    right: Instant,
    *,
    ignore_time: bool = False,
    timezone: TimeZoneLike = None,
    other_timezone: TimeZoneLike = None,
) -> bool:
    """Test equality between two Instants.

    Args:
        left: First instant.
        right: Second instant.
        ignore_time: Compare only the calendar day of each side.
        timezone: Zone to decompose left under when ignore_time is set.
        other_timezone: Zone to decompose right under; defaults to the
            zone used for left.

    Returns:
        True if the instants are equal at the requested granularity.

    Raises:
        TypeError: If either value is not an Instant.

    Examples:
        >>> morning = Instant.from_fields(2024, 1, 15, 8, timezone="UTC")
        >>> evening = Instant.from_fields(2024, 1, 15, 20, timezone="UTC")
        >>> equal(morning, evening)
        False
        >>> equal(morning, evening, ignore_time=True, timezone="UTC")
        True
    """
    _check_instants(left, right)
    if not ignore_time:
        return left.millis == right.millis
    right_zone = timezone if other_timezone is None else other_timezone
    return decompose(left, timezone).ymd == decompose(right, right_zone).ymd


def not_equal(left: Instant, right: Instant, **options: object) -> bool:
    """Test inequality; accepts the same options as equal()."""
    return not equal(left, right, **options)


def less_than(left: Instant, right: Instant) -> bool:
    """Test whether left is strictly earlier than right."""
    _check_instants(left, right)
    return left.millis < right.millis


def less_equal(left: Instant, right: Instant) -> bool:
    _check_instants(left, right)
    return left.millis <= right.millis


def greater_than(left: Instant, right: Instant) -> bool:
    """Test whether left is strictly later than right."""
    _check_instants(left, right)
    return left.millis > right.millis


def greater_equal(left: Instant, right: Instant) -> bool:
    _check_instants(left, right)
    return left.millis >= right.millis


def compare(left: Instant, right: Instant) -> int:
    """Compare two Instants.

    Returns:
        -1 if left is earlier, 0 if equal, 1 if left is later.

    Examples:
        >>> compare(Instant.from_timestamp(1), Instant.from_timestamp(2))
        -1
    """
    _check_instants(left, right)
    if left.millis < right.millis:
        return -1
    if left.millis > right.millis:
        return 1
    return 0


def earliest(*values: Instant) -> Instant:
    """Return the earliest of one or more Instants.

    Raises:
        ValueError: If no values are given.
    """
    if not values:
        raise ValueError("earliest() requires at least one argument")
    _check_instants(*values)
    return min(values, key=lambda instant: instant.millis)


def latest(*values: Instant) -> Instant:
    """Return the latest of one or more Instants.

    Raises:
        ValueError: If no values are given.
    """
    if not values:
        raise ValueError("latest() requires at least one argument")
    _check_instants(*values)
    return max(values, key=lambda instant: instant.millis)


def _whole_units(elapsed_seconds: float, unit_seconds: int) -> int:
    return int(elapsed_seconds / unit_seconds)


def minutes_after(instant: Instant, other: Instant) -> int:
    """Return whole minutes from other to instant, truncated toward zero.

    Examples:
        >>> start = Instant.from_timestamp(0)
        >>> minutes_after(start + 150, start)
        2
        >>> minutes_after(start, start + 150)
        -2
    """
    return _whole_units(instant - other, SECONDS_PER_MINUTE)


def minutes_before(instant: Instant, other: Instant) -> int:
    """Return whole minutes from instant to other, truncated toward zero."""
    return _whole_units(other - instant, SECONDS_PER_MINUTE)


def hours_after(instant: Instant, other: Instant) -> int:
    return _whole_units(instant - other, SECONDS_PER_HOUR)


def hours_before(instant: Instant, other: Instant) -> int:
    return _whole_units(other - instant, SECONDS_PER_HOUR)


def days_after(instant: Instant, other: Instant) -> int:
    """Return whole 24-hour days from other to instant."""
    return _whole_units(instant - other, SECONDS_PER_DAY)


def days_before(instant: Instant, other: Instant) -> int:
    return _whole_units(other - instant, SECONDS_PER_DAY)


def is_in_time_range(
    instant: Instant,
    min_time: str,
    max_time: str,
    fmt: str = "HH:mm",
    timezone: TimeZoneLike = None,
) -> bool:
    """Test whether an instant's time of day lies strictly inside a window.

    The bounds are times of day parsed with a custom pattern. The
    instant's time of day is read in the given zone.

    Args:
        instant: The instant to test.
        min_time: Lower bound, exclusive.
        max_time: Upper bound, exclusive.
        fmt: Pattern the bounds are written in.
        timezone: Zone whose wall clock the instant is read in.

    Returns:
        True if min_time < time of day < max_time. False when either
        bound cannot be parsed.

    Examples:
        >>> noon = Instant.from_fields(2024, 1, 15, 12, timezone="UTC")
        >>> is_in_time_range(noon, "09:00", "17:30", timezone="UTC")
        True
        >>> is_in_time_range(noon, "12:00", "17:30", timezone="UTC")
        False
        >>> is_in_time_range(noon, "nine", "17:30", timezone="UTC")
        False
    """
    from datewise.format.pattern import parse_pattern

    try:
        lower = parse_pattern(min_time, fmt, TimeZone.utc())
        upper = parse_pattern(max_time, fmt, TimeZone.utc())
    except ParseError:
        logger.debug("time range bounds %r, %r do not match %r", min_time, max_time, fmt)
        return False

    fields = decompose(instant, timezone)
    time_of_day = (
        fields.hour * MILLIS_PER_HOUR
        + fields.minute * MILLIS_PER_MINUTE
        + fields.second * MILLIS_PER_SECOND
        + fields.millisecond
    )
    return lower.millis % MILLIS_PER_DAY < time_of_day < upper.millis % MILLIS_PER_DAY


__all__ = [
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    "earliest",
    "latest",
    "minutes_after",
    "minutes_before",
    "hours_after",
    "hours_before",
    "days_after",
    "days_before",
    "is_in_time_range",
]
