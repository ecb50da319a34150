"""Epoch and standard library conversion utilities.

This module provides functions for converting between Instants and
epoch-based timestamps and standard library datetimes.

Functions:
    to_unix_seconds: Convert an Instant to whole Unix seconds.
    from_unix_seconds: Create an Instant from Unix seconds.
    to_unix_millis: Convert an Instant to Unix milliseconds.
    from_unix_millis: Create an Instant from Unix milliseconds.
    to_datetime: Convert an Instant to an aware datetime.datetime.
    from_datetime: Create an Instant from a datetime.datetime.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> from datewise import Instant
    >>> from datewise.convert import to_unix_seconds, to_datetime

    >>> to_unix_seconds(Instant.from_millis(1_500))
    1

    >>> to_datetime(Instant.from_timestamp(0), "UTC").isoformat()
    '1970-01-01T00:00:00+00:00'
"""

from __future__ import annotations

import datetime as _datetime

from datewise._internal.constants import MILLIS_PER_SECOND
from datewise.core.instant import Instant
from datewise.units.timezone import TimeZoneLike, resolve_timezone

_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def to_unix_seconds(instant: Instant) -> int:
    """Convert an Instant to whole seconds since the epoch, rounding down.

    Examples:
        >>> to_unix_seconds(Instant.from_millis(-1))
        -1
    """
    return instant.millis // MILLIS_PER_SECOND


def from_unix_seconds(seconds: int | float) -> Instant:
    """Create an Instant from seconds since the epoch."""
    return Instant.from_timestamp(seconds)


def to_unix_millis(instant: Instant) -> int:
    return instant.millis


def from_unix_millis(millis: int) -> Instant:
    return Instant.from_millis(millis)


def to_datetime(instant: Instant, timezone: TimeZoneLike = None) -> _datetime.datetime:
    """Convert an Instant to an aware datetime in a zone.

    Args:
        instant: The instant to convert.
        timezone: The zone of the result's tzinfo.

    Returns:
        An aware datetime.datetime denoting the same instant.

    Raises:
        UnknownTimeZone: If the zone cannot be resolved.
        OverflowError: If the instant is outside datetime's year range.
    """
    zone = resolve_timezone(timezone)
    moment = _EPOCH + _datetime.timedelta(milliseconds=instant.millis)
    return moment.astimezone(zone.to_tzinfo())


def from_datetime(dt: _datetime.datetime, timezone: TimeZoneLike = None) -> Instant:
    """Create an Instant from a datetime.

    An aware datetime denotes its own instant. A naive datetime is read
    as a wall-clock time in the given zone. Microseconds are truncated
    to milliseconds.

    Examples:
        >>> naive = _datetime.datetime(2024, 1, 15, 14, 30)
        >>> from_datetime(naive, "UTC") == Instant.from_timestamp(1_705_329_000)
        True
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        return Instant.from_fields(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond // 1000,
            timezone=timezone,
        )
    delta = dt - _EPOCH
    millis = (delta.days * 86_400 + delta.seconds) * MILLIS_PER_SECOND + delta.microseconds // 1000
    return Instant.from_millis(millis)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_datetime",
    "from_datetime",
]
