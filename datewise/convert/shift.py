"""Wall-clock shifting between zones.

These helpers move an Instant by a zone's UTC offset, so that a value
produced in one zone reads with another zone's wall clock when it is
decomposed as UTC. The results are different instants, not the same
instant viewed elsewhere; use decompose() with a zone for that.

Examples:
    >>> i = Instant.from_fields(2024, 1, 15, 12, timezone="UTC")
    >>> shift_to_timezone(i, "Asia/Tokyo").fields("UTC").hour
    21
"""

from __future__ import annotations

from datewise._internal.constants import MILLIS_PER_SECOND
from datewise.core.instant import Instant
from datewise.units.timezone import TimeZone, TimeZoneLike, resolve_timezone


def _shift(instant: Instant, zone: TimeZone, sign: int) -> Instant:
    offset = zone.utc_offset(instant.millis // MILLIS_PER_SECOND)
    return Instant.from_millis(instant.millis + sign * offset * MILLIS_PER_SECOND)


def shift_to_utc(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    """Add the zone's offset (the system zone by default) to the instant."""
    return _shift(instant, resolve_timezone(timezone), 1)


def shift_from_utc(instant: Instant, timezone: TimeZoneLike = None) -> Instant:
    """Subtract the zone's offset (the system zone by default) from the instant."""
    return _shift(instant, resolve_timezone(timezone), -1)


def shift_to_timezone(instant: Instant, timezone: TimeZoneLike) -> Instant:
    """Add the named zone's offset to the instant.

    Raises:
        UnknownTimeZone: If the zone cannot be resolved. Nothing falls
            back to a default zone.
    """
    if timezone is None:
        raise TypeError("shift_to_timezone() requires a zone")
    return _shift(instant, resolve_timezone(timezone), 1)


__all__ = ["shift_to_utc", "shift_from_utc", "shift_to_timezone"]
