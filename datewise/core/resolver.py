"""Conversion between Instants and calendar fields.

This module is the calendar field resolver: decompose() turns an Instant
into a FieldSet under a time zone, and recompose() turns a FieldSet back
into an Instant.

Recomposition uses carry normalization. A field outside its natural
range overflows into the next significant field, exactly like adding
the excess:

    2023-02-30 -> 2023-03-02
    2024-13-01 -> 2025-01-01
    2024-03-00 -> 2024-02-29
    25:00      -> 01:00 the next day

Pass strict=True to reject such fields with InvalidFieldCombination
instead.
"""

from __future__ import annotations

import logging

from datewise._internal.calendar import (
    carry_month,
    days_in_month,
    ordinal_to_ymd,
    week_of_month,
    week_of_year,
    weekday_from_ordinal,
    weekday_ordinal,
    ymd_to_ordinal,
)
from datewise._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    UNIX_EPOCH_ORDINAL,
)
from datewise._internal.validation import validate_fields
from datewise.core.fieldset import FieldSet
from datewise.core.instant import Instant
from datewise.units.era import Era
from datewise.units.timezone import TimeZoneLike, resolve_timezone

logger = logging.getLogger(__name__)


def decompose(instant: Instant, timezone: TimeZoneLike = None) -> FieldSet:
    """Decompose an Instant into calendar fields.

    Args:
        instant: The instant to decompose.
        timezone: The zone whose wall clock the fields describe; a
            TimeZone, an identifier, or None for the default zone.

    Returns:
        A FieldSet with the wall-clock fields, the week-based fields,
        the era and the UTC offset in effect.

    Raises:
        UnknownTimeZone: If the zone cannot be resolved.

    Examples:
        >>> fields = decompose(Instant.from_timestamp(1_705_329_045), "UTC")
        >>> fields.wall_clock
        (2024, 1, 15, 14, 30, 45, 0)
        >>> fields.weekday  # Monday
        2
    """
    zone = resolve_timezone(timezone)
    millis = instant.millis
    offset = zone.utc_offset(millis // MILLIS_PER_SECOND)

    days, millis_of_day = divmod(millis + offset * MILLIS_PER_SECOND, MILLIS_PER_DAY)
    ordinal = UNIX_EPOCH_ORDINAL + days
    year, month, day = ordinal_to_ymd(ordinal)

    hour, rest = divmod(millis_of_day, MILLIS_PER_HOUR)
    minute, rest = divmod(rest, MILLIS_PER_MINUTE)
    second, millisecond = divmod(rest, MILLIS_PER_SECOND)

    return FieldSet(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
        weekday=weekday_from_ordinal(ordinal),
        week_of_year=week_of_year(year, month, day),
        week_of_month=week_of_month(year, month, day),
        weekday_ordinal=weekday_ordinal(day),
        era=Era.for_year(year),
        timezone=zone,
        utc_offset=offset,
    )


def local_millis(fields: FieldSet) -> int:
    """Return the wall-clock time of fields as epoch milliseconds.

    The result is measured on the zone's local clock, not UTC. Fields
    outside their natural ranges are carried.
    """
    year, month = carry_month(fields.year, fields.month)
    ordinal = ymd_to_ordinal(year, month, 1) + fields.day - 1
    return (
        (ordinal - UNIX_EPOCH_ORDINAL) * MILLIS_PER_DAY
        + fields.hour * MILLIS_PER_HOUR
        + fields.minute * MILLIS_PER_MINUTE
        + fields.second * MILLIS_PER_SECOND
        + fields.millisecond
    )


def recompose(
    fields: FieldSet,
    timezone: TimeZoneLike = None,
    *,
    strict: bool = False,
) -> Instant:
    """Recompose calendar fields into an Instant.

    Only the wall-clock fields (year through millisecond) are read.

    Args:
        fields: The fields to recompose.
        timezone: The zone to interpret the wall clock in. None uses the
            zone the fields were decomposed under, else the default zone.
        strict: Reject fields that need carrying instead of carrying them.

    Returns:
        The Instant the wall-clock fields denote in the zone.

    Raises:
        InvalidFieldCombination: With strict=True, if a field is outside
            its natural range (including a day past the end of its month).
        UnknownTimeZone: If the zone cannot be resolved.

    Examples:
        >>> fields = decompose(Instant.from_timestamp(0), "UTC")
        >>> recompose(fields) == Instant.from_timestamp(0)
        True
        >>> fields.day = 32  # carries into February
        >>> decompose(recompose(fields), "UTC").ymd
        (1970, 2, 1)
    """
    if strict:
        validate_fields(*fields.wall_clock)
    elif _needs_carry(fields):
        logger.debug("carrying out-of-range fields %s", fields.wall_clock)

    if timezone is None and fields.timezone is not None:
        zone = fields.timezone
    else:
        zone = resolve_timezone(timezone)

    preferred = fields.utc_offset if zone == fields.timezone else None
    wall = local_millis(fields)
    offset = zone.offset_for_local(wall // MILLIS_PER_SECOND, preferred)
    return Instant.from_millis(wall - offset * MILLIS_PER_SECOND)


def normalize(fields: FieldSet, timezone: TimeZoneLike = None) -> FieldSet:
    """Return fields with every carry applied and derived fields filled in.

    Examples:
        >>> fields = FieldSet(2023, 2, 30, timezone=TimeZone.utc())
        >>> normalize(fields).ymd
        (2023, 3, 2)
    """
    zone = fields.timezone if timezone is None and fields.timezone is not None else resolve_timezone(timezone)
    return decompose(recompose(fields, zone), zone)


def _needs_carry(fields: FieldSet) -> bool:
    if not 1 <= fields.month <= 12:
        return True
    if not 1 <= fields.day <= days_in_month(fields.year, fields.month):
        return True
    return not (
        0 <= fields.hour <= 23
        and 0 <= fields.minute <= 59
        and 0 <= fields.second <= 59
        and 0 <= fields.millisecond <= 999
    )


__all__ = [
    "decompose",
    "recompose",
    "normalize",
    "local_millis",
]
