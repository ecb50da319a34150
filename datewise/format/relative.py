"""Relative time descriptions.

This module renders the difference between two Instants in words, such
as "3 hours ago", "about 2 weeks from now" or "1 yr 2 mos ago".

The difference is measured in calendar units (see
datewise.arithmetic.calendar_difference), most significant first. The
first non-zero unit is always shown; later non-zero units are shown
until max_units of them have been seen, and the rest only mark the
description as approximate, which renders an "about " prefix.

Differences below a threshold (DATEWISE_JUST_NOW_SECONDS, one second
by default) render as "just now".

Examples:
    >>> now = Instant.from_timestamp(1_705_329_045)
    >>> format_relative(now, now - 3720, timezone="UTC")
    'about 1 hour ago'
    >>> format_relative(now, now - 3720, max_units=2, timezone="UTC")
    '1 hour 2 minutes ago'
    >>> format_relative(now, now + 2 * 86400, abbreviated=True, timezone="UTC")
    '2 days from now'
    >>> format_relative(now, now)
    'just now'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from datewise import config
from datewise.arithmetic.ops import calendar_difference
from datewise.core.instant import Instant
from datewise._internal.validation import validate_range
from datewise.errors import ValidationError
from datewise.units.calendarunit import CalendarUnit
from datewise.units.timezone import TimeZoneLike

logger = logging.getLogger(__name__)

# (singular, plural, abbreviated singular, abbreviated plural)
_ENGLISH_UNITS: dict[CalendarUnit, tuple[str, str, str, str]] = {
    CalendarUnit.YEAR: ("year", "years", "yr", "yrs"),
    CalendarUnit.MONTH: ("month", "months", "mo", "mos"),
    CalendarUnit.WEEK: ("week", "weeks", "wk", "wks"),
    CalendarUnit.DAY: ("day", "days", "day", "days"),
    CalendarUnit.HOUR: ("hour", "hours", "hr", "hrs"),
    CalendarUnit.MINUTE: ("minute", "minutes", "min", "mins"),
    CalendarUnit.SECOND: ("second", "seconds", "s", "s"),
}

_ENGLISH_PHRASES: dict[tuple[CalendarUnit, int], str] = {
    (CalendarUnit.YEAR, -1): "last year",
    (CalendarUnit.MONTH, -1): "last month",
    (CalendarUnit.WEEK, -1): "last week",
    (CalendarUnit.DAY, -1): "yesterday",
    (CalendarUnit.YEAR, 1): "next year",
    (CalendarUnit.MONTH, 1): "next month",
    (CalendarUnit.WEEK, 1): "next week",
    (CalendarUnit.DAY, 1): "tomorrow",
}


class Direction(Enum):
    """Whether the described instant lies before or after the reference."""

    PAST = "past"
    FUTURE = "future"


@dataclass(frozen=True)
class RelativeLabels:
    """The words a relative description is rendered with.

    The default instance holds the English table. A translated table is
    built by passing replacement mappings and strings.

    Attributes:
        units: Per unit: (singular, plural, short singular, short plural).
        phrases: Single-unit phrases keyed by (unit, +1 or -1).
        past: Suffix for instants before the reference.
        future: Suffix for instants after the reference.
        just_now: Text for differences below the threshold.
        approximate: Prefix for approximate descriptions.
    """

    units: Mapping[CalendarUnit, tuple[str, str, str, str]] = field(
        default_factory=lambda: dict(_ENGLISH_UNITS)
    )
    phrases: Mapping[tuple[CalendarUnit, int], str] = field(
        default_factory=lambda: dict(_ENGLISH_PHRASES)
    )
    past: str = "ago"
    future: str = "from now"
    just_now: str = "just now"
    approximate: str = "about"

    def unit_label(self, unit: CalendarUnit, plural: bool, abbreviated: bool = False) -> str:
        """Return the label for a unit.

        Examples:
            >>> ENGLISH.unit_label(CalendarUnit.HOUR, plural=True, abbreviated=True)
            'hrs'
        """
        singular, plural_form, short, short_plural = self.units[unit]
        if abbreviated:
            return short_plural if plural else short
        return plural_form if plural else singular


ENGLISH = RelativeLabels()


@dataclass(frozen=True)
class RelativeEntry:
    """One (magnitude, unit) part of a relative description."""

    magnitude: int
    unit: CalendarUnit

    @property
    def is_plural(self) -> bool:
        return self.magnitude != 1


@dataclass(frozen=True)
class RelativeDescription:
    """The structured result of relative_description().

    Attributes:
        entries: The shown parts, most significant unit first. Empty
            when the difference renders as "just now".
        direction: PAST if the described instant is before the reference.
        approximate: True if non-zero units were left out.
        abbreviated: True to render short unit labels.
    """

    entries: tuple[RelativeEntry, ...]
    direction: Direction
    approximate: bool = False
    abbreviated: bool = False

    @property
    def is_just_now(self) -> bool:
        return not self.entries

    def render(self, labels: RelativeLabels = ENGLISH) -> str:
        """Render the description with a label table."""
        if not self.entries:
            return labels.just_now

        text = " ".join(
            f"{entry.magnitude} {labels.unit_label(entry.unit, entry.is_plural, self.abbreviated)}"
            for entry in self.entries
        )
        suffix = labels.past if self.direction is Direction.PAST else labels.future
        text = f"{text} {suffix}"
        if self.approximate:
            text = f"{labels.approximate} {text}"
        return text

    def __str__(self) -> str:
        return self.render()


@validate_range(max_units=(1, len(CalendarUnit)))
def relative_description(
    from_: Instant,
    to: Instant,
    *,
    abbreviated: bool = False,
    max_units: int | None = None,
    timezone: TimeZoneLike = None,
    just_now_seconds: float | None = None,
) -> RelativeDescription:
    """Describe the instant to relative to the reference instant from_.

    Args:
        from_: The reference instant ("now").
        to: The instant being described.
        abbreviated: Use short unit labels ("hr" instead of "hour").
        max_units: How many non-zero units to show before the
            description turns approximate; DATEWISE_RELATIVE_MAX_UNITS
            by default.
        timezone: Zone whose calendar the difference is measured in.
        just_now_seconds: Threshold below which the result is "just
            now"; DATEWISE_JUST_NOW_SECONDS by default.

    Returns:
        A RelativeDescription; str() renders it in English.

    Raises:
        ValidationError: If max_units is outside 1-7.
        UnknownTimeZone: If the zone cannot be resolved.

    Examples:
        >>> t = Instant.from_timestamp(0)
        >>> d = relative_description(t, t - 3720, timezone="UTC")
        >>> [(e.magnitude, e.unit.value) for e in d.entries], d.direction, d.approximate
        ([(1, 'hour')], <Direction.PAST: 'past'>, True)
    """
    units = config.RELATIVE_MAX_UNITS if max_units is None else max_units
    if not 1 <= units <= len(CalendarUnit):
        raise ValidationError(f"max_units must be between 1 and {len(CalendarUnit)}, got {units}")
    threshold = config.JUST_NOW_SECONDS if just_now_seconds is None else just_now_seconds

    elapsed = from_ - to
    direction = Direction.PAST if elapsed > 0 else Direction.FUTURE
    if abs(elapsed) < threshold:
        return RelativeDescription((), direction, abbreviated=abbreviated)

    delta = calendar_difference(from_, to, timezone)
    entries: list[RelativeEntry] = []
    approximate = False
    seen = 0
    for unit, amount in delta.items():
        if not amount:
            continue
        if seen < units:
            entries.append(RelativeEntry(abs(amount), unit))
        else:
            approximate = True
        seen += 1

    if not entries:
        logger.debug("no whole units between %s and %s; describing as just now", from_, to)
    return RelativeDescription(tuple(entries), direction, approximate, abbreviated)


def format_relative(
    from_: Instant,
    to: Instant,
    *,
    labels: RelativeLabels = ENGLISH,
    **options: object,
) -> str:
    """Render relative_description(from_, to, **options) as text."""
    return relative_description(from_, to, **options).render(labels)


def simple_relative_phrase(
    from_: Instant,
    to: Instant,
    timezone: TimeZoneLike = None,
    labels: RelativeLabels = ENGLISH,
) -> str | None:
    """Return a one-unit phrase such as "yesterday" or "next month".

    A phrase applies when a unit's difference is exactly one and every
    more significant unit is zero. Years need only the year part to be
    exactly one.

    Returns:
        The phrase, or None when no phrase applies.

    Examples:
        >>> t = Instant.from_fields(2024, 1, 15, 12, timezone="UTC")
        >>> simple_relative_phrase(t, t - 86400, "UTC")
        'yesterday'
        >>> simple_relative_phrase(t, t + 40 * 86400, "UTC")
        'next month'
        >>> simple_relative_phrase(t, t + 3 * 86400, "UTC") is None
        True
    """
    delta = calendar_difference(from_, to, timezone)
    for sign in (-1, 1):
        if delta.years == sign:
            return labels.phrases.get((CalendarUnit.YEAR, sign))
        higher_zero = delta.years == 0
        for unit in (CalendarUnit.MONTH, CalendarUnit.WEEK, CalendarUnit.DAY):
            if higher_zero and delta.amount(unit) == sign:
                return labels.phrases.get((unit, sign))
            higher_zero = higher_zero and delta.amount(unit) == 0
    return None


__all__ = [
    "Direction",
    "RelativeLabels",
    "ENGLISH",
    "RelativeEntry",
    "RelativeDescription",
    "relative_description",
    "format_relative",
    "simple_relative_phrase",
]
