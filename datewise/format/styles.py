"""Style-based formatting.

This module formats Instants at fixed detail levels, independent of any
locale's preferences. Each DateStyle maps to a pattern for the date part
and one for the time part:

    Style    Date                        Time
    SHORT    1/15/24                     2:30 PM
    MEDIUM   Jan 15, 2024                2:30:45 PM
    LONG     January 15, 2024            2:30:45 PM GMT
    FULL     Monday, January 15, 2024    2:30:45 PM Europe/Rome

NONE leaves a part out. With relative_date=True a date part that falls
on the current, previous or next day renders as "Today", "Yesterday"
or "Tomorrow".
"""

from __future__ import annotations

from enum import Enum

from datewise._internal.calendar import ymd_to_ordinal
from datewise.core.instant import Instant
from datewise.core.resolver import decompose
from datewise.format.context import coerce_context
from datewise.format.pattern import ContextLike, format_pattern


class DateStyle(Enum):
    """Detail level of a date or time part."""

    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    FULL = "full"


_DATE_PATTERNS = {
    DateStyle.SHORT: "M/d/yy",
    DateStyle.MEDIUM: "MMM d, yyyy",
    DateStyle.LONG: "MMMM d, yyyy",
    DateStyle.FULL: "EEEE, MMMM d, yyyy",
}

_TIME_PATTERNS = {
    DateStyle.SHORT: "h:mm a",
    DateStyle.MEDIUM: "h:mm:ss a",
    DateStyle.LONG: "h:mm:ss a z",
    DateStyle.FULL: "h:mm:ss a zzzz",
}

_RELATIVE_DAYS = {-1: "Yesterday", 0: "Today", 1: "Tomorrow"}


def format_styled(
    instant: Instant,
    date_style: DateStyle = DateStyle.MEDIUM,
    time_style: DateStyle = DateStyle.MEDIUM,
    context: ContextLike = None,
    *,
    relative_date: bool = False,
    now: Instant | None = None,
) -> str:
    """Format an Instant with a date style and a time style.

    Args:
        instant: The instant to format.
        date_style: Detail of the date part; NONE omits it.
        time_style: Detail of the time part; NONE omits it.
        context: A FormatContext, or a zone for a default context.
        relative_date: Render today, yesterday and tomorrow by name.
        now: The current instant for relative_date; Instant.now() by default.

    Returns:
        The formatted string; empty when both styles are NONE.

    Examples:
        >>> i = Instant.from_timestamp(1_705_329_045)
        >>> format_styled(i, DateStyle.SHORT, DateStyle.SHORT, "UTC")
        '1/15/24, 2:30 PM'
        >>> format_styled(i, DateStyle.LONG, DateStyle.NONE, "UTC")
        'January 15, 2024'
        >>> format_styled(i, DateStyle.MEDIUM, DateStyle.NONE, "UTC", relative_date=True, now=i + 86400)
        'Yesterday'
    """
    ctx = coerce_context(context)
    parts = []

    if date_style is not DateStyle.NONE:
        date_text = None
        if relative_date:
            zone = ctx.zone()
            current = Instant.now() if now is None else now
            days = ymd_to_ordinal(*decompose(instant, zone).ymd) - ymd_to_ordinal(
                *decompose(current, zone).ymd
            )
            date_text = _RELATIVE_DAYS.get(days)
        if date_text is None:
            date_text = format_pattern(instant, _DATE_PATTERNS[date_style], ctx)
        parts.append(date_text)

    if time_style is not DateStyle.NONE:
        parts.append(format_pattern(instant, _TIME_PATTERNS[time_style], ctx))

    if len(parts) == 2 and date_style in (DateStyle.LONG, DateStyle.FULL):
        return f"{parts[0]} at {parts[1]}"
    return ", ".join(parts)


def to_short_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.SHORT, DateStyle.SHORT, context)


def to_medium_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.MEDIUM, DateStyle.MEDIUM, context)


def to_long_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.LONG, DateStyle.LONG, context)


def to_short_date_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.SHORT, DateStyle.NONE, context)


def to_medium_date_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.MEDIUM, DateStyle.NONE, context)


def to_long_date_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.LONG, DateStyle.NONE, context)


def to_short_time_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.NONE, DateStyle.SHORT, context)


def to_medium_time_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.NONE, DateStyle.MEDIUM, context)


def to_long_time_string(instant: Instant, context: ContextLike = None) -> str:
    return format_styled(instant, DateStyle.NONE, DateStyle.LONG, context)


__all__ = [
    "DateStyle",
    "format_styled",
    "to_short_string",
    "to_medium_string",
    "to_long_string",
    "to_short_date_string",
    "to_medium_date_string",
    "to_long_date_string",
    "to_short_time_string",
    "to_medium_time_string",
    "to_long_time_string",
]
