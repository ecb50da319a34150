"""Per-call formatting configuration.

A FormatContext carries the zone and locale one parse or format call
runs under. Contexts are immutable and built per call, so concurrent
callers never share mutable formatter state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from datewise import config
from datewise.errors import ValidationError
from datewise.units.timezone import TimeZone, TimeZoneLike, resolve_timezone

# Languages whose month, weekday and unit names ship with the library
SUPPORTED_LANGUAGES = frozenset({"en"})


@dataclass(frozen=True)
class FormatContext:
    """Zone and locale for a single parse or format call.

    Attributes:
        timezone: The zone wall-clock fields are read and written in. A
            TimeZone, an identifier, or None for the default zone. A
            zone written in parsed text overrides it.
        locale: A locale identifier such as "en_US_POSIX". Only English
            name tables are available.

    Examples:
        >>> ctx = FormatContext("Europe/Rome")
        >>> ctx.zone().identifier
        'Europe/Rome'

        >>> FormatContext(locale="it_IT")
        Traceback (most recent call last):
        ...
        ValidationError: unsupported locale 'it_IT'
    """

    timezone: TimeZoneLike = None
    locale: str = field(default_factory=lambda: config.DEFAULT_LOCALE)

    def __post_init__(self) -> None:
        language = self.locale.replace("-", "_").split("_", 1)[0].lower()
        if language not in SUPPORTED_LANGUAGES:
            raise ValidationError(f"unsupported locale {self.locale!r}")

    def zone(self) -> TimeZone:
        """Resolve the context's zone.

        Raises:
            UnknownTimeZone: If the zone identifier cannot be resolved.
        """
        return resolve_timezone(self.timezone)

    def with_timezone(self, timezone: TimeZoneLike) -> FormatContext:
        """Return a copy of this context in another zone."""
        return FormatContext(timezone, self.locale)


def coerce_context(context: FormatContext | TimeZoneLike) -> FormatContext:
    """Accept a FormatContext, or a zone to build a default context around."""
    if isinstance(context, FormatContext):
        return context
    return FormatContext(context)


__all__ = ["FormatContext", "coerce_context", "SUPPORTED_LANGUAGES"]
