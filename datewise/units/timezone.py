"""Time zone representation and lookup.

This module provides the TimeZone class. A TimeZone maps an instant to
a UTC offset, which may vary by instant (daylight saving time). Three
kinds of rule are supported:

    - fixed offsets ("UTC", "GMT+2", "+05:30")
    - IANA zones through the standard library's zoneinfo ("Europe/Rome")
    - the system zone, read through the C library's localtime()

Common abbreviations ("EST", "CET", "JST") resolve to a representative
IANA zone. Unknown identifiers raise UnknownTimeZone; nothing falls
back to a default zone.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
import time
from typing import ClassVar, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datewise._internal.constants import MAX_UTC_OFFSET_SECONDS
from datewise.errors import TimezoneError, UnknownTimeZone

logger = logging.getLogger(__name__)

_UTC_NAMES = frozenset({"Z", "UTC", "GMT", "UT"})
_SYSTEM_NAMES = frozenset({"LOCAL", "SYSTEM"})

# "+05:30", "-0800", "GMT+2", "UTC-03:00"
_OFFSET_PATTERN = re.compile(r"^(?:GMT|UTC|UT)?\s*([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)

_ABBREVIATIONS: dict[str, str] = {
    "EST": "America/New_York",
    "EDT": "America/New_York",
    "CST": "America/Chicago",
    "CDT": "America/Chicago",
    "MST": "America/Denver",
    "MDT": "America/Denver",
    "PST": "America/Los_Angeles",
    "PDT": "America/Los_Angeles",
    "AKST": "America/Anchorage",
    "AKDT": "America/Anchorage",
    "HST": "Pacific/Honolulu",
    "AST": "America/Halifax",
    "ADT": "America/Halifax",
    "BRT": "America/Sao_Paulo",
    "ART": "America/Argentina/Buenos_Aires",
    "WET": "Europe/Lisbon",
    "WEST": "Europe/Lisbon",
    "BST": "Europe/London",
    "CET": "Europe/Paris",
    "CEST": "Europe/Paris",
    "EET": "Europe/Athens",
    "EEST": "Europe/Athens",
    "MSK": "Europe/Moscow",
    "IST": "Asia/Kolkata",
    "PKT": "Asia/Karachi",
    "ICT": "Asia/Bangkok",
    "HKT": "Asia/Hong_Kong",
    "SGT": "Asia/Singapore",
    "JST": "Asia/Tokyo",
    "KST": "Asia/Seoul",
    "AEST": "Australia/Sydney",
    "AEDT": "Australia/Sydney",
    "ACST": "Australia/Adelaide",
    "AWST": "Australia/Perth",
    "NZST": "Pacific/Auckland",
    "NZDT": "Pacific/Auckland",
}

_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ZONEINFO_MIN_SECONDS = -62_104_060_800  # 0002-01-01T00:00:00Z
_ZONEINFO_MAX_SECONDS = 253_370_764_800  # 9999-01-01T00:00:00Z
_LOCALTIME_MIN_SECONDS = -(2**31)
_LOCALTIME_MAX_SECONDS = 2**31 - 1


def _format_gmt(offset_seconds: int) -> str:
    """Render an offset the way short zone names do ("GMT+2", "GMT-5:30")."""
    if offset_seconds == 0:
        return "GMT"
    sign = "+" if offset_seconds > 0 else "-"
    hours, rest = divmod(abs(offset_seconds), 3600)
    minutes = rest // 60
    if minutes:
        return f"GMT{sign}{hours}:{minutes:02d}"
    return f"GMT{sign}{hours}"


class TimeZone:
    """A rule mapping instants to UTC offsets.

    TimeZone values are immutable. Offsets are in seconds, positive east
    of UTC. Every method that takes an instant takes seconds since the
    Unix epoch, so this module does not depend on the Instant type.

    Attributes:
        identifier: The name the zone was created from.

    Examples:
        >>> TimeZone.utc().is_utc
        True

        >>> TimeZone.lookup("GMT+2").utc_offset(0)
        7200

        >>> TimeZone.lookup("Europe/Rome").utc_offset(1_720_000_000)  # July
        7200

        >>> TimeZone.lookup("Nowhere/Special")
        Traceback (most recent call last):
        ...
        UnknownTimeZone: unknown time zone 'Nowhere/Special'
    """

    __slots__ = ("_identifier", "_fixed_offset", "_zone")

    _utc_instance: ClassVar[TimeZone | None] = None

    def __init__(
        self,
        identifier: str,
        *,
        fixed_offset: int | None = None,
        zone: ZoneInfo | None = None,
    ) -> None:
        """Create a TimeZone. Prefer the lookup() and fixed() factories.

        Args:
            identifier: Name of the zone.
            fixed_offset: Constant UTC offset in seconds, for fixed zones.
            zone: IANA zone, for zoneinfo-backed zones.

        With neither fixed_offset nor zone the zone follows the system
        clock's local time rules.

        Raises:
            TimezoneError: If both rules are given or the offset is out of range.
        """
        if fixed_offset is not None and zone is not None:
            raise TimezoneError("a zone is either fixed-offset or rule-based, not both")
        if fixed_offset is not None:
            if not isinstance(fixed_offset, int):
                raise TimezoneError(
                    f"offset must be an integer, got {type(fixed_offset).__name__}"
                )
            if abs(fixed_offset) > MAX_UTC_OFFSET_SECONDS:
                raise TimezoneError(
                    f"offset {fixed_offset} is outside valid range "
                    f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
                )

        self._identifier: str = identifier
        self._fixed_offset: int | None = fixed_offset
        self._zone: ZoneInfo | None = zone

    @classmethod
    def utc(cls) -> TimeZone:
        """Return the UTC zone (a shared immutable instance)."""
        if cls._utc_instance is None:
            cls._utc_instance = cls("UTC", fixed_offset=0)
        return cls._utc_instance

    @classmethod
    def fixed(cls, offset_seconds: int, name: str | None = None) -> TimeZone:
        """Return a zone with a constant offset.

        Args:
            offset_seconds: UTC offset in seconds (positive is east).
            name: Optional identifier; defaults to the "GMT+h" form.
        """
        return cls(name or _format_gmt(offset_seconds), fixed_offset=offset_seconds)

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> TimeZone:
        """Return a fixed zone from an hour and minute offset.

        Minutes take their sign from hours.

        Examples:
            >>> TimeZone.from_hours(5, 30).utc_offset(0)
            19800
            >>> TimeZone.from_hours(-5).utc_offset(0)
            -18000
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        if hours >= 0:
            return cls.fixed(hours * 3600 + minutes * 60)
        return cls.fixed(hours * 3600 - minutes * 60)

    @classmethod
    def system(cls) -> TimeZone:
        """Return the zone of the host's clock, DST rules included."""
        return cls("local")

    @classmethod
    def lookup(cls, identifier: str) -> TimeZone:
        """Resolve a zone identifier or abbreviation.

        Resolution order:
            1. "Z", "UTC", "GMT", "UT": UTC
            2. "local", "system": the system zone
            3. Offsets: "+05:30", "-0800", "GMT+2", "UTC-3"
            4. Abbreviations: "EST", "CET", "JST", ...
            5. IANA names: "America/New_York", "Asia/Tokyo", ...

        Args:
            identifier: The zone name.

        Returns:
            The resolved TimeZone.

        Raises:
            UnknownTimeZone: If the identifier cannot be resolved.
        """
        if not isinstance(identifier, str) or not identifier.strip():
            raise UnknownTimeZone(f"unknown time zone {identifier!r}")

        name = identifier.strip()
        upper = name.upper()

        if upper in _UTC_NAMES:
            return cls.utc()
        if upper in _SYSTEM_NAMES:
            return cls.system()

        match = _OFFSET_PATTERN.match(name)
        if match:
            sign_str, hours_str, minutes_str = match.groups()
            hours = int(hours_str)
            minutes = int(minutes_str) if minutes_str else 0
            offset = hours * 3600 + minutes * 60
            if minutes > 59 or offset > MAX_UTC_OFFSET_SECONDS:
                raise UnknownTimeZone(f"unknown time zone {identifier!r}")
            return cls.fixed(offset if sign_str == "+" else -offset)

        iana = _ABBREVIATIONS.get(upper, name)
        try:
            zone = ZoneInfo(iana)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise UnknownTimeZone(f"unknown time zone {identifier!r}") from e

        if iana != name:
            logger.debug("resolved zone abbreviation %s to %s", name, iana)
        return cls(name, zone=zone)

    @property
    def identifier(self) -> str:
        """Return the name the zone was created from."""
        return self._identifier

    @property
    def is_fixed(self) -> bool:
        """Return True if the offset never changes."""
        return self._fixed_offset is not None

    @property
    def is_utc(self) -> bool:
        """Return True for a fixed zone with offset zero."""
        return self._fixed_offset == 0

    @property
    def is_system(self) -> bool:
        """Return True for the host clock's zone."""
        return self._fixed_offset is None and self._zone is None

    def utc_offset(self, seconds: float) -> int:
        """Return the UTC offset in seconds in effect at an instant.

        Args:
            seconds: The instant, as seconds since the Unix epoch.
        """
        if self._fixed_offset is not None:
            return self._fixed_offset

        if self._zone is not None:
            clamped = min(max(int(seconds // 1), _ZONEINFO_MIN_SECONDS), _ZONEINFO_MAX_SECONDS)
            moment = _EPOCH + _datetime.timedelta(seconds=clamped)
            return int(moment.astimezone(self._zone).utcoffset().total_seconds())

        clamped = min(max(int(seconds // 1), _LOCALTIME_MIN_SECONDS), _LOCALTIME_MAX_SECONDS)
        return time.localtime(clamped).tm_gmtoff

    def offset_for_local(self, local_seconds: float, preferred: int | None = None) -> int:
        """Return the offset to subtract from a wall-clock time to reach UTC.

        Args:
            local_seconds: The wall-clock time, as seconds since the
                epoch measured on the zone's local clock.
            preferred: An offset to keep when it is valid for this wall
                time, which picks a side of an ambiguous (repeated) hour.

        When the wall time is repeated by a backward transition the
        earlier offset wins unless preferred says otherwise. When the
        wall time is skipped by a forward transition the pre-transition
        offset is used, which moves the result past the gap.
        """
        if self._fixed_offset is not None:
            return self._fixed_offset

        if preferred is not None and self.utc_offset(local_seconds - preferred) == preferred:
            return preferred

        first = self.utc_offset(local_seconds)
        second = self.utc_offset(local_seconds - first)
        if first == second:
            return first

        third = self.utc_offset(local_seconds - second)
        if third == second:
            return second

        return min(first, second)

    def abbreviation(self, seconds: float) -> str:
        """Return the short zone name in effect at an instant.

        IANA zones use the database abbreviation ("CET", "EDT"); fixed
        zones and zones without one use the "GMT+h" form.
        """
        if self._fixed_offset is not None:
            return "GMT" if self._fixed_offset == 0 else _format_gmt(self._fixed_offset)

        if self._zone is not None:
            clamped = min(max(int(seconds // 1), _ZONEINFO_MIN_SECONDS), _ZONEINFO_MAX_SECONDS)
            moment = (_EPOCH + _datetime.timedelta(seconds=clamped)).astimezone(self._zone)
            name = moment.tzname()
            if name and name[0] not in "+-":
                return name
            return _format_gmt(self.utc_offset(seconds))

        clamped = min(max(int(seconds // 1), _LOCALTIME_MIN_SECONDS), _LOCALTIME_MAX_SECONDS)
        return time.localtime(clamped).tm_zone or _format_gmt(self.utc_offset(seconds))

    def to_tzinfo(self) -> _datetime.tzinfo:
        """Return an equivalent standard library tzinfo."""
        if self._fixed_offset is not None:
            if self._fixed_offset == 0:
                return _datetime.timezone.utc
            return _datetime.timezone(
                _datetime.timedelta(seconds=self._fixed_offset), self._identifier
            )
        if self._zone is not None:
            return self._zone
        return _SystemTzinfo(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        if self._fixed_offset is not None or other._fixed_offset is not None:
            return self._fixed_offset == other._fixed_offset
        if self._zone is not None or other._zone is not None:
            return self._zone is not None and other._zone is not None and self._zone.key == other._zone.key
        return True

    def __hash__(self) -> int:
        if self._fixed_offset is not None:
            return hash(("fixed", self._fixed_offset))
        if self._zone is not None:
            return hash(("zone", self._zone.key))
        return hash("system")

    def __repr__(self) -> str:
        return f"TimeZone({self._identifier!r})"

    def __str__(self) -> str:
        return self._identifier


class _SystemTzinfo(_datetime.tzinfo):
    """Adapter exposing the system zone's per-instant offsets to datetime."""

    def __init__(self, zone: TimeZone) -> None:
        self._tz = zone

    def utcoffset(self, dt: _datetime.datetime | None) -> _datetime.timedelta | None:
        if dt is None:
            return None
        wall = dt.replace(tzinfo=_datetime.timezone.utc)
        local_seconds = (wall - _EPOCH).total_seconds()
        return _datetime.timedelta(seconds=self._tz.offset_for_local(local_seconds))

    def dst(self, dt: _datetime.datetime | None) -> _datetime.timedelta | None:
        return None

    def fromutc(self, dt: _datetime.datetime) -> _datetime.datetime:
        utc = dt.replace(tzinfo=_datetime.timezone.utc)
        offset = self._tz.utc_offset((utc - _EPOCH).total_seconds())
        return (dt + _datetime.timedelta(seconds=offset)).replace(tzinfo=self)

    def tzname(self, dt: _datetime.datetime | None) -> str | None:
        if dt is None:
            return None
        offset = self.utcoffset(dt)
        wall = dt.replace(tzinfo=_datetime.timezone.utc)
        return self._tz.abbreviation((wall - _EPOCH - offset).total_seconds())


TimeZoneLike = Union[TimeZone, str, None]


def resolve_timezone(tz: TimeZoneLike = None) -> TimeZone:
    """Coerce a zone argument to a TimeZone.

    Args:
        tz: A TimeZone, an identifier for TimeZone.lookup(), or None for
            the default zone (DATEWISE_TIMEZONE, else the system zone).

    Raises:
        UnknownTimeZone: If an identifier (including the configured
            default) cannot be resolved.
    """
    if isinstance(tz, TimeZone):
        return tz
    if tz is None:
        from datewise import config

        if config.DEFAULT_TIMEZONE:
            return TimeZone.lookup(config.DEFAULT_TIMEZONE)
        return TimeZone.system()
    if isinstance(tz, str):
        return TimeZone.lookup(tz)
    raise TimezoneError(
        f"expected TimeZone, zone identifier or None, got {type(tz).__name__}"
    )


__all__ = ["TimeZone", "TimeZoneLike", "resolve_timezone"]
