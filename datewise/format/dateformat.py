"""Fixed wire formats and custom patterns.

This module selects the pattern for each supported format kind and
delegates to the pattern engine:

    ISO8601  parse  yyyy-MM-dd'T'HH:mm:ss.SSSZ   (fraction optional, "Z" accepted)
             format yyyy-MM-dd'T'HH:mm:ssZ
    RSS      EEE, d MMM yyyy HH:mm:ss ZZZ
    ALT_RSS  d MMM yyyy HH:mm:ss ZZZ
    Custom   any pattern

RSS and AltRSS text ending in a "Z" designator is read as GMT.

Functions:
    parse: Parse text, raising ParseError on failure.
    try_parse: Parse text, returning None on failure.
    format_instant: Format an Instant in one of the formats.
    to_iso_string: UTC ISO 8601 with milliseconds and a trailing "Z".

Examples:
    >>> parse("9 Sep 2011 15:26:08 Z", DateFormat.ALT_RSS) == parse("9 Sep 2011 15:26:08 GMT", DateFormat.ALT_RSS)
    True
    >>> try_parse("", DateFormat.ISO8601) is None
    True
    >>> to_iso_string(Instant.from_timestamp(0))
    '1970-01-01T00:00:00.000Z'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from datewise.core.instant import Instant
from datewise.errors import ParseError
from datewise.format.context import FormatContext
from datewise.format.pattern import ContextLike, format_pattern, parse_pattern
from datewise.units.timezone import TimeZone

logger = logging.getLogger(__name__)

ISO8601_PARSE_PATTERN = "yyyy-MM-dd'T'HH:mm:ss.SSSZ"
ISO8601_FORMAT_PATTERN = "yyyy-MM-dd'T'HH:mm:ssZ"
RSS_PATTERN = "EEE, d MMM yyyy HH:mm:ss ZZZ"
ALT_RSS_PATTERN = "d MMM yyyy HH:mm:ss ZZZ"
ISO_STRING_PATTERN = "yyyy-MM-dd'T'HH:mm:ss.SSS'Z'"

_TRAILING_Z = re.compile(r"Z\s*$")


class DateFormat(Enum):
    """The fixed wire formats."""

    ISO8601 = "iso8601"
    RSS = "rss"
    ALT_RSS = "altrss"


@dataclass(frozen=True)
class Custom:
    """A caller-supplied date pattern, used wherever a DateFormat is.

    Examples:
        >>> fmt = Custom("dd/MM/yyyy")
        >>> format_instant(Instant.from_timestamp(0), fmt, "UTC")
        '01/01/1970'
    """

    pattern: str


FormatKind = Union[DateFormat, Custom, str]


def _coerce_format(fmt: FormatKind) -> DateFormat | Custom:
    if isinstance(fmt, (DateFormat, Custom)):
        return fmt
    if isinstance(fmt, str):
        return Custom(fmt)
    raise TypeError(f"expected DateFormat, Custom or pattern string, got {type(fmt).__name__}")


def _substitute_gmt(text: str) -> str:
    return _TRAILING_Z.sub("GMT", text.rstrip())


def parse(text: str, fmt: FormatKind, context: ContextLike = None) -> Instant:
    """Parse text in one of the supported formats.

    A plain string fmt is a custom pattern.

    Args:
        text: The string to parse.
        fmt: A DateFormat, a Custom pattern, or a pattern string.
        context: A FormatContext, or a zone for fields without a zone.

    Returns:
        The parsed Instant.

    Raises:
        ParseError: If text is empty or does not match the format. No
            partial result is produced.

    Examples:
        >>> parse("2024-01-15T14:30:45.250+0100", DateFormat.ISO8601).millis
        1705325445250
        >>> parse("Mon, 15 Jan 2024 14:30:45 Z", DateFormat.RSS) == parse(
        ...     "Mon, 15 Jan 2024 14:30:45 GMT", DateFormat.RSS)
        True
    """
    if not isinstance(text, str) or not text.strip():
        raise ParseError("cannot parse an empty string")

    kind = _coerce_format(fmt)
    if isinstance(kind, Custom):
        return parse_pattern(text, kind.pattern, context)

    if kind is DateFormat.ISO8601:
        try:
            return parse_pattern(text, ISO8601_PARSE_PATTERN, context)
        except ParseError:
            # the fraction of a second is optional
            return parse_pattern(text, ISO8601_FORMAT_PATTERN, context)

    pattern = RSS_PATTERN if kind is DateFormat.RSS else ALT_RSS_PATTERN
    return parse_pattern(_substitute_gmt(text), pattern, context)


def try_parse(text: str, fmt: FormatKind, context: ContextLike = None) -> Instant | None:
    """Parse text like parse(), returning None instead of raising ParseError."""
    try:
        return parse(text, fmt, context)
    except ParseError as e:
        logger.debug("parse failed: %s", e)
        return None


def format_instant(instant: Instant, fmt: FormatKind, context: ContextLike = None) -> str:
    """Format an Instant in one of the supported formats.

    Examples:
        >>> i = Instant.from_timestamp(1_705_329_045)
        >>> format_instant(i, DateFormat.ISO8601, "UTC")
        '2024-01-15T14:30:45+0000'
        >>> format_instant(i, DateFormat.RSS, "Europe/Rome")
        'Mon, 15 Jan 2024 15:30:45 +0100'
        >>> format_instant(i, "yyyy", "UTC")
        '2024'
    """
    kind = _coerce_format(fmt)
    if isinstance(kind, Custom):
        pattern = kind.pattern
    elif kind is DateFormat.ISO8601:
        pattern = ISO8601_FORMAT_PATTERN
    elif kind is DateFormat.RSS:
        pattern = RSS_PATTERN
    else:
        pattern = ALT_RSS_PATTERN
    return format_pattern(instant, pattern, context)


def to_iso_string(instant: Instant) -> str:
    """Return the UTC ISO 8601 form with milliseconds and a literal "Z"."""
    return format_pattern(instant, ISO_STRING_PATTERN, FormatContext(TimeZone.utc()))


__all__ = [
    "DateFormat",
    "Custom",
    "parse",
    "try_parse",
    "format_instant",
    "to_iso_string",
    "ISO8601_PARSE_PATTERN",
    "ISO8601_FORMAT_PATTERN",
    "RSS_PATTERN",
    "ALT_RSS_PATTERN",
]
