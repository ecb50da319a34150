"""Pattern-based formatting and parsing.

This module formats and parses Instants with date patterns in the
common Unicode (LDML) style, such as "yyyy-MM-dd'T'HH:mm:ss.SSSZ" or
"EEE, d MMM yyyy HH:mm:ss ZZZ". Letters are fields, text between single
quotes is literal, and '' is a literal quote. Other characters are
copied as they are.

Supported Fields:
    G     - Era ("AD"; GGGG "Anno Domini"; GGGGG "A")
    y     - Year of era (yy: two digits, parsed into 1950-2049)
    M, L  - Month (M: 1, MM: 01, MMM: Jan, MMMM: January, MMMMM: J)
    d     - Day of month
    D     - Day of year
    E     - Weekday (E-EEE: Mon, EEEE: Monday, EEEEE: M)
    F     - Weekday ordinal in the month
    w, W  - Week of year, week of month
    a     - AM/PM marker
    H, k  - Hour 0-23, hour 1-24
    h, K  - Hour 1-12, hour 0-11
    m, s  - Minute, second
    S     - Fraction of second (SSS: milliseconds)
    Z     - Offset (Z-ZZZ: -0800; ZZZZ: GMT-08:00; ZZZZZ: -08:00 or Z)
    z     - Zone name (z-zzz: PST or GMT+2; zzzz: the zone identifier)

Functions:
    format_pattern: Format an Instant with a pattern.
    parse_pattern: Parse text with a pattern into an Instant.

Examples:
    >>> i = Instant.from_timestamp(1_705_329_045)
    >>> format_pattern(i, "EEE, d MMM yyyy HH:mm:ss ZZZ", "UTC")
    'Mon, 15 Jan 2024 14:30:45 +0000'

    >>> parse_pattern("15/01/2024 14:30", "dd/MM/yyyy HH:mm", "UTC") == Instant.from_timestamp(1_705_329_000)
    True
"""

from __future__ import annotations

import functools
import logging
import re
from typing import NamedTuple, Union

from datewise._internal.calendar import ymd_to_ordinal
from datewise._internal.constants import TWO_DIGIT_YEAR_PIVOT
from datewise.core.fieldset import FieldSet
from datewise.core.instant import Instant
from datewise.core.resolver import decompose, recompose
from datewise.errors import InvalidFieldCombination, ParseError, UnknownTimeZone
from datewise.format.context import FormatContext, coerce_context
from datewise.units.timezone import TimeZone, TimeZoneLike

logger = logging.getLogger(__name__)

ContextLike = Union[FormatContext, TimeZoneLike]

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

# Indexed by weekday - 1 (Sunday first)
WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
WEEKDAY_ABBREVIATIONS = tuple(name[:3] for name in WEEKDAY_NAMES)

_ERA_NAMES = {"AD": "Anno Domini", "BC": "Before Christ"}

_FIELD_LETTERS = frozenset("GyMLdDEFwWaHkhKmsSZz")

# "Z", "+0530", "-08:00", "GMT", "GMT+2", "EST", "Europe/Rome"
_ZONE_PATTERN = (
    r"Z|[+-]\d{2}(?::?\d{2})?"
    r"|(?:GMT|UTC|UT)(?:[+-]\d{1,2}(?::?\d{2})?)?"
    r"|[A-Za-z]+(?:/[A-Za-z0-9_+-]+)*"
)


class _Token(NamedTuple):
    letter: str  # empty for literal text
    width: int
    text: str = ""


@functools.lru_cache(maxsize=64)
def tokenize(pattern: str) -> tuple[_Token, ...]:
    """Split a pattern into field and literal tokens.

    Raises:
        ValueError: If the pattern uses an unsupported field letter or
            has an unterminated quote.

    Examples:
        >>> [t.letter or t.text for t in tokenize("d MMM 'at' HH")]
        ['d', ' ', 'M', ' ', 'at', ' ', 'H']
    """
    tokens: list[_Token] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(_Token("", 0, "'"))
                i += 2
                continue
            literal = []
            j = i + 1
            while j < n:
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'":
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(pattern[j])
                j += 1
            if j >= n:
                raise ValueError(f"unterminated quote in pattern {pattern!r}")
            tokens.append(_Token("", 0, "".join(literal)))
            i = j + 1
        elif char.isascii() and char.isalpha():
            j = i
            while j < n and pattern[j] == char:
                j += 1
            if char not in _FIELD_LETTERS:
                raise ValueError(f"unsupported pattern field {char * (j - i)!r} in {pattern!r}")
            tokens.append(_Token(char, j - i))
            i = j
        else:
            tokens.append(_Token("", 0, char))
            i += 1
    return tuple(tokens)


# Formatting


def format_pattern(instant: Instant, pattern: str, context: ContextLike = None) -> str:
    """Format an Instant with a pattern.

    Args:
        instant: The instant to format.
        pattern: A date pattern such as "yyyy-MM-dd HH:mm".
        context: A FormatContext, or a zone for a default context.

    Returns:
        The formatted string.

    Raises:
        ValueError: If the pattern is malformed.
        UnknownTimeZone: If the context's zone cannot be resolved.

    Examples:
        >>> i = Instant.from_timestamp(1_705_329_045_123 / 1000)
        >>> format_pattern(i, "yyyy-MM-dd'T'HH:mm:ss.SSSZZZZZ", "UTC")
        '2024-01-15T14:30:45.123Z'
        >>> format_pattern(i, "h:mm a, EEEE", "America/New_York")
        '9:30 AM, Monday'
    """
    ctx = coerce_context(context)
    fields = decompose(instant, ctx.zone())
    seconds = instant.millis // 1000
    return "".join(
        token.text if not token.letter else _format_field(token, fields, seconds)
        for token in tokenize(pattern)
    )


def _pad(value: int, width: int) -> str:
    if value < 0:
        return "-" + f"{-value:0{width}d}"
    return f"{value:0{width}d}"


def _format_offset(offset: int, separator: str) -> str:
    sign = "+" if offset >= 0 else "-"
    hours, rest = divmod(abs(offset), 3600)
    return f"{sign}{hours:02d}{separator}{rest // 60:02d}"


def _format_field(token: _Token, fields: FieldSet, seconds: int) -> str:
    letter, width = token.letter, token.width
    year_of_era = fields.year if fields.year > 0 else 1 - fields.year

    if letter == "G":
        abbreviation = fields.era.abbreviation
        if width == 4:
            return _ERA_NAMES[abbreviation]
        return abbreviation[0] if width == 5 else abbreviation
    if letter == "y":
        if width == 2:
            return f"{year_of_era % 100:02d}"
        return _pad(year_of_era, width)
    if letter in ("M", "L"):
        if width == 3:
            return MONTH_ABBREVIATIONS[fields.month - 1]
        if width == 4:
            return MONTH_NAMES[fields.month - 1]
        if width >= 5:
            return MONTH_NAMES[fields.month - 1][0]
        return _pad(fields.month, width)
    if letter == "d":
        return _pad(fields.day, width)
    if letter == "D":
        day_of_year = ymd_to_ordinal(*fields.ymd) - ymd_to_ordinal(fields.year, 1, 1) + 1
        return _pad(day_of_year, width)
    if letter == "E":
        if width == 4:
            return WEEKDAY_NAMES[fields.weekday - 1]
        if width >= 5:
            return WEEKDAY_NAMES[fields.weekday - 1][0]
        return WEEKDAY_ABBREVIATIONS[fields.weekday - 1]
    if letter == "F":
        return _pad(fields.weekday_ordinal, width)
    if letter == "w":
        return _pad(fields.week_of_year, width)
    if letter == "W":
        return _pad(fields.week_of_month, width)
    if letter == "a":
        return "AM" if fields.hour < 12 else "PM"
    if letter == "H":
        return _pad(fields.hour, width)
    if letter == "k":
        return _pad(fields.hour or 24, width)
    if letter == "h":
        return _pad(fields.hour % 12 or 12, width)
    if letter == "K":
        return _pad(fields.hour % 12, width)
    if letter == "m":
        return _pad(fields.minute, width)
    if letter == "s":
        return _pad(fields.second, width)
    if letter == "S":
        digits = f"{fields.millisecond:03d}"
        return digits[:width] if width <= 3 else digits.ljust(width, "0")

    offset = fields.utc_offset or 0
    if letter == "Z":
        if width == 4:
            return "GMT" if offset == 0 else "GMT" + _format_offset(offset, ":")
        if width >= 5:
            return "Z" if offset == 0 else _format_offset(offset, ":")
        return _format_offset(offset, "")
    # letter == "z"
    if width >= 4:
        return fields.timezone.identifier
    return fields.timezone.abbreviation(seconds)


# Parsing


def _names_pattern(*tables: tuple[str, ...]) -> str:
    names = sorted({name for table in tables for name in table}, key=len, reverse=True)
    return "|".join(re.escape(name) for name in names)


def _field_regex(token: _Token) -> str:
    letter, width = token.letter, token.width
    if letter == "G":
        return r"Anno Domini|Before Christ|AD|BC|A|B"
    if letter == "y":
        if width == 2:
            return r"\d{2}"
        return r"[+-]?\d{%d,}?" % width if width > 1 else r"[+-]?\d+"
    if letter in ("M", "L") and width >= 3:
        return _names_pattern(MONTH_NAMES, MONTH_ABBREVIATIONS)
    if letter == "E":
        return _names_pattern(WEEKDAY_NAMES, WEEKDAY_ABBREVIATIONS)
    if letter == "a":
        return r"AM|PM"
    if letter == "D":
        return r"\d{1,3}"
    if letter == "S":
        return r"\d+"
    if letter in ("Z", "z"):
        return _ZONE_PATTERN
    return r"\d{1,%d}" % max(width, 2)


@functools.lru_cache(maxsize=64)
def _compile(pattern: str) -> tuple[re.Pattern[str], tuple[_Token, ...]]:
    tokens = tokenize(pattern)
    parts = []
    fields = []
    for token in tokens:
        if not token.letter:
            parts.append(r"\s+" if token.text.isspace() else re.escape(token.text))
            continue
        parts.append(f"(?P<f{len(fields)}>{_field_regex(token)})")
        fields.append(token)
    regex = re.compile(r"^\s*" + "".join(parts) + r"\s*$", re.IGNORECASE)
    return regex, tuple(fields)


def _lookup_name(text: str, *tables: tuple[str, ...]) -> int:
    folded = text.casefold()
    for table in tables:
        for index, name in enumerate(table):
            if name.casefold() == folded:
                return index + 1
    raise ParseError(f"unknown name {text!r}")


def _parse_zone(text: str) -> TimeZone:
    if text.upper() == "Z":
        return TimeZone.utc()
    try:
        return TimeZone.lookup(text)
    except UnknownTimeZone as e:
        raise ParseError(f"unknown time zone {text!r}") from e


def parse_pattern(text: str, pattern: str, context: ContextLike = None) -> Instant:
    """Parse text with a pattern into an Instant.

    Fields missing from the pattern default to 1970-01-01 00:00:00.000.
    A zone in the text overrides the context's zone. Weekday names and
    week numbers are accepted but not checked against the date.

    Args:
        text: The string to parse.
        pattern: The date pattern the text is written in.
        context: A FormatContext, or a zone for a default context.

    Returns:
        The parsed Instant.

    Raises:
        ParseError: If the text is empty, does not match the pattern,
            names an unknown zone, or holds out-of-range fields.
        ValueError: If the pattern itself is malformed.

    Examples:
        >>> parse_pattern("Mon, 15 Jan 2024 14:30:45 GMT", "EEE, d MMM yyyy HH:mm:ss ZZZ").millis
        1705329045000

        >>> parse_pattern("Feb 30 2023", "MMM d yyyy", "UTC")
        Traceback (most recent call last):
        ...
        ParseError: invalid date 'Feb 30 2023': day must be between 1 and 28 for 2023-02, got 30
    """
    if not isinstance(text, str) or not text.strip():
        raise ParseError("cannot parse an empty string")

    regex, field_tokens = _compile(pattern)
    match = regex.match(text)
    if match is None:
        logger.debug("%r does not match pattern %r", text, pattern)
        raise ParseError(f"string {text!r} does not match pattern {pattern!r}")

    ctx = coerce_context(context)
    year, month, day = 1970, 1, 1
    hour = minute = second = millisecond = 0
    day_of_year = None
    hour12 = None
    pm = None
    before_common_era = False
    zone = None

    for index, token in enumerate(field_tokens):
        value = match.group(f"f{index}")
        letter = token.letter
        if letter == "G":
            before_common_era = value.upper().startswith("B")
        elif letter == "y":
            year = int(value)
            if token.width == 2:
                year = TWO_DIGIT_YEAR_PIVOT + (year - TWO_DIGIT_YEAR_PIVOT) % 100
        elif letter in ("M", "L"):
            month = int(value) if value.isdigit() else _lookup_name(value, MONTH_NAMES, MONTH_ABBREVIATIONS)
        elif letter == "d":
            day = int(value)
        elif letter == "D":
            day_of_year = int(value)
        elif letter == "a":
            pm = value.upper() == "PM"
        elif letter == "H":
            hour = int(value)
        elif letter == "k":
            hour = int(value) % 24
        elif letter in ("h", "K"):
            hour12 = int(value) % 12
        elif letter == "m":
            minute = int(value)
        elif letter == "s":
            second = int(value)
        elif letter == "S":
            millisecond = int(value[:3].ljust(3, "0"))
        elif letter in ("Z", "z"):
            zone = _parse_zone(value)

    if hour12 is not None:
        hour = hour12 + (12 if pm else 0)
    elif pm is not None and hour < 12 and pm:
        hour += 12
    if before_common_era:
        year = 1 - year
    if day_of_year is not None:
        month, day = 1, day_of_year

    fields = FieldSet(year, month, day, hour, minute, second, millisecond)
    try:
        if day_of_year is not None:
            # day of year counts on from 1 January
            return recompose(fields, zone or ctx.zone())
        return recompose(fields, zone or ctx.zone(), strict=True)
    except InvalidFieldCombination as e:
        raise ParseError(f"invalid date {text!r}: {e}") from e


__all__ = [
    "format_pattern",
    "parse_pattern",
    "tokenize",
    "MONTH_NAMES",
    "MONTH_ABBREVIATIONS",
    "WEEKDAY_NAMES",
    "WEEKDAY_ABBREVIATIONS",
]
