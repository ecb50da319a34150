"""Tests for formatting and parsing.

This test module verifies:
    - The fixed formats (ISO 8601, RSS, AltRSS) and custom patterns
    - Pattern fields, literals and malformed patterns
    - Parse failures (empty input, mismatches, unknown zones, bad dates)
    - FormatContext
    - Style-based formatting
"""

from __future__ import annotations

import pytest

from datewise.core.instant import Instant
from datewise.errors import ParseError, ValidationError
from datewise.format import (
    Custom,
    DateFormat,
    DateStyle,
    FormatContext,
    format_instant,
    format_pattern,
    format_styled,
    parse,
    parse_pattern,
    to_iso_string,
    to_long_date_string,
    to_long_time_string,
    to_medium_string,
    to_short_date_string,
    to_short_string,
    to_short_time_string,
    try_parse,
)

REFERENCE = Instant.from_timestamp(1_705_329_045)  # Monday 2024-01-15 14:30:45Z
REFERENCE_MS = Instant.from_millis(1_705_329_045_123)


# =============================================================================
# Fixed Formats
# =============================================================================


class TestParseIso8601:
    """Tests for parse(text, DateFormat.ISO8601)."""

    def test_with_fraction_and_offset(self) -> None:
        assert parse("2024-01-15T14:30:45.250+0100", DateFormat.ISO8601).millis == 1_705_325_445_250

    def test_zulu(self) -> None:
        assert parse("2024-01-15T14:30:45Z", DateFormat.ISO8601) == REFERENCE

    def test_fraction_is_optional(self) -> None:
        assert parse("2024-01-15T14:30:45+0000", DateFormat.ISO8601) == REFERENCE

    def test_colon_offset(self) -> None:
        assert parse("2024-01-15T16:30:45+02:00", DateFormat.ISO8601) == REFERENCE

    def test_invalid_date(self) -> None:
        with pytest.raises(ParseError):
            parse("2023-02-29T00:00:00Z", DateFormat.ISO8601)

    def test_not_iso(self) -> None:
        with pytest.raises(ParseError):
            parse("15 Jan 2024 14:30:45 GMT", DateFormat.ISO8601)


class TestParseRss:
    """Tests for the RSS and AltRSS formats."""

    def test_rss(self) -> None:
        assert parse("Mon, 15 Jan 2024 14:30:45 GMT", DateFormat.RSS) == REFERENCE

    def test_rss_offset(self) -> None:
        assert parse("Mon, 15 Jan 2024 16:30:45 +0200", DateFormat.RSS) == REFERENCE

    def test_rss_abbreviation(self) -> None:
        assert parse("Mon, 15 Jan 2024 09:30:45 EST", DateFormat.RSS) == REFERENCE

    def test_rss_trailing_z_is_gmt(self) -> None:
        assert parse("Mon, 15 Jan 2024 14:30:45 Z", DateFormat.RSS) == parse(
            "Mon, 15 Jan 2024 14:30:45 GMT", DateFormat.RSS
        )

    def test_alt_rss_trailing_z_is_gmt(self) -> None:
        with_z = parse("9 Sep 2011 15:26:08 Z", DateFormat.ALT_RSS)
        with_gmt = parse("9 Sep 2011 15:26:08 GMT", DateFormat.ALT_RSS)
        assert with_z == with_gmt
        assert with_z == parse("2011-09-09T15:26:08Z", DateFormat.ISO8601)

    def test_weekday_name_not_checked(self) -> None:
        assert parse("Tue, 15 Jan 2024 14:30:45 GMT", DateFormat.RSS) == REFERENCE

    def test_alt_rss_rejects_rss_text(self) -> None:
        assert try_parse("Mon, 15 Jan 2024 14:30:45 GMT", DateFormat.ALT_RSS) is None


class TestParseFailures:
    """Failures raise ParseError, or return None from try_parse()."""

    @pytest.mark.parametrize("fmt", [DateFormat.ISO8601, DateFormat.RSS, DateFormat.ALT_RSS, Custom("yyyy")])
    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_input(self, text: str, fmt: object) -> None:
        with pytest.raises(ParseError):
            parse(text, fmt)  # type: ignore[arg-type]
        assert try_parse(text, fmt) is None  # type: ignore[arg-type]

    def test_garbage(self) -> None:
        with pytest.raises(ParseError):
            parse("not a date", DateFormat.RSS)
        assert try_parse("not a date", DateFormat.ISO8601) is None

    def test_unknown_zone_in_text(self) -> None:
        with pytest.raises(ParseError):
            parse("15 Jan 2024 10:00 Mars/Base", "d MMM yyyy HH:mm zzzz")

    def test_try_parse_success(self) -> None:
        assert try_parse("2024-01-15T14:30:45Z", DateFormat.ISO8601) == REFERENCE

    def test_bad_format_type(self) -> None:
        with pytest.raises(TypeError):
            parse("2024", 42)  # type: ignore[arg-type]


class TestFormatFixed:
    """Tests for format_instant() and to_iso_string()."""

    def test_iso8601(self) -> None:
        assert format_instant(REFERENCE, DateFormat.ISO8601, "UTC") == "2024-01-15T14:30:45+0000"
        assert format_instant(REFERENCE, DateFormat.ISO8601, "Europe/Rome") == "2024-01-15T15:30:45+0100"

    def test_rss(self) -> None:
        assert format_instant(REFERENCE, DateFormat.RSS, "UTC") == "Mon, 15 Jan 2024 14:30:45 +0000"
        assert format_instant(REFERENCE, DateFormat.RSS, "Europe/Rome") == "Mon, 15 Jan 2024 15:30:45 +0100"

    def test_alt_rss(self) -> None:
        assert format_instant(REFERENCE, DateFormat.ALT_RSS, "America/New_York") == "15 Jan 2024 09:30:45 -0500"

    def test_custom(self) -> None:
        assert format_instant(REFERENCE, Custom("dd/MM/yyyy"), "UTC") == "15/01/2024"
        assert format_instant(REFERENCE, "yyyy", "UTC") == "2024"

    def test_formats_parse_back(self) -> None:
        for fmt in (DateFormat.ISO8601, DateFormat.RSS, DateFormat.ALT_RSS):
            for zone in ("UTC", "Europe/Rome", "America/New_York"):
                text = format_instant(REFERENCE, fmt, zone)
                assert parse(text, fmt) == REFERENCE, (fmt, zone, text)

    def test_to_iso_string(self) -> None:
        assert to_iso_string(REFERENCE_MS) == "2024-01-15T14:30:45.123Z"
        assert to_iso_string(Instant.from_millis(-1)) == "1969-12-31T23:59:59.999Z"

    def test_iso_string_ignores_default_zone(self) -> None:
        context_free = to_iso_string(REFERENCE)
        assert context_free.endswith("14:30:45.000Z")


# =============================================================================
# Patterns
# =============================================================================


class TestFormatPattern:
    """Tests for the individual pattern fields."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("G GGGG GGGGG", "AD Anno Domini A"),
            ("yy y yyyyy", "24 2024 02024"),
            ("M MM MMM MMMM MMMMM", "1 01 Jan January J"),
            ("LLL", "Jan"),
            ("d dd D DDD", "15 15 15 015"),
            ("E EEE EEEE EEEEE", "Mon Mon Monday M"),
            ("F w W", "3 3 3"),
            ("a H k h K", "PM 14 14 2 2"),
            ("hh:mm:ss", "02:30:45"),
            ("S SS SSS SSSS", "1 12 123 1230"),
            ("Z ZZZZ ZZZZZ", "+0000 GMT Z"),
            ("z zzzz", "GMT UTC"),
        ],
    )
    def test_fields_utc(self, pattern: str, expected: str) -> None:
        assert format_pattern(REFERENCE_MS, pattern, "UTC") == expected

    def test_zone_fields(self) -> None:
        assert format_pattern(REFERENCE, "Z ZZZZ ZZZZZ z zzzz", "Europe/Rome") == (
            "+0100 GMT+01:00 +01:00 CET Europe/Rome"
        )
        assert format_pattern(REFERENCE, "Z z", "+05:30") == "+0530 GMT+5:30"

    def test_midnight_hours(self) -> None:
        midnight = Instant.from_fields(2024, 1, 15, timezone="UTC")
        assert format_pattern(midnight, "H k h K a", "UTC") == "0 24 12 0 AM"

    def test_literals(self) -> None:
        assert format_pattern(REFERENCE, "'week' w, 'o''clock' h", "UTC") == "week 3, o'clock 2"
        assert format_pattern(REFERENCE, "''yy''", "UTC") == "'24'"
        assert format_pattern(REFERENCE, "yyyy-MM-dd'T'HH", "UTC") == "2024-01-15T14"

    def test_before_common_era(self) -> None:
        assert format_pattern(Instant.from_fields(0, 1, 1, timezone="UTC"), "y G", "UTC") == "1 BC"
        assert format_pattern(Instant.from_fields(-99, 1, 1, timezone="UTC"), "y G", "UTC") == "100 BC"

    @pytest.mark.parametrize("pattern", ["yyyy-qq", "'unterminated", "HH:mm:ss Q"])
    def test_malformed_pattern(self, pattern: str) -> None:
        with pytest.raises(ValueError):
            format_pattern(REFERENCE, pattern, "UTC")


class TestParsePattern:
    """Tests for parse_pattern()."""

    def test_month_names(self) -> None:
        expected = Instant.from_fields(2024, 1, 15, timezone="UTC")
        assert parse_pattern("15 January 2024", "d MMMM yyyy", "UTC") == expected
        assert parse_pattern("15 jan 2024", "d MMM yyyy", "UTC") == expected

    def test_missing_fields_default_to_epoch_date(self) -> None:
        assert parse_pattern("14:30", "HH:mm", "UTC").millis == 52_200_000

    def test_two_digit_year_window(self) -> None:
        assert parse_pattern("15/01/49", "dd/MM/yy", "UTC").fields("UTC").year == 2049
        assert parse_pattern("15/01/50", "dd/MM/yy", "UTC").fields("UTC").year == 1950

    @pytest.mark.parametrize(
        ("text", "hour"),
        [("12:15 AM", 0), ("12:15 PM", 12), ("1:00 pm", 13), ("11:59 am", 11)],
    )
    def test_twelve_hour_clock(self, text: str, hour: int) -> None:
        assert parse_pattern(text, "h:mm a", "UTC").fields("UTC").hour == hour

    def test_era(self) -> None:
        assert parse_pattern("1 BC", "y G", "UTC").fields("UTC").year == 0

    def test_day_of_year(self) -> None:
        assert parse_pattern("2024-060", "yyyy-DDD", "UTC").fields("UTC").ymd == (2024, 2, 29)

    def test_fraction(self) -> None:
        assert parse_pattern("45.5", "ss.S", "UTC").millis == 45_500
        assert parse_pattern("45.123456", "ss.SSSSSS", "UTC").millis == 45_123

    def test_invalid_date_raises(self) -> None:
        with pytest.raises(ParseError, match="day must be between 1 and 28"):
            parse_pattern("Feb 30 2023", "MMM d yyyy", "UTC")

    def test_invalid_time_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_pattern("24:00", "HH:mm", "UTC")

    def test_context_zone(self) -> None:
        assert parse_pattern("2024-01-15 10:00", "yyyy-MM-dd HH:mm", "Europe/Rome").timestamp == 1_705_309_200

    def test_zone_in_text_overrides_context(self) -> None:
        result = parse_pattern("2024-01-15 10:00 +0200", "yyyy-MM-dd HH:mm Z", "America/New_York")
        assert result.timestamp == 1_705_305_600

    def test_zone_name_in_text(self) -> None:
        result = parse_pattern("2024-01-15 10:00 Asia/Tokyo", "yyyy-MM-dd HH:mm zzzz", "UTC")
        assert result.fields("UTC").hour == 1

    def test_mismatch(self) -> None:
        with pytest.raises(ParseError):
            parse_pattern("2024/01/15", "yyyy-MM-dd", "UTC")

    def test_surrounding_whitespace(self) -> None:
        assert parse_pattern("  2024-01-15 ", "yyyy-MM-dd", "UTC").fields("UTC").ymd == (2024, 1, 15)


# =============================================================================
# Context
# =============================================================================


class TestFormatContext:
    """Tests for FormatContext."""

    def test_default_locale(self) -> None:
        assert FormatContext().locale == "en_US_POSIX"

    @pytest.mark.parametrize("locale", ["en", "en_GB", "en-US", "EN_us"])
    def test_english_locales(self, locale: str) -> None:
        assert FormatContext(locale=locale).locale == locale

    @pytest.mark.parametrize("locale", ["it_IT", "fr", "de-DE"])
    def test_other_locales_rejected(self, locale: str) -> None:
        with pytest.raises(ValidationError):
            FormatContext(locale=locale)

    def test_with_timezone(self) -> None:
        ctx = FormatContext("UTC", "en_GB").with_timezone("Asia/Tokyo")
        assert ctx.zone().identifier == "Asia/Tokyo"
        assert ctx.locale == "en_GB"

    def test_context_is_immutable(self) -> None:
        ctx = FormatContext("UTC")
        with pytest.raises(AttributeError):
            ctx.timezone = "Europe/Rome"  # type: ignore[misc]

    def test_context_drives_formatting(self) -> None:
        ctx = FormatContext("Asia/Tokyo")
        assert format_instant(REFERENCE, "HH:mm", ctx) == "23:30"


# =============================================================================
# Styles
# =============================================================================


class TestStyles:
    """Tests for format_styled() and the style helpers."""

    @pytest.mark.parametrize(
        ("date_style", "time_style", "expected"),
        [
            (DateStyle.SHORT, DateStyle.SHORT, "1/15/24, 2:30 PM"),
            (DateStyle.MEDIUM, DateStyle.MEDIUM, "Jan 15, 2024, 2:30:45 PM"),
            (DateStyle.LONG, DateStyle.LONG, "January 15, 2024 at 2:30:45 PM GMT"),
            (DateStyle.FULL, DateStyle.NONE, "Monday, January 15, 2024"),
            (DateStyle.NONE, DateStyle.SHORT, "2:30 PM"),
            (DateStyle.NONE, DateStyle.NONE, ""),
        ],
    )
    def test_styles(self, date_style: DateStyle, time_style: DateStyle, expected: str) -> None:
        assert format_styled(REFERENCE, date_style, time_style, "UTC") == expected

    def test_full_in_zone(self) -> None:
        assert format_styled(REFERENCE, DateStyle.FULL, DateStyle.FULL, "Europe/Rome") == (
            "Monday, January 15, 2024 at 3:30:45 PM Europe/Rome"
        )

    def test_helpers(self) -> None:
        assert to_short_string(REFERENCE, "UTC") == "1/15/24, 2:30 PM"
        assert to_medium_string(REFERENCE, "UTC") == "Jan 15, 2024, 2:30:45 PM"
        assert to_short_date_string(REFERENCE, "UTC") == "1/15/24"
        assert to_long_date_string(REFERENCE, "UTC") == "January 15, 2024"
        assert to_short_time_string(REFERENCE, "UTC") == "2:30 PM"
        assert to_long_time_string(REFERENCE, "UTC") == "2:30:45 PM GMT"

    @pytest.mark.parametrize(
        ("days", "expected"),
        [(0, "Today"), (1, "Yesterday"), (-1, "Tomorrow"), (2, "1/15/24")],
    )
    def test_relative_date(self, days: int, expected: str) -> None:
        now = REFERENCE + days * 86_400
        result = format_styled(
            REFERENCE, DateStyle.SHORT, DateStyle.NONE, "UTC", relative_date=True, now=now
        )
        assert result == expected

    def test_relative_date_with_time(self) -> None:
        result = format_styled(
            REFERENCE, DateStyle.LONG, DateStyle.SHORT, "UTC", relative_date=True, now=REFERENCE
        )
        assert result == "Today at 2:30 PM"
