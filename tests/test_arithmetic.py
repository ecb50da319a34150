"""Tests for the datewise.arithmetic.ops module.

This test module verifies:
    - Calendar addition and subtraction with carry (no day clamping)
    - Leap-year and month-end behaviour
    - Wall-clock versus elapsed units across DST transitions
    - Named-unit and mapping forms
    - Field setting that keeps each unset field's own value
    - Calendar differences
"""

from __future__ import annotations

import pytest

from datewise.arithmetic import (
    add,
    add_days,
    add_hours,
    add_mapping,
    add_minutes,
    add_months,
    add_seconds,
    add_unit,
    add_weeks,
    add_years,
    calendar_difference,
    set_field,
    set_fields,
    set_mapping,
    subtract,
)
from datewise.core.delta import CalendarDelta
from datewise.core.instant import Instant
from datewise.errors import UnknownTimeZone, ValidationError
from datewise.units.timezone import TimeZone


def utc(*fields: int) -> Instant:
    return Instant.from_fields(*fields, timezone="UTC")


def wall(instant: Instant, zone: str = "UTC") -> tuple[int, ...]:
    return instant.fields(zone).wall_clock


# =============================================================================
# Addition Tests
# =============================================================================


class TestAdd:
    """Tests for the add() function."""

    def test_add_days(self) -> None:
        assert wall(add(utc(2024, 1, 25), CalendarDelta(days=10), "UTC")) == (2024, 2, 4, 0, 0, 0, 0)

    def test_add_across_year(self) -> None:
        assert wall(add(utc(2023, 12, 25), CalendarDelta(days=10), "UTC"))[:3] == (2024, 1, 4)

    def test_leap_day_plus_one_year(self) -> None:
        """Feb 29 + 1 year carries to Mar 1 instead of clamping."""
        assert wall(add(utc(2024, 2, 29), CalendarDelta(years=1), "UTC"))[:3] == (2025, 3, 1)

    def test_leap_day_plus_four_years(self) -> None:
        assert wall(add(utc(2024, 2, 29), CalendarDelta(years=4), "UTC"))[:3] == (2028, 2, 29)

    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            ((2024, 1, 31), (2024, 3, 2)),
            ((2023, 1, 31), (2023, 3, 3)),
            ((2024, 3, 31), (2024, 5, 1)),
            ((2024, 1, 30), (2024, 3, 1)),
            ((2024, 1, 28), (2024, 2, 28)),
        ],
    )
    def test_month_end_carries(self, start: tuple[int, int, int], expected: tuple[int, int, int]) -> None:
        assert wall(add(utc(*start), CalendarDelta(months=1), "UTC"))[:3] == expected

    def test_months_roll_year(self) -> None:
        assert wall(add(utc(2024, 11, 15), CalendarDelta(months=3), "UTC"))[:3] == (2025, 2, 15)
        assert wall(add(utc(2024, 2, 15), CalendarDelta(months=-3), "UTC"))[:3] == (2023, 11, 15)

    def test_years_and_months_together(self) -> None:
        result = add(utc(2024, 1, 15), CalendarDelta(years=1, months=13), "UTC")
        assert wall(result)[:3] == (2026, 2, 15)

    def test_time_units(self) -> None:
        delta = CalendarDelta(hours=25, minutes=61, seconds=61)
        assert wall(add(utc(2024, 1, 15, 12), delta, "UTC")) == (2024, 1, 16, 14, 2, 1, 0)

    def test_negative_amounts(self) -> None:
        delta = CalendarDelta(days=-1, hours=-1)
        assert wall(add(utc(2024, 3, 1, 0, 30), delta, "UTC")) == (2024, 2, 28, 23, 30, 0, 0)

    def test_empty_delta_is_identity(self) -> None:
        start = utc(2024, 1, 15, 1, 2, 3, 4)
        assert add(start, CalendarDelta(), "UTC") == start

    def test_milliseconds_preserved(self) -> None:
        start = utc(2024, 1, 15, 1, 2, 3, 456)
        assert add(start, CalendarDelta(months=2), "UTC").millisecond == 456

    def test_rejects_non_delta(self) -> None:
        with pytest.raises(TypeError):
            add(utc(2024, 1, 1), 5, "UTC")  # type: ignore[arg-type]

    def test_unknown_zone_raises(self) -> None:
        with pytest.raises(UnknownTimeZone):
            add(utc(2024, 1, 1), CalendarDelta(days=1), "Nowhere/Special")

    def test_result_depends_on_zone(self) -> None:
        # 2024-01-31T23:00Z is already February 1 in Rome
        start = utc(2024, 1, 31, 23)
        assert wall(add(start, CalendarDelta(months=1), "UTC"))[:3] == (2024, 3, 2)
        assert wall(add(start, CalendarDelta(months=1), "Europe/Rome"), "Europe/Rome")[:3] == (2024, 3, 1)


class TestAddAcrossDst:
    """Day units keep the wall time; hour units are elapsed time."""

    def test_day_keeps_wall_time(self, new_york: TimeZone) -> None:
        start = Instant.from_fields(2024, 3, 9, 12, timezone=new_york)
        result = add(start, CalendarDelta(days=1), new_york)
        assert wall(result, "America/New_York") == (2024, 3, 10, 12, 0, 0, 0)
        assert result - start == 23 * 3600

    def test_hours_are_elapsed(self, new_york: TimeZone) -> None:
        start = Instant.from_fields(2024, 3, 9, 12, timezone=new_york)
        result = add(start, CalendarDelta(hours=24), new_york)
        assert wall(result, "America/New_York") == (2024, 3, 10, 13, 0, 0, 0)
        assert result - start == 24 * 3600


class TestSubtract:
    """Tests for subtract() and the add/subtract asymmetry."""

    def test_subtract_is_negated_add(self) -> None:
        start = utc(2024, 5, 20, 8)
        delta = CalendarDelta(weeks=2, hours=5)
        assert subtract(start, delta, "UTC") == add(start, -delta, "UTC")

    @pytest.mark.parametrize(
        "delta",
        [
            CalendarDelta(weeks=3),
            CalendarDelta(days=-40),
            CalendarDelta(hours=30, minutes=-7, seconds=59),
            CalendarDelta(days=1, seconds=1),
        ],
    )
    def test_round_trip_for_fixed_units(self, delta: CalendarDelta) -> None:
        start = utc(2024, 1, 31, 10, 15)
        assert subtract(add(start, delta, "UTC"), delta, "UTC") == start

    def test_month_round_trip_is_not_identity(self) -> None:
        """Jan 31 + 1 month - 1 month lands on Feb 3, not Jan 31."""
        start = utc(2023, 1, 31)
        month = CalendarDelta(months=1)
        result = subtract(add(start, month, "UTC"), month, "UTC")
        assert result != start
        assert wall(result)[:3] == (2023, 2, 3)

    def test_month_round_trip_mid_month(self) -> None:
        start = utc(2023, 1, 15)
        month = CalendarDelta(months=1)
        assert subtract(add(start, month, "UTC"), month, "UTC") == start

    def test_rejects_non_delta(self) -> None:
        with pytest.raises(TypeError):
            subtract(utc(2024, 1, 1), "1 day", "UTC")  # type: ignore[arg-type]


class TestNamedUnits:
    """Tests for add_unit(), add_mapping() and the single-unit helpers."""

    def test_add_unit(self) -> None:
        assert wall(add_unit(utc(2024, 1, 15), "weeks", 2, "UTC"))[:3] == (2024, 1, 29)

    def test_add_unit_unknown_name(self) -> None:
        with pytest.raises(ValidationError):
            add_unit(utc(2024, 1, 15), "fortnight", 1, "UTC")

    def test_add_mapping(self) -> None:
        result = add_mapping(utc(2024, 1, 15), {"month": 1, "day": 2, "hour": 3}, "UTC")
        assert wall(result) == (2024, 2, 17, 3, 0, 0, 0)

    def test_add_mapping_empty_is_identity(self) -> None:
        start = utc(2024, 1, 15)
        assert add_mapping(start, {}, "UTC") is start

    def test_helpers(self) -> None:
        start = utc(2024, 1, 15, 12)
        assert wall(add_years(start, -1, "UTC"))[:3] == (2023, 1, 15)
        assert wall(add_months(start, 1, "UTC"))[:3] == (2024, 2, 15)
        assert wall(add_weeks(start, 1, "UTC"))[:3] == (2024, 1, 22)
        assert wall(add_days(start, -15, "UTC"))[:3] == (2023, 12, 31)
        assert wall(add_hours(start, 12, "UTC"))[:4] == (2024, 1, 16, 0)
        assert wall(add_minutes(start, -1, "UTC"))[3:5] == (11, 59)
        assert wall(add_seconds(start, 75, "UTC"))[3:6] == (12, 1, 15)


# =============================================================================
# Setting Fields
# =============================================================================


class TestSetFields:
    """Tests for set_fields(), set_field() and set_mapping()."""

    def test_unset_fields_keep_their_own_value(self) -> None:
        start = utc(2024, 1, 15, 14, 30, 45, 500)
        assert wall(set_fields(start, "UTC", hour=9)) == (2024, 1, 15, 9, 30, 45, 500)

    def test_minute_keeps_minute(self) -> None:
        start = utc(2024, 1, 15, 14, 30, 45)
        assert wall(set_fields(start, "UTC", second=0)) == (2024, 1, 15, 14, 30, 0, 0)
        assert wall(set_fields(start, "UTC", hour=1)) == (2024, 1, 15, 1, 30, 45, 0)

    def test_set_everything(self) -> None:
        start = utc(2024, 1, 15)
        result = set_fields(
            start, "UTC", year=2020, month=6, day=7, hour=8, minute=9, second=10, millisecond=11
        )
        assert wall(result) == (2020, 6, 7, 8, 9, 10, 11)

    def test_set_nothing_is_identity(self) -> None:
        start = utc(2024, 1, 15)
        assert set_fields(start, "UTC") is start

    def test_overflow_carries(self) -> None:
        assert wall(set_fields(utc(2024, 4, 10), "UTC", day=31))[:3] == (2024, 5, 1)
        assert wall(set_fields(utc(2024, 1, 10), "UTC", month=2, day=30))[:3] == (2024, 3, 1)

    def test_rejects_non_integer(self) -> None:
        with pytest.raises(ValidationError):
            set_fields(utc(2024, 1, 10), "UTC", day=1.5)  # type: ignore[arg-type]

    def test_unknown_zone_raises(self) -> None:
        with pytest.raises(UnknownTimeZone):
            set_fields(utc(2024, 1, 10), "Nowhere/Special", day=1)

    def test_set_in_zone(self) -> None:
        start = utc(2024, 1, 15, 12)  # 13:00 in Rome
        result = set_fields(start, "Europe/Rome", hour=0, minute=0)
        assert wall(result, "Europe/Rome") == (2024, 1, 15, 0, 0, 0, 0)
        assert wall(result) == (2024, 1, 14, 23, 0, 0, 0)

    def test_set_field(self) -> None:
        assert wall(set_field(utc(2024, 1, 15), "month", 7, "UTC"))[:3] == (2024, 7, 15)

    def test_set_field_rejects_week(self) -> None:
        with pytest.raises(ValidationError):
            set_field(utc(2024, 1, 15), "week", 2, "UTC")

    def test_set_field_rejects_unknown_name(self) -> None:
        with pytest.raises(ValidationError):
            set_field(utc(2024, 1, 15), "decade", 2, "UTC")

    def test_set_mapping(self) -> None:
        result = set_mapping(utc(2024, 1, 15, 10), {"hours": 5, "minute": 45}, "UTC")
        assert wall(result) == (2024, 1, 15, 5, 45, 0, 0)

    def test_set_mapping_empty_is_identity(self) -> None:
        start = utc(2024, 1, 15)
        assert set_mapping(start, {}, "UTC") is start


# =============================================================================
# Calendar Difference
# =============================================================================


class TestCalendarDifference:
    """Tests for calendar_difference()."""

    def test_all_units_present(self) -> None:
        result = calendar_difference(utc(2024, 1, 15), utc(2024, 1, 15), "UTC")
        assert len(result.units) == 7
        assert result.is_zero

    def test_mixed_difference(self) -> None:
        result = calendar_difference(utc(2024, 1, 15, 10), utc(2025, 3, 20, 12, 30), "UTC")
        assert result == CalendarDelta(
            years=1, months=2, weeks=0, days=5, hours=2, minutes=30, seconds=0
        )

    def test_negative_difference_mirrors_positive(self) -> None:
        a, b = utc(2024, 1, 15, 10), utc(2025, 3, 20, 12, 30)
        assert calendar_difference(b, a, "UTC") == -calendar_difference(a, b, "UTC")

    def test_weeks_split_from_days(self) -> None:
        result = calendar_difference(utc(2024, 3, 1), utc(2024, 3, 18), "UTC")
        assert (result.months, result.weeks, result.days) == (0, 2, 3)

    def test_month_not_complete(self) -> None:
        # Jan 31 + 1 month is Mar 2, so Feb 29 is less than a month later
        result = calendar_difference(utc(2024, 1, 31), utc(2024, 2, 29), "UTC")
        assert (result.months, result.weeks, result.days) == (0, 4, 1)

    def test_time_of_day_limits_days(self) -> None:
        result = calendar_difference(utc(2024, 1, 1, 18), utc(2024, 1, 3, 6), "UTC")
        assert (result.days, result.hours) == (1, 12)

    def test_milliseconds_dropped(self) -> None:
        result = calendar_difference(utc(2024, 1, 1), utc(2024, 1, 1, 0, 0, 1, 999), "UTC")
        assert result.seconds == 1

    def test_difference_added_back(self) -> None:
        a, b = utc(2023, 5, 17, 3, 4, 5), utc(2024, 2, 29, 22, 1, 0)
        assert add(a, calendar_difference(a, b, "UTC"), "UTC") == b
