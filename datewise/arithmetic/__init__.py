"""Calendar arithmetic, comparisons and range queries.

This module provides functions over Instants:
    - Calendar arithmetic with carry normalization
    - Comparison operations, with optional day granularity
    - Boundary computations (start/end of day, week, month, year)

The functions in this module serve as the canonical implementations.
The operators on Instant delegate to them.

Arithmetic Operations (from datewise.arithmetic.ops):
    - add, subtract: Apply a CalendarDelta
    - add_unit, add_mapping: Apply named unit amounts
    - add_years ... add_seconds: Single-unit shortcuts
    - set_fields, set_field, set_mapping: Replace wall-clock fields
    - calendar_difference: Field-wise difference of two instants

Comparison Operations (from datewise.arithmetic.comparisons):
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal, greater_than, greater_equal: Test ordering
    - compare, earliest, latest
    - minutes/hours/days after/before, is_in_time_range

Range Operations (from datewise.arithmetic.range_ops):
    - start_of_* / end_of_* boundaries
    - is_weekend, is_weekday, is_same_week, is_today, ...
    - today, yesterday, tomorrow, nearest_hour
"""

from __future__ import annotations

from datewise.arithmetic.ops import (
    add,
    subtract,
    add_unit,
    add_mapping,
    add_years,
    add_months,
    add_weeks,
    add_days,
    add_hours,
    add_minutes,
    add_seconds,
    set_fields,
    set_field,
    set_mapping,
    calendar_difference,
)
from datewise.arithmetic.comparisons import (
    equal,
    not_equal,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    compare,
    earliest,
    latest,
    minutes_after,
    minutes_before,
    hours_after,
    hours_before,
    days_after,
    days_before,
    is_in_time_range,
)
from datewise.arithmetic.range_ops import (
    is_leap_year,
    days_in_month,
    days_in_month_of,
    start_of_day,
    end_of_day,
    start_of_week,
    end_of_week,
    start_of_month,
    end_of_month,
    start_of_year,
    end_of_year,
    first_day_of_week,
    last_day_of_week,
    is_weekend,
    is_weekday,
    is_same_week,
    is_today,
    is_tomorrow,
    is_yesterday,
    is_this_week,
    today,
    yesterday,
    tomorrow,
    nearest_hour,
)

__all__ = [
    # Arithmetic operations
    "add",
    "subtract",
    "add_unit",
    "add_mapping",
    "add_years",
    "add_months",
    "add_weeks",
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "set_fields",
    "set_field",
    "set_mapping",
    "calendar_difference",
    # Comparison operations
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    "earliest",
    "latest",
    "minutes_after",
    "minutes_before",
    "hours_after",
    "hours_before",
    "days_after",
    "days_before",
    "is_in_time_range",
    # Range operations
    "is_leap_year",
    "days_in_month",
    "days_in_month_of",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    "first_day_of_week",
    "last_day_of_week",
    "is_weekend",
    "is_weekday",
    "is_same_week",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "is_this_week",
    "today",
    "yesterday",
    "tomorrow",
    "nearest_hour",
]
