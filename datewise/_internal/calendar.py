"""Calendar utilities for Datewise.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, ordinal day numbers and the
week-based fields (weekday, week of year, week of month).

Ordinal 1 = 0001-01-01. Years use astronomical numbering, so year 0 is
1 BCE and year -1 is 2 BCE.

This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    FIRST_WEEKDAY,
    MONTHS_PER_YEAR,
)
from datewise._internal.validation import validate_month

# Days in one 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_100_YEARS = 36_524
_DAYS_PER_4_YEARS = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 400, OR
    - Divisible by 4 and NOT divisible by 100

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValidationError: If month is not in 1-12.
    """
    validate_month(month)

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def carry_month(year: int, month: int) -> tuple[int, int]:
    """Fold an out-of-range month into the year.

    Args:
        year: The year.
        month: Any month number; 13 is January of the next year and
            0 is December of the previous year.

    Returns:
        Tuple of (year, month) with month in 1-12.

    Examples:
        >>> carry_month(2024, 14)
        (2025, 2)
        >>> carry_month(2024, 0)
        (2023, 12)
    """
    extra_years, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    return (year + extra_years, month_index + 1)


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day. Values past the end of the month (or below 1)
            are counted from the first of the month, so the result
            carries into neighbouring months.

    Returns:
        The ordinal day number.
    """
    y = year - 1

    # Python's // floors toward negative infinity, which keeps this
    # valid for years before 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    # n is 0-indexed (n=0 means ordinal=1). divmod floors, so ordinals
    # before year 1 land in an earlier 400-year cycle with n >= 0.
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def weekday_from_ordinal(ordinal: int) -> int:
    """Return the weekday of an ordinal day (1=Sunday ... 7=Saturday).

    Ordinal 1 (0001-01-01) was a Monday.
    """
    return ordinal % DAYS_PER_WEEK + 1


def weekday(year: int, month: int, day: int) -> int:
    """Return the weekday of a date (1=Sunday ... 7=Saturday).

    Examples:
        >>> weekday(2024, 1, 14)  # Sunday
        1
        >>> weekday(2024, 1, 20)  # Saturday
        7
    """
    return weekday_from_ordinal(ymd_to_ordinal(year, month, day))


def week_start_ordinal(ordinal: int) -> int:
    """Return the ordinal of the first day of the week containing ordinal."""
    return ordinal - (weekday_from_ordinal(ordinal) - FIRST_WEEKDAY)


def week_of_year(year: int, month: int, day: int) -> int:
    """Return the week of the year for a date.

    Weeks start on FIRST_WEEKDAY and week 1 is the week that contains
    1 January. A week that contains the next year's 1 January is week 1,
    so 31 December can be week 1 as well.

    Examples:
        >>> week_of_year(2024, 1, 1)
        1
        >>> week_of_year(2024, 12, 31)  # Same week as 2025-01-01
        1
        >>> week_of_year(2024, 1, 7)  # Second Sunday-started week
        2
    """
    ordinal = ymd_to_ordinal(year, month, day)
    start = week_start_ordinal(ordinal)

    if start + DAYS_PER_WEEK - 1 >= ymd_to_ordinal(year + 1, 1, 1):
        return 1

    first_week_start = week_start_ordinal(ymd_to_ordinal(year, 1, 1))
    return (start - first_week_start) // DAYS_PER_WEEK + 1


def week_of_month(year: int, month: int, day: int) -> int:
    """Return the week of the month for a date.

    Week 1 is the (possibly partial) week containing the first of the month.

    Examples:
        >>> week_of_month(2024, 6, 1)  # Saturday, first week
        1
        >>> week_of_month(2024, 6, 2)  # Sunday starts week 2
        2
    """
    first_weekday = weekday(year, month, 1)
    offset = first_weekday - FIRST_WEEKDAY
    return (day - 1 + offset) // DAYS_PER_WEEK + 1


def weekday_ordinal(day: int) -> int:
    """Return which occurrence of its weekday a day is in its month.

    Examples:
        >>> weekday_ordinal(1)
        1
        >>> weekday_ordinal(15)  # Third occurrence
        3
    """
    return (day - 1) // DAYS_PER_WEEK + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "carry_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "weekday_from_ordinal",
    "weekday",
    "week_start_ordinal",
    "week_of_year",
    "week_of_month",
    "weekday_ordinal",
]
