"""Internal constants for Datewise.

These constants define the fixed numbers used throughout the library.
This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
SECONDS_PER_WEEK: int = 7 * SECONDS_PER_DAY  # 604_800
SECONDS_PER_YEAR: int = 31_556_926  # mean tropical year, used for rough spans only

MILLIS_PER_MINUTE: int = SECONDS_PER_MINUTE * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = SECONDS_PER_HOUR * MILLIS_PER_SECOND
MILLIS_PER_DAY: int = SECONDS_PER_DAY * MILLIS_PER_SECOND

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal (days since 0001-01-01, which is ordinal 1) of the Unix epoch
UNIX_EPOCH_ORDINAL: int = 719_163  # 1970-01-01

# Weekday numbering: 1 = Sunday ... 7 = Saturday. Weeks start on Sunday.
SUNDAY: int = 1
MONDAY: int = 2
TUESDAY: int = 3
WEDNESDAY: int = 4
THURSDAY: int = 5
FRIDAY: int = 6
SATURDAY: int = 7
FIRST_WEEKDAY: int = SUNDAY
LAST_WEEKDAY: int = SATURDAY

# Zone offsets beyond this are rejected (Pacific/Kiritimati is UTC+14)
MAX_UTC_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR

# Two-digit years parse into [TWO_DIGIT_YEAR_PIVOT, TWO_DIGIT_YEAR_PIVOT + 99]
TWO_DIGIT_YEAR_PIVOT: int = 1950


__all__ = [
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "SECONDS_PER_YEAR",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "SUNDAY",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "FIRST_WEEKDAY",
    "LAST_WEEKDAY",
    "MAX_UTC_OFFSET_SECONDS",
    "TWO_DIGIT_YEAR_PIVOT",
]
