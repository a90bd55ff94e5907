"""Internal constants for Wallclock.

These constants define the unit conversions, calendar tables and
sentinel values used throughout the library. This module is not part
of the public API.
"""

from __future__ import annotations

# Time unit conversions
MICROS_PER_MILLISECOND: int = 1_000
MICROS_PER_SECOND: int = 1_000_000
MILLIS_PER_SECOND: int = 1_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

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

# Ordinal (days since 0001-01-01, which is ordinal 1) of 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163

# 1970-01-01 was a Thursday; Sunday-based numbering (Sunday=0)
UNIX_EPOCH_NATIVE_WEEKDAY: int = 4

# The zero date "0000-00-00" after calendar normalization
EMPTY_YMD: tuple[int, int, int] = (-1, 11, 30)

# Literal renderings of the zero date
ZERO_DATE: str = "0000-00-00"
ZERO_DATETIME: str = "0000-00-00 00:00:00"

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 24 * SECONDS_PER_HOUR

ENGLISH_MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# ISO numbering, index 1 = Monday
ENGLISH_DAY_NAMES: tuple[str, ...] = (
    "",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


__all__ = [
    "MICROS_PER_MILLISECOND",
    "MICROS_PER_SECOND",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MONTHS_PER_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "UNIX_EPOCH_NATIVE_WEEKDAY",
    "EMPTY_YMD",
    "ZERO_DATE",
    "ZERO_DATETIME",
    "MAX_UTC_OFFSET_SECONDS",
    "ENGLISH_MONTH_NAMES",
    "ENGLISH_DAY_NAMES",
]
