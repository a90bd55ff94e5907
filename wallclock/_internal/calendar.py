"""Calendar utilities for Wallclock.

This module is the proleptic Gregorian calendar engine behind every
value type. Dates are counted as epoch days (days since 1970-01-01) and
instants as epoch seconds. Year 0 and negative years are supported
(astronomical numbering), so the zero date "0000-00-00" normalizes to
-0001-11-30 exactly as the historical engine did.

Every function that builds a day count from components carries
out-of-range values into the parent unit instead of rejecting them:
month 13 is January of the next year, day 0 is the last day of the
previous month, hour 25 is 01:00 on the next day.

This module is not part of the public API.
"""

from __future__ import annotations

from wallclock._internal.constants import (
    DAYS_IN_MONTH,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_NATIVE_WEEKDAY,
    UNIX_EPOCH_ORDINAL,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (can be 0 or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(0)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date.

    Examples:
        >>> day_of_year(2012, 12, 31)
        366
    """
    return _days_before_month(year, month) + day


def normalize_year_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Examples:
        >>> normalize_year_month(2013, 13)
        (2014, 1)
        >>> normalize_year_month(0, 0)
        (-1, 12)
    """
    carry, index = divmod(month - 1, MONTHS_PER_YEAR)
    return year + carry, index + 1


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert a valid year, month, day to an ordinal (0001-01-01 is 1).

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    # Floor division makes the leap-day count correct for negative years too
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal (0001-01-01 is 1) to year, month, day.

    The 400-year cycle is exact, so floor-dividing by it handles ordinals
    at or below zero without a separate code path.

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    n = ordinal - 1

    n400, n = divmod(n, 146097)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month = 1
    while True:
        dim = days_in_month(year, month)
        if doy <= dim:
            return (year, month, doy)
        doy -= dim
        month += 1


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01, carrying overflow.

    Month and day may be out of range; the excess carries into the year
    and month the same way adding that many months or days would.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2013, 2, 29) == ymd_to_epoch_day(2013, 3, 1)
        True
        >>> epoch_day_to_ymd(ymd_to_epoch_day(0, 0, 0))
        (-1, 11, 30)
    """
    year, month = normalize_year_month(year, month)
    return ymd_to_ordinal(year, month, 1) + (day - 1) - UNIX_EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day."""
    return ordinal_to_ymd(epoch_day + UNIX_EPOCH_ORDINAL)


def native_weekday(epoch_day: int) -> int:
    """Return the Sunday-based weekday (Sunday=0, Saturday=6)."""
    return (epoch_day + UNIX_EPOCH_NATIVE_WEEKDAY) % 7


def iso_weekday(epoch_day: int) -> int:
    """Return the ISO weekday (Monday=1, Sunday=7).

    The native numbering starts the week on Sunday with 0; ISO keeps
    Monday as 1 and moves Sunday to 7.

    Examples:
        >>> iso_weekday(ymd_to_epoch_day(2012, 12, 23))  # a Sunday
        7
        >>> iso_weekday(ymd_to_epoch_day(2012, 12, 17))  # a Monday
        1
    """
    return native_weekday(epoch_day) or 7


def iso_week(epoch_day: int) -> tuple[int, int]:
    """Return the ISO-8601 (week-numbering year, week number) of a day.

    The week belongs to the year its Thursday falls in.

    Examples:
        >>> iso_week(ymd_to_epoch_day(2012, 1, 1))
        (2011, 52)
        >>> iso_week(ymd_to_epoch_day(2012, 1, 16))
        (2012, 3)
    """
    thursday = epoch_day + 4 - iso_weekday(epoch_day)
    week_year = epoch_day_to_ymd(thursday)[0]
    first = ymd_to_epoch_day(week_year, 1, 1)
    return week_year, (thursday - first) // 7 + 1


def wall_to_seconds(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Convert wall-clock components to seconds since the epoch, carrying overflow.

    The result is expressed on the same axis as the components; no
    timezone offset is applied.

    Examples:
        >>> wall_to_seconds(1970, 1, 1, 25)
        90000
    """
    days = ymd_to_epoch_day(year, month, day)
    return (
        days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


def seconds_to_wall(seconds: int) -> tuple[int, int, int, int, int, int]:
    """Split seconds since the epoch into (year, month, day, hour, minute, second).

    Examples:
        >>> seconds_to_wall(0)
        (1970, 1, 1, 0, 0, 0)
        >>> seconds_to_wall(-1)
        (1969, 12, 31, 23, 59, 59)
    """
    days, rest = divmod(seconds, SECONDS_PER_DAY)
    hour, rest = divmod(rest, SECONDS_PER_HOUR)
    minute, second = divmod(rest, SECONDS_PER_MINUTE)
    year, month, day = epoch_day_to_ymd(days)
    return (year, month, day, hour, minute, second)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "day_of_year",
    "normalize_year_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "native_weekday",
    "iso_weekday",
    "iso_week",
    "wall_to_seconds",
    "seconds_to_wall",
]
