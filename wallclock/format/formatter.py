"""Pattern formatting with PHP ``date()`` tokens.

Every letter below is replaced by a rendering of the moment; a
backslash makes the next character literal; any other character is
copied through.

Supported Tokens:
    Day:    d (01-31)  D (Mon)  j (1-31)  l (Monday)  N (1-7, Monday=1)
            S (st/nd/rd/th)  w (0-6, Sunday=0)  z (0-365)
    Week:   W (ISO week, 01-53)
    Month:  F (January)  m (01-12)  M (Jan)  n (1-12)  t (28-31)
    Year:   L (1 if leap)  o (ISO week year)  Y (2024, -0001)  y (24)
    Time:   a (am/pm)  A (AM/PM)  B (Swatch beat)  g (1-12)  G (0-23)
            h (01-12)  H (00-23)  i (00-59)  s (00-59)
            u (microseconds, 6 digits)  v (milliseconds, 3 digits)
    Zone:   e (Europe/Paris)  I (1 if DST)  O (+0200)  P (+02:00)
            p (like P, but Z for +00:00)  T (CEST)  Z (offset seconds)
    Full:   c (ISO 8601)  r (RFC 2822)  U (Unix seconds)

Functions:
    format_pattern: Render a Moment with a pattern.

Examples:
    >>> from wallclock import DateTime
    >>> DateTime("2013-11-04 20:21:22", "UTC").format("l jS \\\\o\\\\f F Y")
    'Monday 4th of November 2013'
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from wallclock._internal.calendar import (
    day_of_year,
    days_in_month,
    is_leap_year,
    iso_week,
    iso_weekday,
    ymd_to_epoch_day,
)
from wallclock._internal.constants import (
    ENGLISH_DAY_NAMES,
    ENGLISH_MONTH_NAMES,
    MICROS_PER_MILLISECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
)
from wallclock.units.timezone import TimeZone, format_offset


class Moment(NamedTuple):
    """Everything a pattern can render: wall fields plus the instant and zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    microsecond: int
    timestamp: int
    offset: int
    zone: TimeZone

    @property
    def epoch_day(self) -> int:
        return ymd_to_epoch_day(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        return iso_weekday(self.epoch_day)


def format_year(year: int) -> str:
    """Format a year with at least four digits and a sign when negative.

    Examples:
        >>> format_year(2013)
        '2013'
        >>> format_year(-1)
        '-0001'
    """
    if year >= 0:
        return f"{year:04d}"
    return f"-{-year:04d}"


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _twelve_hour(hour: int) -> int:
    return hour % 12 or 12


def _swatch_beat(m: Moment) -> str:
    # Biel Mean Time is UTC+1
    seconds = (m.timestamp + SECONDS_PER_HOUR) % SECONDS_PER_DAY
    return f"{seconds * 10 // 864 % 1000:03d}"


_TOKENS: dict[str, Callable[[Moment], str]] = {
    # Day
    "d": lambda m: f"{m.day:02d}",
    "D": lambda m: ENGLISH_DAY_NAMES[m.weekday][:3],
    "j": lambda m: str(m.day),
    "l": lambda m: ENGLISH_DAY_NAMES[m.weekday],
    "N": lambda m: str(m.weekday),
    "S": lambda m: _ordinal_suffix(m.day),
    "w": lambda m: str(m.weekday % 7),
    "z": lambda m: str(day_of_year(m.year, m.month, m.day) - 1),
    # Week
    "W": lambda m: f"{iso_week(m.epoch_day)[1]:02d}",
    # Month
    "F": lambda m: ENGLISH_MONTH_NAMES[m.month],
    "m": lambda m: f"{m.month:02d}",
    "M": lambda m: ENGLISH_MONTH_NAMES[m.month][:3],
    "n": lambda m: str(m.month),
    "t": lambda m: str(days_in_month(m.year, m.month)),
    # Year
    "L": lambda m: "1" if is_leap_year(m.year) else "0",
    "o": lambda m: str(iso_week(m.epoch_day)[0]),
    "Y": lambda m: format_year(m.year),
    "y": lambda m: f"{abs(m.year) % 100:02d}",
    # Time
    "a": lambda m: "am" if m.hour < 12 else "pm",
    "A": lambda m: "AM" if m.hour < 12 else "PM",
    "B": _swatch_beat,
    "g": lambda m: str(_twelve_hour(m.hour)),
    "G": lambda m: str(m.hour),
    "h": lambda m: f"{_twelve_hour(m.hour):02d}",
    "H": lambda m: f"{m.hour:02d}",
    "i": lambda m: f"{m.minute:02d}",
    "s": lambda m: f"{m.second:02d}",
    "u": lambda m: f"{m.microsecond:06d}",
    "v": lambda m: f"{m.microsecond // MICROS_PER_MILLISECOND:03d}",
    # Zone
    "e": lambda m: m.zone.name,
    "I": lambda m: "1" if m.zone.is_dst_at(m.timestamp) else "0",
    "O": lambda m: format_offset(m.offset, separator=""),
    "P": lambda m: format_offset(m.offset),
    "p": lambda m: "Z" if m.offset == 0 else format_offset(m.offset),
    "T": lambda m: m.zone.abbreviation_at(m.timestamp),
    "Z": lambda m: str(m.offset),
    # Full date/time
    "c": lambda m: format_pattern(m, "Y-m-d\\TH:i:sP"),
    "r": lambda m: format_pattern(m, "D, d M Y H:i:s O"),
    "U": lambda m: str(m.timestamp),
}


def format_pattern(moment: Moment, pattern: str) -> str:
    """Render ``moment`` with ``pattern``.

    Args:
        moment: The wall fields, instant and zone to render.
        pattern: Pattern of tokens and literal characters.

    Returns:
        Formatted string.

    Examples:
        >>> from wallclock.units.timezone import TimeZone
        >>> m = Moment(2013, 3, 6, 18, 0, 0, 0, 1362589200, 3600, TimeZone("Europe/Paris"))
        >>> format_pattern(m, "Y-m-d H:i:s O")
        '2013-03-06 18:00:00 +0100'
        >>> format_pattern(m, "\\\\Y\\\\e\\\\a\\\\r: Y")
        'Year: 2013'
    """
    result = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            i += 1
            if i < len(pattern):
                result.append(pattern[i])
            else:
                result.append(char)
        else:
            render = _TOKENS.get(char)
            result.append(render(moment) if render is not None else char)
        i += 1

    return "".join(result)


__all__ = ["Moment", "format_pattern", "format_year"]
