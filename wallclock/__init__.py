"""Wallclock: wall-clock datetimes with calendar fields and named formats.

Wallclock wraps an instant and a timezone and exposes the calendar as
people read it: quarter, ISO week, weekday, day of the year, the Monday
of the week, tomorrow at midnight, and a catalog of named formats.

Core Types:
    DateTime: Immutable wall-clock datetime
    MutableDateTime: Wall-clock datetime that changes in place
    LocalDate: Calendar date with no timezone
    LocalTime: Time of day with no timezone
    LocalDateTime: Date and time with no timezone
    Period: Signed calendar interval

Units:
    Month: January=1 to December=12
    DayOfWeek: Monday=1 to Sunday=7
    TimeZone: Interned IANA or fixed-offset timezone
    TimeZoneLocation: Country and coordinates of a timezone

Exceptions:
    WallclockError: Base exception
    PropertyNotDefined: Unknown field name
    PropertyNotWritable: Write to a read-only field
    LocalizerNotConfigured: localize() with no localizer
    InvalidComponent: Month outside 1-12
    ParseError: Unreadable date/time string
    TimezoneError: Unknown timezone

Example:
    >>> from wallclock import DateTime, Period
    >>> dt = DateTime("2013-11-04 20:21:22", "UTC")
    >>> dt.as_cookie
    'Monday, 04-Nov-2013 20:21:22 UTC'
    >>> (dt + Period(days=1)).is_tuesday
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from wallclock.core.immutable import DateTime
from wallclock.core.localdate import LocalDate
from wallclock.core.localdatetime import LocalDateTime
from wallclock.core.localtime import LocalTime
from wallclock.core.mutable import MutableDateTime
from wallclock.core.period import Period

# Units
from wallclock.units.dayofweek import DayOfWeek
from wallclock.units.location import TimeZoneLocation
from wallclock.units.month import Month
from wallclock.units.timezone import TimeZone

# Exceptions
from wallclock.errors import (
    InvalidComponent,
    LocalizerNotConfigured,
    ParseError,
    PropertyNotDefined,
    PropertyNotWritable,
    TimezoneError,
    WallclockError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "MutableDateTime",
    "Period",
    # Units
    "DayOfWeek",
    "Month",
    "TimeZone",
    "TimeZoneLocation",
    # Exceptions
    "WallclockError",
    "PropertyNotDefined",
    "PropertyNotWritable",
    "LocalizerNotConfigured",
    "InvalidComponent",
    "ParseError",
    "TimezoneError",
]
