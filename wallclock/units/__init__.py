"""Temporal units and enumerations.

This module provides:
    - Month: Months of the year, 1-12
    - DayOfWeek: ISO days of the week, Monday=1 to Sunday=7
    - TimeZone: Interned IANA/offset timezone
    - TimeZoneLocation: Country and coordinates of a timezone
"""

from __future__ import annotations

from wallclock.units.dayofweek import DayOfWeek
from wallclock.units.location import TimeZoneLocation
from wallclock.units.month import Month
from wallclock.units.timezone import TimeZone

__all__: list[str] = [
    "DayOfWeek",
    "Month",
    "TimeZone",
    "TimeZoneLocation",
]
