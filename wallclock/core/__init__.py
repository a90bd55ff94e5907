"""Core value types.

This module provides the value types:
    - DateTime: Immutable wall-clock datetime
    - MutableDateTime: Wall-clock datetime that changes in place
    - LocalDate: Calendar date with no timezone
    - LocalTime: Time of day with no timezone
    - LocalDateTime: Date and time of day with no timezone
    - Period: Signed calendar interval (years down to microseconds)
"""

from __future__ import annotations

from wallclock.core.datetime import BaseDateTime
from wallclock.core.immutable import DateTime
from wallclock.core.localdate import LocalDate
from wallclock.core.localdatetime import LocalDateTime
from wallclock.core.localtime import LocalTime
from wallclock.core.mutable import MutableDateTime
from wallclock.core.period import Period

__all__: list[str] = [
    "BaseDateTime",
    "DateTime",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "MutableDateTime",
    "Period",
]
