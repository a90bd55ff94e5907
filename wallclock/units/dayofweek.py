"""DayOfWeek enumeration.

This module provides the DayOfWeek enum using ISO-8601 numbering:
Monday is 1 and Sunday is 7.
"""

from __future__ import annotations

from enum import IntEnum

from wallclock._internal.constants import ENGLISH_DAY_NAMES


class DayOfWeek(IntEnum):
    """A day of the week, ISO numbered.

    Examples:
        >>> DayOfWeek(7)
        <DayOfWeek.SUNDAY: 7>
        >>> DayOfWeek.SATURDAY.is_weekend
        True
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def is_weekend(self) -> bool:
        return self >= DayOfWeek.SATURDAY

    @property
    def english_name(self) -> str:
        return ENGLISH_DAY_NAMES[self.value]


__all__ = ["DayOfWeek"]
