"""Month enumeration.

This module provides the Month enum, numbered 1 (January) to 12
(December) like the calendar itself.
"""

from __future__ import annotations

from enum import IntEnum

from wallclock._internal.calendar import days_in_month
from wallclock._internal.constants import ENGLISH_MONTH_NAMES


class Month(IntEnum):
    """A month of the year.

    Members compare and sort like their numbers, and ``Month(n)``
    raises ValueError for a number outside 1-12.

    Examples:
        >>> Month(2)
        <Month.FEBRUARY: 2>
        >>> Month.FEBRUARY.length(2024)
        29
        >>> Month.DECEMBER > Month.JANUARY
        True
    """

    JANUARY = 1
    """31 days."""
    FEBRUARY = 2
    """28 days, 29 in leap years."""
    MARCH = 3
    """31 days."""
    APRIL = 4
    """30 days."""
    MAY = 5
    """31 days."""
    JUNE = 6
    """30 days."""
    JULY = 7
    """31 days."""
    AUGUST = 8
    """31 days."""
    SEPTEMBER = 9
    """30 days."""
    OCTOBER = 10
    """31 days."""
    NOVEMBER = 11
    """30 days."""
    DECEMBER = 12
    """31 days."""

    @property
    def quarter(self) -> int:
        """Return the quarter (1-4) the month belongs to."""
        return (self.value - 1) // 3 + 1

    @property
    def english_name(self) -> str:
        return ENGLISH_MONTH_NAMES[self.value]

    def length(self, year: int) -> int:
        """Return the number of days of this month in ``year``."""
        return days_in_month(year, self.value)


__all__ = ["Month"]
