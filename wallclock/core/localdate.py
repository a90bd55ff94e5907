"""LocalDate: a calendar date with no time and no timezone."""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Any

from wallclock._internal.calendar import is_leap_year
from wallclock.core.datetime import BaseDateTime
from wallclock.core.immutable import DateTime
from wallclock.core.local import LocalValue, month_number, utc_delegate
from wallclock.units.dayofweek import DayOfWeek
from wallclock.units.month import Month

if TYPE_CHECKING:
    from wallclock.core.localdatetime import LocalDateTime
    from wallclock.core.localtime import LocalTime


class LocalDate(LocalValue):
    """A date in the proleptic Gregorian calendar.

    A day past the end of the month carries into the next month
    (2013-02-29 is 2013-03-01, day 0 is the last day of the previous
    month). A month outside 1-12 is rejected with InvalidComponent.

    Attributes:
        year: The year (can be 0 or negative).
        month: The Month.
        month_number: The month as 1-12.
        day_of_month: 1-31.
        day_of_week: The ISO DayOfWeek.
        day_of_year: 1-366.
        is_leap_year: True if the year has 366 days.

    Examples:
        >>> d = LocalDate(2013, 2, 29)
        >>> str(d)
        '2013-03-01'
        >>> LocalDate(2012, Month.DECEMBER, 23).day_of_week
        <DayOfWeek.SUNDAY: 7>
        >>> LocalDate(2012, 12, 31).day_of_year
        366
    """

    __slots__ = ()

    DEFAULT_FORMAT = "Y-m-d"

    def __init__(self, year: int, month: Month | int, day: int) -> None:
        """Create a date; raises InvalidComponent for a month outside 1-12."""
        self._set_delegate(utc_delegate(year, month_number(month), day))

    @classmethod
    def _from_delegate(cls, delegate: BaseDateTime) -> LocalDate:
        return cls(delegate.year, delegate.month, delegate.day)

    @classmethod
    def from_value(cls, source: Any) -> LocalDate:
        """Create a date from another value or a string.

        Args:
            source: A LocalDate (returned as-is), a LocalDateTime, a
                DateTime or MutableDateTime (its wall-clock date), a
                stdlib ``date``/``datetime``, or a string accepted by
                DateTime (read in UTC unless it names a zone).

        Raises:
            TypeError: For any other kind of source.

        Examples:
            >>> LocalDate.from_value("2013-02-03 21:03:45")
            LocalDate(2013, 2, 3)
        """
        if isinstance(source, LocalDate):
            return source
        from wallclock.core.localdatetime import LocalDateTime

        if isinstance(source, LocalDateTime):
            return source.to_date()
        if isinstance(source, BaseDateTime):
            return cls._from_delegate(source)
        if isinstance(source, _datetime.date):
            return cls(source.year, source.month, source.day)
        if isinstance(source, str):
            return cls._from_delegate(DateTime(source, "UTC"))
        raise TypeError(f"cannot create LocalDate from {type(source).__name__}")

    def _components(self) -> tuple[int, ...]:
        return (self.year, self.month_number, self.day_of_month)

    @property
    def year(self) -> int:
        return self._delegate.year

    @property
    def month(self) -> Month:
        return Month(self._delegate.month)

    @property
    def month_number(self) -> int:
        return self._delegate.month

    @property
    def day_of_month(self) -> int:
        return self._delegate.day

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek(self._delegate.weekday)

    @property
    def day_of_year(self) -> int:
        return self._delegate.year_day

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def at(
        self, hour: int = 0, minute: int = 0, second: int = 0, microsecond: int = 0
    ) -> LocalDateTime:
        """Combine with a time of day.

        Examples:
            >>> LocalDate(2013, 2, 3).at(21, 3, 45)
            LocalDateTime(2013, 2, 3, 21, 3, 45, 0)
        """
        from wallclock.core.localdatetime import LocalDateTime

        return LocalDateTime(
            self.year,
            self.month_number,
            self.day_of_month,
            hour,
            minute,
            second,
            microsecond,
        )

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine with a LocalTime."""
        return self.at(time.hour, time.minute, time.second, time.microsecond)


__all__ = ["LocalDate"]
