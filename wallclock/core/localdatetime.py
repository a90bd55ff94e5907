"""LocalDateTime: a date and time of day with no timezone."""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from wallclock._internal.calendar import is_leap_year
from wallclock.core.datetime import BaseDateTime
from wallclock.core.immutable import DateTime
from wallclock.core.local import LocalValue, month_number, utc_delegate
from wallclock.core.localdate import LocalDate
from wallclock.core.localtime import LocalTime
from wallclock.units.dayofweek import DayOfWeek
from wallclock.units.month import Month


class LocalDateTime(LocalValue):
    """A date and a time of day, free of any timezone.

    Every component carries into its parent unit when out of range
    (``hour=24`` is midnight of the next day), except the month, which
    must be 1-12.

    Examples:
        >>> ldt = LocalDateTime(2013, 2, 3, 21, 3, 45)
        >>> str(ldt)
        '2013-02-03T21:03:45.000000'
        >>> ldt.to_date(), ldt.to_time()
        (LocalDate(2013, 2, 3), LocalTime(21, 3, 45, 0))
    """

    __slots__ = ()

    DEFAULT_FORMAT = "Y-m-d\\TH:i:s.u"

    def __init__(
        self,
        year: int,
        month: Month | int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> None:
        self._set_delegate(
            utc_delegate(year, month_number(month), day, hour, minute, second, microsecond)
        )

    @classmethod
    def _from_delegate(cls, delegate: BaseDateTime) -> LocalDateTime:
        return cls(
            delegate.year,
            delegate.month,
            delegate.day,
            delegate.hour,
            delegate.minute,
            delegate.second,
            delegate.microsecond,
        )

    @classmethod
    def from_value(cls, source: Any) -> LocalDateTime:
        """Create a value from a datetime or a string.

        Args:
            source: A LocalDateTime (returned as-is), a DateTime or
                MutableDateTime (its wall-clock fields), a stdlib
                ``datetime``, or a string accepted by DateTime.

        Raises:
            TypeError: For any other kind of source.

        Examples:
            >>> LocalDateTime.from_value("2013-02-03T21:03:45+09:00")
            LocalDateTime(2013, 2, 3, 21, 3, 45, 0)
        """
        if isinstance(source, LocalDateTime):
            return source
        if isinstance(source, BaseDateTime):
            return cls._from_delegate(source)
        if isinstance(source, _datetime.datetime):
            return cls(
                source.year,
                source.month,
                source.day,
                source.hour,
                source.minute,
                source.second,
                source.microsecond,
            )
        if isinstance(source, str):
            return cls._from_delegate(DateTime(source, "UTC"))
        raise TypeError(f"cannot create LocalDateTime from {type(source).__name__}")

    def _components(self) -> tuple[int, ...]:
        d = self._delegate
        return (d.year, d.month, d.day, d.hour, d.minute, d.second, d.microsecond)

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

    @property
    def hour(self) -> int:
        return self._delegate.hour

    @property
    def minute(self) -> int:
        return self._delegate.minute

    @property
    def second(self) -> int:
        return self._delegate.second

    @property
    def microsecond(self) -> int:
        return self._delegate.microsecond

    def to_date(self) -> LocalDate:
        return LocalDate(self.year, self.month_number, self.day_of_month)

    def to_time(self) -> LocalTime:
        return LocalTime(self.hour, self.minute, self.second, self.microsecond)


__all__ = ["LocalDateTime"]
