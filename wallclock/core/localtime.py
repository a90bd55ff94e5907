"""LocalTime: a time of day with no date and no timezone."""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Any

from wallclock._internal.constants import (
    EMPTY_YMD,
    MICROS_PER_MILLISECOND,
    MICROS_PER_SECOND,
    MILLIS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from wallclock.core.datetime import BaseDateTime
from wallclock.core.immutable import DateTime
from wallclock.core.local import LocalValue, utc_delegate

if TYPE_CHECKING:
    from wallclock.core.localdate import LocalDate
    from wallclock.core.localdatetime import LocalDateTime
    from wallclock.units.month import Month

# Every LocalTime sits on the zero date, 0000-00-00 (normalized to EMPTY_YMD)
_ANCHOR = (0, 0, 0)


class LocalTime(LocalValue):
    """A time of day with microsecond precision.

    Components carry into each other (``LocalTime(0, 90)`` is 01:30) and
    the result wraps around midnight: whole days are dropped, so
    ``LocalTime(25)`` is 01:00 and adding an hour to 23:30 gives 00:30.

    Attributes:
        hour: 0-23.
        minute: 0-59.
        second: 0-59.
        microsecond: 0-999999.

    Examples:
        >>> t = LocalTime(14, 30, 0, 0)
        >>> t.to_second_of_day()
        52200
        >>> str(t)
        '14:30:00.000000'
        >>> t.format(LocalTime.FORMAT_WITHOUT_MICROSECONDS)
        '14:30:00'
    """

    __slots__ = ()

    FORMAT_WITH_MICROSECONDS = "H:i:s.u"
    FORMAT_WITHOUT_MICROSECONDS = "H:i:s"
    DEFAULT_FORMAT = FORMAT_WITH_MICROSECONDS

    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, microsecond: int = 0
    ) -> None:
        delegate = utc_delegate(*_ANCHOR, hour, minute, second, microsecond)
        if (delegate.year, delegate.month, delegate.day) != EMPTY_YMD:
            delegate = utc_delegate(
                *_ANCHOR,
                delegate.hour,
                delegate.minute,
                delegate.second,
                delegate.microsecond,
            )
        self._set_delegate(delegate)

    @classmethod
    def _from_delegate(cls, delegate: BaseDateTime) -> LocalTime:
        return cls(delegate.hour, delegate.minute, delegate.second, delegate.microsecond)

    @classmethod
    def from_value(cls, source: Any) -> LocalTime:
        """Create a time from another value or a string.

        Args:
            source: A LocalTime (returned as-is), a LocalDateTime, a
                DateTime or MutableDateTime (its wall-clock time), a
                stdlib ``time``/``datetime``, or a string accepted by
                DateTime.

        Raises:
            TypeError: For any other kind of source.

        Examples:
            >>> LocalTime.from_value("21:03:45.5")
            LocalTime(21, 3, 45, 500000)
        """
        if isinstance(source, LocalTime):
            return source
        from wallclock.core.localdatetime import LocalDateTime

        if isinstance(source, LocalDateTime):
            return source.to_time()
        if isinstance(source, BaseDateTime):
            return cls._from_delegate(source)
        if isinstance(source, (_datetime.time, _datetime.datetime)):
            return cls(source.hour, source.minute, source.second, source.microsecond)
        if isinstance(source, str):
            return cls._from_delegate(DateTime(source, "UTC"))
        raise TypeError(f"cannot create LocalTime from {type(source).__name__}")

    def _components(self) -> tuple[int, ...]:
        return (self.hour, self.minute, self.second, self.microsecond)

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

    def to_second_of_day(self) -> int:
        """Return the seconds elapsed since midnight."""
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second

    def to_millisecond_of_day(self) -> int:
        """Return the milliseconds elapsed since midnight."""
        return (
            self.to_second_of_day() * MILLIS_PER_SECOND
            + self.microsecond // MICROS_PER_MILLISECOND
        )

    def to_microsecond_of_day(self) -> int:
        """Return the microseconds elapsed since midnight."""
        return self.to_second_of_day() * MICROS_PER_SECOND + self.microsecond

    def at(self, year: int, month: Month | int, day: int) -> LocalDateTime:
        """Combine with a date given by its components."""
        from wallclock.core.localdatetime import LocalDateTime

        return LocalDateTime(
            year, month, day, self.hour, self.minute, self.second, self.microsecond
        )

    def at_date(self, date: LocalDate) -> LocalDateTime:
        """Combine with a LocalDate.

        Examples:
            >>> from wallclock.core.localdate import LocalDate
            >>> LocalTime(9).at_date(LocalDate(2014, 1, 6))
            LocalDateTime(2014, 1, 6, 9, 0, 0, 0)
        """
        return self.at(date.year, date.month_number, date.day_of_month)


__all__ = ["LocalTime"]
