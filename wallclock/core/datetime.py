"""Wall-clock datetime shared by the immutable and mutable variants.

This module provides BaseDateTime, which holds one instant (epoch
seconds plus a microsecond remainder), the TimeZone it is viewed in and
the "empty" tag. Every calendar field is derived from that state on
each read; nothing is cached, so a mutation is visible immediately.

DateTime (immutable) and MutableDateTime only differ in what
``change()``, ``add()`` and ``sub()`` do with the new state: return a
new instance or overwrite the receiver.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Mapping

from wallclock._internal.calendar import (
    day_of_year,
    iso_week,
    iso_weekday,
    seconds_to_wall,
    wall_to_seconds,
    ymd_to_epoch_day,
)
from wallclock._internal.cascade import resolve_changes
from wallclock._internal.constants import MICROS_PER_SECOND
from wallclock._internal.decorators import deprecated
from wallclock.clock import get_clock
from wallclock.config import get_default_timezone
from wallclock.core.period import Period
from wallclock.errors import (
    ParseError,
    PropertyNotDefined,
    PropertyNotWritable,
    TimezoneError,
)
from wallclock.format.formatter import Moment, format_pattern
from wallclock.format.parser import parse
from wallclock.format.patterns import EMPTY_LITERALS, FORMATS, GMT_FORMATS, ZULU_FORMATS
from wallclock.units.timezone import TimeZone

if TYPE_CHECKING:
    from wallclock.core.immutable import DateTime
    from wallclock.core.localdatetime import LocalDateTime
    from wallclock.core.mutable import MutableDateTime

# (epoch seconds, microseconds, zone, empty)
State = tuple[int, int, TimeZone, bool]

TimezoneLike = TimeZone | _datetime.tzinfo | str

_UTC_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)

_KEYWORD_DAY_SHIFT = {"today": 0, "midnight": 0, "tomorrow": 1, "yesterday": -1}


def resolve_timezone(timezone: TimezoneLike | None) -> TimeZone:
    """Return the TimeZone for an argument; None and "local" mean the default zone."""
    if timezone is None or (isinstance(timezone, str) and timezone.strip().lower() == "local"):
        return TimeZone.from_value(get_default_timezone())
    return TimeZone.from_value(timezone)


def wall_to_instant(
    tz: TimeZone,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> tuple[int, int]:
    """Resolve wall-clock components in ``tz`` to (epoch seconds, microseconds).

    Every component carries into its parent unit when out of range.
    """
    carry, microsecond = divmod(microsecond, MICROS_PER_SECOND)
    wall = wall_to_seconds(year, month, day, hour, minute, second + carry)
    return wall - tz.wall_offset(wall), microsecond


class BaseDateTime:
    """A moment in time viewed on the wall clock of a timezone.

    Attributes:
        year, month, day, hour, minute, second, microsecond: Wall-clock
            fields in the value's timezone.
        timestamp: Unix timestamp in whole seconds.
        timezone: The TimeZone the value is viewed in.
        quarter: 1-4.
        week: ISO-8601 week number.
        weekday: ISO day of the week, Monday=1 to Sunday=7.
        year_day: 1-based day of the year.
        is_empty: True for the empty date (see ``none()``).

    Reading an unknown attribute raises PropertyNotDefined; writing a
    read-only one raises PropertyNotWritable.

    Examples:
        >>> from wallclock import DateTime
        >>> dt = DateTime("2013-03-06 18:00:00", "Europe/Paris")
        >>> dt.quarter, dt.week, dt.weekday
        (1, 10, 3)
        >>> dt.utc.as_db
        '2013-03-06 17:00:00'
    """

    __slots__ = ("_seconds", "_micros", "_tz", "_empty")

    READ_ONLY_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {
            "year",
            "month",
            "day",
            "hour",
            "minute",
            "second",
            "microsecond",
            "timestamp",
            "timezone",
            "zone",
            "tz",
            "quarter",
            "week",
            "weekday",
            "year_day",
            "is_monday",
            "is_tuesday",
            "is_wednesday",
            "is_thursday",
            "is_friday",
            "is_saturday",
            "is_sunday",
            "is_today",
            "is_past",
            "is_future",
            "is_empty",
            "is_utc",
            "is_local",
            "is_dst",
            "tomorrow",
            "yesterday",
            "monday",
            "tuesday",
            "wednesday",
            "thursday",
            "friday",
            "saturday",
            "sunday",
            "utc",
            "local",
            "mutable",
            "immutable",
        }
        | {f"as_{name}" for name in FORMATS}
    )

    WRITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, time: str = "now", timezone: TimezoneLike | None = None) -> None:
        """Create a value from a date/time string.

        Args:
            time: Any form accepted by ``wallclock.format.parse``; "now"
                by default. A zone written in the string wins over
                ``timezone``.
            timezone: The zone to read the string in; None means the
                process default zone.

        Raises:
            ParseError: If the string cannot be read.
            TimezoneError: If ``timezone`` is not a known zone.

        Examples:
            >>> from wallclock import DateTime
            >>> DateTime("0000-00-00").is_empty
            True
            >>> DateTime("@0").timezone.name
            'UTC'
        """
        self._set_state(*self._state_from_string(time, timezone))

    @classmethod
    def _state_from_string(cls, text: str, timezone: TimezoneLike | None) -> State:
        parsed = parse("now" if text is None else text)

        if parsed.zone is not None:
            try:
                tz = TimeZone.from_value(parsed.zone)
            except TimezoneError as exc:
                raise ParseError(f"unknown timezone {parsed.zone!r} in {text!r}") from exc
        else:
            tz = resolve_timezone(timezone)

        if parsed.timestamp is not None:
            return parsed.timestamp, parsed.microsecond, tz, False

        now_seconds, now_micros = divmod(get_clock().now(), MICROS_PER_SECOND)
        if parsed.keyword == "now":
            return now_seconds, now_micros, tz, False

        today = seconds_to_wall(now_seconds + tz.offset_at(now_seconds))[:3]
        if parsed.keyword is not None:
            year, month, day = today
            shift = _KEYWORD_DAY_SHIFT[parsed.keyword]
            return (*wall_to_instant(tz, year, month, day + shift), tz, False)

        year, month, day = (parsed.year, parsed.month, parsed.day) if parsed.has_date else today
        hour, minute, second = (
            (parsed.hour, parsed.minute, parsed.second) if parsed.has_time else (0, 0, 0)
        )
        seconds, micros = wall_to_instant(
            tz, year, month, day, hour, minute, second, parsed.microsecond
        )
        return seconds, micros, tz, parsed.is_zero_date

    def _set_state(self, seconds: int, micros: int, tz: TimeZone, empty: bool) -> None:
        object.__setattr__(self, "_seconds", seconds)
        object.__setattr__(self, "_micros", micros)
        object.__setattr__(self, "_tz", tz)
        object.__setattr__(self, "_empty", empty)

    def _state(self) -> State:
        return self._seconds, self._micros, self._tz, self._empty

    @classmethod
    def _from_internal(
        cls,
        seconds: int,
        micros: int,
        tz: TimeZone,
        empty: bool = False,
    ):  # type: ignore[no-untyped-def]
        """Create an instance from internal state, bypassing parsing."""
        instance = object.__new__(cls)
        instance._set_state(seconds, micros, tz, empty)
        return instance

    def _apply_state(self, seconds: int, micros: int, tz: TimeZone, empty: bool):  # type: ignore[no-untyped-def]
        """Give the result of a change: a new value or the updated receiver."""
        raise NotImplementedError

    # Construction

    @classmethod
    def from_value(cls, source: Any, timezone: TimezoneLike | None = None):  # type: ignore[no-untyped-def]
        """Create a value from another value, a stdlib datetime, a timestamp or a string.

        Args:
            source: A BaseDateTime (copied, keeping its instant, zone and
                empty tag), a stdlib ``datetime`` (naive ones are read in
                ``timezone``), an int or float Unix timestamp, or a string.
            timezone: Zone for strings, timestamps and naive datetimes.

        Raises:
            TypeError: For any other kind of source.

        Examples:
            >>> from wallclock import DateTime, MutableDateTime
            >>> m = MutableDateTime("2013-02-03 21:03:45", "UTC")
            >>> DateTime.from_value(m) == m
            True
        """
        if isinstance(source, BaseDateTime):
            return cls._from_internal(*source._state())
        if isinstance(source, _datetime.datetime):
            if source.tzinfo is None or source.utcoffset() is None:
                tz = resolve_timezone(timezone)
                return cls.from_components(
                    source.year,
                    source.month,
                    source.day,
                    source.hour,
                    source.minute,
                    source.second,
                    source.microsecond,
                    timezone=tz,
                )
            delta = source - _UTC_EPOCH
            seconds = delta.days * 86_400 + delta.seconds
            return cls._from_internal(
                seconds, delta.microseconds, TimeZone.from_value(source.tzinfo)
            )
        if isinstance(source, (int, float)) and not isinstance(source, bool):
            return cls.from_timestamp(source, timezone)
        if isinstance(source, str):
            return cls(source, timezone)
        raise TypeError(f"cannot create {cls.__name__} from {type(source).__name__}")

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        *,
        timezone: TimezoneLike | None = None,
    ):  # type: ignore[no-untyped-def]
        """Create a value from wall-clock components; out-of-range values carry.

        Examples:
            >>> from wallclock import DateTime
            >>> DateTime.from_components(2013, 1, 32, timezone="UTC").as_date
            '2013-02-01'
        """
        tz = resolve_timezone(timezone)
        seconds, micros = wall_to_instant(
            tz, year, month, day, hour, minute, second, microsecond
        )
        return cls._from_internal(seconds, micros, tz)

    @classmethod
    def from_timestamp(cls, timestamp: int | float, timezone: TimezoneLike | None = None):  # type: ignore[no-untyped-def]
        """Create a value from a Unix timestamp, viewed in ``timezone``."""
        micros_total = round(timestamp * MICROS_PER_SECOND)
        seconds, micros = divmod(micros_total, MICROS_PER_SECOND)
        return cls._from_internal(seconds, micros, resolve_timezone(timezone))

    @classmethod
    def none(cls, timezone: TimezoneLike = "UTC"):  # type: ignore[no-untyped-def]
        """Return the empty date in ``timezone``.

        The empty date renders "0000-00-00" in the date and DB formats
        and stringifies to "". Its fields read the normalized zero date,
        -0001-11-30 00:00:00.

        Examples:
            >>> from wallclock import DateTime
            >>> empty = DateTime.none()
            >>> empty.is_empty, empty.as_db, str(empty)
            (True, '0000-00-00 00:00:00', '')
            >>> empty.year, empty.month, empty.day
            (-1, 11, 30)
        """
        tz = resolve_timezone(timezone)
        seconds, micros = wall_to_instant(tz, 0, 0, 0)
        return cls._from_internal(seconds, micros, tz, True)

    @classmethod
    def now(cls):  # type: ignore[no-untyped-def]
        """Return the request start time, in the default timezone."""
        seconds, micros = divmod(get_clock().request_time(), MICROS_PER_SECOND)
        return cls._from_internal(seconds, micros, resolve_timezone(None))

    @classmethod
    def right_now(cls):  # type: ignore[no-untyped-def]
        """Return the live clock time, in the default timezone."""
        seconds, micros = divmod(get_clock().now(), MICROS_PER_SECOND)
        return cls._from_internal(seconds, micros, resolve_timezone(None))

    def copy(self):  # type: ignore[no-untyped-def]
        """Return an equal value of the same type."""
        return self._from_internal(*self._state())

    def _derive(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ):  # type: ignore[no-untyped-def]
        seconds, micros = wall_to_instant(
            self._tz, year, month, day, hour, minute, second, microsecond
        )
        return self._from_internal(seconds, micros, self._tz)

    # Wall-clock fields

    def _wall(self) -> tuple[int, int, int, int, int, int]:
        return seconds_to_wall(self._seconds + self._tz.offset_at(self._seconds))

    def _wall_parts(self) -> tuple[int, int, int, int, int, int, int]:
        return (*self._wall(), self._micros)

    def _epoch_day(self) -> int:
        return ymd_to_epoch_day(*self._wall()[:3])

    @property
    def year(self) -> int:
        return self._wall()[0]

    @property
    def month(self) -> int:
        return self._wall()[1]

    @property
    def day(self) -> int:
        return self._wall()[2]

    @property
    def hour(self) -> int:
        return self._wall()[3]

    @property
    def minute(self) -> int:
        return self._wall()[4]

    @property
    def second(self) -> int:
        return self._wall()[5]

    @property
    def microsecond(self) -> int:
        return self._micros

    @property
    def timestamp(self) -> int:
        """Return the Unix timestamp in whole seconds."""
        return self._seconds

    @property
    def timezone(self) -> TimeZone:
        return self._tz

    @property
    @deprecated("use timezone instead")
    def zone(self) -> TimeZone:
        return self._tz

    @property
    @deprecated("use timezone instead")
    def tz(self) -> TimeZone:
        return self._tz

    # Derived calendar fields

    @property
    def quarter(self) -> int:
        """Return the quarter of the year (1-4)."""
        return (self.month - 1) // 3 + 1

    @property
    def week(self) -> int:
        """Return the ISO-8601 week number (1-53)."""
        return iso_week(self._epoch_day())[1]

    @property
    def weekday(self) -> int:
        """Return the ISO day of the week, Monday=1 to Sunday=7.

        Examples:
            >>> from wallclock import DateTime
            >>> DateTime("2012-12-23", "UTC").weekday  # a Sunday
            7
        """
        return iso_weekday(self._epoch_day())

    @property
    def year_day(self) -> int:
        """Return the 1-based day of the year."""
        return day_of_year(*self._wall()[:3])

    @property
    def is_monday(self) -> bool:
        return self.weekday == 1

    @property
    def is_tuesday(self) -> bool:
        return self.weekday == 2

    @property
    def is_wednesday(self) -> bool:
        return self.weekday == 3

    @property
    def is_thursday(self) -> bool:
        return self.weekday == 4

    @property
    def is_friday(self) -> bool:
        return self.weekday == 5

    @property
    def is_saturday(self) -> bool:
        return self.weekday == 6

    @property
    def is_sunday(self) -> bool:
        return self.weekday == 7

    def _live_now(self) -> BaseDateTime:
        seconds, micros = divmod(get_clock().now(), MICROS_PER_SECOND)
        return self._from_internal(seconds, micros, self._tz)

    @property
    def is_today(self) -> bool:
        """Return True if the value falls on the current day in its own timezone."""
        return self._live_now()._wall()[:3] == self._wall()[:3]

    @property
    def is_past(self) -> bool:
        return self < self._live_now()

    @property
    def is_future(self) -> bool:
        return self > self._live_now()

    @property
    def is_empty(self) -> bool:
        return self._empty

    # Navigation

    @property
    def tomorrow(self):  # type: ignore[no-untyped-def]
        """Return midnight of the next day."""
        year, month, day = self._wall()[:3]
        return self._derive(year, month, day + 1)

    @property
    def yesterday(self):  # type: ignore[no-untyped-def]
        """Return midnight of the previous day."""
        year, month, day = self._wall()[:3]
        return self._derive(year, month, day - 1)

    def _day_of_this_week(self, weekday: int):  # type: ignore[no-untyped-def]
        year, month, day = self._wall()[:3]
        return self._derive(year, month, day + weekday - self.weekday)

    @property
    def monday(self):  # type: ignore[no-untyped-def]
        """Return midnight of the Monday of this ISO week."""
        return self._day_of_this_week(1)

    @property
    def tuesday(self):  # type: ignore[no-untyped-def]
        return self._day_of_this_week(2)

    @property
    def wednesday(self):  # type: ignore[no-untyped-def]
        return self._day_of_this_week(3)

    @property
    def thursday(self):  # type: ignore[no-untyped-def]
        return self._day_of_this_week(4)

    @property
    def friday(self):  # type: ignore[no-untyped-def]
        return self._day_of_this_week(5)

    @property
    def saturday(self):  # type: ignore[no-untyped-def]
        return self._day_of_this_week(6)

    @property
    def sunday(self):  # type: ignore[no-untyped-def]
        """Return midnight of the Sunday closing this ISO week."""
        return self._day_of_this_week(7)

    # Zones and variants

    def _in_zone(self, tz: TimeZone):  # type: ignore[no-untyped-def]
        return self._from_internal(self._seconds, self._micros, tz, self._empty)

    @property
    def utc(self):  # type: ignore[no-untyped-def]
        """Return the same instant viewed in UTC."""
        return self._in_zone(TimeZone.utc())

    @property
    def local(self):  # type: ignore[no-untyped-def]
        """Return the same instant viewed in the current default timezone."""
        return self._in_zone(resolve_timezone(None))

    @property
    def is_utc(self) -> bool:
        return self._tz.is_utc

    @property
    def is_local(self) -> bool:
        return self._tz.is_local

    @property
    def is_dst(self) -> bool:
        """Return True if daylight-saving time is in effect at this instant."""
        return self._tz.is_dst_at(self._seconds)

    @property
    def mutable(self) -> MutableDateTime:
        from wallclock.core.mutable import MutableDateTime

        return MutableDateTime._from_internal(*self._state())

    @property
    def immutable(self) -> DateTime:
        from wallclock.core.immutable import DateTime

        return DateTime._from_internal(*self._state())

    # Formatting

    def _moment(self) -> Moment:
        offset = self._tz.offset_at(self._seconds)
        year, month, day, hour, minute, second = seconds_to_wall(self._seconds + offset)
        return Moment(
            year,
            month,
            day,
            hour,
            minute,
            second,
            self._micros,
            self._seconds,
            offset,
            self._tz,
        )

    def format(self, pattern: str) -> str:
        """Render the value with a pattern of PHP ``date()`` tokens.

        The empty date renders "0000-00-00" for the date pattern and
        "0000-00-00 00:00:00" for the DB pattern; every other pattern
        renders its normalized fields.

        Examples:
            >>> from wallclock import DateTime
            >>> DateTime("2013-11-04 20:21:22", "UTC").format("D, d M Y")
            'Mon, 04 Nov 2013'
        """
        if self._empty and pattern in EMPTY_LITERALS:
            return EMPTY_LITERALS[pattern]
        return format_pattern(self._moment(), pattern)

    def format_as(self, name: str) -> str:
        """Render the value in a named format from the catalog.

        RFC 822 and RFC 1123 spell a zero offset "GMT"; ISO 8601 spells
        it "Z".

        Raises:
            PropertyNotDefined: If ``name`` is not in the catalog.

        Examples:
            >>> from wallclock import DateTime
            >>> DateTime("2013-11-04 20:21:22", "UTC").format_as("rfc1123")
            'Mon, 04 Nov 2013 20:21:22 GMT'
        """
        key = name.lower()
        pattern = FORMATS.get(key)
        if pattern is None:
            raise PropertyNotDefined(f"as_{name}", type(self).__name__)
        rendered = self.format(pattern)
        if key in GMT_FORMATS:
            return rendered.replace("+0000", "GMT")
        if key in ZULU_FORMATS:
            return rendered.replace("+0000", "Z")
        return rendered

    @property
    def as_atom(self) -> str:
        return self.format_as("atom")

    @property
    def as_cookie(self) -> str:
        return self.format_as("cookie")

    @property
    def as_iso8601(self) -> str:
        return self.format_as("iso8601")

    @property
    def as_rfc822(self) -> str:
        return self.format_as("rfc822")

    @property
    def as_rfc850(self) -> str:
        return self.format_as("rfc850")

    @property
    def as_rfc1036(self) -> str:
        return self.format_as("rfc1036")

    @property
    def as_rfc1123(self) -> str:
        return self.format_as("rfc1123")

    @property
    def as_rfc2822(self) -> str:
        return self.format_as("rfc2822")

    @property
    def as_rfc3339(self) -> str:
        return self.format_as("rfc3339")

    @property
    def as_rss(self) -> str:
        return self.format_as("rss")

    @property
    def as_w3c(self) -> str:
        return self.format_as("w3c")

    @property
    def as_db(self) -> str:
        return self.format_as("db")

    @property
    def as_number(self) -> str:
        return self.format_as("number")

    @property
    def as_date(self) -> str:
        return self.format_as("date")

    @property
    def as_time(self) -> str:
        return self.format_as("time")

    # Changes

    def _changed_state(
        self,
        fields: Mapping[str, int] | None,
        cascade: bool,
        extra: Mapping[str, int],
    ) -> State | None:
        requested = dict(fields or {})
        requested.update(extra)

        year, month, day, hour, minute, second = self._wall()
        resolution = resolve_changes(
            requested, (year, month, day, hour, minute, second), cascade
        )
        if resolution.is_noop:
            return None

        micros = self._micros
        if resolution.date is not None:
            year, month, day = resolution.date
        if resolution.time is not None:
            hour, minute, second = resolution.time
            micros = 0

        seconds, micros = wall_to_instant(
            self._tz, year, month, day, hour, minute, second, micros
        )
        return seconds, micros, self._tz, False

    def change(
        self,
        fields: Mapping[str, int] | None = None,
        cascade: bool = False,
        **kwargs: int,
    ):  # type: ignore[no-untyped-def]
        """Change calendar fields.

        Args:
            fields: Any subset of year, month, day, hour, minute and
                second. Other keys are ignored; None counts as absent.
            cascade: Setting hour resets minute and second, setting
                minute resets second, unless those are given too.
            **kwargs: Fields given as keywords, merged over ``fields``.

        Returns:
            The changed value: a new DateTime, or this MutableDateTime.

        Unspecified fields keep their current value, out-of-range
        values carry (``hour=25`` is 01:00 the next day), and changing
        any time field resets the microseconds.

        Examples:
            >>> from wallclock import DateTime
            >>> dt = DateTime("2001-01-01 01:01:01", "UTC")
            >>> dt.change({"minute": 0}, cascade=True).as_time
            '01:00:00'
            >>> dt.change(hour=25).as_db
            '2001-01-02 01:01:01'
        """
        state = self._changed_state(fields, cascade, kwargs)
        if state is None:
            return self
        return self._apply_state(*state)

    def replace(
        self,
        fields: Mapping[str, int] | None = None,
        cascade: bool = False,
        **kwargs: int,
    ):  # type: ignore[no-untyped-def]
        """Return a new value with fields changed, leaving the receiver alone.

        Same arguments as ``change()``.
        """
        state = self._changed_state(fields, cascade, kwargs)
        if state is None:
            return self.copy()
        return self._from_internal(*state)

    # Arithmetic

    def _shifted_state(self, period: Period | str, sign: int) -> State:
        if isinstance(period, str):
            period = Period.parse(period)
        if not isinstance(period, Period):
            raise TypeError(f"expected Period or str, got {type(period).__name__}")
        seconds, micros = wall_to_instant(
            self._tz, *period.apply_to(self._wall_parts(), sign)
        )
        return seconds, micros, self._tz, False

    def add(self, period: Period | str):  # type: ignore[no-untyped-def]
        """Add a Period (or ISO-8601 duration string) to the wall-clock fields.

        Examples:
            >>> from wallclock import DateTime
            >>> DateTime("2013-01-31", "UTC").add("P1M").as_date
            '2013-03-03'
        """
        return self._apply_state(*self._shifted_state(period, 1))

    def sub(self, period: Period | str):  # type: ignore[no-untyped-def]
        """Subtract a Period (or ISO-8601 duration string) from the wall-clock fields."""
        return self._apply_state(*self._shifted_state(period, -1))

    def diff(self, other: Any, absolute: bool = False) -> Period:
        """Return the Period from this value to ``other``.

        Both values are compared on this value's wall clock when they
        share a timezone, in UTC otherwise. The result is negative when
        ``other`` is earlier, unless ``absolute`` is set.

        Examples:
            >>> from wallclock import DateTime
            >>> a = DateTime("2013-01-01", "UTC")
            >>> a.diff(DateTime("2013-02-02 03:00", "UTC"))
            Period(months=1, days=1, hours=3)
        """
        if not isinstance(other, BaseDateTime):
            other = type(self).from_value(other, self._tz)
        if other._tz == self._tz:
            start, end = self._wall_parts(), other._wall_parts()
        else:
            start = (*seconds_to_wall(self._seconds), self._micros)
            end = (*seconds_to_wall(other._seconds), other._micros)
        result = Period.between(start, end)
        if absolute and result.is_negative:
            result = Period.between(end, start)
        return result

    def __add__(self, other: object):  # type: ignore[no-untyped-def]
        if not isinstance(other, (Period, str)):
            return NotImplemented
        return self._from_internal(*self._shifted_state(other, 1))

    def __sub__(self, other: object):  # type: ignore[no-untyped-def]
        if isinstance(other, BaseDateTime):
            return other.diff(self)
        if not isinstance(other, (Period, str)):
            return NotImplemented
        return self._from_internal(*self._shifted_state(other, -1))

    # Conversions

    def to_local_datetime(self) -> LocalDateTime:
        """Return the wall-clock fields as a LocalDateTime."""
        from wallclock.core.localdatetime import LocalDateTime

        return LocalDateTime(*self._wall_parts())

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware stdlib datetime for the same instant.

        Raises:
            OverflowError: If the instant is outside the stdlib range.
        """
        moment = _UTC_EPOCH + _datetime.timedelta(
            seconds=self._seconds, microseconds=self._micros
        )
        return moment.astimezone(self._tz.tzinfo)

    def to_json(self) -> str:
        """Return the JSON form: the ISO-8601 string, or "" for the empty date."""
        return str(self)

    def localize(
        self,
        locale: str = "en",
        localizer: Callable[[BaseDateTime, str], Any] | None = None,
    ) -> Any:
        """Render the value through a localizer.

        Args:
            locale: Locale code handed to the localizer.
            localizer: Used instead of the process-wide one when given.

        Raises:
            LocalizerNotConfigured: If no localizer is given or defined.
        """
        if localizer is not None:
            return localizer(self, locale)
        from wallclock import localizer as _localizer

        return _localizer.localize(self, locale)

    # Attribute policy

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.READ_ONLY_FIELDS or hasattr(type(self), name):
            raise PropertyNotWritable(name, type(self).__name__)
        raise PropertyNotDefined(name, type(self).__name__)

    def __delattr__(self, name: str) -> None:
        raise PropertyNotWritable(name, type(self).__name__)

    def __getattr__(self, name: str) -> Any:
        raise PropertyNotDefined(name, type(self).__name__)

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (self._from_internal, (self._seconds, self._micros, self._tz, self._empty))

    # Comparison

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._micros)

    def __eq__(self, other: object) -> bool:
        """Check equality: same instant, whatever the zone or variant."""
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._empty:
            return f"{name}.none({self._tz.name!r})"
        year, month, day, hour, minute, second = self._wall()
        return (
            f"{name}({year}, {month}, {day}, {hour}, {minute}, {second}, "
            f"microsecond={self._micros}, timezone={self._tz.name!r})"
        )

    def __str__(self) -> str:
        """Return the ISO-8601 form, or "" for the empty date."""
        if self._empty:
            return ""
        return self.as_iso8601


__all__ = ["BaseDateTime", "resolve_timezone", "wall_to_instant"]
