"""Period class representing calendar-based intervals.

This module provides the Period class: a signed amount of years,
months, days, hours, minutes, seconds and microseconds. It is what
``add()``/``sub()`` take and what ``diff()``/``compare_to()`` return.
"""

from __future__ import annotations

import re

from wallclock._internal.calendar import wall_to_seconds
from wallclock._internal.constants import (
    MICROS_PER_SECOND,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from wallclock.errors import ParseError

# (year, month, day, hour, minute, second, microsecond) on one wall clock
WallParts = tuple[int, int, int, int, int, int, int]

_ISO_DURATION = re.compile(
    r"^(?P<sign>[+-])?P"
    r"(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)(?:[.,](?P<fraction>\d+))?S)?)?$"
)

_FIELDS = ("years", "months", "days", "hours", "minutes", "seconds", "microseconds")


def _wall_micros(parts: WallParts) -> int:
    return wall_to_seconds(*parts[:6]) * MICROS_PER_SECOND + parts[6]


class Period:
    """A calendar-based interval with date and time components.

    Components are stored as given, without normalization, and may be
    negative. Weeks are accepted for convenience and folded into days.

    Applying a period adds each component to the matching wall-clock
    field and lets the calendar carry the excess, so adding one month to
    January 31st lands in early March rather than being clamped.

    Attributes:
        years, months, days, hours, minutes, seconds, microseconds: The
            signed components.
        total_days: Whole days between the two ends, for periods
            produced by ``between()``; None otherwise.

    Examples:
        >>> p = Period(years=1, months=2)
        >>> p.years, p.months
        (1, 2)

        >>> Period(weeks=2).days
        14

        >>> Period.parse("P1Y2M3DT4H5M6S")
        Period(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)
    """

    __slots__ = (
        "_years",
        "_months",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_microseconds",
        "_total_days",
    )

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        microseconds: int = 0,
    ) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero.

        Examples:
            >>> Period(months=-3)  # 3 months ago
            Period(months=-3)
        """
        self._years = years
        self._months = months
        self._days = weeks * 7 + days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._microseconds = microseconds
        self._total_days: int | None = None

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        return cls(weeks=weeks)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(days=days)

    @classmethod
    def zero(cls) -> Period:
        """Create a zero-length period."""
        return cls()

    @classmethod
    def parse(cls, s: str) -> Period:
        """Parse an ISO-8601 duration such as ``P1Y``, ``PT2M`` or ``-P1DT12H``.

        Args:
            s: The duration string.

        Returns:
            The Period it denotes. A leading ``-`` negates every component.

        Raises:
            ParseError: If the string is not an ISO-8601 duration.

        Examples:
            >>> Period.parse("PT1H")
            Period(hours=1)
            >>> Period.parse("P2W")
            Period(days=14)
            >>> Period.parse("PT0.5S")
            Period(microseconds=500000)
        """
        match = _ISO_DURATION.match(s.strip())
        if match is None or s.strip().rstrip("T").endswith("P") or s.strip().endswith("T"):
            raise ParseError(f"invalid ISO 8601 duration: {s!r}")

        values = {
            name: int(match[name] or 0)
            for name in ("years", "months", "weeks", "days", "hours", "minutes", "seconds")
        }
        fraction = match["fraction"]
        microseconds = int(fraction[:6].ljust(6, "0")) if fraction else 0
        period = cls(microseconds=microseconds, **values)
        return -period if match["sign"] == "-" else period

    @classmethod
    def between(cls, start: WallParts, end: WallParts) -> Period:
        """Return the period from ``start`` to ``end`` on the same wall clock.

        The result counts whole months first (as many as fit without
        passing ``end``), then days and the time of day. For
        ``start <= end``, applying the result to ``start`` gives ``end``.
        When ``end`` is earlier, every component is negative.

        Examples:
            >>> Period.between((2013, 1, 1, 0, 0, 0, 0), (2014, 2, 2, 1, 0, 0, 0))
            Period(years=1, months=1, days=1, hours=1)
            >>> Period.between((2013, 1, 2, 0, 0, 0, 0), (2013, 1, 1, 0, 0, 0, 0))
            Period(days=-1)
        """
        if _wall_micros(end) < _wall_micros(start):
            forward = cls.between(end, start)
            result = -forward
            result._total_days = -forward._total_days
            return result

        months = (end[0] - start[0]) * MONTHS_PER_YEAR + (end[1] - start[1])
        end_micros = _wall_micros(end)
        while months > 0:
            anchor = (start[0], start[1] + months) + start[2:]
            if _wall_micros(anchor) <= end_micros:
                break
            months -= 1
        anchor_micros = _wall_micros((start[0], start[1] + months) + start[2:])

        rest, microseconds = divmod(end_micros - anchor_micros, MICROS_PER_SECOND)
        days, rest = divmod(rest, SECONDS_PER_DAY)
        hours, rest = divmod(rest, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        years, months = divmod(months, MONTHS_PER_YEAR)

        result = cls(
            years=years,
            months=months,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            microseconds=microseconds,
        )
        result._total_days = (end_micros - _wall_micros(start)) // (
            SECONDS_PER_DAY * MICROS_PER_SECOND
        )
        return result

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def microseconds(self) -> int:
        return self._microseconds

    @property
    def total_days(self) -> int | None:
        """Return the whole days between the ends this period was measured from.

        Only set on periods returned by ``between()`` (and so by
        ``diff()``/``compare_to()``); None for constructed periods.
        """
        return self._total_days

    @property
    def total_months(self) -> int:
        """Return years * 12 + months.

        Examples:
            >>> Period(years=1, months=2).total_months
            14
        """
        return self._years * MONTHS_PER_YEAR + self._months

    def _components(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._microseconds,
        )

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return not any(self._components())

    @property
    def is_negative(self) -> bool:
        """Return True if no component is positive and at least one is negative.

        Examples:
            >>> Period(days=-1).is_negative
            True
            >>> Period(days=-1, hours=2).is_negative
            False
        """
        components = self._components()
        return any(c < 0 for c in components) and all(c <= 0 for c in components)

    def apply_to(self, parts: WallParts, sign: int = 1) -> WallParts:
        """Add this period (times ``sign``) to wall-clock parts.

        The result is not normalized: fields may be out of range and are
        expected to be carried by the calendar when the instant is rebuilt.

        Examples:
            >>> Period(months=1).apply_to((2013, 1, 31, 0, 0, 0, 0))
            (2013, 2, 31, 0, 0, 0, 0)
        """
        return tuple(
            part + sign * delta for part, delta in zip(parts, self._components())
        )  # type: ignore[return-value]

    def to_iso_format(self) -> str:
        """Return the ISO-8601 duration string.

        Examples:
            >>> Period(years=1, days=2, hours=3).to_iso_format()
            'P1Y2DT3H'
            >>> Period(days=-1).to_iso_format()
            '-P1D'
            >>> Period().to_iso_format()
            'PT0S'
        """
        if self.is_zero:
            return "PT0S"
        period = abs(self) if self.is_negative else self
        prefix = "-P" if self.is_negative else "P"

        date_part = ""
        for value, unit in ((period._years, "Y"), (period._months, "M"), (period._days, "D")):
            if value:
                date_part += f"{value}{unit}"

        time_part = ""
        if period._hours:
            time_part += f"{period._hours}H"
        if period._minutes:
            time_part += f"{period._minutes}M"
        if period._seconds or period._microseconds:
            total = period._seconds * MICROS_PER_SECOND + period._microseconds
            whole, fraction = divmod(total, MICROS_PER_SECOND)
            if fraction:
                time_part += f"{whole}.{fraction:06d}".rstrip("0") + "S"
            else:
                time_part += f"{whole}S"

        return prefix + date_part + (f"T{time_part}" if time_part else "")

    def negated(self) -> Period:
        """Return a Period with every component negated."""
        return -self

    def abs(self) -> Period:
        """Return a Period with every component made non-negative.

        Examples:
            >>> Period(days=-3, hours=-1).abs()
            Period(days=3, hours=1)
        """
        return abs(self)

    def _map(self, func) -> Period:  # type: ignore[no-untyped-def]
        return Period(**{name: func(value) for name, value in zip(_FIELDS, self._components())})

    def __add__(self, other: object) -> Period:
        """Add two Periods component-wise.

        Examples:
            >>> Period(years=1, months=3) + Period(months=6)
            Period(years=1, months=9)
        """
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            **{
                name: a + b
                for name, a, b in zip(_FIELDS, self._components(), other._components())
            }
        )

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> Period:
        return self._map(lambda value: -value)

    def __pos__(self) -> Period:
        return self._map(lambda value: value)

    def __abs__(self) -> Period:
        return self._map(abs)

    def __mul__(self, other: object) -> Period:
        """Multiply a period by an integer.

        Examples:
            >>> Period(months=3) * 2
            Period(months=6)
        """
        if not isinstance(other, int):
            return NotImplemented
        return self._map(lambda value: value * other)

    def __rmul__(self, other: object) -> Period:
        """Support scalar * Period."""
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check component-wise equality.

        Period(months=12) != Period(years=1): components are compared
        as stored.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __repr__(self) -> str:
        parts = [
            f"{name}={value}"
            for name, value in zip(_FIELDS, self._components())
            if value
        ]
        return f"Period({', '.join(parts)})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Period", "WallParts"]
