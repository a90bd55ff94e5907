"""Named timezone values backed by the IANA database.

This module provides the TimeZone class. A TimeZone wraps a timezone
name ("Europe/Paris", "UTC", "+02:00") and the ``tzinfo`` that resolves
it: ``zoneinfo.ZoneInfo`` for IANA names, ``datetime.timezone`` for UTC
and fixed offsets.

TimeZone values are interned: every lookup of the same canonical name
returns the same instance, so equality and identity coincide.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
import threading
import zoneinfo
from typing import TYPE_CHECKING, Any, ClassVar

from wallclock._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    MICROS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from wallclock.errors import PropertyNotDefined, PropertyNotWritable, TimezoneError

if TYPE_CHECKING:
    from wallclock.units.location import TimeZoneLocation

logger = logging.getLogger(__name__)

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")

_UTC = _datetime.timezone.utc
_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_UTC)
_NAIVE_EPOCH = _datetime.datetime(1970, 1, 1)

# Zone lookups outside what the stdlib datetime can hold are clamped to
# these bounds; a day of margin keeps astimezone() from overflowing.
_MIN_LOOKUP_SECONDS = int(
    (_datetime.datetime(1, 1, 2, tzinfo=_UTC) - _EPOCH).total_seconds()
)
_MAX_LOOKUP_SECONDS = int(
    (_datetime.datetime(9999, 12, 30, tzinfo=_UTC) - _EPOCH).total_seconds()
)


def _clamp(seconds: int) -> int:
    return min(max(seconds, _MIN_LOOKUP_SECONDS), _MAX_LOOKUP_SECONDS)


def format_offset(seconds: int, separator: str = ":") -> str:
    """Format an offset in seconds as ``+HH:MM`` (or ``+HHMM``).

    Examples:
        >>> format_offset(7200)
        '+02:00'
        >>> format_offset(-19800, separator="")
        '-0530'
    """
    sign = "-" if seconds < 0 else "+"
    minutes = abs(seconds) // SECONDS_PER_MINUTE
    hours, minutes = divmod(minutes, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


class TimeZone:
    """An interned, named timezone.

    Attributes:
        name: Canonical name; "utc" in any case becomes "UTC" and
            offsets become "+HH:MM".
        offset: UTC offset in seconds, computed once against the clock's
            request time.
        location: The TimeZoneLocation from the zone table.
        is_utc: True if the name is "UTC".
        is_local: True if the name is the process default timezone.

    Examples:
        >>> TimeZone.from_value("utc") is TimeZone.from_value("UTC")
        True

        >>> str(TimeZone("Europe/Paris"))
        'Europe/Paris'

        >>> TimeZone.from_value("+0530").name
        '+05:30'
    """

    __slots__ = ("_name", "_tzinfo", "_offset", "_location")

    _cache: ClassVar[dict[str, TimeZone]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _utc_instance: ClassVar[TimeZone | None] = None

    def __new__(cls, name: str) -> TimeZone:
        return cls.from_value(name)

    @classmethod
    def _create(cls, name: str) -> TimeZone:
        """Build an instance without going through the cache."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "_name", name)
        object.__setattr__(instance, "_tzinfo", cls._resolve(name))
        object.__setattr__(instance, "_offset", None)
        object.__setattr__(instance, "_location", None)
        return instance

    @classmethod
    def from_value(cls, source: TimeZone | _datetime.tzinfo | str) -> TimeZone:
        """Return the shared TimeZone for ``source``.

        Args:
            source: A TimeZone (returned as-is), a ``tzinfo`` (its name is
                used) or a timezone name or offset string.

        Returns:
            The interned TimeZone for the canonical name.

        Raises:
            TimezoneError: If the name does not resolve to a timezone.
            TypeError: If ``source`` is of an unsupported type.
        """
        if isinstance(source, TimeZone):
            return source
        if isinstance(source, _datetime.tzinfo):
            name = cls._name_of(source)
        elif isinstance(source, str):
            name = source
        else:
            raise TypeError(
                f"expected TimeZone, tzinfo or str, got {type(source).__name__}"
            )

        canonical = cls._canonical_name(name)
        with cls._lock:
            cached = cls._cache.get(canonical)
        if cached is not None:
            return cached

        logger.debug("timezone cache miss: %s", canonical)
        created = cls._create(canonical)
        with cls._lock:
            # A concurrent caller may have won; keep its instance
            return cls._cache.setdefault(canonical, created)

    @classmethod
    def utc(cls) -> TimeZone:
        """Return the UTC timezone.

        All calls return the same instance, which is also the one
        ``from_value("UTC")`` returns.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls.from_value("UTC")
        return cls._utc_instance

    @staticmethod
    def _canonical_name(name: str) -> str:
        name = name.strip()
        if not name:
            raise TimezoneError("empty timezone name")
        if name.upper() == "UTC":
            return "UTC"
        match = _OFFSET_PATTERN.match(name)
        if match:
            sign, hours, minutes = match.groups()
            seconds = int(hours) * SECONDS_PER_HOUR + int(minutes or 0) * SECONDS_PER_MINUTE
            if int(minutes or 0) > 59 or seconds >= MAX_UTC_OFFSET_SECONDS:
                raise TimezoneError(f"offset out of range: {name!r}")
            return format_offset(-seconds if sign == "-" else seconds)
        return name

    @staticmethod
    def _name_of(tz: _datetime.tzinfo) -> str:
        key = getattr(tz, "key", None)
        if key:
            return key
        if tz is _UTC:
            return "UTC"
        offset = tz.utcoffset(None)
        if offset is None:
            raise TimezoneError(f"cannot name timezone {tz!r}")
        return format_offset(int(offset.total_seconds()))

    @staticmethod
    def _resolve(name: str) -> _datetime.tzinfo:
        if name == "UTC":
            return _UTC
        match = _OFFSET_PATTERN.match(name)
        if match:
            sign, hours, minutes = match.groups()
            delta = _datetime.timedelta(hours=int(hours), minutes=int(minutes or 0))
            return _datetime.timezone(-delta if sign == "-" else delta)
        try:
            return zoneinfo.ZoneInfo(name)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise TimezoneError(f"unknown timezone: {name!r}") from exc

    @property
    def name(self) -> str:
        return self._name

    @property
    def tzinfo(self) -> _datetime.tzinfo:
        """Return the stdlib ``tzinfo`` this timezone resolves to."""
        return self._tzinfo

    @property
    def is_fixed(self) -> bool:
        """Return True for UTC and fixed-offset zones (no transitions)."""
        return isinstance(self._tzinfo, _datetime.timezone)

    @property
    def offset(self) -> int:
        """Return the UTC offset in seconds.

        Computed on first access against the installed clock's request
        time and kept for the lifetime of the instance. Use
        ``offset_at()`` for the offset at a specific instant.
        """
        if self._offset is None:
            from wallclock.clock import get_clock

            reference = get_clock().request_time() // MICROS_PER_SECOND
            object.__setattr__(self, "_offset", self.offset_at(reference))
        return self._offset

    @property
    def location(self) -> TimeZoneLocation:
        """Return the zone's location, loaded on first access."""
        if self._location is None:
            from wallclock.units.location import TimeZoneLocation

            object.__setattr__(self, "_location", TimeZoneLocation.from_zone(self))
        return self._location

    @property
    def is_utc(self) -> bool:
        """Return True if this is the UTC zone.

        Zones that merely have a zero offset ("GMT", "+00:00") are not UTC.
        """
        return self._name == "UTC"

    @property
    def is_local(self) -> bool:
        """Return True if this is the process default timezone."""
        from wallclock.config import get_default_timezone

        return self._name == get_default_timezone()

    def _aware_at(self, epoch_seconds: int) -> _datetime.datetime:
        moment = _EPOCH + _datetime.timedelta(seconds=_clamp(epoch_seconds))
        return moment.astimezone(self._tzinfo)

    def offset_at(self, epoch_seconds: int) -> int:
        """Return the UTC offset in seconds at a Unix timestamp."""
        offset = self._aware_at(epoch_seconds).utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def wall_offset(self, wall_seconds: int) -> int:
        """Return the UTC offset that applies to a wall-clock time.

        ``wall_seconds`` counts seconds since 1970-01-01 00:00 on the
        local wall clock. Ambiguous times take the first occurrence;
        nonexistent times take the offset in force before the gap.
        """
        naive = _NAIVE_EPOCH + _datetime.timedelta(seconds=_clamp(wall_seconds))
        offset = naive.replace(tzinfo=self._tzinfo).utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def is_dst_at(self, epoch_seconds: int) -> bool:
        """Return True if daylight-saving time is in effect at a Unix timestamp."""
        return bool(self._aware_at(epoch_seconds).dst())

    def abbreviation_at(self, epoch_seconds: int) -> str:
        """Return the zone abbreviation ("CET", "CEST", "UTC"...) at a Unix timestamp.

        Fixed-offset zones are abbreviated by their name.
        """
        if self.is_fixed:
            return self._name
        return self._aware_at(epoch_seconds).tzname() or self._name

    def __setattr__(self, name: str, value: Any) -> None:
        raise PropertyNotWritable(name, type(self).__name__)

    def __delattr__(self, name: str) -> None:
        raise PropertyNotWritable(name, type(self).__name__)

    def __getattr__(self, name: str) -> Any:
        raise PropertyNotDefined(name, type(self).__name__)

    def __reduce__(self) -> tuple[Any, tuple[str]]:
        return (TimeZone.from_value, (self._name,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"TimeZone({self._name!r})"

    def __str__(self) -> str:
        return self._name


__all__ = ["TimeZone", "format_offset"]
