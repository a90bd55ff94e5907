"""Mutable wall-clock datetime.

MutableDateTime changes in place: ``change()``, ``add()`` and ``sub()``
update the receiver and return it, and the calendar fields, the
timestamp and the timezone can be assigned directly. Derived fields
stay read-only. Being mutable, instances are not hashable.
"""

from __future__ import annotations

from typing import Any, ClassVar

from wallclock._internal.cascade import CHANGE_FIELDS
from wallclock.core.datetime import BaseDateTime, resolve_timezone
from wallclock.units.timezone import TimeZone


class MutableDateTime(BaseDateTime):
    """A moment in time that can be changed in place.

    Writable fields:
        year, month, day, hour, minute, second: Routed through
            ``change()``, so out-of-range values carry.
        timestamp: Unix seconds; clears the microseconds.
        timezone: A TimeZone, tzinfo or name; "local" is the default
            zone. The instant is kept, only the wall clock moves.

    Examples:
        >>> dt = MutableDateTime("2013-02-03 21:03:45", "UTC")
        >>> dt.hour = 25
        >>> dt.as_db
        '2013-02-04 01:03:45'
        >>> dt.timezone = "Europe/Paris"
        >>> dt.as_time
        '02:03:45'
    """

    __slots__ = ()

    WRITABLE_FIELDS: ClassVar[frozenset[str]] = CHANGE_FIELDS | {"timestamp", "timezone"}

    __hash__ = None  # type: ignore[assignment]

    def _apply_state(
        self, seconds: int, micros: int, tz: TimeZone, empty: bool
    ) -> MutableDateTime:
        self._set_state(seconds, micros, tz, empty)
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        if name in CHANGE_FIELDS:
            self.change({name: value})
        elif name == "timestamp":
            self._set_state(int(value), 0, self._tz, False)
        elif name == "timezone":
            self._set_state(self._seconds, self._micros, resolve_timezone(value), self._empty)
        else:
            super().__setattr__(name, value)


__all__ = ["MutableDateTime"]
