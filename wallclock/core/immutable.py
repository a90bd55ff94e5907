"""Immutable wall-clock datetime.

DateTime never changes after construction: ``change()``, ``add()`` and
``sub()`` return new instances, and every attribute write raises
PropertyNotWritable. Values are hashable.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, ClassVar

from wallclock._internal.constants import MICROS_PER_SECOND
from wallclock.clock import get_clock
from wallclock.core.datetime import BaseDateTime, resolve_timezone

if TYPE_CHECKING:
    from wallclock.clock import Clock
    from wallclock.units.timezone import TimeZone


class DateTime(BaseDateTime):
    """An immutable moment in time viewed in a timezone.

    Examples:
        >>> dt = DateTime("2001-01-01 01:01:01", "UTC")
        >>> changed = dt.change(hour=2, cascade=True)
        >>> changed.as_time, dt.as_time
        ('02:00:00', '01:01:01')
        >>> DateTime.now() is DateTime.now()
        True
    """

    __slots__ = ()

    # (clock, default zone name, snapshot)
    _now_snapshot: ClassVar[tuple[Clock, str, DateTime] | None] = None
    _now_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def now(cls) -> DateTime:
        """Return the request start time, in the default timezone.

        The first call builds the value from the installed clock's
        ``request_time()``; later calls return that same instance until a
        different clock is installed or the default timezone changes.
        """
        clock = get_clock()
        tz = resolve_timezone(None)
        with cls._now_lock:
            snapshot = cls._now_snapshot
            if (
                snapshot is not None
                and snapshot[0] is clock
                and snapshot[1] == tz.name
                and type(snapshot[2]) is cls
            ):
                return snapshot[2]

        seconds, micros = divmod(clock.request_time(), MICROS_PER_SECOND)
        instance = cls._from_internal(seconds, micros, tz)
        with cls._now_lock:
            snapshot = cls._now_snapshot
            if (
                snapshot is not None
                and snapshot[0] is clock
                and snapshot[1] == tz.name
                and type(snapshot[2]) is cls
            ):
                # Lost the race; keep the published instance
                return snapshot[2]
            DateTime._now_snapshot = (clock, tz.name, instance)
        return instance

    def _apply_state(self, seconds: int, micros: int, tz: TimeZone, empty: bool) -> DateTime:
        return self._from_internal(seconds, micros, tz, empty)

    def __hash__(self) -> int:
        return hash(self._key())


__all__ = ["DateTime"]
