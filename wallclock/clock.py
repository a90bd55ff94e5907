"""Clock abstraction.

Every "now" in Wallclock is read from a Clock rather than straight from
the system, so callers (and tests) control time by installing a clock
instead of sleeping.

A clock answers two questions:

    now(): the live time, in microseconds since the Unix epoch.
    request_time(): the time the current "request" started. It is the
        first ``now()`` sample (or a pinned start) and never changes
        afterwards. ``DateTime.now()`` is built from it.

Classes:
    Clock: Abstract base.
    SystemClock: Reads the system clock.
    FrozenClock: Returns a fixed time that only moves when told to.

Functions:
    get_clock, set_clock, reset_clock: the process-wide installed clock.

Examples:
    >>> from wallclock.clock import FrozenClock, get_clock, set_clock
    >>> previous = set_clock(FrozenClock.at_seconds(1_383_596_482))
    >>> get_clock().now()
    1383596482000000
"""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod

from wallclock._internal.constants import MICROS_PER_SECOND


class Clock(ABC):
    """Source of the current time in epoch microseconds."""

    def __init__(self) -> None:
        self._request_time: int | None = None
        self._lock = threading.Lock()

    @abstractmethod
    def now(self) -> int:
        """Return the live time in microseconds since the Unix epoch."""

    def request_time(self) -> int:
        """Return the memoized request start time.

        The first call samples ``now()``; later calls return the same
        value for the lifetime of the clock.
        """
        with self._lock:
            if self._request_time is not None:
                return self._request_time

        # now() may take the same lock
        sample = self.now()
        with self._lock:
            # A concurrent caller may have won; keep its sample
            if self._request_time is None:
                self._request_time = sample
            return self._request_time


class SystemClock(Clock):
    """Clock backed by ``time.time_ns()``.

    Args:
        start: Optional pinned request start, in epoch microseconds.
    """

    def __init__(self, start: int | None = None) -> None:
        super().__init__()
        self._request_time = start

    def now(self) -> int:
        return time.time_ns() // 1_000

    def __repr__(self) -> str:
        return f"SystemClock(start={self._request_time!r})"


class FrozenClock(Clock):
    """A clock that stands still until moved.

    ``request_time()`` is pinned to the construction time; ``now()``
    follows ``set()`` and ``advance()``.

    Examples:
        >>> clock = FrozenClock(0)
        >>> clock.advance(seconds=90)
        >>> clock.now()
        90000000
        >>> clock.request_time()
        0
    """

    def __init__(self, micros: int) -> None:
        super().__init__()
        self._micros = micros
        self._request_time = micros

    @classmethod
    def at_seconds(cls, seconds: int | float) -> FrozenClock:
        """Create a clock frozen at a Unix timestamp in seconds."""
        return cls(round(seconds * MICROS_PER_SECOND))

    def now(self) -> int:
        with self._lock:
            return self._micros

    def set(self, micros: int) -> None:
        """Move the live time to ``micros``."""
        with self._lock:
            self._micros = micros

    def advance(self, seconds: int = 0, microseconds: int = 0) -> None:
        """Move the live time forward (or back, with negative values)."""
        with self._lock:
            self._micros += seconds * MICROS_PER_SECOND + microseconds

    def __repr__(self) -> str:
        return f"FrozenClock({self._micros})"


_lock = threading.Lock()
_clock: Clock = SystemClock()


def get_clock() -> Clock:
    """Return the installed clock."""
    with _lock:
        return _clock


def set_clock(clock: Clock) -> Clock:
    """Install ``clock`` and return the previously installed one."""
    global _clock
    with _lock:
        previous, _clock = _clock, clock
    return previous


def reset_clock() -> None:
    """Install a fresh SystemClock."""
    set_clock(SystemClock())


__all__ = [
    "Clock",
    "SystemClock",
    "FrozenClock",
    "get_clock",
    "set_clock",
    "reset_clock",
]
