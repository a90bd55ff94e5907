"""Process-wide configuration.

Wallclock keeps one piece of ambient configuration: the name of the
default ("local") timezone. It is what ``local``, ``is_local`` and an
omitted timezone argument resolve against.

The initial value is read from the environment, first
``WALLCLOCK_TIMEZONE`` and then ``TZ`` when it names a known zone, and
falls back to ``"UTC"``. ``set_default_timezone`` and
``reset_default_timezone`` are the explicit init/teardown pair.
"""

from __future__ import annotations

import logging
import os
import threading

logger = logging.getLogger(__name__)

ENV_TIMEZONE = "WALLCLOCK_TIMEZONE"
FALLBACK_TIMEZONE = "UTC"

_lock = threading.Lock()
_default_timezone: str | None = None


def _from_environment() -> str:
    from wallclock.units.timezone import TimeZone
    from wallclock.errors import TimezoneError

    for variable in (ENV_TIMEZONE, "TZ"):
        value = os.environ.get(variable, "").strip().lstrip(":")
        if not value:
            continue
        try:
            return TimeZone.from_value(value).name
        except TimezoneError:
            if variable == ENV_TIMEZONE:
                raise
            logger.debug("ignoring TZ=%r, not a known timezone", value)
    return FALLBACK_TIMEZONE


def get_default_timezone() -> str:
    """Return the name of the process default timezone.

    Examples:
        >>> set_default_timezone("Europe/Paris")
        'UTC'
        >>> get_default_timezone()
        'Europe/Paris'
    """
    global _default_timezone
    with _lock:
        name = _default_timezone
    if name is None:
        name = _from_environment()
        with _lock:
            if _default_timezone is None:
                _default_timezone = name
            name = _default_timezone
    return name


def set_default_timezone(name: str) -> str:
    """Set the process default timezone and return the previous name.

    Args:
        name: A timezone name or offset accepted by ``TimeZone.from_value``.

    Raises:
        TimezoneError: If the name is not a known timezone.
    """
    from wallclock.units.timezone import TimeZone

    global _default_timezone
    resolved = TimeZone.from_value(name).name
    previous = get_default_timezone()
    with _lock:
        _default_timezone = resolved
    logger.debug("default timezone set to %s (was %s)", resolved, previous)
    return previous


def reset_default_timezone() -> None:
    """Forget the configured default; the environment is read again on next use."""
    global _default_timezone
    with _lock:
        _default_timezone = None


__all__ = [
    "ENV_TIMEZONE",
    "FALLBACK_TIMEZONE",
    "get_default_timezone",
    "set_default_timezone",
    "reset_default_timezone",
]
