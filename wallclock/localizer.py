"""The process-wide localizer slot.

A localizer is any callable ``(value, locale) -> T`` that renders a
datetime for humans; wallclock ships none. One can be defined for the
whole process and is then used by ``DateTime.localize()`` unless a
localizer is passed explicitly.

Examples:
    >>> from wallclock import DateTime, localizer
    >>> previous = localizer.define(lambda value, locale: f"{locale}:{value.as_date}")
    >>> DateTime("2013-02-03", "UTC").localize("fr")
    'fr:2013-02-03'
    >>> localizer.undefine()
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from wallclock.errors import LocalizerNotConfigured

logger = logging.getLogger(__name__)

Localizer = Callable[[Any, str], Any]

_lock = threading.Lock()
_localizer: Localizer | None = None


def define(localizer: Localizer) -> Localizer | None:
    """Install ``localizer`` and return the one it replaces, if any."""
    global _localizer
    if not callable(localizer):
        raise TypeError(f"localizer must be callable, got {type(localizer).__name__}")
    with _lock:
        previous, _localizer = _localizer, localizer
    logger.debug("localizer defined: %r (replacing %r)", localizer, previous)
    return previous


def defined() -> Localizer | None:
    """Return the installed localizer, or None."""
    with _lock:
        return _localizer


def undefine() -> None:
    """Remove the installed localizer."""
    global _localizer
    with _lock:
        _localizer = None


def localize(value: Any, locale: str = "en") -> Any:
    """Render ``value`` with the installed localizer.

    Raises:
        LocalizerNotConfigured: If no localizer is defined.
    """
    localizer = defined()
    if localizer is None:
        raise LocalizerNotConfigured("no localizer is defined")
    return localizer(value, locale)


__all__ = ["Localizer", "define", "defined", "localize", "undefine"]
