"""Wallclock exception hierarchy.

All Wallclock-specific exceptions inherit from WallclockError.
"""

from __future__ import annotations


class WallclockError(Exception):
    """Base exception for all Wallclock errors."""

    pass


class PropertyNotDefined(WallclockError, AttributeError):
    """Access to a field name the type does not define.

    Raised when reading or writing an attribute that is not part of the
    closed field set of a value type. Subclasses AttributeError so that
    ``hasattr()`` and ``getattr(obj, name, default)`` keep working.

    Examples:
        - Reading ``dt.fortnight``
        - Writing ``dt.fortnight = 2``
    """

    def __init__(self, name: str, type_name: str) -> None:
        super().__init__(f"Property is not defined: {type_name}.{name}")
        self.property = name
        self.type_name = type_name


class PropertyNotWritable(WallclockError, AttributeError):
    """Write to a field that is read-only.

    Raised when assigning to a derived field (``quarter``, ``week``,
    ``is_monday``, ``tomorrow``...), to any field of an immutable value,
    or when deleting a field.

    Examples:
        - ``DateTime("2013-01-01").year = 2014``
        - ``MutableDateTime("2013-01-01").quarter = 2``
    """

    def __init__(self, name: str, type_name: str) -> None:
        super().__init__(f"Property is not writable: {type_name}.{name}")
        self.property = name
        self.type_name = type_name


class LocalizerNotConfigured(WallclockError, LookupError):
    """Localization requested while no localizer is defined.

    Raised by ``localize()`` when neither an explicit localizer was
    passed nor one was registered with ``wallclock.localizer.define()``.
    """

    pass


class InvalidComponent(WallclockError, ValueError):
    """A component value outside the range a local value accepts.

    Examples:
        - Month number 13 given to LocalDate
        - A non-integer component
    """

    pass


class ParseError(WallclockError, ValueError):
    """Failed to parse string representation.

    Raised when a string cannot be read as a date/time value.

    Examples:
        - "2013-13-45 99:99"
        - "next blue moon"
        - A malformed ISO-8601 duration
    """

    pass


class TimezoneError(WallclockError, ValueError):
    """Invalid or unknown timezone.

    Examples:
        - "Mars/Olympus_Mons"
        - Offset outside the +/-24h range
    """

    pass


__all__ = [
    "WallclockError",
    "PropertyNotDefined",
    "PropertyNotWritable",
    "LocalizerNotConfigured",
    "InvalidComponent",
    "ParseError",
    "TimezoneError",
]
