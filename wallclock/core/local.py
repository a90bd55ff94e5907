"""Behavior shared by LocalDate, LocalTime and LocalDateTime.

A local value has no timezone of its own. Each one wraps a DateTime in
UTC, its ``delegate``, purely to do calendar arithmetic: reading the
fields, shifting by a Period and measuring the Period between two
values all happen on the delegate, so no ambient timezone can leak in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from wallclock.core.period import Period
from wallclock.errors import InvalidComponent, PropertyNotDefined, PropertyNotWritable
from wallclock.units.month import Month

if TYPE_CHECKING:
    from wallclock.core.immutable import DateTime


def month_number(month: Month | int) -> int:
    """Return the number of a month given as a Month or an int.

    Raises:
        InvalidComponent: If the number is outside 1-12.

    Examples:
        >>> month_number(Month.MARCH)
        3
        >>> month_number(13)
        Traceback (most recent call last):
        ...
        wallclock.errors.InvalidComponent: month must be 1-12, got 13
    """
    number = int(month)
    if not 1 <= number <= 12:
        raise InvalidComponent(f"month must be 1-12, got {number}")
    return number


def utc_delegate(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> DateTime:
    """Build the UTC DateTime a local value delegates to; overflow carries."""
    from wallclock.core.immutable import DateTime

    return DateTime.from_components(
        year, month, day, hour, minute, second, microsecond, timezone="UTC"
    )


class LocalValue:
    """Base for the local values: interval arithmetic, ordering and formatting.

    Subclasses define ``DEFAULT_FORMAT``, ``_from_delegate()`` (which
    builds a value from any DateTime's wall-clock fields) and
    ``_components()``.
    """

    __slots__ = ("_delegate",)

    DEFAULT_FORMAT: ClassVar[str] = ""

    def _set_delegate(self, delegate: DateTime) -> None:
        object.__setattr__(self, "_delegate", delegate)

    @classmethod
    def _from_delegate(cls, delegate: DateTime):  # type: ignore[no-untyped-def]
        raise NotImplementedError

    def _components(self) -> tuple[int, ...]:
        raise NotImplementedError

    @property
    def delegate(self) -> DateTime:
        """Return the UTC DateTime this value computes with."""
        return self._delegate

    def format(self, pattern: str) -> str:
        """Render the value with a pattern of PHP ``date()`` tokens."""
        return self._delegate.format(pattern)

    # Interval arithmetic

    def add(self, period: Period | str):  # type: ignore[no-untyped-def]
        """Return the value shifted forward by a Period or ISO-8601 duration."""
        return self._from_delegate(self._delegate.add(period))

    def sub(self, period: Period | str):  # type: ignore[no-untyped-def]
        """Return the value shifted back by a Period or ISO-8601 duration."""
        return self._from_delegate(self._delegate.sub(period))

    def compare_to(self, other: LocalValue, absolute: bool = False) -> Period:
        """Return the Period from this value to ``other``.

        Args:
            other: A value of the same type.
            absolute: Return the magnitude even when ``other`` is earlier.

        Raises:
            TypeError: If ``other`` is of another type.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return self._delegate.diff(other._delegate, absolute)

    def compare(self, other: LocalValue) -> int:
        """Return -1, 0 or 1 as this value is before, equal to or after ``other``."""
        if type(other) is not type(self):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        if self._delegate < other._delegate:
            return -1
        if self._delegate > other._delegate:
            return 1
        return 0

    def __add__(self, other: object):  # type: ignore[no-untyped-def]
        if not isinstance(other, Period):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object):  # type: ignore[no-untyped-def]
        if isinstance(other, Period):
            return self.sub(other)
        if type(other) is type(self):
            return other.compare_to(self)  # type: ignore[attr-defined]
        return NotImplemented

    # Comparison

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._delegate == other._delegate  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._delegate < other._delegate  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._delegate <= other._delegate  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._delegate > other._delegate  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._delegate >= other._delegate  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._components()))

    # Immutability

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(type(self), name):
            raise PropertyNotWritable(name, type(self).__name__)
        raise PropertyNotDefined(name, type(self).__name__)

    def __delattr__(self, name: str) -> None:
        raise PropertyNotWritable(name, type(self).__name__)

    def __reduce__(self) -> tuple[Any, tuple[int, ...]]:
        return (type(self), self._components())

    def __repr__(self) -> str:
        args = ", ".join(str(part) for part in self._components())
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        return self.format(self.DEFAULT_FORMAT)


__all__ = ["LocalValue", "month_number", "utc_delegate"]
