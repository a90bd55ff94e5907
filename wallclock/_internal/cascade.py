"""Field-change resolution shared by the mutable and immutable datetimes.

``resolve_changes`` turns a partial mapping of calendar fields into the
complete date and time triples to apply, following these rules:

    - Only ``year``, ``month``, ``day``, ``hour``, ``minute`` and
      ``second`` are recognized; other keys are ignored.
    - A key that is absent means "leave unchanged". A key present with
      value 0 is a real change to 0.
    - With ``cascade``, setting ``hour`` without ``minute`` forces
      ``minute=0``; then ``minute`` (given or forced) without ``second``
      forces ``second=0``.
    - Unspecified fields of a touched group default to the receiver's
      current value, never to zero.

Values are not range checked: the caller rebuilds the instant with the
carrying calendar arithmetic, so ``hour=25`` rolls into the next day.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Mapping, NamedTuple

DATE_FIELDS: tuple[str, ...] = ("year", "month", "day")
TIME_FIELDS: tuple[str, ...] = ("hour", "minute", "second")
CHANGE_FIELDS: frozenset[str] = frozenset(DATE_FIELDS + TIME_FIELDS)


class Resolution(NamedTuple):
    """The triples to apply; ``None`` leaves that group untouched."""

    date: tuple[int, int, int] | None
    time: tuple[int, int, int] | None

    @property
    def is_noop(self) -> bool:
        return self.date is None and self.time is None


def select_fields(fields: Mapping[str, int]) -> dict[str, int]:
    """Keep only the recognized change keys.

    ``None`` counts as absent; an explicit 0 is kept.
    """
    return {
        name: int(value)
        for name, value in fields.items()
        if name in CHANGE_FIELDS and value is not None
    }


def resolve_changes(
    fields: Mapping[str, int],
    current: tuple[int, int, int, int, int, int],
    cascade: bool = False,
) -> Resolution:
    """Resolve a partial field mapping against the receiver's current values.

    Args:
        fields: Requested changes, any subset of the six calendar fields.
        current: The receiver's (year, month, day, hour, minute, second).
        cascade: Reset finer time units when a coarser one is set.

    Returns:
        The date and time triples to apply.

    Examples:
        >>> current = (2001, 1, 1, 1, 1, 1)
        >>> resolve_changes({"hour": 2}, current, cascade=True)
        Resolution(date=None, time=(2, 0, 0))
        >>> resolve_changes({"minute": 0}, current, cascade=True)
        Resolution(date=None, time=(1, 0, 0))
        >>> resolve_changes({"hour": 2}, current)
        Resolution(date=None, time=(2, 1, 1))
        >>> resolve_changes({"day": 31, "bogus": 1}, current)
        Resolution(date=(2001, 1, 31), time=None)
    """
    requested = select_fields(fields)

    if cascade:
        if "hour" in requested and "minute" not in requested:
            requested["minute"] = 0
        if "minute" in requested and "second" not in requested:
            requested["second"] = 0

    year, month, day, hour, minute, second = current

    date = None
    if any(name in requested for name in DATE_FIELDS):
        date = (
            requested.get("year", year),
            requested.get("month", month),
            requested.get("day", day),
        )

    time = None
    if any(name in requested for name in TIME_FIELDS):
        time = (
            requested.get("hour", hour),
            requested.get("minute", minute),
            requested.get("second", second),
        )

    return Resolution(date, time)


__all__ = [
    "DATE_FIELDS",
    "TIME_FIELDS",
    "CHANGE_FIELDS",
    "Resolution",
    "select_fields",
    "resolve_changes",
]
