"""JSON serialization and deserialization for wallclock values.

Every value serializes as a plain string, its ``str()`` form:

    DateTime, MutableDateTime: ISO 8601, "2014-10-23T13:50:10+0200"
                               ("" for the empty date)
    LocalDate:                 "2014-10-23"
    LocalTime:                 "13:50:10.000000"
    LocalDateTime:             "2014-10-23T13:50:10.000000"
    Period:                    ISO 8601 duration, "P1DT2H"

Functions:
    to_json: Return the JSON string form of a value.
    from_json: Read a value of a given type back from its string form.

Classes:
    WallclockJSONEncoder: ``json.JSONEncoder`` that knows the types above.

Examples:
    >>> import json
    >>> from wallclock import DateTime
    >>> dt = DateTime("2014-10-23 13:50:10", "Europe/Paris")
    >>> json.dumps({"date": dt}, cls=WallclockJSONEncoder, separators=(",", ":"))
    '{"date":"2014-10-23T13:50:10+0200"}'
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from wallclock.core.datetime import BaseDateTime
    from wallclock.core.local import LocalValue
    from wallclock.core.period import Period

# Type alias for serializable values
WallclockType = Union["BaseDateTime", "LocalValue", "Period"]


def _serializable_types() -> tuple[type, ...]:
    # Import here to avoid circular imports
    from wallclock.core.datetime import BaseDateTime
    from wallclock.core.local import LocalValue
    from wallclock.core.period import Period

    return (BaseDateTime, LocalValue, Period)


def to_json(value: WallclockType) -> str:
    """Return the JSON string form of a value.

    Raises:
        TypeError: If value is not a wallclock value.

    Examples:
        >>> from wallclock import DateTime, LocalDate, Period
        >>> to_json(DateTime("@234446400"))
        '1977-06-06T12:00:00Z'
        >>> to_json(LocalDate(2014, 1, 6))
        '2014-01-06'
        >>> to_json(Period(days=1, hours=2))
        'P1DT2H'
        >>> to_json(DateTime.none())
        ''
    """
    if not isinstance(value, _serializable_types()):
        raise TypeError(
            "expected DateTime, MutableDateTime, LocalDate, LocalTime, "
            f"LocalDateTime or Period, got {type(value).__name__}"
        )
    return str(value)


def from_json(text: str, kind: type | None = None) -> Any:
    """Read a value back from its JSON string form.

    Args:
        text: The string form; a JSON-encoded string (with its quotes) is
            decoded first.
        kind: The type to create; DateTime by default. An empty string
            gives the empty date for DateTime and MutableDateTime.

    Returns:
        A value of type ``kind``.

    Raises:
        TypeError: If ``kind`` is not a wallclock value type or ``text``
            is not a string.
        ParseError: If the string cannot be read.

    Examples:
        >>> from wallclock import LocalTime
        >>> from_json('"13:50:10.000000"', LocalTime)
        LocalTime(13, 50, 10, 0)
    """
    from wallclock.core.datetime import BaseDateTime
    from wallclock.core.immutable import DateTime
    from wallclock.core.local import LocalValue
    from wallclock.core.period import Period

    if kind is None:
        kind = DateTime
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if text.startswith('"'):
        text = json.loads(text)

    if issubclass(kind, BaseDateTime):
        if text == "":
            return kind.none()
        return kind(text)
    if issubclass(kind, LocalValue):
        return kind.from_value(text)
    if issubclass(kind, Period):
        return kind.parse(text)
    raise TypeError(f"cannot read {kind.__name__} from JSON")


class WallclockJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes wallclock values as strings.

    Examples:
        >>> import json
        >>> from wallclock import LocalDate
        >>> json.dumps([LocalDate(2014, 1, 6)], cls=WallclockJSONEncoder)
        '["2014-01-06"]'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, _serializable_types()):
            return to_json(o)
        return super().default(o)


__all__ = ["WallclockJSONEncoder", "from_json", "to_json"]
