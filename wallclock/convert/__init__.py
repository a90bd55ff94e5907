"""Conversion utilities.

This module provides the JSON form of wallclock values:
    - to_json / from_json: values to and from their string form
    - WallclockJSONEncoder: a ``json.JSONEncoder`` for ``json.dumps(cls=...)``

Examples:
    >>> from wallclock import DateTime
    >>> from wallclock.convert import from_json, to_json

    >>> dt = DateTime("2014-10-23 13:50:10", "Europe/Paris")
    >>> from_json(to_json(dt)) == dt
    True
"""

from __future__ import annotations

from wallclock.convert.json import WallclockJSONEncoder, from_json, to_json

__all__ = [
    "WallclockJSONEncoder",
    "from_json",
    "to_json",
]
