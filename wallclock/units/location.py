"""Geographic location of a timezone.

Locations come from the IANA ``zone.tab`` table: a country code,
coordinates of the zone's principal city and an optional comment. The
table is searched for in the ``zoneinfo.TZPATH`` directories first and
then in the ``tzdata`` package, the same order ``zoneinfo`` uses for
the zone files themselves.
"""

from __future__ import annotations

import importlib.resources
import logging
import re
import threading
import zoneinfo
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Hashable

from wallclock._internal.decorators import memoize
from wallclock.errors import PropertyNotDefined, PropertyNotWritable

if TYPE_CHECKING:
    from wallclock.units.timezone import TimeZone

logger = logging.getLogger(__name__)

_COORDINATES = re.compile(
    r"^(?P<lat_sign>[+-])(?P<lat_deg>\d{2})(?P<lat_min>\d{2})(?P<lat_sec>\d{2})?"
    r"(?P<lon_sign>[+-])(?P<lon_deg>\d{3})(?P<lon_min>\d{2})(?P<lon_sec>\d{2})?$"
)

UNKNOWN_COUNTRY = "??"


def _degrees(sign: str, degrees: str, minutes: str, seconds: str | None) -> float:
    value = int(degrees) + int(minutes) / 60 + int(seconds or 0) / 3600
    return round(-value if sign == "-" else value, 5)


def parse_zone_table(text: str) -> dict[str, dict[str, Any]]:
    """Parse the contents of a ``zone.tab`` file.

    Args:
        text: The file contents.

    Returns:
        A mapping of zone name to a dict with ``country_code``,
        ``latitude``, ``longitude`` and ``comments``.

    Examples:
        >>> table = parse_zone_table("FR\\t+4852+00220\\tEurope/Paris\\n")
        >>> table["Europe/Paris"]["latitude"]
        48.86667
    """
    table: dict[str, dict[str, Any]] = {}
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        columns = line.split("\t")
        if len(columns) < 3:
            continue
        country_code, coordinates, name = columns[:3]
        match = _COORDINATES.match(coordinates)
        if match is None:
            logger.debug("skipping zone.tab entry with bad coordinates: %r", line)
            continue
        table[name] = {
            "country_code": country_code,
            "latitude": _degrees(
                match["lat_sign"], match["lat_deg"], match["lat_min"], match["lat_sec"]
            ),
            "longitude": _degrees(
                match["lon_sign"], match["lon_deg"], match["lon_min"], match["lon_sec"]
            ),
            "comments": columns[3] if len(columns) > 3 else "",
        }
    return table


def _read_zone_tab() -> str | None:
    for directory in zoneinfo.TZPATH:
        path = Path(directory) / "zone.tab"
        if path.is_file():
            logger.debug("loading zone table from %s", path)
            return path.read_text(encoding="utf-8")

    try:
        resource = importlib.resources.files("tzdata").joinpath("zoneinfo").joinpath("zone.tab")
    except ModuleNotFoundError:
        logger.debug("tzdata is not installed and no zone.tab on TZPATH")
        return None
    if not resource.is_file():
        logger.debug("tzdata ships no zone.tab")
        return None
    logger.debug("loading zone table from the tzdata package")
    return resource.read_text(encoding="utf-8")


@memoize
def load_zone_table() -> dict[str, dict[str, Any]]:
    """Return the parsed zone table, loading it on first use."""
    text = _read_zone_tab()
    return parse_zone_table(text) if text is not None else {}


class TimeZoneLocation:
    """Where a timezone is: country, coordinates and a comment.

    Zones the table does not list (UTC, fixed offsets, "Etc/..." zones)
    get the unknown location: country "??" at 0, 0.

    Attributes:
        country_code: ISO 3166 alpha-2 code.
        latitude: Degrees, positive north.
        longitude: Degrees, positive east.
        comments: Free text, possibly empty.

    Examples:
        >>> from wallclock.units.timezone import TimeZone
        >>> str(TimeZone("Europe/Paris").location)
        'FR,48.86667,2.33333'
    """

    __slots__ = ("_country_code", "_latitude", "_longitude", "_comments")

    # Keyed by the underlying tzinfo, not the TimeZone name
    _cache: ClassVar[dict[Hashable, TimeZoneLocation]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        country_code: str = UNKNOWN_COUNTRY,
        latitude: float = 0.0,
        longitude: float = 0.0,
        comments: str = "",
    ) -> None:
        object.__setattr__(self, "_country_code", country_code)
        object.__setattr__(self, "_latitude", latitude)
        object.__setattr__(self, "_longitude", longitude)
        object.__setattr__(self, "_comments", comments)

    @classmethod
    def from_zone(cls, zone: TimeZone) -> TimeZoneLocation:
        """Return the location of ``zone``, cached per underlying tzinfo."""
        key = zone.tzinfo
        with cls._lock:
            cached = cls._cache.get(key)
        if cached is not None:
            return cached

        entry = load_zone_table().get(zone.name)
        location = cls(**entry) if entry is not None else cls()
        with cls._lock:
            return cls._cache.setdefault(key, location)

    @property
    def country_code(self) -> str:
        return self._country_code

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def comments(self) -> str:
        return self._comments

    def to_dict(self) -> dict[str, Any]:
        return {
            "country_code": self._country_code,
            "latitude": self._latitude,
            "longitude": self._longitude,
            "comments": self._comments,
        }

    def __setattr__(self, name: str, value: Any) -> None:
        raise PropertyNotWritable(name, type(self).__name__)

    def __delattr__(self, name: str) -> None:
        raise PropertyNotWritable(name, type(self).__name__)

    def __getattr__(self, name: str) -> Any:
        raise PropertyNotDefined(name, type(self).__name__)

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        return (TimeZoneLocation, tuple(self.to_dict().values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZoneLocation):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().values()))

    def __repr__(self) -> str:
        return (
            f"TimeZoneLocation(country_code={self._country_code!r}, "
            f"latitude={self._latitude!r}, longitude={self._longitude!r}, "
            f"comments={self._comments!r})"
        )

    def __str__(self) -> str:
        return (
            f"{self._country_code},{_format_coordinate(self._latitude)},"
            f"{_format_coordinate(self._longitude)}"
        )


def _format_coordinate(value: float) -> str:
    text = f"{value:.5f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


__all__ = ["TimeZoneLocation", "load_zone_table", "parse_zone_table"]
