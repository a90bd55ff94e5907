"""Reading date/time strings.

The parser recognizes a fixed set of shapes and reports the components
it found; turning them into an instant (filling in "today", applying a
timezone) is left to the datetime constructors.

Accepted Forms:
    Keywords:   now, today, midnight, tomorrow, yesterday (any case)
    Timestamp:  @1359921825, @-1.5
    ISO-like:   2013-02-03, -4712-12-07 12:06:46, 2013-02-03T21:03:45.123456
    Time only:  21:03, 21:03:45, 21:03:45.5
    RFC 2822:   Sun, 03 Feb 2013 21:03:45 +0100
    Cookie:     Sunday, 03-Feb-2013 21:03:45 UTC

Each form except the timestamp may end with a zone: Z, +01, +0100,
+01:00, UTC, GMT or an IANA name such as Europe/Paris. Abbreviations
such as CEST or EDT, which the cookie and RFC 850 formats emit, are
reported as their fixed offset.

The zero date ("0000-00-00", with or without a time) is reported with
``is_zero_date`` set; its components are kept as written.

Examples:
    >>> parse("2013-02-03 21:03:45 Europe/Paris").zone
    'Europe/Paris'
    >>> parse("@0").timestamp
    0
    >>> parse("0000-00-00").is_zero_date
    True
    >>> parse("Thursday, 04-Jul-2013 20:21:22 CEST").zone
    '+02:00'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from wallclock.errors import ParseError

KEYWORDS: frozenset[str] = frozenset({"now", "today", "midnight", "tomorrow", "yesterday"})

MONTH_ABBREVIATIONS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Abbreviations the "T" token can emit that are not zone names themselves
# ("CET", "EST", "MST" and friends are, and resolve through zoneinfo).
# Where an abbreviation is shared, the North American or European reading wins.
ZONE_ABBREVIATIONS: dict[str, str] = {
    "UT": "+00:00",
    "WEST": "+01:00",
    "BST": "+01:00",
    "WAT": "+01:00",
    "CEST": "+02:00",
    "SAST": "+02:00",
    "CAT": "+02:00",
    "EEST": "+03:00",
    "MSK": "+03:00",
    "EAT": "+03:00",
    "AWST": "+08:00",
    "HKT": "+08:00",
    "JST": "+09:00",
    "KST": "+09:00",
    "ACST": "+09:30",
    "AEST": "+10:00",
    "ACDT": "+10:30",
    "AEDT": "+11:00",
    "NZST": "+12:00",
    "NZDT": "+13:00",
    "NDT": "-02:30",
    "ADT": "-03:00",
    "NST": "-03:30",
    "AST": "-04:00",
    "EDT": "-04:00",
    "CDT": "-05:00",
    "CST": "-06:00",
    "MDT": "-06:00",
    "PDT": "-07:00",
    "PST": "-08:00",
    "AKDT": "-08:00",
    "AKST": "-09:00",
    "HDT": "-09:00",
}

_TIME = (
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?"
)
_ZONE = (
    r"(?:\s*(?P<zone>[Zz]|[+-]\d{2}(?::?\d{2})?"
    r"|[A-Za-z][A-Za-z0-9_+\-]*(?:/[A-Za-z0-9_+\-]+)*))?"
)

_TIMESTAMP_PATTERN = re.compile(r"^@(?P<seconds>[+-]?\d+)(?:\.(?P<fraction>\d+))?$")
_ISO_PATTERN = re.compile(
    r"^(?P<year>[+-]?\d{4,})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    rf"(?:(?:[Tt]|\s+){_TIME})?{_ZONE}$"
)
_TIME_PATTERN = re.compile(rf"^{_TIME}{_ZONE}$")
_RFC_PATTERN = re.compile(
    r"^(?:[A-Za-z]+,?\s+)?(?P<day>\d{1,2})[\s-](?P<month_name>[A-Za-z]{3,})[\s-]"
    rf"(?P<year>\d{{2,4}})(?:\s+{_TIME})?{_ZONE}$"
)


@dataclass(frozen=True)
class Parsed:
    """Components read from a string; ``None`` means "not given".

    Attributes:
        keyword: One of KEYWORDS when the string was a keyword.
        timestamp: Unix seconds for the ``@`` form.
        year, month, day: Date as written (may be out of range, e.g. 0).
        hour, minute, second, microsecond: Time as written.
        zone: The zone suffix, "UTC" for Z.
        is_zero_date: True for the "0000-00-00" date.
    """

    keyword: str | None = None
    timestamp: int | None = None
    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int = 0
    zone: str | None = None
    is_zero_date: bool = False

    @property
    def has_date(self) -> bool:
        return self.year is not None

    @property
    def has_time(self) -> bool:
        return self.hour is not None


def _fraction_to_micros(fraction: str | None) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _zone(raw: str | None) -> str | None:
    if raw is None:
        return None
    if raw in ("Z", "z"):
        return "UTC"
    return ZONE_ABBREVIATIONS.get(raw.upper(), raw)


def _expand_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        return year + (2000 if year < 70 else 1900)
    return year


def _check_ranges(text: str, parsed: Parsed) -> Parsed:
    limits = (
        ("month", 0, 12),
        ("day", 0, 31),
        ("hour", 0, 24),
        ("minute", 0, 59),
        ("second", 0, 60),
    )
    for name, low, high in limits:
        value = getattr(parsed, name)
        if value is not None and not low <= value <= high:
            raise ParseError(f"{name} {value} out of range in {text!r}")
    return parsed


def _time_fields(match: re.Match[str]) -> dict[str, int | None]:
    if match["hour"] is None:
        return {}
    return {
        "hour": int(match["hour"]),
        "minute": int(match["minute"]),
        "second": int(match["second"] or 0),
        "microsecond": _fraction_to_micros(match["fraction"]),
    }


def parse(text: str) -> Parsed:
    """Parse a date/time string into its components.

    Args:
        text: The string to parse. An empty string means "now".

    Returns:
        The components found.

    Raises:
        ParseError: If the string matches none of the accepted forms or a
            component is out of range.

    Examples:
        >>> p = parse("2001-01-01 01:01:01.5")
        >>> (p.year, p.hour, p.microsecond)
        (2001, 1, 500000)

        >>> parse("Mon, 04 Nov 2013 20:21:22 GMT").zone
        'GMT'

        >>> parse("Tomorrow").keyword
        'tomorrow'
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    s = text.strip()
    if not s:
        return Parsed(keyword="now")

    if s.lower() in KEYWORDS:
        return Parsed(keyword=s.lower())

    match = _TIMESTAMP_PATTERN.match(s)
    if match:
        micros = _fraction_to_micros(match["fraction"])
        seconds = int(match["seconds"])
        if micros and s[1] == "-":
            # @-1.5 is one and a half seconds before the epoch
            seconds -= 1
            micros = 1_000_000 - micros
        return Parsed(timestamp=seconds, microsecond=micros, zone="UTC")

    match = _ISO_PATTERN.match(s)
    if match:
        year, month, day = int(match["year"]), int(match["month"]), int(match["day"])
        return _check_ranges(
            text,
            Parsed(
                year=year,
                month=month,
                day=day,
                zone=_zone(match["zone"]),
                is_zero_date=(year, month, day) == (0, 0, 0),
                **_time_fields(match),
            ),
        )

    match = _TIME_PATTERN.match(s)
    if match:
        return _check_ranges(text, Parsed(zone=_zone(match["zone"]), **_time_fields(match)))

    match = _RFC_PATTERN.match(s)
    if match:
        month = MONTH_ABBREVIATIONS.get(match["month_name"][:3].lower())
        if month is None:
            raise ParseError(f"unknown month name {match['month_name']!r} in {text!r}")
        return _check_ranges(
            text,
            Parsed(
                year=_expand_year(match["year"]),
                month=month,
                day=int(match["day"]),
                zone=_zone(match["zone"]),
                **_time_fields(match),
            ),
        )

    raise ParseError(f"cannot parse date/time string: {text!r}")


__all__ = ["KEYWORDS", "MONTH_ABBREVIATIONS", "ZONE_ABBREVIATIONS", "Parsed", "parse"]
