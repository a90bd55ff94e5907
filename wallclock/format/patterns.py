"""Named format patterns.

Each constant is a pattern for ``format()`` using the PHP-style tokens
documented in ``wallclock.format.formatter``. The catalog maps the
lower-case names used by ``format_as()`` and the ``as_*`` accessors to
their patterns.
"""

from __future__ import annotations

from wallclock._internal.constants import ZERO_DATE, ZERO_DATETIME

ATOM = "Y-m-d\\TH:i:sP"
COOKIE = "l, d-M-Y H:i:s T"
ISO8601 = "Y-m-d\\TH:i:sO"
RFC822 = "D, d M y H:i:s O"
RFC850 = "l, d-M-y H:i:s T"
RFC1036 = "D, d M y H:i:s O"
RFC1123 = "D, d M Y H:i:s O"
RFC2822 = "D, d M Y H:i:s O"
RFC3339 = "Y-m-d\\TH:i:sP"
RSS = "D, d M Y H:i:s O"
W3C = "Y-m-d\\TH:i:sP"

DB = "Y-m-d H:i:s"
NUMBER = "YmdHis"
DATE = "Y-m-d"
TIME = "H:i:s"

FORMATS: dict[str, str] = {
    "atom": ATOM,
    "cookie": COOKIE,
    "iso8601": ISO8601,
    "rfc822": RFC822,
    "rfc850": RFC850,
    "rfc1036": RFC1036,
    "rfc1123": RFC1123,
    "rfc2822": RFC2822,
    "rfc3339": RFC3339,
    "rss": RSS,
    "w3c": W3C,
    "db": DB,
    "number": NUMBER,
    "date": DATE,
    "time": TIME,
}

# Named formats that spell a zero UTC offset differently
GMT_FORMATS: frozenset[str] = frozenset({"rfc822", "rfc1123"})
ZULU_FORMATS: frozenset[str] = frozenset({"iso8601"})

# Patterns that render the empty date literally
EMPTY_LITERALS: dict[str, str] = {
    DATE: ZERO_DATE,
    DB: ZERO_DATETIME,
}


__all__ = [
    "ATOM",
    "COOKIE",
    "ISO8601",
    "RFC822",
    "RFC850",
    "RFC1036",
    "RFC1123",
    "RFC2822",
    "RFC3339",
    "RSS",
    "W3C",
    "DB",
    "NUMBER",
    "DATE",
    "TIME",
    "FORMATS",
    "GMT_FORMATS",
    "ZULU_FORMATS",
    "EMPTY_LITERALS",
]
