"""Formatting and parsing.

This module provides the conversions between values and strings:
    - The named format catalog (ATOM, RFC 2822, DB...)
    - Pattern formatting with PHP ``date()`` tokens
    - Parsing of the accepted date/time string forms

Functions:
    format_pattern: Render a Moment with a pattern.
    parse: Read a date/time string into its components.

Examples:
    >>> from wallclock.format import parse
    >>> parse("2024-01-15T14:30:45Z").zone
    'UTC'
"""

from __future__ import annotations

from wallclock.format.formatter import Moment, format_pattern
from wallclock.format.parser import Parsed, parse
from wallclock.format.patterns import FORMATS

__all__: list[str] = [
    "FORMATS",
    "Moment",
    "Parsed",
    "format_pattern",
    "parse",
]
