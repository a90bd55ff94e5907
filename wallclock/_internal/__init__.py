"""Internal utilities for Wallclock.

This module contains private implementation details:
    - Constants and lookup tables
    - The proleptic Gregorian calendar engine
    - Field-change (cascade) resolution
    - Custom decorators (@deprecated, @memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from wallclock._internal.decorators import deprecated, memoize

__all__: list[str] = [
    "deprecated",
    "memoize",
]
