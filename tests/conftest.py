"""Pytest configuration and fixtures for Wallclock tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so wallclock can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from wallclock import localizer  # noqa: E402
from wallclock.clock import FrozenClock, set_clock  # noqa: E402
from wallclock.config import set_default_timezone  # noqa: E402

# 2013-11-04 20:21:22 UTC, a Monday; 21:21:22 in Paris
FROZEN_AT = 1_383_596_482


@pytest.fixture(autouse=True)
def paris_default_timezone():
    """Make Europe/Paris the default timezone for every test."""
    previous = set_default_timezone("Europe/Paris")
    yield "Europe/Paris"
    set_default_timezone(previous)


@pytest.fixture(autouse=True)
def frozen_clock():
    """Install a clock frozen at FROZEN_AT for every test."""
    clock = FrozenClock.at_seconds(FROZEN_AT)
    previous = set_clock(clock)
    yield clock
    set_clock(previous)


@pytest.fixture(autouse=True)
def no_localizer():
    """Start every test with an empty localizer slot."""
    previous = localizer.defined()
    localizer.undefine()
    yield
    if previous is not None:
        localizer.define(previous)
    else:
        localizer.undefine()
