# tests/conftest.py
"""
Shared Fixtures - Clocks and Zones for Deterministic Tests

Files that USE this module:
- pytest (fixtures are injected into every test module)

Files that this module USES:
- persian_date.adapters.clock (FrozenClock)
"""
import pytest  # Testing framework for writing and running tests

from zoneinfo import ZoneInfo  # IANA time zones

from persian_date.adapters.clock import FrozenClock  # Deterministic clock

# 2024-03-20T08:30:15.250Z -> 12:00:15.250 in Tehran (+03:30), Jalali 1403-01-01
NOWRUZ_1403_MILLIS = 1710923415250


@pytest.fixture
def tehran():
    return ZoneInfo("Asia/Tehran")


@pytest.fixture
def utc():
    return ZoneInfo("UTC")


@pytest.fixture
def frozen_clock():
    return FrozenClock(NOWRUZ_1403_MILLIS)
