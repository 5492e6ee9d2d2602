# tests/test_clock.py
"""
Clock Adapter Tests - Unit Tests for the Time/Zone Collaborator

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- persian_date.adapters.clock (all clock and zone functions for testing)
- persian_date.domain.errors (UnknownTimeZoneError, CalendarRangeError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import datetime  # Building zoned datetimes
from unittest.mock import patch  # Patching the system clock
from zoneinfo import ZoneInfo  # IANA time zones

from persian_date.adapters.clock import (
    FrozenClock,
    SystemClock,
    add_duration,
    add_months,
    format_utc_offset,
    from_epoch_millis,
    resolve_zone,
    to_epoch_millis,
)
from persian_date.domain.errors import CalendarRangeError, UnknownTimeZoneError


class TestClocks:
    def test_frozen_clock(self):
        assert FrozenClock(42).now_millis() == 42

    @patch("persian_date.adapters.clock.time.time_ns")
    def test_system_clock_truncates_to_millis(self, mock_time_ns):
        mock_time_ns.return_value = 1_710_923_415_250_999_999
        assert SystemClock().now_millis() == 1_710_923_415_250


class TestZones:
    def test_resolve_name(self):
        assert resolve_zone("Asia/Tehran") == ZoneInfo("Asia/Tehran")

    def test_resolve_passes_zoneinfo_through(self, tehran):
        assert resolve_zone(tehran) is tehran

    def test_unknown_zone(self):
        with pytest.raises(UnknownTimeZoneError, match="Nowhere/Atlantis"):
            resolve_zone("Nowhere/Atlantis")


class TestEpochConversion:
    def test_from_epoch_millis(self, tehran):
        moment = from_epoch_millis(0, tehran)
        assert (moment.year, moment.month, moment.day, moment.hour, moment.minute) == (1970, 1, 1, 3, 30)
        assert moment.tzinfo is tehran

    def test_to_epoch_millis_floors(self, utc):
        assert to_epoch_millis(datetime(1970, 1, 1, 0, 0, 0, 1999, tzinfo=utc)) == 1
        assert to_epoch_millis(datetime(1969, 12, 31, 23, 59, 59, 999500, tzinfo=utc)) == -1

    def test_round_trip(self, tehran):
        millis = 1710923415250
        assert to_epoch_millis(from_epoch_millis(millis, tehran)) == millis

    def test_out_of_range(self, utc):
        with pytest.raises(CalendarRangeError):
            from_epoch_millis(10 ** 18, utc)


class TestArithmetic:
    def test_add_months_clamps(self, utc):
        moment = datetime(2023, 1, 31, 10, 0, tzinfo=utc)
        assert add_months(moment, 1) == datetime(2023, 2, 28, 10, 0, tzinfo=utc)
        assert add_months(moment, 13) == datetime(2024, 2, 29, 10, 0, tzinfo=utc)

    def test_add_months_out_of_range(self, utc):
        with pytest.raises(CalendarRangeError):
            add_months(datetime(9999, 12, 1, tzinfo=utc), 1)

    def test_add_duration_is_absolute(self):
        berlin = ZoneInfo("Europe/Berlin")
        moment = datetime(2024, 3, 30, 12, 0, tzinfo=berlin)
        shifted = add_duration(moment, days=1)
        assert shifted.hour == 13
        assert to_epoch_millis(shifted) - to_epoch_millis(moment) == 24 * 3600 * 1000
        assert shifted.tzinfo is berlin

    def test_add_duration_out_of_range(self, utc):
        with pytest.raises(CalendarRangeError):
            add_duration(datetime(9999, 12, 31, tzinfo=utc), days=2)

    def test_add_duration_amount_too_large_for_timedelta(self, utc):
        with pytest.raises(CalendarRangeError):
            add_duration(datetime(2000, 1, 1, tzinfo=utc), days=10**9)


class TestUtcOffset:
    @pytest.mark.parametrize("zone, expected", [
        ("Asia/Tehran", "+03:30"),
        ("Asia/Kolkata", "+05:30"),
        ("America/New_York", "-05:00"),
        ("UTC", "+00:00"),
    ])
    def test_format_utc_offset(self, zone, expected):
        assert format_utc_offset(from_epoch_millis(0, ZoneInfo(zone))) == expected
