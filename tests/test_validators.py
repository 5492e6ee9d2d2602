# tests/test_validators.py
"""
Validator Tests - Unit Tests for Calendar Field Range Checks

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- persian_date.shared.validators (all validation functions for testing)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from persian_date.shared.validators import (
    MAX_EPOCH_MILLIS,
    MIN_EPOCH_MILLIS,
    validate_epoch_millis,
    validate_gregorian_day,
    validate_gregorian_year,
    validate_hour,
    validate_jalali_day,
    validate_jalali_year,
    validate_minute,
    validate_month,
    validate_second,
)


class TestYearAndMonth:
    def test_jalali_year(self):
        assert validate_jalali_year(1) is None
        assert validate_jalali_year(9377) is None
        assert validate_jalali_year(0) == "Year must be between 1-9377"
        assert validate_jalali_year(9378) == "Year must be between 1-9377"

    def test_gregorian_year(self):
        assert validate_gregorian_year(2024) is None
        assert validate_gregorian_year(10000) == "Year must be between 1-9999"

    @pytest.mark.parametrize("month", [1, 6, 12])
    def test_valid_month(self, month):
        assert validate_month(month) is None

    @pytest.mark.parametrize("month", [-1, 0, 13])
    def test_invalid_month(self, month):
        assert validate_month(month) == "Month must be between 1-12"


class TestDays:
    def test_jalali_day_uses_month_length(self):
        assert validate_jalali_day(1403, 1, 31) is None
        assert validate_jalali_day(1403, 7, 31) == "Day must be between 1-30"
        assert validate_jalali_day(1403, 12, 30) is None
        assert validate_jalali_day(1402, 12, 30) == "Day must be between 1-29"

    def test_jalali_day_outside_any_month(self):
        assert validate_jalali_day(1403, 1, 0) == "Day must be between 1-31"
        assert validate_jalali_day(1403, 1, 32) == "Day must be between 1-31"

    def test_gregorian_day_uses_month_length(self):
        assert validate_gregorian_day(2024, 2, 29) is None
        assert validate_gregorian_day(2023, 2, 29) == "Day must be between 1-28"
        assert validate_gregorian_day(2023, 4, 31) == "Day must be between 1-30"
        assert validate_gregorian_day(2023, 1, 0) == "Day must be between 1-31"


class TestTimeFields:
    def test_hour(self):
        assert validate_hour(0) is None
        assert validate_hour(23) is None
        assert validate_hour(24) == "Hour must be between 0-23"

    def test_minute_and_second(self):
        assert validate_minute(59) is None
        assert validate_minute(60) == "Minute must be between 0-59"
        assert validate_second(0) is None
        assert validate_second(-1) == "Second must be between 0-59"

    def test_epoch_millis(self):
        assert validate_epoch_millis(0) is None
        assert validate_epoch_millis(MIN_EPOCH_MILLIS) is None
        assert validate_epoch_millis(MAX_EPOCH_MILLIS) is None
        assert validate_epoch_millis(MAX_EPOCH_MILLIS + 1) is not None
        assert validate_epoch_millis(MIN_EPOCH_MILLIS - 1).startswith("Timestamp must be between")
