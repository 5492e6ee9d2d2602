# src/persian_date/shared/validators.py
"""
Input Validation Utilities - Calendar Field Ranges

This module provides the range checks run before any mutation of a PDate.
Each check returns None when the value is acceptable, or a diagnostic
message naming the field and its valid range.

Files that USE this module:
- persian_date.application.pdate (every setter and constructor validates first)
- tests.test_validators (unit tests)

Files that this module USES:
- persian_date.domain.calendar (month lengths of both calendars)
"""
from typing import Optional

from persian_date.domain.calendar import gregorian_month_length, jalali_month_length

MIN_YEAR = 1
MAX_GREGORIAN_YEAR = 9999
# Last Jalali year that ends inside Gregorian 9999
MAX_JALALI_YEAR = 9377
# One day of margin inside datetime's 1..9999 keeps every zone offset representable
MIN_EPOCH_MILLIS = -62135510400000  # 0001-01-02T00:00:00Z
MAX_EPOCH_MILLIS = 253402128000000  # 9999-12-30T00:00:00Z


def _range_message(name: str, low: int, high: int) -> str:
    return f"{name} must be between {low}-{high}"


def validate_jalali_year(year: int) -> Optional[str]:
    if year < MIN_YEAR or year > MAX_JALALI_YEAR:
        return _range_message("Year", MIN_YEAR, MAX_JALALI_YEAR)
    return None


def validate_gregorian_year(year: int) -> Optional[str]:
    if year < MIN_YEAR or year > MAX_GREGORIAN_YEAR:
        return _range_message("Year", MIN_YEAR, MAX_GREGORIAN_YEAR)
    return None


def validate_month(month: int) -> Optional[str]:
    if not 1 <= month <= 12:
        return _range_message("Month", 1, 12)
    return None


def validate_jalali_day(year: int, month: int, day: int) -> Optional[str]:
    """
    Validate a Jalali day against the length of its month.

    Args:
        year: Jalali year (decides Esfand's length)
        month: Jalali month, already validated
        day: Day to validate

    Returns:
        None if valid, diagnostic message otherwise
    """
    if not 1 <= day <= 31:
        return _range_message("Day", 1, 31)
    length = jalali_month_length(year, month)
    if day > length:
        return _range_message("Day", 1, length)
    return None


def validate_gregorian_day(year: int, month: int, day: int) -> Optional[str]:
    """Validate a Gregorian day against the length of its month."""
    if not 1 <= day <= 31:
        return _range_message("Day", 1, 31)
    length = gregorian_month_length(year, month)
    if day > length:
        return _range_message("Day", 1, length)
    return None


def validate_hour(hour: int) -> Optional[str]:
    if not 0 <= hour <= 23:
        return _range_message("Hour", 0, 23)
    return None


def validate_minute(minute: int) -> Optional[str]:
    if not 0 <= minute <= 59:
        return _range_message("Minute", 0, 59)
    return None


def validate_second(second: int) -> Optional[str]:
    if not 0 <= second <= 59:
        return _range_message("Second", 0, 59)
    return None


def validate_epoch_millis(millis: int) -> Optional[str]:
    """
    Validate a timestamp against the range every zone can represent.

    Args:
        millis: Milliseconds since the Unix epoch

    Returns:
        None if valid, diagnostic message otherwise
    """
    if not MIN_EPOCH_MILLIS <= millis <= MAX_EPOCH_MILLIS:
        return _range_message("Timestamp", MIN_EPOCH_MILLIS, MAX_EPOCH_MILLIS)
    return None

