# src/persian_date/__init__.py
"""
persian_date - Jalali/Gregorian Dual-Calendar Dates

A date-time value that carries a Jalali (Persian solar Hijri) date, a
Gregorian date and a wall-clock time in a time zone, all kept consistent
with one epoch-millisecond timestamp.
"""

__version__ = "0.1.0"

from persian_date.application.pdate import PDate
from persian_date.adapters.clock import FrozenClock, SystemClock
from persian_date.domain.calendar import (
    gregorian_month_length,
    gregorian_to_jalali,
    is_gregorian_leap,
    is_jalali_leap,
    jalali_month_length,
    jalali_to_gregorian,
)
from persian_date.domain.capabilities import Reader, Setter
from persian_date.domain.errors import (
    CalendarRangeError,
    DomainError,
    InvalidDateError,
    InvariantViolationError,
    UnknownTimeZoneError,
)
from persian_date.domain.models import SetResult, Weekday
from persian_date.shared.logging_conf import configure_logging, setup_logging

__all__ = [
    "PDate",
    "Reader",
    "Setter",
    "SetResult",
    "Weekday",
    "FrozenClock",
    "SystemClock",
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "is_gregorian_leap",
    "is_jalali_leap",
    "gregorian_month_length",
    "jalali_month_length",
    "CalendarRangeError",
    "DomainError",
    "InvalidDateError",
    "InvariantViolationError",
    "UnknownTimeZoneError",
    "configure_logging",
    "setup_logging",
]
