# src/persian_date/domain/__init__.py
"""
Domain Layer - Calendar Arithmetic and Value Objects

This package contains the conversion engine, value objects and errors.
No dependencies on the clock or the time zone database.
"""

from persian_date.domain.models import (
    CalendarFields,
    GregorianMonth,
    JalaliMonth,
    SetResult,
    Weekday,
)
from persian_date.domain.errors import (
    CalendarRangeError,
    DomainError,
    InvalidDateError,
    InvariantViolationError,
    UnknownTimeZoneError,
)

__all__ = [
    "CalendarFields",
    "GregorianMonth",
    "JalaliMonth",
    "SetResult",
    "Weekday",
    "CalendarRangeError",
    "DomainError",
    "InvalidDateError",
    "InvariantViolationError",
    "UnknownTimeZoneError",
]
