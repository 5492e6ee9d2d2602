# src/persian_date/domain/errors.py
"""
Domain Errors - Calendar Exceptions

This module defines the exceptions raised by constructors and by the
time/zone collaborator. Setters never raise for out-of-range input; they
report a failed SetResult instead.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidDateError(DomainError, ValueError):
    """Raised when a constructor receives an out-of-range date or timestamp."""
    pass


class UnknownTimeZoneError(DomainError, ValueError):
    """Raised when a time zone name cannot be resolved."""
    pass


class CalendarRangeError(DomainError, OverflowError):
    """Raised when arithmetic moves an instant outside the representable years."""
    pass


class InvariantViolationError(DomainError, RuntimeError):
    """Raised when pre-validated input is rejected by the time/zone collaborator."""
    pass
