# src/persian_date/domain/models.py
"""
Domain Models - Value Objects for the Dual-Calendar Date

This module contains the immutable building blocks of a PDate:
- CalendarFields: every stored field, replaced as one unit on synchronization
- SetResult: outcome of a setter call
- Weekday / JalaliMonth / GregorianMonth: discriminants for name lookups

Files that USE this module:
- persian_date.application.pdate (stores CalendarFields, returns SetResult)
- persian_date.domain.capabilities (Weekday for day_of_week)
- persian_date.shared.language (name tables indexed by the enumerations)
- tests.* (tests compare snapshots)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import IntEnum  # Integer-valued enumerations for table indexes
from typing import Optional  # Type hints for optional values
from zoneinfo import ZoneInfo  # IANA time zone type


class Weekday(IntEnum):
    """Day of week counted from Saturday, the first day of the Iranian week."""
    SATURDAY = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6

    @classmethod
    def from_iso_weekday(cls, iso_weekday: int) -> Weekday:
        """Rotate datetime.weekday() (Monday=0) so that Saturday is 0."""
        return cls((iso_weekday + 2) % 7)


class JalaliMonth(IntEnum):
    FARVARDIN = 0
    ORDIBEHESHT = 1
    KHORDAD = 2
    TIR = 3
    MORDAD = 4
    SHAHRIVAR = 5
    MEHR = 6
    ABAN = 7
    AZAR = 8
    DEY = 9
    BAHMAN = 10
    ESFAND = 11


class GregorianMonth(IntEnum):
    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11


@dataclass(frozen=True)
class CalendarFields:
    """
    Complete stored state of a PDate.

    Attributes:
        year, month, day: Jalali date
        grg_year, grg_month, grg_day: Gregorian date
        hour, minute, second: wall-clock time in time_zone
        nano_second: sub-second part (millisecond resolution)
        time_millis: milliseconds since the Unix epoch (authoritative)
        time_zone: zone the civil fields are expressed in
    """
    year: int
    month: int
    day: int
    grg_year: int
    grg_month: int
    grg_day: int
    hour: int
    minute: int
    second: int
    nano_second: int
    time_millis: int
    time_zone: ZoneInfo


@dataclass(frozen=True)
class SetResult:
    """
    Outcome of a setter call.

    Attributes:
        ok: True if the value was updated
        field: Name of the rejected field (None on success)
        message: Diagnostic naming the field and its valid range
    """
    ok: bool
    field: Optional[str] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> SetResult:
        return cls(ok=True)

    @classmethod
    def rejected(cls, field: str, message: str) -> SetResult:
        return cls(ok=False, field=field, message=message)
