# src/persian_date/adapters/clock.py
"""
Clock and Zone Adapter - Time/Zone Collaborator

This module is the only place that touches the wall clock and the IANA time
zone database. It turns epoch milliseconds into zoned civil datetimes and back,
and performs the two kinds of arithmetic a PDate needs:
- calendar-month arithmetic on the wall clock (python-dateutil relativedelta)
- fixed-duration arithmetic on the absolute instant (a day is always 86 400 s)

Files that USE this module:
- persian_date.application.pdate (construction, synchronization, adders)
- persian_date.domain.capabilities (utc_offset)
- tests.test_clock (unit tests)

Files that this module USES:
- persian_date.domain.errors (CalendarRangeError, UnknownTimeZoneError)
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Protocol, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta

from persian_date.domain.errors import CalendarRangeError, UnknownTimeZoneError

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

ZoneLike = Union[str, ZoneInfo]


class Clock(Protocol):
    def now_millis(self) -> int:
        ...


@dataclass
class SystemClock:
    """Reads the host's clock."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000


@dataclass
class FrozenClock:
    """Always returns the same instant; for deterministic construction."""
    fixed_millis: int = field(default=0)

    def now_millis(self) -> int:
        return self.fixed_millis


def resolve_zone(zone: ZoneLike) -> ZoneInfo:
    """
    Resolve a zone name or ZoneInfo to a ZoneInfo.

    Args:
        zone: IANA zone name (e.g. "Asia/Tehran") or ZoneInfo instance

    Returns:
        ZoneInfo instance

    Raises:
        UnknownTimeZoneError: If the name is not in the zone database
    """
    if isinstance(zone, ZoneInfo):
        return zone
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise UnknownTimeZoneError(f"Unknown time zone: {zone!r}") from e


def default_zone() -> ZoneInfo:
    """Zone configured in settings (Asia/Tehran unless overridden)."""
    from persian_date.config import settings
    return resolve_zone(settings.default_time_zone)


def from_epoch_millis(millis: int, zone: ZoneInfo) -> datetime:
    """Zoned civil datetime for an epoch-millisecond instant."""
    try:
        return (EPOCH + timedelta(milliseconds=millis)).astimezone(zone)
    except (OverflowError, ValueError) as e:
        raise CalendarRangeError(f"Timestamp {millis} is outside the supported range") from e


def to_epoch_millis(moment: datetime) -> int:
    """Milliseconds since the epoch for an aware datetime (floor)."""
    try:
        return (moment - EPOCH) // ONE_MILLISECOND
    except (OverflowError, ValueError) as e:
        raise CalendarRangeError(f"{moment!r} is outside the supported range") from e


def add_months(moment: datetime, months: int) -> datetime:
    """
    Add calendar months on the wall clock.

    The day is clamped to the length of the target month
    (Esfand 31st does not exist; Jan 31 + 1 month is Feb 28/29).
    """
    try:
        return moment + relativedelta(months=months)
    except (OverflowError, ValueError) as e:
        raise CalendarRangeError(f"Adding {months} months to {moment!r} leaves the supported range") from e


def add_duration(moment: datetime, **units: int) -> datetime:
    """
    Add a fixed duration (timedelta keyword units) to the absolute instant.

    Aware datetime arithmetic in Python is wall-clock arithmetic, so the sum is
    done on the UTC instant and converted back; 7 days is always 7 * 24 h even
    when the zone's offset changes in between.
    """
    try:
        shifted = moment.astimezone(timezone.utc) + timedelta(**units)
        return shifted.astimezone(moment.tzinfo)
    except (OverflowError, ValueError) as e:
        raise CalendarRangeError(f"Adding {units} to {moment!r} leaves the supported range") from e


def format_utc_offset(moment: datetime) -> str:
    """UTC offset of a zoned datetime as ±HH:MM."""
    offset = moment.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"
