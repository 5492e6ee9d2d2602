# src/persian_date/application/pdate.py
"""
PDate - Dual-Calendar Date Value

PDate represents one instant as a Jalali date, a Gregorian date and a
wall-clock time in a time zone. The epoch-millisecond timestamp is the source
of truth; every other field is derived from it by update_from(), the single
routine allowed to write stored state. Setters validate, build a new zoned
datetime, and hand it to update_from(); nothing else touches the fields.

Instances are mutable and not thread-safe: guard a shared instance with a
lock, or copy() before mutating.

Files that USE this module:
- persian_date (package exports PDate)
- tests.test_pdate (unit tests)

Files that this module USES:
- persian_date.domain.calendar (Jalali <-> Gregorian conversion)
- persian_date.domain.capabilities (Reader and Setter contracts)
- persian_date.domain.models (CalendarFields, SetResult)
- persian_date.domain.errors (constructor and invariant errors)
- persian_date.adapters.clock (zones, epoch conversion, arithmetic)
- persian_date.adapters.formatting.formatter (pattern formatting)
- persian_date.shared.validators (range checks)
"""
from __future__ import annotations

import logging
from datetime import datetime
from functools import total_ordering
from typing import Optional
from zoneinfo import ZoneInfo

from persian_date.adapters import clock
from persian_date.adapters.clock import Clock, SystemClock, ZoneLike
from persian_date.adapters.formatting.formatter import DEFAULT_PATTERN, format_pdate
from persian_date.domain.calendar import gregorian_to_jalali, jalali_to_gregorian
from persian_date.domain.capabilities import Reader, Setter
from persian_date.domain.errors import CalendarRangeError, InvalidDateError, InvariantViolationError
from persian_date.domain.models import CalendarFields, SetResult
from persian_date.shared.validators import (
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

logger = logging.getLogger(__name__)


def _zone_or_default(zone: Optional[ZoneLike]) -> ZoneInfo:
    return clock.default_zone() if zone is None else clock.resolve_zone(zone)


@total_ordering
class PDate(Reader, Setter):
    """
    Jalali/Gregorian date-time kept consistent with one epoch timestamp.

    Two values compare by time_millis only; zones and calendar fields are
    presentation.
    """

    __hash__ = None  # mutable

    def __init__(self, time_millis: int, time_zone: Optional[ZoneLike] = None):
        """
        Create a value for an epoch-millisecond timestamp.

        Args:
            time_millis: Milliseconds since the Unix epoch
            time_zone: Zone name or ZoneInfo (default: settings.default_time_zone)

        Raises:
            InvalidDateError: If the timestamp is outside the supported range
            UnknownTimeZoneError: If the zone cannot be resolved
        """
        error = validate_epoch_millis(time_millis)
        if error:
            raise InvalidDateError(error)
        zone = _zone_or_default(time_zone)
        self._fields: CalendarFields
        self.update_from(clock.from_epoch_millis(time_millis, zone))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def now(cls, time_zone: Optional[ZoneLike] = None, source: Optional[Clock] = None) -> PDate:
        """Current instant from the given clock (system clock by default)."""
        return cls((source or SystemClock()).now_millis(), time_zone)

    @classmethod
    def from_time_millis(cls, millis: int, time_zone: Optional[ZoneLike] = None) -> PDate:
        return cls(millis, time_zone)

    @classmethod
    def from_gregorian_date(
        cls,
        year: int,
        month: int,
        day: int,
        time_zone: Optional[ZoneLike] = None,
        source: Optional[Clock] = None,
    ) -> PDate:
        """
        Value on a Gregorian date, at the current time of day in the zone.

        Raises:
            InvalidDateError: If the date is out of range
        """
        error = (
            validate_gregorian_year(year)
            or validate_month(month)
            or validate_gregorian_day(year, month, day)
        )
        if error:
            raise InvalidDateError(error)

        zone = _zone_or_default(time_zone)
        now_millis = (source or SystemClock()).now_millis()
        moment = clock.from_epoch_millis(now_millis, zone).replace(year=year, month=month, day=day)
        millis = clock.to_epoch_millis(moment)
        error = validate_epoch_millis(millis)
        if error:
            raise InvalidDateError(error)
        return cls(millis, zone)

    @classmethod
    def from_jalali_date(
        cls,
        year: int,
        month: int,
        day: int,
        time_zone: Optional[ZoneLike] = None,
        source: Optional[Clock] = None,
    ) -> PDate:
        """
        Value on a Jalali date, at the current time of day in the zone.

        Raises:
            InvalidDateError: If the date is out of range (e.g. Esfand 30th
                of a common year)
        """
        error = (
            validate_jalali_year(year)
            or validate_month(month)
            or validate_jalali_day(year, month, day)
        )
        if error:
            raise InvalidDateError(error)
        g_year, g_month, g_day = jalali_to_gregorian(year, month, day)
        return cls.from_gregorian_date(g_year, g_month, g_day, time_zone, source)

    # ------------------------------------------------------------------
    # Synchronization
    # ------------------------------------------------------------------

    def update_from(self, moment: datetime) -> None:
        """
        Re-derive every stored field from a zoned datetime.

        The datetime is reduced to epoch milliseconds and re-expanded in its
        zone, so wall times that fall into a zone gap land on the real instant
        and sub-millisecond digits are dropped. All fields are replaced in one
        assignment.
        """
        zone = moment.tzinfo
        if not isinstance(zone, ZoneInfo):
            raise InvariantViolationError(f"Expected a ZoneInfo-aware datetime, got {moment!r}")

        millis = clock.to_epoch_millis(moment)
        civil = clock.from_epoch_millis(millis, zone)
        j_year, j_month, j_day = gregorian_to_jalali(civil.year, civil.month, civil.day)

        self._fields = CalendarFields(
            year=j_year,
            month=j_month,
            day=j_day,
            grg_year=civil.year,
            grg_month=civil.month,
            grg_day=civil.day,
            hour=civil.hour,
            minute=civil.minute,
            second=civil.second,
            nano_second=civil.microsecond * 1000,
            time_millis=millis,
            time_zone=zone,
        )
        logger.debug("Synchronized to %s (%d ms, %s)", civil.isoformat(), millis, zone.key)

    def _zoned(self) -> datetime:
        return clock.from_epoch_millis(self._fields.time_millis, self._fields.time_zone)

    def _reject(self, field: str, message: str) -> SetResult:
        logger.warning("Rejected %s change on %s: %s", field, self, message)
        return SetResult.rejected(field, message)

    def _apply_civil(self, field: str, **changes: int) -> SetResult:
        """Apply validated civil-field changes to the current zoned datetime."""
        try:
            candidate = self._zoned().replace(**changes)
        except ValueError as e:
            raise InvariantViolationError(f"Validated {field} change {changes} was rejected: {e}") from e
        error = validate_epoch_millis(clock.to_epoch_millis(candidate))
        if error:
            return self._reject(field, error)
        self.update_from(candidate)
        return SetResult.success()

    def _apply_shift(self, moment: datetime) -> None:
        """Commit an adder result, refusing instants past the supported range."""
        error = validate_epoch_millis(clock.to_epoch_millis(moment))
        if error:
            raise CalendarRangeError(error)
        self.update_from(moment)

    def _apply_jalali(self, field: str, year: int, month: int, day: int) -> SetResult:
        g_year, g_month, g_day = jalali_to_gregorian(year, month, day)
        return self._apply_civil(field, year=g_year, month=g_month, day=g_day)

    # ------------------------------------------------------------------
    # Reader
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._fields.year

    @property
    def month(self) -> int:
        return self._fields.month

    @property
    def day(self) -> int:
        return self._fields.day

    @property
    def grg_year(self) -> int:
        return self._fields.grg_year

    @property
    def grg_month(self) -> int:
        return self._fields.grg_month

    @property
    def grg_day(self) -> int:
        return self._fields.grg_day

    @property
    def hour(self) -> int:
        return self._fields.hour

    @property
    def minute(self) -> int:
        return self._fields.minute

    @property
    def second(self) -> int:
        return self._fields.second

    @property
    def nano_second(self) -> int:
        return self._fields.nano_second

    @property
    def time_millis(self) -> int:
        return self._fields.time_millis

    @property
    def time_zone(self) -> ZoneInfo:
        return self._fields.time_zone

    def snapshot(self) -> CalendarFields:
        """Frozen copy of every stored field."""
        return self._fields

    def copy(self) -> PDate:
        """Independent value at the same instant and zone."""
        duplicate = PDate.__new__(PDate)
        duplicate._fields = self._fields
        return duplicate

    # ------------------------------------------------------------------
    # Setter: absolute
    # ------------------------------------------------------------------

    def set_ymd(self, year: int, month: int, day: int) -> SetResult:
        error = validate_jalali_year(year)
        if error:
            return self._reject("year", error)
        error = validate_month(month)
        if error:
            return self._reject("month", error)
        error = validate_jalali_day(year, month, day)
        if error:
            return self._reject("day", error)
        return self._apply_jalali("date", year, month, day)

    def set_grg_ymd(self, year: int, month: int, day: int) -> SetResult:
        error = validate_gregorian_year(year)
        if error:
            return self._reject("grg_year", error)
        error = validate_month(month)
        if error:
            return self._reject("grg_month", error)
        error = validate_gregorian_day(year, month, day)
        if error:
            return self._reject("grg_day", error)
        return self._apply_civil("grg_date", year=year, month=month, day=day)

    def set_year(self, year: int) -> SetResult:
        error = validate_jalali_year(year)
        if error:
            return self._reject("year", error)
        # Esfand 30th only exists in leap years
        error = validate_jalali_day(year, self.month, self.day)
        if error:
            return self._reject("day", error)
        return self._apply_jalali("year", year, self.month, self.day)

    def set_grg_year(self, year: int) -> SetResult:
        error = validate_gregorian_year(year)
        if error:
            return self._reject("grg_year", error)
        error = validate_gregorian_day(year, self.grg_month, self.grg_day)
        if error:
            return self._reject("grg_day", error)
        return self._apply_civil("grg_year", year=year)

    def set_month(self, month: int) -> SetResult:
        error = validate_month(month)
        if error:
            return self._reject("month", error)
        error = validate_jalali_day(self.year, month, self.day)
        if error:
            return self._reject("day", error)
        return self._apply_jalali("month", self.year, month, self.day)

    def set_grg_month(self, month: int) -> SetResult:
        error = validate_month(month)
        if error:
            return self._reject("grg_month", error)
        error = validate_gregorian_day(self.grg_year, month, self.grg_day)
        if error:
            return self._reject("grg_day", error)
        return self._apply_civil("grg_month", month=month)

    def set_day(self, day: int) -> SetResult:
        error = validate_jalali_day(self.year, self.month, day)
        if error:
            return self._reject("day", error)
        return self._apply_jalali("day", self.year, self.month, day)

    def set_grg_day(self, day: int) -> SetResult:
        error = validate_gregorian_day(self.grg_year, self.grg_month, day)
        if error:
            return self._reject("grg_day", error)
        return self._apply_civil("grg_day", day=day)

    def set_hour(self, hour: int) -> SetResult:
        error = validate_hour(hour)
        if error:
            return self._reject("hour", error)
        return self._apply_civil("hour", hour=hour)

    def set_minute(self, minute: int) -> SetResult:
        error = validate_minute(minute)
        if error:
            return self._reject("minute", error)
        return self._apply_civil("minute", minute=minute)

    def set_second(self, second: int) -> SetResult:
        error = validate_second(second)
        if error:
            return self._reject("second", error)
        return self._apply_civil("second", second=second)

    def set_time_millis(self, millis: int) -> SetResult:
        error = validate_epoch_millis(millis)
        if error:
            return self._reject("time_millis", error)
        self.update_from(clock.from_epoch_millis(millis, self.time_zone))
        return SetResult.success()

    def set_time_zone(self, zone: ZoneLike) -> SetResult:
        """Keep the instant, re-express the civil fields in another zone."""
        try:
            resolved = clock.resolve_zone(zone)
        except ValueError as e:
            return self._reject("time_zone", str(e))
        self.update_from(clock.from_epoch_millis(self.time_millis, resolved))
        return SetResult.success()

    # ------------------------------------------------------------------
    # Setter: relative
    # ------------------------------------------------------------------
    # Amounts below 1 are ignored; there is no subtraction path.

    def add_years(self, years: int) -> None:
        if years >= 1:
            self._apply_shift(clock.add_months(self._zoned(), years * 12))

    def add_months(self, months: int) -> None:
        if months >= 1:
            self._apply_shift(clock.add_months(self._zoned(), months))

    def add_weeks(self, weeks: int) -> None:
        """Add weeks of exactly 7 * 24 hours."""
        if weeks >= 1:
            self._apply_shift(clock.add_duration(self._zoned(), weeks=weeks))

    def add_days(self, days: int) -> None:
        """Add days of exactly 24 hours."""
        if days >= 1:
            self._apply_shift(clock.add_duration(self._zoned(), days=days))

    def add_hours(self, hours: int) -> None:
        if hours >= 1:
            self._apply_shift(clock.add_duration(self._zoned(), hours=hours))

    def add_minutes(self, minutes: int) -> None:
        if minutes >= 1:
            self._apply_shift(clock.add_duration(self._zoned(), minutes=minutes))

    def add_seconds(self, seconds: int) -> None:
        if seconds >= 1:
            self._apply_shift(clock.add_duration(self._zoned(), seconds=seconds))

    # ------------------------------------------------------------------
    # Comparison and presentation
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reader):
            return NotImplemented
        return self.time_millis == other.time_millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reader):
            return NotImplemented
        return self.time_millis < other.time_millis

    def format(self, pattern: str, lang: Optional[str] = None) -> str:
        """Render with strftime-like tokens; see format_pdate."""
        return format_pdate(self, pattern, lang)

    def __str__(self) -> str:
        return format_pdate(self, DEFAULT_PATTERN)

    def __repr__(self) -> str:
        return f"PDate('{self}')"
