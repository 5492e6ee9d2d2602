# src/persian_date/domain/capabilities.py
"""
Capability Interfaces - Reader and Setter

Reader is the read contract of a dual-calendar date: the stored fields as
abstract properties, plus everything derivable from them without touching
the clock (weekday, day of year, month lengths, leap flags, localized names).
Setter is the mutation contract. An immutable implementation provides only
Reader.

Files that USE this module:
- persian_date.application.pdate (PDate implements Reader and Setter)
- persian_date.adapters.formatting.formatter (formats any Reader)

Files that this module USES:
- persian_date.domain.calendar (month lengths, leap predicates, day of year)
- persian_date.domain.models (Weekday, month enumerations, SetResult)
- persian_date.shared.language (name tables)
- persian_date.adapters.clock (utc_offset)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from zoneinfo import ZoneInfo

from persian_date.domain import calendar
from persian_date.domain.models import GregorianMonth, JalaliMonth, SetResult, Weekday
from persian_date.shared import language


class Reader(ABC):
    """Read access to a synchronized dual-calendar date."""

    @property
    @abstractmethod
    def year(self) -> int:
        """Jalali year."""

    @property
    @abstractmethod
    def month(self) -> int:
        """Jalali month (1-12)."""

    @property
    @abstractmethod
    def day(self) -> int:
        """Jalali day of month."""

    @property
    @abstractmethod
    def grg_year(self) -> int:
        """Gregorian year."""

    @property
    @abstractmethod
    def grg_month(self) -> int:
        """Gregorian month (1-12)."""

    @property
    @abstractmethod
    def grg_day(self) -> int:
        """Gregorian day of month."""

    @property
    @abstractmethod
    def hour(self) -> int:
        """Hour in day (0-23)."""

    @property
    @abstractmethod
    def minute(self) -> int:
        ...

    @property
    @abstractmethod
    def second(self) -> int:
        ...

    @property
    @abstractmethod
    def nano_second(self) -> int:
        ...

    @property
    @abstractmethod
    def time_millis(self) -> int:
        """Milliseconds since the Unix epoch."""

    @property
    @abstractmethod
    def time_zone(self) -> ZoneInfo:
        ...

    # --- derived ---

    @property
    def hour_12(self) -> int:
        """
        Hour on a 12-hour clock.

        Hours 0-12 are returned unchanged and 13-23 become 1-11, so
        midnight is 0 and noon is 12.
        """
        return self.hour if self.hour <= 12 else self.hour - 12

    @property
    def day_of_week(self) -> int:
        """Day of week, 0 = Saturday through 6 = Friday."""
        iso_weekday = date(self.grg_year, self.grg_month, self.grg_day).weekday()
        return int(Weekday.from_iso_weekday(iso_weekday))

    @property
    def day_of_year(self) -> int:
        """Ordinal day in the Jalali year."""
        return calendar.jalali_day_of_year(self.month, self.day)

    @property
    def month_days(self) -> int:
        return calendar.jalali_month_length(self.year, self.month)

    @property
    def grg_month_days(self) -> int:
        return calendar.gregorian_month_length(self.grg_year, self.grg_month)

    @property
    def is_leap(self) -> bool:
        return calendar.is_jalali_leap(self.year)

    @property
    def is_grg_leap(self) -> bool:
        return calendar.is_gregorian_leap(self.grg_year)

    @property
    def is_before_noon(self) -> bool:
        return self.hour < 12

    @property
    def utc_offset(self) -> str:
        """UTC offset of time_zone at this instant, as ±HH:MM."""
        from persian_date.adapters.clock import format_utc_offset, from_epoch_millis
        return format_utc_offset(from_epoch_millis(self.time_millis, self.time_zone))

    def day_name(self, lang: Optional[str] = None) -> str:
        """Weekday name; configured default language (Persian) unless given."""
        return language.day_name(Weekday(self.day_of_week), lang)

    def grg_day_name(self, lang: Optional[str] = language.LANG_ENGLISH) -> str:
        """Weekday name; English unless given."""
        return language.day_name(Weekday(self.day_of_week), lang)

    def month_name(self, lang: Optional[str] = None) -> str:
        """Jalali month name, e.g. فروردین."""
        return language.jalali_month_name(JalaliMonth(self.month - 1), lang)

    def grg_month_name(self, lang: Optional[str] = language.LANG_ENGLISH) -> str:
        """Gregorian month name, e.g. January."""
        return language.gregorian_month_name(GregorianMonth(self.grg_month - 1), lang)

    def time_of_day(self, lang: Optional[str] = None) -> str:
        """Before/after noon, e.g. قبل از ظهر."""
        return language.translate("before_noon" if self.is_before_noon else "after_noon", lang)

    def short_time_of_day(self, lang: Optional[str] = None) -> str:
        """Abbreviated before/after noon, e.g. ق.ظ."""
        key = "before_noon_short" if self.is_before_noon else "after_noon_short"
        return language.translate(key, lang)


class Setter(ABC):
    """
    Mutation access to a dual-calendar date.

    Absolute setters validate first and return a failed SetResult, leaving
    the value untouched, when the input is out of range. Adders apply only
    positive amounts; an amount below 1 is a no-op.
    """

    @abstractmethod
    def set_ymd(self, year: int, month: int, day: int) -> SetResult:
        """Set the Jalali date."""

    @abstractmethod
    def set_grg_ymd(self, year: int, month: int, day: int) -> SetResult:
        """Set the Gregorian date."""

    @abstractmethod
    def set_year(self, year: int) -> SetResult:
        ...

    @abstractmethod
    def set_grg_year(self, year: int) -> SetResult:
        ...

    @abstractmethod
    def set_month(self, month: int) -> SetResult:
        ...

    @abstractmethod
    def set_grg_month(self, month: int) -> SetResult:
        ...

    @abstractmethod
    def set_day(self, day: int) -> SetResult:
        ...

    @abstractmethod
    def set_grg_day(self, day: int) -> SetResult:
        ...

    @abstractmethod
    def set_hour(self, hour: int) -> SetResult:
        ...

    @abstractmethod
    def set_minute(self, minute: int) -> SetResult:
        ...

    @abstractmethod
    def set_second(self, second: int) -> SetResult:
        ...

    @abstractmethod
    def set_time_millis(self, millis: int) -> SetResult:
        ...

    @abstractmethod
    def set_time_zone(self, zone) -> SetResult:
        ...

    @abstractmethod
    def add_years(self, years: int) -> None:
        ...

    @abstractmethod
    def add_months(self, months: int) -> None:
        ...

    @abstractmethod
    def add_weeks(self, weeks: int) -> None:
        ...

    @abstractmethod
    def add_days(self, days: int) -> None:
        ...

    @abstractmethod
    def add_hours(self, hours: int) -> None:
        ...

    @abstractmethod
    def add_minutes(self, minutes: int) -> None:
        ...

    @abstractmethod
    def add_seconds(self, seconds: int) -> None:
        ...
