# src/persian_date/domain/calendar.py
"""
Calendar Conversion Engine - Jalali <-> Gregorian Arithmetic

This module holds the pure integer functions that map a Gregorian civil date
to a Jalali (Persian solar Hijri) date and back, plus the leap-year predicates
and month-length tables of both calendars.

Inputs are not range-checked here. Callers validate month and day before
calling in (see persian_date.shared.validators); out-of-range input yields
meaningless numbers rather than an error.

Files that USE this module:
- persian_date.application.pdate (synchronization and calendar setters)
- persian_date.shared.validators (month lengths for day validation)
- persian_date.domain.capabilities (derived month_days / is_leap)
- tests.test_calendar (unit tests)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""
from __future__ import annotations

from typing import Tuple

DateTriple = Tuple[int, int, int]

# Days elapsed in a common Gregorian year before the first of each month
_GREGORIAN_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_GREGORIAN_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# 33-year Jalali cycle and its 4-year sub-cycle, in days
JALALI_CYCLE_DAYS = 12053
JALALI_SUBCYCLE_DAYS = 1461
JALALI_EPOCH_OFFSET = 1595

# First six Jalali months have 31 days: 6 * 31
JALALI_FIRST_HALF_DAYS = 186

JALALI_LEAP_ANCHOR = 1375
JALALI_LEAP_CYCLE = 33
JALALI_LEAP_OFFSETS = (0, 4, 8, 12, 16, 20, 24, 28, 33)


def gregorian_to_jalali(year: int, month: int, day: int) -> DateTriple:
    """
    Convert a Gregorian date to a Jalali date.

    The Gregorian year is shifted by one after February so that leap days are
    counted up to the date, then an absolute day number is decomposed into
    33-year Jalali cycles, 4-year sub-cycles and single years.

    Args:
        year: Gregorian year
        month: Gregorian month (1-12)
        day: Gregorian day of month

    Returns:
        (jalali_year, jalali_month, jalali_day)
    """
    shifted = year + 1 if month > 2 else year
    days = (
        355666
        + 365 * year
        + (shifted + 3) // 4
        - (shifted + 99) // 100
        + (shifted + 399) // 400
        + day
        + _GREGORIAN_DAYS_BEFORE_MONTH[month - 1]
    )

    j_year = -JALALI_EPOCH_OFFSET + JALALI_LEAP_CYCLE * (days // JALALI_CYCLE_DAYS)
    days %= JALALI_CYCLE_DAYS
    j_year += 4 * (days // JALALI_SUBCYCLE_DAYS)
    days %= JALALI_SUBCYCLE_DAYS
    # First year of each sub-cycle is the 366-day one
    if days > 365:
        j_year += (days - 1) // 365
        days = (days - 1) % 365

    if days < JALALI_FIRST_HALF_DAYS:
        j_month = 1 + days // 31
        j_day = 1 + days % 31
    else:
        j_month = 7 + (days - JALALI_FIRST_HALF_DAYS) // 30
        j_day = 1 + (days - JALALI_FIRST_HALF_DAYS) % 30
    return j_year, j_month, j_day


def jalali_to_gregorian(year: int, month: int, day: int) -> DateTriple:
    """
    Convert a Jalali date to a Gregorian date.

    Exact inverse of gregorian_to_jalali over valid dates.

    Args:
        year: Jalali year
        month: Jalali month (1-12)
        day: Jalali day of month

    Returns:
        (gregorian_year, gregorian_month, gregorian_day)
    """
    shifted = year + JALALI_EPOCH_OFFSET
    if month < 7:
        month_offset = (month - 1) * 31
    else:
        month_offset = (month - 7) * 30 + JALALI_FIRST_HALF_DAYS
    days = (
        -355668
        + 365 * shifted
        + (shifted // 33) * 8
        + ((shifted % 33) + 3) // 4
        + day
        + month_offset
    )

    g_year = 400 * (days // 146097)
    days %= 146097
    if days > 36524:
        days -= 1
        g_year += 100 * (days // 36524)
        days %= 36524
        if days >= 365:
            days += 1
    g_year += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        g_year += (days - 1) // 365
        days = (days - 1) % 365

    g_day = days + 1
    g_month = 1
    for length in _gregorian_month_table(g_year):
        if g_day <= length:
            break
        g_day -= length
        g_month += 1
    return g_year, g_month, g_day


def is_gregorian_leap(year: int) -> bool:
    """Standard 4/100/400 rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_jalali_leap(year: int) -> bool:
    """
    Jalali leap-year test against the 1375 anchor and its 33-year cycle.

    The start of the 33-year block containing ``year`` is located by stepping
    whole cycles forward (floor) or backward (ceil) from the anchor; the year is
    leap when it sits at one of JALALI_LEAP_OFFSETS from that start.
    """
    offset = year - JALALI_LEAP_ANCHOR
    if offset == 0 or offset % JALALI_LEAP_CYCLE == 0:
        return True

    cycle_start = JALALI_LEAP_ANCHOR
    if offset > 0:
        if offset > JALALI_LEAP_CYCLE:
            cycle_start = JALALI_LEAP_ANCHOR + (offset // JALALI_LEAP_CYCLE) * JALALI_LEAP_CYCLE
    elif offset > -JALALI_LEAP_CYCLE:
        cycle_start = JALALI_LEAP_ANCHOR - JALALI_LEAP_CYCLE
    else:
        cycles_back = -(offset // JALALI_LEAP_CYCLE)  # ceil(|offset| / 33)
        cycle_start = JALALI_LEAP_ANCHOR - cycles_back * JALALI_LEAP_CYCLE

    return (year - cycle_start) in JALALI_LEAP_OFFSETS


def jalali_month_length(year: int, month: int) -> int:
    """Days in a Jalali month: 31 for 1-6, 30 for 7-11, 29/30 for Esfand."""
    if month <= 6:
        return 31
    if month <= 11 or is_jalali_leap(year):
        return 30
    return 29


def gregorian_month_length(year: int, month: int) -> int:
    """Days in a Gregorian month."""
    return _gregorian_month_table(year)[month - 1]


def _gregorian_month_table(year: int) -> Tuple[int, ...]:
    if is_gregorian_leap(year):
        return (31, 29) + _GREGORIAN_MONTH_LENGTHS[2:]
    return _GREGORIAN_MONTH_LENGTHS


def jalali_day_of_year(month: int, day: int) -> int:
    """Ordinal day in the Jalali year (1-366)."""
    elapsed = sum(31 if m <= 6 else 30 for m in range(1, month))
    return elapsed + day
