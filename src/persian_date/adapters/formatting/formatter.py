# src/persian_date/adapters/formatting/formatter.py
"""
Date Formatter - Pattern Rendering for Jalali Dates

This module renders any Reader through strftime-like tokens. Calendar tokens
refer to the Jalali date; names come from the language tables.

Supported tokens:
    %Y year            %C first two year digits   %y last two year digits
    %m month (01)      %B month name              %d day (01)
    %e day ( 1)        %A weekday name            %w weekday (0 = Saturday)
    %U week of year    %j day of year (001)       %H hour (00-23)
    %k hour ( 0-23)    %I 12-hour clock (00)      %l 12-hour clock ( 0)
    %P before/after noon   %p short before/after noon
    %M minute          %S second                  %f nanoseconds (9 digits)
    %.f second.nanoseconds                        %:z UTC offset (+03:30)

Unknown tokens are left as they are.

Files that USE this module:
- persian_date.application.pdate (PDate.format, __str__, __repr__)
- tests.test_formatter (unit tests)

Files that this module USES:
- persian_date.domain.capabilities (Reader, type only)
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:
    from persian_date.domain.capabilities import Reader

DEFAULT_PATTERN = "%Y-%m-%d %H:%M:%S %:z"

_TOKEN_RE = re.compile(r"%(\.f|:z|[YCymBdeAwUjHkIlPpMSf])")


def _fmt_fraction(reader: Reader) -> str:
    return f"{reader.nano_second:09d}"


def _build_tokens(lang: Optional[str]) -> Dict[str, Callable[[Reader], str]]:
    return {
        "Y": lambda r: str(r.year),
        "C": lambda r: str(r.year)[:2],
        "y": lambda r: str(r.year)[2:],
        "m": lambda r: f"{r.month:02d}",
        "B": lambda r: r.month_name(lang),
        "d": lambda r: f"{r.day:02d}",
        "e": lambda r: f"{r.day:2d}",
        "A": lambda r: r.day_name(lang),
        "w": lambda r: str(r.day_of_week),
        "U": lambda r: f"{r.day_of_year // 7:02d}",
        "j": lambda r: f"{r.day_of_year:03d}",
        "H": lambda r: f"{r.hour:02d}",
        "k": lambda r: f"{r.hour:2d}",
        "I": lambda r: f"{r.hour_12:02d}",
        "l": lambda r: f"{r.hour_12:2d}",
        "P": lambda r: r.time_of_day(lang),
        "p": lambda r: r.short_time_of_day(lang),
        "M": lambda r: f"{r.minute:02d}",
        "S": lambda r: f"{r.second:02d}",
        "f": _fmt_fraction,
        ".f": lambda r: f"{r.second}.{_fmt_fraction(r)}",
        ":z": lambda r: r.utc_offset,
    }


def format_pdate(reader: Reader, pattern: str = DEFAULT_PATTERN, lang: Optional[str] = None) -> str:
    """
    Render a date through a token pattern.

    Args:
        reader: Any Reader (usually a PDate)
        pattern: Pattern with % tokens (default: "%Y-%m-%d %H:%M:%S %:z")
        lang: Language for names (default: configured language)

    Returns:
        Formatted string
    """
    tokens = _build_tokens(lang)
    return _TOKEN_RE.sub(lambda match: tokens[match.group(1)](reader), pattern)
