# src/persian_date/shared/language.py
"""
Language Tables - Localized Calendar Names

This module provides the fixed name tables for weekdays, Jalali months and
Gregorian months in Persian and English, plus the before/after-noon strings.
Tables are immutable tuples indexed by the enumerations in
persian_date.domain.models.

Files that USE this module:
- persian_date.domain.capabilities (day_name, month_name, time_of_day)
- tests.test_pdate (name lookups)

Files that this module USES:
- persian_date.domain.models (Weekday, JalaliMonth, GregorianMonth)
- persian_date.config (default language, resolved lazily)
"""
import logging
from typing import Dict, Optional, Tuple

from persian_date.domain.models import GregorianMonth, JalaliMonth, Weekday

logger = logging.getLogger(__name__)

# Language constants
LANG_ENGLISH = "en"
LANG_FARSI = "fa"
SUPPORTED_LANGUAGES = (LANG_ENGLISH, LANG_FARSI)

DAY_NAMES: Dict[str, Tuple[str, ...]] = {
    LANG_FARSI: ("شنبه", "یک‌شنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "جمعه"),
    LANG_ENGLISH: ("Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday"),
}

JALALI_MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    LANG_FARSI: (
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
    LANG_ENGLISH: (
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
}

GREGORIAN_MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    LANG_FARSI: (
        "ژانویه", "فوریه", "مارس", "آوریل", "مه", "ژوئن",
        "ژوئیه", "اوت", "سپتامبر", "اکتبر", "نوامبر", "دسامبر",
    ),
    LANG_ENGLISH: (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

# Translation dictionaries
TRANSLATIONS: Dict[str, Dict[str, str]] = {
    LANG_ENGLISH: {
        "before_noon": "Before noon",
        "after_noon": "Afternoon",
        "before_noon_short": "AM",
        "after_noon_short": "PM",
    },
    LANG_FARSI: {
        "before_noon": "قبل از ظهر",
        "after_noon": "بعد از ظهر",
        "before_noon_short": "ق.ظ",
        "after_noon_short": "ب.ظ",
    },
}


def resolve_language(lang: Optional[str] = None) -> str:
    """
    Pick the language for a lookup.

    Args:
        lang: Explicit language code, or None for the configured default

    Returns:
        A supported language code; English when the requested one is unknown
    """
    if lang is None:
        from persian_date.config import settings
        lang = settings.default_language
    if lang not in SUPPORTED_LANGUAGES:
        logger.warning("Language '%s' not supported, using English fallback", lang)
        return LANG_ENGLISH
    return lang


def day_name(weekday: Weekday, lang: Optional[str] = None) -> str:
    """Name of a weekday (Saturday-based index)."""
    return DAY_NAMES[resolve_language(lang)][Weekday(weekday)]


def jalali_month_name(month: JalaliMonth, lang: Optional[str] = None) -> str:
    return JALALI_MONTH_NAMES[resolve_language(lang)][JalaliMonth(month)]


def gregorian_month_name(month: GregorianMonth, lang: Optional[str] = None) -> str:
    return GREGORIAN_MONTH_NAMES[resolve_language(lang)][GregorianMonth(month)]


def translate(key: str, lang: Optional[str] = None) -> str:
    """
    Translate a message key.

    Args:
        key: Translation key
        lang: Language code, or None for the configured default

    Returns:
        Translated string, or the key itself if no translation exists
    """
    lang_dict = TRANSLATIONS[resolve_language(lang)]
    return lang_dict.get(key, key)
