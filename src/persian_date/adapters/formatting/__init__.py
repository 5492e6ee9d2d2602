# src/persian_date/adapters/formatting/__init__.py
"""
Formatting Adapter

Pattern-based rendering of Jalali dates.
"""

from persian_date.adapters.formatting.formatter import DEFAULT_PATTERN, format_pdate

__all__ = ["DEFAULT_PATTERN", "format_pdate"]
