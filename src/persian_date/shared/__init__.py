# src/persian_date/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Language tables
- Logging configuration
"""

from persian_date.shared.language import (
    translate,
    LANG_ENGLISH,
    LANG_FARSI,
)
from persian_date.shared.logging_conf import configure_logging, setup_logging

__all__ = [
    "translate",
    "LANG_ENGLISH",
    "LANG_FARSI",
    "configure_logging",
    "setup_logging",
]
