# src/persian_date/application/__init__.py
"""
Application Layer - The Dual-Calendar Date Value

This package contains PDate, which ties the conversion engine, the clock
adapter and the validators together.
"""

from persian_date.application.pdate import PDate

__all__ = ["PDate"]
