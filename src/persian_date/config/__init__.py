# src/persian_date/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from persian_date.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
