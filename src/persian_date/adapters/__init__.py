# src/persian_date/adapters/__init__.py
"""
Adapters Layer - Clock, Time Zones and Presentation

This package wraps the system clock and zone database, and renders dates
as text.
"""
