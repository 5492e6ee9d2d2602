# tests/test_calendar.py
"""
Conversion Engine Tests - Unit Tests for Jalali/Gregorian Arithmetic

This module contains unit tests for the pure calendar functions: conversion in
both directions, leap-year predicates, month lengths and day-of-year.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- persian_date.domain.calendar (all conversion functions for testing)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date, timedelta  # Iterating real Gregorian dates

from persian_date.domain.calendar import (
    gregorian_month_length,  # Gregorian month length table
    gregorian_to_jalali,  # Gregorian -> Jalali
    is_gregorian_leap,  # 4/100/400 rule
    is_jalali_leap,  # 33-year cycle rule
    jalali_day_of_year,  # Ordinal day in the Jalali year
    jalali_month_length,  # Jalali month length table
    jalali_to_gregorian,  # Jalali -> Gregorian
)

KNOWN_DATES = [
    # (gregorian, jalali)
    ((2024, 3, 20), (1403, 1, 1)),
    ((2025, 3, 20), (1403, 12, 30)),
    ((2025, 3, 21), (1404, 1, 1)),
    ((2021, 3, 20), (1399, 12, 30)),
    ((2021, 3, 21), (1400, 1, 1)),
    ((2022, 3, 21), (1401, 1, 1)),
    ((2024, 2, 11), (1402, 11, 22)),
    ((2000, 1, 1), (1378, 10, 11)),
    ((1979, 2, 11), (1357, 11, 22)),
    ((1970, 1, 1), (1348, 10, 11)),
]


class TestKnownDates:
    @pytest.mark.parametrize("gregorian, jalali", KNOWN_DATES)
    def test_gregorian_to_jalali(self, gregorian, jalali):
        assert gregorian_to_jalali(*gregorian) == jalali

    @pytest.mark.parametrize("gregorian, jalali", KNOWN_DATES)
    def test_jalali_to_gregorian(self, gregorian, jalali):
        assert jalali_to_gregorian(*jalali) == gregorian

    def test_month_boundaries(self):
        # Last day of Shahrivar (31st) and first day of Mehr
        assert jalali_to_gregorian(1403, 6, 31) == (2024, 9, 21)
        assert jalali_to_gregorian(1403, 7, 1) == (2024, 9, 22)
        # Gregorian month ends decompose to the right month
        assert gregorian_to_jalali(2024, 1, 31) == (1402, 11, 11)
        assert gregorian_to_jalali(2024, 2, 1) == (1402, 11, 12)


class TestRoundTrip:
    def test_every_gregorian_day_1900_to_2100(self):
        current = date(1900, 1, 1)
        end = date(2100, 12, 31)
        while current <= end:
            triple = (current.year, current.month, current.day)
            assert jalali_to_gregorian(*gregorian_to_jalali(*triple)) == triple
            current += timedelta(days=1)

    def test_every_jalali_day_1300_to_1500(self):
        for year in range(1300, 1501):
            for month in range(1, 13):
                for day in range(1, jalali_month_length(year, month) + 1):
                    assert gregorian_to_jalali(*jalali_to_gregorian(year, month, day)) == (year, month, day)

    def test_consecutive_days_stay_consecutive(self):
        start = date(*jalali_to_gregorian(1403, 1, 1))
        end = date(*jalali_to_gregorian(1404, 1, 1))
        assert (end - start).days == 366


class TestLeapYears:
    @pytest.mark.parametrize("year", [1309, 1342, 1370, 1375, 1379, 1399, 1403, 1408, 1412])
    def test_jalali_leap(self, year):
        assert is_jalali_leap(year) is True

    @pytest.mark.parametrize("year", [1341, 1374, 1376, 1400, 1402, 1404, 1407, 1409])
    def test_jalali_common(self, year):
        assert is_jalali_leap(year) is False

    def test_anchor_multiples_are_leap(self):
        for cycles in range(-30, 30):
            assert is_jalali_leap(1375 + 33 * cycles)

    def test_leap_matches_esfand_length(self):
        for year in range(1, 3001):
            assert is_jalali_leap(year) == (jalali_month_length(year, 12) == 30)

    def test_leap_matches_year_length_from_conversion(self):
        for year in range(1, 3000):
            start = date(*jalali_to_gregorian(year, 1, 1))
            end = date(*jalali_to_gregorian(year + 1, 1, 1))
            assert ((end - start).days == 366) == is_jalali_leap(year), year

    def test_gregorian_leap(self):
        assert is_gregorian_leap(2024)
        assert is_gregorian_leap(2000)
        assert not is_gregorian_leap(1900)
        assert not is_gregorian_leap(2023)
        assert not is_gregorian_leap(2100)


class TestMonthLengths:
    def test_jalali_month_length(self):
        assert [jalali_month_length(1402, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
        assert jalali_month_length(1403, 12) == 30

    def test_gregorian_month_length(self):
        assert gregorian_month_length(2024, 2) == 29
        assert gregorian_month_length(2023, 2) == 28
        assert gregorian_month_length(2100, 2) == 28
        assert gregorian_month_length(2023, 4) == 30
        assert gregorian_month_length(2023, 12) == 31

    def test_jalali_day_of_year(self):
        assert jalali_day_of_year(1, 1) == 1
        assert jalali_day_of_year(2, 1) == 32
        assert jalali_day_of_year(7, 1) == 187
        assert jalali_day_of_year(12, 30) == 366
