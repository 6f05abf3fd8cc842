"""Counting Sundays that fall on the first of a month."""

from __future__ import annotations

_FIRST_SUNDAY_YEAR = 1899
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FEBRUARY = 1


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _offset(year: int) -> int:
    # Weekday shift of 1 January from 1899, whose 1 January was a Sunday.
    shift = sum(2 if is_leap_year(y) else 1 for y in range(_FIRST_SUNDAY_YEAR, year))
    return shift % 7


def year_sundays(year: int) -> int:
    """Number of months in ``year`` whose first day is a Sunday.

    Years before 1899 are treated as starting on a Sunday.
    """
    sundays = 0
    day = _offset(year)
    for month, length in enumerate(_MONTH_DAYS):
        if day % 7 == 0:
            sundays += 1
        day += length
        if month == _FEBRUARY and is_leap_year(year):
            day += 1
    return sundays


def counting_sundays(start_year: int, end_year: int) -> int:
    """Sundays falling on the first of a month from ``start_year`` to ``end_year``."""
    return sum(year_sundays(year) for year in range(start_year, end_year + 1))