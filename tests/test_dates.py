import calendar
import datetime

import pytest

from eulerkit.dates import counting_sundays, is_leap_year, year_sundays


@pytest.mark.parametrize("year", [1900, 1904, 2000, 2023, 2024, 2100, 2400])
def test_leap_year_matches_calendar(year):
    assert is_leap_year(year) == calendar.isleap(year)


def test_twentieth_century():
    assert counting_sundays(1901, 2000) == 171


@pytest.mark.parametrize("year", [1899, 1900, 1950, 1987, 2000, 2016, 2031])
def test_year_sundays_matches_real_calendar(year):
    actual = sum(
        1 for month in range(1, 13) if datetime.date(year, month, 1).weekday() == 6
    )
    assert year_sundays(year) == actual


def test_year_sundays_within_bounds():
    assert all(1 <= year_sundays(y) <= 3 for y in range(1899, 2100))


def test_range_is_sum_of_years():
    assert counting_sundays(1990, 1992) == sum(year_sundays(y) for y in (1990, 1991, 1992))


def test_empty_range():
    assert counting_sundays(2001, 2000) == 0


def test_years_before_reference_start_on_sunday():
    assert year_sundays(1800) == year_sundays(1899)