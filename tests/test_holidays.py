from datetime import date

from ratecompare.holidays import is_holiday, known_years


def test_statutory_holiday():
    assert is_holiday(date(2022, 7, 1))  # Canada Day
    assert is_holiday(date(2023, 10, 9))  # Thanksgiving


def test_regular_weekday():
    assert not is_holiday(date(2022, 7, 15))
    assert not is_holiday(date(2022, 7, 4))


def test_observed_weekday_holiday():
    """Christmas 2021 fell on a Saturday, observed the following Monday."""
    assert is_holiday(date(2021, 12, 27))
    assert is_holiday(date(2023, 7, 3))


def test_unknown_year_has_no_holidays():
    assert not is_holiday(date(2024, 12, 25))
    assert not is_holiday(date(2020, 1, 1))


def test_known_years():
    assert known_years() == [2021, 2022, 2023]
