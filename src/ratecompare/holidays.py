"""Statutory holiday calendar used for off-peak pricing.

Holidays are the Ontario statutory holidays plus the Civic Holiday, which
are priced as off-peak all day. When a holiday falls on a weekend the
observed weekday is listed as well.

Years missing from the table are treated as having no holidays. That
misprices a holiday as a regular weekday, so extend the table when a new
year's dates are published rather than computing them.
"""

from datetime import date


def _days(year: int, *month_days: tuple[int, int]) -> frozenset[int]:
    """Convert (month, day) pairs to a set of day-of-year ordinals."""
    return frozenset(date(year, m, d).timetuple().tm_yday for m, d in month_days)


HOLIDAYS: dict[int, frozenset[int]] = {
    2021: _days(
        2021,
        (1, 1),  # New Year's Day
        (2, 15),  # Family Day
        (4, 2),  # Good Friday
        (5, 24),  # Victoria Day
        (7, 1),  # Canada Day
        (8, 2),  # Civic Holiday
        (9, 6),  # Labour Day
        (10, 11),  # Thanksgiving
        (12, 25), (12, 27),  # Christmas, observed Monday
        (12, 26), (12, 28),  # Boxing Day, observed Tuesday
    ),
    2022: _days(
        2022,
        (1, 1), (1, 3),  # New Year's Day, observed Monday
        (2, 21),
        (4, 15),
        (5, 23),
        (7, 1),
        (8, 1),
        (9, 5),
        (10, 10),
        (12, 25), (12, 27),
        (12, 26),
    ),
    2023: _days(
        2023,
        (1, 1), (1, 2),
        (2, 20),
        (4, 7),
        (5, 22),
        (7, 1), (7, 3),
        (8, 7),
        (9, 4),
        (10, 9),
        (12, 25),
        (12, 26),
    ),
}


def is_holiday(day: date) -> bool:
    """Return True if the date is a recognised holiday."""
    days = HOLIDAYS.get(day.year)
    if days is None:
        return False
    return day.timetuple().tm_yday in days


def known_years() -> list[int]:
    """Years covered by the holiday table."""
    return sorted(HOLIDAYS)
