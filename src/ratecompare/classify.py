"""Resolve calendar attributes of usage samples."""

from .holidays import is_holiday
from .models import ClassifiedSample, UsageSample

WINTER_MONTHS = frozenset({11, 12, 1, 2, 3, 4})


def is_winter_month(month: int) -> bool:
    """November through April inclusive."""
    return month in WINTER_MONTHS


def classify(sample: UsageSample) -> ClassifiedSample:
    """Attach month, hour, day-of-week and season/holiday flags to a sample.

    The timestamp is taken as local wall-clock time; no timezone conversion
    is applied.
    """
    ts = sample.timestamp
    weekday = ts.weekday()
    return ClassifiedSample(
        timestamp=ts,
        kwh=sample.kwh,
        month=ts.month,
        day_of_week=weekday,
        hour=ts.hour,
        is_holiday=is_holiday(ts.date()),
        is_weekend=weekday >= 5,
        is_winter=is_winter_month(ts.month),
    )
