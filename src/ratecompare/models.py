"""Data models for usage samples, pricing results and monthly summaries."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .errors import InvalidUsageError


class TouCategory(str, Enum):
    """Time-of-use pricing band."""

    OFF_PEAK = "OffPeak"
    MID_PEAK = "MidPeak"
    PEAK = "Peak"


class UloCategory(str, Enum):
    """Ultra-low-overnight pricing band."""

    ULO = "Ulo"
    OFF_PEAK = "OffPeak"
    MID_PEAK = "MidPeak"
    ULO_PEAK = "UloPeak"


class Plan(str, Enum):
    """A rate plan a month can be billed under."""

    TIERED = "Tiered"
    TOU = "TOU"
    ULO = "ULO"


@dataclass(frozen=True)
class UsageSample:
    """A single hourly electricity reading."""

    timestamp: datetime
    kwh: float

    @classmethod
    def create(cls, timestamp: datetime, kwh: float) -> "UsageSample":
        """Build a sample, truncating the timestamp to the hour and validating kWh."""
        kwh = float(kwh)
        if math.isnan(kwh) or math.isinf(kwh):
            raise InvalidUsageError(f"Non-finite usage {kwh} at {timestamp}")
        if kwh < 0:
            raise InvalidUsageError(f"Negative usage {kwh} at {timestamp}")
        return cls(timestamp.replace(minute=0, second=0, microsecond=0), kwh)


@dataclass(frozen=True)
class ClassifiedSample:
    """A usage sample with its calendar attributes resolved."""

    timestamp: datetime
    kwh: float
    month: int
    day_of_week: int  # 0=Monday, 6=Sunday
    hour: int
    is_holiday: bool
    is_weekend: bool
    is_winter: bool


@dataclass(frozen=True)
class PricedSample:
    """A classified sample priced under the TOU and ULO plans."""

    sample: ClassifiedSample
    tou_cost: float
    tou_rate: float
    tou_category: TouCategory
    ulo_cost: float
    ulo_rate: float
    ulo_category: UloCategory

    @property
    def month(self) -> int:
        return self.sample.month

    @property
    def kwh(self) -> float:
        return self.sample.kwh

    def as_row(self) -> dict:
        """Flatten into a display/JSON row."""
        s = self.sample
        return {
            "Timestamp": s.timestamp.isoformat(),
            "kWh": s.kwh,
            "Month": s.month,
            "DayOfWeek": s.day_of_week,
            "Hour": s.hour,
            "IsHoliday": s.is_holiday,
            "IsWeekend": s.is_weekend,
            "IsWinter": s.is_winter,
            "TOUCategory": self.tou_category.value,
            "TOURate": self.tou_rate,
            "TOUCost": round(self.tou_cost, 4),
            "ULOCategory": self.ulo_category.value,
            "ULORate": self.ulo_rate,
            "ULOCost": round(self.ulo_cost, 4),
        }


@dataclass(frozen=True)
class MonthlySummary:
    """Costs of one calendar month under each plan."""

    month: int
    is_winter: bool
    kwh: float
    tiered: float
    tier1_kwh: float
    tier2_kwh: float
    tou: float
    tou_kwh_off_peak: float
    tou_kwh_mid_peak: float
    tou_kwh_peak: float
    ulo: float
    ulo_kwh: float
    ulo_kwh_off_peak: float
    ulo_kwh_mid_peak: float
    ulo_kwh_peak: float
    best: Plan

    def as_row(self) -> dict:
        """Flatten into the report columns."""
        return {
            "Month": self.month,
            "IsWinter": self.is_winter,
            "kWh": self.kwh,
            "Tiered": self.tiered,
            "Tier1kWh": self.tier1_kwh,
            "Tier2kWh": self.tier2_kwh,
            "TOU": self.tou,
            "TOUkWhOffPeak": self.tou_kwh_off_peak,
            "TOUkWhMidPeak": self.tou_kwh_mid_peak,
            "TOUkWhPeak": self.tou_kwh_peak,
            "ULO": self.ulo,
            "ULOkWh": self.ulo_kwh,
            "ULOkWhOffPeak": self.ulo_kwh_off_peak,
            "ULOkWhMidPeak": self.ulo_kwh_mid_peak,
            "ULOkWhPeak": self.ulo_kwh_peak,
            "Best": self.best.value,
        }


@dataclass(frozen=True)
class PlanTotals:
    """Plan costs summed over every month in a report."""

    months: int
    kwh: float
    tiered: float
    tou: float
    ulo: float
    best: Plan
