"""Per-sample and per-month cost calculation for each rate plan."""

from .config import DEFAULT_RATES, Rates
from .models import ClassifiedSample, TouCategory, UloCategory


def hour_in_range(hour: int, start: int, end: int) -> bool:
    """Check if an hour falls within [start, end) (handles overnight ranges)."""
    if start <= end:
        return start <= hour < end
    else:
        # Overnight range (e.g., 23 to 7)
        return hour >= start or hour < end


def tou_rate(category: TouCategory, rates: Rates = DEFAULT_RATES) -> float:
    """Get the $/kWh rate for a TOU band."""
    return {
        TouCategory.OFF_PEAK: rates.off_peak,
        TouCategory.MID_PEAK: rates.mid_peak,
        TouCategory.PEAK: rates.on_peak,
    }[category]


def ulo_rate(category: UloCategory, rates: Rates = DEFAULT_RATES) -> float:
    """Get the $/kWh rate for a ULO band."""
    return {
        UloCategory.ULO: rates.ulo,
        UloCategory.OFF_PEAK: rates.off_peak,
        UloCategory.MID_PEAK: rates.mid_peak,
        UloCategory.ULO_PEAK: rates.ulo_on_peak,
    }[category]


def tou_category(sample: ClassifiedSample) -> TouCategory:
    """Classify a sample into a TOU band.

    Weekends and holidays are off-peak all day. On weekdays the midday band
    is mid-peak in winter and peak in summer, and the morning/evening shoulders
    are the reverse.
    """
    if sample.is_weekend or sample.is_holiday:
        return TouCategory.OFF_PEAK
    if hour_in_range(sample.hour, 19, 7):
        return TouCategory.OFF_PEAK
    if hour_in_range(sample.hour, 11, 17):
        return TouCategory.MID_PEAK if sample.is_winter else TouCategory.PEAK
    return TouCategory.PEAK if sample.is_winter else TouCategory.MID_PEAK


def ulo_category(sample: ClassifiedSample) -> UloCategory:
    """Classify a sample into a ULO band.

    The overnight window is checked before weekends and holidays, so
    weekend nights still get the ULO rate.
    """
    if hour_in_range(sample.hour, 23, 7):
        return UloCategory.ULO
    if sample.is_weekend or sample.is_holiday:
        return UloCategory.OFF_PEAK
    if hour_in_range(sample.hour, 16, 21):
        return UloCategory.ULO_PEAK
    return UloCategory.MID_PEAK


def price_tou(
    sample: ClassifiedSample, rates: Rates = DEFAULT_RATES
) -> tuple[float, float, TouCategory]:
    """Price a sample under TOU. Returns (cost, rate, category)."""
    category = tou_category(sample)
    rate = tou_rate(category, rates)
    return sample.kwh * rate, rate, category


def price_ulo(
    sample: ClassifiedSample, rates: Rates = DEFAULT_RATES
) -> tuple[float, float, UloCategory]:
    """Price a sample under ULO. Returns (cost, rate, category)."""
    category = ulo_category(sample)
    rate = ulo_rate(category, rates)
    return sample.kwh * rate, rate, category


def tier_threshold(is_winter: bool, rates: Rates = DEFAULT_RATES) -> float:
    """Monthly kWh billed at the tier 1 rate."""
    return rates.tier_threshold_winter if is_winter else rates.tier_threshold_summer


def price_tiered(
    monthly_kwh: float, is_winter: bool, rates: Rates = DEFAULT_RATES
) -> tuple[float, float, float]:
    """Price a month's total usage under the tiered plan.

    The threshold applies to cumulative monthly usage, so this only makes
    sense on a monthly total, never on a single hour.

    Returns:
        (cost, tier1_kwh, tier2_kwh)
    """
    threshold = tier_threshold(is_winter, rates)
    if monthly_kwh <= threshold:
        tier1_kwh, tier2_kwh = monthly_kwh, 0.0
    else:
        tier1_kwh, tier2_kwh = threshold, monthly_kwh - threshold
    cost = tier1_kwh * rates.tier1 + tier2_kwh * rates.tier2
    return cost, tier1_kwh, tier2_kwh
