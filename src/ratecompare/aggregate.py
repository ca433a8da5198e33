"""Roll priced samples up into monthly plan comparisons."""

from collections import defaultdict
from collections.abc import Iterable

from .classify import is_winter_month
from .config import DEFAULT_RATES, Rates
from .models import MonthlySummary, Plan, PlanTotals, PricedSample, TouCategory, UloCategory
from .rates import price_tiered


def best_plan(tiered: float, tou: float, ulo: float) -> Plan:
    """Pick the cheapest plan.

    Tiered or TOU only win when strictly cheaper than both others; every
    tie falls through to ULO.
    """
    if tiered < tou and tiered < ulo:
        return Plan.TIERED
    if tou < tiered and tou < ulo:
        return Plan.TOU
    return Plan.ULO


def _sum_kwh(samples: list[PricedSample], attr: str, category) -> float:
    return sum(s.kwh for s in samples if getattr(s, attr) == category)


def summarize_month(
    month: int, samples: list[PricedSample], rates: Rates = DEFAULT_RATES
) -> MonthlySummary:
    """Build the summary for one month's samples."""
    is_winter = is_winter_month(month)
    total_kwh = sum(s.kwh for s in samples)
    tou = sum(s.tou_cost for s in samples)
    ulo = sum(s.ulo_cost for s in samples)
    tiered, tier1_kwh, tier2_kwh = price_tiered(total_kwh, is_winter, rates)

    tiered, tou, ulo = round(tiered, 2), round(tou, 2), round(ulo, 2)

    return MonthlySummary(
        month=month,
        is_winter=is_winter,
        kwh=round(total_kwh, 2),
        tiered=tiered,
        tier1_kwh=round(tier1_kwh, 2),
        tier2_kwh=round(tier2_kwh, 2),
        tou=tou,
        tou_kwh_off_peak=round(_sum_kwh(samples, "tou_category", TouCategory.OFF_PEAK), 2),
        tou_kwh_mid_peak=round(_sum_kwh(samples, "tou_category", TouCategory.MID_PEAK), 2),
        tou_kwh_peak=round(_sum_kwh(samples, "tou_category", TouCategory.PEAK), 2),
        ulo=ulo,
        ulo_kwh=round(_sum_kwh(samples, "ulo_category", UloCategory.ULO), 2),
        ulo_kwh_off_peak=round(_sum_kwh(samples, "ulo_category", UloCategory.OFF_PEAK), 2),
        ulo_kwh_mid_peak=round(_sum_kwh(samples, "ulo_category", UloCategory.MID_PEAK), 2),
        ulo_kwh_peak=round(_sum_kwh(samples, "ulo_category", UloCategory.ULO_PEAK), 2),
        best=best_plan(tiered, tou, ulo),
    )


def aggregate(
    priced: Iterable[PricedSample], rates: Rates = DEFAULT_RATES
) -> list[MonthlySummary]:
    """Group samples by calendar month and price each month under every plan.

    Months are keyed by month number only, so the same month from different
    years is combined. Returns summaries in ascending month order.
    """
    by_month: dict[int, list[PricedSample]] = defaultdict(list)
    for sample in priced:
        by_month[sample.month].append(sample)

    return [summarize_month(month, by_month[month], rates) for month in sorted(by_month)]


def plan_totals(summaries: list[MonthlySummary]) -> PlanTotals:
    """Sum monthly costs across the whole report."""
    tiered = round(sum(s.tiered for s in summaries), 2)
    tou = round(sum(s.tou for s in summaries), 2)
    ulo = round(sum(s.ulo for s in summaries), 2)
    return PlanTotals(
        months=len(summaries),
        kwh=round(sum(s.kwh for s in summaries), 2),
        tiered=tiered,
        tou=tou,
        ulo=ulo,
        best=best_plan(tiered, tou, ulo),
    )
