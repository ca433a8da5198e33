"""End-to-end pricing of usage samples."""

import logging
from collections.abc import Iterable

from .aggregate import aggregate
from .classify import classify
from .config import DEFAULT_RATES, Rates
from .models import MonthlySummary, PricedSample, UsageSample
from .rates import price_tou, price_ulo

logger = logging.getLogger(__name__)


def price_sample(sample: UsageSample, rates: Rates = DEFAULT_RATES) -> PricedSample:
    """Classify one sample and price it under TOU and ULO."""
    classified = classify(sample)
    tou_cost, tou_rate, tou_category = price_tou(classified, rates)
    ulo_cost, ulo_rate, ulo_category = price_ulo(classified, rates)
    return PricedSample(
        sample=classified,
        tou_cost=tou_cost,
        tou_rate=tou_rate,
        tou_category=tou_category,
        ulo_cost=ulo_cost,
        ulo_rate=ulo_rate,
        ulo_category=ulo_category,
    )


def price_samples(
    samples: Iterable[UsageSample], rates: Rates = DEFAULT_RATES
) -> list[PricedSample]:
    """Price every sample, preserving input order."""
    priced = [price_sample(s, rates) for s in samples]
    logger.debug("Priced %d sample(s)", len(priced))
    return priced


def summarize(
    samples: Iterable[UsageSample], rates: Rates = DEFAULT_RATES
) -> list[MonthlySummary]:
    """Price samples and roll them up into monthly summaries."""
    summaries = aggregate(price_samples(samples, rates), rates)
    logger.debug("Summarized %d month(s)", len(summaries))
    return summaries
