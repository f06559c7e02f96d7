# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offer Recommender - Negotiation-ready purchase offers

Combines recorded valuations, industry adjustments and rule-based scoring
into a recommended offer band with supporting narrative.

Offer band:
    discount = clamp(min_discount, max_discount,
                     (asking - average valuation) / asking + industry adjustment)
    recommended = asking * (1 - discount)
    minimum = recommended * 0.85, maximum = recommended * 1.15
    opening = minimum * 0.90
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..benchmarks import DEFAULT_CATALOG, BenchmarkCatalog
from ..business import BusinessFacts, ValuationRecord
from ..core.primitives import GlobalSettings
from . import heuristics, narrative
from .models import OfferRecommendation

logger = logging.getLogger(__name__)


class OfferRecommender:
    """
    Builds offer recommendations.

    Example:
        ```python
        recommender = OfferRecommender()
        offer = recommender.recommend(facts, valuation_records)
        print(f"Open at ${offer.opening_offer:,.0f}, target ${offer.recommended_offer:,.0f}")
        ```
    """

    def __init__(
        self,
        settings: Optional[GlobalSettings] = None,
        catalog: Optional[BenchmarkCatalog] = None,
    ):
        self.settings = settings if settings is not None else GlobalSettings()
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    def discount_to_asking(self, facts: BusinessFacts, average_valuation: float) -> float:
        """Clamped discount to asking price, including the industry adjustment."""
        offer_settings = self.settings.offer
        raw = 0.0
        if facts.asking_price > 0:
            raw = (facts.asking_price - average_valuation) / facts.asking_price
        adjusted = raw + heuristics.market_adjustment(facts.industry)
        return max(offer_settings.min_discount, min(offer_settings.max_discount, adjusted))

    def recommend(
        self, facts: BusinessFacts, valuation_records: Iterable[ValuationRecord] = ()
    ) -> OfferRecommendation:
        """
        Recommend an offer for ``facts``.

        Args:
            facts: Business being bought
            valuation_records: Valuations previously recorded for the business

        Returns:
            OfferRecommendation
        """
        offer_settings = self.settings.offer
        values = [record.calculated_value for record in valuation_records]

        if values:
            average_valuation = sum(values) / len(values)
            valuation_low, valuation_high = min(values), max(values)
        else:
            average_valuation = facts.asking_price
            valuation_low = valuation_high = facts.asking_price

        discount = self.discount_to_asking(facts, average_valuation)
        recommended = facts.asking_price * (1 - discount)
        minimum = recommended * offer_settings.minimum_offer_factor
        maximum = recommended * offer_settings.maximum_offer_factor
        opening = minimum * offer_settings.opening_offer_factor

        risks = heuristics.risk_factors(facts, values)
        confidence = heuristics.confidence_level(facts, len(values), risks)

        logger.debug(
            f"Offer for '{facts.name}': {len(values)} valuations averaging {average_valuation:,.0f}, "
            f"discount {discount:.1%}, recommended {recommended:,.0f}, confidence {confidence.value}"
        )

        return OfferRecommendation(
            executive_summary=narrative.executive_summary(facts, recommended, discount),
            confidence_level=confidence,
            minimum_offer=minimum,
            recommended_offer=recommended,
            maximum_offer=maximum,
            opening_offer=opening,
            average_valuation=average_valuation,
            valuation_low=valuation_low,
            valuation_high=valuation_high,
            discount_to_asking=discount,
            industry_comparison=heuristics.industry_comparison(facts, self.catalog),
            market_position_score=heuristics.market_position_score(facts),
            market_factors=tuple(heuristics.market_factors(facts)),
            opening_strategy=narrative.opening_strategy(opening),
            key_talking_points=tuple(
                narrative.key_talking_points(facts, recommended, average_valuation)
            ),
            concession_strategy=narrative.concession_strategy(minimum, recommended, maximum),
            risk_factors=tuple(risks),
            next_steps=tuple(narrative.next_steps(facts)),
        )


def recommend_offer(
    facts: BusinessFacts,
    valuation_records: Iterable[ValuationRecord] = (),
    settings: Optional[GlobalSettings] = None,
) -> OfferRecommendation:
    """Offer recommendation for ``facts`` given its recorded valuations."""
    return OfferRecommender(settings).recommend(facts, valuation_records)
