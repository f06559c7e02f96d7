# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Methodology Valuation - Quick valuations from a single multiple

Produces a ``ValuationRecord`` for a business from a chosen methodology and
multiple, and assesses a valuation against the asking price.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..business import BusinessFacts, ValuationRecord
from ..core.primitives import ConfidenceLevelEnum, Model, ValuationMethodologyEnum

logger = logging.getLogger(__name__)

DEFAULT_MULTIPLES: Dict[ValuationMethodologyEnum, float] = {
    ValuationMethodologyEnum.REVENUE_MULTIPLE: 2.5,
    ValuationMethodologyEnum.PROFIT_MULTIPLE: 3.0,
    ValuationMethodologyEnum.EBITDA_MULTIPLE: 6.0,
    ValuationMethodologyEnum.SDE_MULTIPLE: 3.5,
    ValuationMethodologyEnum.ASSET_BASED: 1.0,
    ValuationMethodologyEnum.DISCOUNTED_CASH_FLOW: 1.0,
    ValuationMethodologyEnum.MARKET_COMPARISON: 1.0,
}

# Component multiple field filled in for each multiple-based methodology
_COMPONENT_FIELDS = {
    ValuationMethodologyEnum.REVENUE_MULTIPLE: "revenue_multiple",
    ValuationMethodologyEnum.PROFIT_MULTIPLE: "profit_multiple",
    ValuationMethodologyEnum.EBITDA_MULTIPLE: "ebitda_multiple",
    ValuationMethodologyEnum.SDE_MULTIPLE: "sde_multiple",
}


class PriceAssessment(Model):
    """
    Valuation compared to the asking price.

    Attributes:
        difference: calculated value - asking price
        percentage: difference as a percentage of asking price (0 without a price)
        assessment: Plain-language verdict
    """

    difference: float
    percentage: float
    assessment: str


def assess_price(calculated_value: float, asking_price: float) -> PriceAssessment:
    """
    Compare a valuation to the asking price.

    Bands on the percentage difference: below -20 significantly overpriced,
    below -5 slightly overpriced, up to 5 fair, up to 20 good value, above
    that excellent value.
    """
    difference = calculated_value - asking_price
    percentage = difference / asking_price * 100 if asking_price > 0 else 0.0

    if percentage < -20:
        assessment = "Significantly overpriced based on this valuation"
    elif percentage < -5:
        assessment = "Slightly overpriced - negotiate down"
    elif percentage <= 5:
        assessment = "Fair price - close to calculated value"
    elif percentage <= 20:
        assessment = "Good value - priced below valuation"
    else:
        assessment = "Excellent value - significantly underpriced"

    return PriceAssessment(difference=difference, percentage=percentage, assessment=assessment)


class ValuationCalculator:
    """
    Quick single-methodology valuations.

    Example:
        ```python
        calculator = ValuationCalculator()
        record = calculator.calculate(facts, ValuationMethodologyEnum.SDE_MULTIPLE)
        record.calculated_value  # annual_profit * 3.5
        ```
    """

    def __init__(self, default_multiples: Optional[Dict[ValuationMethodologyEnum, float]] = None):
        self.default_multiples = dict(DEFAULT_MULTIPLES)
        if default_multiples:
            self.default_multiples.update(default_multiples)

    def default_multiple(self, methodology: ValuationMethodologyEnum) -> float:
        return self.default_multiples.get(methodology, 1.0)

    @staticmethod
    def calculate_value(
        facts: BusinessFacts,
        methodology: ValuationMethodologyEnum,
        multiple: float,
        asset_value: float = 0.0,
        blue_sky_value: float = 0.0,
    ) -> float:
        """
        Value implied by a methodology.

        Revenue multiple applies to revenue; profit, EBITDA and SDE multiples
        apply to profit (used as a proxy for both); asset based is asset
        value plus blue-sky value; DCF and market comparison scale the
        asking price.
        """
        if methodology == ValuationMethodologyEnum.REVENUE_MULTIPLE:
            return facts.annual_revenue * multiple
        elif methodology in (
            ValuationMethodologyEnum.PROFIT_MULTIPLE,
            ValuationMethodologyEnum.EBITDA_MULTIPLE,
            ValuationMethodologyEnum.SDE_MULTIPLE,
        ):
            return facts.annual_profit * multiple
        elif methodology == ValuationMethodologyEnum.ASSET_BASED:
            return asset_value + blue_sky_value
        return facts.asking_price * multiple

    def calculate(
        self,
        facts: BusinessFacts,
        methodology: ValuationMethodologyEnum,
        multiple: Optional[float] = None,
        asset_value: float = 0.0,
        blue_sky_value: float = 0.0,
        confidence_level: ConfidenceLevelEnum = ConfidenceLevelEnum.MEDIUM,
        notes: Optional[str] = None,
    ) -> ValuationRecord:
        """
        Build a valuation record for ``facts``.

        Args:
            facts: Business being valued
            methodology: Valuation methodology
            multiple: Multiple to apply (methodology default when omitted)
            asset_value: Tangible asset value (asset based only)
            blue_sky_value: Goodwill value (asset based only)
            confidence_level: Analyst confidence to record
            notes: Optional notes; blank notes are dropped

        Returns:
            ValuationRecord linked to ``facts.uid``
        """
        if multiple is None:
            multiple = self.default_multiple(methodology)

        value = self.calculate_value(facts, methodology, multiple, asset_value, blue_sky_value)

        record_fields = {
            "business_id": facts.uid,
            "calculated_value": float(value),
            "multiple": float(multiple),
            "methodology": methodology,
            "confidence_level": confidence_level,
            "notes": notes or None,
        }
        component = _COMPONENT_FIELDS.get(methodology)
        if component is not None:
            record_fields[component] = float(multiple)

        logger.debug(
            f"{methodology.value} valuation of '{facts.name}' at {multiple}x: {value:,.0f}"
        )
        return ValuationRecord(**record_fields)


def calculate_valuation(
    facts: BusinessFacts,
    methodology: ValuationMethodologyEnum,
    multiple: Optional[float] = None,
    asset_value: float = 0.0,
    blue_sky_value: float = 0.0,
    confidence_level: ConfidenceLevelEnum = ConfidenceLevelEnum.MEDIUM,
    notes: Optional[str] = None,
) -> ValuationRecord:
    """Single-methodology valuation record for ``facts``."""
    return ValuationCalculator().calculate(
        facts,
        methodology,
        multiple=multiple,
        asset_value=asset_value,
        blue_sky_value=blue_sky_value,
        confidence_level=confidence_level,
        notes=notes,
    )
