# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offer recommendation records.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import Field, model_validator

from ..core.primitives import (
    ConfidenceLevelEnum,
    FloatBetween0And1,
    Model,
    PositiveIntGe1,
    RiskSeverityEnum,
)


class MarketFactor(Model):
    """A market observation and whether it helps or hurts the business."""

    description: str
    is_positive: bool


class RiskFactor(Model):
    """
    A specific risk flagged for the acquisition.

    Attributes:
        title: Short risk name
        description: What the risk is
        severity: Low / Medium / High / Critical
        mitigation: Suggested mitigation
    """

    title: str
    description: str
    severity: RiskSeverityEnum
    mitigation: str

    @property
    def is_serious(self) -> bool:
        """High or critical severity."""
        return self.severity in (RiskSeverityEnum.HIGH, RiskSeverityEnum.CRITICAL)


class NextStep(Model):
    order: PositiveIntGe1
    description: str


class OfferRecommendation(Model):
    """
    Negotiation-ready purchase offer for a business.

    Attributes:
        executive_summary: Summary paragraph of the recommendation
        confidence_level: Confidence in the recommendation
        minimum_offer: Lower bound of the offer band
        recommended_offer: Target offer
        maximum_offer: Walk-away upper bound
        opening_offer: First offer to put on the table
        average_valuation: Mean recorded valuation (asking price without records)
        valuation_low: Smallest recorded valuation
        valuation_high: Largest recorded valuation
        discount_to_asking: Recommended discount to asking price (decimal)
        industry_comparison: Asking revenue multiple vs. industry
        market_position_score: 0..1 market position score
        market_factors: Market observations
        opening_strategy: Opening negotiation guidance
        key_talking_points: Points to make in negotiation
        concession_strategy: Concession guidance
        risk_factors: Risks flagged for the deal
        next_steps: Ordered action items
    """

    # === SUMMARY ===
    executive_summary: str
    confidence_level: ConfidenceLevelEnum

    # === OFFER BAND ===
    minimum_offer: float
    recommended_offer: float
    maximum_offer: float
    opening_offer: float

    # === VALUATION CONTEXT ===
    average_valuation: float
    valuation_low: float
    valuation_high: float
    discount_to_asking: float

    # === MARKET ===
    industry_comparison: str
    market_position_score: FloatBetween0And1
    market_factors: Tuple[MarketFactor, ...] = ()

    # === NEGOTIATION ===
    opening_strategy: str
    key_talking_points: Tuple[str, ...] = ()
    concession_strategy: str
    risk_factors: Tuple[RiskFactor, ...] = ()
    next_steps: Tuple[NextStep, ...] = Field(default=())

    @model_validator(mode="after")
    def check_offer_ordering(self) -> "OfferRecommendation":
        """Offers must satisfy opening <= minimum <= recommended <= maximum."""
        if not (
            self.opening_offer <= self.minimum_offer
            <= self.recommended_offer
            <= self.maximum_offer
        ):
            raise ValueError(
                "Offer band out of order: "
                f"opening {self.opening_offer:,.0f}, minimum {self.minimum_offer:,.0f}, "
                f"recommended {self.recommended_offer:,.0f}, maximum {self.maximum_offer:,.0f}"
            )
        if self.valuation_low > self.valuation_high:
            raise ValueError("valuation_low cannot exceed valuation_high")
        return self

    @property
    def valuation_range(self) -> Tuple[float, float]:
        """(low, high) of recorded valuations."""
        return (self.valuation_low, self.valuation_high)

    @property
    def serious_risk_count(self) -> int:
        return sum(1 for factor in self.risk_factors if factor.is_serious)
