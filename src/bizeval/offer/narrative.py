# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offer narrative templates.

Pure string formatting over already-computed offer figures. Amounts are
rendered as whole dollars, percentages to the precision shown.
"""

from __future__ import annotations

from typing import List

from ..business import BusinessFacts
from .models import NextStep


def executive_summary(facts: BusinessFacts, recommended_offer: float, discount_to_asking: float) -> str:
    return (
        "Based on comprehensive valuation analysis and market assessment, we recommend "
        f"an offer of ${recommended_offer:.0f} for {facts.name}. This represents a "
        f"{discount_to_asking * 100:.1f}% discount to the asking price and aligns with "
        f"industry standards for {facts.industry} businesses. The recommendation considers "
        "multiple valuation methods, market conditions, and risk factors to provide a "
        "balanced offer position."
    )


def opening_strategy(opening_offer: float) -> str:
    return (
        f"Begin negotiations at ${opening_offer:.0f} to establish an anchor point. This "
        "position is supported by valuation analysis and provides room for concessions "
        "while maintaining a strong negotiating position. Be prepared to justify this "
        "offer with specific valuation metrics and market comparables."
    )


def key_talking_points(
    facts: BusinessFacts, recommended_offer: float, average_valuation: float
) -> List[str]:
    return [
        f"Our offer of ${recommended_offer:.0f} reflects comprehensive valuation analysis",
        f"Average independent valuation: ${average_valuation:.0f}",
        f"Current market conditions in {facts.industry} industry",
        "Profit margin analysis and growth potential",
        "Comparable business sales in the market",
        "Risk factors and mitigation strategies",
    ]


def concession_position(minimum_offer: float, recommended_offer: float, maximum_offer: float) -> float:
    """Where the recommended offer sits in the min..max band (0 for an empty band)."""
    band = maximum_offer - minimum_offer
    if band == 0:
        return 0.0
    return (recommended_offer - minimum_offer) / band


def concession_strategy(minimum_offer: float, recommended_offer: float, maximum_offer: float) -> str:
    position = concession_position(minimum_offer, recommended_offer, maximum_offer)
    return (
        "Plan concessions in phases: initial offer at minimum, target offer at "
        f"{position * 100:.0f}% of range, maximum offer as final position. Each concession "
        "should be justified with additional value discovery or seller concessions. "
        "Maintain discipline to avoid emotional bidding."
    )


def next_steps(facts: BusinessFacts) -> List[NextStep]:
    descriptions = (
        "Prepare detailed valuation report with supporting documentation",
        f"Research recent comparable sales in {facts.industry} industry",
        "Prepare letter of intent with proposed terms",
        "Schedule initial meeting with business owner",
        "Conduct due diligence investigation",
        "Finalize purchase agreement and close transaction",
    )
    return [NextStep(order=i, description=text) for i, text in enumerate(descriptions, start=1)]
