# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offer recommendation: offer band, market and risk factors, confidence and
negotiation narrative.
"""

from .models import MarketFactor, NextStep, OfferRecommendation, RiskFactor
from .recommender import OfferRecommender, recommend_offer

__all__ = [
    "MarketFactor",
    "NextStep",
    "OfferRecommendation",
    "OfferRecommender",
    "RiskFactor",
    "recommend_offer",
]
