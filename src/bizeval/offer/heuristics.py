# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offer Heuristics - Industry tables and scoring rules

Fixed industry adjustments plus the rule-based scores and factor lists an
offer recommendation is assembled from. Industry tables match the lower-cased
label exactly; anything else takes the neutral entry.
"""

from __future__ import annotations

from typing import List, Sequence

from ..benchmarks import BenchmarkCatalog
from ..business import BusinessFacts
from ..core.primitives import ConfidenceLevelEnum, RiskSeverityEnum
from .models import MarketFactor, RiskFactor

INDUSTRY_MARKET_ADJUSTMENTS = {
    "technology": 0.05,
    "manufacturing": -0.02,
    "retail": 0.02,
    "services": 0.03,
}

INDUSTRY_RISK = {
    "technology": RiskSeverityEnum.HIGH,
    "financial services": RiskSeverityEnum.HIGH,
    "healthcare": RiskSeverityEnum.MEDIUM,
    "services": RiskSeverityEnum.MEDIUM,
    "manufacturing": RiskSeverityEnum.MEDIUM,
    "retail": RiskSeverityEnum.MEDIUM,
}

INDUSTRY_OUTLOOK = {
    "technology": "positive",
    "healthcare": "positive",
    "financial services": "positive",
    "manufacturing": "moderate",
    "retail": "moderate",
}

VALUATION_VARIANCE_THRESHOLD = 0.3
LOW_MARGIN_THRESHOLD = 0.1
SMALL_BUSINESS_REVENUE = 500_000


def market_adjustment(industry: str) -> float:
    return INDUSTRY_MARKET_ADJUSTMENTS.get(industry.lower(), 0.0)


def industry_risk(industry: str) -> RiskSeverityEnum:
    return INDUSTRY_RISK.get(industry.lower(), RiskSeverityEnum.LOW)


def industry_outlook(industry: str) -> str:
    """"positive", "moderate" or "neutral"."""
    return INDUSTRY_OUTLOOK.get(industry.lower(), "neutral")


def market_position_score(facts: BusinessFacts) -> float:
    """
    Score the business's market position in [0, 1].

    Starts at 0.5; +0.2 for revenue above 2M (else +0.1 above 1M); +0.2 for
    a margin above 25% (else +0.1 above 15%); +0.1 for a business younger
    than five years.
    """
    score = 0.5

    if facts.annual_revenue > 2_000_000:
        score += 0.2
    elif facts.annual_revenue > 1_000_000:
        score += 0.1

    margin = facts.profit_margin
    if margin > 0.25:
        score += 0.2
    elif margin > 0.15:
        score += 0.1

    if facts.years_established < 5:
        score += 0.1

    return min(1.0, max(0.0, score))


def market_factors(facts: BusinessFacts) -> List[MarketFactor]:
    factors: List[MarketFactor] = []

    if facts.annual_revenue > 1_000_000:
        factors.append(
            MarketFactor(description="Strong revenue base provides stability", is_positive=True)
        )

    margin = facts.profit_margin
    if margin > 0.2:
        factors.append(
            MarketFactor(description="Healthy profit margins indicate efficiency", is_positive=True)
        )
    elif margin < 0.1:
        factors.append(
            MarketFactor(
                description="Low profit margins may indicate operational issues",
                is_positive=False,
            )
        )

    outlook = industry_outlook(facts.industry)
    factors.append(
        MarketFactor(
            description=f"{facts.industry} industry has {outlook} outlook",
            is_positive=outlook == "positive",
        )
    )
    return factors


def risk_factors(facts: BusinessFacts, valuation_values: Sequence[float]) -> List[RiskFactor]:
    """
    Risks flagged for the deal, in a fixed order.

    Valuation variance (three or more valuations spread by more than 30% of
    their mean), low margin (< 10%), industry risk (when not Low) and small
    revenue base (< 500,000).
    """
    factors: List[RiskFactor] = []

    if len(valuation_values) >= 3:
        spread = max(valuation_values) - min(valuation_values)
        mean_value = sum(valuation_values) / len(valuation_values)
        if mean_value != 0 and spread / mean_value > VALUATION_VARIANCE_THRESHOLD:
            factors.append(
                RiskFactor(
                    title="Valuation Variance",
                    description="High variance between valuations indicates uncertainty",
                    severity=RiskSeverityEnum.MEDIUM,
                    mitigation="Seek additional valuation methods or professional appraisal",
                )
            )

    if facts.profit_margin < LOW_MARGIN_THRESHOLD:
        factors.append(
            RiskFactor(
                title="Low Profit Margin",
                description="Profit margin below 10% may indicate operational challenges",
                severity=RiskSeverityEnum.HIGH,
                mitigation="Investigate cost structure and efficiency improvements",
            )
        )

    severity = industry_risk(facts.industry)
    if severity != RiskSeverityEnum.LOW:
        factors.append(
            RiskFactor(
                title="Industry Risk",
                description=f"{facts.industry} industry faces {severity.value} risk factors",
                severity=severity,
                mitigation="Conduct thorough industry analysis and competitive assessment",
            )
        )

    if facts.annual_revenue < SMALL_BUSINESS_REVENUE:
        factors.append(
            RiskFactor(
                title="Small Business Risk",
                description="Small revenue base may be vulnerable to market changes",
                severity=RiskSeverityEnum.MEDIUM,
                mitigation="Diversify revenue streams and strengthen customer relationships",
            )
        )

    return factors


def confidence_level(
    facts: BusinessFacts, valuation_count: int, factors: Sequence[RiskFactor]
) -> ConfidenceLevelEnum:
    """
    Confidence in the recommendation.

    Score starts at 3; +1 for three or more valuations, -1 for none; -1 per
    high or critical risk; +1 when both revenue and profit are positive.
    Bands: <=1 Low, 2-3 Medium, 4-5 High, above 5 Very High (not reachable
    with the current increments).
    """
    score = 3

    if valuation_count >= 3:
        score += 1
    elif valuation_count == 0:
        score -= 1

    score -= sum(1 for factor in factors if factor.is_serious)

    if facts.annual_revenue > 0 and facts.annual_profit > 0:
        score += 1

    if score <= 1:
        return ConfidenceLevelEnum.LOW
    elif score <= 3:
        return ConfidenceLevelEnum.MEDIUM
    elif score <= 5:
        return ConfidenceLevelEnum.HIGH
    return ConfidenceLevelEnum.VERY_HIGH


def industry_comparison(facts: BusinessFacts, catalog: BenchmarkCatalog) -> str:
    """Asking revenue multiple relative to the industry benchmark, as text."""
    benchmark = catalog.lookup(facts.industry)
    if facts.annual_revenue <= 0 or benchmark.revenue_multiple <= 0:
        return "No industry data available"

    comparison = facts.revenue_multiple / benchmark.revenue_multiple
    if comparison > 1.2:
        return f"Above industry average by {(comparison - 1) * 100:.0f}%"
    elif comparison < 0.8:
        return f"Below industry average by {(1 - comparison) * 100:.0f}%"
    return "In line with industry averages"
