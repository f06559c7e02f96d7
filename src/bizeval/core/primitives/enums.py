# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ValuationMethodologyEnum(str, Enum):
    """
    Methodology used to produce a recorded valuation.

    Attributes:
        REVENUE_MULTIPLE: Annual revenue times a revenue multiple
        PROFIT_MULTIPLE: Annual profit times a profit multiple
        EBITDA_MULTIPLE: EBITDA (approximated by profit) times a multiple
        SDE_MULTIPLE: Seller's discretionary earnings times a multiple
        ASSET_BASED: Tangible asset value plus goodwill ("blue sky")
        DISCOUNTED_CASH_FLOW: Present value of projected cash flows
        MARKET_COMPARISON: Comparable business sales
    """

    REVENUE_MULTIPLE = "Revenue Multiple"
    PROFIT_MULTIPLE = "Profit Multiple"
    EBITDA_MULTIPLE = "EBITDA Multiple"
    SDE_MULTIPLE = "SDE Multiple"
    ASSET_BASED = "Asset Based"
    DISCOUNTED_CASH_FLOW = "Discounted Cash Flow"
    MARKET_COMPARISON = "Market Comparison"


class ConfidenceLevelEnum(str, Enum):
    """Confidence attached to a valuation, scenario or recommendation."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class RiskLevelEnum(str, Enum):
    """Risk tier used by benchmarks, return analysis and scenario analysis."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class RiskSeverityEnum(str, Enum):
    """Severity of an individual risk factor in an offer recommendation."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ScenarioTypeEnum(str, Enum):
    """Valuation scenario kinds."""

    OPTIMISTIC = "Optimistic"
    REALISTIC = "Realistic"
    PESSIMISTIC = "Pessimistic"
    CUSTOM = "Custom"


class MarketConditionsEnum(str, Enum):
    """
    Market backdrop applied to a valuation scenario.

    Each condition scales the scenario value by a fixed multiplier
    (Excellent 1.30 down to Recession 0.70).
    """

    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"
    RECESSION = "Recession"

    @property
    def multiplier(self) -> float:
        """Valuation multiplier for this market condition."""
        return _MARKET_MULTIPLIERS[self]

    @property
    def description(self) -> str:
        return _MARKET_DESCRIPTIONS[self]


_MARKET_MULTIPLIERS = {
    MarketConditionsEnum.EXCELLENT: 1.30,
    MarketConditionsEnum.GOOD: 1.15,
    MarketConditionsEnum.AVERAGE: 1.00,
    MarketConditionsEnum.POOR: 0.85,
    MarketConditionsEnum.RECESSION: 0.70,
}

_MARKET_DESCRIPTIONS = {
    MarketConditionsEnum.EXCELLENT: "Strong economic growth, high buyer demand, low interest rates",
    MarketConditionsEnum.GOOD: "Moderate growth, stable demand, reasonable financing",
    MarketConditionsEnum.AVERAGE: "Normal market conditions, balanced supply and demand",
    MarketConditionsEnum.POOR: "Economic uncertainty, reduced demand, higher financing costs",
    MarketConditionsEnum.RECESSION: "Economic downturn, low demand, difficult financing",
}


class SensitivityCaseEnum(str, Enum):
    """One-at-a-time perturbations run by the return sensitivity sweep."""

    LOW_GROWTH = "Low Growth"
    HIGH_GROWTH = "High Growth"
    LOW_MARGIN = "Low Margin"
    HIGH_MARGIN = "High Margin"
    LOW_EXIT = "Low Exit Multiple"
    HIGH_EXIT = "High Exit Multiple"
