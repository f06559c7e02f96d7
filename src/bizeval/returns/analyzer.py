# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Return Analysis - ROI, IRR, NPV, Risk and Sensitivity

Turns a projected cash flow schedule into the investment metrics a buyer
uses to judge a purchase, classifies its risk and re-runs the projection
under one-at-a-time perturbations of growth, margin and exit multiple.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import pandas as pd
from pydantic import Field

from ..business import BusinessFacts
from ..core.calculations import FinancialCalculations
from ..core.primitives import (
    GlobalSettings,
    Model,
    RiskLevelEnum,
    SensitivityCaseEnum,
    SensitivitySettings,
)
from .assumptions import ReturnAssumptions
from .projection import CashFlowProjector, CashFlowSchedule

logger = logging.getLogger(__name__)

NO_RISK_FACTORS = "No significant risk factors identified"

RISK_DESCRIPTIONS = {
    RiskLevelEnum.LOW: "Low risk investment with strong returns and quick payback",
    RiskLevelEnum.MEDIUM: "Moderate risk investment with reasonable returns",
    RiskLevelEnum.HIGH: "High risk investment with uncertain returns and longer payback",
}


class RiskAssessment(Model):
    """Risk tier of a projected investment plus the specific factors behind it."""

    level: RiskLevelEnum
    description: str
    factors: Tuple[str, ...]


def assess_risk(total_roi: float, payback_period: float, volatility: float) -> RiskAssessment:
    """
    Classify an investment from its ROI, payback and cash flow volatility.

    Tier (first rule that holds):
        Low:    ROI > 30%, payback < 3 years, volatility < 0.20
        Medium: ROI > 15%, payback < 5 years, volatility < 0.40
        High:   otherwise

    Risk factors are collected independently of the tier.
    """
    if total_roi > 0.30 and payback_period < 3 and volatility < 0.20:
        level = RiskLevelEnum.LOW
    elif total_roi > 0.15 and payback_period < 5 and volatility < 0.40:
        level = RiskLevelEnum.MEDIUM
    else:
        level = RiskLevelEnum.HIGH

    factors: List[str] = []
    if total_roi < 0.10:
        factors.append("Low projected ROI")
    if payback_period > 5:
        factors.append("Long payback period")
    if volatility > 0.30:
        factors.append("High cash flow volatility")
    if total_roi < 0:
        factors.append("Negative projected returns")
    if not factors:
        factors.append(NO_RISK_FACTORS)

    return RiskAssessment(
        level=level, description=RISK_DESCRIPTIONS[level], factors=tuple(factors)
    )


class ReturnAnalysis(Model):
    """
    Complete return analysis of a purchase.

    Attributes:
        total_roi: Net profit / total investment over the whole hold
        annualized_roi: Compound annual equivalent of total_roi
        net_profit: Total cash flow (with exit) less total investment
        payback_period_years: First year operating cash flows recover the investment
        total_investment: Purchase price + additional investment + working capital
        exit_value: Final-year profit times exit multiple
        total_cash_flow: Sum of adjusted cash flows
        irr: Internal rate of return of the adjusted cash flows
        npv: Net present value at the configured discount rate
        volatility: Coefficient of variation of operating cash flows
        yearly_cash_flows: Operating cash flow per year (pre-exit)
        adjusted_cash_flows: Cash flow per year with exit proceeds in the last year
        cumulative_cash_flows: Running total of operating cash flows
        risk_level: Low / Medium / High
        risk_description: Sentence describing the risk tier
        risk_factors: Specific concerns (or a single "none" entry)
        low_growth_roi ... high_exit_roi: Total ROI under each sensitivity case
        sensitivity_settings: Multipliers those cases were run with
    """

    # === RETURN METRICS ===
    total_roi: float
    annualized_roi: float
    net_profit: float
    payback_period_years: float
    total_investment: float
    exit_value: float
    total_cash_flow: float
    irr: float
    npv: float
    volatility: float

    # === CASH FLOWS ===
    yearly_cash_flows: Tuple[float, ...]
    adjusted_cash_flows: Tuple[float, ...]
    cumulative_cash_flows: Tuple[float, ...]

    # === RISK ===
    risk_level: RiskLevelEnum
    risk_description: str
    risk_factors: Tuple[str, ...]

    # === SENSITIVITY ===
    low_growth_roi: float
    high_growth_roi: float
    low_margin_roi: float
    high_margin_roi: float
    low_exit_roi: float
    high_exit_roi: float

    assumptions: Optional[ReturnAssumptions] = Field(
        default=None, description="Assumptions the analysis was run with"
    )
    schedule: Optional[CashFlowSchedule] = Field(
        default=None, description="Projection the metrics were computed from"
    )
    sensitivity_settings: SensitivitySettings = Field(
        default_factory=SensitivitySettings,
        description="Perturbations the sensitivity ROIs were computed with",
    )

    @property
    def sensitivity(self) -> Dict[SensitivityCaseEnum, float]:
        """Sensitivity ROIs keyed by case, in sweep order."""
        return {
            SensitivityCaseEnum.LOW_GROWTH: self.low_growth_roi,
            SensitivityCaseEnum.HIGH_GROWTH: self.high_growth_roi,
            SensitivityCaseEnum.LOW_MARGIN: self.low_margin_roi,
            SensitivityCaseEnum.HIGH_MARGIN: self.high_margin_roi,
            SensitivityCaseEnum.LOW_EXIT: self.low_exit_roi,
            SensitivityCaseEnum.HIGH_EXIT: self.high_exit_roi,
        }

    def cash_flow_table(self) -> pd.DataFrame:
        """Yearly cash flows (operating, adjusted, cumulative) indexed by year."""
        years = range(1, len(self.yearly_cash_flows) + 1)
        return pd.DataFrame(
            {
                "Cash Flow": self.yearly_cash_flows,
                "Adjusted Cash Flow": self.adjusted_cash_flows,
                "Cumulative Cash Flow": self.cumulative_cash_flows,
            },
            index=pd.Index(years, name="Year"),
        )


class ReturnAnalyzer:
    """
    Computes return metrics, risk and sensitivity for a purchase.

    Example:
        ```python
        analyzer = ReturnAnalyzer()
        assumptions = ReturnAssumptions.from_business(facts, exit_multiple=4.0)
        analysis = analyzer.analyze(facts.annual_revenue, assumptions)
        print(f"ROI {analysis.total_roi:.1%}, IRR {analysis.irr:.1%}, NPV ${analysis.npv:,.0f}")
        ```
    """

    def __init__(self, settings: Optional[GlobalSettings] = None):
        self.settings = settings if settings is not None else GlobalSettings()

    @staticmethod
    def total_roi(annual_revenue: float, assumptions: ReturnAssumptions) -> float:
        """Total ROI of a single projection (the sensitivity sweep's evaluator)."""
        schedule = CashFlowProjector.project(annual_revenue, assumptions)
        return FinancialCalculations.calculate_total_roi(
            schedule.total_cash_flow, assumptions.total_investment
        )

    def sensitivity_sweep(
        self, annual_revenue: float, assumptions: ReturnAssumptions
    ) -> Dict[SensitivityCaseEnum, float]:
        """
        Total ROI with exactly one assumption perturbed per case.

        Returns:
            Mapping of sensitivity case to total ROI, in sweep order
        """
        return {
            case: self.total_roi(annual_revenue, assumptions.scaled(field, multiplier))
            for case, (field, multiplier) in self.settings.sensitivity.cases.items()
        }

    def analyze(self, annual_revenue: float, assumptions: ReturnAssumptions) -> ReturnAnalysis:
        """
        Run the full return analysis.

        Args:
            annual_revenue: Current annual revenue of the business
            assumptions: Projection assumptions

        Returns:
            ReturnAnalysis
        """
        schedule: CashFlowSchedule = CashFlowProjector.project(annual_revenue, assumptions)
        return_settings = self.settings.returns

        total_investment = assumptions.total_investment
        total_cash_flow = schedule.total_cash_flow
        net_profit = total_cash_flow - total_investment
        total_roi = FinancialCalculations.calculate_total_roi(total_cash_flow, total_investment)
        annualized_roi = FinancialCalculations.calculate_annualized_roi(
            total_roi, assumptions.investment_period
        )

        cumulative = FinancialCalculations.calculate_cumulative(schedule.yearly_cash_flows)
        payback = FinancialCalculations.calculate_payback_period(cumulative, total_investment)

        irr = FinancialCalculations.calculate_irr(
            schedule.adjusted_cash_flows,
            total_investment,
            initial_guess=return_settings.irr_initial_guess,
            tolerance=return_settings.irr_tolerance,
            max_iterations=return_settings.irr_max_iterations,
        )
        npv = FinancialCalculations.calculate_npv(
            schedule.adjusted_cash_flows, return_settings.discount_rate, total_investment
        )
        volatility = FinancialCalculations.calculate_volatility(schedule.yearly_cash_flows)

        risk = assess_risk(total_roi, payback, volatility)
        sensitivity = self.sensitivity_sweep(annual_revenue, assumptions)

        logger.debug(
            f"Return analysis: ROI {total_roi:.2%}, IRR {irr:.2%}, NPV {npv:,.0f}, "
            f"payback {payback:.0f}y, risk {risk.level.value}"
        )

        return ReturnAnalysis(
            total_roi=total_roi,
            annualized_roi=annualized_roi,
            net_profit=net_profit,
            payback_period_years=payback,
            total_investment=total_investment,
            exit_value=schedule.exit_value,
            total_cash_flow=total_cash_flow,
            irr=irr,
            npv=npv,
            volatility=volatility,
            yearly_cash_flows=schedule.yearly_cash_flows,
            adjusted_cash_flows=schedule.adjusted_cash_flows,
            cumulative_cash_flows=tuple(cumulative),
            risk_level=risk.level,
            risk_description=risk.description,
            risk_factors=risk.factors,
            low_growth_roi=sensitivity[SensitivityCaseEnum.LOW_GROWTH],
            high_growth_roi=sensitivity[SensitivityCaseEnum.HIGH_GROWTH],
            low_margin_roi=sensitivity[SensitivityCaseEnum.LOW_MARGIN],
            high_margin_roi=sensitivity[SensitivityCaseEnum.HIGH_MARGIN],
            low_exit_roi=sensitivity[SensitivityCaseEnum.LOW_EXIT],
            high_exit_roi=sensitivity[SensitivityCaseEnum.HIGH_EXIT],
            assumptions=assumptions,
            schedule=schedule,
            sensitivity_settings=self.settings.sensitivity,
        )


def project_returns(
    facts: BusinessFacts,
    assumptions: Optional[ReturnAssumptions] = None,
    settings: Optional[GlobalSettings] = None,
) -> ReturnAnalysis:
    """
    Analyze returns on buying ``facts``.

    Assumptions default to ``ReturnAssumptions.from_business(facts)``.
    """
    if assumptions is None:
        assumptions = ReturnAssumptions.from_business(facts)
    return ReturnAnalyzer(settings).analyze(facts.annual_revenue, assumptions)
