# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cash Flow Projection - Multi-Year Schedule

Grows current revenue year by year, applies the profit margin, spreads any
additional investment evenly over the hold and adds the exit proceeds plus
working-capital recovery to the final year.
"""

from __future__ import annotations

from typing import List, Tuple

import pandas as pd
from pydantic import Field

from ..core.primitives import Model, PositiveFloat
from .assumptions import ReturnAssumptions


class CashFlowSchedule(Model):
    """
    Yearly projection produced for one set of assumptions.

    Two cash flow series are kept side by side and must not be confused:
    ``yearly_cash_flows`` are operating flows only (used for payback and
    volatility), ``adjusted_cash_flows`` add exit value and working-capital
    recovery to the final year (used for ROI, IRR and NPV).

    Attributes:
        years: Year numbers, 1..investment_period
        revenues: Projected revenue per year
        profits: Projected profit per year
        yearly_cash_flows: Operating cash flow per year (pre-exit)
        adjusted_cash_flows: Cash flow per year with exit proceeds in the last year
        exit_value: Final-year profit times the exit multiple
        working_capital_recovery: Working capital returned at exit
    """

    years: Tuple[int, ...]
    revenues: Tuple[float, ...]
    profits: Tuple[float, ...]
    yearly_cash_flows: Tuple[float, ...]
    adjusted_cash_flows: Tuple[float, ...]
    exit_value: float
    working_capital_recovery: PositiveFloat = Field(default=0.0)

    @property
    def total_cash_flow(self) -> float:
        """Sum of adjusted cash flows (including exit)."""
        return sum(self.adjusted_cash_flows)

    def to_frame(self) -> pd.DataFrame:
        """Schedule as a DataFrame indexed by year."""
        return pd.DataFrame(
            {
                "Revenue": self.revenues,
                "Profit": self.profits,
                "Cash Flow": self.yearly_cash_flows,
                "Adjusted Cash Flow": self.adjusted_cash_flows,
            },
            index=pd.Index(self.years, name="Year"),
        )


class CashFlowProjector:
    """
    Builds cash flow schedules from current revenue and assumptions.

    The projector holds no state; the same inputs always produce the same
    schedule.
    """

    @staticmethod
    def project(annual_revenue: float, assumptions: ReturnAssumptions) -> CashFlowSchedule:
        """
        Project yearly revenue, profit and cash flow over the holding period.

        For year y in 1..n:
            revenue_y = annual_revenue * (1 + growth)^y
            profit_y = revenue_y * margin
            cash_flow_y = profit_y - additional_investment / n

        The final year's adjusted cash flow additionally receives
        ``profit_n * exit_multiple`` plus the working capital.

        Args:
            annual_revenue: Current annual revenue of the business
            assumptions: Projection assumptions (investment_period >= 1)

        Returns:
            CashFlowSchedule
        """
        period = assumptions.investment_period
        capex_per_year = assumptions.additional_investment / period

        years: List[int] = []
        revenues: List[float] = []
        profits: List[float] = []
        cash_flows: List[float] = []
        for year in range(1, period + 1):
            revenue = annual_revenue * (1 + assumptions.revenue_growth_rate) ** year
            profit = revenue * assumptions.profit_margin
            years.append(year)
            revenues.append(revenue)
            profits.append(profit)
            cash_flows.append(profit - capex_per_year)

        exit_revenue = annual_revenue * (1 + assumptions.revenue_growth_rate) ** period
        exit_value = exit_revenue * assumptions.profit_margin * assumptions.exit_multiple

        adjusted = list(cash_flows)
        adjusted[-1] += exit_value + assumptions.working_capital

        return CashFlowSchedule(
            years=tuple(years),
            revenues=tuple(revenues),
            profits=tuple(profits),
            yearly_cash_flows=tuple(cash_flows),
            adjusted_cash_flows=tuple(adjusted),
            exit_value=exit_value,
            working_capital_recovery=assumptions.working_capital,
        )
