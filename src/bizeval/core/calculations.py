# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for core financial metrics. These functions are pure
(math-only) and independent of any business record; other modules should
delegate to these to ensure a single source of truth for financial
calculations.

Cash flow convention: ``cash_flows[i]`` is the cash flow received at the end
of year ``i + 1``; the initial investment is paid at year 0 and is passed
separately as a positive amount.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class FinancialCalculations:
    """
    Pure mathematical functions for financial calculations.

    Static methods for core return metrics, independent of business facts or
    projection assumptions.
    """

    @staticmethod
    def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
        """Divide, returning ``default`` when the denominator is zero."""
        if denominator == 0:
            return default
        return numerator / denominator

    @staticmethod
    def calculate_npv(
        cash_flows: Sequence[float], discount_rate: float, initial_investment: float
    ) -> float:
        """
        Calculate Net Present Value of yearly cash flows.

        NPV = sum(cf_t / (1 + r)^t for t = 1..n) - initial_investment

        Args:
            cash_flows: Yearly cash flows, first element at the end of year 1
            discount_rate: Annual discount rate as decimal (e.g., 0.10 for 10%)
            initial_investment: Amount invested at year 0 (positive)

        Returns:
            NPV as float

        Example:
            ```python
            npv = FinancialCalculations.calculate_npv([300, 400, 500], 0.10, 1000)
            print(f"NPV: ${npv:,.2f}")  # NPV: $-21.04
            ```
        """
        npv = -initial_investment
        for year, cash_flow in enumerate(cash_flows, start=1):
            npv += cash_flow / (1 + discount_rate) ** year
        return npv

    @staticmethod
    def calculate_npv_derivative(cash_flows: Sequence[float], rate: float) -> float:
        """
        Analytic derivative of the NPV function with respect to the rate.

        d/dr sum(cf_t / (1 + r)^t) = -sum(t * cf_t / (1 + r)^(t + 1))
        """
        derivative = 0.0
        for year, cash_flow in enumerate(cash_flows, start=1):
            derivative -= year * cash_flow / (1 + rate) ** (year + 1)
        return derivative

    @staticmethod
    def calculate_irr(
        cash_flows: Sequence[float],
        initial_investment: float,
        initial_guess: float = 0.10,
        tolerance: float = 1e-4,
        max_iterations: int = 100,
    ) -> float:
        """
        Calculate Internal Rate of Return with Newton-Raphson iteration.

        Iterates ``r <- r - NPV(r) / NPV'(r)`` from ``initial_guess`` until two
        successive iterates differ by less than ``tolerance``.

        Args:
            cash_flows: Yearly cash flows, first element at the end of year 1
            initial_investment: Amount invested at year 0 (positive)
            initial_guess: Starting rate
            tolerance: Convergence threshold on the step size
            max_iterations: Hard cap on iterations

        Returns:
            IRR as decimal (e.g., 0.15 for 15%)

        Edge Cases Handled:
            - No convergence within ``max_iterations`` → last iterate (logged)
            - Zero derivative → current iterate (no further progress possible)
            - Iterate at -100% → current iterate (discount factor undefined)
            - Divergence (discount factor overflows or the next iterate is not
              finite, e.g. when every cash flow is a loss) → last finite
              iterate (logged)
        """
        irr = initial_guess
        for _ in range(max_iterations):
            if 1 + irr == 0:
                logger.warning("IRR iteration reached -100%; returning current estimate")
                return irr

            try:
                npv = FinancialCalculations.calculate_npv(cash_flows, irr, initial_investment)
                derivative = FinancialCalculations.calculate_npv_derivative(cash_flows, irr)
            except (OverflowError, ZeroDivisionError):
                logger.warning(f"IRR iteration diverged at {irr:.6g}; returning current estimate")
                return irr
            if derivative == 0:
                logger.warning(f"IRR derivative vanished at {irr:.6f}; returning current estimate")
                return irr

            new_irr = irr - npv / derivative
            if not math.isfinite(new_irr):
                logger.warning(f"IRR iteration diverged at {irr:.6g}; returning current estimate")
                return irr
            if abs(new_irr - irr) < tolerance:
                return new_irr
            irr = new_irr

        logger.warning(
            f"IRR did not converge within {max_iterations} iterations; last estimate {irr:.6f}"
        )
        return irr

    @staticmethod
    def calculate_volatility(cash_flows: Sequence[float]) -> float:
        """
        Coefficient of variation of a cash flow series.

        Population standard deviation divided by the mean. Returns 0 for fewer
        than two observations or a zero mean.
        """
        if len(cash_flows) < 2:
            return 0.0
        values = np.asarray(cash_flows, dtype=float)
        mean = values.mean()
        if mean == 0:
            return 0.0
        return float(values.std(ddof=0) / mean)

    @staticmethod
    def calculate_cumulative(cash_flows: Sequence[float]) -> List[float]:
        """Running total of a cash flow series."""
        return [float(value) for value in np.cumsum(np.asarray(cash_flows, dtype=float))]

    @staticmethod
    def calculate_payback_period(
        cumulative_cash_flows: Sequence[float], total_investment: float
    ) -> float:
        """
        First year (1-based) in which cumulative cash flow recovers the investment.

        Falls back to the length of the series when the investment is never
        recovered within it.
        """
        for year, cumulative in enumerate(cumulative_cash_flows, start=1):
            if cumulative >= total_investment:
                return float(year)
        return float(len(cumulative_cash_flows))

    @staticmethod
    def calculate_total_roi(total_cash_flow: float, total_investment: float) -> float:
        """
        Total return on investment: (total cash flow - investment) / investment.

        Returns 0 when nothing was invested.
        """
        net_profit = total_cash_flow - total_investment
        return FinancialCalculations.safe_divide(net_profit, total_investment)

    @staticmethod
    def calculate_annualized_roi(total_roi: float, years: int) -> float:
        """
        Compound annual equivalent of a total ROI over ``years`` years.

        (1 + total_roi)^(1 / years) - 1. A total loss (or worse) is reported
        as -100% rather than a complex root.
        """
        growth = 1 + total_roi
        if growth <= 0:
            return -1.0
        return growth ** (1.0 / years) - 1
