# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection assumptions for a leveraged return analysis.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..business import BusinessFacts
from ..core.primitives import Model, PositiveFloat, PositiveIntGe1


class ReturnAssumptions(Model):
    """
    Assumptions driving a multi-year cash flow projection.

    Attributes:
        purchase_price: Price paid for the business
        investment_period: Holding period in whole years (>= 1)
        revenue_growth_rate: Annual revenue growth (decimal, may be negative)
        profit_margin: Profit as a fraction of revenue
        exit_multiple: Multiple of final-year profit realized at exit
        additional_investment: Capital injected over the hold, spread evenly
        working_capital: Working capital funded at purchase, recovered at exit

    Example:
        ```python
        assumptions = ReturnAssumptions(
            purchase_price=800_000,
            investment_period=5,
            revenue_growth_rate=0.08,
            profit_margin=0.20,
            exit_multiple=4.0,
        )
        ```
    """

    purchase_price: PositiveFloat
    investment_period: PositiveIntGe1 = Field(default=5, description="Holding period in years")
    revenue_growth_rate: float = Field(default=0.08)
    profit_margin: float = Field(default=0.20)
    exit_multiple: PositiveFloat = Field(default=3.0)
    additional_investment: PositiveFloat = Field(default=0.0)
    working_capital: PositiveFloat = Field(default=0.0)

    @property
    def total_investment(self) -> float:
        """Purchase price plus additional investment plus working capital."""
        return self.purchase_price + self.additional_investment + self.working_capital

    @classmethod
    def from_business(cls, facts: BusinessFacts, **overrides: Any) -> "ReturnAssumptions":
        """
        Standard assumptions for buying ``facts`` at its asking price.

        Profit margin defaults to the business's current margin (20% when it
        has no revenue); growth 8%, exit multiple 3.0x, working capital
        50,000 over a five-year hold. Keyword arguments override any field.
        """
        values = {
            "purchase_price": facts.asking_price,
            "investment_period": 5,
            "revenue_growth_rate": 0.08,
            "profit_margin": facts.profit_margin if facts.annual_revenue > 0 else 0.20,
            "exit_multiple": 3.0,
            "additional_investment": 0.0,
            "working_capital": 50_000.0,
        }
        values.update(overrides)
        return cls(**values)

    def scaled(self, field: str, multiplier: float) -> "ReturnAssumptions":
        """Copy with a single assumption multiplied by ``multiplier``."""
        if field not in type(self).model_fields:
            raise ValueError(f"Unknown assumption '{field}'")
        return self.model_copy(update={field: getattr(self, field) * multiplier})
