# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Business Facts - Engine Input Records

The small set of facts the engine needs about a business for sale. Records
are owned by the caller (typically a persistence layer) and handed to the
engine read-only.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import Field

from ..core.primitives import Model, PercentFloat, PositiveFloat, PositiveInt


class FinancingTerms(Model):
    """
    Acquisition financing terms.

    Percentages are whole numbers as entered by a user (``10.0`` means 10%).
    They are converted to fractions exactly once, inside the financing model.

    Attributes:
        down_payment_percent: Share of the price paid in cash (0-100)
        interest_rate_percent: Annual loan interest rate (0-100)
        term_years: Loan term in years

    Example:
        >>> terms = FinancingTerms(down_payment_percent=20.0, interest_rate_percent=6.5)
        >>> terms.down_payment_fraction
        0.2
    """

    down_payment_percent: PercentFloat = Field(
        default=10.0, description="Down payment as a whole-number percentage of price"
    )
    interest_rate_percent: PercentFloat = Field(
        default=7.0, description="Annual interest rate as a whole-number percentage"
    )
    term_years: PositiveInt = Field(default=10, description="Loan term in years")

    @property
    def down_payment_fraction(self) -> float:
        """Down payment as a fraction (20.0% -> 0.20)."""
        return self.down_payment_percent / 100

    @property
    def interest_rate_fraction(self) -> float:
        """Annual interest rate as a fraction (7.0% -> 0.07)."""
        return self.interest_rate_percent / 100


class BusinessFacts(Model):
    """
    Financial and descriptive facts about a business for sale.

    All monetary fields are non-negative amounts in a single unit of account.

    Example:
        ```python
        facts = BusinessFacts(
            name="Harbor Coffee",
            industry="Food & Beverage",
            asking_price=850_000,
            annual_revenue=1_200_000,
            annual_profit=210_000,
            employee_count=14,
            years_established=9,
        )
        ```
    """

    # === CORE IDENTITY ===
    name: str = Field(..., description="Business name")
    uid: Optional[UUID] = Field(
        default=None, description="Identifier of the caller's stored business record"
    )
    industry: str = Field(default="", description="Free-text industry label")
    location: str = Field(default="")
    description: str = Field(default="")

    # === FINANCIALS ===
    asking_price: PositiveFloat = Field(default=0.0)
    annual_revenue: PositiveFloat = Field(default=0.0)
    annual_profit: PositiveFloat = Field(default=0.0)
    employee_count: PositiveInt = Field(default=0)
    years_established: PositiveInt = Field(default=0)

    # === FINANCING ===
    financing: FinancingTerms = Field(default_factory=FinancingTerms)

    # === COMPUTED PROPERTIES ===

    @property
    def profit_margin(self) -> float:
        """Profit as a fraction of revenue (0 without revenue)."""
        if self.annual_revenue <= 0:
            return 0.0
        return self.annual_profit / self.annual_revenue

    @property
    def revenue_multiple(self) -> float:
        """Asking price over annual revenue (0 without revenue)."""
        if self.annual_revenue <= 0:
            return 0.0
        return self.asking_price / self.annual_revenue

    @property
    def profit_multiple(self) -> float:
        """Asking price over annual profit (0 without profit)."""
        if self.annual_profit <= 0:
            return 0.0
        return self.asking_price / self.annual_profit
