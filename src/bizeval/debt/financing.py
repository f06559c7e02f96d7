# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Acquisition financing - down payment, loan amount and amortized payment.
"""

from __future__ import annotations

from pydantic import Field
from pyxirr import pmt

from ..business import BusinessFacts
from ..core.primitives import Model, PositiveFloat


def calculate_monthly_payment(
    loan_amount: float, interest_rate_percent: float, term_years: int
) -> float:
    """
    Level monthly payment that fully amortizes a loan.

    Uses the standard amortization formula with
    ``monthly_rate = (interest_rate_percent / 100) / 12`` and
    ``n = term_years * 12``:

        payment = loan * r(1+r)^n / ((1+r)^n - 1)

    Args:
        loan_amount: Amount borrowed
        interest_rate_percent: Annual rate as a whole-number percentage
        term_years: Loan term in years

    Returns:
        Monthly payment; 0 when there is nothing to amortize (no loan,
        negative rate or no term). A zero rate repays principal straight-line.
    """
    if loan_amount <= 0 or interest_rate_percent < 0 or term_years <= 0:
        return 0.0

    number_of_payments = term_years * 12
    if interest_rate_percent == 0:
        return loan_amount / number_of_payments

    monthly_rate = (interest_rate_percent / 100) / 12
    return pmt(monthly_rate, number_of_payments, loan_amount) * -1


class FinancingSummary(Model):
    """
    Financing of a purchase at the asking price.

    Attributes:
        purchase_price: Price being financed
        down_payment: Cash paid at closing
        loan_amount: Amount borrowed
        monthly_payment: Level monthly debt service
        annual_payment: Twelve monthly payments
        total_interest: Interest paid over the full term
        cash_flow_after_debt: Annual profit left after annual debt service
    """

    purchase_price: PositiveFloat
    down_payment: PositiveFloat
    loan_amount: PositiveFloat
    monthly_payment: PositiveFloat
    annual_payment: PositiveFloat
    total_interest: float = Field(
        default=0.0, description="Total payments over the term less principal"
    )
    cash_flow_after_debt: float = Field(
        default=0.0, description="Annual profit minus annual debt service"
    )


def compute_financing(facts: BusinessFacts) -> FinancingSummary:
    """
    Compute down payment, loan and debt service for buying ``facts`` at its asking price.

    Example:
        ```python
        facts = BusinessFacts(name="Acme", asking_price=500_000,
                              financing=FinancingTerms(down_payment_percent=20.0,
                                                       interest_rate_percent=6.0,
                                                       term_years=10))
        summary = compute_financing(facts)
        print(f"Monthly: ${summary.monthly_payment:,.2f}")  # Monthly: $4,440.82
        ```
    """
    terms = facts.financing
    down_payment = facts.asking_price * terms.down_payment_fraction
    loan_amount = facts.asking_price - down_payment

    monthly_payment = calculate_monthly_payment(
        loan_amount, terms.interest_rate_percent, terms.term_years
    )
    annual_payment = monthly_payment * 12

    total_interest = 0.0
    if monthly_payment > 0:
        total_interest = monthly_payment * terms.term_years * 12 - loan_amount

    return FinancingSummary(
        purchase_price=facts.asking_price,
        down_payment=down_payment,
        loan_amount=max(loan_amount, 0.0),
        monthly_payment=monthly_payment,
        annual_payment=annual_payment,
        total_interest=total_interest,
        cash_flow_after_debt=facts.annual_profit - annual_payment,
    )
