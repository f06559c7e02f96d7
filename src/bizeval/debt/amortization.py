# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Acquisition loan repayment schedule.

Splits each level monthly payment on the financed portion of the purchase
into interest and principal.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import pandas as pd

from ..business import FinancingTerms
from ..core.primitives import Model, PercentFloat, PositiveFloat, PositiveInt
from .financing import calculate_monthly_payment

SCHEDULE_COLUMNS = ["Begin Balance", "Payment", "Interest", "Principal", "End Balance"]


class LoanAmortization(Model):
    """
    Month-by-month repayment of an acquisition loan.

    Example:
        >>> loan = LoanAmortization(loan_amount=400_000.0, term_years=10, interest_rate_percent=6.0)
        >>> schedule, totals = loan.amortization_schedule
        >>> len(schedule), round(totals["Total Principal Paid"], 2)
        (120, 400000.0)
    """

    loan_amount: PositiveFloat
    term_years: PositiveInt
    interest_rate_percent: PercentFloat

    @classmethod
    def from_terms(cls, loan_amount: float, terms: FinancingTerms) -> "LoanAmortization":
        """Schedule for ``loan_amount`` under a business's financing terms."""
        return cls(
            loan_amount=loan_amount,
            term_years=terms.term_years,
            interest_rate_percent=terms.interest_rate_percent,
        )

    @property
    def months(self) -> int:
        """Number of monthly payments (0 when nothing is borrowed)."""
        if self.loan_amount <= 0:
            return 0
        return self.term_years * 12

    @property
    def monthly_payment(self) -> float:
        return calculate_monthly_payment(
            self.loan_amount, self.interest_rate_percent, self.term_years
        )

    @property
    def amortization_schedule(self) -> Tuple[pd.DataFrame, pd.Series]:
        """
        Repayment schedule and its totals.

        Interest accrues monthly on the opening balance; the rest of the level
        payment retires principal. The last payment absorbs any residual
        balance so the loan closes at exactly zero.

        Returns:
            (schedule, totals) where ``schedule`` is indexed by ``Period``
            (1-based) with the columns in ``SCHEDULE_COLUMNS`` and ``totals``
            holds Total Payments, Total Principal Paid, Total Interest Paid
            and Last Payment Amount.
        """
        months = self.months
        rate = self.interest_rate_percent / 100 / 12
        payment = self.monthly_payment

        rows = np.zeros((months, len(SCHEDULE_COLUMNS)))
        balance = self.loan_amount
        for month in range(months):
            interest = balance * rate
            principal = payment - interest
            if month == months - 1:
                principal = balance
            rows[month] = (balance, interest + principal, interest, principal, balance - principal)
            balance -= principal

        schedule = pd.DataFrame(
            rows,
            columns=SCHEDULE_COLUMNS,
            index=pd.RangeIndex(1, months + 1, name="Period"),
        )
        if months:
            schedule.iloc[-1, SCHEDULE_COLUMNS.index("End Balance")] = 0.0

        totals = pd.Series(
            {
                "Total Payments": float(schedule["Payment"].sum()),
                "Total Principal Paid": float(schedule["Principal"].sum()),
                "Total Interest Paid": float(schedule["Interest"].sum()),
                "Last Payment Amount": float(schedule["Payment"].iloc[-1]) if months else 0.0,
            }
        )
        return schedule, totals
