# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Acquisition financing: payment on the purchase price and the loan's
month-by-month amortization.
"""

from .amortization import LoanAmortization
from .financing import FinancingSummary, calculate_monthly_payment, compute_financing

__all__ = [
    "FinancingSummary",
    "LoanAmortization",
    "calculate_monthly_payment",
    "compute_financing",
]
