# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Business input records consumed by the engine.
"""

from .facts import BusinessFacts, FinancingTerms
from .valuation_record import ValuationRecord

__all__ = [
    "BusinessFacts",
    "FinancingTerms",
    "ValuationRecord",
]
