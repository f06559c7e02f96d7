# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for bizeval testing.

Provides ready-made business records so individual tests only spell out the
facts they care about.
"""

from __future__ import annotations

from typing import Sequence

import pytest

from bizeval.business import BusinessFacts, FinancingTerms, ValuationRecord
from bizeval.core.primitives import ValuationMethodologyEnum
from bizeval.returns import ReturnAssumptions


def create_test_business(**overrides) -> BusinessFacts:
    """
    Create a business for testing.

    Defaults describe a mid-sized, profitable services business; any field
    can be overridden.

    Example:
        >>> facts = create_test_business(industry="Retail", annual_profit=50_000.0)
        >>> facts.industry
        'Retail'
    """
    values = {
        "name": "Test Business",
        "industry": "Services",
        "location": "Denver, CO",
        "asking_price": 800_000.0,
        "annual_revenue": 1_000_000.0,
        "annual_profit": 200_000.0,
        "employee_count": 12,
        "years_established": 10,
    }
    values.update(overrides)
    return BusinessFacts(**values)


def create_valuation_records(values: Sequence[float]) -> list:
    """One profit-multiple valuation record per value."""
    return [
        ValuationRecord(
            calculated_value=float(value),
            multiple=3.0,
            methodology=ValuationMethodologyEnum.PROFIT_MULTIPLE,
        )
        for value in values
    ]


@pytest.fixture
def sample_business() -> BusinessFacts:
    return create_test_business()


@pytest.fixture
def financed_business() -> BusinessFacts:
    """Business bought with 20% down on a 10-year loan at 6%."""
    return create_test_business(
        asking_price=500_000.0,
        financing=FinancingTerms(
            down_payment_percent=20.0, interest_rate_percent=6.0, term_years=10
        ),
    )


@pytest.fixture
def reference_assumptions() -> ReturnAssumptions:
    """Reference projection: 8% growth, 20% margin, 4x exit on an 800k price."""
    return ReturnAssumptions(
        purchase_price=800_000.0,
        investment_period=5,
        revenue_growth_rate=0.08,
        profit_margin=0.20,
        exit_multiple=4.0,
        additional_investment=0.0,
        working_capital=0.0,
    )


@pytest.fixture
def make_business():
    """Factory fixture: ``make_business(industry="Retail")``."""
    return create_test_business


@pytest.fixture
def make_valuations():
    """Factory fixture: ``make_valuations([900_000, 1_000_000])``."""
    return create_valuation_records
