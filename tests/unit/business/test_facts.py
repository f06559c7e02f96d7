# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from uuid import uuid4

import pytest
from pydantic import ValidationError

from bizeval.business import BusinessFacts, FinancingTerms, ValuationRecord
from bizeval.core.primitives import ConfidenceLevelEnum, ValuationMethodologyEnum


class TestFinancingTerms:
    def test_defaults(self):
        terms = FinancingTerms()
        assert terms.down_payment_percent == 10.0
        assert terms.interest_rate_percent == 7.0
        assert terms.term_years == 10

    def test_fractions(self):
        terms = FinancingTerms(down_payment_percent=20.0, interest_rate_percent=6.5)
        assert terms.down_payment_fraction == pytest.approx(0.20)
        assert terms.interest_rate_fraction == pytest.approx(0.065)

    def test_percent_above_100_rejected(self):
        with pytest.raises(ValidationError):
            FinancingTerms(down_payment_percent=120.0)


class TestBusinessFacts:
    def test_derived_ratios(self, sample_business):
        assert sample_business.profit_margin == pytest.approx(0.20)
        assert sample_business.revenue_multiple == pytest.approx(0.8)
        assert sample_business.profit_multiple == pytest.approx(4.0)

    def test_ratios_without_revenue_or_profit(self, make_business):
        facts = make_business(annual_revenue=0.0, annual_profit=0.0)
        assert facts.profit_margin == 0.0
        assert facts.revenue_multiple == 0.0
        assert facts.profit_multiple == 0.0

    def test_negative_money_rejected(self, make_business):
        with pytest.raises(ValidationError):
            make_business(asking_price=-1.0)

    def test_immutable(self, sample_business):
        with pytest.raises(ValidationError):
            sample_business.asking_price = 1.0

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            BusinessFacts(name="Typo Co", askingprice=100.0)


class TestValuationRecord:
    def test_defaults(self):
        record = ValuationRecord(
            calculated_value=900_000.0,
            methodology=ValuationMethodologyEnum.REVENUE_MULTIPLE,
        )
        assert record.confidence_level == ConfidenceLevelEnum.MEDIUM
        assert record.multiple == 0.0
        assert record.business_id is None
        assert record.notes is None

    def test_with_notes_returns_copy(self):
        business_id = uuid4()
        record = ValuationRecord(
            calculated_value=900_000.0,
            methodology=ValuationMethodologyEnum.SDE_MULTIPLE,
            business_id=business_id,
        )
        annotated = record.with_notes("Broker estimate")
        assert annotated.notes == "Broker estimate"
        assert record.notes is None
        assert annotated.uid == record.uid
        assert annotated.business_id == business_id
