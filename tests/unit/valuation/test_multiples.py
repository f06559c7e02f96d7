# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from uuid import uuid4

import pytest
from pydantic import ValidationError

from bizeval.core.primitives import ConfidenceLevelEnum, ValuationMethodologyEnum
from bizeval.valuation import (
    DEFAULT_MULTIPLES,
    ValuationCalculator,
    assess_price,
    calculate_valuation,
)


class TestValuationCalculator:
    @pytest.mark.parametrize(
        "methodology,expected",
        [
            (ValuationMethodologyEnum.REVENUE_MULTIPLE, 1_000_000.0 * 2.5),
            (ValuationMethodologyEnum.PROFIT_MULTIPLE, 200_000.0 * 3.0),
            (ValuationMethodologyEnum.EBITDA_MULTIPLE, 200_000.0 * 6.0),
            (ValuationMethodologyEnum.SDE_MULTIPLE, 200_000.0 * 3.5),
            (ValuationMethodologyEnum.DISCOUNTED_CASH_FLOW, 800_000.0),
            (ValuationMethodologyEnum.MARKET_COMPARISON, 800_000.0),
        ],
    )
    def test_default_multiples(self, sample_business, methodology, expected):
        record = calculate_valuation(sample_business, methodology)
        assert record.calculated_value == pytest.approx(expected)
        assert record.multiple == DEFAULT_MULTIPLES[methodology]
        assert record.methodology == methodology

    def test_asset_based(self, sample_business):
        record = calculate_valuation(
            sample_business,
            ValuationMethodologyEnum.ASSET_BASED,
            asset_value=350_000.0,
            blue_sky_value=150_000.0,
        )
        assert record.calculated_value == 500_000.0

    def test_explicit_multiple(self, sample_business):
        record = calculate_valuation(
            sample_business, ValuationMethodologyEnum.MARKET_COMPARISON, multiple=0.9
        )
        assert record.calculated_value == pytest.approx(720_000.0)

    def test_component_multiple_recorded(self, sample_business):
        record = calculate_valuation(sample_business, ValuationMethodologyEnum.EBITDA_MULTIPLE, 5.5)
        assert record.ebitda_multiple == 5.5
        assert record.revenue_multiple is None
        assert record.profit_multiple is None
        assert record.sde_multiple is None

        dcf = calculate_valuation(sample_business, ValuationMethodologyEnum.DISCOUNTED_CASH_FLOW)
        assert (dcf.revenue_multiple, dcf.profit_multiple, dcf.ebitda_multiple, dcf.sde_multiple) == (
            None,
            None,
            None,
            None,
        )

    def test_record_metadata(self, make_business):
        business_id = uuid4()
        record = calculate_valuation(
            make_business(uid=business_id),
            ValuationMethodologyEnum.SDE_MULTIPLE,
            confidence_level=ConfidenceLevelEnum.HIGH,
            notes="",
        )
        assert record.business_id == business_id
        assert record.confidence_level == ConfidenceLevelEnum.HIGH
        assert record.notes is None

    def test_custom_default_multiples(self, sample_business):
        calculator = ValuationCalculator({ValuationMethodologyEnum.SDE_MULTIPLE: 2.8})
        record = calculator.calculate(sample_business, ValuationMethodologyEnum.SDE_MULTIPLE)
        assert record.calculated_value == pytest.approx(560_000.0)
        assert calculator.default_multiple(ValuationMethodologyEnum.REVENUE_MULTIPLE) == 2.5

    def test_negative_multiple_rejected(self, sample_business):
        with pytest.raises(ValidationError):
            calculate_valuation(sample_business, ValuationMethodologyEnum.PROFIT_MULTIPLE, -1.0)


class TestAssessPrice:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (700_000.0, "Significantly overpriced based on this valuation"),
            (900_000.0, "Slightly overpriced - negotiate down"),
            (1_000_000.0, "Fair price - close to calculated value"),
            (1_040_000.0, "Fair price - close to calculated value"),
            (1_150_000.0, "Good value - priced below valuation"),
            (1_300_000.0, "Excellent value - significantly underpriced"),
        ],
    )
    def test_bands(self, value, expected):
        assert assess_price(value, 1_000_000.0).assessment == expected

    def test_difference_and_percentage(self):
        assessment = assess_price(900_000.0, 1_000_000.0)
        assert assessment.difference == pytest.approx(-100_000.0)
        assert assessment.percentage == pytest.approx(-10.0)

    def test_no_asking_price(self):
        assessment = assess_price(500_000.0, 0.0)
        assert assessment.percentage == 0.0
        assert assessment.assessment == "Fair price - close to calculated value"
