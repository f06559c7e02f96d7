# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offer recommendation tests.

The reference business (Services, asking 800,000, revenue 1,000,000, profit
200,000, ten years old) is worked through by hand below.
"""

import pytest

from bizeval.core.primitives import (
    ConfidenceLevelEnum,
    GlobalSettings,
    OfferSettings,
    RiskSeverityEnum,
)
from bizeval.offer import OfferRecommender, RiskFactor, recommend_offer
from bizeval.offer import heuristics, narrative


class TestOfferBand:
    def test_no_valuations_uses_asking_price(self, sample_business):
        offer = recommend_offer(sample_business)
        assert offer.average_valuation == 800_000.0
        assert offer.valuation_range == (800_000.0, 800_000.0)
        # Raw discount 0 plus the services adjustment 0.03 clamps up to 5%
        assert offer.discount_to_asking == pytest.approx(0.05)
        assert offer.recommended_offer == pytest.approx(760_000.0)
        assert offer.minimum_offer == pytest.approx(646_000.0)
        assert offer.maximum_offer == pytest.approx(874_000.0)
        assert offer.opening_offer == pytest.approx(581_400.0)

    def test_band_ordering(self, sample_business, make_valuations):
        offer = recommend_offer(sample_business, make_valuations([600_000, 650_000, 700_000]))
        assert offer.opening_offer <= offer.minimum_offer <= offer.recommended_offer <= offer.maximum_offer

    def test_discount_between_bounds(self, make_business, make_valuations):
        facts = make_business(asking_price=1_000_000.0, industry="Plumbing")
        offer = recommend_offer(facts, make_valuations([880_000, 900_000, 920_000]))
        assert offer.average_valuation == pytest.approx(900_000.0)
        assert offer.discount_to_asking == pytest.approx(0.10)
        assert offer.recommended_offer == pytest.approx(900_000.0)
        assert offer.valuation_range == (880_000.0, 920_000.0)

    def test_discount_capped(self, make_business, make_valuations):
        facts = make_business(asking_price=1_000_000.0, industry="Technology")
        offer = recommend_offer(facts, make_valuations([600_000, 700_000, 800_000]))
        assert offer.discount_to_asking == pytest.approx(0.30)
        assert offer.recommended_offer == pytest.approx(700_000.0)

    def test_discount_floor(self, sample_business, make_valuations):
        # Valuations above asking give a negative raw discount
        offer = recommend_offer(sample_business, make_valuations([900_000, 950_000, 1_000_000]))
        assert offer.discount_to_asking == pytest.approx(0.05)

    def test_zero_asking_price(self, make_business):
        offer = recommend_offer(make_business(asking_price=0.0, industry="Plumbing"))
        assert offer.discount_to_asking == pytest.approx(0.05)
        assert offer.recommended_offer == 0.0
        assert "target offer at 0% of range" in offer.concession_strategy

    def test_custom_offer_settings(self, make_business):
        settings = GlobalSettings(offer=OfferSettings(min_discount=0.10, max_discount=0.20))
        facts = make_business(asking_price=1_000_000.0, industry="Plumbing")
        offer = OfferRecommender(settings).recommend(facts)
        assert offer.discount_to_asking == pytest.approx(0.10)


class TestConfidence:
    def test_high_with_three_valuations_and_positive_financials(
        self, make_business, make_valuations
    ):
        # Industry outside the risk table, healthy margin, no serious risks
        facts = make_business(industry="Landscaping")
        offer = recommend_offer(facts, make_valuations([900_000, 950_000, 1_000_000]))
        assert offer.serious_risk_count == 0
        assert offer.confidence_level == ConfidenceLevelEnum.HIGH

    def test_medium_without_valuations(self, sample_business):
        assert recommend_offer(sample_business).confidence_level == ConfidenceLevelEnum.MEDIUM

    def test_low_with_serious_risks(self, make_business):
        facts = make_business(industry="Technology", annual_profit=50_000.0)
        offer = recommend_offer(facts)
        assert offer.serious_risk_count == 2
        assert offer.confidence_level == ConfidenceLevelEnum.LOW

    @pytest.mark.parametrize(
        "count,serious,expected",
        [
            (0, 0, ConfidenceLevelEnum.MEDIUM),
            (3, 0, ConfidenceLevelEnum.HIGH),
            (1, 1, ConfidenceLevelEnum.MEDIUM),
            (0, 2, ConfidenceLevelEnum.LOW),
        ],
    )
    def test_score_bands(self, sample_business, count, serious, expected):
        factors = [
            RiskFactor(
                title="Fixture",
                description="Fixture risk",
                severity=RiskSeverityEnum.CRITICAL,
                mitigation="None",
            )
        ] * serious
        assert heuristics.confidence_level(sample_business, count, factors) == expected


class TestRiskFactors:
    def test_reference_business(self, sample_business):
        factors = heuristics.risk_factors(sample_business, [])
        assert [f.title for f in factors] == ["Industry Risk"]
        assert factors[0].severity == RiskSeverityEnum.MEDIUM
        assert factors[0].description == "Services industry faces Medium risk factors"

    def test_all_factors_in_order(self, make_business):
        facts = make_business(
            industry="Technology", annual_revenue=400_000.0, annual_profit=20_000.0
        )
        factors = heuristics.risk_factors(facts, [500_000.0, 700_000.0, 900_000.0])
        assert [f.title for f in factors] == [
            "Valuation Variance",
            "Low Profit Margin",
            "Industry Risk",
            "Small Business Risk",
        ]
        assert [f.severity for f in factors] == [
            RiskSeverityEnum.MEDIUM,
            RiskSeverityEnum.HIGH,
            RiskSeverityEnum.HIGH,
            RiskSeverityEnum.MEDIUM,
        ]
        assert all(f.mitigation for f in factors)

    def test_variance_needs_three_valuations(self, sample_business):
        factors = heuristics.risk_factors(sample_business, [100_000.0, 900_000.0])
        assert "Valuation Variance" not in [f.title for f in factors]

    def test_variance_skipped_for_zero_mean(self, sample_business):
        factors = heuristics.risk_factors(sample_business, [0.0, 0.0, 0.0])
        assert "Valuation Variance" not in [f.title for f in factors]

    def test_low_industry_risk_omitted(self, make_business):
        factors = heuristics.risk_factors(make_business(industry="Construction"), [])
        assert factors == []

    def test_industry_tables_match_exact_label(self):
        assert heuristics.industry_risk("Financial Services") == RiskSeverityEnum.HIGH
        assert heuristics.industry_risk("tech") == RiskSeverityEnum.LOW
        assert heuristics.market_adjustment("MANUFACTURING") == -0.02
        assert heuristics.market_adjustment("Real Estate") == 0.0
        assert heuristics.industry_outlook("Healthcare") == "positive"
        assert heuristics.industry_outlook("retail") == "moderate"
        assert heuristics.industry_outlook("Construction") == "neutral"


class TestMarketAssessment:
    def test_market_position_reference(self, sample_business):
        # 0.5 base + 0.1 for a 20% margin
        assert heuristics.market_position_score(sample_business) == pytest.approx(0.6)

    def test_market_position_capped(self, make_business):
        facts = make_business(
            annual_revenue=3_000_000.0, annual_profit=900_000.0, years_established=2
        )
        assert heuristics.market_position_score(facts) == pytest.approx(1.0)

    def test_market_position_mid_tiers(self, make_business):
        facts = make_business(annual_revenue=1_500_000.0, annual_profit=300_000.0)
        assert heuristics.market_position_score(facts) == pytest.approx(0.7)

    def test_market_factors(self, make_business):
        facts = make_business(
            industry="Healthcare", annual_revenue=2_000_000.0, annual_profit=500_000.0
        )
        factors = heuristics.market_factors(facts)
        assert [(f.description, f.is_positive) for f in factors] == [
            ("Strong revenue base provides stability", True),
            ("Healthy profit margins indicate efficiency", True),
            ("Healthcare industry has positive outlook", True),
        ]

    def test_low_margin_factor(self, make_business):
        facts = make_business(industry="Retail", annual_profit=50_000.0)
        factors = heuristics.market_factors(facts)
        assert factors[0].description == "Low profit margins may indicate operational issues"
        assert not factors[0].is_positive
        assert factors[-1].description == "Retail industry has moderate outlook"
        assert not factors[-1].is_positive

    def test_industry_comparison_below(self, sample_business):
        offer = recommend_offer(sample_business)
        # 0.8x revenue against a 2.8x services multiple
        assert offer.industry_comparison == "Below industry average by 71%"

    def test_industry_comparison_above(self, make_business):
        facts = make_business(industry="Retail", asking_price=1_600_000.0)
        # 1.6x revenue against a 0.8x retail multiple
        assert heuristics.industry_comparison(facts, OfferRecommender().catalog) == (
            "Above industry average by 100%"
        )

    def test_industry_comparison_in_line(self, make_business):
        facts = make_business(industry="Services", asking_price=2_800_000.0)
        offer = recommend_offer(facts)
        assert offer.industry_comparison == "In line with industry averages"

    def test_industry_comparison_without_revenue(self, make_business):
        offer = recommend_offer(make_business(annual_revenue=0.0, annual_profit=0.0))
        assert offer.industry_comparison == "No industry data available"


class TestNarrative:
    def test_executive_summary(self, sample_business):
        offer = recommend_offer(sample_business)
        assert offer.executive_summary.startswith(
            "Based on comprehensive valuation analysis and market assessment, we recommend "
            "an offer of $760000 for Test Business. This represents a 5.0% discount to the "
            "asking price and aligns with industry standards for Services businesses."
        )

    def test_opening_strategy(self, sample_business):
        offer = recommend_offer(sample_business)
        assert offer.opening_strategy.startswith("Begin negotiations at $581400 to establish an anchor point.")

    def test_concession_strategy(self, sample_business):
        offer = recommend_offer(sample_business)
        assert "target offer at 50% of range" in offer.concession_strategy

    def test_talking_points(self, sample_business, make_valuations):
        offer = recommend_offer(sample_business, make_valuations([900_000, 950_000, 1_000_000]))
        assert offer.key_talking_points[:3] == (
            "Our offer of $760000 reflects comprehensive valuation analysis",
            "Average independent valuation: $950000",
            "Current market conditions in Services industry",
        )
        assert len(offer.key_talking_points) == 6

    def test_next_steps(self, sample_business):
        steps = narrative.next_steps(sample_business)
        assert [s.order for s in steps] == [1, 2, 3, 4, 5, 6]
        assert steps[1].description == "Research recent comparable sales in Services industry"
        assert steps[-1].description == "Finalize purchase agreement and close transaction"

    def test_concession_position_empty_band(self):
        assert narrative.concession_position(100.0, 100.0, 100.0) == 0.0


def test_recommendation_idempotent(sample_business, make_valuations):
    records = make_valuations([700_000, 750_000, 800_000])
    assert recommend_offer(sample_business, records) == recommend_offer(sample_business, records)
