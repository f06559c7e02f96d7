# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from bizeval.core.primitives import (
    GlobalSettings,
    MarketConditionsEnum,
    OfferSettings,
    ReturnSettings,
    SensitivityCaseEnum,
    SensitivitySettings,
)


class TestGlobalSettings:
    def test_defaults(self):
        settings = GlobalSettings()
        assert settings.returns.discount_rate == 0.10
        assert settings.returns.irr_initial_guess == 0.10
        assert settings.returns.irr_tolerance == 1e-4
        assert settings.returns.irr_max_iterations == 100
        assert settings.offer.min_discount == 0.05
        assert settings.offer.max_discount == 0.30

    def test_section_override(self):
        settings = GlobalSettings(returns=ReturnSettings(discount_rate=0.12))
        assert settings.returns.discount_rate == 0.12
        assert settings.offer == OfferSettings()

    def test_frozen(self):
        settings = GlobalSettings()
        with pytest.raises(ValidationError):
            settings.returns = ReturnSettings(discount_rate=0.2)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ReturnSettings(discount=0.2)


class TestOfferSettings:
    def test_discount_bounds_must_be_ordered(self):
        with pytest.raises(ValidationError, match="cannot exceed max_discount"):
            OfferSettings(min_discount=0.4, max_discount=0.3)

    def test_band_must_bracket_recommended_offer(self):
        with pytest.raises(ValidationError):
            OfferSettings(minimum_offer_factor=1.1)

    def test_opening_factor_cannot_exceed_one(self):
        with pytest.raises(ValidationError):
            OfferSettings(opening_offer_factor=1.05)


class TestSensitivitySettings:
    def test_cases_in_sweep_order(self):
        cases = SensitivitySettings().cases
        assert list(cases) == [
            SensitivityCaseEnum.LOW_GROWTH,
            SensitivityCaseEnum.HIGH_GROWTH,
            SensitivityCaseEnum.LOW_MARGIN,
            SensitivityCaseEnum.HIGH_MARGIN,
            SensitivityCaseEnum.LOW_EXIT,
            SensitivityCaseEnum.HIGH_EXIT,
        ]
        assert cases[SensitivityCaseEnum.LOW_GROWTH] == ("revenue_growth_rate", 0.5)
        assert cases[SensitivityCaseEnum.HIGH_MARGIN] == ("profit_margin", 1.2)
        assert cases[SensitivityCaseEnum.LOW_EXIT] == ("exit_multiple", 0.8)


@pytest.mark.parametrize(
    "condition,multiplier",
    [
        (MarketConditionsEnum.EXCELLENT, 1.30),
        (MarketConditionsEnum.GOOD, 1.15),
        (MarketConditionsEnum.AVERAGE, 1.00),
        (MarketConditionsEnum.POOR, 0.85),
        (MarketConditionsEnum.RECESSION, 0.70),
    ],
)
def test_market_condition_multipliers(condition, multiplier):
    assert condition.multiplier == multiplier
    assert condition.description
