# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, Literal, Tuple

from pydantic import Field, model_validator

from .enums import SensitivityCaseEnum
from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveIntGe1

# Assumption field each sensitivity case perturbs
SensitivityField = Literal["revenue_growth_rate", "profit_margin", "exit_multiple"]


class ReturnSettings(Model):
    """Settings for return metrics (NPV discounting and IRR root finding)."""

    discount_rate: PositiveFloat = Field(
        default=0.10, description="Annual discount rate used for NPV."
    )
    irr_initial_guess: float = Field(
        default=0.10, description="Starting rate for Newton-Raphson IRR."
    )
    irr_tolerance: PositiveFloat = Field(
        default=1e-4,
        description="Convergence threshold on the change between IRR iterates.",
    )
    irr_max_iterations: PositiveIntGe1 = Field(
        default=100,
        description="Hard cap on Newton-Raphson iterations; the last iterate is returned.",
    )


class SensitivitySettings(Model):
    """
    Multipliers for the one-at-a-time return sensitivity sweep.

    Each case scales exactly one assumption while holding the others fixed.
    """

    low_growth_multiplier: PositiveFloat = 0.5
    high_growth_multiplier: PositiveFloat = 1.5
    low_margin_multiplier: PositiveFloat = 0.8
    high_margin_multiplier: PositiveFloat = 1.2
    low_exit_multiplier: PositiveFloat = 0.8
    high_exit_multiplier: PositiveFloat = 1.2

    @property
    def cases(self) -> Dict[SensitivityCaseEnum, Tuple[SensitivityField, float]]:
        """Sensitivity cases in sweep order, mapped to (field, multiplier)."""
        return {
            SensitivityCaseEnum.LOW_GROWTH: ("revenue_growth_rate", self.low_growth_multiplier),
            SensitivityCaseEnum.HIGH_GROWTH: ("revenue_growth_rate", self.high_growth_multiplier),
            SensitivityCaseEnum.LOW_MARGIN: ("profit_margin", self.low_margin_multiplier),
            SensitivityCaseEnum.HIGH_MARGIN: ("profit_margin", self.high_margin_multiplier),
            SensitivityCaseEnum.LOW_EXIT: ("exit_multiple", self.low_exit_multiplier),
            SensitivityCaseEnum.HIGH_EXIT: ("exit_multiple", self.high_exit_multiplier),
        }


class OfferSettings(Model):
    """Offer band construction around the recommended offer."""

    min_discount: FloatBetween0And1 = Field(
        default=0.05, description="Smallest discount to asking price ever recommended."
    )
    max_discount: FloatBetween0And1 = Field(
        default=0.30, description="Largest discount to asking price ever recommended."
    )
    minimum_offer_factor: PositiveFloat = Field(
        default=0.85, description="Minimum offer as a fraction of the recommended offer."
    )
    maximum_offer_factor: PositiveFloat = Field(
        default=1.15, description="Maximum offer as a fraction of the recommended offer."
    )
    opening_offer_factor: PositiveFloat = Field(
        default=0.90, description="Opening offer as a fraction of the minimum offer."
    )

    @model_validator(mode="after")
    def check_discount_bounds(self) -> "OfferSettings":
        """Ensure the discount clamp is a valid interval."""
        if self.min_discount > self.max_discount:
            raise ValueError(
                f"min_discount ({self.min_discount:.0%}) cannot exceed max_discount ({self.max_discount:.0%})"
            )
        if not (self.minimum_offer_factor <= 1.0 <= self.maximum_offer_factor):
            raise ValueError(
                "Offer band must bracket the recommended offer "
                f"(minimum_offer_factor={self.minimum_offer_factor}, "
                f"maximum_offer_factor={self.maximum_offer_factor})"
            )
        if self.opening_offer_factor > 1.0:
            raise ValueError(
                f"opening_offer_factor ({self.opening_offer_factor}) cannot exceed 1.0"
            )
        return self


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Groups every tunable constant of the engine by functional area. The
    defaults reproduce the standard model; callers override a section by
    passing e.g. ``GlobalSettings(returns=ReturnSettings(discount_rate=0.12))``.
    """

    returns: ReturnSettings = Field(default_factory=ReturnSettings)
    sensitivity: SensitivitySettings = Field(default_factory=SensitivitySettings)
    offer: OfferSettings = Field(default_factory=OfferSettings)
