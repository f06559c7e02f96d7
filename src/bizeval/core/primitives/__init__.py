# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
bizeval Core Primitives

Essential building blocks shared by every engine component: the immutable
model base, constrained numeric types, enumerations and settings.
"""

from .enums import (
    ConfidenceLevelEnum,
    MarketConditionsEnum,
    RiskLevelEnum,
    RiskSeverityEnum,
    ScenarioTypeEnum,
    SensitivityCaseEnum,
    ValuationMethodologyEnum,
)
from .model import Model
from .settings import (
    GlobalSettings,
    OfferSettings,
    ReturnSettings,
    SensitivitySettings,
)
from .types import (
    FloatBetween0And1,
    PercentFloat,
    PositiveFloat,
    PositiveInt,
    PositiveIntGe1,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "OfferSettings",
    "ReturnSettings",
    "SensitivitySettings",
    # Enums
    "ConfidenceLevelEnum",
    "MarketConditionsEnum",
    "RiskLevelEnum",
    "RiskSeverityEnum",
    "ScenarioTypeEnum",
    "SensitivityCaseEnum",
    "ValuationMethodologyEnum",
    # Types
    "FloatBetween0And1",
    "PercentFloat",
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGe1",
]
