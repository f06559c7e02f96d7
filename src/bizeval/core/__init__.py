# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
bizeval Core

Primitives and pure financial math shared across the engine.
"""

from .calculations import FinancialCalculations
from .primitives import (
    ConfidenceLevelEnum,
    GlobalSettings,
    MarketConditionsEnum,
    Model,
    OfferSettings,
    ReturnSettings,
    RiskLevelEnum,
    RiskSeverityEnum,
    ScenarioTypeEnum,
    SensitivityCaseEnum,
    SensitivitySettings,
    ValuationMethodologyEnum,
)

__all__ = [
    "FinancialCalculations",
    "ConfidenceLevelEnum",
    "GlobalSettings",
    "MarketConditionsEnum",
    "Model",
    "OfferSettings",
    "ReturnSettings",
    "RiskLevelEnum",
    "RiskSeverityEnum",
    "ScenarioTypeEnum",
    "SensitivityCaseEnum",
    "SensitivitySettings",
    "ValuationMethodologyEnum",
]
