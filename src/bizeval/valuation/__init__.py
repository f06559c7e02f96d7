# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Business valuation: scenario analysis and single-methodology valuations.
"""

from .multiples import (
    DEFAULT_MULTIPLES,
    PriceAssessment,
    ValuationCalculator,
    assess_price,
    calculate_valuation,
)
from .scenarios import (
    DEFAULT_TEMPLATES,
    ScenarioAnalysis,
    ScenarioSet,
    ScenarioTemplate,
    ScenarioValuator,
    ValuationScenario,
    analyze_scenarios,
    generate_scenarios,
)

__all__ = [
    "DEFAULT_MULTIPLES",
    "DEFAULT_TEMPLATES",
    "PriceAssessment",
    "ScenarioAnalysis",
    "ScenarioSet",
    "ScenarioTemplate",
    "ScenarioValuator",
    "ValuationCalculator",
    "ValuationScenario",
    "analyze_scenarios",
    "assess_price",
    "calculate_valuation",
    "generate_scenarios",
]
