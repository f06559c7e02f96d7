# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting: pandas views of return and scenario analyses.
"""

from .base import BaseReport
from .tables import (
    CashFlowReport,
    ScenarioReport,
    SensitivityReport,
    cash_flow_table,
    scenario_table,
    sensitivity_table,
)

__all__ = [
    "BaseReport",
    "CashFlowReport",
    "ScenarioReport",
    "SensitivityReport",
    "cash_flow_table",
    "scenario_table",
    "sensitivity_table",
]
