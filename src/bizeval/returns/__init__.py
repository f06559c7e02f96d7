# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leveraged return projection: cash flow schedules, ROI/IRR/NPV, risk
classification and sensitivity.
"""

from .analyzer import (
    RiskAssessment,
    ReturnAnalysis,
    ReturnAnalyzer,
    assess_risk,
    project_returns,
)
from .assumptions import ReturnAssumptions
from .projection import CashFlowProjector, CashFlowSchedule

__all__ = [
    "CashFlowProjector",
    "CashFlowSchedule",
    "ReturnAnalysis",
    "ReturnAnalyzer",
    "ReturnAssumptions",
    "RiskAssessment",
    "assess_risk",
    "project_returns",
]
