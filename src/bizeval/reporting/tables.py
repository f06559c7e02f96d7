# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of return and scenario analyses.
"""

from __future__ import annotations

import pandas as pd

from ..returns import ReturnAnalysis
from ..valuation import ScenarioSet
from .base import BaseReport


class CashFlowReport(BaseReport):
    """
    Year-by-year cash flow schedule of a return analysis.

    Columns: Revenue, Profit, Cash Flow, Adjusted Cash Flow and Cumulative
    Cash Flow, indexed by year. Cumulative figures are pre-exit.
    """

    result_types = (ReturnAnalysis,)

    def generate(self, include_totals: bool = False) -> pd.DataFrame:
        """
        Args:
            include_totals: Append a "Total" row summing the flow columns

        Returns:
            DataFrame indexed by year
        """
        analysis: ReturnAnalysis = self._result
        table = analysis.cash_flow_table()

        if analysis.schedule is not None:
            schedule_frame = analysis.schedule.to_frame()
            table.insert(0, "Revenue", schedule_frame["Revenue"].to_numpy())
            table.insert(1, "Profit", schedule_frame["Profit"].to_numpy())

        if include_totals:
            totals = table.drop(columns=["Cumulative Cash Flow"]).sum()
            totals["Cumulative Cash Flow"] = table["Cumulative Cash Flow"].iloc[-1]
            table = pd.concat([table, totals.to_frame(name="Total").T])
            table.index.name = "Year"

        return table


class SensitivityReport(BaseReport):
    """
    One row per sensitivity case.

    Columns: Assumption (the perturbed field), Multiplier, ROI and Change vs
    Base (ROI minus the unperturbed total ROI). Fields and multipliers are
    the ones the analysis was run with.
    """

    result_types = (ReturnAnalysis,)

    def generate(self) -> pd.DataFrame:
        analysis: ReturnAnalysis = self._result
        cases = analysis.sensitivity_settings.cases
        rows = []
        for case, roi in analysis.sensitivity.items():
            field, multiplier = cases[case]
            rows.append(
                {
                    "Case": case.value,
                    "Assumption": field,
                    "Multiplier": multiplier,
                    "ROI": roi,
                    "Change vs Base": roi - analysis.total_roi,
                }
            )
        return pd.DataFrame(rows).set_index("Case")


class ScenarioReport(BaseReport):
    """One row per valued scenario, in set order."""

    result_types = (ScenarioSet,)

    def generate(self) -> pd.DataFrame:
        scenario_set: ScenarioSet = self._result
        columns = [
            "Scenario",
            "Adjusted Revenue",
            "Adjusted Profit",
            "Growth Rate",
            "Risk Adjustment",
            "Market Conditions",
            "Market Multiplier",
            "Value",
            "Confidence",
        ]
        rows = [
            {
                "Scenario": scenario.scenario_type.value,
                "Adjusted Revenue": scenario.adjusted_revenue,
                "Adjusted Profit": scenario.adjusted_profit,
                "Growth Rate": scenario.growth_rate,
                "Risk Adjustment": scenario.risk_adjustment,
                "Market Conditions": scenario.market_conditions.value,
                "Market Multiplier": scenario.market_conditions.multiplier,
                "Value": scenario.calculated_value,
                "Confidence": scenario.confidence_level.value,
            }
            for scenario in scenario_set
        ]
        return pd.DataFrame(rows, columns=columns)


def cash_flow_table(analysis: ReturnAnalysis, include_totals: bool = False) -> pd.DataFrame:
    return CashFlowReport(analysis).generate(include_totals=include_totals)


def sensitivity_table(analysis: ReturnAnalysis) -> pd.DataFrame:
    return SensitivityReport(analysis).generate()


def scenario_table(scenario_set: ScenarioSet) -> pd.DataFrame:
    return ScenarioReport(scenario_set).generate()
