# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario Valuation - Optimistic / Realistic / Pessimistic

Values a business under alternative revenue, profit, growth, risk and
market assumptions, and aggregates a scenario set into a value range,
risk premium, weighted recommended value and a buy/avoid signal.

Every scenario is produced by the same single-scenario evaluator
(:meth:`ScenarioValuator.value_scenario`); the default set is just three
fixed parameterizations of it.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Iterable, Iterator, Optional, Tuple
from uuid import UUID, uuid4

from pydantic import Field, computed_field

from ..business import BusinessFacts
from ..core.primitives import (
    ConfidenceLevelEnum,
    MarketConditionsEnum,
    Model,
    PositiveFloat,
    RiskLevelEnum,
    ScenarioTypeEnum,
)

logger = logging.getLogger(__name__)

SCENARIO_CONFIDENCE: Dict[ScenarioTypeEnum, ConfidenceLevelEnum] = {
    ScenarioTypeEnum.OPTIMISTIC: ConfidenceLevelEnum.MEDIUM,
    ScenarioTypeEnum.REALISTIC: ConfidenceLevelEnum.HIGH,
    ScenarioTypeEnum.PESSIMISTIC: ConfidenceLevelEnum.MEDIUM,
    ScenarioTypeEnum.CUSTOM: ConfidenceLevelEnum.LOW,
}


class ScenarioTemplate(Model):
    """
    Fixed parameterization of a scenario relative to a business's actuals.

    Attributes:
        scenario_type: Scenario kind
        revenue_factor: Adjusted revenue = actual revenue * factor
        profit_factor: Adjusted profit = actual profit * factor
        growth_rate: Growth applied to the base valuation
        risk_adjustment: Haircut applied to the base valuation
        market_conditions: Market backdrop
        assumptions: Plain-language summary of the scenario
    """

    scenario_type: ScenarioTypeEnum
    revenue_factor: PositiveFloat = 1.0
    profit_factor: PositiveFloat = 1.0
    growth_rate: float = 0.0
    risk_adjustment: float = 0.0
    market_conditions: MarketConditionsEnum = MarketConditionsEnum.AVERAGE
    assumptions: Optional[str] = None


DEFAULT_TEMPLATES: Tuple[ScenarioTemplate, ...] = (
    ScenarioTemplate(
        scenario_type=ScenarioTypeEnum.OPTIMISTIC,
        revenue_factor=1.2,
        profit_factor=1.3,
        growth_rate=0.15,
        risk_adjustment=0.05,
        market_conditions=MarketConditionsEnum.GOOD,
        assumptions="Revenue growth of 20%, profit margin improvement, favorable market conditions",
    ),
    ScenarioTemplate(
        scenario_type=ScenarioTypeEnum.REALISTIC,
        growth_rate=0.08,
        risk_adjustment=0.10,
        market_conditions=MarketConditionsEnum.AVERAGE,
        assumptions="Current revenue and profit levels maintained, moderate growth, normal market conditions",
    ),
    ScenarioTemplate(
        scenario_type=ScenarioTypeEnum.PESSIMISTIC,
        revenue_factor=0.85,
        profit_factor=0.8,
        growth_rate=-0.05,
        risk_adjustment=0.20,
        market_conditions=MarketConditionsEnum.POOR,
        assumptions="Revenue decline of 15%, profit margin pressure, challenging market conditions",
    ),
)


class ValuationScenario(Model):
    """
    One valued scenario for a business.

    Attributes:
        scenario_type: Scenario kind
        base_valuation: Valuation the scenario adjusts
        adjusted_revenue: Revenue assumed by the scenario
        adjusted_profit: Profit assumed by the scenario
        growth_rate: Growth applied to the value
        risk_adjustment: Haircut applied to the value
        market_conditions: Market backdrop
        calculated_value: Resulting scenario value
        confidence_level: Fixed per scenario type
    """

    uid: UUID = Field(default_factory=uuid4)
    business_id: Optional[UUID] = None
    created_at: datetime = Field(default_factory=datetime.now)

    scenario_type: ScenarioTypeEnum
    base_valuation: float
    adjusted_revenue: float
    adjusted_profit: float
    growth_rate: float
    risk_adjustment: float
    market_conditions: MarketConditionsEnum
    calculated_value: float
    confidence_level: ConfidenceLevelEnum

    assumptions: Optional[str] = None
    notes: Optional[str] = None


class ScenarioSet(Model):
    """Ordered collection of scenarios valued for one business."""

    scenarios: Tuple[ValuationScenario, ...] = ()

    def __iter__(self) -> Iterator[ValuationScenario]:
        return iter(self.scenarios)

    def __len__(self) -> int:
        return len(self.scenarios)

    def first(self, scenario_type: ScenarioTypeEnum) -> Optional[ValuationScenario]:
        """First scenario of the given type, if any."""
        return next((s for s in self.scenarios if s.scenario_type == scenario_type), None)

    def value_of(self, scenario_type: ScenarioTypeEnum) -> float:
        """Calculated value of the first scenario of a type (0 when absent)."""
        scenario = self.first(scenario_type)
        return scenario.calculated_value if scenario is not None else 0.0

    def with_scenario(self, scenario: ValuationScenario) -> "ScenarioSet":
        """Copy of the set with ``scenario`` appended."""
        return ScenarioSet(scenarios=self.scenarios + (scenario,))


class ScenarioValuator:
    """
    Values scenarios against a business's actual revenue and profit.

    Example:
        ```python
        valuator = ScenarioValuator()
        scenario_set = valuator.generate(facts, base_valuation=1_000_000)
        analysis = ScenarioAnalysis.from_scenarios(scenario_set)
        ```
    """

    def __init__(self, templates: Iterable[ScenarioTemplate] = DEFAULT_TEMPLATES):
        self.templates = tuple(templates)

    @staticmethod
    def calculate_value(
        base_valuation: float,
        adjusted_revenue: float,
        adjusted_profit: float,
        actual_revenue: float,
        actual_profit: float,
        growth_rate: float,
        risk_adjustment: float,
        market_conditions: MarketConditionsEnum,
    ) -> float:
        """
        Scenario value.

        ``base * (adj_rev / rev0) * (adj_profit / profit0) * (1 + growth)
        * (1 - risk) * market multiplier``, where rev0 and profit0 are the
        actual figures, each replaced by 1 when not positive.
        """
        revenue_base = actual_revenue if actual_revenue > 0 else 1.0
        profit_base = actual_profit if actual_profit > 0 else 1.0

        value = base_valuation
        value *= adjusted_revenue / revenue_base
        value *= adjusted_profit / profit_base
        value *= 1 + growth_rate
        value *= 1 - risk_adjustment
        value *= market_conditions.multiplier
        return value

    def value_scenario(
        self,
        facts: BusinessFacts,
        scenario_type: ScenarioTypeEnum,
        base_valuation: float,
        adjusted_revenue: float,
        adjusted_profit: float,
        growth_rate: float,
        risk_adjustment: float,
        market_conditions: MarketConditionsEnum,
        assumptions: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> ValuationScenario:
        """Value a single scenario for ``facts``."""
        value = self.calculate_value(
            base_valuation,
            adjusted_revenue,
            adjusted_profit,
            facts.annual_revenue,
            facts.annual_profit,
            growth_rate,
            risk_adjustment,
            market_conditions,
        )
        return ValuationScenario(
            business_id=facts.uid,
            scenario_type=scenario_type,
            base_valuation=base_valuation,
            adjusted_revenue=adjusted_revenue,
            adjusted_profit=adjusted_profit,
            growth_rate=growth_rate,
            risk_adjustment=risk_adjustment,
            market_conditions=market_conditions,
            calculated_value=value,
            confidence_level=SCENARIO_CONFIDENCE[scenario_type],
            assumptions=assumptions,
            notes=notes,
        )

    def from_template(
        self, facts: BusinessFacts, base_valuation: float, template: ScenarioTemplate
    ) -> ValuationScenario:
        return self.value_scenario(
            facts,
            template.scenario_type,
            base_valuation,
            adjusted_revenue=facts.annual_revenue * template.revenue_factor,
            adjusted_profit=facts.annual_profit * template.profit_factor,
            growth_rate=template.growth_rate,
            risk_adjustment=template.risk_adjustment,
            market_conditions=template.market_conditions,
            assumptions=template.assumptions,
        )

    def generate(self, facts: BusinessFacts, base_valuation: float) -> ScenarioSet:
        """
        Value the standard scenario set.

        Returns:
            ScenarioSet with Optimistic, Realistic and Pessimistic scenarios
            in that order
        """
        scenarios = tuple(
            self.from_template(facts, base_valuation, template) for template in self.templates
        )
        logger.debug(
            f"Generated {len(scenarios)} scenarios for '{facts.name}' from base {base_valuation:,.0f}"
        )
        return ScenarioSet(scenarios=scenarios)

    def custom(
        self,
        facts: BusinessFacts,
        base_valuation: float,
        adjusted_revenue: float,
        adjusted_profit: float,
        growth_rate: float = 0.0,
        risk_adjustment: float = 0.0,
        market_conditions: MarketConditionsEnum = MarketConditionsEnum.AVERAGE,
        assumptions: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> ValuationScenario:
        """Value a caller-defined scenario (confidence is always Low)."""
        return self.value_scenario(
            facts,
            ScenarioTypeEnum.CUSTOM,
            base_valuation,
            adjusted_revenue=adjusted_revenue,
            adjusted_profit=adjusted_profit,
            growth_rate=growth_rate,
            risk_adjustment=risk_adjustment,
            market_conditions=market_conditions,
            assumptions=assumptions,
            notes=notes,
        )


class ScenarioAnalysis(Model):
    """
    Aggregate view of a scenario set.

    Only the first Optimistic, Realistic and Pessimistic scenarios count;
    a missing type contributes 0.

    Attributes:
        optimistic_value: Optimistic scenario value
        realistic_value: Realistic scenario value
        pessimistic_value: Pessimistic scenario value
        value_range: optimistic - pessimistic
        risk_premium: (optimistic - realistic) / realistic, 0 without a realistic value
        recommended_value: (optimistic + 2 * realistic + pessimistic) / 4
    """

    optimistic_value: float = 0.0
    realistic_value: float = 0.0
    pessimistic_value: float = 0.0
    value_range: float = 0.0
    risk_premium: float = 0.0
    recommended_value: float = 0.0

    @classmethod
    def from_scenarios(cls, scenario_set: ScenarioSet) -> "ScenarioAnalysis":
        if not len(scenario_set):
            return cls()

        optimistic = scenario_set.value_of(ScenarioTypeEnum.OPTIMISTIC)
        realistic = scenario_set.value_of(ScenarioTypeEnum.REALISTIC)
        pessimistic = scenario_set.value_of(ScenarioTypeEnum.PESSIMISTIC)

        risk_premium = (optimistic - realistic) / realistic if realistic != 0 else 0.0

        return cls(
            optimistic_value=optimistic,
            realistic_value=realistic,
            pessimistic_value=pessimistic,
            value_range=optimistic - pessimistic,
            risk_premium=risk_premium,
            recommended_value=(optimistic + realistic * 2 + pessimistic) / 4,
        )

    @computed_field
    @property
    def risk_level(self) -> RiskLevelEnum:
        """Risk from value_range / realistic: [0, 0.3) Low, [0.3, 0.6) Medium, else High."""
        if self.realistic_value == 0:
            return RiskLevelEnum.HIGH
        ratio = self.value_range / self.realistic_value
        if 0 <= ratio < 0.3:
            return RiskLevelEnum.LOW
        elif 0.3 <= ratio < 0.6:
            return RiskLevelEnum.MEDIUM
        return RiskLevelEnum.HIGH

    @computed_field
    @property
    def investment_recommendation(self) -> str:
        if self.realistic_value == 0:
            return "Avoid - Limited upside with significant risk"

        upside = (self.optimistic_value - self.realistic_value) / self.realistic_value
        downside = (self.realistic_value - self.pessimistic_value) / self.realistic_value

        if upside > 0.3 and downside < 0.2:
            return "Strong Buy - High upside with limited downside"
        elif upside > 0.2 and downside < 0.3:
            return "Buy - Good risk-reward balance"
        elif upside > 0.1:
            return "Consider - Moderate opportunity with some risk"
        return "Avoid - Limited upside with significant risk"


def generate_scenarios(facts: BusinessFacts, base_valuation: float) -> ScenarioSet:
    """Standard three-scenario set for ``facts`` around ``base_valuation``."""
    return ScenarioValuator().generate(facts, base_valuation)


def analyze_scenarios(scenario_set: ScenarioSet) -> ScenarioAnalysis:
    """Aggregate a scenario set (all zeros when empty)."""
    return ScenarioAnalysis.from_scenarios(scenario_set)
