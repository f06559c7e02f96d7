# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Benchmark Comparison - Business vs. Industry Statistics

Scores how a business's asking-price multiples, size and growth sit against
its industry benchmark.
"""

from __future__ import annotations

from typing import Optional

from pydantic import computed_field

from ..business import BusinessFacts
from ..core.primitives import Model, RiskLevelEnum
from .catalog import DEFAULT_CATALOG, BenchmarkCatalog, IndustryBenchmark


class BenchmarkAnalysis(Model):
    """
    Comparison of one business against an industry benchmark.

    Ratios are business-to-benchmark, so 1.0 means "exactly typical".

    Attributes:
        industry: Benchmark industry the business was compared against
        revenue_multiple_comparison: (asking / revenue) / benchmark revenue multiple
        profit_multiple_comparison: (asking / profit) / benchmark profit multiple
        size_comparison: Revenue / benchmark average business size
        growth_comparison: revenue / (revenue * (1 + benchmark growth))
        risk_level: Benchmark industry risk tier
    """

    industry: str
    revenue_multiple_comparison: float
    profit_multiple_comparison: float
    size_comparison: float
    growth_comparison: float
    risk_level: RiskLevelEnum

    @computed_field
    @property
    def overall_score(self) -> float:
        """
        Mean of four component scores.

        Multiple scores fall off linearly with distance from 1.0 (floored at
        0); the size score is capped at 1; the growth score is used as is.
        """
        revenue_score = max(0.0, 1 - abs(self.revenue_multiple_comparison - 1))
        profit_score = max(0.0, 1 - abs(self.profit_multiple_comparison - 1))
        size_score = min(1.0, self.size_comparison)
        growth_score = self.growth_comparison
        return (revenue_score + profit_score + size_score + growth_score) / 4

    @computed_field
    @property
    def recommendation(self) -> str:
        score = self.overall_score
        if score >= 0.8:
            return "Excellent opportunity - above industry standards"
        elif score >= 0.6:
            return "Good opportunity - meets industry standards"
        elif score >= 0.4:
            return "Fair opportunity - below industry standards"
        else:
            return "Poor opportunity - significantly below industry standards"


class BenchmarkComparator:
    """
    Compares businesses against benchmarks from a catalog.

    Example:
        ```python
        comparator = BenchmarkComparator()
        analysis = comparator.compare(facts)  # benchmark resolved from facts.industry
        print(f"{analysis.industry}: {analysis.overall_score:.2f} - {analysis.recommendation}")
        ```
    """

    def __init__(self, catalog: Optional[BenchmarkCatalog] = None):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    @staticmethod
    def growth_comparison(annual_revenue: float, typical_growth_rate: float) -> float:
        """
        revenue / (revenue * (1 + typical_growth_rate)).

        This reduces to 1 / (1 + typical_growth_rate) for any positive revenue,
        so it does not depend on the business's own growth. The formula is kept
        as is because the overall score is calibrated on it; revenue <= 0
        resolves to 0.
        """
        denominator = annual_revenue * (1 + typical_growth_rate)
        if annual_revenue <= 0 or denominator == 0:
            return 0.0
        return annual_revenue / denominator

    def compare(
        self, facts: BusinessFacts, benchmark: Optional[IndustryBenchmark] = None
    ) -> BenchmarkAnalysis:
        """
        Score ``facts`` against ``benchmark``.

        Args:
            facts: Business to compare
            benchmark: Benchmark to compare against; resolved from
                ``facts.industry`` through the catalog when omitted

        Returns:
            BenchmarkAnalysis with comparison ratios and overall score
        """
        if benchmark is None:
            benchmark = self.catalog.lookup(facts.industry)

        revenue_multiple_comparison = 0.0
        if facts.annual_revenue > 0 and benchmark.revenue_multiple > 0:
            revenue_multiple_comparison = (
                facts.asking_price / facts.annual_revenue
            ) / benchmark.revenue_multiple

        profit_multiple_comparison = 0.0
        if facts.annual_profit > 0 and benchmark.profit_multiple > 0:
            profit_multiple_comparison = (
                facts.asking_price / facts.annual_profit
            ) / benchmark.profit_multiple

        size_comparison = 0.0
        if benchmark.average_business_size > 0:
            size_comparison = facts.annual_revenue / benchmark.average_business_size

        return BenchmarkAnalysis(
            industry=benchmark.industry,
            revenue_multiple_comparison=revenue_multiple_comparison,
            profit_multiple_comparison=profit_multiple_comparison,
            size_comparison=size_comparison,
            growth_comparison=self.growth_comparison(
                facts.annual_revenue, benchmark.typical_growth_rate
            ),
            risk_level=benchmark.risk_level,
        )


def compare_to_benchmark(
    facts: BusinessFacts,
    benchmark: Optional[IndustryBenchmark] = None,
    catalog: Optional[BenchmarkCatalog] = None,
) -> BenchmarkAnalysis:
    """Compare ``facts`` to ``benchmark`` (resolved from its industry if omitted)."""
    return BenchmarkComparator(catalog).compare(facts, benchmark)
