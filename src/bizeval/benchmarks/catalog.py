# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Industry Benchmark Catalog - Static Reference Data

Read-only table of industry statistics (typical sale multiples, business
size, growth and risk) with a lookup that always resolves to a usable entry.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import Field

from ..core.primitives import Model, PositiveFloat, RiskLevelEnum

logger = logging.getLogger(__name__)

DEFAULT_INDUSTRY = "Services"
DEFAULT_DATA_SOURCE = "Industry Reports 2024"


class IndustryBenchmark(Model):
    """
    Typical valuation statistics for one industry.

    Attributes:
        industry: Industry name (catalog key)
        revenue_multiple: Typical sale price / annual revenue
        profit_multiple: Typical sale price / annual profit
        ebitda_multiple: Typical sale price / EBITDA
        sde_multiple: Typical sale price / seller's discretionary earnings
        average_business_size: Typical annual revenue of businesses sold
        typical_growth_rate: Typical annual revenue growth (decimal)
        risk_level: Overall industry risk tier
        data_source: Where the statistics come from
    """

    industry: str = Field(..., min_length=1)
    revenue_multiple: PositiveFloat
    profit_multiple: PositiveFloat
    ebitda_multiple: PositiveFloat
    sde_multiple: PositiveFloat
    average_business_size: PositiveFloat
    typical_growth_rate: float
    risk_level: RiskLevelEnum
    data_source: Optional[str] = DEFAULT_DATA_SOURCE


def _benchmark(
    industry: str,
    revenue: float,
    profit: float,
    ebitda: float,
    sde: float,
    size: float,
    growth: float,
    risk: RiskLevelEnum,
) -> IndustryBenchmark:
    return IndustryBenchmark(
        industry=industry,
        revenue_multiple=revenue,
        profit_multiple=profit,
        ebitda_multiple=ebitda,
        sde_multiple=sde,
        average_business_size=size,
        typical_growth_rate=growth,
        risk_level=risk,
    )


# Catalog order matters: substring lookups resolve to the first match.
DEFAULT_BENCHMARKS: Tuple[IndustryBenchmark, ...] = (
    _benchmark("Technology", 4.5, 15.0, 12.0, 6.0, 2_500_000.0, 0.25, RiskLevelEnum.HIGH),
    _benchmark("Manufacturing", 1.2, 8.5, 7.0, 4.0, 5_000_000.0, 0.08, RiskLevelEnum.MEDIUM),
    _benchmark("Retail", 0.8, 12.0, 6.5, 3.5, 1_200_000.0, 0.05, RiskLevelEnum.MEDIUM),
    _benchmark("Services", 2.8, 10.0, 8.5, 4.5, 800_000.0, 0.15, RiskLevelEnum.LOW),
    _benchmark("Healthcare", 3.2, 18.0, 14.0, 7.0, 3_500_000.0, 0.12, RiskLevelEnum.LOW),
    _benchmark("Construction", 0.9, 7.5, 6.0, 3.8, 3_000_000.0, 0.06, RiskLevelEnum.HIGH),
    _benchmark("Food & Beverage", 1.5, 9.0, 7.5, 4.2, 900_000.0, 0.08, RiskLevelEnum.MEDIUM),
    _benchmark("Real Estate", 6.0, 12.5, 10.0, 5.5, 4_500_000.0, 0.10, RiskLevelEnum.LOW),
    _benchmark("Financial Services", 5.5, 20.0, 16.0, 8.0, 8_000_000.0, 0.18, RiskLevelEnum.VERY_HIGH),
    _benchmark("Transportation", 1.1, 8.0, 6.5, 3.9, 2_200_000.0, 0.07, RiskLevelEnum.HIGH),
)


class BenchmarkCatalog:
    """
    Immutable, ordered collection of industry benchmarks.

    Lookup resolves an arbitrary industry label in three tiers:

    1. Exact case-insensitive match on the industry name
    2. Case-insensitive substring match in either direction
       (first entry in catalog order wins)
    3. The default entry ("Services")

    Example:
        ```python
        catalog = BenchmarkCatalog()
        catalog.lookup("tech").industry          # "Technology"
        catalog.lookup("Pet Grooming").industry  # "Services"
        ```
    """

    def __init__(
        self,
        benchmarks: Iterable[IndustryBenchmark] = DEFAULT_BENCHMARKS,
        default_industry: str = DEFAULT_INDUSTRY,
    ):
        entries = tuple(benchmarks)
        if not entries:
            raise ValueError("BenchmarkCatalog requires at least one benchmark")

        by_name = {}
        for entry in entries:
            key = entry.industry.lower()
            if key in by_name:
                raise ValueError(f"Duplicate benchmark industry '{entry.industry}'")
            by_name[key] = entry

        default = by_name.get(default_industry.lower())
        if default is None:
            raise ValueError(
                f"Default industry '{default_industry}' is not in the catalog"
            )

        self._entries = entries
        self._by_name = MappingProxyType(by_name)
        self._default = default

    def __iter__(self) -> Iterator[IndustryBenchmark]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, industry: object) -> bool:
        return isinstance(industry, str) and industry.lower() in self._by_name

    @property
    def industries(self) -> List[str]:
        """Industry names in catalog order."""
        return [entry.industry for entry in self._entries]

    @property
    def default(self) -> IndustryBenchmark:
        """Fallback entry used when no industry matches."""
        return self._default

    def get(self, industry: str) -> Optional[IndustryBenchmark]:
        """Exact (case-insensitive) lookup without fallback."""
        return self._by_name.get(industry.lower())

    def lookup(self, industry_label: str) -> IndustryBenchmark:
        """
        Resolve an industry label to a benchmark; never fails.

        Args:
            industry_label: Free-text industry as entered for a business

        Returns:
            Exact match, else first substring match, else the default entry
        """
        label = industry_label.lower()

        exact = self._by_name.get(label)
        if exact is not None:
            return exact

        # A blank label is a substring of every name, so the first entry wins
        for entry in self._entries:
            name = entry.industry.lower()
            if label in name or name in label:
                logger.debug(
                    f"Benchmark lookup '{industry_label}' resolved by partial match to '{entry.industry}'"
                )
                return entry

        logger.debug(
            f"No benchmark for '{industry_label}'; falling back to '{self._default.industry}'"
        )
        return self._default


# Process-wide reference catalog, built once at import and never mutated
DEFAULT_CATALOG = BenchmarkCatalog()


def lookup_benchmark(industry_label: str, catalog: Optional[BenchmarkCatalog] = None) -> IndustryBenchmark:
    """Resolve ``industry_label`` against ``catalog`` (the default catalog if omitted)."""
    if catalog is None:
        catalog = DEFAULT_CATALOG
    return catalog.lookup(industry_label)
