# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
bizeval Public API

Flat entry points over the engine components. Every function is pure: the
same inputs always produce the same outputs and nothing is stored.

Example:
    ```python
    from bizeval import api
    from bizeval.business import BusinessFacts

    facts = BusinessFacts(
        name="Summit Cleaning",
        industry="Services",
        asking_price=600_000,
        annual_revenue=900_000,
        annual_profit=180_000,
        years_established=12,
    )

    financing = api.compute_financing(facts)
    returns = api.project_returns(facts)
    scenarios = api.generate_scenarios(facts, base_valuation=facts.asking_price)
    analysis = api.analyze_scenarios(scenarios)
    benchmark = api.compare_to_benchmark(facts)
    offer = api.recommend_offer(facts)
    ```
"""

from .benchmarks import compare_to_benchmark, lookup_benchmark
from .debt import compute_financing
from .offer import recommend_offer
from .returns import project_returns
from .valuation import analyze_scenarios, calculate_valuation, generate_scenarios

__all__ = [
    "analyze_scenarios",
    "calculate_valuation",
    "compare_to_benchmark",
    "compute_financing",
    "generate_scenarios",
    "lookup_benchmark",
    "project_returns",
    "recommend_offer",
]
