# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
bizeval - Small Business Acquisition Modeling

Quantitative building blocks for evaluating a small business purchase, from
the financing payment on the asking price to a full negotiation package.

Key Entry Points:
- bizeval.api.compute_financing() - Amortized loan payment on the asking price
- bizeval.api.project_returns() - Leveraged return projection (ROI/IRR/NPV)
- bizeval.api.generate_scenarios() - Optimistic/realistic/pessimistic values
- bizeval.api.compare_to_benchmark() - Industry benchmark scoring
- bizeval.api.recommend_offer() - Offer band, risks and negotiation narrative

Example Usage:
    ```python
    from bizeval.api import project_returns, recommend_offer
    from bizeval.business import BusinessFacts

    facts = BusinessFacts(
        name="Harbor Coffee",
        industry="Food & Beverage",
        asking_price=850_000,
        annual_revenue=1_200_000,
        annual_profit=210_000,
    )

    returns = project_returns(facts)
    print(f"IRR: {returns.irr:.2%}")

    offer = recommend_offer(facts)
    print(f"Recommended offer: ${offer.recommended_offer:,.0f}")
    ```
"""

import importlib
import logging

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "api",
    "benchmarks",
    "business",
    "core",
    "debt",
    "offer",
    "reporting",
    "returns",
    "valuation",
]


_LAZY_MODULES = {
    "api": "bizeval.api",
    "benchmarks": "bizeval.benchmarks",
    "business": "bizeval.business",
    "core": "bizeval.core",
    "debt": "bizeval.debt",
    "offer": "bizeval.offer",
    "reporting": "bizeval.reporting",
    "returns": "bizeval.returns",
    "valuation": "bizeval.valuation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'bizeval' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
