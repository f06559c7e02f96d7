# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Industry benchmarks: the static reference catalog and the comparison of a
business against it.
"""

from .catalog import (
    DEFAULT_BENCHMARKS,
    DEFAULT_CATALOG,
    DEFAULT_INDUSTRY,
    BenchmarkCatalog,
    IndustryBenchmark,
    lookup_benchmark,
)
from .comparator import BenchmarkAnalysis, BenchmarkComparator, compare_to_benchmark

__all__ = [
    "BenchmarkAnalysis",
    "BenchmarkCatalog",
    "BenchmarkComparator",
    "DEFAULT_BENCHMARKS",
    "DEFAULT_CATALOG",
    "DEFAULT_INDUSTRY",
    "IndustryBenchmark",
    "compare_to_benchmark",
    "lookup_benchmark",
]
