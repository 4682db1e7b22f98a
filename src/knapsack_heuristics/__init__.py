"""
Knapsack Heuristics
===================

Greedy and randomized strategies for the fractional and 0-1 knapsack
problems, with a harness that runs them over a shared instance and compares
value, weight and execution time.

Main modules:
- data: Instance model, file loading and random generation
- strategies: Packing kernel, nine selection strategies, registry, timing
- eval: Comparator, reporting and batch benchmarks
- config: YAML configuration schemas
"""

__version__ = "1.0.0"

# Public API exports
from knapsack_heuristics import config, data, eval, strategies
from knapsack_heuristics.data import Item, KnapsackInstance, load_instance
from knapsack_heuristics.eval import Comparison, compare, run_strategy
from knapsack_heuristics.strategies import Result, StrategyRegistry
from knapsack_heuristics.types import ConfigDict, FloatArray, IntArray, MetricsDict, Selection

__all__ = [
    "data",
    "strategies",
    "eval",
    "config",
    "__version__",
    # Core API
    "Item",
    "KnapsackInstance",
    "load_instance",
    "Result",
    "StrategyRegistry",
    "Comparison",
    "compare",
    "run_strategy",
    # Types
    "FloatArray",
    "IntArray",
    "Selection",
    "ConfigDict",
    "MetricsDict",
]
