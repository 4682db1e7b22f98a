"""Greedy and randomized selection strategies.

Importing this package registers all nine strategies with
``StrategyRegistry`` in their canonical order.
"""

from knapsack_heuristics.strategies.greedy import (
    fractional_by_ratio,
    fractional_by_value,
    fractional_by_weight,
    zero_one_by_ratio,
    zero_one_by_value,
    zero_one_by_weight,
)
from knapsack_heuristics.strategies.kernel import (
    Packing,
    PackingMode,
    keep_better,
    pack_fractional,
    pack_zero_one,
)
from knapsack_heuristics.strategies.randomized import (
    DEFAULT_TRIALS,
    best_of_trials,
    monte_carlo_all,
    monte_carlo_top,
    random_sampling,
)
from knapsack_heuristics.strategies.registry import StrategyRegistry, StrategySpec
from knapsack_heuristics.strategies.result import Result, optimality_ratio
from knapsack_heuristics.strategies.timing import timed

__all__ = [
    # Strategies
    "fractional_by_ratio",
    "fractional_by_value",
    "fractional_by_weight",
    "zero_one_by_ratio",
    "zero_one_by_value",
    "zero_one_by_weight",
    "random_sampling",
    "monte_carlo_all",
    "monte_carlo_top",
    # Building blocks
    "Packing",
    "PackingMode",
    "pack_fractional",
    "pack_zero_one",
    "keep_better",
    "best_of_trials",
    "timed",
    "DEFAULT_TRIALS",
    # Registry and results
    "StrategyRegistry",
    "StrategySpec",
    "Result",
    "optimality_ratio",
]
