"""
Deterministic greedy strategies for the fractional and 0-1 knapsack.

Three orderings (ratio descending, value descending, weight ascending) times
two packing modes. Fractional ratio-greedy is optimal for the fractional
relaxation and serves as the reference value for the other strategies.
"""

from knapsack_heuristics.data.instance import Item
from knapsack_heuristics.strategies.kernel import (
    Packing,
    PackingMode,
    pack_fractional,
    pack_zero_one,
)
from knapsack_heuristics.strategies.ordering import RATIO_DESC, VALUE_DESC, WEIGHT_ASC
from knapsack_heuristics.strategies.registry import StrategyRegistry
from knapsack_heuristics.strategies.timing import timed

# ==================== FRACTIONAL KNAPSACK ====================


@StrategyRegistry.register("fractional_ratio", family="ratio", mode=PackingMode.FRACTIONAL)
@timed("Fractional - Greedy by Ratio")
def fractional_by_ratio(items: list[Item], capacity: int) -> Packing:
    """Highest value-to-weight ratio first (optimal for the fractional variant)."""
    return pack_fractional(RATIO_DESC.apply(items), capacity)


@StrategyRegistry.register("fractional_value", family="value", mode=PackingMode.FRACTIONAL)
@timed("Fractional - Greedy by Value")
def fractional_by_value(items: list[Item], capacity: int) -> Packing:
    """Highest absolute value first."""
    return pack_fractional(VALUE_DESC.apply(items), capacity)


@StrategyRegistry.register("fractional_weight", family="weight", mode=PackingMode.FRACTIONAL)
@timed("Fractional - Greedy by Lowest Weight")
def fractional_by_weight(items: list[Item], capacity: int) -> Packing:
    """Lowest weight first."""
    return pack_fractional(WEIGHT_ASC.apply(items), capacity)


# ==================== 0-1 KNAPSACK ====================


@StrategyRegistry.register("zero_one_ratio", family="ratio", mode=PackingMode.ZERO_ONE)
@timed("0-1 Knapsack - Greedy by Ratio")
def zero_one_by_ratio(items: list[Item], capacity: int) -> Packing:
    return pack_zero_one(RATIO_DESC.apply(items), capacity)


@StrategyRegistry.register("zero_one_value", family="value", mode=PackingMode.ZERO_ONE)
@timed("0-1 Knapsack - Greedy by Value")
def zero_one_by_value(items: list[Item], capacity: int) -> Packing:
    return pack_zero_one(VALUE_DESC.apply(items), capacity)


@StrategyRegistry.register("zero_one_weight", family="weight", mode=PackingMode.ZERO_ONE)
@timed("0-1 Knapsack - Greedy by Lowest Weight")
def zero_one_by_weight(items: list[Item], capacity: int) -> Packing:
    return pack_zero_one(WEIGHT_ASC.apply(items), capacity)
