"""Instance model, file loading and random generation."""

from knapsack_heuristics.data.generator import KnapsackGenerator, generate_knapsack_instance
from knapsack_heuristics.data.instance import Item, KnapsackInstance
from knapsack_heuristics.data.loader import (
    format_instance,
    load_instance,
    parse_instance,
    save_instance,
)

__all__ = [
    # Classes
    "Item",
    "KnapsackInstance",
    "KnapsackGenerator",
    # Functions
    "generate_knapsack_instance",
    "load_instance",
    "parse_instance",
    "format_instance",
    "save_instance",
]
