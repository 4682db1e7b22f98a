"""
Item orderings used by the greedy strategies.

Orderings are external key functions applied through a single stable sort,
so ``Item`` itself carries no ordering logic. Python's ``sorted`` keeps equal
keys in input order even with ``reverse=True``.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from knapsack_heuristics.data.instance import Item
from knapsack_heuristics.types import Rng

OrderKey = Callable[[Item], float]

TOP_VALUE_FRACTION = 0.7


def by_ratio(item: Item) -> float:
    return item.ratio


def by_value(item: Item) -> float:
    return item.value


def by_weight(item: Item) -> float:
    return item.weight


def stable_sort(items: Sequence[Item], key: OrderKey, descending: bool = False) -> list[Item]:
    """Sort items by ``key``; ties keep their input order."""
    return sorted(items, key=key, reverse=descending)


@dataclass(frozen=True)
class Ordering:
    """A named sort policy: key function plus direction."""

    name: str
    key: OrderKey
    descending: bool

    def apply(self, items: Sequence[Item]) -> list[Item]:
        return stable_sort(items, self.key, descending=self.descending)


RATIO_DESC = Ordering("ratio", by_ratio, descending=True)
VALUE_DESC = Ordering("value", by_value, descending=True)
WEIGHT_ASC = Ordering("weight", by_weight, descending=False)


def random_permutation(items: Sequence[Item], rng: Rng) -> list[Item]:
    """Return the items in a uniformly random order drawn from ``rng``."""
    return [items[i] for i in rng.permutation(len(items))]


def top_value_count(n_items: int, fraction: float = TOP_VALUE_FRACTION) -> int:
    """
    Size of the top-by-value subset: ``max(1, floor(n * fraction))``, capped at n.

    Example:
        >>> [top_value_count(n) for n in (0, 1, 2, 3, 10)]
        [0, 1, 1, 2, 7]
    """
    return min(n_items, max(1, math.floor(n_items * fraction)))


def top_value_subset(items: Sequence[Item], fraction: float = TOP_VALUE_FRACTION) -> list[Item]:
    """Highest-value items (stable, descending), ``top_value_count`` of them."""
    return VALUE_DESC.apply(items)[: top_value_count(len(items), fraction)]
