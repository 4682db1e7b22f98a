"""
Greedy packing kernel shared by every strategy.

Both modes walk the items in the order they are given and return a
``Packing``: accumulated value and weight plus the selected item ids in
selection order. A degenerate instance (no capacity or no items) always
packs nothing.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from knapsack_heuristics.data.instance import Item
from knapsack_heuristics.types import Selection


class PackingMode(str, Enum):
    FRACTIONAL = "fractional"
    ZERO_ONE = "0-1"


@dataclass(frozen=True)
class Packing:
    """Outcome of one greedy pass."""

    total_value: float = 0.0
    total_weight: float = 0.0
    selected_items: Selection = ()


EMPTY_PACKING = Packing()


def pack_fractional(items: Iterable[Item], capacity: int) -> Packing:
    """
    Fractional greedy pass.

    Whole items are taken while they fit; the first item that does not fit is
    taken in proportion ``remaining / weight`` and the pass stops.

    Args:
        items: Items in strategy order
        capacity: Knapsack capacity

    Returns:
        Packing with a possibly fractional total value

    Example:
        >>> from knapsack_heuristics.data.instance import KnapsackInstance
        >>> inst = KnapsackInstance.from_pairs(50, [(10, 60), (20, 100), (30, 120)])
        >>> pack_fractional(inst.items, inst.capacity).total_value
        240.0
    """
    if capacity <= 0:
        return EMPTY_PACKING

    remaining = capacity
    total_value = 0.0
    total_weight = 0.0
    selected = []

    for item in items:
        if remaining == 0:
            break

        if item.weight <= remaining:
            total_value += item.value
            total_weight += item.weight
            selected.append(item.id)
            remaining -= item.weight
        else:
            # Split the item once, then the knapsack is full
            total_value += item.value * remaining / item.weight
            total_weight += remaining
            selected.append(item.id)
            remaining = 0
            break

    return Packing(total_value, total_weight, tuple(selected))


def pack_zero_one(items: Iterable[Item], capacity: int) -> Packing:
    """
    0-1 greedy pass.

    Each item is taken whole if it fits and skipped otherwise; a skip does
    not end the pass.

    Args:
        items: Items in strategy order
        capacity: Knapsack capacity

    Returns:
        Packing whose totals are sums over the selected items
    """
    if capacity <= 0:
        return EMPTY_PACKING

    remaining = capacity
    total_value = 0.0
    total_weight = 0.0
    selected = []

    for item in items:
        if item.weight <= remaining:
            total_value += item.value
            total_weight += item.weight
            selected.append(item.id)
            remaining -= item.weight

    return Packing(total_value, total_weight, tuple(selected))


def keep_better(best: Packing, candidate: Packing) -> Packing:
    """
    Fold combinator for best-of-trials searches.

    The candidate replaces the incumbent only when its value is strictly
    greater, so on ties the first-found packing wins.
    """
    return candidate if candidate.total_value > best.total_value else best
