"""
Knapsack problem instance model.

An instance is a capacity plus an ordered, immutable sequence of items.
Items carry a stable 1-based identifier assigned when the instance is built.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

import numpy as np

from knapsack_heuristics.types import FloatArray, IntArray


@dataclass(frozen=True)
class Item:
    """A single knapsack item.

    Attributes:
        id: Stable 1-based identifier
        weight: Non-negative integer weight
        value: Non-negative value
    """

    id: int
    weight: int
    value: float

    @property
    def ratio(self) -> float:
        """Value-to-weight ratio (0 for zero-weight items)."""
        return self.value / self.weight if self.weight > 0 else 0.0

    def copy(self) -> "Item":
        return replace(self)

    def __repr__(self) -> str:
        return f"Item(id={self.id}, w={self.weight}, v={self.value}, ratio={self.ratio:.2f})"


@dataclass(frozen=True)
class KnapsackInstance:
    """Represents a single Knapsack problem instance"""

    capacity: int
    items: tuple[Item, ...]
    name: str | None = field(default=None, compare=False)

    @classmethod
    def from_pairs(
        cls,
        capacity: int,
        pairs: Iterable[tuple[int, float]],
        name: str | None = None,
    ) -> "KnapsackInstance":
        """
        Build an instance from (weight, value) pairs, numbering items from 1.

        Args:
            capacity: Knapsack capacity
            pairs: Iterable of (weight, value) tuples in input order
            name: Optional label (usually the source file name)

        Returns:
            KnapsackInstance with items in input order

        Example:
            >>> inst = KnapsackInstance.from_pairs(50, [(10, 60), (20, 100), (30, 120)])
            >>> [item.id for item in inst.items]
            [1, 2, 3]
        """
        items = tuple(
            Item(id=i, weight=weight, value=value) for i, (weight, value) in enumerate(pairs, 1)
        )
        return cls(capacity=capacity, items=items, name=name)

    @property
    def n_items(self) -> int:
        return len(self.items)

    @property
    def weights(self) -> IntArray:
        return np.array([item.weight for item in self.items], dtype=np.int64)

    @property
    def values(self) -> FloatArray:
        return np.array([item.value for item in self.items], dtype=np.float64)

    def items_copy(self) -> list[Item]:
        """Return a private working copy of the item sequence."""
        return [item.copy() for item in self.items]

    def item_by_id(self, item_id: int) -> Item:
        return self.items[item_id - 1]

    def __repr__(self) -> str:
        label = f", name={self.name!r}" if self.name else ""
        return f"KnapsackInstance(n_items={self.n_items}, capacity={self.capacity}{label})"
