"""
Knapsack Problem Instance Generator
Generates reproducible random instances for comparing heuristics
"""

from typing import Any

import numpy as np

from knapsack_heuristics.data.instance import KnapsackInstance


class KnapsackGenerator:
    """Generates random Knapsack problem instances"""

    def __init__(self, seed: int | None = 42):
        self.rng = np.random.RandomState(seed)

    def generate_instance(
        self,
        n_items: int,
        weight_range: tuple[int, int] = (1, 100),
        value_range: tuple[int, int] = (1, 100),
        capacity_ratio: float = 0.5,
        name: str | None = None,
    ) -> KnapsackInstance:
        """
        Generate a random Knapsack instance

        Args:
            n_items: Number of items
            weight_range: (min_weight, max_weight) for items, inclusive
            value_range: (min_value, max_value) for items, inclusive
            capacity_ratio: Capacity as a fraction of total weight (default: 0.5)
            name: Optional label for reports

        Returns:
            KnapsackInstance object
        """
        weights = self.rng.randint(weight_range[0], weight_range[1] + 1, size=n_items)
        values = self.rng.randint(value_range[0], value_range[1] + 1, size=n_items)

        # Set capacity as a fraction of total weight
        total_weight = int(np.sum(weights))
        capacity = int(total_weight * capacity_ratio)

        pairs = zip(weights.tolist(), values.tolist())
        return KnapsackInstance.from_pairs(capacity, pairs, name=name)

    def generate_dataset(
        self, n_instances: int, n_items_range: tuple[int, int], **kwargs: Any
    ) -> list[KnapsackInstance]:
        """
        Generate multiple instances with varying sizes

        Args:
            n_instances: Number of instances to generate
            n_items_range: (min_items, max_items) range, inclusive
            **kwargs: Additional arguments passed to generate_instance

        Returns:
            List of KnapsackInstance objects
        """
        instances = []
        for i in range(n_instances):
            n_items = self.rng.randint(n_items_range[0], n_items_range[1] + 1)
            instance = self.generate_instance(int(n_items), name=f"generated-{i + 1}", **kwargs)
            instances.append(instance)
        return instances


def generate_knapsack_instance(
    n_items: int,
    weight_range: tuple[int, int] = (1, 100),
    value_range: tuple[int, int] = (1, 100),
    capacity_ratio: float = 0.5,
    seed: int = 42,
) -> KnapsackInstance:
    """
    Generate a single random knapsack instance.

    Args:
        n_items: Number of items
        weight_range: (min_weight, max_weight) for items
        value_range: (min_value, max_value) for items
        capacity_ratio: Capacity as a fraction of total weight
        seed: Random seed

    Returns:
        KnapsackInstance
    """
    generator = KnapsackGenerator(seed=seed)
    return generator.generate_instance(
        n_items=n_items,
        weight_range=weight_range,
        value_range=value_range,
        capacity_ratio=capacity_ratio,
    )
