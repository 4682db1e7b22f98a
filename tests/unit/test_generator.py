"""
Tests for random instance generation.
"""

import numpy as np

from knapsack_heuristics.data import KnapsackGenerator, generate_knapsack_instance


class TestKnapsackGenerator:
    """Test suite for knapsack instance generation."""

    def test_generate_instance_shape(self):
        instance = generate_knapsack_instance(10, seed=42)

        assert instance.n_items == 10
        assert [item.id for item in instance.items] == list(range(1, 11))

    def test_values_and_weights_within_ranges(self):
        instance = generate_knapsack_instance(
            50, weight_range=(5, 10), value_range=(0, 3), seed=1
        )

        assert np.all((instance.weights >= 5) & (instance.weights <= 10))
        assert np.all((instance.values >= 0) & (instance.values <= 3))

    def test_capacity_is_fraction_of_total_weight(self):
        instance = generate_knapsack_instance(40, capacity_ratio=0.25, seed=3)

        assert instance.capacity == int(instance.weights.sum() * 0.25)

    def test_generate_instance_deterministic(self):
        inst1 = generate_knapsack_instance(15, seed=42)
        inst2 = generate_knapsack_instance(15, seed=42)

        assert inst1.items == inst2.items
        assert inst1.capacity == inst2.capacity

    def test_generate_instance_different_seeds(self):
        inst1 = generate_knapsack_instance(15, seed=42)
        inst2 = generate_knapsack_instance(15, seed=123)

        assert inst1.items != inst2.items

    def test_generate_dataset_sizes_and_names(self):
        generator = KnapsackGenerator(seed=0)
        instances = generator.generate_dataset(20, (2, 6))

        assert len(instances) == 20
        assert all(2 <= inst.n_items <= 6 for inst in instances)
        assert instances[0].name == "generated-1"
