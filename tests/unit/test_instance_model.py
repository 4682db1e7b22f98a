"""
Tests for the item and instance model.
"""

import dataclasses

import numpy as np
import pytest

from knapsack_heuristics.data import Item, KnapsackInstance


class TestItem:
    """Test suite for Item."""

    def test_ratio_is_value_over_weight(self):
        assert Item(id=1, weight=4, value=10).ratio == 2.5

    def test_zero_weight_ratio_is_zero(self):
        """Zero-weight items are legal and have ratio 0."""
        assert Item(id=1, weight=0, value=99).ratio == 0.0

    def test_item_is_immutable(self):
        item = Item(id=1, weight=4, value=10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.weight = 5  # type: ignore[misc]

    def test_copy_preserves_id_and_recomputes_ratio(self):
        item = Item(id=3, weight=5, value=20)
        copy = item.copy()

        assert copy == item
        assert copy is not item
        assert copy.ratio == 4.0


class TestKnapsackInstance:
    """Test suite for KnapsackInstance."""

    def test_from_pairs_assigns_one_based_ids(self, small_instance):
        assert [item.id for item in small_instance.items] == [1, 2, 3]
        assert small_instance.n_items == 3
        assert small_instance.capacity == 50

    def test_items_copy_is_independent(self, small_instance):
        """Reordering a working copy must not touch the instance."""
        working = small_instance.items_copy()
        working.reverse()
        working.pop()

        assert [item.id for item in small_instance.items] == [1, 2, 3]

    def test_numpy_views(self, small_instance):
        assert np.array_equal(small_instance.weights, [10, 20, 30])
        assert np.array_equal(small_instance.values, [60.0, 100.0, 120.0])

    def test_item_by_id(self, small_instance):
        assert small_instance.item_by_id(2).value == 100

    def test_empty_instance(self):
        instance = KnapsackInstance.from_pairs(10, [])

        assert instance.n_items == 0
        assert instance.weights.shape == (0,)

    def test_repr_mentions_size_and_name(self, small_instance):
        assert repr(small_instance) == "KnapsackInstance(n_items=3, capacity=50, name='small')"
