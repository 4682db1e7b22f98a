"""
Pytest configuration and shared fixtures for testing.
"""

import logging

import numpy as np
import pytest

from knapsack_heuristics.data import KnapsackGenerator, KnapsackInstance


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI tests so later tests don't log to closed streams."""
    yield
    logger = logging.getLogger("knapsack_heuristics")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def small_instance():
    """
    Classic 3-item instance.

    Fractional optimum is 240 (items 1 and 2 whole, 2/3 of item 3).
    """
    return KnapsackInstance.from_pairs(50, [(10, 60), (20, 100), (30, 120)], name="small")


@pytest.fixture
def zero_capacity_instance():
    """Items of every kind, including zero weight, but no capacity."""
    return KnapsackInstance.from_pairs(0, [(5, 10), (0, 7), (3, 3)], name="zero-capacity")


@pytest.fixture
def oversized_item_instance():
    """A single item heavier than the knapsack."""
    return KnapsackInstance.from_pairs(10, [(25, 50)], name="oversized")


@pytest.fixture
def tie_instance():
    """Items with equal ratios, values and weights to exercise stable ordering."""
    return KnapsackInstance.from_pairs(
        6, [(2, 4), (3, 6), (2, 4), (1, 2), (3, 6)], name="ties"
    )


@pytest.fixture
def random_instances():
    """Small generated instances for property checks."""
    generator = KnapsackGenerator(seed=7)
    return generator.generate_dataset(25, (1, 9), weight_range=(1, 30), value_range=(0, 50))


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def instance_file(tmp_path):
    """Write the 3-item instance to disk and return its path."""
    path = tmp_path / "small.txt"
    path.write_text("3 50\n10 60\n20 100\n30 120\n")
    return path
