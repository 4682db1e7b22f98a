"""
Randomized strategies for the 0-1 knapsack.

All randomness comes from an explicitly passed ``numpy.random.Generator``.
Omitting it draws a fresh, OS-seeded generator, so results are reproducible
only when the caller supplies a seeded one.

Monte Carlo strategies fold their trials with ``keep_better``: a trial
replaces the best-so-far only with a strictly greater value. Trials draw
successive permutations from the same generator, so with a fixed seed a run
of ``k`` trials is a prefix of a run of ``k + m`` trials and the best value
can only grow with ``trials``.
"""

import functools
from collections.abc import Iterator, Sequence

import numpy as np

from knapsack_heuristics.data.instance import Item
from knapsack_heuristics.strategies.kernel import (
    EMPTY_PACKING,
    Packing,
    PackingMode,
    keep_better,
    pack_zero_one,
)
from knapsack_heuristics.strategies.ordering import (
    TOP_VALUE_FRACTION,
    random_permutation,
    top_value_subset,
)
from knapsack_heuristics.strategies.registry import StrategyRegistry
from knapsack_heuristics.strategies.timing import timed
from knapsack_heuristics.types import Rng

DEFAULT_TRIALS = 1000


def _ensure_rng(rng: Rng | None) -> Rng:
    return rng if rng is not None else np.random.default_rng()


def run_trials(
    items: Sequence[Item], capacity: int, rng: Rng, trials: int
) -> Iterator[Packing]:
    """Yield one 0-1 packing per random permutation of ``items``."""
    for _ in range(trials):
        yield pack_zero_one(random_permutation(items, rng), capacity)


def best_of_trials(items: Sequence[Item], capacity: int, rng: Rng, trials: int) -> Packing:
    """
    Best packing over ``trials`` random permutations.

    Args:
        items: Candidate items
        capacity: Knapsack capacity
        rng: Source of the permutations
        trials: Number of permutations to try

    Returns:
        The first packing with the greatest value, or an empty packing when
        no trial beats zero
    """
    return functools.reduce(keep_better, run_trials(items, capacity, rng, trials), EMPTY_PACKING)


@StrategyRegistry.register(
    "random_sampling", family="random", mode=PackingMode.ZERO_ONE, params=("rng",)
)
@timed("0-1 Knapsack - Random Sampling")
def random_sampling(items: list[Item], capacity: int, rng: Rng | None = None) -> Packing:
    """Pack a single uniform random permutation of the items."""
    rng = _ensure_rng(rng)
    return pack_zero_one(random_permutation(items, rng), capacity)


@StrategyRegistry.register(
    "monte_carlo_all", family="monte_carlo", mode=PackingMode.ZERO_ONE, params=("rng", "trials")
)
@timed("0-1 Knapsack - Monte Carlo 1")
def monte_carlo_all(
    items: list[Item],
    capacity: int,
    rng: Rng | None = None,
    trials: int = DEFAULT_TRIALS,
) -> Packing:
    """Best of ``trials`` random permutations of the full item set."""
    rng = _ensure_rng(rng)
    return best_of_trials(items, capacity, rng, trials)


@StrategyRegistry.register(
    "monte_carlo_top",
    family="monte_carlo",
    mode=PackingMode.ZERO_ONE,
    params=("rng", "trials", "top_fraction"),
)
@timed("0-1 Knapsack - Monte Carlo 2")
def monte_carlo_top(
    items: list[Item],
    capacity: int,
    rng: Rng | None = None,
    trials: int = DEFAULT_TRIALS,
    top_fraction: float = TOP_VALUE_FRACTION,
) -> Packing:
    """Best of ``trials`` random permutations of the highest-value items only."""
    rng = _ensure_rng(rng)
    candidates = top_value_subset(items, top_fraction)
    return best_of_trials(candidates, capacity, rng, trials)
