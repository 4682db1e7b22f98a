"""
Run several strategies over one shared instance.

Strategies run strictly one after another in the caller's order and their
Results are kept in that order. Ranking is left to ``eval.reporting``.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from knapsack_heuristics.data.instance import KnapsackInstance
from knapsack_heuristics.strategies import DEFAULT_TRIALS, Result, StrategyRegistry, StrategySpec
from knapsack_heuristics.strategies.kernel import pack_fractional
from knapsack_heuristics.strategies.ordering import RATIO_DESC, TOP_VALUE_FRACTION
from knapsack_heuristics.utils.error_handler import require_fraction, require_positive_int

logger = logging.getLogger(__name__)

SeedLike = int | np.random.SeedSequence | None


@dataclass(frozen=True)
class Comparison:
    """Results of one comparison run, in execution order.

    Attributes:
        instance: The shared instance
        results: One Result per strategy, in the order they ran
        reference_value: Fractional ratio-greedy total, the denominator
            of optimality ratios (not a bound when zero-weight items carry value)
        trials: Trial count given to Monte Carlo strategies
    """

    instance: KnapsackInstance
    results: tuple[Result, ...]
    reference_value: float
    trials: int

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def get(self, strategy: str) -> Result:
        for result in self.results:
            if result.strategy == strategy:
                return result
        raise KeyError(f"No result for strategy '{strategy}'")

    def to_dict(self) -> dict:
        return {
            "instance": self.instance.name,
            "n_items": self.instance.n_items,
            "capacity": self.instance.capacity,
            "reference_value": self.reference_value,
            "trials": self.trials,
            "results": [
                {**r.to_dict(), "optimality_ratio": r.optimality_ratio(self.reference_value)}
                for r in self.results
            ],
        }


def reference_value(instance: KnapsackInstance) -> float:
    """Fractional-relaxation optimum of ``instance`` (ratio-greedy, untimed)."""
    return pack_fractional(RATIO_DESC.apply(instance.items), instance.capacity).total_value


def resolve_strategies(names: Sequence[str] | None = None) -> list[StrategySpec]:
    """
    Map strategy names to registry entries, keeping the given order.

    Args:
        names: Registry keys, or None for every strategy in registration order

    Raises:
        ValidationError: If a name is not registered
    """
    if names is None:
        return StrategyRegistry.specs()
    return [StrategyRegistry.get(name) for name in names]


def run_strategy(
    instance: KnapsackInstance,
    name: str,
    *,
    seed: SeedLike = None,
    trials: int = DEFAULT_TRIALS,
    top_fraction: float = TOP_VALUE_FRACTION,
) -> Result:
    """
    Run a single named strategy.

    Args:
        instance: Instance to solve
        name: Registry key
        seed: Seed for randomized strategies (None for OS entropy)
        trials: Monte Carlo trial count
        top_fraction: Subset fraction for the top-value Monte Carlo strategy

    Returns:
        Result of the strategy
    """
    require_positive_int(trials, "trials")
    require_fraction(top_fraction, "top_fraction")

    spec = StrategyRegistry.get(name)
    rng = np.random.default_rng(seed) if spec.randomized else None
    return spec.run(instance, rng=rng, trials=trials, top_fraction=top_fraction)


def compare(
    instance: KnapsackInstance,
    strategies: Sequence[str] | None = None,
    *,
    seed: SeedLike = None,
    trials: int = DEFAULT_TRIALS,
    top_fraction: float = TOP_VALUE_FRACTION,
) -> Comparison:
    """
    Run strategies over the same instance and collect their Results.

    Each randomized strategy gets its own generator spawned from ``seed``,
    so no generator is shared between strategies and a fixed seed makes the
    whole comparison reproducible.

    Args:
        instance: Shared, read-only instance
        strategies: Registry keys in run order (None runs all nine)
        seed: Root seed (None for OS entropy)
        trials: Monte Carlo trial count
        top_fraction: Subset fraction for the top-value Monte Carlo strategy

    Returns:
        Comparison with results in execution order

    Example:
        >>> comparison = compare(instance, ["zero_one_ratio", "monte_carlo_all"], seed=42)
        >>> [r.strategy for r in comparison]
        ['0-1 Knapsack - Greedy by Ratio', '0-1 Knapsack - Monte Carlo 1']
    """
    require_positive_int(trials, "trials")
    require_fraction(top_fraction, "top_fraction")

    specs = resolve_strategies(strategies)
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    children = root.spawn(len(specs))

    results = []
    for spec, child in zip(specs, children):
        rng = np.random.default_rng(child) if spec.randomized else None
        result = spec.run(instance, rng=rng, trials=trials, top_fraction=top_fraction)
        logger.debug("%s -> %s", spec.key, result)
        results.append(result)

    return Comparison(
        instance=instance,
        results=tuple(results),
        reference_value=reference_value(instance),
        trials=trials,
    )
