"""
Registry system for selection strategies.

Provides a global registry for discovering and running strategies by name.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from knapsack_heuristics.data.instance import KnapsackInstance
from knapsack_heuristics.strategies.kernel import PackingMode
from knapsack_heuristics.strategies.result import Result
from knapsack_heuristics.strategies.timing import Strategy
from knapsack_heuristics.utils.error_handler import ValidationError


@dataclass(frozen=True)
class StrategySpec:
    """Metadata for a registered strategy.

    Attributes:
        key: Registry name (e.g. ``"zero_one_ratio"``)
        label: Display name written into Results
        family: Ordering family (ratio, value, weight, random, monte_carlo)
        mode: Fractional or 0-1 packing
        select: The timed strategy callable
        params: Keyword parameters the strategy accepts (subset of rng, trials, top_fraction)
    """

    key: str
    label: str
    family: str
    mode: PackingMode
    select: Strategy
    params: frozenset[str] = frozenset()

    @property
    def randomized(self) -> bool:
        return "rng" in self.params

    def run(self, instance: KnapsackInstance, **params: Any) -> Result:
        """Run the strategy, passing only the parameters it accepts."""
        accepted = {k: v for k, v in params.items() if k in self.params and v is not None}
        return self.select(instance, **accepted)


class StrategyRegistry:
    """
    Global registry for selection strategies.

    Strategies are listed in registration order, which is the order the
    comparator runs them in by default.

    Example:
        >>> @StrategyRegistry.register("zero_one_ratio", family="ratio", mode=PackingMode.ZERO_ONE)
        ... @timed("0-1 Knapsack - Greedy by Ratio")
        ... def zero_one_by_ratio(items, capacity):
        ...     ...
        >>> StrategyRegistry.get("zero_one_ratio").run(instance)
    """

    _strategies: dict[str, StrategySpec] = {}

    @classmethod
    def register(
        cls,
        name: str,
        *,
        family: str,
        mode: PackingMode,
        params: tuple[str, ...] = (),
    ) -> Callable[[Strategy], Strategy]:
        """
        Decorator to register a timed strategy.

        Args:
            name: Unique name for the strategy
            family: Ordering family
            mode: Packing mode
            params: Keyword parameters the strategy accepts

        Returns:
            Decorator returning the strategy unchanged
        """

        def wrapper(select: Strategy) -> Strategy:
            if name in cls._strategies:
                raise ValueError(
                    f"Strategy '{name}' already registered as {cls._strategies[name].label}"
                )
            cls._strategies[name] = StrategySpec(
                key=name,
                label=select.strategy_name,
                family=family,
                mode=mode,
                select=select,
                params=frozenset(params),
            )
            return select

        return wrapper

    @classmethod
    def get(cls, name: str) -> StrategySpec:
        """
        Look up a strategy by name.

        Raises:
            ValidationError: If the name is not registered
        """
        if name not in cls._strategies:
            available = ", ".join(cls._strategies.keys())
            raise ValidationError(
                f"Strategy '{name}' not found",
                suggestion=f"Available strategies: {available}",
            )
        return cls._strategies[name]

    @classmethod
    def list_strategies(cls) -> list[str]:
        """List all registered strategy names in registration order."""
        return list(cls._strategies.keys())

    @classmethod
    def specs(cls) -> list[StrategySpec]:
        return list(cls._strategies.values())
