"""
Timing wrapper shared by all strategies.

``timed`` turns a packing body ``body(items, capacity, **params) -> Packing``
into a strategy ``select(instance, **params) -> Result``. The item copy is
made before the clock starts, so only the selection logic (sorting,
shuffling, packing) is measured, identically for every strategy.
"""

import functools
import time
from collections.abc import Callable
from typing import Any, Protocol

from knapsack_heuristics.data.instance import Item, KnapsackInstance
from knapsack_heuristics.strategies.kernel import Packing
from knapsack_heuristics.strategies.result import Result

PackingBody = Callable[..., Packing]


class Strategy(Protocol):
    """A timed selection strategy."""

    strategy_name: str

    def __call__(self, instance: KnapsackInstance, **params: Any) -> Result: ...


def timed(name: str) -> Callable[[PackingBody], Strategy]:
    """
    Decorator that times a packing body and wraps its outcome in a Result.

    Args:
        name: Display name stored in every Result

    Returns:
        Decorator producing ``select(instance, **params) -> Result``

    Example:
        >>> @timed("0-1 Knapsack - Input Order")
        ... def input_order(items, capacity):
        ...     return pack_zero_one(items, capacity)
        >>> input_order(instance).strategy
        '0-1 Knapsack - Input Order'
    """

    def decorator(body: PackingBody) -> Strategy:
        @functools.wraps(body)
        def select(instance: KnapsackInstance, **params: Any) -> Result:
            items: list[Item] = instance.items_copy()

            start = time.perf_counter_ns()
            packing = body(items, instance.capacity, **params)
            elapsed_ns = time.perf_counter_ns() - start

            return Result.from_packing(name, packing, elapsed_ns)

        select.strategy_name = name  # type: ignore[attr-defined]
        return select  # type: ignore[return-value]

    return decorator
