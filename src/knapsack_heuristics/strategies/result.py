"""
Result record produced by every strategy invocation.
"""

from dataclasses import asdict, dataclass

from knapsack_heuristics.strategies.kernel import Packing
from knapsack_heuristics.types import Selection


def optimality_ratio(total_value: float, optimal_value: float | None) -> float:
    """
    Express a value as a percentage of a reference optimum.

    Args:
        total_value: Achieved value
        optimal_value: Reference value (None or <= 0 means unknown)

    Returns:
        ``total_value / optimal_value * 100``, or 0.0 without a usable reference

    Example:
        >>> optimality_ratio(220.0, 240.0)
        91.66666666666666
        >>> optimality_ratio(10.0, 0.0)
        0.0
    """
    if optimal_value is None or optimal_value <= 0:
        return 0.0
    return total_value / optimal_value * 100


@dataclass(frozen=True)
class Result:
    """Outcome of one strategy run on one instance.

    Attributes:
        strategy: Display name of the strategy that produced the result
        total_value: Accumulated value (fractional for fractional strategies)
        total_weight: Accumulated weight, never above the instance capacity
        elapsed_ns: Time spent inside the selection logic
        selected_items: Item ids in selection order
    """

    strategy: str
    total_value: float = 0.0
    total_weight: float = 0.0
    elapsed_ns: int = 0
    selected_items: Selection = ()

    @classmethod
    def from_packing(cls, strategy: str, packing: Packing, elapsed_ns: int) -> "Result":
        return cls(
            strategy=strategy,
            total_value=packing.total_value,
            total_weight=packing.total_weight,
            elapsed_ns=elapsed_ns,
            selected_items=packing.selected_items,
        )

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000

    def optimality_ratio(self, optimal_value: float | None) -> float:
        return optimality_ratio(self.total_value, optimal_value)

    def same_outcome(self, other: "Result") -> bool:
        """True when both results agree on everything except timing."""
        return (
            self.strategy == other.strategy
            and self.total_value == other.total_value
            and self.total_weight == other.total_weight
            and self.selected_items == other.selected_items
        )

    def to_dict(self) -> dict:
        row = asdict(self)
        row["selected_items"] = list(self.selected_items)
        row["elapsed_ms"] = self.elapsed_ms
        return row

    def __str__(self) -> str:
        return (
            f"{self.strategy}: Value={self.total_value:.2f}, "
            f"Weight={self.total_weight:.2f}, Time={self.elapsed_ms:.3f} ms"
        )
