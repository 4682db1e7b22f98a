"""
Tests for the timing decorator, Result records and the strategy registry.
"""

import pytest

from knapsack_heuristics.strategies import (
    PackingMode,
    Result,
    StrategyRegistry,
    optimality_ratio,
    pack_zero_one,
    timed,
)
from knapsack_heuristics.strategies.kernel import Packing
from knapsack_heuristics.utils.error_handler import ValidationError

EXPECTED_ORDER = [
    "fractional_ratio",
    "fractional_value",
    "fractional_weight",
    "zero_one_ratio",
    "zero_one_value",
    "zero_one_weight",
    "random_sampling",
    "monte_carlo_all",
    "monte_carlo_top",
]


class TestTimed:
    """Test suite for the timing decorator."""

    def test_wraps_packing_in_result(self, small_instance):
        @timed("0-1 Knapsack - Input Order")
        def input_order(items, capacity):
            return pack_zero_one(items, capacity)

        result = input_order(small_instance)

        assert isinstance(result, Result)
        assert result.strategy == "0-1 Knapsack - Input Order"
        assert result.selected_items == (1, 2)
        assert result.elapsed_ns >= 0
        assert input_order.strategy_name == "0-1 Knapsack - Input Order"

    def test_body_gets_a_private_copy(self, small_instance):
        @timed("Reversing")
        def reversing(items, capacity):
            items.reverse()
            items.pop()
            return pack_zero_one(items, capacity)

        result = reversing(small_instance)

        assert result.selected_items == (3, 2)
        assert [item.id for item in small_instance.items] == [1, 2, 3]

    def test_params_are_forwarded(self, small_instance):
        @timed("Capped")
        def capped(items, capacity, limit=1):
            return pack_zero_one(items[:limit], capacity)

        assert capped(small_instance, limit=2).selected_items == (1, 2)


class TestResult:
    """Test suite for Result records."""

    def test_from_packing(self):
        result = Result.from_packing("X", Packing(5.0, 2.0, (1,)), 1_500_000)

        assert result.total_value == 5.0
        assert result.elapsed_ms == 1.5

    def test_same_outcome_ignores_time(self):
        a = Result("X", 5.0, 2.0, 10, (1,))
        b = Result("X", 5.0, 2.0, 99_999, (1,))

        assert a.same_outcome(b)
        assert a != b

    def test_to_dict(self):
        row = Result("X", 5.0, 2.0, 2_000_000, (3, 1)).to_dict()

        assert row["selected_items"] == [3, 1]
        assert row["elapsed_ms"] == 2.0

    def test_str(self):
        assert str(Result("X", 5.0, 2.0, 0, ())) == "X: Value=5.00, Weight=2.00, Time=0.000 ms"

    @pytest.mark.parametrize(
        "value, reference, expected",
        [(120.0, 240.0, 50.0), (240.0, 240.0, 100.0), (5.0, 0.0, 0.0), (5.0, None, 0.0)],
    )
    def test_optimality_ratio(self, value, reference, expected):
        assert optimality_ratio(value, reference) == pytest.approx(expected)


class TestStrategyRegistry:
    """Test suite for StrategyRegistry."""

    def test_all_strategies_registered_in_order(self):
        assert StrategyRegistry.list_strategies() == EXPECTED_ORDER

    def test_specs_carry_metadata(self):
        spec = StrategyRegistry.get("monte_carlo_top")

        assert spec.label == "0-1 Knapsack - Monte Carlo 2"
        assert spec.family == "monte_carlo"
        assert spec.mode is PackingMode.ZERO_ONE
        assert spec.randomized
        assert spec.params == frozenset({"rng", "trials", "top_fraction"})

    def test_fractional_modes(self):
        modes = {spec.key: spec.mode for spec in StrategyRegistry.specs()}

        assert modes["fractional_weight"] is PackingMode.FRACTIONAL
        assert modes["zero_one_weight"] is PackingMode.ZERO_ONE
        assert not StrategyRegistry.get("zero_one_ratio").randomized

    def test_unknown_strategy(self):
        with pytest.raises(ValidationError) as exc_info:
            StrategyRegistry.get("simulated_annealing")

        assert "zero_one_ratio" in exc_info.value.suggestion

    def test_duplicate_registration_rejected(self):
        spec = StrategyRegistry.get("zero_one_ratio")

        with pytest.raises(ValueError, match="already registered"):
            StrategyRegistry.register("zero_one_ratio", family="ratio", mode=PackingMode.ZERO_ONE)(
                spec.select
            )

        assert StrategyRegistry.list_strategies() == EXPECTED_ORDER

    def test_run_drops_unaccepted_params(self, small_instance):
        spec = StrategyRegistry.get("zero_one_ratio")
        result = spec.run(small_instance, rng=object(), trials=7, top_fraction=0.5)

        assert result.total_value == 160
