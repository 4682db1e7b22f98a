"""
Batch comparison over many instances with aggregate statistics.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from knapsack_heuristics.data.instance import KnapsackInstance
from knapsack_heuristics.eval.comparator import Comparison, SeedLike, compare
from knapsack_heuristics.strategies import DEFAULT_TRIALS
from knapsack_heuristics.strategies.ordering import TOP_VALUE_FRACTION
from knapsack_heuristics.utils.logger import log_metrics

logger = logging.getLogger(__name__)


@dataclass
class SummaryMetrics:
    """Aggregate metrics for one strategy across instances."""

    strategy: str
    mean_ratio: float
    median_ratio: float
    std_ratio: float
    min_ratio: float
    mean_value: float
    mean_time_ms: float
    p90_time_ms: float
    feasibility_rate: float
    n_instances: int


def summarize_comparisons(comparisons: Sequence[Comparison]) -> list[SummaryMetrics]:
    """
    Aggregate per-strategy statistics over several comparisons.

    Args:
        comparisons: Comparisons that ran the same strategies

    Returns:
        One SummaryMetrics per strategy, in execution order of the first comparison
    """
    if not comparisons:
        return []

    ratios: dict[str, list[float]] = {}
    values: dict[str, list[float]] = {}
    times: dict[str, list[float]] = {}
    feasible: dict[str, list[bool]] = {}

    for comparison in comparisons:
        capacity = comparison.instance.capacity
        for r in comparison.results:
            ratios.setdefault(r.strategy, []).append(r.optimality_ratio(comparison.reference_value))
            values.setdefault(r.strategy, []).append(r.total_value)
            times.setdefault(r.strategy, []).append(r.elapsed_ms)
            feasible.setdefault(r.strategy, []).append(r.total_weight <= capacity)

    summaries = []
    for strategy in ratios:
        strategy_ratios = np.array(ratios[strategy])
        strategy_times = np.array(times[strategy])
        summaries.append(
            SummaryMetrics(
                strategy=strategy,
                mean_ratio=float(np.mean(strategy_ratios)),
                median_ratio=float(np.median(strategy_ratios)),
                std_ratio=float(np.std(strategy_ratios)),
                min_ratio=float(np.min(strategy_ratios)),
                mean_value=float(np.mean(values[strategy])),
                mean_time_ms=float(np.mean(strategy_times)),
                p90_time_ms=float(np.percentile(strategy_times, 90)),
                feasibility_rate=float(np.mean(feasible[strategy])),
                n_instances=len(strategy_ratios),
            )
        )

    return summaries


def run_benchmark(
    instances: Sequence[KnapsackInstance],
    strategies: Sequence[str] | None = None,
    *,
    seed: SeedLike = None,
    trials: int = DEFAULT_TRIALS,
    top_fraction: float = TOP_VALUE_FRACTION,
    progress: bool = False,
) -> list[SummaryMetrics]:
    """
    Compare strategies on every instance and aggregate the results.

    Args:
        instances: Instances to compare on
        strategies: Registry keys (None for all)
        seed: Root seed; each instance gets its own spawned seed sequence
        trials: Monte Carlo trial count
        top_fraction: Subset fraction for the top-value Monte Carlo strategy
        progress: Show a tqdm progress bar

    Returns:
        Per-strategy summary metrics
    """
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    children = root.spawn(len(instances))

    comparisons = [
        compare(
            instance,
            strategies,
            seed=child,
            trials=trials,
            top_fraction=top_fraction,
        )
        for instance, child in zip(
            tqdm(instances, desc="Comparing", leave=False, disable=not progress), children
        )
    ]

    summaries = summarize_comparisons(comparisons)
    for summary in summaries:
        log_metrics(
            logger,
            {
                "mean_ratio": summary.mean_ratio,
                "min_ratio": summary.min_ratio,
                "mean_time_ms": summary.mean_time_ms,
            },
            prefix=f"{summary.strategy} |",
            precision=3,
        )
    return summaries


def format_summary_table(summaries: Sequence[SummaryMetrics]) -> str:
    """Render benchmark summaries as a fixed-width table."""
    header = (
        f"{'Algorithm':<45} {'Mean %':>8} {'Median %':>9} {'Min %':>8} "
        f"{'Mean ms':>10} {'P90 ms':>10}"
    )
    lines = [header, "-" * len(header)]
    for s in summaries:
        lines.append(
            f"{s.strategy:<45} {s.mean_ratio:>8.2f} {s.median_ratio:>9.2f} {s.min_ratio:>8.2f} "
            f"{s.mean_time_ms:>10.3f} {s.p90_time_ms:>10.3f}"
        )
    return "\n".join(lines)
