"""
Comparison reporting and I/O utilities.

Handles ranking, text tables, and export of results to CSV and JSON.
"""

import csv
import json
import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from pathlib import Path
from typing import Literal

from knapsack_heuristics.eval.comparator import Comparison
from knapsack_heuristics.strategies.result import Result
from knapsack_heuristics.types import PathLike
from knapsack_heuristics.utils.error_handler import ValidationError

logger = logging.getLogger(__name__)

RankKey = Literal["value", "weight", "time"]

RULE_WIDTH = 80

_RANK_KEYS = {
    "value": lambda r: -r.total_value,
    "weight": lambda r: r.total_weight,
    "time": lambda r: r.elapsed_ns,
}


def rank_results(results: Iterable[Result], by: RankKey = "value") -> list[Result]:
    """
    Rank results for display.

    Args:
        results: Results in execution order
        by: "value" (highest first), "weight" (lightest first) or "time" (fastest first)

    Returns:
        New list; equal keys keep execution order

    Raises:
        ValidationError: If ``by`` is not a known rank key
    """
    if by not in _RANK_KEYS:
        raise ValidationError(
            f"Unknown rank key '{by}'",
            suggestion=f"Choose from: {', '.join(_RANK_KEYS)}",
        )
    return sorted(results, key=_RANK_KEYS[by])


def format_result(result: Result, detailed: bool = False) -> str:
    """Render one result as a titled block."""
    lines = [
        "=" * 60,
        result.strategy,
        "=" * 60,
        f"Total Value: {result.total_value:.2f}",
        f"Total Weight: {result.total_weight:.2f}",
        f"Execution Time: {result.elapsed_ms:.3f} ms",
    ]
    if detailed:
        lines.append(f"Selected Items: {list(result.selected_items)}")
    return "\n".join(lines)


def format_results_table(
    results: Sequence[Result], optimal_value: float | None = None, title: str = "SUMMARY - ALL RESULTS"
) -> str:
    """
    Render results as a fixed-width table.

    Args:
        results: Results in the order they should be listed
        optimal_value: Reference value for the "% of ref" column (omitted if None)
        title: Table title

    Returns:
        Multi-line table string
    """
    header = f"{'Algorithm':<45} {'Value':>12} {'Weight':>12} {'Time (ms)':>15}"
    if optimal_value is not None:
        header += f" {'% of ref':>10}"

    lines = ["=" * RULE_WIDTH, title, "=" * RULE_WIDTH, header, "-" * RULE_WIDTH]
    for r in results:
        row = f"{r.strategy:<45} {r.total_value:>12.2f} {r.total_weight:>12.2f} {r.elapsed_ms:>15.3f}"
        if optimal_value is not None:
            row += f" {r.optimality_ratio(optimal_value):>10.2f}"
        lines.append(row)

    return "\n".join(lines)


def format_comparison(comparison: Comparison, rank_by: RankKey | None = None) -> str:
    """
    Render a comparison: instance header plus results table.

    Args:
        comparison: Comparison to render
        rank_by: Optional ranking; None keeps execution order

    Returns:
        Multi-line report string
    """
    instance = comparison.instance
    label = instance.name or "<instance>"
    results = list(comparison.results)
    if rank_by is not None:
        results = rank_results(results, by=rank_by)

    header = [
        "=" * RULE_WIDTH,
        f"RUNNING ALL ALGORITHMS ON: {label}",
        f"Dataset: {instance.n_items} items, Capacity: {instance.capacity}",
        f"Reference (fractional optimum): {comparison.reference_value:.2f}",
    ]
    table = format_results_table(results, optimal_value=comparison.reference_value)
    return "\n".join(header) + "\n" + table


def export_results_to_csv(comparison: Comparison, filepath: PathLike) -> Path:
    """
    Export comparison results to CSV format, one row per strategy.

    Args:
        comparison: Comparison to export
        filepath: Path to save CSV file

    Returns:
        Path written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "instance",
        "strategy",
        "total_value",
        "total_weight",
        "elapsed_ms",
        "optimality_ratio",
        "selected_items",
        "timestamp",
    ]
    timestamp = datetime.now().isoformat()

    with open(filepath, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in comparison.results:
            writer.writerow(
                {
                    "instance": comparison.instance.name or "",
                    "strategy": r.strategy,
                    "total_value": r.total_value,
                    "total_weight": r.total_weight,
                    "elapsed_ms": r.elapsed_ms,
                    "optimality_ratio": r.optimality_ratio(comparison.reference_value),
                    "selected_items": " ".join(str(i) for i in r.selected_items),
                    "timestamp": timestamp,
                }
            )

    logger.info("Results exported to CSV: %s", filepath)
    return filepath


def save_results_to_json(comparison: Comparison, filepath: PathLike) -> Path:
    """
    Save a comparison to a JSON file.

    Args:
        comparison: Comparison to save
        filepath: Output filepath

    Returns:
        Path written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    payload = comparison.to_dict()
    payload["timestamp"] = datetime.now().isoformat()

    with open(filepath, "w") as f:
        json.dump(payload, f, indent=2)

    logger.info("Results saved to %s", filepath)
    return filepath


def create_results_dataframe(results: Iterable[Result]):
    """
    Convert results to pandas DataFrame for analysis.

    Args:
        results: Results to tabulate

    Returns:
        DataFrame with one row per result

    Note:
        Requires pandas to be installed
    """
    try:
        import pandas as pd

        return pd.DataFrame([r.to_dict() for r in results])
    except ImportError as err:
        raise ImportError(
            "pandas is required for DataFrame export. Install with: pip install pandas"
        ) from err
