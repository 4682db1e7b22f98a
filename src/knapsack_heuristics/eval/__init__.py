"""Comparison harness, reporting and batch benchmarks."""

from knapsack_heuristics.eval.benchmark import (
    SummaryMetrics,
    format_summary_table,
    run_benchmark,
    summarize_comparisons,
)
from knapsack_heuristics.eval.comparator import (
    Comparison,
    compare,
    reference_value,
    resolve_strategies,
    run_strategy,
)
from knapsack_heuristics.eval.reporting import (
    create_results_dataframe,
    export_results_to_csv,
    format_comparison,
    format_result,
    format_results_table,
    rank_results,
    save_results_to_json,
)

__all__ = [
    "Comparison",
    "compare",
    "run_strategy",
    "reference_value",
    "resolve_strategies",
    "rank_results",
    "format_result",
    "format_results_table",
    "format_comparison",
    "export_results_to_csv",
    "save_results_to_json",
    "create_results_dataframe",
    "SummaryMetrics",
    "run_benchmark",
    "summarize_comparisons",
    "format_summary_table",
]
