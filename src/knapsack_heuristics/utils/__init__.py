"""Utility functions for logging and error handling."""

from knapsack_heuristics.utils.error_handler import (
    ConfigurationError,
    DataError,
    KnapsackHeuristicsError,
    ValidationError,
)
from knapsack_heuristics.utils.logger import (
    log_experiment_config,
    log_metrics,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "log_experiment_config",
    "log_metrics",
    "KnapsackHeuristicsError",
    "ConfigurationError",
    "DataError",
    "ValidationError",
]
