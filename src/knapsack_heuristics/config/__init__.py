"""
Configuration management and validation.

Provides Pydantic schemas and utilities for loading and validating
comparison configurations.
"""

from knapsack_heuristics.config.loader import (
    apply_overrides,
    config_to_dict,
    load_config,
    save_config,
    validate_config_file,
)
from knapsack_heuristics.config.schemas import (
    BenchmarkConfig,
    ExperimentConfig,
    GeneratorConfig,
    LoggingConfig,
    OutputConfig,
)

__all__ = [
    "ExperimentConfig",
    "GeneratorConfig",
    "BenchmarkConfig",
    "LoggingConfig",
    "OutputConfig",
    "load_config",
    "apply_overrides",
    "config_to_dict",
    "save_config",
    "validate_config_file",
]
