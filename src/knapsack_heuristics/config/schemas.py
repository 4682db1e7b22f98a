"""
Pydantic schemas for configuration validation.

Defines the structure and validation rules for comparison configuration files.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from knapsack_heuristics.strategies import DEFAULT_TRIALS, StrategyRegistry
from knapsack_heuristics.strategies.ordering import TOP_VALUE_FRACTION


class GeneratorConfig(BaseModel):
    """Random instance generation settings."""

    model_config = {"extra": "forbid"}

    n_items_min: int = Field(default=10, description="Minimum number of items", ge=0)
    n_items_max: int = Field(default=50, description="Maximum number of items", ge=0)
    weight_range: tuple[int, int] = Field(default=(1, 100), description="Range for item weights")
    value_range: tuple[int, int] = Field(default=(1, 100), description="Range for item values")
    capacity_ratio: float = Field(
        default=0.5,
        description="Capacity as fraction of total weight",
        ge=0.0,
        le=1.0,
    )

    @field_validator("value_range", "weight_range")
    @classmethod
    def check_valid_range(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Ensure range is valid (0 <= min <= max)."""
        if v[0] > v[1]:
            raise ValueError(f"Invalid range: {v}. Min must be <= Max.")
        if v[0] < 0:
            raise ValueError(f"Range minimum must be >= 0, got {v[0]}")
        return v

    @model_validator(mode="after")
    def check_items_range(self) -> "GeneratorConfig":
        """Ensure n_items_min <= n_items_max."""
        if self.n_items_min > self.n_items_max:
            raise ValueError(
                f"n_items_min ({self.n_items_min}) must be <= n_items_max ({self.n_items_max})"
            )
        return self


class BenchmarkConfig(BaseModel):
    """Batch comparison settings."""

    model_config = {"extra": "forbid"}

    n_instances: int = Field(default=50, description="Number of generated instances", ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = {"extra": "forbid"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    log_file: Path | None = Field(default=None, description="Optional log file")


class OutputConfig(BaseModel):
    """Result export destinations."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    csv: Path | None = Field(default=None, description="CSV export path")
    json_path: Path | None = Field(default=None, alias="json", description="JSON export path")


class ExperimentConfig(BaseModel):
    """Complete comparison configuration."""

    seed: int | None = Field(default=42, description="Random seed (null for unseeded runs)")
    trials: int = Field(default=DEFAULT_TRIALS, description="Monte Carlo trials", ge=1)
    top_fraction: float = Field(
        default=TOP_VALUE_FRACTION,
        description="Fraction of items kept by the top-value Monte Carlo strategy",
        gt=0.0,
        le=1.0,
    )
    strategies: list[str] | None = Field(
        default=None, description="Strategies to run, in order (null for all)"
    )

    generator: GeneratorConfig = Field(
        default_factory=GeneratorConfig, description="Instance generator configuration"
    )
    benchmark: BenchmarkConfig = Field(
        default_factory=BenchmarkConfig, description="Benchmark configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output configuration")

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: int | None) -> int | None:
        """Validate seed range."""
        if v is not None and not (0 <= v < 2**32):
            raise ValueError(f"Seed must be in range [0, {2**32 - 1}], got {v}")
        return v

    @field_validator("strategies")
    @classmethod
    def validate_strategies(cls, v: list[str] | None) -> list[str] | None:
        """Ensure every strategy name is registered."""
        if v is None:
            return v
        known = StrategyRegistry.list_strategies()
        unknown = [name for name in v if name not in known]
        if unknown:
            raise ValueError(f"Unknown strategies {unknown}. Available: {', '.join(known)}")
        return v

    model_config = {"extra": "forbid", "validate_assignment": True}
