"""
Configuration loading and validation utilities.

Provides functions to load YAML configs and validate them against Pydantic schemas.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from knapsack_heuristics.config.schemas import ExperimentConfig
from knapsack_heuristics.utils.error_handler import ConfigurationError


def _format_validation_errors(e: ValidationError) -> str:
    errors = []
    for error in e.errors():
        loc = " -> ".join(str(x) for x in error["loc"])
        errors.append(f"  - {loc}: {error['msg']}")
    return "\n".join(errors)


def load_config(config_path: str | Path) -> ExperimentConfig:
    """
    Load and validate comparison configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ExperimentConfig object

    Raises:
        ConfigurationError: If file not found, invalid YAML, or validation fails

    Example:
        >>> config = load_config("configs/compare.yaml")
        >>> print(f"Using seed: {config.seed}, trials: {config.trials}")
    """
    config_file = Path(config_path)

    if not config_file.is_file():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            suggestion="Check the path or start from configs/default.yaml.",
        )

    if config_file.suffix not in (".yaml", ".yml"):
        raise ConfigurationError(
            f"Configuration file must be YAML format, got: {config_file.suffix}",
            suggestion="Use .yaml or .yml extension for configuration files.",
        )

    try:
        with open(config_file) as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file: {config_path}",
            suggestion=f"Fix YAML syntax error: {e}",
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}",
            suggestion=f"Error: {e}",
        ) from e

    if config_dict is None:
        raise ConfigurationError(
            f"Empty configuration file: {config_path}",
            suggestion="Add configuration parameters to the YAML file.",
        )

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {config_path}",
            suggestion="Write the configuration as 'key: value' pairs.",
        )

    try:
        config = ExperimentConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed for {config_path}:\n{_format_validation_errors(e)}",
            suggestion="Fix the configuration errors listed above. "
            "See configs/default.yaml for a valid example.",
        ) from e

    return config


def apply_overrides(config: ExperimentConfig, **overrides: Any) -> ExperimentConfig:
    """
    Return a copy of ``config`` with command-line overrides applied.

    Overrides whose value is None are ignored, so unset CLI options keep the
    configured value.

    Raises:
        ConfigurationError: If an override fails validation
    """
    updates = {k: v for k, v in overrides.items() if v is not None}
    if not updates:
        return config

    merged = {**config_to_dict(config), **updates}
    try:
        return ExperimentConfig(**merged)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid command-line options:\n{_format_validation_errors(e)}",
            suggestion="Check the option values against `--help`.",
        ) from e


def validate_config_file(config_path: str | Path) -> tuple[bool, str]:
    """
    Validate config file without raising exceptions.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        load_config(config_path)
        return True, f"✓ Configuration is valid: {config_path}"
    except ConfigurationError as e:
        return False, f"✗ {e.message}"


def config_to_dict(config: ExperimentConfig) -> dict[str, Any]:
    """
    Convert ExperimentConfig to a plain, YAML-serialisable dictionary.

    Args:
        config: ExperimentConfig instance

    Returns:
        Dictionary representation of config
    """
    return config.model_dump(mode="json", by_alias=True)


def save_config(config: ExperimentConfig, output_path: str | Path) -> None:
    """
    Save ExperimentConfig to YAML file.

    Args:
        config: ExperimentConfig instance
        output_path: Path to save YAML file
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w") as f:
        yaml.dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False, indent=2)
