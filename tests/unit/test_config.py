"""
Tests for configuration loading, overrides and the logging helpers.
"""

import logging
from pathlib import Path

import pytest

from knapsack_heuristics.config import (
    ExperimentConfig,
    apply_overrides,
    load_config,
    save_config,
    validate_config_file,
)
from knapsack_heuristics.utils.error_handler import ConfigurationError
from knapsack_heuristics.utils.logger import log_experiment_config, log_metrics, setup_logger

DEFAULT_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


def _write(tmp_path, text, name="config.yaml"):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestLoadConfig:
    """Test suite for YAML loading and validation."""

    def test_default_config_is_valid(self):
        config = load_config(DEFAULT_CONFIG)

        assert config.seed == 42
        assert config.trials == 1000
        assert config.top_fraction == 0.7
        assert config.strategies is None
        assert config.generator.weight_range == (1, 100)

    def test_partial_config_uses_defaults(self, tmp_path):
        config = load_config(_write(tmp_path, "trials: 25\nstrategies: [zero_one_ratio]\n"))

        assert config.trials == 25
        assert config.strategies == ["zero_one_ratio"]
        assert config.seed == 42
        assert config.logging.level == "INFO"

    def test_output_json_alias(self, tmp_path):
        config = load_config(_write(tmp_path, "output:\n  json: out/results.json\n"))
        assert config.output.json_path == Path("out/results.json")

    @pytest.mark.parametrize(
        "text, fragment",
        [
            ("trials: 0\n", "trials"),
            ("top_fraction: 1.5\n", "top_fraction"),
            ("strategies: [simulated_annealing]\n", "simulated_annealing"),
            ("unknown_key: 1\n", "unknown_key"),
            ("seed: -1\n", "seed"),
            ("generator:\n  n_items_min: 9\n  n_items_max: 3\n", "n_items_min"),
            ("generator:\n  weight_range: [10, 1]\n", "weight_range"),
            ("logging:\n  level: LOUD\n", "level"),
        ],
    )
    def test_invalid_values_rejected(self, tmp_path, text, fragment):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(_write(tmp_path, text))

        assert fragment in exc_info.value.message

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_wrong_suffix(self, tmp_path):
        with pytest.raises(ConfigurationError, match="YAML format"):
            load_config(_write(tmp_path, "trials: 5\n", name="config.json"))

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(_write(tmp_path, "trials: [1, 2\n"))

    def test_empty_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Empty"):
            load_config(_write(tmp_path, ""))

    def test_non_mapping(self, tmp_path):
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(_write(tmp_path, "- 1\n- 2\n"))

    def test_validate_config_file(self, tmp_path):
        ok, _ = validate_config_file(DEFAULT_CONFIG)
        bad, message = validate_config_file(_write(tmp_path, "trials: -3\n"))

        assert ok
        assert not bad
        assert "validation failed" in message


class TestOverrides:
    """Test suite for command-line overrides."""

    def test_none_values_keep_config(self):
        config = ExperimentConfig(trials=10)
        assert apply_overrides(config, trials=None, seed=None) is config

    def test_override_values(self):
        config = apply_overrides(ExperimentConfig(), trials=5, seed=7, top_fraction=0.5)

        assert (config.trials, config.seed, config.top_fraction) == (5, 7, 0.5)

    def test_invalid_override(self):
        with pytest.raises(ConfigurationError, match="command-line"):
            apply_overrides(ExperimentConfig(), trials=0)

    def test_save_and_reload(self, tmp_path):
        config = ExperimentConfig(trials=12, strategies=["monte_carlo_top", "zero_one_value"])
        config.output.json_path = Path("results.json")
        path = tmp_path / "nested" / "saved.yaml"

        save_config(config, path)
        reloaded = load_config(path)

        assert reloaded == config


class TestLogging:
    """Test suite for logger setup and structured log helpers."""

    def test_file_handler_writes(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        logger = setup_logger(log_file=log_file, level=logging.DEBUG, console_output=False)

        logger.debug("hello from the comparator")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "DEBUG" in content
        assert "hello from the comparator" in content
        assert not logger.propagate

    def test_setup_replaces_handlers(self, tmp_path):
        setup_logger(console_output=True)
        logger = setup_logger(log_file=tmp_path / "a.log", console_output=True)

        assert len(logger.handlers) == 2

    def test_structured_helpers(self, caplog):
        logger = logging.getLogger("knapsack_heuristics.test")

        with caplog.at_level(logging.INFO, logger="knapsack_heuristics.test"):
            log_experiment_config(logger, {"seed": 42, "trials": 1000}, "Comparison")
            log_metrics(logger, {"mean_ratio": 97.123456, "n_instances": 3}, prefix="zero_one_ratio |")

        assert "seed" in caplog.text
        assert "zero_one_ratio | mean_ratio: 97.1235 | n_instances: 3" in caplog.text
