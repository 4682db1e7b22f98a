"""
Integration tests for ranking, text reports and result export.
"""

import csv
import json

import pytest

from knapsack_heuristics.eval import (
    compare,
    create_results_dataframe,
    export_results_to_csv,
    format_comparison,
    format_result,
    format_results_table,
    rank_results,
    save_results_to_json,
)
from knapsack_heuristics.strategies import Result
from knapsack_heuristics.utils.error_handler import ValidationError


@pytest.fixture
def comparison(small_instance):
    return compare(
        small_instance,
        ["zero_one_ratio", "zero_one_value", "fractional_ratio", "zero_one_weight"],
        seed=42,
    )


class TestRanking:
    """Test suite for rank_results."""

    def test_rank_by_value(self, comparison):
        ranked = rank_results(comparison, by="value")
        values = [r.total_value for r in ranked]

        assert values == sorted(values, reverse=True)
        assert ranked[0].strategy == "Fractional - Greedy by Ratio"

    def test_ties_keep_execution_order(self):
        results = [Result("A", 5.0, 1.0, 3), Result("B", 5.0, 2.0, 1), Result("C", 9.0, 3.0, 2)]

        assert [r.strategy for r in rank_results(results)] == ["C", "A", "B"]
        assert [r.strategy for r in rank_results(results, by="weight")] == ["A", "B", "C"]
        assert [r.strategy for r in rank_results(results, by="time")] == ["B", "C", "A"]

    def test_ranking_does_not_touch_comparison(self, comparison):
        before = [r.strategy for r in comparison]
        rank_results(comparison, by="weight")
        assert [r.strategy for r in comparison] == before

    def test_unknown_rank_key(self, comparison):
        with pytest.raises(ValidationError, match="Unknown rank key") as exc_info:
            rank_results(comparison, by="ratio")

        assert "value, weight, time" in exc_info.value.suggestion


class TestTextReports:
    """Test suite for text rendering."""

    def test_format_result(self):
        text = format_result(Result("X", 160.0, 30.0, 2_500_000, (1, 2)), detailed=True)

        assert "Total Value: 160.00" in text
        assert "Total Weight: 30.00" in text
        assert "Execution Time: 2.500 ms" in text
        assert "Selected Items: [1, 2]" in text

    def test_format_result_brief(self):
        assert "Selected Items" not in format_result(Result("X"), detailed=False)

    def test_results_table(self, comparison):
        table = format_results_table(list(comparison), optimal_value=240.0)

        assert "SUMMARY - ALL RESULTS" in table
        assert "% of ref" in table
        assert "100.00" in table

    def test_table_without_reference(self, comparison):
        assert "% of ref" not in format_results_table(list(comparison))

    def test_format_comparison(self, comparison):
        text = format_comparison(comparison, rank_by="value")

        assert "RUNNING ALL ALGORITHMS ON: small" in text
        assert "Dataset: 3 items, Capacity: 50" in text
        assert "Reference (fractional optimum): 240.00" in text
        assert text.index("Fractional - Greedy by Ratio") < text.index("0-1 Knapsack - Greedy by Ratio")


class TestExport:
    """Test suite for CSV, JSON and DataFrame export."""

    def test_csv_export(self, comparison, tmp_path):
        path = export_results_to_csv(comparison, tmp_path / "out" / "results.csv")

        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))

        assert len(rows) == 4
        assert rows[0]["strategy"] == "0-1 Knapsack - Greedy by Ratio"
        assert rows[0]["selected_items"] == "1 2"
        assert float(rows[0]["total_value"]) == 160.0
        assert rows[0]["instance"] == "small"

    def test_json_export(self, comparison, tmp_path):
        path = save_results_to_json(comparison, tmp_path / "results.json")
        payload = json.loads(path.read_text())

        assert payload["reference_value"] == pytest.approx(240.0)
        assert [r["strategy"] for r in payload["results"]] == [r.strategy for r in comparison]
        assert payload["results"][1]["selected_items"] == [3, 2]
        assert "timestamp" in payload

    def test_dataframe(self, comparison):
        pytest.importorskip("pandas")
        df = create_results_dataframe(comparison)

        assert len(df) == 4
        assert set(df.columns) >= {"strategy", "total_value", "elapsed_ms"}
