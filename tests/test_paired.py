"""
Unit Tests for column selection and the difference engine.
"""

import math

import pytest

from ttest_tutor.stats.errors import DataTypeError, ValidationError
from ttest_tutor.stats.paired import (
    build_paired_sample,
    column_values,
    compute_differences,
    is_numeric,
    select_columns,
)


class TestSelectColumns:

    def test_first_two_numeric_in_key_order(self):
        records = [{"Name": "a", "Post": 3, "Flag": True, "Pre": 1.5, "Extra": 9}]
        assert select_columns(records) == ("Post", "Pre")

    def test_only_first_record_is_inspected(self):
        """Later rows are never read during selection."""
        records = [{"A": 1, "B": 2}, {"A": "oops", "B": None}]
        assert select_columns(records) == ("A", "B")

    def test_single_numeric_column_raises(self):
        with pytest.raises(ValidationError, match="at least two numerical columns"):
            select_columns([{"Name": "a", "Score": 4}])

    def test_blank_first_row_value_is_not_numeric(self):
        with pytest.raises(ValidationError):
            select_columns([{"A": 1, "B": None}])

    def test_empty_record_set_raises(self):
        with pytest.raises(ValidationError, match="empty"):
            select_columns([])


class TestIsNumeric:

    @pytest.mark.parametrize("value", [0, -3, 2.5, float("nan")])
    def test_numbers(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", [True, False, "3", None, [1]])
    def test_non_numbers(self, value):
        assert not is_numeric(value)


class TestDifferences:

    def test_elementwise_col1_minus_col2(self, scenario_a):
        assert compute_differences(scenario_a, "X", "Y") == [2, 3, 2, 1, 4]

    def test_order_and_length_preserved(self, long_series):
        diffs = compute_differences(long_series, "Pre", "Post")
        assert diffs == [r["Pre"] - r["Post"] for r in long_series]

    def test_reversed_columns_negate(self, scenario_a):
        assert compute_differences(scenario_a, "Y", "X") == [-2, -3, -2, -1, -4]

    @pytest.mark.parametrize(
        "bad_value", [None, "12", float("nan"), float("inf"), float("-inf"), True],
    )
    def test_bad_cell_reports_row(self, scenario_a, bad_value):
        scenario_a[3]["Y"] = bad_value
        with pytest.raises(DataTypeError) as exc_info:
            compute_differences(scenario_a, "X", "Y")
        assert exc_info.value.row_index == 3
        assert exc_info.value.column == "Y"
        assert "Row 3" in exc_info.value.message

    def test_missing_key_reports_row(self, scenario_a):
        del scenario_a[1]["X"]
        with pytest.raises(DataTypeError) as exc_info:
            compute_differences(scenario_a, "X", "Y")
        assert exc_info.value.row_index == 1

    def test_first_offending_row_wins(self, scenario_a):
        scenario_a[4]["X"] = None
        scenario_a[2]["Y"] = "n/a"
        with pytest.raises(DataTypeError) as exc_info:
            compute_differences(scenario_a, "X", "Y")
        assert exc_info.value.row_index == 2


class TestPairedSample:

    def test_bundle(self, scenario_a):
        sample = build_paired_sample(scenario_a, "X", "Y")
        assert sample.col1 == "X" and sample.col2 == "Y"
        assert sample.first == (10, 12, 9, 11, 13)
        assert sample.second == (8, 9, 7, 10, 9)
        assert sample.differences == (2, 3, 2, 1, 4)
        assert sample.n == 5

    def test_column_values_are_floats(self, scenario_a):
        values = column_values(scenario_a, "X")
        assert values == [10.0, 12.0, 9.0, 11.0, 13.0]
        assert all(isinstance(v, float) and not math.isnan(v) for v in values)
