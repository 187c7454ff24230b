"""Tests for the Census national-metrics aggregation."""

import pytest

from inequality_dashboard.metrics.census import aggregate_states, state_frame
from tests.conftest import CENSUS_HEADER


class TestStateFrame:

    def test_excludes_puerto_rico_and_dc(self, state_rows):
        df = state_frame(CENSUS_HEADER, state_rows)
        assert list(df["NAME"]) == ["Alabama", "Alaska"]

    def test_match_is_case_sensitive_substring(self):
        rows = [
            ["puerto rico", "1", "1", "0.1", "72"],
            ["Commonwealth of Puerto Rico", "1", "1", "0.1", "72"],
        ]
        df = state_frame(CENSUS_HEADER, rows)
        assert list(df["NAME"]) == ["puerto rico"]


class TestAggregateStates:

    def test_national_metrics(self, state_rows):
        result = aggregate_states("2019", CENSUS_HEADER, state_rows)

        assert result.year == "2019"
        assert result.aggregate_income == 4000
        assert result.median_income == 60000
        # (0.40 * 1000 + 0.50 * 3000) / 4000
        assert result.gini_index == pytest.approx(0.475)
        assert result.skipped_values == 0

    def test_gini_within_bounds(self, state_rows):
        result = aggregate_states("2019", CENSUS_HEADER, state_rows)
        assert 0 <= result.gini_index <= 1

    def test_excluded_regions_never_contribute(self, state_rows):
        with_regions = aggregate_states("2019", CENSUS_HEADER, state_rows)
        states_only = aggregate_states("2019", CENSUS_HEADER, state_rows[:2])
        assert with_regions == states_only

    def test_all_aggregate_income_non_numeric(self):
        rows = [
            ["Alabama", "50000", "N/A", "0.40", "01"],
            ["Alaska", "70000", "null", "0.50", "02"],
        ]
        result = aggregate_states("2019", CENSUS_HEADER, rows)

        assert result.aggregate_income == 0
        assert result.gini_index is None
        assert result.median_income == 60000
        assert result.skipped_values == 2

    def test_invalid_median_is_excluded_and_counted(self, state_rows):
        state_rows[0][1] = "-"
        result = aggregate_states("2019", CENSUS_HEADER, state_rows)

        assert result.median_income == 70000
        assert result.skipped_values == 1

    def test_invalid_gini_drops_row_from_weighting_only(self, state_rows):
        state_rows[0][3] = "x"
        result = aggregate_states("2019", CENSUS_HEADER, state_rows)

        assert result.aggregate_income == 4000
        assert result.gini_index == pytest.approx(0.50)

    def test_no_states(self):
        rows = [["Puerto Rico", "20000", "500", "0.55", "72"]]
        result = aggregate_states("2019", CENSUS_HEADER, rows)

        assert result.aggregate_income == 0
        assert result.median_income is None
        assert result.gini_index is None

    def test_to_dict(self, state_rows):
        payload = aggregate_states("2019", CENSUS_HEADER, state_rows).to_dict()
        assert set(payload) == {
            "year", "medianIncome", "aggregateIncome", "giniIndex", "skippedValues",
        }

    def test_missing_column_raises(self):
        with pytest.raises(KeyError):
            aggregate_states("2019", ["NAME", "state"], [["Alabama", "01"]])
