"""Tests for series cleaning and source selection."""

import math

import numpy as np
import pytest

from event_tracker import CleanedSeries
from event_tracker.analytics import clean_series, has_finite, select_series


class TestCleanSeries:
    """Test clean_series."""

    def test_keeps_only_finite_pairs_in_order(self):
        dates = ["2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05", "2024-01-08"]
        values = [100.0, None, float("nan"), 101.5, float("inf")]

        cleaned = clean_series(dates, values)

        assert cleaned.dates == ("2024-01-02", "2024-01-05")
        assert cleaned.values == (100.0, 101.5)

    def test_integers_and_numpy_scalars_are_kept_as_floats(self):
        cleaned = clean_series(["a", "b", "c"], [1, np.float64(2.5), np.int64(3)])

        assert cleaned.values == (1.0, 2.5, 3.0)
        assert all(isinstance(v, float) for v in cleaned.values)

    def test_non_numeric_values_are_dropped(self):
        cleaned = clean_series(["a", "b", "c", "d"], ["1.5", True, {}, 4.0])

        assert cleaned.dates == ("d",)
        assert cleaned.values == (4.0,)

    def test_all_missing_gives_empty_series(self):
        cleaned = clean_series(["a", "b", "c"], [None, None, float("nan")])

        assert cleaned.empty
        assert cleaned.dates == ()
        assert cleaned.values == ()

    def test_empty_input(self):
        assert clean_series([], []) == CleanedSeries()

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="differ in length"):
            clean_series(["a", "b"], [1.0])

    def test_output_never_longer_and_always_finite(self):
        dates = [f"d{i}" for i in range(20)]
        values = [None if i % 3 == 0 else (float("-inf") if i % 5 == 0 else i * 1.5) for i in range(20)]

        cleaned = clean_series(dates, values)

        assert len(cleaned) <= len(dates)
        assert len(cleaned.dates) == len(cleaned.values)
        assert all(math.isfinite(v) for v in cleaned.values)

    def test_idempotent(self):
        dates = ["a", "b", "c", "d"]
        values = [None, 2.0, float("nan"), 4.0]

        once = clean_series(dates, values)
        twice = clean_series(once.dates, once.values)

        assert twice == once

    def test_to_frame(self):
        frame = clean_series(["2024-01-02", "2024-01-03"], [1.0, None]).to_frame()

        assert list(frame.columns) == ["date", "value"]
        assert len(frame) == 1
        assert str(frame["date"].iloc[0].date()) == "2024-01-02"
        assert frame["value"].dtype == "float64"


class TestSelectSeries:
    """Test select_series."""

    def test_primary_with_any_finite_value_wins(self):
        primary = [None, None, 10.0]
        fallback = [1.0, 2.0, 3.0]

        assert select_series(primary, fallback) is primary

    def test_primary_wins_even_when_fallback_empty(self):
        primary = [5.0]

        assert select_series(primary, []) is primary

    def test_all_null_close_falls_back_to_adjclose(self):
        close = [None, None, None]
        adjclose = [101.2, 102.0, 100.8]

        chosen = select_series(close, adjclose)

        assert chosen is adjclose
        assert len(clean_series(["a", "b", "c"], chosen)) == 3

    def test_both_invalid_returns_primary(self):
        close = [None, None, None]
        adjclose = [None, float("nan"), None]

        chosen = select_series(close, adjclose)

        assert chosen is close
        assert clean_series(["a", "b", "c"], chosen).empty

    def test_has_finite(self):
        assert has_finite([None, 1.0])
        assert not has_finite([])
        assert not has_finite([None, float("nan"), float("inf")])


class TestOversizedIntegers:
    """Integers beyond float range are treated as missing values."""

    def test_clean_drops_value_too_large_for_float(self):
        cleaned = clean_series(["a", "b"], [10**400, 5.0])

        assert cleaned.dates == ("b",)
        assert cleaned.values == (5.0,)

    def test_select_falls_back_when_close_only_overflows(self):
        close = [10**400, -(10**400)]
        adjclose = [1.0, 2.0]

        assert not has_finite(close)
        assert select_series(close, adjclose) is adjclose
