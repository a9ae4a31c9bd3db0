"""Tests for event window mapping."""

import pytest

from event_tracker import Event
from event_tracker.analytics import build_windows


class TestBuildWindows:
    """Test build_windows."""

    def test_clamps_start_to_first_date(self, trading_dates):
        event = Event(ticker="AAPL", date="2024-01-04", label="Supplier update")

        windows = build_windows(trading_dates, [event], radius=3)

        assert len(windows) == 1
        window = windows[0]
        assert (window.start_index, window.end_index) == (0, 5)
        assert window.start_date == "2024-01-02"
        assert window.end_date == "2024-01-09"
        assert window.label == "Supplier update"
        assert window.event_date == "2024-01-04"

    def test_clamps_both_ends_on_short_axis(self, trading_dates):
        windows = build_windows(trading_dates, [Event(ticker="AAPL", date="2024-01-05")], radius=3)

        assert (windows[0].start_index, windows[0].end_index) == (0, 6)
        assert windows[0].start_date == trading_dates[0]
        assert windows[0].end_date == trading_dates[-1]

    def test_clamps_end_to_last_date(self, trading_dates):
        windows = build_windows(trading_dates, [Event(ticker="AAPL", date="2024-01-10")], radius=2)

        assert (windows[0].start_index, windows[0].end_index) == (4, 6)

    def test_event_on_non_trading_day_is_skipped(self, trading_dates):
        windows = build_windows(trading_dates, [Event(ticker="AAPL", date="2024-01-07")])

        assert windows == []

    def test_one_window_per_matching_event_in_input_order(self, trading_dates, aapl_events):
        windows = build_windows(trading_dates, aapl_events)

        assert [w.event_date for w in windows] == ["2024-01-04", "2024-01-09"]

    def test_default_label(self, trading_dates):
        windows = build_windows(trading_dates, [Event(ticker="AAPL", date="2024-01-08", label="")])

        assert windows[0].label == "Event"

    def test_overlapping_windows_are_not_merged(self, trading_dates):
        events = [
            Event(ticker="AAPL", date="2024-01-04", label="A"),
            Event(ticker="AAPL", date="2024-01-05", label="B"),
            Event(ticker="AAPL", date="2024-01-05", label="B again"),
        ]

        windows = build_windows(trading_dates, events)

        assert len(windows) == 3
        assert len({w.key for w in windows}) == 3

    def test_keys_are_deterministic(self, trading_dates, aapl_events):
        first = [w.key for w in build_windows(trading_dates, aapl_events)]
        second = [w.key for w in build_windows(trading_dates, aapl_events)]

        assert first == second
        assert first[0].startswith("ev_AAPL_2024-01-04_")

    def test_indices_always_within_bounds(self, trading_dates):
        events = [Event(ticker="AAPL", date=d) for d in trading_dates]

        for radius in range(0, 10):
            for window in build_windows(trading_dates, events, radius=radius):
                assert 0 <= window.start_index <= window.end_index <= len(trading_dates) - 1

    def test_zero_radius_is_single_point(self, trading_dates):
        windows = build_windows(trading_dates, [Event(ticker="AAPL", date="2024-01-08")], radius=0)

        assert windows[0].start_date == windows[0].end_date == "2024-01-08"

    def test_empty_axis(self, aapl_events):
        assert build_windows([], aapl_events) == []

    def test_negative_radius_rejected(self, trading_dates):
        with pytest.raises(ValueError):
            build_windows(trading_dates, [], radius=-1)
