"""
Unit tests for baseline windows and outlier filtering.
"""

import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from pulse_tracker.analytics.baselines import (  # pylint: disable=wrong-import-position
    collect_baseline_values,
    filter_outliers,
)

DAILY_HISTORY = [
    {"id": "2026-02-14", "hrv_ms": 47.0, "rhr_bpm": 52.0},
    {"id": "2026-02-15", "hrv_ms": 38.0, "rhr_bpm": 58.0},
    {"id": "2026-02-16", "hrv_ms": 42.0, "rhr_bpm": 58.0},
    {"id": "2026-02-17", "hrv_ms": 42.0, "rhr_bpm": 55.0},
    {"id": "2026-02-18", "hrv_ms": 40.0, "rhr_bpm": 62.0},
    {"id": "2026-02-19", "hrv_ms": 255.0, "rhr_bpm": 63.0},  # Outlier
    {"id": "2026-02-20", "hrv_ms": 45.0, "rhr_bpm": 53.0},
    {"id": "2026-02-21", "hrv_ms": 40.0, "rhr_bpm": 62.0},  # Today
]


def test_filter_outliers_removes_extreme_values():
    """Test outlier detection removes extreme values."""
    # HRV values with one extreme outlier
    values = [40.0, 42.0, 38.0, 255.0, 45.0, 47.0, 40.0]
    filtered = filter_outliers(values, threshold=3.0)

    assert 255.0 not in filtered
    assert len(filtered) == 6
    assert all(v < 100 for v in filtered)


def test_filter_outliers_preserves_normal_variation():
    """Test outlier detection preserves normal variation."""
    values = [40.0, 42.0, 38.0, 45.0, 47.0, 40.0, 43.0]
    filtered = filter_outliers(values, threshold=3.0)

    assert filtered == values


def test_filter_outliers_handles_small_sample():
    """Test outlier filtering with small sample (<3 values)."""
    values = [40.0, 255.0]
    assert filter_outliers(values, threshold=3.0) == values


def test_filter_outliers_removes_low_dropout():
    """Test a near-zero dropout reading is removed like a spike."""
    values = [40.0, 42.0, 44.0, 5.0, 46.0, 48.0, 50.0]
    assert filter_outliers(values) == [40.0, 42.0, 44.0, 46.0, 48.0, 50.0]


def test_filter_outliers_without_spread_keeps_everything():
    """Test mostly identical readings give no spread to judge against."""
    values = [50.0, 50.0, 50.0, 50.0, 80.0]
    assert filter_outliers(values) == values


def test_collect_baseline_excludes_today():
    """Test the baseline window stops before the end date, oldest first."""
    hrv = collect_baseline_values(DAILY_HISTORY, "hrv_ms", baseline_days=7, end_date="2026-02-21")
    rhr = collect_baseline_values(DAILY_HISTORY, "rhr_bpm", baseline_days=7, end_date="2026-02-21")

    assert hrv == [47.0, 38.0, 42.0, 42.0, 40.0, 255.0, 45.0]
    assert rhr == [52.0, 58.0, 58.0, 55.0, 62.0, 63.0, 53.0]


def test_collect_baseline_window_size():
    """Test only the most recent baseline_days entries are kept."""
    values = collect_baseline_values(DAILY_HISTORY, "hrv_ms", baseline_days=3, end_date="2026-02-21")
    assert values == [40.0, 255.0, 45.0]


def test_collect_baseline_with_outlier_filtering():
    """Test the optional MAD filter drops the 255 ms reading."""
    values = collect_baseline_values(
        DAILY_HISTORY,
        "hrv_ms",
        baseline_days=7,
        end_date="2026-02-21",
        filter_outliers_enabled=True,
    )
    assert 255.0 not in values
    assert len(values) == 6


def test_collect_baseline_unsorted_input():
    """Test records in any order come back chronological."""
    shuffled = list(reversed(DAILY_HISTORY))
    values = collect_baseline_values(shuffled, "rhr_bpm", baseline_days=2, end_date="2026-02-21")
    assert values == [63.0, 53.0]


def test_collect_baseline_with_empty_data():
    """Test empty history yields an empty baseline."""
    assert collect_baseline_values([], "hrv_ms") == []


def test_collect_baseline_with_missing_and_none_values():
    """Test days without the field, or with None, are skipped."""
    data = [
        {"id": "2026-02-18", "hrv_ms": 45.0},
        {"id": "2026-02-19"},
        {"id": "2026-02-20", "hrv_ms": None},
        {"id": "2026-02-21", "hrv_ms": 40.0},
    ]
    values = collect_baseline_values(data, "hrv_ms", baseline_days=7, end_date="2026-02-21")
    assert values == [45.0]


if __name__ == "__main__":
    import pytest

    sys.exit(pytest.main([__file__, "-v"]))
