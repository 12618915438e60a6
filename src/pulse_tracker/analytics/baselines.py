"""Baseline windows built from daily history."""

import statistics
from typing import Any

# Scales MAD to the standard deviation of normally distributed readings
MAD_TO_SIGMA = 1.4826


def filter_outliers(values: list[float], threshold: float = 3.0) -> list[float]:
    """Drop readings whose modified z-score exceeds the threshold.

    A single bad night (a 255 ms HRV spike or a 5 ms dropout) would otherwise
    pull the baseline median. The spread is the median absolute deviation,
    so the outlier itself does not widen the band.

    Args:
        values: Daily readings, oldest first
        threshold: Largest modified z-score kept (default: 3.0)

    Returns:
        Surviving readings in their original order. Fewer than three readings,
        or readings with no spread, come back unchanged.
    """
    if len(values) < 3:
        return list(values)

    center = statistics.median(values)
    spread = statistics.median(abs(v - center) for v in values) * MAD_TO_SIGMA
    if spread == 0:
        return list(values)

    return [v for v in values if abs(v - center) / spread <= threshold]


def collect_baseline_values(
    data: list[dict[str, Any]],
    field: str,
    baseline_days: int = 7,
    end_date: str | None = None,
    filter_outliers_enabled: bool = False,
) -> list[float]:
    """Collect the recent values of a field to use as a personal baseline.

    Args:
        data: Daily records with an 'id' (YYYY-MM-DD) field
        field: Field name to collect (e.g. 'hrv_ms', 'rhr_bpm')
        baseline_days: Number of most recent days to include
        end_date: Exclude this date and anything after it (default: keep all)
        filter_outliers_enabled: Drop MAD outliers before returning

    Returns:
        Values in chronological order; empty when no day has the field
    """
    if not data:
        return []

    if end_date:
        data = [item for item in data if item.get("id", "") < end_date]

    # Most recent first, then cut the window
    window_data = sorted(data, key=lambda x: x.get("id", ""), reverse=True)[:baseline_days]

    values = [
        float(item[field])
        for item in reversed(window_data)
        if item.get(field) is not None
    ]

    if filter_outliers_enabled:
        values = filter_outliers(values)

    return values
