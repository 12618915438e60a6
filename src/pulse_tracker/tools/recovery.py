"""Recovery and readiness tools."""

import logging

from pulse_tracker.analytics.baselines import collect_baseline_values
from pulse_tracker.analytics.recovery import RecoveryInputs, calculate_recovery
from pulse_tracker.config import get_config
from pulse_tracker.history import history
from pulse_tracker.mcp_instance import mcp
from pulse_tracker.utils.formatting import format_recovery_result
from pulse_tracker.utils.validation import previous_date, resolve_date

config = get_config()
logger = logging.getLogger(__name__)


def _pick(value, summary: dict, field: str):
    """Prefer the explicit argument, then the stored value for the day."""
    return value if value is not None else summary.get(field)


@mcp.tool()
async def get_recovery_score(
    date: str | None = None,
    hrv_ms: float | None = None,
    rhr_bpm: float | None = None,
    sleep_hours: float | None = None,
    sleep_quality: int | None = None,
    previous_day_strain: float | None = None,
    subjective_energy: int | None = None,
    subjective_soreness: int | None = None,
    subjective_stress: int | None = None,
    hrv_baseline: list[float] | None = None,
    rhr_baseline: list[float] | None = None,
    sleep_target: float | None = None,
    filter_outliers: bool | None = None,
) -> str:
    """Calculate the recovery score (1-99%) for a day.

    Recovery is a weighted composite; missing factors give their weight to
    the ones that have data:
    - HRV vs. baseline median: 30%
    - Resting HR vs. lowest baseline RHR: 25%
    - Sleep duration vs. target: 20%
    - Sleep quality: 10%
    - Previous day strain: 10%
    - Subjective wellness: 5%

    Labels: 0-33 Red, 34-66 Yellow, 67+ Green.

    Any reading not passed in is taken from the ingested data for the date,
    previous day strain from the day before, and baselines from the
    PULSE_BASELINE_DAYS days before the date.

    Args:
        date: Date in YYYY-MM-DD format (optional, defaults to today)
        hrv_ms: Today's HRV in ms (optional)
        rhr_bpm: Today's resting HR in bpm (optional)
        sleep_hours: Hours slept last night (optional)
        sleep_quality: Sleep quality 1-5 (optional)
        previous_day_strain: Yesterday's strain 0-21 (optional)
        subjective_energy: Energy 1-5 (optional)
        subjective_soreness: Soreness 1-5, 5 = not sore (optional)
        subjective_stress: Stress 1-5, 5 = not stressed (optional)
        hrv_baseline: Recent daily HRV values (optional)
        rhr_baseline: Recent daily resting HR values (optional)
        sleep_target: Target sleep in hours (optional, will use PULSE_SLEEP_TARGET_HOURS from .env if not provided)
        filter_outliers: Drop outlier days from history-derived baselines (optional, will use PULSE_FILTER_OUTLIERS from .env if not provided)
    """
    date, error_msg = resolve_date(date)
    if error_msg:
        return error_msg

    summary = history.get_summary(date) or {}
    yesterday = history.get_summary(previous_date(date)) or {}

    if filter_outliers is None:
        filter_outliers = config.filter_outliers

    if hrv_baseline is None or rhr_baseline is None:
        past_days = history.summaries()
        if hrv_baseline is None:
            hrv_baseline = collect_baseline_values(
                past_days,
                "hrv_ms",
                baseline_days=config.baseline_days,
                end_date=date,
                filter_outliers_enabled=filter_outliers,
            )
        if rhr_baseline is None:
            rhr_baseline = collect_baseline_values(
                past_days,
                "rhr_bpm",
                baseline_days=config.baseline_days,
                end_date=date,
                filter_outliers_enabled=filter_outliers,
            )

    inputs = RecoveryInputs(
        current_hrv=_pick(hrv_ms, summary, "hrv_ms"),
        current_rhr=_pick(rhr_bpm, summary, "rhr_bpm"),
        sleep_hours=_pick(sleep_hours, summary, "sleep_hours"),
        sleep_quality=_pick(sleep_quality, summary, "sleep_quality"),
        previous_day_strain=_pick(previous_day_strain, yesterday, "strain_score"),
        subjective_energy=_pick(subjective_energy, summary, "subjective_energy"),
        subjective_soreness=_pick(subjective_soreness, summary, "subjective_soreness"),
        subjective_stress=_pick(subjective_stress, summary, "subjective_stress"),
        hrv_baseline=tuple(hrv_baseline),
        rhr_baseline=tuple(rhr_baseline),
        sleep_target=sleep_target if sleep_target is not None else config.sleep_target_hours,
    )

    result = calculate_recovery(inputs)
    history.record_recovery(date, result.score)
    logger.info(
        "Recovery for %s: %d%% (data completeness %d%%)",
        date,
        result.score,
        result.data_completeness,
    )

    return format_recovery_result(result, date)
