"""Strain and heart rate zone tools."""

import logging
from typing import Any

from pulse_tracker.analytics.strain import calculate_strain_score
from pulse_tracker.analytics.zones import calculate_hr_zones, estimate_max_hr
from pulse_tracker.config import get_config
from pulse_tracker.history import history
from pulse_tracker.mcp_instance import mcp
from pulse_tracker.utils.formatting import format_hr_zones, format_strain_result
from pulse_tracker.utils.numeric import round_half_up
from pulse_tracker.utils.validation import parse_hr_samples, parse_workout_sets, resolve_date

config = get_config()
logger = logging.getLogger(__name__)


def _resolve_max_hr(age: int, actual_max_hr: int | None) -> int:
    max_hr = estimate_max_hr(age)
    if actual_max_hr:
        max_hr = max(max_hr, actual_max_hr)
    return max_hr


@mcp.tool()
async def get_hr_zones(
    age: int | None = None,
    resting_hr: int | None = None,
    actual_max_hr: int | None = None,
) -> str:
    """Get heart rate zones based on heart rate reserve.

    Max HR is estimated with the Gellish formula (207 - 0.7 × age), or the
    observed max HR when it is higher.

    Zones (fraction of HR reserve above resting HR):
    - Zone 1: 50-60%
    - Zone 2: 60-70%
    - Zone 3: 70-80%
    - Zone 4: 80-90%
    - Zone 5: 90-100%

    Args:
        age: Age in years (optional, will use PULSE_AGE from .env if not provided)
        resting_hr: Resting HR in bpm (optional, will use PULSE_RESTING_HR from .env if not provided)
        actual_max_hr: Observed max HR in bpm (optional)
    """
    age = age if age is not None else config.age
    resting_hr = resting_hr if resting_hr is not None else config.resting_hr
    max_hr = _resolve_max_hr(age, actual_max_hr)

    if max_hr <= resting_hr:
        return f"Error: Max HR ({max_hr} bpm) must be above resting HR ({resting_hr} bpm)"

    zones = calculate_hr_zones(max_hr, resting_hr)
    return format_hr_zones(zones, max_hr, resting_hr)


@mcp.tool()
async def get_strain_score(
    date: str | None = None,
    hr_samples: list[dict[str, Any]] | None = None,
    workout_sets: list[dict[str, Any]] | None = None,
    age: int | None = None,
    resting_hr: int | None = None,
    avg_workout_hr: float | None = None,
    personal_factor: float = 1.0,
    actual_max_hr: int | None = None,
) -> str:
    """Calculate the strain score (0-21) for a day.

    Strain combines time in HR zones (weighted 1/2/3/5/8 for zones 1-5) with
    resistance training volume, mapped onto 0-21 with a saturating curve:
    - 0-4: Light
    - 4-8: Low
    - 8-13: Medium
    - 13-17: High
    - 17-21: All Out

    The score is stored in the daily history and feeds the next day's recovery.

    Args:
        date: Date in YYYY-MM-DD format (optional, defaults to today)
        hr_samples: HR readings as [{"timestamp": ISO-8601, "bpm": int}] (optional, defaults to ingested samples for the date)
        workout_sets: Resistance entries as [{"sets": int, "reps": int, "weight_lbs": float}] (optional)
        age: Age in years (optional, will use PULSE_AGE from .env if not provided)
        resting_hr: Resting HR in bpm (optional, defaults to the day's ingested RHR, then PULSE_RESTING_HR)
        avg_workout_hr: Average HR during resistance work in bpm (optional)
        personal_factor: Personal intensity factor, 1.0 = population average (default: 1.0)
        actual_max_hr: Observed max HR in bpm (optional)
    """
    date, error_msg = resolve_date(date)
    if error_msg:
        return error_msg

    try:
        samples = (
            parse_hr_samples(hr_samples) if hr_samples is not None else history.get_samples(date)
        )
        sets = parse_workout_sets(workout_sets or [])
    except ValueError as e:
        return f"Error: {e}"

    if len({s.timestamp.tzinfo is None for s in samples}) > 1:
        return "Error: HR sample timestamps mix timezone-aware and naive values"

    if resting_hr is None:
        summary = history.get_summary(date) or {}
        stored_rhr = summary.get("rhr_bpm")
        if stored_rhr is not None:
            resting_hr = int(round_half_up(stored_rhr))
        else:
            resting_hr = config.resting_hr

    age = age if age is not None else config.age
    max_hr = _resolve_max_hr(age, actual_max_hr)
    if max_hr <= resting_hr:
        return f"Error: Max HR ({max_hr} bpm) must be above resting HR ({resting_hr} bpm)"

    result = calculate_strain_score(
        samples,
        sets,
        age=age,
        resting_hr=resting_hr,
        avg_workout_hr=avg_workout_hr,
        personal_factor=personal_factor,
        actual_max_hr=actual_max_hr,
        mechanical_k=config.mechanical_k,
    )
    history.record_strain(date, result.score)
    logger.info("Strain for %s: %.1f (raw %.1f)", date, result.score, result.raw_strain)

    return format_strain_result(result, date, max_hr, resting_hr)
