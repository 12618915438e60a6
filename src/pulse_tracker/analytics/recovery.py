"""Recovery and readiness scoring.

Recovery (0-100 %) is a weighted composite of:
  - HRV vs. personal baseline      (30%)
  - Resting HR vs. baseline        (25%)
  - Sleep duration vs. target      (20%)
  - Sleep quality                  (10%)
  - Previous day strain            (10%)
  - Subjective wellness            (5%)

Components without data drop out and the remaining weights are rescaled to
sum to 1.0.
"""

import statistics
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from pulse_tracker.analytics.calibration import (
    DEFAULT_SLEEP_TARGET_HOURS,
    HRV_SATURATION,
    MAX_COMPONENT_SCORE,
    MIN_COMPONENT_SCORE,
    NEUTRAL_SCORE,
    RECOVERY_BASE_WEIGHTS,
    RHR_SATURATION,
    STRAIN_IMPACT_BASE,
    STRAIN_IMPACT_SLOPE,
)
from pulse_tracker.utils.numeric import clamp, round_half_up

COMPONENT_KEYS = ("hrv", "rhr", "sleep", "sleepQuality", "strain", "subjective")


@dataclass(frozen=True)
class RecoveryInputs:
    """Today's readings plus the personal baselines they are compared with."""

    current_hrv: float | None = None
    current_rhr: float | None = None
    sleep_hours: float | None = None
    sleep_quality: float | None = None
    previous_day_strain: float | None = None
    subjective_energy: float | None = None
    subjective_soreness: float | None = None
    subjective_stress: float | None = None
    hrv_baseline: Sequence[float] = ()
    rhr_baseline: Sequence[float] = ()
    sleep_target: float = DEFAULT_SLEEP_TARGET_HOURS


@dataclass(frozen=True)
class RecoveryComponent:
    """Score and weight of one recovery factor."""

    key: str
    score: float = 0.0
    weight: float = 0.0
    available: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "weight": self.weight, "available": self.available}


@dataclass(frozen=True)
class RecoveryResult:
    """Final recovery score with its per-factor breakdown."""

    score: int
    breakdown: dict[str, RecoveryComponent] = field(default_factory=dict)
    data_completeness: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "breakdown": {key: comp.to_dict() for key, comp in self.breakdown.items()},
            "data_completeness": self.data_completeness,
        }


def _bounded(score: float) -> float:
    return clamp(score, MIN_COMPONENT_SCORE, MAX_COMPONENT_SCORE)


def calculate_baseline(values: Sequence[float]) -> float:
    """Calculate a baseline as the median of recent values.

    For an even count the upper of the two middle values is used.

    Args:
        values: Recent daily values

    Returns:
        Baseline value, or 0 when there are no values
    """
    if not values:
        return 0
    return statistics.median_high(values)


def score_hrv(current: float, baseline: Sequence[float]) -> float:
    """Score HRV relative to the baseline median.

    +20 % above the median saturates near 99, -20 % below near 1.
    """
    if not baseline:
        return NEUTRAL_SCORE

    median = calculate_baseline(baseline)
    if median == 0:
        return NEUTRAL_SCORE

    deviation = (current - median) / median
    return _bounded(50 + (deviation / HRV_SATURATION) * 50)


def score_rhr(current: float, baseline: Sequence[float]) -> float:
    """Score resting HR relative to the lowest baseline value.

    Lower than the best recent RHR scores above 50.
    """
    if not baseline:
        return NEUTRAL_SCORE

    lowest = min(baseline)
    if lowest == 0:
        return NEUTRAL_SCORE

    deviation = (lowest - current) / lowest
    return _bounded(50 + (deviation / RHR_SATURATION) * 50)


def score_sleep(hours: float, target: float) -> float:
    """Score sleep duration against the target.

    With an 8 h target: 8 h+ → 80-99, 7-8 h → 70 rising steeply to the
    99 cap, 6-7 h → 40-70, under 6 h → 1-40.
    """
    if target <= 0:
        return NEUTRAL_SCORE

    ratio = hours / target

    if ratio >= 1.0:
        score = 80 + (ratio - 1.0) * 100
    elif ratio >= 0.875:
        score = 70 + (ratio - 0.875) * 800
    elif ratio >= 0.75:
        score = 40 + (ratio - 0.75) * 240
    else:
        score = ratio * 53

    return _bounded(score)


def score_sleep_quality(quality: float) -> float:
    """Map 1-5 sleep quality linearly onto 1-99."""
    return _bounded((quality - 1) * 25)


def score_strain_impact(strain: float) -> float:
    """Score how much yesterday's strain eats into recovery.

    Strain 0 → 70, 10 → 37, 21 → 1.
    """
    return _bounded(STRAIN_IMPACT_BASE - strain * STRAIN_IMPACT_SLOPE)


def score_subjective(
    energy: float | None,
    soreness: float | None,
    stress: float | None,
) -> float:
    """Score subjective wellness from whichever 1-5 ratings were given.

    Missing ratings are left out of the average, not defaulted.
    """
    values = [v for v in (energy, soreness, stress) if v is not None]
    if not values:
        return NEUTRAL_SCORE
    return _bounded((statistics.mean(values) - 1) * 25)


def _score_components(inputs: RecoveryInputs) -> list[RecoveryComponent]:
    """Score every factor that has data; the rest come back unavailable."""

    def available(key: str, score: float) -> RecoveryComponent:
        return RecoveryComponent(key, score, RECOVERY_BASE_WEIGHTS[key], True)

    components = []

    if inputs.current_hrv is not None and inputs.hrv_baseline:
        components.append(available("hrv", score_hrv(inputs.current_hrv, inputs.hrv_baseline)))
    else:
        components.append(RecoveryComponent("hrv"))

    if inputs.current_rhr is not None and inputs.rhr_baseline:
        components.append(available("rhr", score_rhr(inputs.current_rhr, inputs.rhr_baseline)))
    else:
        components.append(RecoveryComponent("rhr"))

    if inputs.sleep_hours is not None:
        components.append(available("sleep", score_sleep(inputs.sleep_hours, inputs.sleep_target)))
    else:
        components.append(RecoveryComponent("sleep"))

    if inputs.sleep_quality is not None:
        components.append(available("sleepQuality", score_sleep_quality(inputs.sleep_quality)))
    else:
        components.append(RecoveryComponent("sleepQuality"))

    if inputs.previous_day_strain is not None:
        components.append(available("strain", score_strain_impact(inputs.previous_day_strain)))
    else:
        components.append(RecoveryComponent("strain"))

    subjective = (inputs.subjective_energy, inputs.subjective_soreness, inputs.subjective_stress)
    if any(v is not None for v in subjective):
        components.append(available("subjective", score_subjective(*subjective)))
    else:
        components.append(RecoveryComponent("subjective"))

    return components


def calculate_recovery(inputs: RecoveryInputs) -> RecoveryResult:
    """Calculate the recovery score (1-99).

    Weights of missing factors are redistributed proportionally over the
    factors that have data. data_completeness is the share of the total base
    weight that had data, taken before renormalising.

    Args:
        inputs: Today's readings and baselines

    Returns:
        RecoveryResult; score 50 and completeness 0 when nothing is available
    """
    components = _score_components(inputs)
    present = [c for c in components if c.available]
    total_available_weight = sum(c.weight for c in present)

    if not present or total_available_weight == 0:
        return RecoveryResult(
            score=NEUTRAL_SCORE,
            breakdown={c.key: c for c in components},
            data_completeness=0,
        )

    normalized = [
        replace(c, weight=c.weight / total_available_weight) if c.available else c
        for c in components
    ]
    composite = sum(c.score * c.weight for c in normalized if c.available)

    return RecoveryResult(
        score=int(clamp(round_half_up(composite), MIN_COMPONENT_SCORE, MAX_COMPONENT_SCORE)),
        breakdown={c.key: c for c in normalized},
        data_completeness=int(round_half_up(total_available_weight * 100)),
    )


def get_recovery_label(score: float) -> str:
    """Traffic-light label for a recovery score."""
    if score <= 33:
        return "Red"
    elif score <= 66:
        return "Yellow"
    else:
        return "Green"


def get_recovery_recommendation(score: float) -> str:
    """Training recommendation for a recovery score.

    Args:
        score: Recovery score (0-100)

    Returns:
        Recommendation text
    """
    if score <= 20:
        return "Rest day recommended. Focus on sleep and nutrition."
    elif score <= 33:
        return "Light activity only. Active recovery, stretching, or walking."
    elif score <= 50:
        return "Moderate activity OK. Avoid high intensity."
    elif score <= 66:
        return "Good to train. Monitor how you feel during the session."
    elif score <= 80:
        return "Great recovery. You're ready for a solid session."
    else:
        return "Peak recovery! You're optimally recovered for a hard effort."
