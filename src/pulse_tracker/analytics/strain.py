"""Daily strain scoring (0-21).

Strain combines two raw loads:

1. Cardiovascular: time in HR zones weighted by an escalating factor per zone
   (a modified TRIMP)
2. Mechanical: resistance-training volume scaled by workout intensity

The summed raw load is mapped onto 0-21 with a saturating exponential,
so every extra point is harder to earn than the last.
"""

import math
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Iterable, Sequence

from pulse_tracker.analytics.calibration import (
    MAX_STRAIN,
    MECHANICAL_K,
    SENSOR_GAP_MINUTES,
    STRAIN_K,
    ZONE_WEIGHTS,
)
from pulse_tracker.analytics.zones import (
    BELOW_ZONE,
    ZONE_NAMES,
    HRZoneBounds,
    calculate_hr_zones,
    classify_zone,
    estimate_max_hr,
)
from pulse_tracker.utils.numeric import clamp, round_half_up


@dataclass(frozen=True)
class HeartRateSample:
    """One instantaneous heart-rate reading."""

    timestamp: datetime
    bpm: int
    context: str = "active"


@dataclass(frozen=True)
class WorkoutSet:
    """One logged resistance entry, e.g. 3×10 @ 135 lbs."""

    sets_count: int
    reps: int | None = None
    weight_lbs: float | None = None
    exercise: str | None = None

    @property
    def volume(self) -> float:
        return self.sets_count * (self.reps or 0) * (self.weight_lbs or 0)


@dataclass(frozen=True)
class ZoneMinutes:
    """Minutes attributed to each zone plus time under zone1."""

    zone1: float = 0.0
    zone2: float = 0.0
    zone3: float = 0.0
    zone4: float = 0.0
    zone5: float = 0.0
    below: float = 0.0

    @property
    def active(self) -> float:
        return sum(getattr(self, name) for name in ZONE_NAMES)

    def rounded(self) -> "ZoneMinutes":
        return ZoneMinutes(**{k: int(round_half_up(v)) for k, v in asdict(self).items()})


@dataclass(frozen=True)
class StrainResult:
    """Outcome of a strain calculation.

    cardiovascular_strain and mechanical_strain are each mapped through the
    saturating curve on their own. Because the curve is non-linear they do
    not add up to score, and are not meant to.
    """

    score: float
    cardiovascular_strain: float
    mechanical_strain: float
    raw_strain: float
    zone_minutes: ZoneMinutes = field(default_factory=ZoneMinutes)
    total_active_minutes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def calculate_cardiovascular_strain(
    samples: Iterable[HeartRateSample],
    zones: HRZoneBounds,
) -> tuple[float, ZoneMinutes]:
    """Calculate raw cardiovascular strain from heart rate samples.

    Each interval between consecutive samples is credited to the zone of the
    later sample. Intervals longer than the sensor gap limit count for nothing.

    Args:
        samples: HR samples in any order
        zones: Zone bounds for this athlete

    Returns:
        Tuple of (raw strain, unrounded minutes per zone)
    """
    ordered = sorted(samples, key=lambda s: s.timestamp)
    if len(ordered) < 2:
        return 0.0, ZoneMinutes()

    minutes = {name: 0.0 for name in (*ZONE_NAMES, BELOW_ZONE)}
    raw_strain = 0.0

    for prev, curr in zip(ordered, ordered[1:]):
        delta_min = (curr.timestamp - prev.timestamp).total_seconds() / 60
        if delta_min > SENSOR_GAP_MINUTES:
            continue

        zone = classify_zone(curr.bpm, zones)
        minutes[zone] += delta_min
        if zone != BELOW_ZONE:
            raw_strain += delta_min * ZONE_WEIGHTS[zone]

    return raw_strain, ZoneMinutes(**minutes)


def calculate_mechanical_strain(
    sets: Sequence[WorkoutSet],
    avg_hr: float | None,
    max_hr: int,
    resting_hr: int,
    personal_factor: float = 1.0,
    mechanical_k: float = MECHANICAL_K,
) -> float:
    """Calculate raw mechanical strain from resistance training.

    Raw = Volume × K × Intensity

    Intensity starts at the personal factor and, when the workout's average
    HR is known, is scaled linearly from 0.5× (avg at resting HR) to 1.5×
    (avg at max HR).

    Args:
        sets: Logged resistance entries
        avg_hr: Average HR during the workout, if known
        max_hr: Athlete max HR
        resting_hr: Athlete resting HR
        personal_factor: Learned personal intensity (1.0 = population average)
        mechanical_k: Volume calibration constant

    Returns:
        Raw mechanical strain
    """
    if not sets:
        return 0.0

    total_volume = sum(s.volume for s in sets)

    intensity_factor = personal_factor
    hrr = max_hr - resting_hr
    if avg_hr is not None and hrr > 0:
        intensity_factor *= 0.5 + (avg_hr - resting_hr) / hrr

    return total_volume * mechanical_k * intensity_factor


def strain_from_raw(raw_strain: float) -> float:
    """Map raw load onto the 0-21 scale.

    Strain = 21 × (1 - e^(-k × raw))
    """
    return clamp(MAX_STRAIN * (1 - math.exp(-STRAIN_K * raw_strain)), 0.0, MAX_STRAIN)


def calculate_strain_score(
    samples: Iterable[HeartRateSample],
    workout_sets: Sequence[WorkoutSet],
    age: float,
    resting_hr: int,
    avg_workout_hr: float | None = None,
    personal_factor: float = 1.0,
    actual_max_hr: int | None = None,
    mechanical_k: float = MECHANICAL_K,
) -> StrainResult:
    """Calculate the day's strain score (0-21).

    Args:
        samples: HR samples for the day
        workout_sets: Resistance entries for the day
        age: Athlete age (years)
        resting_hr: Resting HR (bpm)
        avg_workout_hr: Average HR during resistance work (optional)
        personal_factor: Personal intensity factor (default: 1.0)
        actual_max_hr: Observed max HR; used when above the age estimate
        mechanical_k: Volume calibration constant

    Returns:
        StrainResult with score, breakdown and zone minutes
    """
    max_hr = estimate_max_hr(age)
    if actual_max_hr:
        max_hr = max(max_hr, actual_max_hr)
    zones = calculate_hr_zones(max_hr, resting_hr)

    cv_raw, zone_minutes = calculate_cardiovascular_strain(samples, zones)
    mech_raw = calculate_mechanical_strain(
        workout_sets, avg_workout_hr, max_hr, resting_hr, personal_factor, mechanical_k
    )
    total_raw = cv_raw + mech_raw

    return StrainResult(
        score=round_half_up(strain_from_raw(total_raw), 1),
        cardiovascular_strain=round_half_up(strain_from_raw(cv_raw), 1),
        mechanical_strain=round_half_up(strain_from_raw(mech_raw), 1),
        raw_strain=total_raw,
        zone_minutes=zone_minutes.rounded(),
        total_active_minutes=int(round_half_up(zone_minutes.active)),
    )


def get_strain_label(score: float) -> str:
    """Describe a strain score.

    Args:
        score: Strain score (0-21)

    Returns:
        Label string
    """
    if score <= 4:
        return "Light"
    elif score <= 8:
        return "Low"
    elif score <= 13:
        return "Medium"
    elif score <= 17:
        return "High"
    else:
        return "All Out"


def get_strain_percentage(score: float) -> int:
    """Express a strain score as 0-100 % of the scale."""
    return int(round_half_up(score / MAX_STRAIN * 100))
