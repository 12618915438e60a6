"""Heart-rate zone model based on heart-rate reserve (Karvonen)."""

from dataclasses import dataclass
from typing import Any

from pulse_tracker.analytics.calibration import (
    GELLISH_INTERCEPT,
    GELLISH_SLOPE,
    ZONE_HRR_FRACTIONS,
)
from pulse_tracker.utils.numeric import round_half_up

ZONE_NAMES = ("zone1", "zone2", "zone3", "zone4", "zone5")
BELOW_ZONE = "below"


@dataclass(frozen=True)
class ZoneRange:
    """Inclusive BPM range of a single zone."""

    min: int
    max: int


@dataclass(frozen=True)
class HRZoneBounds:
    """Five contiguous BPM ranges, zone1 lowest, zone5 ending at max HR."""

    zone1: ZoneRange
    zone2: ZoneRange
    zone3: ZoneRange
    zone4: ZoneRange
    zone5: ZoneRange

    def get(self, zone: str) -> ZoneRange:
        return getattr(self, zone)

    def to_dict(self) -> dict[str, Any]:
        return {
            name: {"min": self.get(name).min, "max": self.get(name).max}
            for name in ZONE_NAMES
        }


def estimate_max_hr(age: float) -> int:
    """Estimate max HR with the Gellish formula.

    MaxHR = 207 - 0.7 × age

    Args:
        age: Age in years (non-negative)

    Returns:
        Estimated max heart rate (bpm)
    """
    return int(round_half_up(GELLISH_INTERCEPT - GELLISH_SLOPE * age))


def calculate_hr_zones(max_hr: int, resting_hr: int) -> HRZoneBounds:
    """Calculate HR zones using the heart-rate reserve method.

    HRR = MaxHR - RestingHR
    Zone threshold = RestingHR + HRR × fraction

    Each boundary is rounded on its own, so neighbouring zones may not share
    the exact same edge. Callers must ensure max_hr > resting_hr; with a
    non-positive reserve the zones collapse onto each other.

    Args:
        max_hr: Maximum heart rate (bpm)
        resting_hr: Resting heart rate (bpm)

    Returns:
        Zone bounds for zone1..zone5
    """
    hrr = max_hr - resting_hr

    def boundary(fraction: float) -> int:
        return int(round_half_up(resting_hr + hrr * fraction))

    ranges = {}
    for name in ZONE_NAMES:
        lower, upper = ZONE_HRR_FRACTIONS[name]
        top = max_hr if name == "zone5" else boundary(upper)
        ranges[name] = ZoneRange(min=boundary(lower), max=top)

    return HRZoneBounds(**ranges)


def classify_zone(bpm: float, zones: HRZoneBounds) -> str:
    """Return the zone a BPM reading falls into.

    Checks thresholds from zone5 down, so a reading sitting on a shared edge
    belongs to the higher zone.

    Args:
        bpm: Heart rate reading
        zones: Zone bounds for the athlete

    Returns:
        "zone1".."zone5", or "below" under the zone1 threshold
    """
    for name in reversed(ZONE_NAMES):
        if bpm >= zones.get(name).min:
            return name
    return BELOW_ZONE
