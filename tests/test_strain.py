"""
Unit tests for the strain engine.
"""

import math
import pathlib
import sys
from datetime import datetime, timedelta

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from pulse_tracker.analytics.strain import (  # pylint: disable=wrong-import-position
    HeartRateSample,
    WorkoutSet,
    calculate_cardiovascular_strain,
    calculate_mechanical_strain,
    calculate_strain_score,
    get_strain_label,
    get_strain_percentage,
    strain_from_raw,
)
from pulse_tracker.analytics.zones import calculate_hr_zones  # pylint: disable=wrong-import-position

START = datetime(2026, 2, 20, 7, 0, 0)
ZONES = calculate_hr_zones(186, 60)


def _samples(*points: tuple[float, int]) -> list[HeartRateSample]:
    """Build samples from (minutes after start, bpm) pairs."""
    return [HeartRateSample(START + timedelta(minutes=m), bpm) for m, bpm in points]


def test_cardiovascular_strain_needs_two_samples():
    """Test zero or one sample yields no strain and no minutes."""
    for samples in ([], _samples((0, 175))):
        raw, minutes = calculate_cardiovascular_strain(samples, ZONES)
        assert raw == 0
        assert minutes.active == 0
        assert minutes.below == 0


def test_cardiovascular_strain_zone5_interval():
    """Test a 5 minute interval at 175 bpm counts as zone5 with weight 8."""
    raw, minutes = calculate_cardiovascular_strain(_samples((0, 175), (5, 175)), ZONES)

    assert raw == 40
    assert minutes.zone5 == 5
    assert minutes.zone4 == 0


def test_cardiovascular_strain_uses_later_sample_zone():
    """Test the interval is credited to the zone of the later sample."""
    raw, minutes = calculate_cardiovascular_strain(_samples((0, 100), (5, 170)), ZONES)

    # 170 bpm is zone4 (161-173) for these zones
    assert minutes.zone4 == 5
    assert raw == 25


def test_cardiovascular_strain_skips_sensor_gap():
    """Test an interval over 10 minutes contributes nothing."""
    raw, minutes = calculate_cardiovascular_strain(_samples((0, 175), (11, 175)), ZONES)

    assert raw == 0
    assert minutes.zone5 == 0
    assert minutes.below == 0


def test_cardiovascular_strain_keeps_ten_minute_interval():
    """Test an interval of exactly 10 minutes still counts."""
    raw, minutes = calculate_cardiovascular_strain(_samples((0, 130), (10, 130)), ZONES)

    assert minutes.zone1 == 10
    assert raw == 10


def test_cardiovascular_strain_below_zone1():
    """Test time under zone1 goes to the below bucket with no strain."""
    raw, minutes = calculate_cardiovascular_strain(_samples((0, 90), (5, 100)), ZONES)

    assert raw == 0
    assert minutes.below == 5
    assert minutes.active == 0


def test_cardiovascular_strain_sorts_samples():
    """Test samples out of order are sorted by timestamp first."""
    ordered = _samples((0, 130), (2, 140), (4, 175))
    shuffled = [ordered[2], ordered[0], ordered[1]]

    raw, minutes = calculate_cardiovascular_strain(shuffled, ZONES)

    # 2 min zone2 (×2) + 2 min zone5 (×8)
    assert raw == 20
    assert minutes.zone2 == 2
    assert minutes.zone5 == 2


def test_mechanical_strain_volume_without_hr():
    """Test 3×10 @ 135 lbs gives volume 4050 scaled by K."""
    raw = calculate_mechanical_strain([WorkoutSet(3, 10, 135)], None, 186, 60)
    assert math.isclose(raw, 4050 * 0.000015)


def test_mechanical_strain_hr_intensity_range():
    """Test average HR at resting gives 0.5× and at max gives 1.5×."""
    sets = [WorkoutSet(3, 10, 135)]
    base = 4050 * 0.000015

    assert math.isclose(calculate_mechanical_strain(sets, 60, 186, 60), base * 0.5)
    assert math.isclose(calculate_mechanical_strain(sets, 186, 186, 60), base * 1.5)
    assert math.isclose(calculate_mechanical_strain(sets, 123, 186, 60), base * 1.0)


def test_mechanical_strain_personal_factor():
    """Test personal factor multiplies the intensity."""
    raw = calculate_mechanical_strain([WorkoutSet(3, 10, 135)], None, 186, 60, personal_factor=2.0)
    assert math.isclose(raw, 4050 * 0.000015 * 2.0)


def test_mechanical_strain_missing_reps_or_weight():
    """Test entries without reps or weight contribute nothing."""
    sets = [WorkoutSet(3, None, 135), WorkoutSet(3, 10, None), WorkoutSet(1, 5, 100)]
    raw = calculate_mechanical_strain(sets, None, 186, 60)
    assert math.isclose(raw, 500 * 0.000015)


def test_mechanical_strain_zero_hr_reserve_skips_hr_scaling():
    """Test max HR equal to resting HR leaves the volume unscaled."""
    raw = calculate_mechanical_strain([WorkoutSet(3, 10, 135)], 150, 60, 60)
    assert math.isclose(raw, 4050 * 0.000015)


def test_mechanical_strain_negative_hr_reserve_skips_hr_scaling():
    """Test max HR below resting HR leaves the volume unscaled."""
    raw = calculate_mechanical_strain([WorkoutSet(3, 10, 135)], 150, 55, 60, personal_factor=2.0)
    assert math.isclose(raw, 4050 * 0.000015 * 2.0)


def test_mechanical_strain_no_sets():
    """Test no sets means no mechanical strain regardless of HR."""
    assert calculate_mechanical_strain([], 180, 186, 60, personal_factor=3.0) == 0


def test_strain_from_raw_monotonic_and_bounded():
    """Test the mapping never decreases and stays within 0-21."""
    raws = [0, 1, 10, 100, 1000, 5000, 10000, 50000, 100000]
    scores = [strain_from_raw(r) for r in raws]

    assert scores == sorted(scores)
    assert scores[0] == 0
    assert all(0 <= s <= 21 for s in scores)
    assert 20.9 < strain_from_raw(100000) <= 21


def test_strain_sub_scores_are_mapped_independently():
    """Test separately mapped sub-scores add up to more than the total."""
    assert strain_from_raw(3000) + strain_from_raw(3000) > strain_from_raw(6000)


def test_calculate_strain_score_example_day():
    """Test age 30, RHR 60, 5 minutes at 175 bpm."""
    result = calculate_strain_score(_samples((0, 175), (5, 175)), [], age=30, resting_hr=60)

    expected = 21 * (1 - math.exp(-0.00035 * 40))
    assert math.isclose(expected, 0.292, abs_tol=0.001)
    assert result.score == 0.3
    assert result.cardiovascular_strain == 0.3
    assert result.mechanical_strain == 0
    assert result.raw_strain == 40
    assert result.zone_minutes.zone5 == 5
    assert result.total_active_minutes == 5


def test_calculate_strain_score_mechanical_is_minor():
    """Test typical gym volume barely moves the score."""
    result = calculate_strain_score([], [WorkoutSet(3, 10, 135)], age=30, resting_hr=60)

    assert math.isclose(result.raw_strain, 0.06075)
    assert result.mechanical_strain == 0.0
    assert result.score == 0.0
    assert result.total_active_minutes == 0


def test_calculate_strain_score_uses_higher_actual_max_hr():
    """Test an observed max HR above the estimate shifts the zones up."""
    samples = _samples((0, 175), (5, 175))

    # Max 200: zone5 starts at 186, so 175 bpm is zone4
    raised = calculate_strain_score(samples, [], age=30, resting_hr=60, actual_max_hr=200)
    assert raised.zone_minutes.zone4 == 5
    assert raised.raw_strain == 25

    # Observed max below the estimate is ignored
    lowered = calculate_strain_score(samples, [], age=30, resting_hr=60, actual_max_hr=150)
    assert lowered.zone_minutes.zone5 == 5


def test_calculate_strain_score_rounds_zone_minutes():
    """Test zone minutes come back as whole numbers."""
    samples = [
        HeartRateSample(START, 175),
        HeartRateSample(START + timedelta(seconds=90), 175),
    ]
    result = calculate_strain_score(samples, [], age=30, resting_hr=60)

    # 1.5 minutes rounds half up
    assert result.zone_minutes.zone5 == 2
    assert result.raw_strain == 12


def test_calculate_strain_score_long_session_stays_bounded():
    """Test a long hard session scores high but under 21."""
    samples = _samples(*[(m, 180) for m in range(900)])
    result = calculate_strain_score(samples, [WorkoutSet(5, 5, 315)], age=30, resting_hr=60)

    assert 0 < result.score <= 21
    assert result.score >= 17
    assert get_strain_label(result.score) == "All Out"


def test_strain_result_to_dict():
    """Test result serialization includes zone minutes."""
    result = calculate_strain_score(_samples((0, 175), (5, 175)), [], age=30, resting_hr=60)
    data = result.to_dict()

    assert data["score"] == 0.3
    assert data["zone_minutes"]["zone5"] == 5
    assert set(data["zone_minutes"]) == {"zone1", "zone2", "zone3", "zone4", "zone5", "below"}


def test_get_strain_label():
    """Test strain labels at band edges."""
    assert get_strain_label(0) == "Light"
    assert get_strain_label(4) == "Light"
    assert get_strain_label(4.1) == "Low"
    assert get_strain_label(8) == "Low"
    assert get_strain_label(13) == "Medium"
    assert get_strain_label(17) == "High"
    assert get_strain_label(17.1) == "All Out"


def test_get_strain_percentage():
    """Test strain as a share of the 0-21 scale."""
    assert get_strain_percentage(0) == 0
    assert get_strain_percentage(10.5) == 50
    assert get_strain_percentage(21) == 100


if __name__ == "__main__":
    import pytest

    sys.exit(pytest.main([__file__, "-v"]))
