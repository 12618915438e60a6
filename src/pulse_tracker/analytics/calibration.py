"""
Calibration constants for the strain and recovery engines.

All tunable numbers live here so recalibrating never touches formula code.
"""

# ============================================================
# STRAIN
# ============================================================
MAX_STRAIN = 21.0

# Saturation rate of the 0-21 mapping; a max-effort day lands around 18-20
STRAIN_K = 0.00035

# Volume (lbs) to raw strain; tuned empirically
MECHANICAL_K = 0.000015

# Consecutive samples further apart than this are treated as a sensor gap
SENSOR_GAP_MINUTES = 10.0

# Karvonen HR-reserve boundaries per zone: (lower, upper) fraction of HRR
ZONE_HRR_FRACTIONS = {
    "zone1": (0.50, 0.60),
    "zone2": (0.60, 0.70),
    "zone3": (0.70, 0.80),
    "zone4": (0.80, 0.90),
    "zone5": (0.90, 1.00),
}

# Raw strain per minute spent in each zone
ZONE_WEIGHTS = {
    "zone1": 1,
    "zone2": 2,
    "zone3": 3,
    "zone4": 5,
    "zone5": 8,
}

# Gellish max HR formula: 207 - 0.7 * age
GELLISH_INTERCEPT = 207.0
GELLISH_SLOPE = 0.7

# ============================================================
# RECOVERY
# ============================================================
RECOVERY_BASE_WEIGHTS = {
    "hrv": 0.30,
    "rhr": 0.25,
    "sleep": 0.20,
    "sleepQuality": 0.10,
    "strain": 0.10,
    "subjective": 0.05,
}

NEUTRAL_SCORE = 50
MIN_COMPONENT_SCORE = 1
MAX_COMPONENT_SCORE = 99

# Deviation from baseline that saturates the HRV / RHR component
HRV_SATURATION = 0.20
RHR_SATURATION = 0.15

# Previous-day strain impact: 70 at rest, minus 3.3 per strain point
STRAIN_IMPACT_BASE = 70.0
STRAIN_IMPACT_SLOPE = 3.3

DEFAULT_SLEEP_TARGET_HOURS = 8.0
