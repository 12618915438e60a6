"""
Scoring engines for daily strain and recovery.

This package contains pure, stateless calculations:
- HR zone model (heart-rate reserve)
- Strain: zone-weighted cardio load plus resistance volume, mapped to 0-21
- Recovery: weighted composite of HRV, RHR, sleep, prior strain and
  subjective wellness, mapped to 1-99
- Baseline windows over daily history
- Calibration constants shared by all of the above
"""

__all__ = [
    "baselines",
    "calibration",
    "recovery",
    "strain",
    "zones",
]
