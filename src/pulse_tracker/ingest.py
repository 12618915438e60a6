"""
Ingestion payloads for externally sourced health data.

Shortcuts-style clients post one payload per calendar date. Every biometric
field is optional except the date.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Payload field -> daily summary column
SUMMARY_FIELDS = (
    "hrv_ms",
    "rhr_bpm",
    "sleep_hours",
    "sleep_quality",
    "subjective_energy",
    "subjective_soreness",
    "subjective_stress",
    "steps",
    "calories_burned",
)


class HeartRateSamplePayload(BaseModel):
    timestamp: datetime = Field(..., description="Time of the reading (ISO-8601)")
    bpm: int = Field(..., gt=0, lt=300, description="Heart rate (bpm)")
    context: str = Field("active", description="Reading context, e.g. resting or active")


class HealthDataPayload(BaseModel):
    date: str = Field(..., pattern=DATE_PATTERN, description="Calendar date (YYYY-MM-DD)")
    hrv_ms: Optional[float] = Field(None, gt=0, description="Overnight HRV (ms)")
    rhr_bpm: Optional[float] = Field(None, gt=0, description="Resting heart rate (bpm)")
    sleep_hours: Optional[float] = Field(None, ge=0, le=24, description="Total sleep (hours)")
    sleep_quality: Optional[int] = Field(None, ge=1, le=5, description="Sleep quality (1-5)")
    subjective_energy: Optional[int] = Field(None, ge=1, le=5)
    subjective_soreness: Optional[int] = Field(None, ge=1, le=5, description="5 = not sore")
    subjective_stress: Optional[int] = Field(None, ge=1, le=5, description="5 = not stressed")
    steps: Optional[int] = Field(None, ge=0)
    calories_burned: Optional[float] = Field(None, ge=0)
    hr_samples: List[HeartRateSamplePayload] = Field(default_factory=list)


def build_summary_patch(payload: HealthDataPayload) -> dict[str, Any]:
    """Return the daily summary fields the payload actually provided.

    Omitted fields are left out so an upsert never clears stored values.
    """
    patch: dict[str, Any] = {"id": payload.date}
    for name in SUMMARY_FIELDS:
        value = getattr(payload, name)
        if value is not None:
            patch[name] = value
    return patch
