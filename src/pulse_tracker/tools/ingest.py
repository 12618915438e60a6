"""
Health data ingestion MCP tool.

Accepts one day of externally sourced biometrics and records it in the daily
history used by the strain and recovery tools.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from pulse_tracker.analytics.strain import HeartRateSample
from pulse_tracker.history import history
from pulse_tracker.ingest import HealthDataPayload, build_summary_patch

# Import mcp instance from shared module for tool registration
from pulse_tracker.mcp_instance import mcp  # noqa: F401

logger = logging.getLogger(__name__)


def _format_validation_error(error: ValidationError) -> str:
    problems = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    ]
    return "Error: Invalid health data payload - " + "; ".join(problems)


@mcp.tool()
async def ingest_health_data(
    date: str,
    hrv_ms: float | None = None,
    rhr_bpm: float | None = None,
    sleep_hours: float | None = None,
    sleep_quality: int | None = None,
    subjective_energy: int | None = None,
    subjective_soreness: int | None = None,
    subjective_stress: int | None = None,
    steps: int | None = None,
    calories_burned: float | None = None,
    hr_samples: list[dict[str, Any]] | None = None,
) -> str:
    """Record one day of health data (e.g. posted by an Apple Shortcut).

    Only provided fields are stored; existing values for the date are kept.

    Args:
        date: Date in YYYY-MM-DD format (required)
        hrv_ms: Overnight HRV in ms
        rhr_bpm: Resting heart rate in bpm
        sleep_hours: Total sleep in hours
        sleep_quality: Sleep quality (1-5)
        subjective_energy: Energy level (1-5)
        subjective_soreness: Soreness (1-5, 5 = not sore)
        subjective_stress: Stress (1-5, 5 = not stressed)
        steps: Daily step count
        calories_burned: Active calories
        hr_samples: Raw HR readings as [{"timestamp": ISO-8601, "bpm": int, "context": str}]
    """
    try:
        payload = HealthDataPayload(
            date=date,
            hrv_ms=hrv_ms,
            rhr_bpm=rhr_bpm,
            sleep_hours=sleep_hours,
            sleep_quality=sleep_quality,
            subjective_energy=subjective_energy,
            subjective_soreness=subjective_soreness,
            subjective_stress=subjective_stress,
            steps=steps,
            calories_burned=calories_burned,
            hr_samples=hr_samples or [],
        )
    except ValidationError as e:
        logger.warning("Rejected health data for %s: %s", date, e)
        return _format_validation_error(e)

    results: dict[str, Any] = {}

    history.upsert_summary(build_summary_patch(payload))
    results["summary"] = "ok"

    if payload.hrv_ms is not None:
        results["hrv"] = "ok"

    if payload.hr_samples:
        added = history.add_samples(
            payload.date,
            [
                HeartRateSample(timestamp=s.timestamp, bpm=s.bpm, context=s.context)
                for s in payload.hr_samples
            ],
        )
        results["hr_samples"] = f"inserted {added}"

    logger.info("Ingested health data for %s: %s", payload.date, results)
    return json.dumps({"success": True, "date": payload.date, "results": results})
