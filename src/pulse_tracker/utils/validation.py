"""
Validation utilities for Pulse Tracker MCP tools.

Tool arguments arrive as JSON-ish values; these helpers turn them into engine
types or return an error message for the client.
"""

import re
from datetime import datetime, timedelta
from typing import Any

from pydantic import ValidationError

from pulse_tracker.analytics.strain import HeartRateSample, WorkoutSet
from pulse_tracker.ingest import HeartRateSamplePayload

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def resolve_date(date: str | None) -> tuple[str, str | None]:
    """Resolve a date argument, defaulting to today.

    Args:
        date: Date in YYYY-MM-DD format or None

    Returns:
        Tuple of (date string, error message or None)
    """
    if not date:
        return datetime.now().strftime("%Y-%m-%d"), None

    if not DATE_RE.match(date):
        return date, f"Error: Invalid date '{date}'. Use YYYY-MM-DD."

    try:
        datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        return date, f"Error: Invalid date '{date}'. Use YYYY-MM-DD."

    return date, None


def previous_date(date: str) -> str:
    """Return the calendar day before a YYYY-MM-DD date."""
    return (datetime.strptime(date, "%Y-%m-%d") - timedelta(days=1)).strftime("%Y-%m-%d")


def parse_hr_samples(raw_samples: list[dict[str, Any]]) -> list[HeartRateSample]:
    """Convert {timestamp, bpm, context?} dicts into HeartRateSample objects.

    Each item is checked against the same model the ingestion payload uses.

    Raises:
        ValueError: If a sample is missing a field or has an unparseable value
    """
    samples = []
    for index, item in enumerate(raw_samples):
        try:
            payload = HeartRateSamplePayload.model_validate(item)
        except ValidationError as e:
            details = "; ".join(err["msg"] for err in e.errors())
            raise ValueError(f"Invalid HR sample at index {index}: {details}") from e
        samples.append(
            HeartRateSample(
                timestamp=payload.timestamp,
                bpm=payload.bpm,
                context=payload.context,
            )
        )
    return samples


def parse_workout_sets(raw_sets: list[dict[str, Any]]) -> list[WorkoutSet]:
    """Convert {sets, reps?, weight_lbs?, exercise?} dicts into WorkoutSet objects.

    Raises:
        ValueError: If an entry has no set count or an unparseable value
    """
    workout_sets = []
    for index, item in enumerate(raw_sets):
        try:
            sets_count = item.get("sets_count", item.get("sets"))
            reps = item.get("reps")
            weight = item.get("weight_lbs")
            workout_sets.append(
                WorkoutSet(
                    sets_count=int(sets_count),
                    reps=int(reps) if reps is not None else None,
                    weight_lbs=float(weight) if weight is not None else None,
                    exercise=item.get("exercise"),
                )
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid workout set at index {index}: {e}") from e
    return workout_sets
