"""
Formatting utilities for Pulse Tracker MCP Server

This module turns engine results into readable text for MCP clients.
"""

from datetime import datetime

from pulse_tracker.analytics.recovery import (
    COMPONENT_KEYS,
    RecoveryResult,
    get_recovery_label,
    get_recovery_recommendation,
)
from pulse_tracker.analytics.strain import (
    StrainResult,
    get_strain_label,
    get_strain_percentage,
)
from pulse_tracker.analytics.zones import ZONE_NAMES, HRZoneBounds

COMPONENT_LABELS = {
    "hrv": "HRV",
    "rhr": "Resting HR",
    "sleep": "Sleep duration",
    "sleepQuality": "Sleep quality",
    "strain": "Previous day strain",
    "subjective": "Subjective wellness",
}


def format_date_with_day_of_week(date_value: str) -> str:
    """Format a YYYY-MM-DD date with its day of week (e.g. "Saturday, 2026-02-21").

    Returns the original value if parsing fails.
    """
    try:
        day_of_week = datetime.strptime(date_value[:10], "%Y-%m-%d").strftime("%A")
        return f"{day_of_week}, {date_value}"
    except (ValueError, TypeError):
        return date_value


def format_hr_zones(zones: HRZoneBounds, max_hr: int, resting_hr: int) -> str:
    """Format HR zone bounds as a table."""
    output = ["Heart Rate Zones (HR reserve method):\n"]
    output.append(f"  Max HR: {max_hr} bpm")
    output.append(f"  Resting HR: {resting_hr} bpm")
    output.append(f"  HR reserve: {max_hr - resting_hr} bpm\n")
    for number, name in enumerate(ZONE_NAMES, start=1):
        bounds = zones.get(name)
        output.append(f"  Zone {number}: {bounds.min}-{bounds.max} bpm")
    return "\n".join(output)


def format_strain_result(result: StrainResult, date: str, max_hr: int, resting_hr: int) -> str:
    """Format a strain result with its breakdown and time in zones."""
    output = [f"Strain for {format_date_with_day_of_week(date)}:\n"]

    output.append(
        f"Strain: {result.score:.1f} / 21 - {get_strain_label(result.score)}"
        f" ({get_strain_percentage(result.score)}%)"
    )
    output.append(f"  Cardiovascular: {result.cardiovascular_strain:.1f}")
    output.append(f"  Mechanical: {result.mechanical_strain:.1f}")
    output.append(f"  Raw load: {result.raw_strain:.1f}")
    output.append(f"  Max HR used: {max_hr} bpm")
    output.append(f"  Resting HR used: {resting_hr} bpm")
    output.append("  Note: sub-scores are mapped separately and do not sum to the total")

    output.append("\nTime in Zones:")
    minutes = result.zone_minutes
    for number, name in enumerate(ZONE_NAMES, start=1):
        output.append(f"  Zone {number}: {getattr(minutes, name)} min")
    output.append(f"  Below zone 1: {minutes.below} min")
    output.append(f"  Total active: {result.total_active_minutes} min")

    return "\n".join(output)


def format_recovery_result(result: RecoveryResult, date: str) -> str:
    """Format a recovery result with the per-factor breakdown."""
    output = [f"Recovery for {format_date_with_day_of_week(date)}:\n"]

    output.append(f"Recovery: {result.score}% - {get_recovery_label(result.score)}")
    output.append(f"  Data completeness: {result.data_completeness}%")
    output.append(f"  Recommendation: {get_recovery_recommendation(result.score)}")

    output.append("\nBreakdown:")
    for key in COMPONENT_KEYS:
        component = result.breakdown[key]
        label = COMPONENT_LABELS[key]
        if component.available:
            output.append(
                f"  {label}: {component.score:.0f}/100 (weight {component.weight * 100:.0f}%)"
            )
        else:
            output.append(f"  {label}: N/A")

    return "\n".join(output)
