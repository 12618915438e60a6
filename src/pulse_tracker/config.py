"""
Configuration for the Pulse Tracker MCP server.

Values come from environment variables, optionally loaded from a .env file.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from pulse_tracker.analytics.calibration import DEFAULT_SLEEP_TARGET_HOURS, MECHANICAL_K

VALID_TRANSPORTS = ("stdio", "sse")


@dataclass(frozen=True)
class Config:
    """Athlete defaults and server settings."""

    age: int = 32
    resting_hr: int = 60
    sleep_target_hours: float = DEFAULT_SLEEP_TARGET_HOURS
    baseline_days: int = 7
    mechanical_k: float = MECHANICAL_K
    filter_outliers: bool = False
    transport: str = "stdio"
    log_level: str = "INFO"


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> Config:
    """Build a Config from the environment.

    Raises:
        ValueError: If a numeric variable cannot be parsed or the transport is unknown
    """
    load_dotenv()

    transport = os.getenv("MCP_TRANSPORT", "stdio").lower()
    if transport not in VALID_TRANSPORTS:
        raise ValueError(f"Unsupported MCP_TRANSPORT: {transport}. Use one of {VALID_TRANSPORTS}")

    return Config(
        age=_env_number("PULSE_AGE", 32, int),
        resting_hr=_env_number("PULSE_RESTING_HR", 60, int),
        sleep_target_hours=_env_number("PULSE_SLEEP_TARGET_HOURS", DEFAULT_SLEEP_TARGET_HOURS, float),
        baseline_days=_env_number("PULSE_BASELINE_DAYS", 7, int),
        mechanical_k=_env_number("PULSE_MECHANICAL_K", MECHANICAL_K, float),
        filter_outliers=_env_flag("PULSE_FILTER_OUTLIERS", False),
        transport=transport,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    return load_config()
