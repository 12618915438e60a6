"""In-process daily history shared by the ingestion and scoring tools."""

import threading
from typing import Any

from pulse_tracker.analytics.strain import HeartRateSample


class DailyHistory:
    """Daily summaries and HR samples keyed by calendar date.

    Summaries are plain dicts with the date under 'id', the same shape the
    baseline helpers consume.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._summaries: dict[str, dict[str, Any]] = {}
        self._samples: dict[str, list[HeartRateSample]] = {}

    def upsert_summary(self, patch: dict[str, Any]) -> dict[str, Any]:
        """Merge provided fields into the day's summary, creating it if needed."""
        date = patch["id"]
        with self._lock:
            summary = {**self._summaries.get(date, {"id": date}), **patch}
            self._summaries[date] = summary
            return dict(summary)

    def add_samples(self, date: str, samples: list[HeartRateSample]) -> int:
        """Append HR samples for a date, returning how many were added."""
        with self._lock:
            self._samples.setdefault(date, []).extend(samples)
        return len(samples)

    def record_strain(self, date: str, score: float) -> None:
        self.upsert_summary({"id": date, "strain_score": score})

    def record_recovery(self, date: str, score: int) -> None:
        self.upsert_summary({"id": date, "recovery_score": score})

    def get_summary(self, date: str) -> dict[str, Any] | None:
        with self._lock:
            summary = self._summaries.get(date)
            return dict(summary) if summary else None

    def get_samples(self, date: str) -> list[HeartRateSample]:
        with self._lock:
            return list(self._samples.get(date, []))

    def summaries(self) -> list[dict[str, Any]]:
        """All summaries, oldest first."""
        with self._lock:
            return [dict(self._summaries[d]) for d in sorted(self._summaries)]

    def clear(self) -> None:
        with self._lock:
            self._summaries.clear()
            self._samples.clear()


history = DailyHistory()
