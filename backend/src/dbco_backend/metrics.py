"""In-process counters for classification outcomes and request latency."""

from __future__ import annotations

import threading
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict

from .classification import ClassificationResult, NeedsAssessment


@dataclass
class StageTimings:
    """Durations recorded for one stage, kept in milliseconds."""

    count: int = 0
    total_ms: float = 0.0
    min_ms: float | None = None
    max_ms: float = 0.0

    def add(self, duration: float) -> None:
        elapsed_ms = duration * 1000.0
        self.count += 1
        self.total_ms += elapsed_ms
        self.max_ms = max(self.max_ms, elapsed_ms)
        self.min_ms = elapsed_ms if self.min_ms is None else min(self.min_ms, elapsed_ms)

    def summary(self) -> Dict[str, float]:
        return {
            "count": self.count,
            "avg_ms": self.total_ms / self.count if self.count else 0.0,
            "min_ms": self.min_ms or 0.0,
            "max_ms": self.max_ms,
        }


def outcome_label(result: ClassificationResult) -> str:
    """Counter key for a classification result, e.g. ``category:2a`` or ``needs:distance``."""

    if isinstance(result, NeedsAssessment):
        return f"needs:{result.risk.value}"
    return f"category:{result.category.value}"


class ClassificationMonitor:
    def __init__(self) -> None:
        self._outcomes: Counter[str] = Counter()
        self._latency: Dict[str, StageTimings] = defaultdict(StageTimings)
        self._lock = threading.Lock()

    def record_outcome(self, result: ClassificationResult) -> None:
        with self._lock:
            self._outcomes[outcome_label(result)] += 1

    def record_latency(self, stage: str, duration: float) -> None:
        with self._lock:
            self._latency[stage].add(duration)

    def snapshot(self) -> Dict[str, Dict[str, object]]:
        with self._lock:
            pending = sum(count for label, count in self._outcomes.items() if label.startswith("needs:"))
            return {
                "totals": {
                    "classified": sum(self._outcomes.values()) - pending,
                    "needsAssessment": pending,
                },
                "outcomes": dict(self._outcomes),
                "latency": {stage: stats.summary() for stage, stats in self._latency.items()},
            }

    def reset(self) -> None:
        with self._lock:
            self._outcomes.clear()
            self._latency.clear()


monitor = ClassificationMonitor()


def record_outcome(result: ClassificationResult) -> None:
    monitor.record_outcome(result)


def record_latency(stage: str, duration: float) -> None:
    monitor.record_latency(stage, duration)


def metrics_summary() -> Dict[str, Dict[str, object]]:
    return monitor.snapshot()


def reset_metrics() -> None:
    monitor.reset()
