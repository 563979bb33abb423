"""Metrics seam for encoders, image fetches and verification runs.

Metric names live in ``embed_verify.observability.names``. Labels carry the
model id, and where relevant the modality ("text"/"image") or the check
("text"/"image").
"""

from collections import defaultdict
from typing import Protocol

Labels = dict[str, str]
LabelKey = tuple[tuple[str, str], ...]


class MetricsHook(Protocol):
    """Receives encode latencies, fetch and check counters, embedding sizes."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None: ...

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None: ...

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook; verification runs do not need a metrics backend."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        return None


def _label_key(labels: Labels | None) -> LabelKey:
    return tuple(sorted((labels or {}).items()))


class RecordingMetricsHook:
    """In-memory hook that keeps every observation.

    ``counters``, ``latencies`` and ``gauges`` aggregate per name across
    labels. ``labelled_counters`` keeps the per-label-set totals, so a
    run can be broken down by model or check via ``count``.
    """

    def __init__(self) -> None:
        self.latencies: dict[str, list[float]] = defaultdict(list)
        self.counters: dict[str, int] = defaultdict(int)
        self.gauges: dict[str, list[float]] = defaultdict(list)
        self.labelled_counters: dict[tuple[str, LabelKey], int] = defaultdict(int)

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        self.latencies[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        self.counters[name] += value
        self.labelled_counters[(name, _label_key(labels))] += value

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        self.gauges[name].append(value)

    def count(self, name: str, **labels: str) -> int:
        """Sum of ``name`` over label sets that include every given label."""
        wanted = set(labels.items())
        return sum(
            value
            for (counter, key), value in self.labelled_counters.items()
            if counter == name and wanted <= set(key)
        )
