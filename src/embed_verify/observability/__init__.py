from . import names
from .base import MetricsHook, NoOpMetricsHook, RecordingMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "RecordingMetricsHook",
    "names",
]
