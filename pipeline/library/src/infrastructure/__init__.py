"""Infrastructure layer for the validation pipelines.

This package provides the components around the core pipeline:
- Fixed sample records per domain
- Simulated external-service latency
- Console reporting of results and summaries
"""

from .generator import load_records
from .latency import LatencySettings, RandomLatency
from .report import ConsoleReporter

__all__ = [
    "load_records",
    "LatencySettings",
    "RandomLatency",
    "ConsoleReporter",
]
