"""Pytest configuration and shared fixtures for library tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


class CountingDelay:
    """Zero-delay stub for the latency simulator that counts its calls."""

    def __init__(self):
        self.calls = 0

    async def __call__(self) -> None:
        self.calls += 1


class RecordingReporter:
    """Reporter collecting everything the orchestrator reports."""

    def __init__(self):
        self.started = []
        self.results = []
        self.reports = []

    def start(self, kind) -> None:
        self.started.append(kind.name)

    def record(self, kind, result) -> None:
        self.results.append(result)

    def summary(self, report) -> None:
        self.reports.append(report)


@pytest.fixture
def no_delay():
    """Fixture providing a zero-delay latency stub."""
    return CountingDelay()


@pytest.fixture
def reporter():
    """Fixture providing a recording reporter."""
    return RecordingReporter()


@pytest.fixture
def sample_operation():
    """Fixture providing a valid operation dict."""
    return {"id": 1, "values": [10, 20, 30], "kind": "suma", "active": True}


@pytest.fixture
def sample_request():
    """Fixture providing a valid service request dict."""
    return {
        "id": 1,
        "client": "Carlos",
        "service_kind": "instalacion",
        "priority": 3,
        "active": True,
        "requested_at": "2025-12-01",
    }


@pytest.fixture
def sample_transaction():
    """Fixture providing a valid transaction dict."""
    return {
        "id": 1,
        "user": "Sebas",
        "amount": 500,
        "kind": "ingreso",
        "authorized": True,
        "date": "2025-12-01",
    }
