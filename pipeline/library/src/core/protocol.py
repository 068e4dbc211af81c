"""
Protocol definitions for the validation pipelines.

This module defines the contracts the orchestrator depends on: the delay
awaited before each classification and the reporter that receives every
result and the final run report.
"""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

from .model import Result, RunReport

if TYPE_CHECKING:
    from .domains import RecordKind

# Awaited once per classified record; carries no data.
Delay = Callable[[], Awaitable[None]]


class ReporterProtocol(Protocol):
    """
    Protocol defining the interface for run reporters.

    Methods
    -------
    start(kind: RecordKind) -> None
        Announce the start of a run.
    record(kind: RecordKind, result: Result) -> None
        Report one processed record.
    summary(report: RunReport) -> None
        Report the aggregated outcome of the run.

    Notes
    -----
    This is a Protocol class (PEP 544) for structural subtyping.
    """

    def start(self, kind: "RecordKind") -> None:
        """Announce the start of a run for `kind`."""
        ...

    def record(self, kind: "RecordKind", result: Result) -> None:
        """
        Report one processed record.

        Parameters
        ----------
        kind : RecordKind
            Domain of the record.
        result : Result
            Final result of the record (validation rejection or classification).
        """
        ...

    def summary(self, report: RunReport) -> None:
        """Report the aggregated outcome of the run."""
        ...
