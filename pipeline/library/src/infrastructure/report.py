"""Console reporting module.

This module prints the per-record lines and the summary block of a run.
Result listings are rendered as polars tables.
"""

from collections.abc import Callable, Sequence

import polars as pl

from core.domains import RecordKind
from core.model import Result, RunReport

TOTAL_LABELS = {
    "income": "Valid income total",
    "expense": "Valid expense total",
    "balance": "Final balance",
}

RESULT_SCHEMA = {
    "id": pl.String,
    "outcome": pl.String,
    "reason": pl.String,
    "kind": pl.String,
    "amount": pl.Float64,
}


def format_result(label: str, result: Result) -> str:
    """Format one result as '<Label> <id>: <outcome> => <reason>'."""
    return f"{label} {result.id}: {result.outcome.value} => {result.reason}"


def results_frame(results: Sequence[Result]) -> pl.DataFrame:
    """Build a DataFrame with one row per result."""
    rows = [
        {
            "id": str(r.id),
            "outcome": r.outcome.value,
            "reason": r.reason,
            "kind": r.kind,
            "amount": float(r.amount) if r.amount is not None else None,
        }
        for r in results
    ]
    return pl.DataFrame(rows, schema=RESULT_SCHEMA)


class ConsoleReporter:
    """
    Reporter printing runs to the console.

    Parameters
    ----------
    write : Callable[[str], None]
        Line writer, `print` by default.
    """

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self.write = write

    def start(self, kind: RecordKind) -> None:
        self.write("")
        self.write(kind.title)

    def record(self, kind: RecordKind, result: Result) -> None:
        self.write(format_result(kind.label, result))

    def summary(self, report: RunReport) -> None:
        """
        Print counts per outcome, then listings and totals when the domain has totals.

        Parameters
        ----------
        report : RunReport
            Aggregated outcome of the run.
        """
        self.write("")
        self.write("Summary")
        self.write(f"Processed: {report.total}")
        for outcome, count in report.counts.items():
            self.write(f"{outcome.capitalize()}: {count}")

        if not report.totals:
            return

        frame = results_frame(report.results)
        with pl.Config(tbl_rows=-1, fmt_str_lengths=120, tbl_hide_dataframe_shape=True):
            for outcome in report.counts:
                self.write("")
                self.write(f"{outcome.capitalize()} listing:")
                self.write(str(frame.filter(pl.col("outcome") == outcome)))

        self.write("")
        self.write("Totals")
        for key, label in TOTAL_LABELS.items():
            if key in report.totals:
                self.write(f"{label}: {report.totals[key]}")
