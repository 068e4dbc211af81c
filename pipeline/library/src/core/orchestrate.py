"""Pipeline orchestration module.

This module runs a batch of raw records through the pipeline one record at
a time: validation, simulated latency, classification and reporting.
Processing is strictly sequential; each record is fully handled before the
next one starts. No failure stops the loop.
"""

import logging
from collections.abc import Iterable, Sequence

from .data_validation import validate_record
from .domains import RecordKind
from .model import Rejected, Result, RunReport, record_id
from .protocol import Delay, ReporterProtocol

logger = logging.getLogger(__name__)


async def process_record(kind: RecordKind, record, delay: Delay) -> Result:
    """
    Process a single raw record.

    Parameters
    ----------
    kind : RecordKind
        Domain strategy of the record.
    record : Mapping | None
        Raw record.
    delay : Delay
        Awaited once before classification.

    Returns
    -------
    Result
        The validation rejection, or the classification of the record.

    Notes
    -----
    Rejected records short-circuit: no delay is awaited and the classifier
    is never called.
    """
    validation = validate_record(record, kind)
    if isinstance(validation, Rejected):
        return validation.result

    await delay()
    return kind.classify(validation.record)


def summarize(kind: RecordKind, results: Sequence[Result]) -> RunReport:
    """Count results per outcome and compute the domain totals."""
    counts = {outcome.value: 0 for outcome in kind.outcomes}
    for result in results:
        counts[result.outcome.value] = counts.get(result.outcome.value, 0) + 1

    totals = kind.totals(results) if kind.totals is not None else {}
    return RunReport(label=kind.label, results=tuple(results), counts=counts, totals=totals)


async def orchestrate_pipeline(
    kind: RecordKind, records: Iterable, delay: Delay, reporter: ReporterProtocol
) -> RunReport:
    """
    Run a batch of records through the pipeline.

    Parameters
    ----------
    kind : RecordKind
        Domain strategy of the records.
    records : Iterable
        Raw records, processed in the given order.
    delay : Delay
        Latency simulator awaited before each classification.
    reporter : ReporterProtocol
        Receives the start of the run, every result and the final report.

    Returns
    -------
    RunReport
        Ordered results, counts per outcome and domain totals.

    Notes
    -----
    Unexpected errors raised while processing a record are converted to a
    failure result prefixed with 'Unexpected error:' and the loop continues.
    Reporter failures are logged and never interrupt the run.
    """
    results = []

    logger.info(f"Starting {kind.name} run")
    _notify(reporter.start, kind)

    for record in records:
        try:
            result = await process_record(kind, record, delay)
        except Exception as e:
            logger.error(f"{kind.label} {record_id(record)}: unexpected failure - {e}")
            result = kind.reject(record_id(record), f"Unexpected error: {e}")

        results.append(result)
        _notify(reporter.record, kind, result)

    report = summarize(kind, results)
    _notify(reporter.summary, report)

    logger.info(f"{kind.name.capitalize()} run completed - {report.total} records processed: {report.counts}")
    return report


def _notify(callback, *args) -> None:
    try:
        callback(*args)
    except Exception as e:
        logger.error(f"Reporter {getattr(callback, '__name__', callback)} failed - {e}")
