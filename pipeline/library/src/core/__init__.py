"""
Core business logic layer for the validation pipelines.

This package provides core domain logic including:
- Pydantic models for records, results and run reports
- Record validation with coherence rules
- Classification rules per domain
- Sequential pipeline orchestration
"""

from .data_validation import validate_record
from .domains import OPERATIONS, RECORD_KINDS, REQUESTS, TRANSACTIONS, RecordKind
from .orchestrate import orchestrate_pipeline, process_record, summarize

__all__ = [
    "validate_record",
    "RecordKind",
    "OPERATIONS",
    "REQUESTS",
    "TRANSACTIONS",
    "RECORD_KINDS",
    "orchestrate_pipeline",
    "process_record",
    "summarize",
]
