"""
Record kinds handled by the generic pipeline.

A RecordKind bundles everything that differs between domains: the record
model, the outcomes, the validation messages, the coherence rule, the
classifier and the optional totals. The orchestrator only talks to this
interface.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from pydantic import BaseModel

from .classification import classify_operation, classify_request, classify_transaction
from .data_validation import operation_activity, request_activity, transaction_coherence
from .model import Operation, Outcome, Result, ServiceRequest, Transaction


@dataclass(frozen=True)
class RecordKind:
    """
    Strategy object describing one domain of the pipeline.

    Attributes
    ----------
    name : str
        Registry key ('operations', 'requests', 'transactions').
    label : str
        Label printed in front of each record id.
    title : str
        Header printed when a run starts.
    model : type[BaseModel]
        Strict pydantic model of the record.
    outcomes : tuple[Outcome, ...]
        Outcomes of the domain, in report order.
    failure_outcome : Outcome
        Outcome of validation rejections and unexpected failures.
    classify : Callable[[BaseModel], Result]
        Classifier applied to validated records.
    field_messages : dict[str, str]
        Validation reasons keyed by '<field>' or '<field>.<pydantic error type>'.
    coherence : Callable[[BaseModel], Result | None] | None
        Cross-field rule applied after structural validation.
    totals : Callable[[Sequence[Result]], dict] | None
        Domain totals computed at the end of a run.
    """

    name: str
    label: str
    title: str
    model: type[BaseModel]
    outcomes: tuple[Outcome, ...]
    failure_outcome: Outcome
    classify: Callable[[BaseModel], Result]
    field_messages: dict[str, str] = field(default_factory=dict)
    coherence: Callable[[BaseModel], Result | None] | None = None
    totals: Callable[[Sequence[Result]], dict] | None = None

    def reject(self, record_id: int | str, reason: str) -> Result:
        """Build a failure result for this domain."""
        return Result(id=record_id, outcome=self.failure_outcome, reason=reason)


def transaction_totals(results: Sequence[Result]) -> dict[str, int | float]:
    """Sum valid income and expense amounts and compute the balance."""
    valid = [r for r in results if r.outcome is Outcome.VALID]
    income = sum(r.amount for r in valid if r.kind == "ingreso")
    expense = sum(r.amount for r in valid if r.kind == "egreso")
    return {"income": income, "expense": expense, "balance": income - expense}


OPERATIONS = RecordKind(
    name="operations",
    label="Operation",
    title="Processing batch operations",
    model=Operation,
    outcomes=(Outcome.APPROVED, Outcome.REJECTED),
    failure_outcome=Outcome.REJECTED,
    classify=classify_operation,
    field_messages={
        "id": 'Invalid operation: id "{value}" must be a string or a number.',
        "values.list_type": "{label} {id}: 'values' must be a list.",
        "values.too_short": "{label} {id}: 'values' list is empty.",
        "values": "{label} {id}: all 'values' must be numeric.",
        "kind": "{label} {id}: 'kind' must be a string.",
        "active": "{label} {id}: 'active' must be a boolean.",
    },
    coherence=operation_activity,
)

REQUESTS = RecordKind(
    name="requests",
    label="Request",
    title="Managing service requests",
    model=ServiceRequest,
    outcomes=(Outcome.APPROVED, Outcome.REJECTED),
    failure_outcome=Outcome.REJECTED,
    classify=classify_request,
    field_messages={
        "id": 'Invalid request: id "{value}" is not an integer.',
        "client": "{label} {id}: 'client' must be a non-empty string.",
        "service_kind": "{label} {id}: 'service_kind' must be a string.",
        "priority": "{label} {id}: 'priority' must be an integer between 1 and 5.",
        "active": "{label} {id}: 'active' must be a boolean.",
        "requested_at": "{label} {id}: 'requested_at' must be a string or a date.",
    },
    coherence=request_activity,
)

TRANSACTIONS = RecordKind(
    name="transactions",
    label="Transaction",
    title="Transactions and risk control",
    model=Transaction,
    outcomes=(Outcome.VALID, Outcome.SUSPICIOUS, Outcome.INVALID),
    failure_outcome=Outcome.INVALID,
    classify=classify_transaction,
    field_messages={
        "id": 'Invalid transaction: id "{value}" must be a positive integer.',
        "user": "{label} {id}: 'user' must be a non-empty string.",
        "amount": "{label} {id}: 'amount' must be a finite, non-zero number.",
        "kind": "{label} {id}: 'kind' must be a string.",
        "authorized": "{label} {id}: 'authorized' must be a boolean.",
        "date": "{label} {id}: 'date' must be a string or a date.",
    },
    coherence=transaction_coherence,
    totals=transaction_totals,
)

RECORD_KINDS = {kind.name: kind for kind in (OPERATIONS, REQUESTS, TRANSACTIONS)}
