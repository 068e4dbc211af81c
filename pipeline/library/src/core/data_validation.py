"""
Record validation module.

This module validates raw records against the pydantic model of their
domain and applies the cross-field coherence rules. Validation never
raises: every failure is returned as a Rejected result carrying a reason
that names the offending field.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from .model import Accepted, Operation, Outcome, Rejected, Result, ServiceRequest, Transaction, record_id

if TYPE_CHECKING:
    from .domains import RecordKind

logger = logging.getLogger(__name__)


def describe_error(kind: "RecordKind", error: dict, rid: int | str) -> str:
    """
    Turn a pydantic error entry into a human-readable reason.

    Parameters
    ----------
    kind : RecordKind
        Domain of the record, provides the label and the field messages.
    error : dict
        One entry of `ValidationError.errors()`.
    rid : int | str
        Record id used in the message.

    Returns
    -------
    str
        Reason naming the offending field.

    Notes
    -----
    Field messages are looked up as '<field>.<error type>' first, then
    '<field>', so a field can distinguish e.g. an empty list from a list
    with non-numeric elements.
    """
    loc = error.get("loc") or ()
    if not loc:
        return f"{kind.label} {rid}: {error.get('msg', 'invalid record')}."

    field = str(loc[0])
    if error.get("type") == "missing":
        return f"{kind.label} {rid}: required field '{field}' is missing."

    template = kind.field_messages.get(f"{field}.{error.get('type')}") or kind.field_messages.get(field)
    if template is None:
        return f"{kind.label} {rid}: field '{field}' is invalid ({error.get('msg')})."
    return template.format(label=kind.label, id=rid, value=error.get("input"))


def validate_record(record, kind: "RecordKind") -> Accepted | Rejected:
    """
    Validate one raw record.

    Checks run in a fixed order and stop at the first failure: presence,
    structure and types (pydantic model), then the domain coherence rule.

    Parameters
    ----------
    record : Mapping | None
        Raw record.
    kind : RecordKind
        Domain strategy of the record.

    Returns
    -------
    Accepted | Rejected
        The validated model, or the rejection result.
    """
    rid = record_id(record)

    if record is None:
        return _reject(kind, rid, f"{kind.label} record is empty or missing.")
    if not isinstance(record, Mapping):
        return _reject(kind, rid, f"{kind.label} record must be a mapping, got {type(record).__name__}.")

    try:
        validated = kind.model.model_validate(dict(record))
    except PydanticValidationError as e:
        return _reject(kind, rid, describe_error(kind, e.errors()[0], rid))

    if kind.coherence is not None:
        rejection = kind.coherence(validated)
        if rejection is not None:
            logger.debug(f"{kind.label} {rid} rejected by coherence rule: {rejection.reason}")
            return Rejected(rejection)

    return Accepted(validated)


def transaction_coherence(transaction: Transaction) -> Result | None:
    """Reject income or expense transactions whose amount is not positive."""
    kind = transaction.kind.lower()
    if kind in ("ingreso", "egreso") and transaction.amount <= 0:
        return Result(
            id=transaction.id,
            outcome=Outcome.INVALID,
            reason=f"{kind.capitalize()} with non-positive amount is incoherent.",
        )
    return None


def operation_activity(op: Operation) -> Result | None:
    """Reject disabled operations before they are delayed and computed."""
    if not op.active:
        return Result(id=op.id, outcome=Outcome.REJECTED, reason="Operation is disabled.")
    return None


def request_activity(request: ServiceRequest) -> Result | None:
    """Reject inactive requests before they reach classification."""
    if not request.active:
        return Result(id=request.id, outcome=Outcome.REJECTED, reason="Request is inactive.")
    return None


def _reject(kind: "RecordKind", rid: int | str, reason: str) -> Rejected:
    logger.debug(f"{kind.label} {rid} rejected: {reason}")
    return Rejected(kind.reject(rid, reason))
