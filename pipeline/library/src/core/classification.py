"""
Business classification of validated records.

Each classifier receives a record that already passed validation and
returns its final Result. Classifiers never raise: unexpected failures are
logged and converted to the failure outcome of their domain.
"""

import logging
import operator
from collections.abc import Callable
from functools import reduce, wraps

from .model import Operation, Outcome, Result, ServiceRequest, Transaction, record_id

logger = logging.getLogger(__name__)

# kind -> (binary operator, neutral element)
REDUCERS = {
    "suma": (operator.add, 0),
    "multiplicacion": (operator.mul, 1),
}

# Normalised service kind -> canonical name
SERVICE_KINDS = {
    "installation": "installation",
    "maintenance": "maintenance",
    "support": "support",
    "instalacion": "installation",
    "mantenimiento": "maintenance",
    "soporte": "support",
}

TRANSACTION_KINDS = ("ingreso", "egreso")


class UnsupportedOperationError(ValueError):
    """Raised when an operation kind has no reducer."""


def contain_failures(failure_outcome: Outcome):
    """
    Decorate a classifier so that it never raises.

    Parameters
    ----------
    failure_outcome : Outcome
        Outcome returned when the classifier fails unexpectedly.

    Returns
    -------
    Callable
        Decorated classifier returning a failure Result whose reason embeds
        the error text.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(record) -> Result:
            try:
                return func(record)
            except Exception as e:
                logger.error(f"Record {record_id(record)}: {func.__name__} failed - {e}")
                return Result(id=record_id(record), outcome=failure_outcome, reason=f"Processing error: {e}")

        return wrapper

    return decorator


def compute_operation(op: Operation) -> int | float:
    """
    Reduce the operation values according to its kind.

    Raises
    ------
    UnsupportedOperationError
        If the kind is neither 'suma' nor 'multiplicacion'.
    """
    try:
        func, initial = REDUCERS[op.kind]
    except KeyError as exc:
        raise UnsupportedOperationError(f"Unrecognized operation kind: {op.kind}") from exc
    return reduce(func, op.values, initial)


@contain_failures(Outcome.REJECTED)
def classify_operation(op: Operation) -> Result:
    """Approve an active operation whose computed result is not negative."""
    if not op.active:
        return Result(id=op.id, outcome=Outcome.REJECTED, reason="Operation is disabled.")

    try:
        value = compute_operation(op)
    except UnsupportedOperationError as e:
        return Result(id=op.id, outcome=Outcome.REJECTED, reason=str(e))

    if value < 0:
        return Result(id=op.id, outcome=Outcome.REJECTED, reason=f"Result ({value}) is negative.")
    return Result(id=op.id, outcome=Outcome.APPROVED, reason=f"Operation completed successfully. Result = {value}")


@contain_failures(Outcome.REJECTED)
def classify_request(request: ServiceRequest) -> Result:
    """Approve requests for a known service kind."""
    if request.service_kind.strip().lower() in SERVICE_KINDS:
        return Result(
            id=request.id,
            outcome=Outcome.APPROVED,
            reason=f"Request for {request.service_kind} approved for client {request.client}.",
        )
    return Result(
        id=request.id,
        outcome=Outcome.REJECTED,
        reason=f"Unrecognized service kind: {request.service_kind}",
    )


@contain_failures(Outcome.INVALID)
def classify_transaction(transaction: Transaction) -> Result:
    """
    Classify a transaction as valid or suspicious.

    Parameters
    ----------
    transaction : Transaction
        Validated transaction.

    Returns
    -------
    Result
        - invalid: the kind is neither 'ingreso' nor 'egreso'.
        - valid: authorized transaction, carrying kind and amount.
        - suspicious: same payload, flagged because it is not authorized.
    """
    kind = transaction.kind.lower()
    if kind not in TRANSACTION_KINDS:
        return Result(
            id=transaction.id,
            outcome=Outcome.INVALID,
            reason=f"Unrecognized transaction kind: {transaction.kind}",
        )

    if transaction.authorized:
        outcome = Outcome.VALID
        reason = f"Transaction {kind} authorized for user {transaction.user}."
    else:
        outcome = Outcome.SUSPICIOUS
        reason = f"Transaction {kind} NOT authorized for user {transaction.user}."

    return Result(id=transaction.id, outcome=outcome, reason=reason, kind=kind, amount=transaction.amount)
