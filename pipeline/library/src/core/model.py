"""
Pydantic data models for the validation pipelines.

This module defines the record models for the three domains (operations,
service requests and transactions), the result record produced for every
processed record, and the run report built once a batch is finished.
Record models are strict and frozen: a record is never coerced and never
mutated after validation.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN_ID = "unknown"


class Outcome(str, Enum):
    """Final classification label attached to a processed record."""

    APPROVED = "approved"
    REJECTED = "rejected"
    VALID = "valid"
    SUSPICIOUS = "suspicious"
    INVALID = "invalid"


class _Record(BaseModel):
    """Base configuration shared by every input record model."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


class Operation(_Record):
    """
    Arithmetic operation over a list of values.

    Attributes
    ----------
    id : int | str
        Operation identifier.
    values : list[int | float]
        Operands, at least one.
    kind : str
        Reduction to apply ('suma' or 'multiplicacion').
    active : bool
        Disabled operations are rejected without being computed.
    """

    id: int | str
    values: Annotated[list[int | float], Field(min_length=1)]
    kind: str
    active: bool


class ServiceRequest(_Record):
    """
    Service request waiting for approval.

    Attributes
    ----------
    id : int
        Request identifier.
    client : str
        Client name, not blank.
    service_kind : str
        Requested service (installation, maintenance, support).
    priority : int
        Priority between 1 and 5.
    active : bool
        Inactive requests are rejected during validation.
    requested_at : str | datetime | date
        Request date.
    """

    id: int
    client: str
    service_kind: str
    priority: Annotated[int, Field(ge=1, le=5)]
    active: bool
    requested_at: str | datetime | date

    @field_validator("client")
    @classmethod
    def client_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class Transaction(_Record):
    """
    Financial transaction ('ingreso' or 'egreso').

    Attributes
    ----------
    id : int
        Positive transaction identifier.
    user : str
        User name, not blank.
    amount : int | float
        Finite, non-zero amount.
    kind : str
        'ingreso' (income) or 'egreso' (expense), case-insensitive.
    authorized : bool
        Unauthorized transactions are flagged as suspicious.
    date : str | datetime | date
        Transaction date.
    """

    id: Annotated[int, Field(gt=0)]
    user: str
    amount: int | float
    kind: str
    authorized: bool
    date: str | datetime | date

    @field_validator("user")
    @classmethod
    def user_not_blank(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("amount")
    @classmethod
    def amount_finite_non_zero(cls, v: int | float) -> int | float:
        """Reject infinite, NaN and zero amounts, and integers beyond float range."""
        try:
            finite = math.isfinite(v)
        except OverflowError:
            finite = False
        if not finite or v == 0:
            raise ValueError("must be a finite, non-zero number")
        return v


class Result(BaseModel):
    """
    Classification of a single processed record.

    `kind` and `amount` are only filled for classified transactions.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str
    outcome: Outcome
    reason: str
    kind: str | None = None
    amount: int | float | None = None


class RunReport(BaseModel):
    """
    Aggregated outcome of one pipeline run.

    Attributes
    ----------
    label : str
        Record label of the domain (e.g. 'Transaction').
    results : tuple[Result, ...]
        Results in input order.
    counts : dict[str, int]
        Number of results per outcome, every outcome of the domain included.
    totals : dict[str, int | float]
        Domain totals (income, expense and balance for transactions).
    """

    model_config = ConfigDict(frozen=True)

    label: str
    results: tuple[Result, ...]
    counts: dict[str, int]
    totals: dict[str, int | float] = Field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.results)


@dataclass(frozen=True)
class Accepted:
    """Validation success: the validated record."""

    record: _Record


@dataclass(frozen=True)
class Rejected:
    """Validation failure: the rejection result."""

    result: Result


def record_id(record) -> int | str:
    """Return the raw id of a record, or UNKNOWN_ID when it cannot be read."""
    if isinstance(record, BaseModel):
        raw = getattr(record, "id", None)
    elif isinstance(record, Mapping):
        raw = record.get("id")
    else:
        return UNKNOWN_ID
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        return UNKNOWN_ID
    return raw
