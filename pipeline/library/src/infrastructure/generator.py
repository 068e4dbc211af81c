"""Sample data module.

This module provides the fixed sample records of each pipeline. Every call
returns a fresh list so that runs never share record objects.
"""

import logging
from collections.abc import Callable
from datetime import datetime

logger = logging.getLogger(__name__)


def operation_records() -> list[dict]:
    """Return the sample arithmetic operations."""
    return [
        {"id": 1, "values": [10, 20, 30], "kind": "suma", "active": True},
        {"id": 2, "values": [2, 3, 4], "kind": "multiplicacion", "active": True},
        {"id": 3, "values": [], "kind": "suma", "active": True},
        {"id": 4, "values": [5, "x", 7], "kind": "suma", "active": True},
        {"id": 5, "values": [10, -50], "kind": "suma", "active": True},
        {"id": 6, "values": [1, 2, 3], "kind": "division", "active": True},
        {"id": 7, "values": [9, 9], "kind": "suma", "active": False},
    ]


def request_records() -> list[dict]:
    """Return the sample service requests."""
    return [
        {
            "id": 1,
            "client": "Carlos",
            "service_kind": "instalacion",
            "priority": 3,
            "active": True,
            "requested_at": "2025-12-01",
        },
        {
            "id": 2,
            "client": "Ana",
            "service_kind": "mantenimiento",
            "priority": 5,
            "active": True,
            "requested_at": datetime.now(),
        },
        {"id": 3, "client": "", "service_kind": "soporte", "priority": 2, "active": True, "requested_at": "2025-12-02"},
        {
            "id": 4,
            "client": "Luis",
            "service_kind": "auditoria",
            "priority": 4,
            "active": True,
            "requested_at": "2025-12-03",
        },
        {
            "id": 5,
            "client": "Marta",
            "service_kind": "soporte",
            "priority": 7,
            "active": True,
            "requested_at": "2025-12-04",
        },
        {
            "id": 6,
            "client": "Pedro",
            "service_kind": "instalacion",
            "priority": 1,
            "active": False,
            "requested_at": "2025-12-05",
        },
    ]


def transaction_records() -> list[dict]:
    """Return the sample income and expense transactions."""
    return [
        {"id": 1, "user": "Sebas", "amount": 500, "kind": "ingreso", "authorized": True, "date": "2025-12-01"},
        {"id": 2, "user": "Karol", "amount": 300, "kind": "egreso", "authorized": True, "date": datetime.now()},
        {"id": 3, "user": "Juan", "amount": -200, "kind": "ingreso", "authorized": True, "date": "2025-12-02"},
        {"id": 4, "user": "Nicolle", "amount": 150, "kind": "egreso", "authorized": False, "date": "2025-12-03"},
        {"id": 5, "user": "", "amount": 100, "kind": "ingreso", "authorized": True, "date": "2025-12-04"},
        {"id": 6, "user": "Santi", "amount": 0, "kind": "egreso", "authorized": True, "date": "2025-12-05"},
        {"id": 7, "user": "David", "amount": 250, "kind": "transfer", "authorized": True, "date": "2025-12-06"},
    ]


SAMPLE_SOURCES: dict[str, Callable[[], list[dict]]] = {
    "operations": operation_records,
    "requests": request_records,
    "transactions": transaction_records,
}


def load_records(name: str) -> list[dict]:
    """
    Load the sample records of a pipeline.

    Parameters
    ----------
    name : str
        Record kind name ('operations', 'requests' or 'transactions').

    Returns
    -------
    list[dict]
        Fresh list of raw records.

    Raises
    ------
    ValueError
        If no sample source exists for `name`.
    """
    try:
        source = SAMPLE_SOURCES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown record kind: {name}") from exc

    records = source()
    logger.info(f"Loaded {len(records)} sample {name}")
    return records
