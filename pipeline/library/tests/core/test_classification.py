"""
Tests for classification module.

Covers the business rules of each domain and the failure containment of
the classifiers.
"""

import pytest

from core.classification import (
    UnsupportedOperationError,
    classify_operation,
    classify_request,
    classify_transaction,
    compute_operation,
    contain_failures,
)
from core.model import Operation, Outcome, ServiceRequest, Transaction


def _operation(values, kind="suma", active=True, id=1):
    return Operation(id=id, values=values, kind=kind, active=active)


class TestClassifyOperation:
    """Test suite for operation classification."""

    @pytest.mark.parametrize(
        "values,kind,expected",
        [
            ([10, 20, 30], "suma", 60),
            ([2, 3, 4], "multiplicacion", 24),
            ([7], "suma", 7),
            ([7], "multiplicacion", 7),
            ([1.5, 2], "multiplicacion", 3.0),
            ([10, -50], "suma", -40),
        ],
    )
    def test_compute_operation(self, values, kind, expected):
        """Test sum and product reductions."""
        assert compute_operation(_operation(values, kind)) == expected

    def test_compute_unknown_kind_raises(self):
        """Test that an unknown kind has no reducer."""
        with pytest.raises(UnsupportedOperationError, match="division"):
            compute_operation(_operation([1, 2, 3], "division"))

    @pytest.mark.parametrize(
        "op,expected_outcome,expected_reason",
        [
            (
                _operation([10, 20, 30], id=1),
                Outcome.APPROVED,
                "Operation completed successfully. Result = 60",
            ),
            (
                _operation([2, 3, 4], "multiplicacion", id=2),
                Outcome.APPROVED,
                "Operation completed successfully. Result = 24",
            ),
            (_operation([10, -50], id=5), Outcome.REJECTED, "Result (-40) is negative."),
            (_operation([-2, 3], "multiplicacion", id=8), Outcome.REJECTED, "Result (-6) is negative."),
            (_operation([1, 2, 3], "division", id=6), Outcome.REJECTED, "Unrecognized operation kind: division"),
            (_operation([9, 9], active=False, id=7), Outcome.REJECTED, "Operation is disabled."),
            (_operation([0], id=9), Outcome.APPROVED, "Operation completed successfully. Result = 0"),
        ],
    )
    def test_classify_operation(self, op, expected_outcome, expected_reason):
        """Test operation outcomes and reasons."""
        result = classify_operation(op)

        assert result.id == op.id
        assert result.outcome is expected_outcome
        assert result.reason == expected_reason

    def test_disabled_operation_is_not_computed(self):
        """Test that a disabled operation is rejected even with an unknown kind."""
        result = classify_operation(_operation([1], "division", active=False))

        assert result.reason == "Operation is disabled."

    def test_kind_is_case_sensitive(self):
        """Test that operation kinds are matched exactly."""
        result = classify_operation(_operation([1, 2], "SUMA"))

        assert result.outcome is Outcome.REJECTED
        assert result.reason == "Unrecognized operation kind: SUMA"


class TestClassifyRequest:
    """Test suite for service request classification."""

    def _request(self, service_kind, client="Carlos"):
        return ServiceRequest(
            id=1, client=client, service_kind=service_kind, priority=3, active=True, requested_at="2025-12-01"
        )

    @pytest.mark.parametrize(
        "service_kind",
        ["instalacion", "mantenimiento", "soporte", "SOPORTE", "Installation", "maintenance", "support"],
    )
    def test_known_service_kinds_are_approved(self, service_kind):
        """Test that known service kinds are approved, case-insensitively."""
        result = classify_request(self._request(service_kind, client="Ana"))

        assert result.outcome is Outcome.APPROVED
        assert result.reason == f"Request for {service_kind} approved for client Ana."

    @pytest.mark.parametrize("service_kind", ["auditoria", "", "repair"])
    def test_unknown_service_kinds_are_rejected(self, service_kind):
        """Test that unknown service kinds are rejected with the kind in the reason."""
        result = classify_request(self._request(service_kind))

        assert result.outcome is Outcome.REJECTED
        assert result.reason == f"Unrecognized service kind: {service_kind}"


class TestClassifyTransaction:
    """Test suite for transaction classification."""

    def _transaction(self, kind="ingreso", authorized=True, amount=500, user="Sebas"):
        return Transaction(id=1, user=user, amount=amount, kind=kind, authorized=authorized, date="2025-12-01")

    @pytest.mark.parametrize(
        "kind,authorized,expected_outcome,expected_reason",
        [
            ("ingreso", True, Outcome.VALID, "Transaction ingreso authorized for user Sebas."),
            ("EGRESO", True, Outcome.VALID, "Transaction egreso authorized for user Sebas."),
            ("egreso", False, Outcome.SUSPICIOUS, "Transaction egreso NOT authorized for user Sebas."),
            ("Ingreso", False, Outcome.SUSPICIOUS, "Transaction ingreso NOT authorized for user Sebas."),
        ],
    )
    def test_income_and_expense(self, kind, authorized, expected_outcome, expected_reason):
        """Test valid and suspicious transactions carry kind and amount."""
        result = classify_transaction(self._transaction(kind=kind, authorized=authorized))

        assert result.outcome is expected_outcome
        assert result.reason == expected_reason
        assert result.kind == kind.lower()
        assert result.amount == 500

    def test_unknown_kind_is_invalid(self):
        """Test that kinds other than ingreso and egreso are invalid."""
        result = classify_transaction(self._transaction(kind="transfer", amount=250))

        assert result.outcome is Outcome.INVALID
        assert result.reason == "Unrecognized transaction kind: transfer"
        assert result.kind is None
        assert result.amount is None


class TestContainFailures:
    """Test suite for the classifier failure boundary."""

    def test_exception_becomes_failure_result(self):
        """Test that a failing classifier returns a result instead of raising."""

        @contain_failures(Outcome.INVALID)
        def broken(record):
            raise RuntimeError("boom")

        result = broken(Transaction(id=4, user="Ana", amount=1, kind="ingreso", authorized=True, date="2025-12-01"))

        assert result.id == 4
        assert result.outcome is Outcome.INVALID
        assert result.reason == "Processing error: boom"

    def test_record_without_id_uses_unknown(self):
        """Test the unknown id fallback of the failure boundary."""

        @contain_failures(Outcome.REJECTED)
        def broken(record):
            raise ValueError("bad record")

        result = broken(object())

        assert result.id == "unknown"
        assert result.reason == "Processing error: bad record"
