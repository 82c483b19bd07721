"""Tests for payment outcome and run report types."""

from decimal import Decimal
from uuid import uuid4

import pytest

from payroll_kernel.domain.payment import (
    EmployeePaymentResult,
    PaymentOutcome,
    PaymentStatus,
    PayrollRunResult,
    PayrollRunStatus,
)
from payroll_kernel.exceptions import PaymentFailedError


class TestPaymentOutcome:

    def test_success(self):
        outcome = PaymentOutcome.success()
        assert outcome.succeeded
        assert outcome.status is PaymentStatus.PAID
        assert outcome.error is None
        assert outcome.error_code is None
        assert outcome.error_message is None

    def test_failure_with_coded_error(self):
        error = PaymentFailedError("1", Decimal("1000"), "insufficient funds")
        outcome = PaymentOutcome.failure(error)
        assert not outcome.succeeded
        assert outcome.status is PaymentStatus.FAILED
        assert outcome.error is error
        assert outcome.error_code == "PAYMENT_FAILED"
        assert "insufficient funds" in outcome.error_message

    def test_failure_with_plain_exception(self):
        outcome = PaymentOutcome.failure(RuntimeError())
        assert outcome.error_code == "UNHANDLED_EXCEPTION"
        assert outcome.error_message == "RuntimeError"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            PaymentOutcome.success().status = PaymentStatus.FAILED


class TestPayrollRunResult:

    def test_id_partitions(self):
        result = PayrollRunResult(
            run_id=uuid4(),
            status=PayrollRunStatus.PARTIALLY_COMPLETED,
            total_employees=3,
            paid_count=2,
            failed_count=1,
            results=(
                EmployeePaymentResult("1", Decimal("10"), PaymentStatus.PAID),
                EmployeePaymentResult(
                    "2", Decimal("20"), PaymentStatus.FAILED,
                    error_code="PAYMENT_FAILED",
                ),
                EmployeePaymentResult("3", Decimal("30"), PaymentStatus.PAID),
            ),
        )
        assert result.paid_employee_ids == ("1", "3")
        assert result.failed_employee_ids == ("2",)

    def test_status_values(self):
        assert PayrollRunStatus.COMPLETED.value == "completed"
        assert PayrollRunStatus.PARTIALLY_COMPLETED.value == "partially_completed"
        assert PaymentStatus("failed") is PaymentStatus.FAILED
