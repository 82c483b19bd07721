"""Tests for the gateway boundary, adapters and the recording double."""

import threading
from decimal import Decimal

import pytest

from payroll_kernel.domain.employee import Employee
from payroll_kernel.domain.payment import PaymentStatus
from payroll_kernel.exceptions import PaymentFailedError, PaymentTimeoutError
from payroll_kernel.gateways.base import PaymentGateway, attempt_payment
from payroll_kernel.gateways.callback import CallbackPaymentGateway
from payroll_kernel.gateways.recording import RecordingPaymentGateway
from payroll_kernel.gateways.timeout import TimeoutPaymentGateway
from payroll_kernel.services.payroll_processor import PayrollProcessor
from payroll_kernel.stores.memory import InMemoryEmployeeStore


class TestAttemptPayment:

    def test_success_passes_id_and_salary(self):
        gateway = RecordingPaymentGateway()
        outcome = attempt_payment(gateway, Employee("1", "1000.50"))

        assert outcome.succeeded
        assert gateway.calls == [("1", Decimal("1000.50"))]

    def test_any_exception_becomes_failure(self):
        def explode(employee_id, amount):
            raise ConnectionError("bank unreachable")

        outcome = attempt_payment(CallbackPaymentGateway(explode), Employee("1", 10))

        assert outcome.status is PaymentStatus.FAILED
        assert isinstance(outcome.error, ConnectionError)

    def test_keyboard_interrupt_propagates(self):
        def interrupt(employee_id, amount):
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            attempt_payment(CallbackPaymentGateway(interrupt), Employee("1", 10))


class TestRecordingPaymentGateway:

    def test_records_calls_in_order(self):
        gateway = RecordingPaymentGateway()
        gateway.pay("1", Decimal("10"))
        gateway.pay("2", Decimal("20"))

        assert gateway.calls == [("1", Decimal("10")), ("2", Decimal("20"))]
        assert gateway.called_ids == ["1", "2"]

    def test_fail_for_ids(self):
        gateway = RecordingPaymentGateway(fail_for={"1"})

        with pytest.raises(PaymentFailedError) as exc_info:
            gateway.pay("1", Decimal("10"))
        gateway.pay("2", Decimal("20"))

        assert exc_info.value.employee_id == "1"
        assert exc_info.value.code == "PAYMENT_FAILED"
        assert len(gateway.calls) == 2
        assert gateway.called_ids == ["1", "2"]

    def test_fail_on_call_index(self):
        gateway = RecordingPaymentGateway(fail_on_calls={0})

        with pytest.raises(PaymentFailedError):
            gateway.pay("2", Decimal("20"))
        gateway.pay("2", Decimal("20"))

    def test_fail_all_with_custom_error(self):
        gateway = RecordingPaymentGateway(
            fail_all=True, error=lambda employee_id, amount: RuntimeError(employee_id),
        )

        with pytest.raises(RuntimeError, match="7"):
            gateway.pay("7", Decimal("1"))

    def test_satisfies_protocol(self):
        assert isinstance(RecordingPaymentGateway(), PaymentGateway)
        assert isinstance(CallbackPaymentGateway(lambda i, a: None), PaymentGateway)


class TestCallbackPaymentGateway:

    def test_delegates(self):
        seen = []
        CallbackPaymentGateway(lambda i, a: seen.append((i, a))).pay("1", Decimal("5"))
        assert seen == [("1", Decimal("5"))]

    def test_logs_and_reraises(self, structured_logs):
        def reject(employee_id, amount):
            raise PaymentFailedError(employee_id, amount, "account closed")

        gateway = CallbackPaymentGateway(reject, name="acme-bank")
        with pytest.raises(PaymentFailedError):
            gateway.pay("1", Decimal("1000"))

        [record] = structured_logs()
        assert record["level"] == "WARNING"
        assert record["message"] == "payment_call_failed"
        assert record["gateway"] == "acme-bank"
        assert record["employee_id"] == "1"
        assert record["amount"] == "1000"
        assert record["exc_code"] == "PAYMENT_FAILED"
        assert record["exc_reason"] == "account closed"


class TestTimeoutPaymentGateway:

    def test_fast_call_passes_through(self):
        inner = RecordingPaymentGateway()
        with TimeoutPaymentGateway(inner, timeout_seconds=5) as gateway:
            gateway.pay("1", Decimal("10"))
        assert inner.calls == [("1", Decimal("10"))]

    def test_inner_failure_propagates(self):
        inner = RecordingPaymentGateway(fail_all=True)
        with TimeoutPaymentGateway(inner, timeout_seconds=5) as gateway:
            with pytest.raises(PaymentFailedError):
                gateway.pay("1", Decimal("10"))

    def test_slow_call_times_out(self):
        release = threading.Event()

        def hang(employee_id, amount):
            release.wait(5)

        gateway = TimeoutPaymentGateway(CallbackPaymentGateway(hang), timeout_seconds=0.05)
        try:
            with pytest.raises(PaymentTimeoutError) as exc_info:
                gateway.pay("1", Decimal("10"))
        finally:
            release.set()
            gateway.close()

        assert exc_info.value.code == "PAYMENT_TIMEOUT"
        assert exc_info.value.timeout_seconds == 0.05

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError):
            TimeoutPaymentGateway(RecordingPaymentGateway(), timeout_seconds=0)

    def test_queued_call_is_cancelled_not_run_later(self, structured_logs):
        release = threading.Event()
        executed = []

        def transfer(employee_id, amount):
            executed.append(employee_id)
            if employee_id == "1":
                release.wait(5)

        staff = [Employee("1", 1000), Employee("2", 1200)]
        gateway = TimeoutPaymentGateway(
            CallbackPaymentGateway(transfer), timeout_seconds=0.1, max_workers=1,
        )
        try:
            paid = PayrollProcessor(InMemoryEmployeeStore(staff), gateway).pay_employees()
        finally:
            release.set()
            gateway.close(wait=True)

        assert paid == 0
        assert [e.paid for e in staff] == [False, False]
        assert "2" not in executed
        timeouts = [r for r in structured_logs() if r["message"] == "payment_call_timed_out"]
        assert [(r["employee_id"], r["cancelled"]) for r in timeouts][-1] == ("2", True)
