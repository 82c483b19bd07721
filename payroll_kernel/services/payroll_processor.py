"""
PayrollProcessor -- pays every stored employee with per-employee isolation.

Contract:
    ``pay_employees()`` reads the store once, attempts one payment per
    employee in store order and returns how many went through.  ``run()``
    does the same and returns the full ``PayrollRunResult``.

Architecture: payroll_kernel/services.  Imports from domain, stores,
    gateways and logging_config.

Invariants enforced:
    - ``find_all`` is called exactly once, before any payment attempt.
    - One gateway call per employee, whatever happened to earlier ones.
    - A failed payment marks that employee unpaid, is recorded in the run
      result and never escapes the run.
    - Exactly one of mark_paid / mark_unpaid per employee per run.
    - The returned count equals the number of employees left paid.
    - The processor never calls ``store.save``; employees returned by
      ``find_all`` are mutated in place.

Non-goals:
    - Does NOT retry failed payments.
    - Does NOT keep state between runs.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from contextvars import copy_context
from uuid import uuid4

from payroll_kernel.domain.clock import Clock, SystemClock
from payroll_kernel.domain.employee import Employee
from payroll_kernel.domain.payment import (
    EmployeePaymentResult,
    PaymentStatus,
    PayrollRunResult,
    PayrollRunStatus,
)
from payroll_kernel.gateways.base import PaymentGateway, attempt_payment
from payroll_kernel.logging_config import LogContext, get_logger
from payroll_kernel.stores.base import EmployeeStore

logger = get_logger("services.payroll_processor")


class PayrollProcessor:
    """Batch payment engine over an employee store and a payment gateway.

    With ``max_workers`` > 1 the gateway calls run on a thread pool: each
    employee still gets exactly one attempt and results keep store order,
    but the order in which the gateway sees the calls is not fixed.
    """

    def __init__(
        self,
        store: EmployeeStore,
        gateway: PaymentGateway,
        clock: Clock | None = None,
        max_workers: int = 1,
    ):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._store = store
        self._gateway = gateway
        self._clock = clock or SystemClock()
        self._max_workers = max_workers

    def pay_employees(self) -> int:
        """Pay every stored employee; return the number paid."""
        return self.run().paid_count

    def run(self, correlation_id: str | None = None) -> PayrollRunResult:
        """Execute one payroll run and return its report."""
        start_time = time.monotonic()
        started_at = self._clock.now()
        run_id = uuid4()

        with LogContext.bind(run_id=str(run_id), correlation_id=correlation_id):
            employees = tuple(self._store.find_all())

            logger.info(
                "payroll_run_started",
                extra={
                    "total_employees": len(employees),
                    "max_workers": self._max_workers,
                },
            )

            if self._max_workers == 1 or len(employees) < 2:
                results = tuple(self._pay_one(e) for e in employees)
            else:
                with ThreadPoolExecutor(
                    max_workers=min(self._max_workers, len(employees)),
                    thread_name_prefix="payroll-run",
                ) as executor:
                    # each call runs in its own copy of the run's log context
                    futures = [
                        executor.submit(copy_context().run, self._pay_one, e)
                        for e in employees
                    ]
                    results = tuple(f.result() for f in futures)

            paid = sum(1 for r in results if r.status is PaymentStatus.PAID)
            failed = len(results) - paid

            if failed == 0:
                status = PayrollRunStatus.COMPLETED
            elif paid == 0:
                status = PayrollRunStatus.FAILED
            else:
                status = PayrollRunStatus.PARTIALLY_COMPLETED

            completed_at = self._clock.now()
            total_duration = int((time.monotonic() - start_time) * 1000)

            logger.info(
                "payroll_run_completed",
                extra={
                    "status": status.value,
                    "total_employees": len(employees),
                    "paid_count": paid,
                    "failed_count": failed,
                    "duration_ms": total_duration,
                },
            )

        return PayrollRunResult(
            run_id=run_id,
            status=status,
            total_employees=len(employees),
            paid_count=paid,
            failed_count=failed,
            results=results,
            started_at=started_at,
            completed_at=completed_at,
            duration_ms=total_duration,
            correlation_id=correlation_id,
        )

    def _pay_one(self, employee: Employee) -> EmployeePaymentResult:
        item_start = time.monotonic()
        with LogContext.bind(employee_id=employee.id):
            outcome = attempt_payment(self._gateway, employee)
        duration = int((time.monotonic() - item_start) * 1000)

        if outcome.succeeded:
            employee.mark_paid()
        else:
            employee.mark_unpaid()

        return EmployeePaymentResult(
            employee_id=employee.id,
            amount=employee.salary,
            status=outcome.status,
            error_code=outcome.error_code,
            error_message=outcome.error_message,
            duration_ms=duration,
        )
