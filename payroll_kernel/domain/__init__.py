"""Pure domain types: employees, payment outcomes, and the injectable clock."""

from payroll_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from payroll_kernel.domain.employee import Employee
from payroll_kernel.domain.payment import (
    EmployeePaymentResult,
    PaymentOutcome,
    PaymentStatus,
    PayrollRunResult,
    PayrollRunStatus,
)

__all__ = [
    "Clock",
    "DeterministicClock",
    "Employee",
    "EmployeePaymentResult",
    "PaymentOutcome",
    "PaymentStatus",
    "PayrollRunResult",
    "PayrollRunStatus",
    "SystemClock",
]
