"""
Typed Exception Hierarchy for the Payroll Kernel.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from PayrollKernelError:

    PayrollKernelError (base)
    |
    +-- EmployeeError
    |   +-- InvalidEmployeeError
    |   +-- InvalidSalaryError
    |
    +-- PaymentError
        +-- PaymentFailedError
        +-- PaymentTimeoutError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Employee        | INVALID_EMPLOYEE            | Employee id is missing or empty
                | INVALID_SALARY              | Salary negative, NaN or infinite
----------------|-----------------------------|-----------------------------------------
Payment         | PAYMENT_FAILED              | Gateway rejected a payment
                | PAYMENT_TIMEOUT             | Gateway did not answer in time

===============================================================================
HANDLING PATTERNS
===============================================================================

1. PAYMENT ERRORS NEVER ESCAPE A PAYROLL RUN:

    The processor catches every gateway failure at the per-employee
    boundary and records it in the run result.  Callers inspect
    ``PayrollRunResult.results`` instead of catching:

        result = processor.run()
        for item in result.results:
            if item.status is PaymentStatus.FAILED:
                report(item.employee_id, item.error_code)

2. GATEWAYS RAISE TYPED ERRORS (any exception is accepted, typed is better):

        raise PaymentFailedError(employee_id, amount, "account closed")

    The ``code`` attribute ends up in ``EmployeePaymentResult.error_code``.

3. VALIDATION ERRORS RAISE AT CONSTRUCTION:

        try:
            Employee("7", "-10")
        except InvalidSalaryError as e:
            reject_row(e.employee_id, e.salary)
"""

from decimal import Decimal
from typing import Any


class PayrollKernelError(Exception):
    """
    Base exception for all payroll kernel errors.

    All subclasses carry a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "PAYROLL_KERNEL_ERROR"


# Employee-related exceptions


class EmployeeError(PayrollKernelError):
    """Base exception for employee record errors."""

    code: str = "EMPLOYEE_ERROR"


class InvalidEmployeeError(EmployeeError):
    """Employee record cannot be constructed."""

    code: str = "INVALID_EMPLOYEE"

    def __init__(self, employee_id: Any, reason: str):
        self.employee_id = employee_id
        self.reason = reason
        super().__init__(f"Invalid employee {employee_id!r}: {reason}")


class InvalidSalaryError(EmployeeError):
    """Salary is negative or not a finite number."""

    code: str = "INVALID_SALARY"

    def __init__(self, employee_id: str, salary: Any):
        self.employee_id = employee_id
        self.salary = str(salary)
        super().__init__(
            f"Invalid salary for employee {employee_id}: {salary!r} "
            f"(must be a finite, non-negative amount)"
        )


# Payment-related exceptions


class PaymentError(PayrollKernelError):
    """Base exception for payment gateway errors."""

    code: str = "PAYMENT_ERROR"


class PaymentFailedError(PaymentError):
    """Gateway did not complete the payment."""

    code: str = "PAYMENT_FAILED"

    def __init__(self, employee_id: str, amount: Decimal, reason: str = ""):
        self.employee_id = employee_id
        self.amount = str(amount)
        self.reason = reason
        message = f"Payment of {amount} to employee {employee_id} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PaymentTimeoutError(PaymentError):
    """Gateway call exceeded its time budget."""

    code: str = "PAYMENT_TIMEOUT"

    def __init__(self, employee_id: str, amount: Decimal, timeout_seconds: float):
        self.employee_id = employee_id
        self.amount = str(amount)
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Payment of {amount} to employee {employee_id} timed out "
            f"after {timeout_seconds}s"
        )
