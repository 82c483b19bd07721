"""
PaymentGateway protocol and the typed-outcome boundary.

Contract:
    ``PaymentGateway.pay(employee_id, amount)`` returns nothing on success
    and raises on failure.  ``attempt_payment()`` is the single place where
    that raise is turned into a ``PaymentOutcome`` value, so callers branch
    on a result instead of relying on stack unwinding.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable

from payroll_kernel.domain.employee import Employee
from payroll_kernel.domain.payment import PaymentOutcome


@runtime_checkable
class PaymentGateway(Protocol):
    """Protocol for the banking collaborator that moves money.

    Non-goals:
        - Does NOT retry; one call is one attempt.
        - Does NOT report success through a return value.
    """

    def pay(self, employee_id: str, amount: Decimal) -> None:
        """Transfer ``amount`` to ``employee_id``; raise if it did not go through."""
        ...


def attempt_payment(gateway: PaymentGateway, employee: Employee) -> PaymentOutcome:
    """Call ``gateway.pay`` once for ``employee`` and wrap the result.

    Any ``Exception`` becomes ``PaymentOutcome.failure``; interpreter-level
    exceptions such as ``KeyboardInterrupt`` propagate.
    """
    try:
        gateway.pay(employee.id, employee.salary)
    except Exception as exc:
        return PaymentOutcome.failure(exc)
    return PaymentOutcome.success()
