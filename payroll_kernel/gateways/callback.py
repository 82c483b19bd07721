"""Adapter turning any ``(employee_id, amount)`` callable into a gateway."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from payroll_kernel.logging_config import get_logger

logger = get_logger("gateways.callback")


class CallbackPaymentGateway:
    """Delegates ``pay`` to a callable, e.g. a bank client's transfer method.

    Failures are logged at WARNING and re-raised unchanged.
    """

    def __init__(
        self,
        callback: Callable[[str, Decimal], object],
        name: str = "callback",
    ):
        self._callback = callback
        self.name = name

    def pay(self, employee_id: str, amount: Decimal) -> None:
        try:
            self._callback(employee_id, amount)
        except Exception:
            logger.warning(
                "payment_call_failed",
                exc_info=True,
                extra={
                    "gateway": self.name,
                    "employee_id": employee_id,
                    "amount": amount,
                },
            )
            raise
