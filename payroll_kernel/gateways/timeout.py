"""
TimeoutPaymentGateway -- per-call time budget for a blocking gateway.

Contract:
    Runs each inner ``pay`` on a worker thread and waits at most
    ``timeout_seconds``.  A call that overruns raises
    ``PaymentTimeoutError``.

Invariants enforced:
    - A call still queued behind busy workers when its budget runs out is
      cancelled and never reaches the inner gateway.
    - A call already running when its budget runs out is left to finish on
      its own, because Python threads cannot be cancelled; it is still
      reported as timed out.

Non-goals:
    - Does NOT retry a timed-out payment.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from decimal import Decimal
from typing import Any

from payroll_kernel.exceptions import PaymentTimeoutError
from payroll_kernel.gateways.base import PaymentGateway
from payroll_kernel.logging_config import get_logger

logger = get_logger("gateways.timeout")


class TimeoutPaymentGateway:
    """Wraps another gateway and bounds how long each payment may take."""

    def __init__(
        self,
        inner: PaymentGateway,
        timeout_seconds: float,
        max_workers: int = 4,
    ):
        if timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {timeout_seconds}"
            )
        self._inner = inner
        self.timeout_seconds = timeout_seconds
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="payroll-gateway",
        )

    def pay(self, employee_id: str, amount: Decimal) -> None:
        future = self._executor.submit(self._inner.pay, employee_id, amount)
        try:
            future.result(timeout=self.timeout_seconds)
        except FutureTimeoutError:
            # cancel() only succeeds while the call is still queued
            cancelled = future.cancel()
            logger.warning(
                "payment_call_timed_out",
                extra={
                    "employee_id": employee_id,
                    "amount": amount,
                    "timeout_seconds": self.timeout_seconds,
                    "cancelled": cancelled,
                },
            )
            raise PaymentTimeoutError(
                employee_id, amount, self.timeout_seconds,
            ) from None

    def close(self, wait: bool = False) -> None:
        """Stop accepting calls; by default does not wait for overrunning ones."""
        self._executor.shutdown(wait=wait, cancel_futures=True)

    def __enter__(self) -> TimeoutPaymentGateway:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
