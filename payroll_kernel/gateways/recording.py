"""Recording payment gateway test double with scripted failures."""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import Callable, Iterable

from payroll_kernel.exceptions import PaymentFailedError


class RecordingPaymentGateway:
    """Records every ``pay`` call and fails the ones it is told to.

    A call fails when ``fail_all`` is set, when its employee id is in
    ``fail_for``, or when its 0-based call index is in ``fail_on_calls``.
    Failures raise ``error(employee_id, amount)`` if given, otherwise
    ``PaymentFailedError``.  Calls are recorded whether they fail or not.
    """

    def __init__(
        self,
        fail_for: Iterable[str] = (),
        fail_on_calls: Iterable[int] = (),
        fail_all: bool = False,
        error: Callable[[str, Decimal], Exception] | None = None,
    ):
        self.fail_for = frozenset(fail_for)
        self.fail_on_calls = frozenset(fail_on_calls)
        self.fail_all = fail_all
        self._error = error
        self.calls: list[tuple[str, Decimal]] = []
        self._lock = threading.Lock()

    def pay(self, employee_id: str, amount: Decimal) -> None:
        with self._lock:
            index = len(self.calls)
            self.calls.append((employee_id, amount))

        if (
            self.fail_all
            or employee_id in self.fail_for
            or index in self.fail_on_calls
        ):
            if self._error is not None:
                raise self._error(employee_id, amount)
            raise PaymentFailedError(employee_id, amount, "scripted failure")

    @property
    def called_ids(self) -> list[str]:
        return [employee_id for employee_id, _ in self.calls]
