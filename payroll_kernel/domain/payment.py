"""
payroll_kernel.domain.payment -- Typed payment outcomes and run reports.

Frozen dataclasses with enum status fields and tuples for immutable
collections.  ZERO I/O.

Invariants enforced:
    - A PaymentOutcome is either PAID with no error or FAILED with the
      exception the gateway raised.
    - PayrollRunResult.results is ordered like the store's ``find_all``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID


# =============================================================================
# Status enums
# =============================================================================


class PaymentStatus(str, Enum):
    """Outcome of one gateway call for one employee."""

    PAID = "paid"
    FAILED = "failed"


class PayrollRunStatus(str, Enum):
    """Aggregate status of a payroll run."""

    COMPLETED = "completed"  # Every employee paid (or nobody to pay)
    FAILED = "failed"  # Nobody paid
    PARTIALLY_COMPLETED = "partially_completed"  # Some payments failed


# =============================================================================
# Per-call outcome
# =============================================================================


@dataclass(frozen=True)
class PaymentOutcome:
    """Result of a single ``PaymentGateway.pay`` call.

    Build with ``success()`` or ``failure(exc)``; the processor branches
    on ``succeeded``.
    """

    status: PaymentStatus
    error: Exception | None = field(default=None, compare=False)

    @classmethod
    def success(cls) -> PaymentOutcome:
        return cls(status=PaymentStatus.PAID)

    @classmethod
    def failure(cls, error: Exception) -> PaymentOutcome:
        return cls(status=PaymentStatus.FAILED, error=error)

    @property
    def succeeded(self) -> bool:
        return self.status is PaymentStatus.PAID

    @property
    def error_code(self) -> str | None:
        if self.error is None:
            return None
        return getattr(self.error, "code", None) or "UNHANDLED_EXCEPTION"

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__


# =============================================================================
# Run report
# =============================================================================


@dataclass(frozen=True)
class EmployeePaymentResult:
    """Immutable record of one employee's payment attempt in a run."""

    employee_id: str
    amount: Decimal
    status: PaymentStatus
    error_code: str | None = None
    error_message: str | None = None
    duration_ms: int = 0


@dataclass(frozen=True)
class PayrollRunResult:
    """Immutable summary of a complete payroll run."""

    run_id: UUID
    status: PayrollRunStatus
    total_employees: int
    paid_count: int
    failed_count: int
    results: tuple[EmployeePaymentResult, ...] = ()
    started_at: datetime | None = None
    completed_at: datetime | None = None
    duration_ms: int = 0
    correlation_id: str | None = None

    @property
    def paid_employee_ids(self) -> tuple[str, ...]:
        return tuple(
            r.employee_id for r in self.results if r.status is PaymentStatus.PAID
        )

    @property
    def failed_employee_ids(self) -> tuple[str, ...]:
        return tuple(
            r.employee_id for r in self.results if r.status is PaymentStatus.FAILED
        )
