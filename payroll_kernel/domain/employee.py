"""
Employee -- the identity-keyed payroll record.

Responsibility:
    Holds an employee's id, salary and paid status.  Two records with the
    same id are the same logical employee, whatever their salary or status.

Architecture position:
    Kernel > Domain -- pure data, zero I/O.

Invariants enforced:
    - ``id`` and ``salary`` are read-only after construction.
    - ``salary`` is a finite, non-negative ``Decimal`` (never ``float``).
    - Equality and hashing use ``id`` alone.

Failure modes:
    - InvalidEmployeeError: id missing or empty.
    - InvalidSalaryError: salary negative, NaN, infinite or not numeric.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from payroll_kernel.exceptions import InvalidEmployeeError, InvalidSalaryError


def _to_decimal(employee_id: str, salary: Any) -> Decimal:
    if isinstance(salary, bool):
        raise InvalidSalaryError(employee_id, salary)
    if isinstance(salary, float):
        salary = str(salary)
    try:
        amount = Decimal(salary)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidSalaryError(employee_id, salary) from None
    if not amount.is_finite() or amount < 0:
        raise InvalidSalaryError(employee_id, salary)
    return amount


class Employee:
    """An employee on the payroll.

    Created with an ``id`` and ``salary``; ``paid`` starts out False and is
    only changed by a payroll run through ``mark_paid`` / ``mark_unpaid``.
    """

    __slots__ = ("_id", "_salary", "paid")

    def __init__(self, id: str, salary: Decimal | int | float | str, paid: bool = False):
        if not isinstance(id, str) or not id:
            raise InvalidEmployeeError(id, "id must be a non-empty string")
        self._id = id
        self._salary = _to_decimal(id, salary)
        self.paid = paid

    @property
    def id(self) -> str:
        return self._id

    @property
    def salary(self) -> Decimal:
        return self._salary

    def mark_paid(self) -> None:
        self.paid = True

    def mark_unpaid(self) -> None:
        self.paid = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Employee(id={self._id!r}, salary={self._salary}, "
            f"paid={self.paid})"
        )
