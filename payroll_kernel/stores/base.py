"""
EmployeeStore protocol.

Contract:
    ``find_all()`` returns every stored employee in first-insert order as a
    snapshot; ``save()`` upserts by employee id, replacing a known id in
    place and appending an unseen one.

Invariants enforced:
    - At most one employee per id.
    - Replacing a record never changes its position.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from payroll_kernel.domain.employee import Employee


@runtime_checkable
class EmployeeStore(Protocol):
    """Protocol for anything that holds the payroll's employees.

    Non-goals:
        - No removal operation.
        - No validation beyond identity matching.
    """

    def find_all(self) -> Sequence[Employee]:
        """Return all stored employees in insertion order."""
        ...

    def save(self, employee: Employee) -> None:
        """Insert ``employee`` or replace the record with the same id."""
        ...
