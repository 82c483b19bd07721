"""
InMemoryEmployeeStore -- ordered, identity-keyed employee collection.

The store copies the injected collection at construction and is the only
component that mutates its membership afterwards.  An index from id to
list position keeps upserts O(1) and in place.
"""

from __future__ import annotations

from typing import Iterable

from payroll_kernel.domain.employee import Employee
from payroll_kernel.logging_config import get_logger

logger = get_logger("stores.memory")


class InMemoryEmployeeStore:
    """Employee store backed by a list plus an id -> position index."""

    def __init__(self, employees: Iterable[Employee] | None = None):
        self._employees: list[Employee] = []
        self._positions: dict[str, int] = {}
        for employee in employees or ():
            self.save(employee)

    def find_all(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    def save(self, employee: Employee) -> None:
        position = self._positions.get(employee.id)
        if position is None:
            self._positions[employee.id] = len(self._employees)
            self._employees.append(employee)
            logger.debug(
                "employee_inserted",
                extra={"employee_id": employee.id, "position": len(self._employees) - 1},
            )
        else:
            self._employees[position] = employee
            logger.debug(
                "employee_replaced",
                extra={"employee_id": employee.id, "position": position},
            )

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._positions
