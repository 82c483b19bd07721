"""Stub employee store for tests: fixed contents, recorded interactions."""

from __future__ import annotations

from typing import Iterable

from payroll_kernel.domain.employee import Employee


class StubEmployeeStore:
    """Returns the same employee objects on every ``find_all``.

    ``find_all_calls`` counts reads; ``saved`` lists every employee passed
    to ``save`` (which does not change what ``find_all`` returns).
    """

    def __init__(self, employees: Iterable[Employee] = ()):
        self._employees = tuple(employees)
        self.find_all_calls = 0
        self.saved: list[Employee] = []

    def find_all(self) -> tuple[Employee, ...]:
        self.find_all_calls += 1
        return self._employees

    def save(self, employee: Employee) -> None:
        self.saved.append(employee)
