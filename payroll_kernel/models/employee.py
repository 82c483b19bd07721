"""
ORM model for employee persistence.

Contract:
    EmployeeModel persists one employee per row keyed by ``employee_id``.
    ``position`` is assigned once at insert and never changes, so ordering
    by it reproduces first-insertion order.  ``to_domain()`` /
    ``from_domain()`` convert to and from ``Employee``.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Boolean, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from payroll_kernel.db.base import TimestampedBase
from payroll_kernel.domain.employee import Employee


class EmployeeModel(TimestampedBase):
    """Persistent employee record."""

    __tablename__ = "employees"

    __table_args__ = (
        Index("ix_employees_position", "position", unique=True),
    )

    employee_id: Mapped[str] = mapped_column(String(100), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    salary: Mapped[Decimal] = mapped_column(nullable=False)
    paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def to_domain(self) -> Employee:
        return Employee(self.employee_id, self.salary, paid=self.paid)

    @classmethod
    def from_domain(cls, employee: Employee, position: int) -> EmployeeModel:
        return cls(
            employee_id=employee.id,
            position=position,
            salary=employee.salary,
            paid=employee.paid,
        )

    def __repr__(self) -> str:
        return f"<EmployeeModel {self.employee_id} @{self.position}>"
