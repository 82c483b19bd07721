"""
SqlEmployeeStore -- SQLAlchemy-backed employee store.

Contract:
    Same upsert semantics as the in-memory store, persisted in the
    ``employees`` table.  Order comes from the ``position`` column, which is
    fixed when a row is first inserted.

Non-goals:
    - Does NOT call ``session.commit()`` -- caller controls boundaries.
    - Employees returned by ``find_all`` are detached domain objects;
      changing their ``paid`` flag does not touch the database until they
      are passed back to ``save``.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from payroll_kernel.domain.employee import Employee
from payroll_kernel.logging_config import get_logger
from payroll_kernel.models.employee import EmployeeModel

logger = get_logger("stores.sql")


class SqlEmployeeStore:
    """Employee store persisted through a SQLAlchemy session."""

    def __init__(self, session: Session):
        self._session = session

    def find_all(self) -> tuple[Employee, ...]:
        models = self._session.execute(
            select(EmployeeModel).order_by(EmployeeModel.position)
        ).scalars().all()
        return tuple(m.to_domain() for m in models)

    def save(self, employee: Employee) -> None:
        model = self._session.get(EmployeeModel, employee.id)

        if model is None:
            last = self._session.execute(
                select(func.max(EmployeeModel.position))
            ).scalar_one_or_none()
            position = 0 if last is None else last + 1
            self._session.add(EmployeeModel.from_domain(employee, position))
            logger.debug(
                "employee_inserted",
                extra={"employee_id": employee.id, "position": position},
            )
        else:
            model.salary = employee.salary
            model.paid = employee.paid
            logger.debug(
                "employee_replaced",
                extra={"employee_id": employee.id, "position": model.position},
            )

        self._session.flush()
