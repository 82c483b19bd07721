"""SQLAlchemy ORM models."""

from payroll_kernel.models.employee import EmployeeModel

__all__ = ["EmployeeModel"]
