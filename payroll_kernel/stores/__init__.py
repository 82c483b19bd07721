"""Employee stores: the protocol plus in-memory, SQL and stub variants."""

from payroll_kernel.stores.base import EmployeeStore
from payroll_kernel.stores.memory import InMemoryEmployeeStore
from payroll_kernel.stores.sql import SqlEmployeeStore
from payroll_kernel.stores.stub import StubEmployeeStore

__all__ = [
    "EmployeeStore",
    "InMemoryEmployeeStore",
    "SqlEmployeeStore",
    "StubEmployeeStore",
]
