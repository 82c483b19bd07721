"""Database layer: declarative base and engine helpers."""

from payroll_kernel.db.base import Base, TimestampedBase
from payroll_kernel.db.engine import (
    create_engine_from_url,
    create_tables,
    drop_tables,
    session_scope,
)

__all__ = [
    "Base",
    "TimestampedBase",
    "create_engine_from_url",
    "create_tables",
    "drop_tables",
    "session_scope",
]
