"""
Module: payroll_kernel.db.base
Responsibility: Declarative base and column types for the payroll kernel's
    SQLAlchemy models.
Architecture position: Kernel > DB.  Lowest-level import target for ORM
    models; MUST NOT import from models/, stores/, services/ or domain/.

Invariants enforced:
    - Decimal precision: type_annotation_map maps Python Decimal to
      ExactDecimal, which never passes a salary through float.
    - Timestamps are timezone-aware.
"""

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from sqlalchemy import DateTime, Numeric, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class ExactDecimal(TypeDecorator):
    """
    Decimal column that round-trips every digit on every backend.

    Contract:
        Uses NUMERIC(38, 9) where the database has a native decimal type.
        SQLite has none (its NUMERIC affinity stores REAL), so there the
        value is kept as its decimal text instead.

    Guarantees:
        - process_result_value always returns Decimal (or None).
        - cache_ok=True enables SQLAlchemy statement caching.
    """

    impl = Numeric(38, 9)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(64))
        return dialect.type_descriptor(Numeric(38, 9, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value) if isinstance(value, str) else value


class Base(DeclarativeBase):
    """
    Declarative base for all payroll ORM models.

    Guarantees:
        - Decimal maps to ExactDecimal.
        - datetime maps to DateTime(timezone=True).
    """

    type_annotation_map: ClassVar[dict] = {
        Decimal: ExactDecimal(),
        datetime: DateTime(timezone=True),
    }


class TimestampedBase(Base):
    """Abstract base adding created_at / updated_at audit columns."""

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
