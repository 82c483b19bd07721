"""
Module: payroll_kernel.db.engine
Responsibility: SQLAlchemy engine creation, schema creation and a
    transactional scope helper for the SQL-backed employee store.
Architecture position: Kernel > DB.

Failure modes:
    - sqlalchemy.exc.ArgumentError on a malformed database URL.
    - Any exception inside ``session_scope`` rolls the transaction back and
      propagates.
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from payroll_kernel.db.base import Base
from payroll_kernel.logging_config import get_logger

logger = get_logger("db.engine")


def create_engine_from_url(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for ``database_url``.

    In-memory SQLite URLs share one connection across threads so every
    session sees the same database.
    """
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=echo, pool_pre_ping=True)

    logger.info(
        "database_engine_created",
        extra={"dialect": engine.dialect.name},
    )
    return engine


def create_tables(engine: Engine) -> None:
    """Create every table registered on ``Base`` (idempotent)."""
    import payroll_kernel.models  # noqa: F401  registers mappers

    Base.metadata.create_all(engine)
    logger.info(
        "database_tables_created",
        extra={"tables": sorted(Base.metadata.tables)},
    )


def drop_tables(engine: Engine) -> None:
    """Drop every table registered on ``Base``."""
    Base.metadata.drop_all(engine)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """
    Provide a transactional scope around a series of operations.

    Commits on normal exit, rolls back and re-raises on error, always closes.
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
