"""
Pytest fixtures for the payroll engine test suite.

Provides:
- Deterministic clock
- In-memory SQLite sessions for the SQL-backed store
- Employee, store and gateway builders
- Structured log capture
"""

from datetime import datetime, timezone
from io import StringIO
import json
import logging

import pytest
from sqlalchemy.orm import sessionmaker

from payroll_kernel.db.engine import create_engine_from_url, create_tables
from payroll_kernel.domain.clock import DeterministicClock
from payroll_kernel.domain.employee import Employee
from payroll_kernel.gateways.recording import RecordingPaymentGateway
from payroll_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from payroll_kernel.stores.memory import InMemoryEmployeeStore


@pytest.fixture
def clock():
    return DeterministicClock(datetime(2026, 1, 31, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def employees():
    """The two-employee roster used throughout: ("1", 1000) then ("2", 1200)."""
    return [Employee("1", 1000), Employee("2", 1200)]


@pytest.fixture
def memory_store(employees):
    return InMemoryEmployeeStore(employees)


@pytest.fixture
def gateway():
    """Gateway that accepts every payment."""
    return RecordingPaymentGateway()


@pytest.fixture
def db_session():
    """In-memory SQLite session; never committed."""
    engine = create_engine_from_url("sqlite://")
    create_tables(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def structured_logs():
    """Route payroll_kernel logs into a buffer; yields a parser for the lines."""
    reset_logging()
    LogContext.clear()
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    configure_logging(level=logging.DEBUG, handler=handler)

    def records() -> list[dict]:
        return [
            json.loads(line)
            for line in stream.getvalue().splitlines()
            if line.strip()
        ]

    yield records
    LogContext.clear()
    reset_logging()
