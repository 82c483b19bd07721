"""
PayrollConfig schema.

Frozen dataclasses describing a payroll deployment: how the processor
runs, how the gateway is hardened, how logging is set up, and the
employee roster to seed the in-memory store with.  The loader parses
YAML into these types; the bridges turn them into kernel objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProcessorConfig:
    """How a payroll run is executed."""

    max_workers: int = 1  # 1 = sequential, store-ordered gateway calls


@dataclass(frozen=True)
class GatewayConfig:
    """Hardening applied around the payment gateway."""

    timeout_seconds: float | None = None  # None = wait indefinitely


@dataclass(frozen=True)
class LoggingConfig:
    """Kernel logging setup."""

    level: str = "INFO"


@dataclass(frozen=True)
class EmployeeDef:
    """One roster entry."""

    id: str
    salary: Decimal


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PayrollConfig:
    """Complete payroll configuration."""

    processor: ProcessorConfig = field(default_factory=ProcessorConfig)
    gateway: GatewayConfig = field(default_factory=GatewayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    employees: tuple[EmployeeDef, ...] = ()
    checksum: str = ""
