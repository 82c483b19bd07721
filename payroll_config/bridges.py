"""
Config -> Kernel Bridges.

Functions that turn a ``PayrollConfig`` into kernel objects.  They live in
payroll_config (the producer) because the kernel must never import
payroll_config.

Usage:
    from payroll_config import get_active_config
    from payroll_config.bridges import build_processor, build_store

    config = get_active_config()
    store = build_store(config)
    processor = build_processor(config, store, bank_gateway)
    paid = processor.pay_employees()
"""

from __future__ import annotations

import logging

from payroll_config.schema import PayrollConfig
from payroll_kernel.domain.clock import Clock
from payroll_kernel.domain.employee import Employee
from payroll_kernel.gateways.base import PaymentGateway
from payroll_kernel.gateways.timeout import TimeoutPaymentGateway
from payroll_kernel.logging_config import configure_logging
from payroll_kernel.services.payroll_processor import PayrollProcessor
from payroll_kernel.stores.base import EmployeeStore
from payroll_kernel.stores.memory import InMemoryEmployeeStore


def build_store(config: PayrollConfig) -> InMemoryEmployeeStore:
    """In-memory store seeded with the configured roster, in roster order."""
    return InMemoryEmployeeStore(
        Employee(e.id, e.salary) for e in config.employees
    )


def build_gateway(config: PayrollConfig, gateway: PaymentGateway) -> PaymentGateway:
    """Wrap ``gateway`` in a timeout when the config asks for one."""
    if config.gateway.timeout_seconds is None:
        return gateway
    return TimeoutPaymentGateway(gateway, config.gateway.timeout_seconds)


def build_processor(
    config: PayrollConfig,
    store: EmployeeStore,
    gateway: PaymentGateway,
    clock: Clock | None = None,
) -> PayrollProcessor:
    """Processor wired with the configured worker count and gateway hardening."""
    return PayrollProcessor(
        store=store,
        gateway=build_gateway(config, gateway),
        clock=clock,
        max_workers=config.processor.max_workers,
    )


def configure_logging_from(config: PayrollConfig, **kwargs) -> None:
    """Apply ``config.logging`` via ``configure_logging`` (idempotent)."""
    configure_logging(level=logging.getLevelName(config.logging.level), **kwargs)
