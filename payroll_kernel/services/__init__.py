"""Kernel services."""

from payroll_kernel.services.payroll_processor import PayrollProcessor

__all__ = ["PayrollProcessor"]
