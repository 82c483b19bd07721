"""
Payroll Kernel

A minimal payroll engine with:
- Identity-keyed employee stores (in-memory and SQLAlchemy-backed)
- A payment gateway boundary with typed outcomes
- A batch processor that isolates per-employee payment failures
"""

__version__ = "0.1.0"
