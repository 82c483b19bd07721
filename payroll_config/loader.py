"""
Configuration Loader (``payroll_config.loader``).

Responsibility
--------------
Loads a YAML payroll configuration file and parses it into the typed
``payroll_config.schema`` dataclasses.  Runtime callers go through
``payroll_config.get_active_config()``.

Invariants enforced
-------------------
* Parse errors raise ``ValueError`` or ``KeyError`` with descriptive
  messages; no silent defaults for required fields.
* Every parsed object is a frozen dataclass from ``schema.py``.
* ``compute_checksum`` produces a deterministic SHA-256 hash of the
  parsed configuration.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing ``id`` / ``salary`` on a roster entry  -> ``KeyError``.
* Out-of-range values or duplicate employee ids  -> ``ValueError``.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from payroll_config.schema import (
    EmployeeDef,
    GatewayConfig,
    LoggingConfig,
    PayrollConfig,
    ProcessorConfig,
)

_LEVEL_NAMES = frozenset(logging.getLevelNamesMapping())


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the top level is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(
            f"{path}: top level must be a mapping, got {type(data).__name__}"
        )
    return data


def parse_decimal(value: Any, field_name: str) -> Decimal:
    """Parse a Decimal from YAML (string, int or float)."""
    if isinstance(value, bool):
        raise ValueError(f"{field_name}: expected a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"{field_name}: expected a number, got {value!r}") from None


def parse_processor(data: dict[str, Any]) -> ProcessorConfig:
    max_workers = data.get("max_workers", 1)
    if not isinstance(max_workers, int) or isinstance(max_workers, bool) or max_workers < 1:
        raise ValueError(
            f"processor.max_workers must be an integer >= 1, got {max_workers!r}"
        )
    return ProcessorConfig(max_workers=max_workers)


def parse_gateway(data: dict[str, Any]) -> GatewayConfig:
    timeout = data.get("timeout_seconds")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ValueError(
                f"gateway.timeout_seconds must be null or a positive number, "
                f"got {timeout!r}"
            )
        timeout = float(timeout)
    return GatewayConfig(timeout_seconds=timeout)


def parse_logging(data: dict[str, Any]) -> LoggingConfig:
    level = str(data.get("level", "INFO")).upper()
    if level not in _LEVEL_NAMES:
        raise ValueError(f"logging.level: unknown level {level!r}")
    return LoggingConfig(level=level)


def parse_employees(entries: list[dict[str, Any]]) -> tuple[EmployeeDef, ...]:
    """
    Parse the roster.

    Raises:
        KeyError: if an entry lacks ``id`` or ``salary``.
        ValueError: on a blank id, a negative salary or a repeated id.
    """
    seen: set[str] = set()
    employees = []
    for i, entry in enumerate(entries):
        raw_id = entry["id"]
        employee_id = "" if raw_id is None else str(raw_id)
        if not employee_id.strip():
            raise ValueError(f"employees[{i}].id must not be blank, got {raw_id!r}")
        salary = parse_decimal(entry["salary"], f"employees[{i}].salary")
        if not salary.is_finite() or salary < 0:
            raise ValueError(
                f"employees[{i}].salary must be a finite, non-negative amount, "
                f"got {salary}"
            )
        if employee_id in seen:
            raise ValueError(f"employees[{i}]: duplicate id {employee_id!r}")
        seen.add(employee_id)
        employees.append(EmployeeDef(id=employee_id, salary=salary))
    return tuple(employees)


def parse_config(data: dict[str, Any]) -> PayrollConfig:
    """Parse a complete ``PayrollConfig`` from a dict and stamp its checksum."""
    config = PayrollConfig(
        processor=parse_processor(data.get("processor") or {}),
        gateway=parse_gateway(data.get("gateway") or {}),
        logging=parse_logging(data.get("logging") or {}),
        employees=parse_employees(data.get("employees") or []),
    )
    return dataclasses.replace(config, checksum=compute_checksum(config))


def load_config(path: Path) -> PayrollConfig:
    """Load and parse a YAML configuration file."""
    return parse_config(load_yaml_file(path))


def compute_checksum(config: PayrollConfig) -> str:
    """
    SHA-256 over the canonical JSON form of ``config``.

    The ``checksum`` field itself is excluded so the value is stable.
    """
    payload = dataclasses.asdict(config)
    payload.pop("checksum", None)
    canonical = json.dumps(payload, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
