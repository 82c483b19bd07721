"""
payroll_config -- single public entrypoint for payroll configuration.

Responsibility:
    ``get_active_config()`` is the one way to obtain a ``PayrollConfig``
    at runtime.  YAML parsing lives in ``loader``; turning the config into
    kernel objects lives in ``bridges``.

Architecture position:
    Sits above ``payroll_kernel``.  The kernel MUST NEVER import from
    ``payroll_config``.

Failure modes:
    - ``FileNotFoundError`` -- the configuration file does not exist.
    - ``ValueError`` / ``KeyError`` -- schema validation failures.
    - ``yaml.YAMLError`` -- malformed YAML.
"""

from __future__ import annotations

from pathlib import Path

from payroll_config.loader import load_config
from payroll_config.schema import PayrollConfig
from payroll_kernel.logging_config import get_logger

_logger = get_logger("config")

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(path: Path | str | None = None) -> PayrollConfig:
    """Load the payroll configuration.

    Args:
        path: YAML file to load.  Defaults to payroll_config/sets/default.yaml.

    Returns:
        The parsed, validated ``PayrollConfig``.
    """
    config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH
    config = load_config(config_path)

    _logger.info(
        "payroll_config_loaded",
        extra={
            "config_path": str(config_path),
            "checksum": config.checksum,
            "employee_count": len(config.employees),
            "max_workers": config.processor.max_workers,
            "timeout_seconds": config.gateway.timeout_seconds,
        },
    )
    return config


__all__ = ["PayrollConfig", "get_active_config"]
