"""Executor configuration and environment loading.

Environment Variables Supported:
- SQLBIND_DIALECT: sqlglot dialect used to classify statements (string)
- SQLBIND_DETAILED_EXCEPTIONS: include SQL in exception messages (true/false)
- SQLBIND_MASK_PARAMETERS: replace argument values with a mask in logs and messages (true/false)
"""

import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from sqlbind.exceptions import ImproperConfigurationError
from sqlbind.observability import ObservabilityConfig, RedactionConfig

__all__ = ("ExecutorConfig", "load_config_from_env")

_TRUE_VALUES = ("true", "1", "yes", "on", "enabled")
_FALSE_VALUES = ("false", "0", "no", "off", "disabled")


@dataclass(frozen=True)
class ExecutorConfig:
    """Settings shared by every statement created from one :class:`~sqlbind.base.Database`."""

    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)
    dialect: Optional[str] = None

    def replace(self, **kwargs: Any) -> "ExecutorConfig":
        return replace(self, **kwargs)


def _env_bool(key: str, default: Optional[bool]) -> Optional[bool]:
    """Get boolean value from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    msg = f"Invalid boolean value for {key}: {value!r}"
    raise ImproperConfigurationError(msg)


def load_config_from_env() -> ExecutorConfig:
    """Load configuration from ``SQLBIND_*`` environment variables.

    Returns:
        ExecutorConfig with unset variables left at their defaults

    Raises:
        ImproperConfigurationError: If a boolean variable holds an unrecognized value.
    """
    mask_parameters = _env_bool("SQLBIND_MASK_PARAMETERS", None)
    observability = ObservabilityConfig(
        redaction=RedactionConfig(mask_parameters=mask_parameters) if mask_parameters is not None else None,
        detailed_exceptions=_env_bool("SQLBIND_DETAILED_EXCEPTIONS", None),
    )
    return ExecutorConfig(observability=observability, dialect=os.getenv("SQLBIND_DIALECT") or None)
