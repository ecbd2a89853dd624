"""Configuration objects for statement diagnostics."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sqlbind.utils.correlation import generate_error_code

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from sqlbind.observability._observer import StatementEvent


StatementObserver = Callable[["StatementEvent"], None]


@dataclass(slots=True)
class RedactionConfig:
    """Controls argument redaction in log records and exception messages."""

    mask_parameters: bool | None = None

    def copy(self) -> "RedactionConfig":
        return RedactionConfig(mask_parameters=self.mask_parameters)


@dataclass(slots=True)
class ObservabilityConfig:
    """Observers, redaction and error-code settings for statement execution."""

    statement_observers: tuple[StatementObserver, ...] | None = None
    redaction: "RedactionConfig | None" = None
    detailed_exceptions: bool | None = None
    error_code_factory: Callable[[], str] = field(default=generate_error_code)

    def __post_init__(self) -> None:
        if self.statement_observers is not None:
            self.statement_observers = tuple(self.statement_observers)

    @property
    def mask_parameters(self) -> bool:
        return bool(self.redaction and self.redaction.mask_parameters)

    @property
    def include_sql_in_exceptions(self) -> bool:
        return self.detailed_exceptions is not False

    def copy(self) -> "ObservabilityConfig":
        """Return a copy that shares no mutable state."""

        observers = tuple(self.statement_observers) if self.statement_observers else None
        redaction_copy = self.redaction.copy() if self.redaction else None
        return ObservabilityConfig(
            statement_observers=observers,
            redaction=redaction_copy,
            detailed_exceptions=self.detailed_exceptions,
            error_code_factory=self.error_code_factory,
        )

    @classmethod
    def merge(
        cls, base_config: "ObservabilityConfig | None", override_config: "ObservabilityConfig | None"
    ) -> "ObservabilityConfig":
        """Merge a base configuration with an override; observers accumulate."""

        if base_config is None and override_config is None:
            return cls()

        base = base_config.copy() if base_config else cls()
        override = override_config
        if override is None:
            return base

        observers: tuple[StatementObserver, ...] | None
        if base.statement_observers and override.statement_observers:
            observers = base.statement_observers + tuple(override.statement_observers)
        elif override.statement_observers:
            observers = tuple(override.statement_observers)
        else:
            observers = base.statement_observers

        detailed = base.detailed_exceptions
        if override.detailed_exceptions is not None:
            detailed = override.detailed_exceptions

        error_code_factory = base.error_code_factory
        if override.error_code_factory is not generate_error_code:
            error_code_factory = override.error_code_factory

        return ObservabilityConfig(
            statement_observers=observers,
            redaction=_merge_redaction(base.redaction, override.redaction),
            detailed_exceptions=detailed,
            error_code_factory=error_code_factory,
        )


def _merge_redaction(base: "RedactionConfig | None", override: "RedactionConfig | None") -> "RedactionConfig | None":
    if base is None and override is None:
        return None
    if override is None:
        return base.copy() if base else None
    if base is None:
        return override.copy()
    merged = base.copy()
    if override.mask_parameters is not None:
        merged.mask_parameters = override.mask_parameters
    return merged


__all__ = ("ObservabilityConfig", "RedactionConfig", "StatementObserver")
