"""Public observability exports."""

from sqlbind.observability._config import ObservabilityConfig, RedactionConfig, StatementObserver
from sqlbind.observability._formatting import (
    MASK,
    display_parameters,
    exception_message,
    format_argument,
    render_sql,
)
from sqlbind.observability._metric import Metric
from sqlbind.observability._observer import (
    StatementEvent,
    create_event,
    default_statement_observer,
    format_statement_event,
)

__all__ = (
    "MASK",
    "Metric",
    "ObservabilityConfig",
    "RedactionConfig",
    "StatementEvent",
    "StatementObserver",
    "create_event",
    "default_statement_observer",
    "display_parameters",
    "exception_message",
    "format_argument",
    "format_statement_event",
    "render_sql",
)
