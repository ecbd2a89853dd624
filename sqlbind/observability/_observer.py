"""Statement observer primitives for SQL execution events."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from time import time
from typing import Any

from sqlbind.utils.logging import get_logger

__all__ = ("StatementEvent", "create_event", "default_statement_observer", "format_statement_event")


logger = get_logger("sqlbind.observability")


StatementObserver = Callable[["StatementEvent"], None]


@dataclass(slots=True)
class StatementEvent:
    """Structured record describing one statement execution."""

    sql: str
    parameters: "list[Any]"
    operation: str
    success: bool
    rows_affected: "int | None"
    expected_rows: int
    error_code: "str | None"
    correlation_id: "str | None"
    duration_s: float
    started_at: float
    timings: "dict[str, float]" = field(default_factory=dict)
    error: "str | None" = None

    def as_dict(self) -> "dict[str, Any]":
        """Return event payload as a dictionary."""

        return {
            "sql": self.sql,
            "parameters": self.parameters,
            "operation": self.operation,
            "success": self.success,
            "rows_affected": self.rows_affected,
            "expected_rows": self.expected_rows,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "duration_s": self.duration_s,
            "started_at": self.started_at,
            "timings": self.timings,
            "error": self.error,
        }


def format_statement_event(event: StatementEvent) -> str:
    """Create a concise human-readable representation of a statement event."""

    rows_label = "rows=%s" % (event.rows_affected if event.rows_affected is not None else "unknown")
    timing_label = ",".join(f"{name}={seconds * 1000:.3f}ms" for name, seconds in event.timings.items())
    status = "succeeded" if event.success else f"failed (errorCode={event.error_code})"
    return (
        f"{event.operation} {status} ({rows_label}, {timing_label})\n"
        f"SQL: {event.sql}\nParameters: {event.parameters}"
    )


def default_statement_observer(event: StatementEvent) -> None:
    """Log the execution record: DEBUG on success, ERROR on failure."""

    level = logging.DEBUG if event.success else logging.ERROR
    if not logger.isEnabledFor(level):
        return
    logger.log(level, format_statement_event(event), extra={"extra_fields": event.as_dict()})


def create_event(
    *,
    sql: str,
    parameters: "list[Any]",
    operation: str,
    success: bool,
    rows_affected: "int | None",
    expected_rows: int,
    error_code: "str | None",
    correlation_id: "str | None",
    duration_s: float,
    timings: "dict[str, float] | None" = None,
    error: "str | None" = None,
    started_at: "float | None" = None,
) -> StatementEvent:
    """Factory helper used by the executor to build statement events."""

    return StatementEvent(
        sql=sql,
        parameters=parameters,
        operation=operation,
        success=success,
        rows_affected=rows_affected,
        expected_rows=expected_rows,
        error_code=error_code,
        correlation_id=correlation_id,
        duration_s=duration_s,
        started_at=started_at if started_at is not None else time(),
        timings=timings or {},
        error=error,
    )
