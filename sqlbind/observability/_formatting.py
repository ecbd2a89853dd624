"""Debug rendering of SQL and arguments for logs and exception messages."""

import datetime
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Final

from sqlbind.parameters.types import Argument, ArgumentKind, ParameterStyle
from sqlbind.parameters.validator import ParameterValidator

__all__ = ("MASK", "display_parameters", "exception_message", "format_argument", "render_sql")

MASK: Final = "***"

_validator = ParameterValidator()


def format_argument(value: Any) -> Any:
    """Return a log-safe representation of one argument value."""
    if isinstance(value, Argument):
        if value.is_null:
            return None
        if value.kind is ArgumentKind.BLOB_STREAM:
            return "<binary stream>"
        if value.kind is ArgumentKind.CLOB_STREAM:
            return "<character stream>"
        value = value.value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"<bytes len={len(value)}>"
    return value


def display_parameters(parameters: "Sequence[Any]", *, mask: bool = False) -> "list[Any]":
    if mask:
        return [MASK for _ in parameters]
    return [format_argument(p) for p in parameters]


def _literal(value: Any) -> str:
    if isinstance(value, Argument):
        if value.is_null:
            return "null"
        if value.kind.is_stream:
            return format_argument(value)
        value = value.value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return f"'{value.isoformat()}'"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return format_argument(value)
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    return repr(value)


def render_sql(sql: str, parameters: "Sequence[Any]", *, mask: bool = False) -> str:
    """Inline positional arguments into ``?`` SQL for debugging.

    The output is for humans only and must never be executed.
    """
    placeholders = [p for p in _validator.extract_parameters(sql) if p.style is ParameterStyle.QMARK]
    values = list(parameters)
    parts: list[str] = []
    current_pos = 0
    for placeholder, value in zip(placeholders, values):
        parts.append(sql[current_pos : placeholder.position])
        parts.append(MASK if mask else _literal(value))
        current_pos = placeholder.position + len(placeholder.placeholder_text)
    parts.append(sql[current_pos:])
    rendered = "".join(parts)
    if len(placeholders) != len(values):
        rendered += f" (wrong number of parameters: {len(placeholders)} placeholders, {len(values)} values)"
    return rendered


def exception_message(
    message: str, sql: str, parameters: "Sequence[Any]", error_code: str, *, detailed: bool, mask: bool
) -> str:
    text = f"{message} (errorCode={error_code})"
    if detailed:
        text += f"\nSQL: {render_sql(sql, parameters, mask=mask)}"
    return text
