"""A :class:`~sqlbind.protocols.Connection` over any DB-API 2.0 connection."""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import IO, TYPE_CHECKING, Any, Callable

from sqlbind.exceptions import ImproperConfigurationError
from sqlbind.parameters import DBAPI_PARAMSTYLES, ArgumentKind, ParameterConverter, ParameterStyle
from sqlbind.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    TypeCoercionMap = Mapping[type, Callable[[Any], Any]]

__all__ = ("DBAPIConnection", "DBAPIPreparedStatement", "resolve_parameter_style")

logger = get_logger("sqlbind.adapters.dbapi")


def resolve_parameter_style(paramstyle: str) -> ParameterStyle:
    """Map a PEP 249 ``paramstyle`` string onto a :class:`ParameterStyle`.

    Raises:
        ImproperConfigurationError: If the paramstyle is unknown.
    """
    try:
        return DBAPI_PARAMSTYLES[paramstyle]
    except KeyError:
        msg = f"Unsupported DB-API paramstyle {paramstyle!r}; expected one of {sorted(DBAPI_PARAMSTYLES)}"
        raise ImproperConfigurationError(msg) from None


class DBAPIPreparedStatement:
    """Collects bound values and executes them through a DB-API cursor.

    DB-API has no separate prepare step: the cursor is opened here and the
    ``?`` placeholders are rewritten for the driver's paramstyle.
    """

    __slots__ = (
        "_closed",
        "_cursor",
        "_parameter_style",
        "_placeholder_count",
        "_sql",
        "_type_coercion_map",
        "_values",
    )

    def __init__(
        self,
        cursor: Any,
        sql: str,
        parameter_style: ParameterStyle,
        type_coercion_map: TypeCoercionMap | None = None,
        converter: ParameterConverter | None = None,
    ) -> None:
        converter = converter or ParameterConverter()
        parameter_info = [
            p for p in converter.validator.extract_parameters(sql) if p.style is ParameterStyle.QMARK
        ]
        self._cursor = cursor
        self._sql = converter.convert_placeholders(sql, parameter_style, parameter_info)
        self._parameter_style = parameter_style
        self._placeholder_count = len(parameter_info)
        self._type_coercion_map = dict(type_coercion_map or {})
        self._values: dict[int, Any] = {}
        self._closed = False

    @property
    def sql(self) -> str:
        """SQL in the driver's paramstyle."""
        return self._sql

    def _set(self, index: int, value: Any) -> None:
        if index < 1:
            msg = f"Parameter index must be 1-based, got {index}"
            raise IndexError(msg)
        coerce = self._type_coercion_map.get(type(value))
        self._values[index] = coerce(value) if coerce is not None and value is not None else value

    def set_null(self, index: int, kind: ArgumentKind) -> None:
        self._set(index, None)

    def set_int(self, index: int, value: int) -> None:
        self._set(index, value)

    def set_float(self, index: int, value: float) -> None:
        self._set(index, value)

    def set_decimal(self, index: int, value: Decimal) -> None:
        self._set(index, value)

    def set_string(self, index: int, value: str) -> None:
        self._set(index, value)

    def set_timestamp(self, index: int, value: datetime.datetime | datetime.date) -> None:
        self._set(index, value)

    def set_bytes(self, index: int, value: bytes) -> None:
        self._set(index, value)

    def set_binary_stream(self, index: int, stream: IO[bytes]) -> None:
        self._set(index, stream.read())

    def set_character_stream(self, index: int, reader: IO[str]) -> None:
        self._set(index, reader.read())

    def _ordered_values(self) -> list[Any]:
        expected = set(range(1, self._placeholder_count + 1))
        if set(self._values) != expected:
            missing = sorted(expected - set(self._values))
            extra = sorted(set(self._values) - expected)
            msg = (
                f"Bound parameters do not match the {self._placeholder_count} placeholders "
                f"(missing={missing}, unexpected={extra})"
            )
            raise ValueError(msg)
        return [self._values[i] for i in sorted(self._values)]

    def execute_update(self) -> int:
        values = self._ordered_values()
        parameters = ParameterConverter.adjust_parameters(values, self._parameter_style)
        self._cursor.execute(self._sql, parameters)
        rowcount = self._cursor.rowcount
        if rowcount is None or rowcount < 0:
            logger.warning("Driver did not report an affected row count, using 0")
            return 0
        return int(rowcount)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._cursor.close()


class DBAPIConnection:
    """Adapts a PEP 249 connection to :class:`~sqlbind.protocols.Connection`.

    Args:
        connection: An open DB-API connection.
        parameter_style: Placeholder style the driver expects. Defaults to the
            ``paramstyle`` of ``driver_module`` when given, else ``qmark``.
        type_coercion_map: Converters applied to bound values by exact type.
        driver_module: The DB-API module, used to read its ``paramstyle``.
    """

    __slots__ = ("_connection", "_converter", "_parameter_style", "_type_coercion_map")

    def __init__(
        self,
        connection: Any,
        *,
        parameter_style: ParameterStyle | None = None,
        type_coercion_map: TypeCoercionMap | None = None,
        driver_module: Any = None,
    ) -> None:
        if parameter_style is None:
            paramstyle = getattr(driver_module, "paramstyle", None) if driver_module is not None else None
            parameter_style = resolve_parameter_style(paramstyle) if paramstyle else ParameterStyle.QMARK
        self._connection = connection
        self._parameter_style = parameter_style
        self._type_coercion_map = dict(type_coercion_map or {})
        self._converter = ParameterConverter()

    @property
    def connection(self) -> Any:
        """The wrapped DB-API connection."""
        return self._connection

    @property
    def parameter_style(self) -> ParameterStyle:
        return self._parameter_style

    def prepare_statement(self, sql: str) -> DBAPIPreparedStatement:
        return DBAPIPreparedStatement(
            self._connection.cursor(),
            sql,
            self._parameter_style,
            self._type_coercion_map,
            self._converter,
        )
