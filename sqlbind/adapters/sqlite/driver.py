import datetime
import sqlite3
from decimal import Decimal
from typing import Any, Callable, Final, Optional

from sqlbind.adapters.dbapi import DBAPIConnection
from sqlbind.parameters import ParameterStyle

__all__ = ("SqliteConnection", "sqlite_type_coercion_map")

sqlite_type_coercion_map: Final["dict[type, Callable[[Any], Any]]"] = {
    bool: int,
    datetime.datetime: lambda v: v.isoformat(),
    datetime.date: lambda v: v.isoformat(),
    Decimal: str,
    bytearray: bytes,
}


class SqliteConnection(DBAPIConnection):
    """:class:`DBAPIConnection` preconfigured for :mod:`sqlite3`."""

    __slots__ = ()

    def __init__(
        self, connection: sqlite3.Connection, type_coercion_map: "Optional[dict[type, Callable[[Any], Any]]]" = None
    ) -> None:
        super().__init__(
            connection,
            parameter_style=ParameterStyle.QMARK,
            type_coercion_map={**sqlite_type_coercion_map, **(type_coercion_map or {})},
        )
