"""sqlbind: typed, parameterized SQL statement execution."""

from sqlbind import adapters, driver, exceptions, observability, parameters, utils
from sqlbind.__metadata__ import __version__
from sqlbind.base import Database
from sqlbind.config import ExecutorConfig, load_config_from_env
from sqlbind.driver import ExecutionFailure, ExecutionOutcome, RowCountMismatch, RowsAffected, SqlInsert
from sqlbind.exceptions import (
    ExecutionError,
    MissingParameterError,
    ParameterError,
    ParameterStyleMismatchError,
    SQLBindError,
    StatementError,
    WrongNumberOfRowsError,
)
from sqlbind.observability import ObservabilityConfig, RedactionConfig, StatementEvent
from sqlbind.parameters import Argument, ArgumentKind, NamedParameterSql, StatementAdaptor
from sqlbind.protocols import Connection, PreparedStatement

__all__ = (
    "Argument",
    "ArgumentKind",
    "Connection",
    "Database",
    "ExecutionError",
    "ExecutionFailure",
    "ExecutionOutcome",
    "ExecutorConfig",
    "MissingParameterError",
    "NamedParameterSql",
    "ObservabilityConfig",
    "ParameterError",
    "ParameterStyleMismatchError",
    "PreparedStatement",
    "RedactionConfig",
    "RowCountMismatch",
    "RowsAffected",
    "SQLBindError",
    "SqlInsert",
    "StatementAdaptor",
    "StatementError",
    "StatementEvent",
    "WrongNumberOfRowsError",
    "__version__",
    "adapters",
    "driver",
    "exceptions",
    "load_config_from_env",
    "observability",
    "parameters",
    "utils",
)
