"""Execution outcomes and statement classification shared by executors."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Final, NoReturn, Optional, Union

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

from sqlbind.exceptions import ExecutionError, WrongNumberOfRowsError
from sqlbind.utils.logging import get_logger

__all__ = (
    "ExecutionFailure",
    "ExecutionOutcome",
    "RowCountMismatch",
    "RowsAffected",
    "classify_operation",
)

logger = get_logger("sqlbind.driver")

_OPERATION_TYPES: Final = (
    (exp.Insert, "INSERT"),
    (exp.Update, "UPDATE"),
    (exp.Delete, "DELETE"),
    (exp.Merge, "MERGE"),
    (exp.Query, "SELECT"),
)


@lru_cache(maxsize=512)
def classify_operation(sql: str, dialect: Optional[str] = None) -> str:
    """Classify a statement as INSERT, UPDATE, DELETE, MERGE, SELECT or COMMAND.

    Statements sqlglot cannot parse are reported as COMMAND.
    """
    try:
        expression = sqlglot.parse_one(sql, read=dialect)
    except SqlglotError:
        logger.debug("Could not classify statement, treating it as COMMAND", exc_info=True)
        return "COMMAND"
    for expression_type, label in _OPERATION_TYPES:
        if isinstance(expression, expression_type):
            return label
    return "COMMAND"


@dataclass(frozen=True, slots=True)
class RowsAffected:
    """The statement ran and the row count passed any check."""

    count: int

    def unwrap(self) -> int:
        return self.count


@dataclass(frozen=True, slots=True)
class RowCountMismatch:
    """The statement ran but affected a different number of rows than expected."""

    actual: int
    expected: int
    error: WrongNumberOfRowsError

    def unwrap(self) -> NoReturn:
        raise self.error


@dataclass(frozen=True, slots=True)
class ExecutionFailure:
    """Preparing, binding or executing the statement raised."""

    error: ExecutionError

    def unwrap(self) -> NoReturn:
        raise self.error


ExecutionOutcome = Union[RowsAffected, RowCountMismatch, ExecutionFailure]
