from sqlbind.driver._common import (
    ExecutionFailure,
    ExecutionOutcome,
    RowCountMismatch,
    RowsAffected,
    classify_operation,
)
from sqlbind.driver.insert import SqlInsert

__all__ = (
    "ExecutionFailure",
    "ExecutionOutcome",
    "RowCountMismatch",
    "RowsAffected",
    "SqlInsert",
    "classify_operation",
)
