from collections.abc import Sequence
from typing import Any, Optional

__all__ = (
    "ExecutionError",
    "ImproperConfigurationError",
    "MissingParameterError",
    "ParameterError",
    "ParameterStyleMismatchError",
    "SQLBindError",
    "StatementError",
    "WrongNumberOfRowsError",
)


class SQLBindError(Exception):
    """Base exception class from which all sqlbind exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLBindError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLBindError):
    """Raised when a configuration value cannot be used."""


# -- SQL Parameter Errors --
class ParameterError(SQLBindError):
    """Base class for parameter-related usage errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """Raised when a named parameter in the SQL has no supplied value."""

    name: str

    def __init__(self, name: str, sql: Optional[str] = None) -> None:
        super().__init__(f"No value was provided for the SQL parameter ':{name}'", sql)
        self.name = name


class ParameterStyleMismatchError(ParameterError):
    """Error when positional and named arguments are mixed on one statement."""

    def __init__(self, message: Optional[str] = None, sql: Optional[str] = None) -> None:
        super().__init__(message or "Use either positional or named query parameters, not both", sql)


# -- Statement Errors --
class StatementError(SQLBindError):
    """Base class for failures of an executed statement.

    Carries the SQL that was sent to the driver, the resolved positional
    arguments and the error code that was written to the failure log record.
    Only :attr:`safe_message` may be shown outside the process.
    """

    sql: str
    parameters: "tuple[Any, ...]"
    error_code: str

    def __init__(self, message: str, *, sql: str, parameters: "Sequence[Any]", error_code: str) -> None:
        super().__init__(detail=message)
        self.sql = sql
        self.parameters = tuple(parameters)
        self.error_code = error_code

    @property
    def safe_message(self) -> str:
        """Message that identifies the failure without SQL or argument values."""
        return f"Error executing SQL (errorCode={self.error_code})"


class ExecutionError(StatementError):
    """Raised when preparing, binding or executing a statement fails.

    The low-level driver error is available as ``__cause__``.
    """


class WrongNumberOfRowsError(StatementError):
    """Raised when the affected row count differs from the expected count."""

    actual: int
    expected: int

    def __init__(
        self,
        message: str,
        *,
        actual: int,
        expected: int,
        sql: str,
        parameters: "Sequence[Any]",
        error_code: str,
    ) -> None:
        super().__init__(message, sql=sql, parameters=parameters, error_code=error_code)
        self.actual = actual
        self.expected = expected
