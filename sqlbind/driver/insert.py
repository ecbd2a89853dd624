"""Fluent INSERT-style statement: accumulate arguments, execute, check row count."""

import datetime
import io
from decimal import Decimal
from time import time
from typing import IO, TYPE_CHECKING, Any, Optional, Union

from typing_extensions import Self

from sqlbind.config import ExecutorConfig
from sqlbind.driver._common import (
    ExecutionFailure,
    ExecutionOutcome,
    RowCountMismatch,
    RowsAffected,
    classify_operation,
)
from sqlbind.exceptions import ExecutionError, ParameterError, ParameterStyleMismatchError, WrongNumberOfRowsError
from sqlbind.observability import (
    Metric,
    create_event,
    default_statement_observer,
    display_parameters,
    exception_message,
)
from sqlbind.parameters import Argument, ArgumentKind, NamedParameterSql, StatementAdaptor, normalize_parameter_name
from sqlbind.utils.logging import get_correlation_id, get_logger

if TYPE_CHECKING:
    from sqlbind.observability import StatementEvent
    from sqlbind.protocols import Connection

__all__ = ("SqlInsert",)

logger = get_logger("sqlbind.driver.insert")


class SqlInsert:
    """An INSERT (or other row-modifying) statement with its arguments.

    Arguments are supplied either by position, matching ``?`` placeholders, or
    by name, matching ``:name`` placeholders. One instance accepts only one of
    the two styles. Every ``arg_*`` method returns the instance so calls can be
    chained::

        db.to_insert("insert into t (a, b) values (:a, :b)").arg_integer(1, name="a").arg_string("x", name="b").insert(1)

    Instances hold mutable argument state and are meant to be built, executed
    and discarded by a single thread.
    """

    __slots__ = ("_adaptor", "_config", "_connection", "_parameter_list", "_parameter_map", "_sql")

    def __init__(
        self,
        connection: "Connection",
        sql: str,
        config: Optional[ExecutorConfig] = None,
        adaptor: Optional[StatementAdaptor] = None,
    ) -> None:
        self._connection = connection
        self._sql = sql
        self._config = config or ExecutorConfig()
        self._adaptor = adaptor or StatementAdaptor()
        self._parameter_list: list[Argument] = []
        self._parameter_map: dict[str, Argument] = {}

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def parameters(self) -> "Union[tuple[Argument, ...], dict[str, Argument]]":
        """The accumulated arguments: a tuple when positional, a dict when named."""
        if self._parameter_map:
            return dict(self._parameter_map)
        return tuple(self._parameter_list)

    def arg_integer(self, arg: Optional[int], *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_numeric(arg, ArgumentKind.INTEGER), name)

    def arg_long(self, arg: Optional[int], *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_numeric(arg, ArgumentKind.LONG), name)

    def arg_float(self, arg: Optional[float], *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_numeric(arg, ArgumentKind.FLOAT), name)

    def arg_double(self, arg: Optional[float], *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_numeric(arg, ArgumentKind.DOUBLE), name)

    def arg_decimal(self, arg: Optional[Decimal], *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_numeric(arg, ArgumentKind.DECIMAL), name)

    def arg_string(self, arg: Optional[str], *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_string(arg), name)

    def arg_date(self, arg: "Optional[Union[datetime.datetime, datetime.date]]", *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_date(arg), name)

    def arg_blob_bytes(self, arg: Optional[bytes], *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_bytes(arg), name)

    def arg_blob_stream(self, arg: "Optional[IO[bytes]]", *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_input_stream(arg), name)

    def arg_clob_string(self, arg: Optional[str], *, name: Optional[str] = None) -> Self:
        """Bind text as a character stream, for CLOB columns."""
        return self._add(self._adaptor.null_clob_reader(None if arg is None else io.StringIO(arg)), name)

    def arg_clob_reader(self, arg: "Optional[IO[str]]", *, name: Optional[str] = None) -> Self:
        return self._add(self._adaptor.null_clob_reader(arg), name)

    def arg(self, arg: Any, *, name: Optional[str] = None) -> Self:
        """Add an :class:`Argument`, or a plain value whose kind is inferred.

        Raises:
            TypeError: If ``arg`` is ``None`` or of an unsupported type.
        """
        return self._add(Argument.infer(arg), name)

    def _add(self, argument: Argument, name: Optional[str]) -> Self:
        if name is None:
            return self._positional_arg(argument)
        return self._named_arg(name, argument)

    def _positional_arg(self, argument: Argument) -> Self:
        if self._parameter_map:
            raise ParameterStyleMismatchError(sql=self._sql)
        self._parameter_list.append(argument)
        return self

    def _named_arg(self, name: str, argument: Argument) -> Self:
        if self._parameter_list:
            raise ParameterStyleMismatchError(sql=self._sql)
        self._parameter_map[normalize_parameter_name(name)] = argument
        return self

    def insert(self, expected_rows: int = 0) -> int:
        """Execute the statement and return the affected row count.

        Args:
            expected_rows: When positive, the exact number of rows the
                statement must affect. Zero skips the check.

        Raises:
            ParameterError: If the arguments do not fit the SQL.
            WrongNumberOfRowsError: If ``expected_rows`` is positive and differs from the count.
            ExecutionError: If preparing, binding or executing the statement fails.
        """
        return self.execute(expected_rows).unwrap()

    def execute(self, expected_rows: int = 0) -> ExecutionOutcome:
        """Execute the statement and describe the result instead of raising.

        Usage errors (:class:`~sqlbind.exceptions.ParameterError`) are still
        raised, since they are programming mistakes rather than outcomes.

        Returns:
            :class:`RowsAffected`, :class:`RowCountMismatch` or :class:`ExecutionFailure`.
        """
        metric = Metric()
        started_at = time()
        execute_sql: str = self._sql
        parameters: list[Any] = []
        error_code: Optional[str] = None
        outcome: Optional[ExecutionOutcome] = None
        rows: Optional[int] = None
        error_text: Optional[str] = None
        try:
            execute_sql, parameters = self._resolve()
            with self._adaptor.statement_scope(self._connection, execute_sql) as statement:
                self._adaptor.add_parameters(statement, parameters)
                metric.checkpoint("prepare")
                rows = statement.execute_update()
                metric.checkpoint("execute")
                if expected_rows > 0 and rows != expected_rows:
                    error_code = self._generate_error_code()
                    mismatch = self._wrong_number_of_rows(rows, expected_rows, execute_sql, parameters, error_code)
                    error_text = str(mismatch)
                    outcome = RowCountMismatch(rows, expected_rows, mismatch)
                else:
                    outcome = RowsAffected(rows)
            return outcome
        except ParameterError as e:
            error_code = self._generate_error_code()
            error_text = str(e)
            raise
        except Exception as e:
            error_code = self._generate_error_code()
            error = ExecutionError(
                self._message("Error executing SQL", execute_sql, parameters, error_code),
                sql=execute_sql,
                parameters=parameters,
                error_code=error_code,
            )
            error.__cause__ = e
            error_text = f"{type(e).__name__}: {e}"
            outcome = ExecutionFailure(error)
            return outcome
        finally:
            metric.done("close")
            self._emit(
                create_event(
                    sql=execute_sql,
                    parameters=display_parameters(parameters, mask=self._config.observability.mask_parameters),
                    operation=classify_operation(self._sql, self._config.dialect),
                    success=isinstance(outcome, RowsAffected),
                    rows_affected=rows,
                    expected_rows=expected_rows,
                    error_code=error_code,
                    correlation_id=get_correlation_id(),
                    duration_s=metric.elapsed,
                    timings=metric.timings,
                    error=error_text,
                    started_at=started_at,
                )
            )

    def _resolve(self) -> "tuple[str, list[Any]]":
        if self._parameter_map:
            named = NamedParameterSql(self._sql)
            return named.sql_to_execute, named.to_args(self._parameter_map)
        return self._sql, list(self._parameter_list)

    def _generate_error_code(self) -> str:
        return self._config.observability.error_code_factory()

    def _message(self, message: str, sql: str, parameters: "list[Any]", error_code: str) -> str:
        observability = self._config.observability
        return exception_message(
            message,
            sql,
            parameters,
            error_code,
            detailed=observability.include_sql_in_exceptions,
            mask=observability.mask_parameters,
        )

    def _wrong_number_of_rows(
        self, actual: int, expected: int, sql: str, parameters: "list[Any]", error_code: str
    ) -> WrongNumberOfRowsError:
        message = f"The number of affected rows was {actual}, but {expected} were expected."
        return WrongNumberOfRowsError(
            self._message(message, sql, parameters, error_code),
            actual=actual,
            expected=expected,
            sql=sql,
            parameters=parameters,
            error_code=error_code,
        )

    def _emit(self, event: "StatementEvent") -> None:
        observers = self._config.observability.statement_observers or (default_statement_observer,)
        for observer in observers:
            try:
                observer(event)
            except Exception:
                logger.exception("Statement observer %r failed", observer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql={self._sql!r}, parameters={self.parameters!r})"
