"""Typed-null marshaling and positional binding against a prepared statement."""

import datetime
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from decimal import Decimal
from typing import IO, TYPE_CHECKING, Any, Optional, Union

from sqlbind.parameters.types import Argument, ArgumentKind
from sqlbind.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlbind.protocols import Connection, PreparedStatement

__all__ = ("StatementAdaptor",)

logger = get_logger("sqlbind.parameters.adaptor")


class StatementAdaptor:
    """Wraps raw values into :class:`Argument` and binds them by position."""

    __slots__ = ()

    def null_numeric(
        self, value: "Optional[Union[int, float, Decimal]]", kind: ArgumentKind = ArgumentKind.DECIMAL
    ) -> Argument:
        if not kind.is_numeric:
            msg = f"{kind} is not a numeric argument kind"
            raise ValueError(msg)
        return Argument(kind, value)

    def null_string(self, value: Optional[str]) -> Argument:
        return Argument(ArgumentKind.STRING, value)

    def null_date(self, value: "Optional[Union[datetime.datetime, datetime.date]]") -> Argument:
        return Argument(ArgumentKind.DATE, value)

    def null_bytes(self, value: Optional[bytes]) -> Argument:
        return Argument(ArgumentKind.BYTES, None if value is None else bytes(value))

    def null_input_stream(self, value: "Optional[IO[bytes]]") -> Argument:
        return Argument(ArgumentKind.BLOB_STREAM, value)

    def null_clob_reader(self, value: "Optional[IO[str]]") -> Argument:
        return Argument(ArgumentKind.CLOB_STREAM, value)

    def add_parameters(self, statement: "PreparedStatement", parameters: "Sequence[Any]") -> None:
        """Bind every parameter by its 1-based position.

        Plain values that are not :class:`Argument` instances are tagged with
        :meth:`Argument.infer` first.
        """
        for index, parameter in enumerate(parameters, start=1):
            argument = Argument.infer(parameter)
            self._bind(statement, index, argument)

    @staticmethod
    def _bind(statement: "PreparedStatement", index: int, argument: Argument) -> None:
        kind, value = argument.kind, argument.value
        if value is None:
            statement.set_null(index, kind)
        elif kind in {ArgumentKind.INTEGER, ArgumentKind.LONG}:
            statement.set_int(index, value)
        elif kind in {ArgumentKind.FLOAT, ArgumentKind.DOUBLE}:
            statement.set_float(index, value)
        elif kind is ArgumentKind.DECIMAL:
            statement.set_decimal(index, value)
        elif kind is ArgumentKind.STRING:
            statement.set_string(index, value)
        elif kind is ArgumentKind.DATE:
            statement.set_timestamp(index, value)
        elif kind is ArgumentKind.BYTES:
            statement.set_bytes(index, value)
        elif kind is ArgumentKind.BLOB_STREAM:
            statement.set_binary_stream(index, value)
        else:
            statement.set_character_stream(index, value)

    def close_quietly(self, statement: "Optional[PreparedStatement]") -> None:
        """Close a statement handle, logging instead of raising on failure."""
        if statement is None:
            return
        try:
            statement.close()
        except Exception:
            logger.warning("Caught exception closing the prepared statement", exc_info=True)

    @contextmanager
    def statement_scope(self, connection: "Connection", sql: str) -> "Iterator[PreparedStatement]":
        """Prepare a statement and close it on every exit path.

        :meth:`close_quietly` runs exactly once, with ``None`` when preparing
        the statement failed.
        """
        statement: Optional[PreparedStatement] = None
        try:
            statement = connection.prepare_statement(sql)
            yield statement
        finally:
            self.close_quietly(statement)
