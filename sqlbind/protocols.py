"""Runtime-checkable protocols for the database collaborators."""

import datetime
from decimal import Decimal
from typing import IO, Protocol, Union, runtime_checkable

from sqlbind.parameters.types import ArgumentKind

__all__ = ("Connection", "PreparedStatement")


@runtime_checkable
class PreparedStatement(Protocol):
    """A bindable, executable, closeable statement handle.

    Indexes are 1-based.
    """

    def set_null(self, index: int, kind: ArgumentKind) -> None: ...

    def set_int(self, index: int, value: int) -> None: ...

    def set_float(self, index: int, value: float) -> None: ...

    def set_decimal(self, index: int, value: Decimal) -> None: ...

    def set_string(self, index: int, value: str) -> None: ...

    def set_timestamp(self, index: int, value: "Union[datetime.datetime, datetime.date]") -> None: ...

    def set_bytes(self, index: int, value: bytes) -> None: ...

    def set_binary_stream(self, index: int, stream: "IO[bytes]") -> None: ...

    def set_character_stream(self, index: int, reader: "IO[str]") -> None: ...

    def execute_update(self) -> int:
        """Execute the statement and return the affected row count."""
        ...

    def close(self) -> None: ...


@runtime_checkable
class Connection(Protocol):
    """Anything that can prepare a statement for a SQL string."""

    def prepare_statement(self, sql: str) -> PreparedStatement: ...
