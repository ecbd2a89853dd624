from __future__ import annotations

from typing import Any, Callable

import pytest

from sqlbind.config import ExecutorConfig
from sqlbind.observability import ObservabilityConfig, StatementEvent
from sqlbind.parameters import ArgumentKind


class FakePreparedStatement:
    """Records every bind call; streams are read eagerly so tests can compare content."""

    def __init__(
        self,
        sql: str,
        rowcount: int = 1,
        bind_error: Exception | None = None,
        execute_error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self.sql = sql
        self.rowcount = rowcount
        self.bind_error = bind_error
        self.execute_error = execute_error
        self.close_error = close_error
        self.bindings: list[tuple[str, int, Any]] = []
        self.executed = False
        self.close_calls = 0

    def _record(self, method: str, index: int, value: Any) -> None:
        if self.bind_error is not None:
            raise self.bind_error
        self.bindings.append((method, index, value))

    def set_null(self, index: int, kind: ArgumentKind) -> None:
        self._record("null", index, kind)

    def set_int(self, index: int, value: int) -> None:
        self._record("int", index, value)

    def set_float(self, index: int, value: float) -> None:
        self._record("float", index, value)

    def set_decimal(self, index: int, value: Any) -> None:
        self._record("decimal", index, value)

    def set_string(self, index: int, value: str) -> None:
        self._record("string", index, value)

    def set_timestamp(self, index: int, value: Any) -> None:
        self._record("timestamp", index, value)

    def set_bytes(self, index: int, value: bytes) -> None:
        self._record("bytes", index, value)

    def set_binary_stream(self, index: int, stream: Any) -> None:
        self._record("binary_stream", index, stream.read())

    def set_character_stream(self, index: int, reader: Any) -> None:
        self._record("character_stream", index, reader.read())

    def execute_update(self) -> int:
        if self.execute_error is not None:
            raise self.execute_error
        self.executed = True
        return self.rowcount

    def close(self) -> None:
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


class FakeConnection:
    def __init__(
        self,
        rowcount: int = 1,
        prepare_error: Exception | None = None,
        bind_error: Exception | None = None,
        execute_error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self.rowcount = rowcount
        self.prepare_error = prepare_error
        self.bind_error = bind_error
        self.execute_error = execute_error
        self.close_error = close_error
        self.statements: list[FakePreparedStatement] = []

    def prepare_statement(self, sql: str) -> FakePreparedStatement:
        if self.prepare_error is not None:
            raise self.prepare_error
        statement = FakePreparedStatement(
            sql,
            rowcount=self.rowcount,
            bind_error=self.bind_error,
            execute_error=self.execute_error,
            close_error=self.close_error,
        )
        self.statements.append(statement)
        return statement

    @property
    def last(self) -> FakePreparedStatement:
        return self.statements[-1]


@pytest.fixture
def fake_connection() -> Callable[..., FakeConnection]:
    return FakeConnection


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def events() -> list[StatementEvent]:
    return []


@pytest.fixture
def executor_config(events: list[StatementEvent]) -> ExecutorConfig:
    return ExecutorConfig(
        observability=ObservabilityConfig(statement_observers=(events.append,), error_code_factory=lambda: "TEST-CODE")
    )
