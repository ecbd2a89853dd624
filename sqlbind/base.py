from typing import Optional

from sqlbind.config import ExecutorConfig
from sqlbind.driver import SqlInsert
from sqlbind.observability import ObservabilityConfig
from sqlbind.protocols import Connection

__all__ = ("Database",)


class Database:
    """Entry point that creates statements bound to one connection."""

    __slots__ = ("_config", "_connection")

    def __init__(self, connection: Connection, config: Optional[ExecutorConfig] = None) -> None:
        self._connection = connection
        self._config = config or ExecutorConfig()

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def config(self) -> ExecutorConfig:
        return self._config

    def with_observability(self, observability: ObservabilityConfig) -> "Database":
        """Return a database whose statements use ``observability`` merged over the current settings."""
        merged = ObservabilityConfig.merge(self._config.observability, observability)
        return Database(self._connection, self._config.replace(observability=merged))

    def to_insert(self, sql: str) -> SqlInsert:
        """Create an INSERT-style statement.

        Args:
            sql: SQL using either ``?`` or ``:name`` placeholders.
        """
        return SqlInsert(self._connection, sql, self._config)
