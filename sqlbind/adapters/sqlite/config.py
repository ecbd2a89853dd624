"""SQLite database configuration."""

import sqlite3
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Optional, TypedDict, cast

from typing_extensions import NotRequired

from sqlbind.adapters.sqlite.driver import SqliteConnection
from sqlbind.base import Database
from sqlbind.config import ExecutorConfig
from sqlbind.utils.logging import get_logger

logger = get_logger("sqlbind.adapters.sqlite")

__all__ = ("SqliteConfig", "SqliteConnectionParams")


class SqliteConnectionParams(TypedDict, total=False):
    """SQLite connection parameters."""

    database: NotRequired[str]
    timeout: NotRequired[float]
    detect_types: NotRequired[int]
    isolation_level: "NotRequired[Optional[str]]"
    check_same_thread: NotRequired[bool]
    cached_statements: NotRequired[int]
    uri: NotRequired[bool]


class SqliteConfig:
    """Creates :mod:`sqlite3` connections wrapped for sqlbind.

    Without a ``database`` (or with ``":memory:"``) each configuration gets its
    own in-memory database, which lives as long as one of its connections is open.
    """

    __slots__ = ("connection_config", "executor_config")

    def __init__(
        self,
        *,
        connection_config: "Optional[SqliteConnectionParams | dict[str, Any]]" = None,
        executor_config: Optional[ExecutorConfig] = None,
    ) -> None:
        connection_config = dict(connection_config or {})
        if "database" not in connection_config or connection_config["database"] == ":memory:":
            connection_config["database"] = f"file:memory_{uuid.uuid4().hex}?mode=memory&cache=shared"
            connection_config["uri"] = True
        else:
            database_path = str(connection_config["database"])
            if database_path.startswith("file:") and not connection_config.get("uri"):
                logger.debug("Database URI detected (%s) but uri=True not set, enabling URI mode", database_path)
                connection_config["uri"] = True
        self.connection_config = cast("dict[str, Any]", connection_config)
        self.executor_config = executor_config or ExecutorConfig()

    def create_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(**self.connection_config)

    @contextmanager
    def provide_connection(self) -> "Generator[SqliteConnection, None, None]":
        """Provide a wrapped connection, committed on success and closed afterwards."""
        connection = self.create_connection()
        try:
            yield SqliteConnection(connection)
            connection.commit()
        except Exception:
            connection.rollback()
            raise
        finally:
            connection.close()

    @contextmanager
    def provide_database(self) -> "Generator[Database, None, None]":
        with self.provide_connection() as connection:
            yield Database(connection, self.executor_config)
