from sqlbind.adapters.sqlite.config import SqliteConfig, SqliteConnectionParams
from sqlbind.adapters.sqlite.driver import SqliteConnection, sqlite_type_coercion_map

__all__ = ("SqliteConfig", "SqliteConnection", "SqliteConnectionParams", "sqlite_type_coercion_map")
