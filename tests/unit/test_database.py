from sqlbind import Database, SqlInsert
from sqlbind.config import ExecutorConfig
from sqlbind.observability import ObservabilityConfig, RedactionConfig


def test_to_insert_shares_connection_and_config(connection, executor_config) -> None:
    db = Database(connection, executor_config)

    statement = db.to_insert("insert into t values(?)")

    assert isinstance(statement, SqlInsert)
    assert statement.sql == "insert into t values(?)"
    assert db.connection is connection
    assert db.config is executor_config


def test_default_config(connection) -> None:
    assert Database(connection).config == ExecutorConfig()


def test_with_observability_merges(connection, executor_config, events) -> None:
    extra_events = []
    db = Database(connection, executor_config).with_observability(
        ObservabilityConfig(statement_observers=(extra_events.append,), redaction=RedactionConfig(mask_parameters=True))
    )

    db.to_insert("insert into t values(?)").arg_string("secret").insert()

    assert len(events) == 1
    assert len(extra_events) == 1
    assert extra_events[0].parameters == ["***"]
