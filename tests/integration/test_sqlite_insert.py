"""SqlInsert against a real sqlite3 database."""

import datetime
import io
from collections.abc import Generator
from decimal import Decimal

import pytest

from sqlbind import Database
from sqlbind.adapters.sqlite import SqliteConfig
from sqlbind.config import ExecutorConfig
from sqlbind.exceptions import ExecutionError, MissingParameterError, WrongNumberOfRowsError
from sqlbind.observability import ObservabilityConfig

pytestmark = pytest.mark.integration


@pytest.fixture
def sqlite_config(events) -> SqliteConfig:
    return SqliteConfig(
        executor_config=ExecutorConfig(
            observability=ObservabilityConfig(statement_observers=(events.append,)), dialect="sqlite"
        )
    )


@pytest.fixture
def db(sqlite_config: SqliteConfig) -> Generator[Database, None, None]:
    with sqlite_config.provide_database() as database:
        database.connection.connection.execute(
            """
            create table person (
                id integer primary key,
                name text not null,
                nickname text,
                age integer,
                score real,
                balance text,
                born text,
                photo blob,
                bio text
            )
            """
        )
        yield database


def _rows(db: Database, sql: str) -> list[tuple]:
    return db.connection.connection.execute(sql).fetchall()


def test_named_insert(db: Database, events) -> None:
    rows = (
        db.to_insert("insert into person (id, name, nickname) values (:id, :name, :nickname)")
        .arg_long(1, name="id")
        .arg_string("Ada", name="name")
        .arg_string(None, name=":nickname")
        .insert(1)
    )

    assert rows == 1
    assert _rows(db, "select id, name, nickname from person") == [(1, "Ada", None)]
    assert events[-1].operation == "INSERT"
    assert events[-1].success is True


def test_positional_insert_of_every_kind(db: Database) -> None:
    (
        db.to_insert("insert into person (id, name, age, score, balance, born, photo, bio) values (?,?,?,?,?,?,?,?)")
        .arg_long(2)
        .arg_string("Grace")
        .arg_integer(85)
        .arg_double(9.5)
        .arg_decimal(Decimal("10.25"))
        .arg_date(datetime.date(1906, 12, 9))
        .arg_blob_stream(io.BytesIO(b"\x89PNG"))
        .arg_clob_string("Rear admiral")
        .insert(1)
    )

    assert _rows(db, "select name, age, score, balance, born, photo, bio from person") == [
        ("Grace", 85, 9.5, "10.25", "1906-12-09", b"\x89PNG", "Rear admiral")
    ]


def test_literal_text_is_not_a_parameter(db: Database) -> None:
    db.to_insert("insert into person (id, name, bio) values (:id, ':not_a_param', :bio)").arg_long(
        3, name="id"
    ).arg_string("x", name="bio").insert(1)

    assert _rows(db, "select name, bio from person") == [(":not_a_param", "x")]


def test_row_count_check_on_update(db: Database) -> None:
    db.to_insert("insert into person (id, name) values (?, ?)").arg_long(4).arg_string("Alan").insert()

    with pytest.raises(WrongNumberOfRowsError) as exc_info:
        db.to_insert("update person set name = ? where id = ?").arg_string("Turing").arg_long(999).insert(1)

    assert exc_info.value.actual == 0
    assert db.to_insert("update person set age = ? where id = ?").arg_integer(41).arg_long(4).insert(1) == 1


def test_constraint_violation_is_execution_error(db: Database, events) -> None:
    with pytest.raises(ExecutionError) as exc_info:
        db.to_insert("insert into person (id, name) values (?, ?)").arg_long(5).arg_string(None).insert()

    assert type(exc_info.value.__cause__).__name__ == "IntegrityError"
    assert events[-1].success is False
    assert events[-1].error_code == exc_info.value.error_code


def test_missing_named_parameter(db: Database) -> None:
    with pytest.raises(MissingParameterError):
        db.to_insert("insert into person (id, name) values (:id, :name)").arg_long(6, name="id").insert()

    assert _rows(db, "select count(*) from person") == [(0,)]


def test_provide_connection_commits(sqlite_config: SqliteConfig) -> None:
    with sqlite_config.provide_database() as keeper:
        keeper.connection.connection.execute("create table kv (k text, v text)")
        keeper.connection.connection.commit()

        with sqlite_config.provide_database() as writer:
            writer.to_insert("insert into kv values (?, ?)").arg_string("a").arg_string("b").insert(1)

        with sqlite_config.provide_database() as reader:
            assert reader.connection.connection.execute("select k, v from kv").fetchall() == [("a", "b")]
