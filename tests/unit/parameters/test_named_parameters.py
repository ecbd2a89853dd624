"""Tests for :name to ? translation."""

import pytest

from sqlbind.exceptions import MissingParameterError
from sqlbind.parameters import NamedParameterSql, normalize_parameter_name


@pytest.mark.parametrize(
    ("sql", "expected_sql", "expected_names"),
    [
        ("insert into t(x,y) values(:x,:y)", "insert into t(x,y) values(?,?)", ("x", "y")),
        ("select :a, :b, :a", "select ?, ?, ?", ("a", "b", "a")),
        ("select 1", "select 1", ()),
        ("select ':x', :y", "select ':x', ?", ("y",)),
        ('select ":x" from t where a = :a', 'select ":x" from t where a = ?', ("a",)),
        ("select 'it''s :x', :y", "select 'it''s :x', ?", ("y",)),
        ("select a::text from t where b = :b", "select a::text from t where b = ?", ("b",)),
        ("values(:first_name, :_id2)", "values(?, ?)", ("first_name", "_id2")),
    ],
    ids=[
        "simple",
        "duplicate",
        "no_placeholders",
        "single_quoted_literal",
        "double_quoted_identifier",
        "escaped_quote",
        "postgres_cast",
        "underscore_and_digits",
    ],
)
def test_translation(sql, expected_sql, expected_names) -> None:
    named = NamedParameterSql(sql)

    assert named.sql == sql
    assert named.sql_to_execute == expected_sql
    assert named.parameter_names == expected_names


def test_unterminated_literal_runs_to_end() -> None:
    named = NamedParameterSql("select :a, 'unterminated :b")

    assert named.sql_to_execute == "select ?, 'unterminated :b"
    assert named.parameter_names == ("a",)


def test_comments_are_not_special() -> None:
    named = NamedParameterSql("select :a -- :b")

    assert named.parameter_names == ("a", "b")


def test_question_marks_are_kept() -> None:
    named = NamedParameterSql("select ?, :a")

    assert named.sql_to_execute == "select ?, ?"
    assert named.parameter_names == ("a",)


def test_to_args_orders_values_by_occurrence() -> None:
    named = NamedParameterSql("insert into t values(:b, :a, :b)")

    assert named.to_args({"a": 1, "b": 2}) == [2, 1, 2]


def test_to_args_ignores_unused_entries() -> None:
    named = NamedParameterSql("insert into t values(:a)")

    assert named.to_args({"a": 1, "unused": 2}) == [1]


def test_to_args_accepts_none_values() -> None:
    named = NamedParameterSql("insert into t values(:a)")

    assert named.to_args({"a": None}) == [None]


def test_to_args_missing_name_fails() -> None:
    named = NamedParameterSql("insert into t values(:a, :b)")

    with pytest.raises(MissingParameterError) as exc_info:
        named.to_args({"a": 1})

    assert exc_info.value.name == "b"
    assert "':b'" in str(exc_info.value)
    assert "insert into t values(:a, :b)" in str(exc_info.value)


def test_parse_results_are_shared_between_instances() -> None:
    first = NamedParameterSql("select :cached")
    second = NamedParameterSql("select :cached")

    assert first.parameter_names is second.parameter_names


@pytest.mark.parametrize(("name", "expected"), [(":x", "x"), ("x", "x"), ("::x", ":x"), ("", "")])
def test_normalize_parameter_name(name, expected) -> None:
    assert normalize_parameter_name(name) == expected
