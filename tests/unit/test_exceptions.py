import pytest

from sqlbind.exceptions import (
    ExecutionError,
    ImproperConfigurationError,
    MissingParameterError,
    ParameterError,
    ParameterStyleMismatchError,
    SQLBindError,
    StatementError,
    WrongNumberOfRowsError,
)


def test_exception_hierarchy():
    """Usage errors and statement failures are separate branches."""
    assert issubclass(ParameterError, SQLBindError)
    assert issubclass(MissingParameterError, ParameterError)
    assert issubclass(ParameterStyleMismatchError, ParameterError)
    assert issubclass(ImproperConfigurationError, SQLBindError)

    assert issubclass(ExecutionError, StatementError)
    assert issubclass(WrongNumberOfRowsError, StatementError)
    assert not issubclass(WrongNumberOfRowsError, ExecutionError)
    assert not issubclass(StatementError, ParameterError)


def test_base_exception_detail():
    exc = SQLBindError("first", "second")

    assert exc.detail == "first"
    assert str(exc) == "second first"
    assert repr(exc) == "SQLBindError - first"
    assert repr(SQLBindError()) == "SQLBindError"


def test_parameter_error_includes_sql():
    exc = ParameterError("Bad parameter", sql="select :a")

    assert str(exc) == "Bad parameter\nSQL: select :a"
    assert exc.sql == "select :a"


def test_missing_parameter_error():
    exc = MissingParameterError("user_id")

    assert exc.name == "user_id"
    assert str(exc) == "No value was provided for the SQL parameter ':user_id'"


def test_style_mismatch_default_message():
    assert str(ParameterStyleMismatchError()) == "Use either positional or named query parameters, not both"


def test_statement_error_attributes():
    exc = ExecutionError("Error executing SQL (errorCode=C)", sql="select ?", parameters=[1], error_code="C")

    assert exc.sql == "select ?"
    assert exc.parameters == (1,)
    assert exc.error_code == "C"
    assert exc.safe_message == "Error executing SQL (errorCode=C)"


def test_wrong_number_of_rows_attributes():
    exc = WrongNumberOfRowsError("mismatch", actual=0, expected=1, sql="delete", parameters=(), error_code="C")

    assert (exc.actual, exc.expected) == (0, 1)
    with pytest.raises(StatementError):
        raise exc


def test_exception_chaining():
    """Driver errors stay reachable through ``__cause__``."""
    try:
        try:
            raise ValueError("Original error")
        except ValueError as e:
            raise ExecutionError("Wrapped", sql="x", parameters=(), error_code="C") from e
    except ExecutionError as exc:
        assert isinstance(exc.__cause__, ValueError)
        assert str(exc.__cause__) == "Original error"
