"""Parameter handling: argument model, placeholder parsing and binding."""

from sqlbind.parameters.adaptor import StatementAdaptor
from sqlbind.parameters.converter import DBAPI_PARAMSTYLES, ParameterConverter
from sqlbind.parameters.named import NamedParameterSql, normalize_parameter_name
from sqlbind.parameters.types import Argument, ArgumentKind, ParameterInfo, ParameterStyle
from sqlbind.parameters.validator import ParameterValidator

__all__ = (
    "DBAPI_PARAMSTYLES",
    "Argument",
    "ArgumentKind",
    "NamedParameterSql",
    "ParameterConverter",
    "ParameterInfo",
    "ParameterStyle",
    "ParameterValidator",
    "StatementAdaptor",
    "normalize_parameter_name",
)
