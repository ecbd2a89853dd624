"""Conversion of ``?`` SQL into the placeholder style a DB-API driver expects."""

from collections.abc import Sequence
from typing import Any, Final, Optional, Union

from sqlbind.parameters.types import ParameterInfo, ParameterStyle
from sqlbind.parameters.validator import ParameterValidator

__all__ = ("DBAPI_PARAMSTYLES", "ParameterConverter")

DBAPI_PARAMSTYLES: Final["dict[str, ParameterStyle]"] = {
    "qmark": ParameterStyle.QMARK,
    "numeric": ParameterStyle.POSITIONAL_COLON,
    "named": ParameterStyle.NAMED_COLON,
    "format": ParameterStyle.POSITIONAL_PYFORMAT,
    "pyformat": ParameterStyle.NAMED_PYFORMAT,
}

_NAMED_TARGETS: Final = frozenset({ParameterStyle.NAMED_COLON, ParameterStyle.NAMED_PYFORMAT})
_PYFORMAT_TARGETS: Final = frozenset({ParameterStyle.POSITIONAL_PYFORMAT, ParameterStyle.NAMED_PYFORMAT})


class ParameterConverter:
    """Rewrites positional ``?`` placeholders into a target style."""

    __slots__ = ("validator",)

    def __init__(self) -> None:
        self.validator = ParameterValidator()

    def convert_placeholders(
        self, sql: str, target_style: ParameterStyle, parameter_info: "Optional[list[ParameterInfo]]" = None
    ) -> str:
        """Convert ``?`` placeholders to a target style.

        For the pyformat styles every ``%`` outside a placeholder is doubled,
        since those drivers run the whole statement through ``%`` formatting.

        Args:
            sql: The SQL string with ``?`` placeholders
            target_style: The target parameter style to convert to
            parameter_info: Optional list of parameter info (will be extracted if not provided)

        Returns:
            SQL string with converted placeholders
        """
        if target_style is ParameterStyle.QMARK:
            return sql
        if parameter_info is None:
            parameter_info = self.validator.extract_parameters(sql)
        positional = [p for p in parameter_info if p.style is ParameterStyle.QMARK]
        escape = target_style in _PYFORMAT_TARGETS

        result_parts = []
        current_pos = 0
        for i, param in enumerate(positional):
            text = sql[current_pos : param.position]
            result_parts.append(text.replace("%", "%%") if escape else text)
            result_parts.append(self._placeholder(target_style, i))
            current_pos = param.position + len(param.placeholder_text)
        tail = sql[current_pos:]
        result_parts.append(tail.replace("%", "%%") if escape else tail)
        return "".join(result_parts)

    @staticmethod
    def _placeholder(target_style: ParameterStyle, index: int) -> str:
        if target_style is ParameterStyle.NUMERIC:
            return f"${index + 1}"
        if target_style is ParameterStyle.POSITIONAL_COLON:
            return f":{index + 1}"
        if target_style is ParameterStyle.POSITIONAL_PYFORMAT:
            return "%s"
        if target_style is ParameterStyle.NAMED_COLON:
            return f":param_{index}"
        if target_style is ParameterStyle.NAMED_PYFORMAT:
            return f"%(param_{index})s"
        return "?"

    @staticmethod
    def adjust_parameters(
        parameters: "Sequence[Any]", target_style: ParameterStyle
    ) -> "Union[list[Any], dict[str, Any]]":
        """Shape positional values for the target style."""
        if target_style in _NAMED_TARGETS:
            return {f"param_{i}": value for i, value in enumerate(parameters)}
        return list(parameters)
