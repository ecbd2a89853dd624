"""Placeholder extraction for SQL templates.

Literal text in single or double quotes is skipped as a whole, so
placeholder-like text inside a literal is never reported. A literal that is
not terminated runs to the end of the statement. SQL comments get no special
treatment.
"""

import re
from typing import Final

from sqlbind.parameters.types import ParameterInfo, ParameterStyle

__all__ = ("ParameterValidator",)


_PARAMETER_REGEX: Final = re.compile(
    r"""
    (?P<squote>'[^']*'?) |                      # single-quoted literal, '' re-enters
    (?P<dquote>"[^"]*"?) |                      # double-quoted literal or identifier
    (?P<pg_cast>::\w*) |                        # PostgreSQL ::type cast
    (?P<named_colon>:(?P<colon_name>\w+)) |     # :name
    (?P<qmark>\?)                               # ?
    """,
    re.VERBOSE,
)


class ParameterValidator:
    """Extracts placeholder information from SQL strings."""

    __slots__ = ()

    def extract_parameters(self, sql: str) -> "list[ParameterInfo]":
        """Extract placeholder information from a SQL string.

        Args:
            sql: SQL string to analyze

        Returns:
            List of ParameterInfo objects in order of position
        """
        parameters: list[ParameterInfo] = []
        ordinal = 0
        for match in _PARAMETER_REGEX.finditer(sql):
            if match.group("qmark"):
                parameters.append(ParameterInfo(None, ParameterStyle.QMARK, match.start(), ordinal, "?"))
            elif match.group("named_colon"):
                parameters.append(
                    ParameterInfo(
                        match.group("colon_name"),
                        ParameterStyle.NAMED_COLON,
                        match.start(),
                        ordinal,
                        match.group("named_colon"),
                    )
                )
            else:
                continue
            ordinal += 1
        return parameters

    def has_parameters(self, sql: str) -> bool:
        return bool(self.extract_parameters(sql))

    def get_parameter_styles(self, sql: str) -> "set[ParameterStyle]":
        return {p.style for p in self.extract_parameters(sql)}
