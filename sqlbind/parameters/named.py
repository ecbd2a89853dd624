"""Translation of ``:name`` SQL into positional ``?`` SQL."""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Final

from mypy_extensions import mypyc_attr

from sqlbind.exceptions import MissingParameterError
from sqlbind.parameters.types import ParameterStyle
from sqlbind.parameters.validator import ParameterValidator

__all__ = ("NamedParameterSql", "normalize_parameter_name")

NAMED_PARAMETER_SIGIL: Final = ":"
PARSE_CACHE_SIZE: Final = 512

_validator = ParameterValidator()


def normalize_parameter_name(name: str) -> str:
    """Strip a single leading ``:`` from a parameter name."""
    if name.startswith(NAMED_PARAMETER_SIGIL):
        return name[1:]
    return name


@lru_cache(maxsize=PARSE_CACHE_SIZE)
def _parse(sql: str) -> "tuple[str, tuple[str, ...]]":
    parts: list[str] = []
    names: list[str] = []
    current_pos = 0
    for param in _validator.extract_parameters(sql):
        if param.style is not ParameterStyle.NAMED_COLON or param.name is None:
            continue
        parts.append(sql[current_pos : param.position])
        parts.append("?")
        names.append(param.name)
        current_pos = param.position + len(param.placeholder_text)
    parts.append(sql[current_pos:])
    return "".join(parts), tuple(names)


@mypyc_attr(allow_interpreted_subclasses=True)
class NamedParameterSql:
    """SQL with ``:name`` placeholders rewritten to ``?``.

    Every occurrence of a name is recorded, so a name used twice binds twice.
    Parse results are cached by template text.
    """

    __slots__ = ("_names", "_sql", "_sql_to_execute")

    def __init__(self, sql: str) -> None:
        self._sql = sql
        self._sql_to_execute, self._names = _parse(sql)

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def sql_to_execute(self) -> str:
        return self._sql_to_execute

    @property
    def parameter_names(self) -> "tuple[str, ...]":
        return self._names

    def to_args(self, parameters: "Mapping[str, Any]") -> "list[Any]":
        """Order the supplied values to match the ``?`` placeholders.

        Args:
            parameters: Values keyed by parameter name without the sigil.

        Raises:
            MissingParameterError: If a name in the SQL has no entry.

        Returns:
            Values aligned with :attr:`sql_to_execute`.
        """
        args: list[Any] = []
        for name in self._names:
            if name not in parameters:
                raise MissingParameterError(name, self._sql)
            args.append(parameters[name])
        return args

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql={self._sql!r}, parameter_names={self._names!r})"
