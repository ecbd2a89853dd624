"""Core parameter types used throughout sqlbind.

Arguments are modelled as a tagged value: every :class:`Argument` carries the
:class:`ArgumentKind` it was declared with, so a ``None`` value still knows
which SQL NULL it has to bind as.
"""

import datetime
import io
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

__all__ = ("Argument", "ArgumentKind", "ParameterInfo", "ParameterStyle")


class ParameterStyle(str, Enum):
    """Parameter style enumeration with string values."""

    QMARK = "qmark"
    NUMERIC = "numeric"
    NAMED_COLON = "named_colon"
    POSITIONAL_COLON = "positional_colon"
    NAMED_PYFORMAT = "pyformat_named"
    POSITIONAL_PYFORMAT = "pyformat_positional"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


class ArgumentKind(str, Enum):
    """Declared data kind of a statement argument."""

    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    STRING = "string"
    DATE = "date"
    BYTES = "bytes"
    BLOB_STREAM = "blob_stream"
    CLOB_STREAM = "clob_stream"

    def __str__(self) -> str:
        return self.value

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_KINDS

    @property
    def is_stream(self) -> bool:
        return self in {ArgumentKind.BLOB_STREAM, ArgumentKind.CLOB_STREAM}


_NUMERIC_KINDS = frozenset(
    {ArgumentKind.INTEGER, ArgumentKind.LONG, ArgumentKind.FLOAT, ArgumentKind.DOUBLE, ArgumentKind.DECIMAL}
)


class ParameterInfo:
    """Immutable placeholder information."""

    __slots__ = ("name", "ordinal", "placeholder_text", "position", "style")

    def __init__(
        self, name: Optional[str], style: ParameterStyle, position: int, ordinal: int, placeholder_text: str
    ) -> None:
        self.name = name
        self.style = style
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.style == other.style and self.position == other.position

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, ordinal={self.ordinal!r}, "
            f"placeholder_text={self.placeholder_text!r}, position={self.position!r}, style={self.style!r})"
        )

    def __hash__(self) -> int:
        return hash((self.name, self.style, self.position))


@dataclass(frozen=True, slots=True)
class Argument:
    """A statement argument tagged with its declared kind.

    ``value`` is ``None`` for a typed SQL NULL.
    """

    kind: ArgumentKind
    value: Any = None

    @property
    def is_null(self) -> bool:
        return self.value is None

    @classmethod
    def null(cls, kind: ArgumentKind) -> "Argument":
        return cls(kind, None)

    @classmethod
    def infer(cls, value: Any) -> "Argument":
        """Tag a plain Python value with the kind its type maps to.

        Raises:
            TypeError: If the value is ``None`` or of an unsupported type.
        """
        if isinstance(value, Argument):
            return value
        if value is None:
            msg = "Cannot infer the kind of a None argument; use a typed argument method instead"
            raise TypeError(msg)
        if isinstance(value, bool):
            return cls(ArgumentKind.INTEGER, int(value))
        if isinstance(value, int):
            return cls(ArgumentKind.LONG, value)
        if isinstance(value, float):
            return cls(ArgumentKind.DOUBLE, value)
        if isinstance(value, Decimal):
            return cls(ArgumentKind.DECIMAL, value)
        if isinstance(value, str):
            return cls(ArgumentKind.STRING, value)
        if isinstance(value, (datetime.datetime, datetime.date)):
            return cls(ArgumentKind.DATE, value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls(ArgumentKind.BYTES, bytes(value))
        if isinstance(value, io.TextIOBase):
            return cls(ArgumentKind.CLOB_STREAM, value)
        if isinstance(value, (io.RawIOBase, io.BufferedIOBase)):
            return cls(ArgumentKind.BLOB_STREAM, value)
        msg = f"Unsupported argument type: {type(value).__name__}"
        raise TypeError(msg)
