"""JSON encoding for structured log records."""

import datetime
import enum
from decimal import Decimal
from typing import Any, Literal, Union, overload

import msgspec

__all__ = ("encode_json",)


def _enc_hook(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return repr(value)


_encoder = msgspec.json.Encoder(enc_hook=_enc_hook, decimal_format="string")


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> "Union[str, bytes]":
    """Encode data to a JSON string or bytes.

    Values msgspec cannot encode natively are written as their ``repr``.
    """
    encoded = _encoder.encode(data)
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")
