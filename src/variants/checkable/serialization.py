"""
Structural encoding of `Checkable` values: `{"is_checked": true, "value": ...}`.
"""

from typing import Any

from .. import config
from .._internal.fields import Wire
from .._internal.flag_codec import FlagCodec
from .checkable import Checkable, checkable_of


class CheckableCodec[T](FlagCodec[T]):
    flag_field = config.CHECKABLE_FLAG_FIELD
    family = Checkable
    factory = staticmethod(checkable_of)


def encode_checkable(value: Checkable[Any]) -> Wire:
    return CheckableCodec().encode(value)


def decode_checkable(raw_data: Any) -> Checkable[Any]:
    return CheckableCodec().decode(raw_data)  # type: ignore[return-value]


__all__ = ["CheckableCodec", "decode_checkable", "encode_checkable"]
