"""
Structural encoding of `Refreshable` values: `{"is_refreshing": true, "value": ...}`.
"""

from typing import Any

from .. import config
from .._internal.fields import Wire
from .._internal.flag_codec import FlagCodec
from .refreshable import Refreshable, refreshable_of


class RefreshableCodec[T](FlagCodec[T]):
    flag_field = config.REFRESHABLE_FLAG_FIELD
    family = Refreshable
    factory = staticmethod(refreshable_of)


def encode_refreshable(value: Refreshable[Any]) -> Wire:
    return RefreshableCodec().encode(value)


def decode_refreshable(raw_data: Any) -> Refreshable[Any]:
    return RefreshableCodec().decode(raw_data)  # type: ignore[return-value]


__all__ = ["RefreshableCodec", "decode_refreshable", "encode_refreshable"]
