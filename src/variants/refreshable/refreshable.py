"""
Defines the `Refreshable` wrapper: already loaded data that may be reloading.

Unlike `Status`, a `Refreshable` always holds a value; the flag only tells
whether a refresh of that value is in progress (pull-to-refresh, polling).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, get_args, get_origin

from .._internal.flagged import Flagged

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema


class Refreshable[T](Flagged[T]):
    """Base class of `Refreshing` and `Refreshed`."""

    __slots__ = ()

    _variants = frozenset({"Refreshing", "Refreshed"})

    @classmethod
    def _of[U](cls, flag: bool, value: U) -> Refreshable[U]:
        return refreshable_of(flag, value)

    def is_refreshing(self) -> bool:
        return self.flag

    def is_refreshed(self) -> bool:
        return not self.flag

    def on_refreshing(self, block: Callable[[T], Any]) -> Refreshable[T]:
        return self._when(True, block)

    def on_refreshed(self, block: Callable[[T], Any]) -> Refreshable[T]:
        return self._when(False, block)

    def to_refreshing(self) -> Refreshing[T]:
        return Refreshing(self.value)

    def to_refreshed(self) -> Refreshed[T]:
        return Refreshed(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from .serialization import RefreshableCodec

        origin = get_origin(source) or source
        args = get_args(source)
        codec: RefreshableCodec[Any] = RefreshableCodec(*args[:1])
        return codec.pydantic_schema(origin)


@dataclass(frozen=True, slots=True)
class Refreshing[T](Refreshable[T]):
    flag: ClassVar[bool] = True

    value: T = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class Refreshed[T](Refreshable[T]):
    flag: ClassVar[bool] = False

    value: T = None  # type: ignore[assignment]


def refreshable_of[T](refreshing: bool, value: T) -> Refreshable[T]:
    """Build `Refreshing(value)` or `Refreshed(value)` from a flag."""
    return Refreshing(value) if refreshing else Refreshed(value)


__all__ = ["Refreshable", "Refreshed", "Refreshing", "refreshable_of"]
