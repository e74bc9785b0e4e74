"""
Defines the `Checkable` wrapper: a value tagged as checked or unchecked.

Useful for list items with a selection state, toggles, or anything that has to
carry a boolean mark alongside its data without a dedicated model.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, get_args, get_origin

from .._internal.flagged import Flagged

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema


class Checkable[T](Flagged[T]):
    """Base class of `Checked` and `Unchecked`."""

    __slots__ = ()

    _variants = frozenset({"Checked", "Unchecked"})

    @classmethod
    def _of[U](cls, flag: bool, value: U) -> Checkable[U]:
        return checkable_of(flag, value)

    def is_checked(self) -> bool:
        return self.flag

    def is_unchecked(self) -> bool:
        return not self.flag

    def on_checked(self, block: Callable[[T], Any]) -> Checkable[T]:
        return self._when(True, block)

    def on_unchecked(self, block: Callable[[T], Any]) -> Checkable[T]:
        return self._when(False, block)

    def to_checked(self) -> Checked[T]:
        return Checked(self.value)

    def to_unchecked(self) -> Unchecked[T]:
        return Unchecked(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from .serialization import CheckableCodec

        origin = get_origin(source) or source
        args = get_args(source)
        codec: CheckableCodec[Any] = CheckableCodec(*args[:1])
        return codec.pydantic_schema(origin)


@dataclass(frozen=True, slots=True)
class Checked[T](Checkable[T]):
    flag: ClassVar[bool] = True

    value: T = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class Unchecked[T](Checkable[T]):
    flag: ClassVar[bool] = False

    value: T = None  # type: ignore[assignment]


def checkable_of[T](checked: bool, value: T) -> Checkable[T]:
    """Build `Checked(value)` or `Unchecked(value)` from a flag."""
    return Checked(value) if checked else Unchecked(value)


__all__ = ["Checkable", "Checked", "Unchecked", "checkable_of"]
