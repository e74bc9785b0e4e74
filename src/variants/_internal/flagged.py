from collections.abc import Callable
from typing import Any, ClassVar, Self


class Flagged[T]:
    """
    Shared behaviour of the two-variant wrappers that pair a value with a flag.

    Concrete families (`Checkable`, `Refreshable`) declare one variant with
    `flag = True` and one with `flag = False`, list their names in
    `_variants`, and implement `_of` to build the matching variant for a flag.
    Families are closed: only the listed variants, defined next to the
    family, may subclass it, and neither `Flagged` nor a family base can be
    instantiated.
    """

    __slots__ = ()

    flag: ClassVar[bool]
    value: T

    _variants: ClassVar[frozenset[str]] = frozenset()

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        if not hasattr(cls, "flag"):
            raise TypeError(f"{cls.__name__} cannot be instantiated; use one of its variants")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        family = cls.__mro__[1]
        if family is Flagged:
            return
        if cls.__module__ != family.__module__ or cls.__qualname__ not in vars(family).get("_variants", ()):
            raise TypeError(f"{family.__name__} is closed; cannot subclass it as {cls.__qualname__}")

    @classmethod
    def _of[U](cls, flag: bool, value: U) -> "Flagged[U]":
        raise NotImplementedError

    def map[U](self, transform: Callable[[bool, T], U]) -> "Flagged[U]":
        """Transform the value; the flag is kept."""
        return self._of(self.flag, transform(self.flag, self.value))

    def map_each[U](
        self,
        true_transform: Callable[[T], U],
        false_transform: Callable[[T], U],
    ) -> "Flagged[U]":
        if self.flag:
            return self._of(True, true_transform(self.value))
        return self._of(False, false_transform(self.value))

    def fold[R](self, transform: Callable[[bool, T], R]) -> R:
        return transform(self.flag, self.value)

    def fold_each[R](
        self,
        true_transform: Callable[[T], R],
        false_transform: Callable[[T], R],
    ) -> R:
        return true_transform(self.value) if self.flag else false_transform(self.value)

    def flat_map[R: "Flagged[Any]"](self, transform: Callable[[bool, T], R]) -> R:
        return transform(self.flag, self.value)

    def flat_map_each[R: "Flagged[Any]"](
        self,
        true_transform: Callable[[T], R],
        false_transform: Callable[[T], R],
    ) -> R:
        return self.fold_each(true_transform, false_transform)

    def flatten(self) -> Any:
        """Unwrap a nested wrapper; the inner flag wins."""
        if not isinstance(self.value, Flagged):
            raise TypeError(f"Cannot flatten {type(self).__name__} of {type(self.value).__name__}")
        return self.value

    def toggle(self) -> "Flagged[T]":
        return self._of(not self.flag, self.value)

    def _when(self, flag: bool, block: Callable[[T], Any]) -> Self:
        if self.flag is flag:
            block(self.value)
        return self


__all__ = ["Flagged"]
