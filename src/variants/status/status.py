"""
Defines the three-state `Status` union used to describe an asynchronous operation.

A `Status` is exactly one of:
- `Pending`: the operation has not completed yet (carries e.g. progress),
- `Success`: the operation completed with a result,
- `Failure`: the operation completed with an error.

Values are immutable; every transformation returns a new value (or the same
value when the transformation does not apply to the active variant). Each
caller-supplied function is invoked at most once, synchronously.

Example:
    >>> Success(1).map_success(lambda x: x + 1)
    Success(success=2)
    >>> Pending("loading").map_success(lambda x: x + 1)
    Pending(pending='loading')
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeGuard, get_args, get_origin

from returns.result import Result

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema


_VARIANTS = frozenset({"Pending", "Success", "Failure"})


class Status[P, S, F]:
    """
    Base class of the three variants.

    The hierarchy is closed: `Status` itself cannot be instantiated and only
    `Pending`, `Success` and `Failure` may subclass it.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Status[P, S, F]:
        if cls is Status:
            raise TypeError("Status cannot be instantiated; use Pending, Success or Failure")
        return super().__new__(cls)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__mro__[1] is not Status or cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError(f"Status is closed; cannot subclass it as {cls.__qualname__}")

    def is_pending(self) -> bool:
        return isinstance(self, Pending)

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def is_complete(self) -> bool:
        """True for `Success` and `Failure`, i.e. whenever the value is not `Pending`."""
        return self.is_success() or self.is_failure()

    # --- Accessors ---

    def pending_or_none(self) -> P | None:
        return self.pending if isinstance(self, Pending) else None

    def success_or_none(self) -> S | None:
        return self.success if isinstance(self, Success) else None

    def failure_or_none(self) -> F | None:
        return self.failure if isinstance(self, Failure) else None

    # --- Hooks ---

    def on_pending(self, block: Callable[[P], Any]) -> Status[P, S, F]:
        """Call `block` with the payload if this is `Pending`; return `self` unchanged."""
        if isinstance(self, Pending):
            block(self.pending)
        return self

    def on_success(self, block: Callable[[S], Any]) -> Status[P, S, F]:
        """Call `block` with the payload if this is `Success`; return `self` unchanged."""
        if isinstance(self, Success):
            block(self.success)
        return self

    def on_failure(self, block: Callable[[F], Any]) -> Status[P, S, F]:
        """Call `block` with the payload if this is `Failure`; return `self` unchanged."""
        if isinstance(self, Failure):
            block(self.failure)
        return self

    # --- Monadic chaining ---

    def flat_map_pending[P2](
        self, transform: Callable[[P], Status[P2, S, F]]
    ) -> Status[P2, S, F]:
        match self:
            case Pending(pending):
                return transform(pending)
            case _:
                return self  # type: ignore[return-value]

    def flat_map_success[S2](
        self, transform: Callable[[S], Status[P, S2, F]]
    ) -> Status[P, S2, F]:
        match self:
            case Success(success):
                return transform(success)
            case _:
                return self  # type: ignore[return-value]

    def flat_map_failure[F2](
        self, transform: Callable[[F], Status[P, S, F2]]
    ) -> Status[P, S, F2]:
        match self:
            case Failure(failure):
                return transform(failure)
            case _:
                return self  # type: ignore[return-value]

    # --- Mapping ---

    def map_pending[P2](self, transform: Callable[[P], P2]) -> Status[P2, S, F]:
        return self.flat_map_pending(lambda pending: Pending(transform(pending)))

    def map_success[S2](self, transform: Callable[[S], S2]) -> Status[P, S2, F]:
        return self.flat_map_success(lambda success: Success(transform(success)))

    def map_failure[F2](self, transform: Callable[[F], F2]) -> Status[P, S, F2]:
        return self.flat_map_failure(lambda failure: Failure(transform(failure)))

    def map[P2, S2, F2](
        self,
        pending_transform: Callable[[P], P2],
        success_transform: Callable[[S], S2],
        failure_transform: Callable[[F], F2],
    ) -> Status[P2, S2, F2]:
        """Transform whichever payload is active; the other two transforms are not called."""
        return (
            self.map_pending(pending_transform)
            .map_success(success_transform)
            .map_failure(failure_transform)
        )

    def fold[R](
        self,
        pending_transform: Callable[[P], R],
        success_transform: Callable[[S], R],
        failure_transform: Callable[[F], R],
    ) -> R:
        """
        Collapse the value into a single result.

        Exactly one of the three transforms is called, once, with the active
        payload, and its return value is passed through unwrapped.
        """
        match self:
            case Pending(pending):
                return pending_transform(pending)
            case Success(success):
                return success_transform(success)
            case Failure(failure):
                return failure_transform(failure)
            case _:
                raise TypeError(f"{type(self).__name__} is not a Status variant")

    def zip[S2, R](
        self,
        other: Status[P, S2, F],
        transform: Callable[[S, S2], R] | None = None,
    ) -> Status[P, R, F]:
        """Method form of `zip2`."""
        from .zip import zip2

        return zip2(self, other, transform)

    # --- Conversions ---

    def to_result[E](self, on_pending: Callable[[P], E]) -> Result[S, F | E]:
        """
        Convert to a `returns` `Result`.

        `Success` and `Failure` map onto the matching containers; a `Pending`
        payload is turned into a failure by `on_pending`.
        """
        return self.fold(
            lambda pending: Result.from_failure(on_pending(pending)),
            Result.from_value,
            Result.from_failure,
        )

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from .serialization import StatusCodec

        origin = get_origin(source) or source
        args = get_args(source) if origin is Status else ()
        codec: StatusCodec[Any, Any, Any] = StatusCodec(*args)
        return codec.pydantic_schema(origin)


@dataclass(frozen=True, slots=True)
class Pending[P](Status[P, Never, Never]):
    """The operation has not completed yet."""

    pending: P = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class Success[S](Status[Never, S, Never]):
    """The operation completed with a result."""

    success: S = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class Failure[F](Status[Never, Never, F]):
    """The operation completed with an error."""

    failure: F = None  # type: ignore[assignment]


def is_pending[P](status: Status[P, Any, Any]) -> TypeGuard[Pending[P]]:
    return status.is_pending()


def is_success[S](status: Status[Any, S, Any]) -> TypeGuard[Success[S]]:
    return status.is_success()


def is_failure[F](status: Status[Any, Any, F]) -> TypeGuard[Failure[F]]:
    return status.is_failure()


def status_of[S, F](condition: object, success: S, failure: F) -> Status[Never, S, F]:
    """Pick `Success(success)` when `condition` is truthy, `Failure(failure)` otherwise."""
    return Success(success) if condition else Failure(failure)


__all__ = [
    "Failure",
    "Pending",
    "Status",
    "Success",
    "is_failure",
    "is_pending",
    "is_success",
    "status_of",
]
