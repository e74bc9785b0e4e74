"""
Conversions between `Status` and the two-variant `returns` `Result` container.

A `Result` has no pending channel, so converting one always yields `Success`
or `Failure`; converting back needs a rule for `Pending`.
"""

from collections.abc import Callable
from typing import Any

from returns.pipeline import is_successful
from returns.result import Result

from .status import Failure, Status, Success


def status_from_result[S, F, P](result: Result[S, F], pending: P | None = None) -> Status[P, S, F]:
    """
    Build a `Status` from a `returns` `Result`.

    `pending` is the default payload of the pending channel; it types the
    result but is never used, since a `Result` is always complete.
    """
    if is_successful(result):
        return Success(result.unwrap())
    return Failure(result.failure())


def status_from_result_mapped[S, F, S2, F2](
    result: Result[S, F],
    success_transform: Callable[[S], S2],
    failure_transform: Callable[[F], F2],
) -> Status[Any, S2, F2]:
    return (
        status_from_result(result)
        .map_success(success_transform)
        .map_failure(failure_transform)
    )


def status_to_result[P, S, F, E](
    status: Status[P, S, F], on_pending: Callable[[P], E]
) -> Result[S, F | E]:
    """Convert a `Status` to a `Result`; `on_pending` turns a pending payload into a failure."""
    return status.to_result(on_pending)


__all__ = ["status_from_result", "status_from_result_mapped", "status_to_result"]
