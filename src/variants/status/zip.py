"""
Combination of several `Status` values into one.

The result is `Success` only when every input is `Success`. Otherwise the
first input (in argument order) that is not `Success` is returned as is, so
`zip2(Failure(e), Pending(p))` is `Failure(e)`. Without a `transform` the
payloads are packed into a tuple.
"""

from collections.abc import Callable
from typing import Any

from .status import Status, Success


def _pack(*values: Any) -> tuple[Any, ...]:
    return values


def _zip_all(statuses: tuple[Status[Any, Any, Any], ...], transform: Callable[..., Any] | None) -> Any:
    payloads = []
    for status in statuses:
        match status:
            case Success(success):
                payloads.append(success)
            case _:
                return status
    return Success((transform or _pack)(*payloads))


def zip2[P, S1, S2, F, R](
    first: Status[P, S1, F],
    second: Status[P, S2, F],
    transform: Callable[[S1, S2], R] | None = None,
) -> Status[P, R, F]:
    return _zip_all((first, second), transform)


def zip3[P, S1, S2, S3, F, R](
    first: Status[P, S1, F],
    second: Status[P, S2, F],
    third: Status[P, S3, F],
    transform: Callable[[S1, S2, S3], R] | None = None,
) -> Status[P, R, F]:
    return _zip_all((first, second, third), transform)


def zip4[P, S1, S2, S3, S4, F, R](
    first: Status[P, S1, F],
    second: Status[P, S2, F],
    third: Status[P, S3, F],
    fourth: Status[P, S4, F],
    transform: Callable[[S1, S2, S3, S4], R] | None = None,
) -> Status[P, R, F]:
    return _zip_all((first, second, third, fourth), transform)


def zip5[P, S1, S2, S3, S4, S5, F, R](
    first: Status[P, S1, F],
    second: Status[P, S2, F],
    third: Status[P, S3, F],
    fourth: Status[P, S4, F],
    fifth: Status[P, S5, F],
    transform: Callable[[S1, S2, S3, S4, S5], R] | None = None,
) -> Status[P, R, F]:
    return _zip_all((first, second, third, fourth, fifth), transform)


__all__ = ["zip2", "zip3", "zip4", "zip5"]
