from returns.result import Failure as ResultFailure
from returns.result import Result
from returns.result import Success as ResultSuccess

from variants.interop import status_from_result, status_from_result_mapped, status_to_result
from variants.status import Failure, Pending, Success


def test_status_from_result() -> None:
    assert status_from_result(Result.from_value(1)) == Success(1)
    assert status_from_result(Result.from_failure("err")) == Failure("err")
    assert status_from_result(Result.from_value(1), pending="loading") == Success(1)


def test_status_from_result_mapped() -> None:
    def to_message(e: Exception) -> str:
        return str(e)

    ok = status_from_result_mapped(Result.from_value(2), lambda x: x * 10, to_message)
    err = status_from_result_mapped(Result.from_failure(ValueError("bad")), lambda x: x * 10, to_message)

    assert ok == Success(20)
    assert err == Failure("bad")


def test_status_to_result() -> None:
    ok = status_to_result(Success(1), on_pending=str)
    assert isinstance(ok, ResultSuccess)
    assert ok.unwrap() == 1

    err = status_to_result(Failure("err"), on_pending=str)
    assert isinstance(err, ResultFailure)
    assert err.failure() == "err"

    pending = Pending(40).to_result(lambda p: f"still loading ({p}%)")
    assert isinstance(pending, ResultFailure)
    assert pending.failure() == "still loading (40%)"
