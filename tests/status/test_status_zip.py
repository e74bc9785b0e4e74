from typing import Any

from variants.status import Failure, Pending, Success, zip2, zip3, zip4, zip5


def test_zip2_combines_successes() -> None:
    assert zip2(Success(1), Success(2), lambda a, b: a + b) == Success(3)


def test_zip2_propagates_non_success() -> None:
    assert zip2(Success(1), Failure("x"), lambda a, b: a + b) == Failure("x")
    assert zip2(Pending("p"), Success(2), lambda a, b: a + b) == Pending("p")


def test_zip2_first_non_success_wins() -> None:
    assert zip2(Failure("e"), Pending("p"), lambda a, b: (a, b)) == Failure("e")
    assert zip2(Pending("p"), Failure("e"), lambda a, b: (a, b)) == Pending("p")


def test_zip_without_transform_builds_tuples() -> None:
    assert zip2(Success(None), Success("bar")) == Success((None, "bar"))
    assert zip3(Success(1), Success("bar"), Success("zoo")) == Success((1, "bar", "zoo"))


def test_transform_not_called_unless_all_succeed() -> None:
    calls: list[Any] = []

    def combine(*values: Any) -> Any:
        calls.append(values)
        return values

    zip3(Success(1), Pending(0), Success(3), combine)
    zip4(Success(1), Success(2), Success(3), Failure("e"), combine)
    assert calls == []

    zip5(Success(1), Success(2), Success(3), Success(4), Success(5), combine)
    assert calls == [(1, 2, 3, 4, 5)]


def test_zip3_to_zip5_precedence_follows_argument_order() -> None:
    assert zip3(Success(1), Failure("a"), Pending("b"), lambda *xs: xs) == Failure("a")
    assert zip4(Success(1), Success(2), Pending("c"), Failure("d"), lambda *xs: xs) == Pending("c")
    assert (
        zip5(Success(1), Success(2), Success(3), Success(4), Failure("last"), lambda *xs: sum(xs))
        == Failure("last")
    )


def test_zip4_and_zip5_combine() -> None:
    assert zip4(Success(1), Success(2), Success(3), Success(4), lambda *xs: sum(xs)) == Success(10)
    assert zip5(Success("a"), Success("b"), Success("c"), Success("d"), Success("e")) == Success(
        ("a", "b", "c", "d", "e")
    )


def test_zip_method_matches_zip2() -> None:
    assert Success(1).zip(Success(2), lambda a, b: a * b) == Success(2)
    assert Failure("e").zip(Pending("p")) == Failure("e")
    assert Success(1).zip(Success(2)) == Success((1, 2))
