import pytest

from variants.checkable import Checkable, Checked, Unchecked, checkable_of


def test_checkable_of_picks_variant() -> None:
    assert checkable_of(True, "foo") == Checked("foo")
    assert checkable_of(False, "foo") == Unchecked("foo")


def test_predicates() -> None:
    assert Checked(1).is_checked()
    assert not Checked(1).is_unchecked()
    assert Unchecked(1).is_unchecked()
    assert not Unchecked(1).is_checked()


def test_equality_depends_on_flag() -> None:
    assert Checked(1) == Checked(1)
    assert Checked(1) != Unchecked(1)
    assert Checked() == Checked(None)


def test_hooks() -> None:
    seen: list[tuple[str, int]] = []

    item = Checked(1)
    returned = item.on_checked(lambda v: seen.append(("checked", v))).on_unchecked(
        lambda v: seen.append(("unchecked", v))
    )

    assert returned is item
    assert seen == [("checked", 1)]

    Unchecked(2).on_unchecked(lambda v: seen.append(("unchecked", v)))
    assert seen[-1] == ("unchecked", 2)


def test_map_keeps_flag() -> None:
    assert Checked(1).map(lambda checked, v: (checked, v)) == Checked((True, 1))
    assert Unchecked(1).map(lambda checked, v: (checked, v)) == Unchecked((False, 1))


def test_map_each_picks_transform_by_flag() -> None:
    def upper(s: str) -> str:
        return s.upper()

    def lower(s: str) -> str:
        return s.lower()

    assert Checked("Foo").map_each(upper, lower) == Checked("FOO")
    assert Unchecked("Foo").map_each(upper, lower) == Unchecked("foo")
    assert Unchecked(3).map_each(str, hex) == Unchecked("0x3")


def test_fold() -> None:
    assert Checked(2).fold(lambda checked, v: v if checked else -v) == 2
    assert Unchecked(2).fold(lambda checked, v: v if checked else -v) == -2
    assert Unchecked("x").fold_each(lambda v: "on", lambda v: "off") == "off"


def test_flat_map_can_change_flag() -> None:
    assert Checked(1).flat_map(lambda checked, v: checkable_of(not checked, v * 2)) == Unchecked(2)
    assert Unchecked(1).flat_map_each(Unchecked, Checked) == Checked(1)


def test_flatten_takes_inner_value() -> None:
    nested: Checkable[Checkable[int]] = Checked(Unchecked(1))
    assert nested.flatten() == Unchecked(1)

    with pytest.raises(TypeError):
        Checked(1).flatten()


def test_conversions() -> None:
    assert Unchecked("a").to_checked() == Checked("a")
    assert Checked("a").to_unchecked() == Unchecked("a")
    assert Checked("a").toggle() == Unchecked("a")
    assert Unchecked("a").toggle() == Checked("a")


def test_checkable_base_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError, match="cannot be instantiated"):
        Checkable("foo")


def test_checkable_is_closed_to_new_variants() -> None:
    with pytest.raises(TypeError, match="Checkable is closed"):

        class Maybe(Checkable[str]):
            flag = True

    with pytest.raises(TypeError, match="Checked is closed"):

        class Double(Checked[str]):
            pass
