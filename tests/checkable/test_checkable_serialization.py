import pytest
from pydantic import BaseModel, ValidationError

from variants.checkable import Checkable, CheckableCodec, Checked, Unchecked, decode_checkable, encode_checkable
from variants.errors import MalformedStructureError, PayloadValidationError


def test_encode_checked_and_unchecked() -> None:
    assert encode_checkable(Checked("foo")) == {"is_checked": True, "value": "foo"}
    assert encode_checkable(Unchecked("foo")) == {"is_checked": False, "value": "foo"}


def test_round_trip() -> None:
    codec = CheckableCodec()
    for item in (Checked("foo"), Unchecked("foo"), Checked()):
        assert codec.loads(codec.dumps(item)) == item


def test_decode_fields_in_any_order() -> None:
    assert CheckableCodec().decode_fields([("value", 3), ("is_checked", False)]) == Unchecked(3)


def test_decode_missing_value_reads_as_none() -> None:
    assert decode_checkable({"is_checked": True}) == Checked(None)


def test_decode_missing_or_invalid_flag() -> None:
    with pytest.raises(MalformedStructureError, match="is_checked"):
        decode_checkable({"value": 1})

    with pytest.raises(MalformedStructureError, match="Expected bool"):
        decode_checkable({"is_checked": "yes", "value": 1})


def test_typed_value_validation() -> None:
    with pytest.raises(PayloadValidationError):
        CheckableCodec(int).decode({"is_checked": True, "value": "one"})


def test_encode_rejects_other_families() -> None:
    with pytest.raises(TypeError):
        CheckableCodec().encode("not a checkable")  # type: ignore[arg-type]


class Option(BaseModel):
    label: str
    selected: Checkable[int]


def test_checkable_as_pydantic_field() -> None:
    option = Option.model_validate({"label": "a", "selected": {"is_checked": True, "value": 1}})
    assert option.selected == Checked(1)
    assert option.model_dump() == {"label": "a", "selected": {"is_checked": True, "value": 1}}


def test_checkable_field_validates_instance_values() -> None:
    assert Option(label="a", selected=Unchecked("2")).selected == Unchecked(2)

    with pytest.raises(ValidationError):
        Option(label="a", selected=Checked("two"))
