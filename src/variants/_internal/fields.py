from collections.abc import Collection, Iterable, Mapping
from typing import Any, Literal

from pydantic import TypeAdapter, ValidationError

from ..errors import MalformedStructureError, PayloadValidationError

type Wire = dict[str, Any]
type DumpMode = Literal["json", "python"]

MISSING: Any = object()


class PayloadParser[T]:
    """Validates and dumps a single payload field through a pydantic adapter."""

    def __init__(self, payload_type: Any = Any):
        self.payload_type = payload_type
        self.adapter: TypeAdapter[T] = TypeAdapter(payload_type)

    def parse(self, raw_data: Any, field_name: str) -> T:
        """Validate a raw payload, naming the field on failure."""
        try:
            return self.adapter.validate_python(raw_data)
        except ValidationError as e:
            raise PayloadValidationError(f"Error parsing field '{field_name}': {e}") from e

    def dump(self, value: T, mode: DumpMode = "json") -> Any:
        return self.adapter.dump_python(value, mode=mode)


class FieldBuffer:
    """
    Collects the fields of a tagged record as they arrive.

    Fields may arrive in any order; names outside `known_fields` are skipped
    and a repeated name is rejected.
    """

    def __init__(self, known_fields: Collection[str]):
        self.known_fields = frozenset(known_fields)
        self._fields: dict[str, Any] = {}

    def feed(self, name: str, value: Any) -> None:
        if name not in self.known_fields:
            return
        if name in self._fields:
            raise MalformedStructureError(f"Duplicate field: {name}")
        self._fields[name] = value

    def feed_all(self, fields: Iterable[tuple[str, Any]]) -> "FieldBuffer":
        for name, value in fields:
            self.feed(name, value)
        return self

    def get(self, name: str, default: Any = MISSING) -> Any:
        """Return the buffered value, or `default` when the field never arrived."""
        return self._fields.get(name, default)

    def require(self, name: str) -> Any:
        value = self.get(name)
        if value is MISSING:
            raise MalformedStructureError(f"Missing required field: {name}")
        return value


def mapping_fields(raw_data: Any) -> Iterable[tuple[str, Any]]:
    """Return the (name, value) pairs of a decoded record."""
    if not isinstance(raw_data, Mapping):
        raise MalformedStructureError(f"Expected mapping, got {type(raw_data).__name__}")
    return raw_data.items()


__all__ = [
    "MISSING",
    "DumpMode",
    "FieldBuffer",
    "PayloadParser",
    "Wire",
    "mapping_fields",
]
