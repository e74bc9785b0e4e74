import json
import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic_core import CoreSchema, core_schema
from pydantic_core.core_schema import SerializationInfo
from returns.result import Result, safe

from .. import config
from ..errors import DecodingError, MalformedStructureError
from .fields import DumpMode, FieldBuffer, PayloadParser, Wire, mapping_fields
from .flagged import Flagged

logger = logging.getLogger(__name__)


class FlagCodec[T]:
    """
    Encodes a flag wrapper as `{"<flag_field>": bool, "value": payload}`.

    Subclasses fix `flag_field`, `family` and `factory` for one wrapper type.
    """

    flag_field: str
    family: type[Flagged[Any]]
    factory: Callable[[bool, Any], Flagged[Any]]

    def __init__(self, value: Any = Any):
        self.value = PayloadParser[T](value)

    def encode(self, wrapper: Flagged[T], mode: DumpMode = "json") -> Wire:
        if not isinstance(wrapper, self.family):
            raise TypeError(f"Expected {self.family.__name__}, got {type(wrapper).__name__}")
        return {
            self.flag_field: wrapper.flag,
            config.VALUE_FIELD: self.value.dump(wrapper.value, mode),
        }

    def decode(self, raw_data: Any) -> Flagged[T]:
        return self.decode_fields(mapping_fields(raw_data))

    def decode_fields(self, fields: Iterable[tuple[str, Any]]) -> Flagged[T]:
        """Decode a record delivered as (name, value) pairs in any order."""
        try:
            buffer = FieldBuffer((self.flag_field, config.VALUE_FIELD)).feed_all(fields)
            flag = buffer.require(self.flag_field)
            if not isinstance(flag, bool):
                raise MalformedStructureError(
                    f"Expected bool for '{self.flag_field}', got {type(flag).__name__}"
                )
            value = self.value.parse(buffer.get(config.VALUE_FIELD, None), config.VALUE_FIELD)
            return type(self).factory(flag, value)
        except DecodingError as e:
            logger.debug(f"{self.family.__name__} decoding failed: {e}")
            raise

    def dumps(self, wrapper: Flagged[T]) -> str:
        return json.dumps(self.encode(wrapper))

    def loads(self, text: str | bytes) -> Flagged[T]:
        try:
            raw_data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedStructureError(f"Invalid JSON: {e}") from e
        return self.decode(raw_data)

    def parse(self, raw_data: Any) -> Result[Flagged[T], str]:
        """Decode without raising; failures are reported as a `Failure` message."""
        return safe(exceptions=(DecodingError,))(self.decode)(raw_data).alt(str)

    def revalidate(self, wrapper: Flagged[Any]) -> Flagged[T]:
        """Validate the value of an existing wrapper; the flag is kept."""
        try:
            return wrapper.map(lambda _, value: self.value.parse(value, config.VALUE_FIELD))
        except DecodingError as e:
            logger.debug(f"{self.family.__name__} validation failed: {e}")
            raise

    def pydantic_schema(self, variant: type) -> CoreSchema:
        def validate(raw_data: Any) -> Flagged[T]:
            wrapper = self.revalidate(raw_data) if isinstance(raw_data, self.family) else self.decode(raw_data)
            if not isinstance(wrapper, variant):
                raise MalformedStructureError(f"Expected {variant.__name__}, got {type(wrapper).__name__}")
            return wrapper

        def serialize(wrapper: Flagged[T], info: SerializationInfo) -> Wire:
            return self.encode(wrapper, mode="json" if info.mode_is_json() else "python")

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(serialize, info_arg=True),
        )


__all__ = ["FlagCodec"]
