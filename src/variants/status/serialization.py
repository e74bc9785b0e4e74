"""
Structural (tagged) encoding of `Status` values.

A value is written as a record whose `type` field names the active variant
and whose field of the same name carries the payload:

    {"type": "success", "success": 1}

Decoding reads the tag first and then validates only the matching payload
field, so the inactive fields may be absent, null, or arrive in any order.
Payload types are validated and dumped through pydantic `TypeAdapter`s.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic_core import CoreSchema, core_schema
from pydantic_core.core_schema import SerializationInfo
from returns.result import Result, safe

from .. import config
from .._internal.fields import DumpMode, FieldBuffer, PayloadParser, Wire, mapping_fields
from ..errors import DecodingError, MalformedStructureError, UnknownTagError
from .status import Failure, Pending, Status, Success

logger = logging.getLogger(__name__)

_FIELDS = (
    config.STATUS_TAG_FIELD,
    config.PENDING_TAG,
    config.SUCCESS_TAG,
    config.FAILURE_TAG,
)


class StatusCodec[P, S, F]:
    """
    Encodes and decodes `Status[P, S, F]` values as tagged records.

    `encode` defaults to JSON mode, which turns payloads into JSON-compatible
    values: an untyped codec reads `Success((1, 2))` back as `Success([1, 2])`.
    Encode with `mode="python"`, or give the codec payload types, to keep
    tuples, sets and bytes intact.
    """

    def __init__(self, pending: Any = Any, success: Any = Any, failure: Any = Any):
        self.pending = PayloadParser[P](pending)
        self.success = PayloadParser[S](success)
        self.failure = PayloadParser[F](failure)

    def encode(self, value: Status[P, S, F], mode: DumpMode = "json") -> Wire:
        """Encode `value`; only the active payload field is written."""
        match value:
            case Pending(pending):
                tag, payload = config.PENDING_TAG, self.pending.dump(pending, mode)
            case Success(success):
                tag, payload = config.SUCCESS_TAG, self.success.dump(success, mode)
            case Failure(failure):
                tag, payload = config.FAILURE_TAG, self.failure.dump(failure, mode)
            case _:
                raise TypeError(f"Expected Status, got {type(value).__name__}")
        return {config.STATUS_TAG_FIELD: tag, tag: payload}

    def decode(self, raw_data: Any) -> Status[P, S, F]:
        """Decode a record such as the output of `encode`."""
        return self.decode_fields(mapping_fields(raw_data))

    def decode_fields(self, fields: Iterable[tuple[str, Any]]) -> Status[P, S, F]:
        """
        Decode a record delivered as (name, value) pairs in any order.

        Raises:
            MalformedStructureError: The tag is missing or a field is repeated.
            UnknownTagError: The tag names no variant.
            PayloadValidationError: The active payload fails validation.
        """
        try:
            buffer = FieldBuffer(_FIELDS).feed_all(fields)
            tag = buffer.require(config.STATUS_TAG_FIELD)
            return self._decode_variant(tag, buffer)
        except DecodingError as e:
            logger.debug(f"Status decoding failed: {e}")
            raise

    def _decode_variant(self, tag: Any, buffer: FieldBuffer) -> Status[P, S, F]:
        if not isinstance(tag, str):
            raise UnknownTagError(tag)
        match tag:
            case config.PENDING_TAG:
                return Pending(self.pending.parse(self._payload(buffer, tag), tag))
            case config.SUCCESS_TAG:
                return Success(self.success.parse(self._payload(buffer, tag), tag))
            case config.FAILURE_TAG:
                return Failure(self.failure.parse(self._payload(buffer, tag), tag))
            case _:
                raise UnknownTagError(tag)

    @staticmethod
    def _payload(buffer: FieldBuffer, name: str) -> Any:
        # An omitted payload field is read as a null payload.
        return buffer.get(name, None)

    def dumps(self, value: Status[P, S, F]) -> str:
        return json.dumps(self.encode(value))

    def loads(self, text: str | bytes) -> Status[P, S, F]:
        try:
            raw_data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedStructureError(f"Invalid JSON: {e}") from e
        return self.decode(raw_data)

    def parse(self, raw_data: Any) -> Result[Status[P, S, F], str]:
        """Decode without raising; failures are reported as a `Failure` message."""
        return safe(exceptions=(DecodingError,))(self.decode)(raw_data).alt(str)

    def revalidate(self, value: Status[Any, Any, Any]) -> Status[P, S, F]:
        """Validate the active payload of an existing value, coercing it where pydantic would."""
        try:
            return value.map(
                lambda pending: self.pending.parse(pending, config.PENDING_TAG),
                lambda success: self.success.parse(success, config.SUCCESS_TAG),
                lambda failure: self.failure.parse(failure, config.FAILURE_TAG),
            )
        except DecodingError as e:
            logger.debug(f"Status validation failed: {e}")
            raise

    # --- pydantic integration ---

    def pydantic_schema(self, variant: type = Status) -> CoreSchema:
        """Build the pydantic core schema accepting `variant` instances or records."""

        def validate(raw_data: Any) -> Status[P, S, F]:
            value = self.revalidate(raw_data) if isinstance(raw_data, Status) else self.decode(raw_data)
            if not isinstance(value, variant):
                raise MalformedStructureError(f"Expected {variant.__name__}, got {type(value).__name__}")
            return value

        def serialize(value: Status[P, S, F], info: SerializationInfo) -> Wire:
            return self.encode(value, mode="json" if info.mode_is_json() else "python")

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(serialize, info_arg=True),
        )


def encode_status(value: Status[Any, Any, Any]) -> Wire:
    """Encode with untyped payloads."""
    return StatusCodec().encode(value)


def decode_status(raw_data: Any) -> Status[Any, Any, Any]:
    """Decode with untyped payloads."""
    return StatusCodec().decode(raw_data)


__all__ = ["StatusCodec", "decode_status", "encode_status"]
