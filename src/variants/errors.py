"""
Exceptions raised by the structural codecs.

Every combinator on the container types is total; only decoding can fail.
`DecodingError` derives from `ValueError` so that a failure raised inside a
pydantic validator is reported as a regular `pydantic.ValidationError`.
"""


class VariantsError(Exception):
    """Base class for all errors raised by this package."""


class DecodingError(VariantsError, ValueError):
    """Raised when a structure cannot be decoded into a container value."""


class MalformedStructureError(DecodingError):
    """The input is not a mapping, or a required field is missing or repeated."""


class UnknownTagError(DecodingError):
    """The discriminant field holds a value that names no known variant."""

    def __init__(self, tag: object) -> None:
        super().__init__(f"Unknown type: {tag!r}")
        self.tag = tag


class PayloadValidationError(DecodingError):
    """A payload field failed validation against its declared type."""


__all__ = [
    "DecodingError",
    "MalformedStructureError",
    "PayloadValidationError",
    "UnknownTagError",
    "VariantsError",
]
