from .checkable import Checkable, Checked, Unchecked, checkable_of
from .serialization import CheckableCodec, decode_checkable, encode_checkable

__all__ = [
    "Checkable",
    "CheckableCodec",
    "Checked",
    "Unchecked",
    "checkable_of",
    "decode_checkable",
    "encode_checkable",
]
