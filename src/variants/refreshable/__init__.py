from .refreshable import Refreshable, Refreshed, Refreshing, refreshable_of
from .serialization import RefreshableCodec, decode_refreshable, encode_refreshable

__all__ = [
    "Refreshable",
    "RefreshableCodec",
    "Refreshed",
    "Refreshing",
    "decode_refreshable",
    "encode_refreshable",
    "refreshable_of",
]
