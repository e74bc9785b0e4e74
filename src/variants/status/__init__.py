"""
The three-state `Status` union: `Pending`, `Success` or `Failure`.

Typical use is the state of an asynchronous operation held by a view or a
service, transformed one channel at a time:

    >>> Failure(404).map_failure(lambda code: f"HTTP {code}")
    Failure(failure='HTTP 404')
"""

from .serialization import StatusCodec, decode_status, encode_status
from .status import (
    Failure,
    Pending,
    Status,
    Success,
    is_failure,
    is_pending,
    is_success,
    status_of,
)
from .zip import zip2, zip3, zip4, zip5

__all__ = [
    "Failure",
    "Pending",
    "Status",
    "StatusCodec",
    "Success",
    "decode_status",
    "encode_status",
    "is_failure",
    "is_pending",
    "is_success",
    "status_of",
    "zip2",
    "zip3",
    "zip4",
    "zip5",
]
