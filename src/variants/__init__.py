import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV

    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from .checkable import Checkable, CheckableCodec, Checked, Unchecked, checkable_of
from .errors import (
    DecodingError,
    MalformedStructureError,
    PayloadValidationError,
    UnknownTagError,
    VariantsError,
)
from .interop import status_from_result, status_from_result_mapped, status_to_result
from .refreshable import Refreshable, RefreshableCodec, Refreshed, Refreshing, refreshable_of
from .status import (
    Failure,
    Pending,
    Status,
    StatusCodec,
    Success,
    status_of,
    zip2,
    zip3,
    zip4,
    zip5,
)

__all__: list[str] = [
    "Checkable",
    "CheckableCodec",
    "Checked",
    "DecodingError",
    "Failure",
    "MalformedStructureError",
    "PayloadValidationError",
    "Pending",
    "Refreshable",
    "RefreshableCodec",
    "Refreshed",
    "Refreshing",
    "Status",
    "StatusCodec",
    "Success",
    "Unchecked",
    "UnknownTagError",
    "VariantsError",
    "checkable_of",
    "refreshable_of",
    "status_from_result",
    "status_from_result_mapped",
    "status_of",
    "status_to_result",
    "zip2",
    "zip3",
    "zip4",
    "zip5",
]
