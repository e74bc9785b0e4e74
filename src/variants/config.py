"""
Configuration for the variants package.
"""

from typing import Final

# --- Status wire format ---
STATUS_TAG_FIELD: Final[str] = "type"
PENDING_TAG: Final[str] = "pending"
SUCCESS_TAG: Final[str] = "success"
FAILURE_TAG: Final[str] = "failure"

# --- Flag wrapper wire format ---
CHECKABLE_FLAG_FIELD: Final[str] = "is_checked"
REFRESHABLE_FLAG_FIELD: Final[str] = "is_refreshing"
VALUE_FIELD: Final[str] = "value"

# --- Runtime type checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "VARIANTS_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "VARIANTS_BEARTYPE_ALL"

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "CHECKABLE_FLAG_FIELD",
    "FAILURE_TAG",
    "PENDING_TAG",
    "REFRESHABLE_FLAG_FIELD",
    "STATUS_TAG_FIELD",
    "SUCCESS_TAG",
    "VALUE_FIELD",
]
