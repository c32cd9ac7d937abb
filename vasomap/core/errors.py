"""
Error codes and exception types for vessel graph queries and loading.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Standard error codes for callers that map failures to responses."""
    VESSEL_NOT_FOUND = "VESSEL_NOT_FOUND"
    REGION_NOT_FOUND = "REGION_NOT_FOUND"
    NO_PATH_FOUND = "NO_PATH_FOUND"
    DUPLICATE_VESSEL_ID = "DUPLICATE_VESSEL_ID"
    DUPLICATE_VESSEL_NAME = "DUPLICATE_VESSEL_NAME"
    DUPLICATE_REGION_ID = "DUPLICATE_REGION_ID"
    DUPLICATE_EDGE = "DUPLICATE_EDGE"
    UNKNOWN_VESSEL_REFERENCE = "UNKNOWN_VESSEL_REFERENCE"
    INVALID_DIAMETER_RANGE = "INVALID_DIAMETER_RANGE"
    REGION_CYCLE = "REGION_CYCLE"


class VasoMapError(Exception):
    """Base class for all vessel graph errors."""

    code: Optional[ErrorCode] = None

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (JSON-safe)."""
        return {
            "error_code": self.code.value if self.code is not None else None,
            "message": self.message,
        }


class NotFound(VasoMapError):
    """A referenced vessel or region id does not exist."""

    def __init__(self, kind: str, missing_id, message: Optional[str] = None):
        self.kind = kind
        self.missing_id = missing_id
        code = ErrorCode.REGION_NOT_FOUND if kind == "region" else ErrorCode.VESSEL_NOT_FOUND
        if message is None:
            message = f"{kind.capitalize()} with id {missing_id} not found"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["missing_id"] = self.missing_id
        return d


class NoPathFound(VasoMapError):
    """Both endpoints exist but no directed route joins them within the depth bound."""

    code = ErrorCode.NO_PATH_FOUND

    def __init__(self, source_name: str, target_name: str):
        self.source_name = source_name
        self.target_name = target_name
        super().__init__(
            f"No path found from vessel '{source_name}' to vessel '{target_name}'"
        )


class DataIntegrityError(VasoMapError):
    """Input records violate a structural invariant; the load is rejected."""
