"""Family loading exceptions."""
from typing import Optional

from bimprops.exceptions.base import BimPropsError, NotFoundError
from bimprops.models.reports import ValidationResult


class FamilyNotFoundError(NotFoundError):
    """Raised when no manifest exists for a family id."""

    default_code = "FAMILY_NOT_FOUND"

    def __init__(self, family_id: str, path: Optional[str] = None):
        message = f"Family '{family_id}' not found"
        if path:
            message += f" (expected manifest at '{path}')"
        super().__init__(message, details={"family_id": family_id, "path": path})
        self.family_id = family_id


class OptionsFileNotFoundError(NotFoundError):
    """Raised when the shared options file is missing at edit time."""

    default_code = "OPTIONS_FILE_NOT_FOUND"

    def __init__(self, path: str):
        super().__init__(f"Shared options file '{path}' not found", details={"path": path})
        self.path = path


class FamilyValidationError(BimPropsError):
    """Raised when a family fails structural validation and must not be displayed."""

    default_code = "FAMILY_INVALID"

    def __init__(self, family_id: str, result: ValidationResult):
        super().__init__(
            f"Family '{family_id}' is invalid: {len(result.errors)} problem(s) found",
            details={
                "family_id": family_id,
                "missing_group_ids": result.missing_group_ids,
                "errors": result.get_json_errors(),
            },
        )
        self.family_id = family_id
        self.result = result
