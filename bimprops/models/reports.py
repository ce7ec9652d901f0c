"""Report models returned by validation, conversion and editing."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from bimprops.models.values import OptionValueType


class ValidationIssue(BaseModel):
    """Detailed validation error with helpful suggestions"""

    field: str
    message: str
    received_value: Any = None
    expected: str
    suggestions: List[str] = []

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "option_group_ids[0]",
                "message": "Option group 'g9' is not present in the shared options file",
                "received_value": "g9",
                "expected": "Id of an option group in family-options.json",
                "suggestions": ["Add the option group or remove the reference from the manifest"],
            }
        }
    )


class ValidationResult(BaseModel):
    """Outcome of validating one resolved family."""

    is_valid: bool
    family_id: str = ""
    missing_group_ids: List[str] = []
    errors: List[ValidationIssue] = []

    def get_error_summary(self) -> str:
        """Describe why the family cannot be displayed, one issue per line."""
        subject = f"Family '{self.family_id}'" if self.family_id else "Family"
        if self.is_valid:
            return f"{subject} is valid"

        header = f"{subject} cannot be displayed ({len(self.errors)} problem(s))"
        if self.missing_group_ids:
            header += f"; missing option groups: {', '.join(self.missing_group_ids)}"

        lines = [header]
        for issue in self.errors:
            lines.append(
                f"- {issue.field}: {issue.message} "
                f"(got {issue.received_value!r}, expected {issue.expected})"
            )
            lines.extend(f"    hint: {suggestion}" for suggestion in issue.suggestions)
        return "\n".join(lines)

    def get_json_errors(self) -> List[Dict[str, Any]]:
        """Issues as plain dicts for error details and logs."""
        return [issue.model_dump() for issue in self.errors]


class SkippedEntry(BaseModel):
    """A raw record dropped while converting the shared options file."""

    kind: str  # "group" or "property"
    reason: str
    option_group_id: Optional[str] = None
    property_id: Optional[str] = None
    index: Optional[int] = None


class IntegrityWarning(BaseModel):
    """Post-write verification mismatch. The write is kept."""

    code: str = "INTEGRITY_WARNING"
    option_group_id: str
    property_id: str
    expected: Any = None
    actual: Any = None
    message: str


class EditResult(BaseModel):
    """Outcome of a committed property edit."""

    option_group_id: str
    property_id: str
    value_type: OptionValueType
    stored_value: Union[float, str]
    display_value: str
    warnings: List[IntegrityWarning] = []

    @property
    def verified(self) -> bool:
        return not self.warnings
