"""Structural validation of resolved families."""
from typing import List

from bimprops.models import (
    OptionGroup,
    OptionValueType,
    ResolvedFamily,
    ValidationIssue,
    ValidationResult,
)

_EXPECTED_BY_TYPE = {
    OptionValueType.STRING: "A string (empty allowed)",
    OptionValueType.DOUBLE: "A number",
    OptionValueType.ENUMERATION: "An enumeration label (empty allowed)",
}


class FamilyValidator:
    """Checks a resolved family before it may be displayed.

    Checks run in order: manifest fields, referential integrity, option
    group structure, property values. Every problem found is reported.
    """

    def validate(self, resolved: ResolvedFamily) -> ValidationResult:
        errors: List[ValidationIssue] = []
        errors.extend(self._check_manifest(resolved))
        errors.extend(self._check_references(resolved))
        for group_id in dict.fromkeys(resolved.manifest.option_group_ids):
            group = resolved.option_groups.get(group_id)
            if group is None:
                continue
            errors.extend(self._check_group(group_id, group))
            errors.extend(self._check_values(group))

        return ValidationResult(
            is_valid=len(errors) == 0,
            family_id=resolved.manifest.id,
            missing_group_ids=list(dict.fromkeys(resolved.missing_group_ids)),
            errors=errors,
        )

    def _check_manifest(self, resolved: ResolvedFamily) -> List[ValidationIssue]:
        manifest = resolved.manifest
        errors: List[ValidationIssue] = []

        if not manifest.id or not manifest.id.strip():
            errors.append(
                ValidationIssue(
                    field="manifest.id",
                    message="Family id must be a non-empty string",
                    received_value=manifest.id,
                    expected="Non-empty string",
                    suggestions=["Set the 'Id' field of the family manifest"],
                )
            )

        if not manifest.name or not manifest.name.strip():
            errors.append(
                ValidationIssue(
                    field="manifest.name",
                    message="Family name must be a non-empty string",
                    received_value=manifest.name,
                    expected="Non-empty string",
                    suggestions=["Set the 'Name' field of the family manifest"],
                )
            )

        if not manifest.option_group_ids:
            errors.append(
                ValidationIssue(
                    field="manifest.option_group_ids",
                    message="Family must reference at least one option group",
                    received_value=manifest.option_group_ids,
                    expected="Non-empty list of option group ids",
                    suggestions=["Add option group ids to 'FamilyOptionIds'"],
                )
            )

        return errors

    def _check_references(self, resolved: ResolvedFamily) -> List[ValidationIssue]:
        errors: List[ValidationIssue] = []
        for index, group_id in enumerate(resolved.manifest.option_group_ids):
            if group_id in resolved.option_groups:
                continue
            errors.append(
                ValidationIssue(
                    field=f"manifest.option_group_ids[{index}]",
                    message=f"Option group '{group_id}' is not present in the shared options file",
                    received_value=group_id,
                    expected="Id of an option group in the shared options file",
                    suggestions=[
                        "Add the option group to the shared options file",
                        "Remove the reference from the family manifest",
                    ],
                )
            )
        return errors

    def _check_group(self, group_id: str, group: OptionGroup) -> List[ValidationIssue]:
        errors: List[ValidationIssue] = []

        if not group.id or not group.id.strip():
            errors.append(
                ValidationIssue(
                    field=f"option_groups[{group_id}].id",
                    message="Option group id must be a non-empty string",
                    received_value=group.id,
                    expected="Non-empty string",
                )
            )

        if not group.properties:
            errors.append(
                ValidationIssue(
                    field=f"option_groups[{group_id}].properties",
                    message=f"Option group '{group_id}' has no usable properties",
                    received_value=0,
                    expected="At least one property",
                    suggestions=["Check the option group for entries without Id or PropertyName"],
                )
            )

        return errors

    def _check_values(self, group: OptionGroup) -> List[ValidationIssue]:
        errors: List[ValidationIssue] = []
        for prop in group.properties:
            if prop.is_valid():
                continue
            errors.append(
                ValidationIssue(
                    field=f"option_groups[{group.id}].properties[{prop.id}].value",
                    message=f"Property '{prop.name}' has no valid {prop.value_type.value} value",
                    received_value=prop.value.raw,
                    expected=_EXPECTED_BY_TYPE[prop.value_type],
                    suggestions=["Correct the 'Value' field in the shared options file"],
                )
            )
        return errors


def validate(resolved: ResolvedFamily) -> bool:
    """Return True if the resolved family passes every structural check."""
    return FamilyValidator().validate(resolved).is_valid
