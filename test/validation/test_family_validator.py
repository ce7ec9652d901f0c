"""Tests for structural validation of resolved families."""

from typing import List

import pytest

from bimprops.families import resolve
from bimprops.models import (
    DoubleValue,
    EnumerationValue,
    FamilyManifest,
    OptionGroup,
    OptionProperty,
    StringValue,
)
from bimprops.validation import FamilyValidator, validate


@pytest.fixture
def validator() -> FamilyValidator:
    return FamilyValidator()


def _groups(*properties: OptionProperty) -> dict:
    return {"g1": OptionGroup(id="g1", properties=list(properties))}


def _manifest(group_ids: List[str], family_id: str = "f1", name: str = "Door") -> FamilyManifest:
    return FamilyManifest(id=family_id, name=name, option_group_ids=group_ids)


def _fields(result) -> List[str]:
    return [issue.field for issue in result.errors]


def test_valid_family(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width", value=DoubleValue(1.0)))
    resolved = resolve(_manifest(["g1"]), groups)

    result = validator.validate(resolved)

    assert result.is_valid is True
    assert result.errors == []
    assert validate(resolved) is True


def test_empty_enumeration_and_string_are_valid(validator: FamilyValidator) -> None:
    groups = _groups(
        OptionProperty(id="p1", name="Finish", value=EnumerationValue("")),
        OptionProperty(id="p2", name="Note", value=StringValue("")),
    )

    assert validator.validate(resolve(_manifest(["g1"]), groups)).is_valid


def test_missing_group_reference(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width"))
    result = validator.validate(resolve(_manifest(["g1", "g9"]), groups))

    assert result.is_valid is False
    assert _fields(result) == ["manifest.option_group_ids[1]"]
    assert result.errors[0].received_value == "g9"


@pytest.mark.parametrize(
    "family_id,name,field",
    [("", "Door", "manifest.id"), ("  ", "Door", "manifest.id"), ("f1", "", "manifest.name")],
)
def test_blank_manifest_fields(validator: FamilyValidator, family_id, name, field) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width"))
    result = validator.validate(resolve(_manifest(["g1"], family_id, name), groups))

    assert _fields(result) == [field]


def test_no_option_groups(validator: FamilyValidator) -> None:
    result = validator.validate(resolve(_manifest([]), {}))

    assert _fields(result) == ["manifest.option_group_ids"]


def test_group_without_properties(validator: FamilyValidator) -> None:
    result = validator.validate(resolve(_manifest(["g1"]), _groups()))

    assert _fields(result) == ["option_groups[g1].properties"]


def test_double_without_number(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width", value=DoubleValue(None)))
    result = validator.validate(resolve(_manifest(["g1"]), groups))

    assert _fields(result) == ["option_groups[g1].properties[p1].value"]
    assert "Double" in result.errors[0].message


def test_none_string_is_invalid(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Note", value=StringValue(None)))

    assert not validator.validate(resolve(_manifest(["g1"]), groups)).is_valid


def test_all_problems_are_collected(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width", value=DoubleValue(None)))
    result = validator.validate(resolve(_manifest(["g1", "g9"], name=""), groups))

    assert _fields(result) == [
        "manifest.name",
        "manifest.option_group_ids[1]",
        "option_groups[g1].properties[p1].value",
    ]


def test_repeated_group_reference_reported_once(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width", value=DoubleValue(None)))
    result = validator.validate(resolve(_manifest(["g1", "g1"]), groups))

    assert len(result.errors) == 1


def test_error_summary_names_family_and_missing_groups(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width", value=DoubleValue(None)))
    result = validator.validate(resolve(_manifest(["g1", "g9", "g9"]), groups))
    lines = result.get_error_summary().splitlines()

    assert result.family_id == "f1"
    assert result.missing_group_ids == ["g9"]
    assert lines[0] == "Family 'f1' cannot be displayed (3 problem(s)); missing option groups: g9"
    assert lines[1].startswith("- manifest.option_group_ids[1]: Option group 'g9'")
    assert "(got 'g9', expected " in lines[1]
    assert "    hint: Add the option group to the shared options file" in lines
    assert any(line.startswith("- option_groups[g1].properties[p1].value") for line in lines)


def test_summary_of_valid_family(validator: FamilyValidator) -> None:
    groups = _groups(OptionProperty(id="p1", name="Width", value=DoubleValue(1.0)))
    result = validator.validate(resolve(_manifest(["g1"]), groups))

    assert result.get_error_summary() == "Family 'f1' is valid"
    assert result.missing_group_ids == []


def test_json_errors(validator: FamilyValidator) -> None:
    result = validator.validate(resolve(_manifest(["g9"]), {}))
    issue = result.get_json_errors()[0]

    assert issue["field"] == "manifest.option_group_ids[0]"
    assert issue["received_value"] == "g9"
    assert issue["suggestions"]
