"""Value, entity and report models."""

from bimprops.models.values import (
    OptionValueType,
    StringValue,
    DoubleValue,
    EnumerationValue,
    Value,
    VALUE_TYPE_SYNONYMS,
    make_value,
    parse_value_type,
)
from bimprops.models.entities import (
    OptionProperty,
    OptionGroup,
    FamilyManifest,
    ResolvedFamily,
    FamilyView,
)
from bimprops.models.reports import (
    ValidationIssue,
    ValidationResult,
    SkippedEntry,
    IntegrityWarning,
    EditResult,
)

__all__ = [
    "OptionValueType",
    "StringValue",
    "DoubleValue",
    "EnumerationValue",
    "Value",
    "VALUE_TYPE_SYNONYMS",
    "make_value",
    "parse_value_type",
    "OptionProperty",
    "OptionGroup",
    "FamilyManifest",
    "ResolvedFamily",
    "FamilyView",
    "ValidationIssue",
    "ValidationResult",
    "SkippedEntry",
    "IntegrityWarning",
    "EditResult",
]
