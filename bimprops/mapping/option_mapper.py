"""Conversion of raw option-group records into typed models.

Malformed entries are not errors: they are dropped and reported as
SkippedEntry reasons next to the converted groups, so callers decide
whether to surface them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bimprops.formatting.number_formatter import coerce_number
from bimprops.mapping.records import (
    GROUP_ID_FIELD,
    PROPERTY_CATEGORY_FIELD,
    PROPERTY_DESCRIPTION_FIELD,
    PROPERTY_ID_FIELD,
    PROPERTY_NAME_FIELD,
    PROPERTY_VALUE_FIELD,
    PROPERTY_VALUE_TYPE_FIELD,
    get_field,
    property_records,
    stringify,
    text_field,
)
from bimprops.models import (
    DoubleValue,
    EnumerationValue,
    OptionGroup,
    OptionProperty,
    OptionValueType,
    SkippedEntry,
    StringValue,
    Value,
    parse_value_type,
)


@dataclass
class ConversionResult:
    """Converted option groups keyed by id, plus the entries that were dropped."""

    groups: Dict[str, OptionGroup] = field(default_factory=dict)
    skipped: List[SkippedEntry] = field(default_factory=list)


def convert_value(value_type: OptionValueType, raw: Any, current_locale: Optional[str] = None) -> Value:
    """Build a typed value from a raw JSON value.

    String and Enumeration never hold None: null becomes "". A Double that
    cannot be parsed keeps an absent number so validation can reject it.
    """
    if value_type is OptionValueType.DOUBLE:
        return DoubleValue(number=coerce_number(raw, current_locale))
    if value_type is OptionValueType.ENUMERATION:
        return EnumerationValue(label=stringify(raw))
    return StringValue(text=stringify(raw))


def convert_option_property(
    record: Any,
    group_id: str,
    index: int,
    skipped: List[SkippedEntry],
    current_locale: Optional[str] = None,
) -> Optional[OptionProperty]:
    if not isinstance(record, dict):
        skipped.append(
            SkippedEntry(
                kind="property",
                reason=f"entry is not an object ({type(record).__name__})",
                option_group_id=group_id,
                index=index,
            )
        )
        return None

    property_id = text_field(record, PROPERTY_ID_FIELD)
    name = text_field(record, PROPERTY_NAME_FIELD)
    if not property_id.strip() or not name.strip():
        skipped.append(
            SkippedEntry(
                kind="property",
                reason="missing Id or PropertyName",
                option_group_id=group_id,
                property_id=property_id or None,
                index=index,
            )
        )
        return None

    raw_type = get_field(record, PROPERTY_VALUE_TYPE_FIELD)
    value_type = parse_value_type(None if raw_type is None else stringify(raw_type))
    if value_type is None:
        skipped.append(
            SkippedEntry(
                kind="property",
                reason=f"unrecognized ValueType '{stringify(raw_type)}'",
                option_group_id=group_id,
                property_id=property_id,
                index=index,
            )
        )
        return None

    description = get_field(record, PROPERTY_DESCRIPTION_FIELD)
    return OptionProperty(
        id=property_id,
        name=name,
        description=None if description is None else stringify(description),
        category_name=text_field(record, PROPERTY_CATEGORY_FIELD),
        value=convert_value(value_type, get_field(record, PROPERTY_VALUE_FIELD), current_locale),
    )


def convert_option_group(
    record: Any,
    index: int,
    skipped: List[SkippedEntry],
    current_locale: Optional[str] = None,
) -> Optional[OptionGroup]:
    if not isinstance(record, dict):
        skipped.append(
            SkippedEntry(
                kind="group",
                reason=f"entry is not an object ({type(record).__name__})",
                index=index,
            )
        )
        return None

    group_id = text_field(record, GROUP_ID_FIELD)
    if not group_id.strip():
        skipped.append(SkippedEntry(kind="group", reason="missing Id", index=index))
        return None

    properties = []
    for prop_index, prop_record in enumerate(property_records(record)):
        prop = convert_option_property(prop_record, group_id, prop_index, skipped, current_locale)
        if prop is not None:
            properties.append(prop)

    return OptionGroup(id=group_id, properties=properties)


def convert_options_document(records: List[Any], current_locale: Optional[str] = None) -> ConversionResult:
    """Convert the option-group records of the shared file.

    Args:
        records: Raw option-group records (see records.option_group_records)
        current_locale: Locale tried after invariant rules for textual numbers

    Returns:
        ConversionResult with groups in file order and skipped-entry reasons
    """
    result = ConversionResult()

    for index, record in enumerate(records):
        group = convert_option_group(record, index, result.skipped, current_locale)
        if group is None:
            continue
        if group.id in result.groups:
            result.skipped.append(
                SkippedEntry(
                    kind="group",
                    reason="duplicate Id, first occurrence kept",
                    option_group_id=group.id,
                    index=index,
                )
            )
            continue
        result.groups[group.id] = group

    return result
