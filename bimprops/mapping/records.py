"""Helpers for the raw JSON record tree.

Field names in the data files are PascalCase but are read case-insensitively.
The raw tree keeps the original key spelling and order so it can be written
back unchanged apart from the edited value.
"""

import json
from typing import Any, Dict, List, Optional

from bimprops.exceptions import DocumentFormatError

OPTIONS_COLLECTION_FIELD = "FamilyOptions"
GROUP_ID_FIELD = "Id"
GROUP_PROPERTIES_FIELD = "OptionProperties"
PROPERTY_ID_FIELD = "Id"
PROPERTY_NAME_FIELD = "PropertyName"
PROPERTY_DESCRIPTION_FIELD = "Description"
PROPERTY_VALUE_TYPE_FIELD = "ValueType"
PROPERTY_CATEGORY_FIELD = "CategoryName"
PROPERTY_VALUE_FIELD = "Value"


def find_key(record: Dict[str, Any], name: str) -> Optional[str]:
    """Return the key in record that matches name case-insensitively."""
    if name in record:
        return name
    lowered = name.lower()
    for key in record:
        if isinstance(key, str) and key.lower() == lowered:
            return key
    return None


def get_field(record: Dict[str, Any], name: str, default: Any = None) -> Any:
    key = find_key(record, name)
    if key is None:
        return default
    return record[key]


def stringify(value: Any) -> str:
    """Render a raw JSON value as text; null becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def text_field(record: Dict[str, Any], name: str) -> str:
    return stringify(get_field(record, name))


def load_json(text: str, path: str) -> Any:
    """Parse document text, raising DocumentFormatError on malformed JSON."""
    try:
        return json.loads(text)
    except ValueError as e:
        raise DocumentFormatError(path, str(e)) from e


def dump_json(document: Any) -> str:
    """Serialize a raw tree keeping key spelling and non-ASCII characters."""
    return json.dumps(document, ensure_ascii=False, indent=2)


def option_group_records(document: Any, path: str) -> List[Any]:
    """Return the list of option-group records of a shared options document.

    A missing or null collection field counts as an empty list.
    """
    if not isinstance(document, dict):
        raise DocumentFormatError(path, f"expected a JSON object, got {type(document).__name__}")
    records = get_field(document, OPTIONS_COLLECTION_FIELD)
    if records is None:
        return []
    if not isinstance(records, list):
        raise DocumentFormatError(
            path, f"'{OPTIONS_COLLECTION_FIELD}' must be an array, got {type(records).__name__}"
        )
    return records


def property_records(group_record: Dict[str, Any]) -> List[Any]:
    records = get_field(group_record, GROUP_PROPERTIES_FIELD)
    if not isinstance(records, list):
        return []
    return records
