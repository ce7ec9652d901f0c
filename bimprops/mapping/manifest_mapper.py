"""Conversion of family manifest documents."""

from typing import Any, List

from bimprops.exceptions import DocumentFormatError
from bimprops.mapping.records import get_field, load_json, stringify, text_field
from bimprops.models import FamilyManifest

MANIFEST_ID_FIELD = "Id"
MANIFEST_NAME_FIELD = "Name"
MANIFEST_GROUP_IDS_FIELD = "FamilyOptionIds"
MANIFEST_CATEGORY_ORDER_FIELD = "CategoryOrder"


def _string_list(value: Any, field_name: str, path: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DocumentFormatError(path, f"'{field_name}' must be an array, got {type(value).__name__}")
    return [stringify(item) for item in value]


def parse_manifest(text: str, path: str) -> FamilyManifest:
    """Parse manifest text into a FamilyManifest.

    Structural emptiness (blank id, no option groups) is left for the
    validator; only unparsable documents raise here.

    Raises:
        DocumentFormatError: If the text is not a JSON object of the expected shape
    """
    document = load_json(text, path)
    if not isinstance(document, dict):
        raise DocumentFormatError(path, f"expected a JSON object, got {type(document).__name__}")

    return FamilyManifest(
        id=text_field(document, MANIFEST_ID_FIELD),
        name=text_field(document, MANIFEST_NAME_FIELD),
        option_group_ids=_string_list(
            get_field(document, MANIFEST_GROUP_IDS_FIELD), MANIFEST_GROUP_IDS_FIELD, path
        ),
        category_order=_string_list(
            get_field(document, MANIFEST_CATEGORY_ORDER_FIELD), MANIFEST_CATEGORY_ORDER_FIELD, path
        ),
    )
