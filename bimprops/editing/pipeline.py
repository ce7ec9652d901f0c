"""Single-property edits written back into the shared options file.

The pipeline edits the raw JSON tree rather than the typed models, so every
untouched group and property is written back with its original key
spelling, key order and values. Stages:

 1. read the shared file            6. serialize the whole tree
 2. parse it                        7. write it back
 3. locate the option group         8. re-read and verify the edited value
 4. locate the property             9. invalidate the option cache
 5. coerce the new text            10. return the display-formatted value

Failures in stages 1-5 leave the file and the cache untouched. Once stage 7
succeeds the cache is always invalidated, and a verification mismatch is
reported as a warning without rolling back.
"""

import threading
from typing import Any, Dict, List, Optional, Tuple, Union

from bimprops.exceptions import (
    DocumentFormatError,
    GroupNotFoundError,
    InvalidFormatError,
    OptionsFileNotFoundError,
    PropertyNotFoundError,
    StoreIOError,
    StoreNotFoundError,
)
from bimprops.formatting.number_formatter import NumberParseError, parse_number
from bimprops.logger import Logger, session_logger
from bimprops.mapping.records import (
    GROUP_ID_FIELD,
    PROPERTY_ID_FIELD,
    PROPERTY_VALUE_FIELD,
    PROPERTY_VALUE_TYPE_FIELD,
    dump_json,
    find_key,
    get_field,
    load_json,
    option_group_records,
    property_records,
    stringify,
)
from bimprops.models import (
    EditResult,
    IntegrityWarning,
    OptionValueType,
    make_value,
    parse_value_type,
)
from bimprops.options.cache import OptionCache
from bimprops.storage.base import TextStoreBase

StoredValue = Union[float, str]


def find_group_record(records: List[Any], option_group_id: str) -> Optional[Dict[str, Any]]:
    """Return the first option-group record with the given id."""
    for record in records:
        if isinstance(record, dict) and stringify(get_field(record, GROUP_ID_FIELD)) == option_group_id:
            return record
    return None


def find_property_record(group_record: Dict[str, Any], property_id: str) -> Optional[Dict[str, Any]]:
    """Return the first property record with the given id inside a group record."""
    for record in property_records(group_record):
        if isinstance(record, dict) and stringify(get_field(record, PROPERTY_ID_FIELD)) == property_id:
            return record
    return None


def coerce_text(record: Dict[str, Any], property_id: str, new_raw_text: str) -> Tuple[OptionValueType, StoredValue]:
    """Convert edit text to the value stored for the record's declared type.

    Raises:
        InvalidFormatError: If the declared type is unknown or the text is not
            a number for a Double property
    """
    raw_type = get_field(record, PROPERTY_VALUE_TYPE_FIELD)
    declared = None if raw_type is None else stringify(raw_type)
    value_type = parse_value_type(declared)
    if value_type is None:
        raise InvalidFormatError(new_raw_text, declared or "", property_id, "unrecognized value type")

    if not isinstance(new_raw_text, str):
        raise InvalidFormatError(str(new_raw_text), value_type.value, property_id, "text expected")

    if value_type is OptionValueType.DOUBLE:
        try:
            return value_type, parse_number(new_raw_text)
        except NumberParseError as e:
            raise InvalidFormatError(new_raw_text, value_type.value, property_id, str(e)) from e

    return value_type, new_raw_text


def values_match(value_type: OptionValueType, expected: StoredValue, actual: Any) -> bool:
    if value_type is OptionValueType.DOUBLE:
        if isinstance(actual, bool) or not isinstance(actual, (int, float)):
            return False
        return float(actual) == expected
    return isinstance(actual, str) and actual == expected


class EditPipeline:
    """Applies one property edit at a time to the shared options file."""

    def __init__(
        self,
        store: TextStoreBase,
        options_path: str,
        cache: OptionCache,
        logger: Optional[Logger] = None,
    ):
        """
        Args:
            store: Store holding the shared options file
            options_path: Store path of family-options.json
            cache: Option cache to invalidate after a committed write
            logger: Logger instance
        """
        self.store = store
        self.options_path = options_path
        self.cache = cache
        self.logger = logger or session_logger
        self._lock = threading.Lock()

    def apply_edit(self, option_group_id: str, property_id: str, new_raw_text: str) -> EditResult:
        """
        Write a new value for one property.

        Args:
            option_group_id: Id of the option group holding the property
            property_id: Id of the property within the group
            new_raw_text: Text entered by the user

        Returns:
            EditResult with the stored value, its display form and any
            integrity warnings from verification

        Raises:
            OptionsFileNotFoundError: If the shared file does not exist
            DocumentFormatError: If the shared file is not valid JSON
            GroupNotFoundError: If no option group has the given id
            PropertyNotFoundError: If the group has no property with the given id
            InvalidFormatError: If the text cannot be coerced to the property type
            StoreIOError: If the store fails to read, write or re-read
        """
        with self._lock:
            return self._apply(option_group_id, property_id, new_raw_text)

    def _apply(self, option_group_id: str, property_id: str, new_raw_text: str) -> EditResult:
        ids = {"option_group_id": option_group_id, "property_id": property_id}
        self.logger.info("Applying property edit", path=self.options_path, value=new_raw_text, **ids)

        text = self._read("read", ids)
        document = load_json(text, self.options_path)
        records = option_group_records(document, self.options_path)

        group_record = find_group_record(records, option_group_id)
        if group_record is None:
            self.logger.error("Option group not found", path=self.options_path, **ids)
            raise GroupNotFoundError(option_group_id, self.options_path)

        property_record = find_property_record(group_record, property_id)
        if property_record is None:
            self.logger.error("Property not found", path=self.options_path, **ids)
            raise PropertyNotFoundError(option_group_id, property_id)

        try:
            value_type, stored_value = coerce_text(property_record, property_id, new_raw_text)
        except InvalidFormatError as e:
            self.logger.warning("Rejected property edit", reason=e.message, **ids)
            raise

        previous = get_field(property_record, PROPERTY_VALUE_FIELD)
        property_record[find_key(property_record, PROPERTY_VALUE_FIELD) or PROPERTY_VALUE_FIELD] = stored_value
        serialized = dump_json(document)

        self._write(serialized, ids)
        try:
            warnings = self._verify(option_group_id, property_id, value_type, stored_value)
        finally:
            self.cache.invalidate()

        display_value = make_value(value_type, stored_value).display()
        self.logger.info(
            "Property edit committed",
            previous=previous,
            stored=stored_value,
            display=display_value,
            verified=not warnings,
            **ids,
        )
        return EditResult(
            option_group_id=option_group_id,
            property_id=property_id,
            value_type=value_type,
            stored_value=stored_value,
            display_value=display_value,
            warnings=warnings,
        )

    def _read(self, operation: str, ids: Dict[str, str]) -> str:
        try:
            return self.store.read_text(self.options_path)
        except StoreNotFoundError as e:
            if operation == "read":
                self.logger.error("Shared options file not found", path=self.options_path, **ids)
                raise OptionsFileNotFoundError(self.options_path) from e
            raise StoreIOError(operation, self.options_path, "file missing after write", details=ids) from e
        except Exception as e:
            reason = e.reason if isinstance(e, StoreIOError) else str(e)
            self.logger.error("Store read failed", operation=operation, path=self.options_path, error=reason, **ids)
            raise StoreIOError(operation, self.options_path, reason, details=ids) from e

    def _write(self, text: str, ids: Dict[str, str]) -> None:
        try:
            self.store.write_text(self.options_path, text)
        except Exception as e:
            reason = e.reason if isinstance(e, StoreIOError) else str(e)
            self.logger.error("Store write failed", path=self.options_path, error=reason, **ids)
            raise StoreIOError("write", self.options_path, reason, details=ids) from e

    def _verify(
        self,
        option_group_id: str,
        property_id: str,
        value_type: OptionValueType,
        expected: StoredValue,
    ) -> List[IntegrityWarning]:
        ids = {"option_group_id": option_group_id, "property_id": property_id}
        text = self._read("verify", ids)

        try:
            records = option_group_records(load_json(text, self.options_path), self.options_path)
        except DocumentFormatError as e:
            return [self._warn(ids, expected, None, f"Written file could not be parsed: {e.reason}")]

        group_record = find_group_record(records, option_group_id)
        property_record = None if group_record is None else find_property_record(group_record, property_id)
        if property_record is None:
            return [self._warn(ids, expected, None, "Edited property is missing from the written file")]

        actual = get_field(property_record, PROPERTY_VALUE_FIELD)
        if not values_match(value_type, expected, actual):
            return [self._warn(ids, expected, actual, "Saved value does not match the expected value")]

        self.logger.debug("Property edit verified", **ids)
        return []

    def _warn(self, ids: Dict[str, str], expected: Any, actual: Any, message: str) -> IntegrityWarning:
        self.logger.warning(message, path=self.options_path, expected=expected, actual=actual, **ids)
        return IntegrityWarning(expected=expected, actual=actual, message=message, **ids)
