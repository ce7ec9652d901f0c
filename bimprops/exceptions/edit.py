"""Property edit exceptions."""
from bimprops.exceptions.base import BimPropsError, NotFoundError


class GroupNotFoundError(NotFoundError):
    """Raised when the option group being edited is not in the shared file."""

    default_code = "GROUP_NOT_FOUND"

    def __init__(self, option_group_id: str, path: str):
        super().__init__(
            f"Option group '{option_group_id}' not found in '{path}'",
            details={"option_group_id": option_group_id, "path": path},
        )
        self.option_group_id = option_group_id


class PropertyNotFoundError(NotFoundError):
    """Raised when the property being edited is not in its option group."""

    default_code = "PROPERTY_NOT_FOUND"

    def __init__(self, option_group_id: str, property_id: str):
        super().__init__(
            f"Property '{property_id}' not found in option group '{option_group_id}'",
            details={"option_group_id": option_group_id, "property_id": property_id},
        )
        self.option_group_id = option_group_id
        self.property_id = property_id


class InvalidFormatError(BimPropsError):
    """Raised when new text cannot be coerced to the property's value type."""

    default_code = "INVALID_FORMAT"

    def __init__(self, value: str, value_type: str, property_id: str, reason: str = ""):
        message = f"Value '{value}' is not a valid {value_type} for property '{property_id}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            details={"value": value, "value_type": value_type, "property_id": property_id},
        )
        self.value = value
        self.value_type = value_type
        self.property_id = property_id
