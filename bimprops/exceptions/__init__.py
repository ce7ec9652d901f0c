"""Custom exceptions for family loading, option caching and property editing.

All exceptions carry a code, a message and a details dictionary so callers
can surface them to users with enough context to diagnose the problem.
"""

from bimprops.exceptions.base import (
    BimPropsError,
    NotFoundError,
    DocumentFormatError,
)
from bimprops.exceptions.store import StoreNotFoundError, StoreIOError
from bimprops.exceptions.family import (
    FamilyNotFoundError,
    OptionsFileNotFoundError,
    FamilyValidationError,
)
from bimprops.exceptions.edit import (
    GroupNotFoundError,
    PropertyNotFoundError,
    InvalidFormatError,
)

__all__ = [
    "BimPropsError",
    "NotFoundError",
    "DocumentFormatError",
    "StoreNotFoundError",
    "StoreIOError",
    "FamilyNotFoundError",
    "OptionsFileNotFoundError",
    "FamilyValidationError",
    "GroupNotFoundError",
    "PropertyNotFoundError",
    "InvalidFormatError",
]
