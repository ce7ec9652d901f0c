"""Store collaborator exceptions."""
from typing import Any, Dict, Optional

from bimprops.exceptions.base import BimPropsError, NotFoundError


class StoreNotFoundError(NotFoundError):
    """Raised by a store when the requested path does not exist."""

    default_code = "STORE_NOT_FOUND"

    def __init__(self, path: str):
        super().__init__(f"Path '{path}' does not exist in store", details={"path": path})
        self.path = path


class StoreIOError(BimPropsError):
    """Raised when the underlying store fails to read or write."""

    default_code = "STORE_IO_ERROR"

    def __init__(
        self,
        operation: str,
        path: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            operation: Operation that failed (read, write, verify, list)
            path: Store path involved
            reason: Description of the underlying failure
            details: Extra identifiers (option group, property) for diagnosis
        """
        context = {"operation": operation, "path": path}
        context.update(details or {})
        super().__init__(f"Store {operation} failed for '{path}': {reason}", details=context)
        self.operation = operation
        self.path = path
        self.reason = reason
