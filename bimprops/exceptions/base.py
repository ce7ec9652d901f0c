"""Base exception classes for bimprops.

Every error carries a machine-readable code, a human-readable message and
a details dictionary with the identifiers needed to diagnose it.
"""

from typing import Any, Dict, Optional


class BimPropsError(Exception):
    """Base class for all bimprops errors."""

    default_code = "BIMPROPS_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.details:
            context = ", ".join(f"{k}={v}" for k, v in self.details.items())
            result += f" ({context})"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(BimPropsError):
    """Raised when a manifest, the shared options file or a stored path is missing."""

    default_code = "NOT_FOUND"


class DocumentFormatError(BimPropsError):
    """Raised when a JSON document cannot be parsed or has an unexpected shape."""

    default_code = "DOCUMENT_FORMAT_ERROR"

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Document '{path}' is not a valid JSON document: {reason}",
            details={"path": path},
        )
        self.path = path
        self.reason = reason


__all__ = [
    "BimPropsError",
    "NotFoundError",
    "DocumentFormatError",
]
