"""Validation module for resolved families.

Real validation happens via:
- FamilyValidator (structural checks producing a ValidationResult)
- validate() (boolean shortcut used by non-reporting callers)
"""

from bimprops.models.reports import ValidationIssue, ValidationResult
from bimprops.validation.validator import FamilyValidator, validate

__all__ = [
    "FamilyValidator",
    "ValidationIssue",
    "ValidationResult",
    "validate",
]
