"""Numeric parsing and display helpers."""
from bimprops.formatting.number_formatter import (
    INVARIANT_LOCALE,
    NumberParseError,
    coerce_number,
    format_display,
    parse_number,
)

__all__ = [
    "INVARIANT_LOCALE",
    "NumberParseError",
    "coerce_number",
    "format_display",
    "parse_number",
]
