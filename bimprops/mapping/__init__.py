"""Raw JSON record access and conversion into typed models."""

from bimprops.mapping.manifest_mapper import parse_manifest
from bimprops.mapping.option_mapper import (
    ConversionResult,
    convert_option_group,
    convert_option_property,
    convert_options_document,
    convert_value,
)

__all__ = [
    "ConversionResult",
    "convert_option_group",
    "convert_option_property",
    "convert_options_document",
    "convert_value",
    "parse_manifest",
]
