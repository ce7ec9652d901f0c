"""Typed property values.

A property value is one of three variants. Each variant knows whether it
satisfies its invariant and how it is displayed:

- StringValue: text must not be None (empty is allowed)
- DoubleValue: number must be present
- EnumerationValue: label must not be None (empty is allowed)
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Optional, Union

from bimprops.formatting.number_formatter import format_display


class OptionValueType(str, Enum):
    """Declared type of a property value."""

    STRING = "String"
    DOUBLE = "Double"
    ENUMERATION = "Enumeration"


# Lower-case spellings accepted in the ValueType field, including
# localized (Russian) names.
VALUE_TYPE_SYNONYMS: Dict[str, OptionValueType] = {
    "string": OptionValueType.STRING,
    "строка": OptionValueType.STRING,
    "double": OptionValueType.DOUBLE,
    "number": OptionValueType.DOUBLE,
    "число": OptionValueType.DOUBLE,
    "enumeration": OptionValueType.ENUMERATION,
    "enum": OptionValueType.ENUMERATION,
    "перечисление": OptionValueType.ENUMERATION,
}


def parse_value_type(text: Optional[str]) -> Optional[OptionValueType]:
    """Match a ValueType string case-insensitively.

    Absent or blank text means String. Unknown spellings return None.
    """
    if text is None or not str(text).strip():
        return OptionValueType.STRING
    return VALUE_TYPE_SYNONYMS.get(str(text).strip().lower())


@dataclass(frozen=True)
class StringValue:
    text: Optional[str] = ""

    kind: ClassVar[OptionValueType] = OptionValueType.STRING

    @property
    def raw(self) -> Optional[str]:
        return self.text

    def is_valid(self) -> bool:
        return self.text is not None

    def display(self) -> str:
        return self.text or ""


@dataclass(frozen=True)
class DoubleValue:
    number: Optional[float] = None

    kind: ClassVar[OptionValueType] = OptionValueType.DOUBLE

    @property
    def raw(self) -> Optional[float]:
        return self.number

    def is_valid(self) -> bool:
        return self.number is not None

    def display(self) -> str:
        return format_display(self.number)


@dataclass(frozen=True)
class EnumerationValue:
    label: Optional[str] = ""

    kind: ClassVar[OptionValueType] = OptionValueType.ENUMERATION

    @property
    def raw(self) -> Optional[str]:
        return self.label

    def is_valid(self) -> bool:
        return self.label is not None

    def display(self) -> str:
        return self.label or ""


Value = Union[StringValue, DoubleValue, EnumerationValue]


def make_value(value_type: OptionValueType, payload: Union[str, float, None]) -> Value:
    """Build the value variant for value_type around an already-coerced payload."""
    if value_type is OptionValueType.DOUBLE:
        return DoubleValue(number=None if payload is None else float(payload))
    if value_type is OptionValueType.ENUMERATION:
        return EnumerationValue(label=payload if payload is None else str(payload))
    return StringValue(text=payload if payload is None else str(payload))
