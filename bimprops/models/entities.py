"""Domain entities for families and option groups."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bimprops.models.values import OptionValueType, StringValue, Value


@dataclass
class OptionProperty:
    """A single named, typed and categorized value inside an option group."""

    id: str
    name: str
    category_name: str = ""
    value: Value = field(default_factory=StringValue)
    description: Optional[str] = None

    @property
    def value_type(self) -> OptionValueType:
        return self.value.kind

    @property
    def display_value(self) -> str:
        return self.value.display()

    def is_valid(self) -> bool:
        return self.value.is_valid()


@dataclass
class OptionGroup:
    """Reusable bag of properties stored in the shared options file."""

    id: str
    properties: List[OptionProperty] = field(default_factory=list)

    def find_property(self, property_id: str) -> Optional[OptionProperty]:
        for prop in self.properties:
            if prop.id == property_id:
                return prop
        return None


@dataclass
class FamilyManifest:
    """Per-family record naming the option groups and category display order."""

    id: str
    name: str
    option_group_ids: List[str] = field(default_factory=list)
    category_order: List[str] = field(default_factory=list)


@dataclass
class ResolvedFamily:
    """A manifest plus the option groups that could be looked up for it.

    Groups are shared with the option cache and must be treated as read-only.
    """

    manifest: FamilyManifest
    option_groups: Dict[str, OptionGroup] = field(default_factory=dict)

    @property
    def missing_group_ids(self) -> List[str]:
        return [gid for gid in self.manifest.option_group_ids if gid not in self.option_groups]


@dataclass
class FamilyView:
    """Validated, category-ordered view of a family ready for display."""

    manifest: FamilyManifest
    categories: Dict[str, List[OptionProperty]] = field(default_factory=dict)

    @property
    def property_count(self) -> int:
        return sum(len(props) for props in self.categories.values())
