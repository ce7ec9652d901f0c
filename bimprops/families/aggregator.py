"""Resolution of family manifests and the category-ordered property view."""

from typing import Dict, List, Mapping

from bimprops.models import FamilyManifest, OptionGroup, OptionProperty, ResolvedFamily

CategoryView = Dict[str, List[OptionProperty]]


def resolve(manifest: FamilyManifest, option_groups: Mapping[str, OptionGroup]) -> ResolvedFamily:
    """Look up the manifest's option groups.

    Ids missing from option_groups are left out of the result; the
    validator reports them.
    """
    resolved = {
        group_id: option_groups[group_id]
        for group_id in manifest.option_group_ids
        if group_id in option_groups
    }
    return ResolvedFamily(manifest=manifest, option_groups=resolved)


def view(resolved: ResolvedFamily) -> CategoryView:
    """Group the family's properties by category in display order.

    Categories named in the manifest's category_order come first, in that
    order. Remaining categories follow in first-seen order. Categories
    without properties are omitted.
    """
    grouped: CategoryView = {}
    for group_id in resolved.manifest.option_group_ids:
        group = resolved.option_groups.get(group_id)
        if group is None:
            continue
        for prop in group.properties:
            grouped.setdefault(prop.category_name, []).append(prop)

    ordered: CategoryView = {}
    for category in resolved.manifest.category_order:
        if category in grouped and category not in ordered:
            ordered[category] = grouped[category]

    for category, props in grouped.items():
        if category not in ordered:
            ordered[category] = props

    return ordered


def filter_view(categories: CategoryView, search_text: str) -> CategoryView:
    """Filter a category view by case-insensitive search text.

    A category whose name matches keeps all its properties. Otherwise only
    properties whose name or display value match are kept. Empty categories
    are dropped. Blank search text returns every category.
    """
    if not search_text or not search_text.strip():
        return dict(categories)

    needle = search_text.strip().lower()
    filtered: CategoryView = {}
    for category, props in categories.items():
        if needle in category.lower():
            filtered[category] = list(props)
            continue
        matches = [
            prop
            for prop in props
            if needle in prop.name.lower() or needle in prop.display_value.lower()
        ]
        if matches:
            filtered[category] = matches

    return filtered
