"""Family resolution, ordered views and the consumer-facing service."""
from bimprops.families.aggregator import CategoryView, filter_view, resolve, view
from bimprops.families.service import FamilyService

__all__ = ["CategoryView", "FamilyService", "filter_view", "resolve", "view"]
