"""Shared option groups cache."""
from bimprops.options.cache import OptionCache

__all__ = ["OptionCache"]
