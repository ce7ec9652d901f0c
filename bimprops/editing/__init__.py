"""Persistent property editing."""
from bimprops.editing.pipeline import EditPipeline

__all__ = ["EditPipeline"]
