"""Data models for property_browser."""

from .filters import ALL_TYPES, FilterSpec, SortKey, ViewMode
from .listing import Property, PropertyType

__all__ = [
    "ALL_TYPES",
    "FilterSpec",
    "Property",
    "PropertyType",
    "SortKey",
    "ViewMode",
]
