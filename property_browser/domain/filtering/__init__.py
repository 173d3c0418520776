"""Catalog filtering: predicate, ordering and input coercion."""

from .coercion import coerce_number, coerce_price_range, coerce_roi_range
from .engine import apply_filters, matches, sort_properties

__all__ = [
    "apply_filters",
    "matches",
    "sort_properties",
    "coerce_number",
    "coerce_price_range",
    "coerce_roi_range",
]
