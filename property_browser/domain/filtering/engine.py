"""Catalog filter engine.

Pure functions mapping (catalog, FilterSpec) to the ordered subset shown to
the user. Nothing here holds state or mutates its inputs, so the same
arguments always give the same result.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from property_browser.domain.models.filters import ALL_TYPES, FilterSpec, SortKey
from property_browser.domain.models.listing import Property


def matches_search(prop: Property, search_text: str) -> bool:
    """Check free-text search against title and location.

    Args:
        prop: Catalog record
        search_text: User query (empty matches everything)

    Returns:
        True if the query is empty or a case-insensitive substring of
        the title or the location
    """
    if search_text == "":
        return True
    needle = search_text.lower()
    return needle in prop.title.lower() or needle in prop.location.lower()


def in_range(value: float, bounds: tuple[float, float]) -> bool:
    """Inclusive range check. Inverted bounds match nothing."""
    low, high = bounds
    return low <= value <= high


def matches_type(prop: Property, property_type: str) -> bool:
    return property_type == ALL_TYPES or prop.type == property_type


def matches(prop: Property, spec: FilterSpec) -> bool:
    """Check a property against all four filter conditions."""
    return (
        matches_search(prop, spec.search_text)
        and in_range(prop.price, spec.price_range)
        and in_range(prop.roi, spec.roi_range)
        and matches_type(prop, spec.property_type)
    )


# Sort key -> (field accessor, descending). NONE keeps input order.
_ORDERINGS: dict[SortKey, tuple[Callable[[Property], float], bool] | None] = {
    SortKey.PRICE_LOW: (lambda p: p.price, False),
    SortKey.PRICE_HIGH: (lambda p: p.price, True),
    SortKey.ROI_HIGH: (lambda p: p.roi, True),
    SortKey.NONE: None,
}


def sort_properties(properties: Iterable[Property], sort_key: SortKey) -> list[Property]:
    """Stable sort of properties by the chosen key.

    Ties keep their relative input order for every key, including the
    descending ones.

    Args:
        properties: Records to order
        sort_key: Requested ordering

    Returns:
        New list in the requested order
    """
    items = list(properties)
    ordering = _ORDERINGS[SortKey.parse(sort_key)]
    if ordering is None:
        return items
    accessor, descending = ordering
    return sorted(items, key=accessor, reverse=descending)


def apply_filters(catalog: Sequence[Property], spec: FilterSpec) -> list[Property]:
    """Filter then sort the catalog.

    Args:
        catalog: Full, read-only catalog in source order
        spec: Current filter specification

    Returns:
        New list holding the matching records in ``spec.sort_key`` order
    """
    return sort_properties((p for p in catalog if matches(p, spec)), spec.sort_key)
