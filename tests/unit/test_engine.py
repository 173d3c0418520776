"""Unit tests for property_browser.domain.filtering.engine."""

from property_browser.domain.filtering.engine import (
    apply_filters,
    in_range,
    matches,
    matches_search,
    sort_properties,
)
from property_browser.domain.models.filters import FilterSpec, SortKey


def ids(properties):
    return [p.id for p in properties]


class TestMatchesSearch:
    """Tests for the free-text condition."""

    def test_empty_matches_all(self, mixed_catalog):
        assert all(matches_search(p, "") for p in mixed_catalog)

    def test_title_case_insensitive(self, two_property_catalog):
        loft = two_property_catalog[1]
        assert matches_search(loft, "LOFT")
        assert matches_search(loft, "town l")

    def test_location_match(self, mixed_catalog):
        """Location is searched as well as title."""
        hits = [p.id for p in mixed_catalog if matches_search(p, "austin")]
        assert hits == [2, 4]

    def test_no_match(self, two_property_catalog):
        assert not matches_search(two_property_catalog[0], "penthouse")

    def test_whitespace_not_stripped(self, two_property_catalog):
        """Search text is matched exactly as typed."""
        assert not matches_search(two_property_catalog[1], " loft ")


class TestInRange:

    def test_inclusive_bounds(self):
        assert in_range(100, (100, 200))
        assert in_range(200, (100, 200))
        assert not in_range(99.99, (100, 200))

    def test_inverted_range_matches_nothing(self):
        assert not in_range(150, (200, 100))


class TestMatches:
    """Tests for the combined predicate."""

    def test_type_all(self, mixed_catalog):
        spec = FilterSpec()
        assert all(matches(p, spec) for p in mixed_catalog)

    def test_type_specific(self, mixed_catalog):
        spec = FilterSpec(property_type="office")
        assert [p.id for p in mixed_catalog if matches(p, spec)] == [3, 5]

    def test_all_conditions_required(self, mixed_catalog):
        """A property failing any single condition is excluded."""
        spec = FilterSpec(search_text="villa", roi_range=(0, 7), property_type="villa")
        assert [p.id for p in mixed_catalog if matches(p, spec)] == [1]


class TestSortProperties:
    """Tests for ordering."""

    def test_price_low(self, mixed_catalog):
        assert ids(sort_properties(mixed_catalog, SortKey.PRICE_LOW)) == [2, 4, 3, 6, 1, 5]

    def test_price_high_stable_ties(self, mixed_catalog):
        """Equal prices keep catalog order when sorting descending."""
        assert ids(sort_properties(mixed_catalog, SortKey.PRICE_HIGH)) == [5, 1, 6, 3, 2, 4]

    def test_roi_high_stable_ties(self, mixed_catalog):
        assert ids(sort_properties(mixed_catalog, SortKey.ROI_HIGH)) == [2, 6, 4, 1, 3, 5]

    def test_none_keeps_order(self, mixed_catalog):
        assert ids(sort_properties(mixed_catalog, SortKey.NONE)) == [1, 2, 3, 4, 5, 6]

    def test_unknown_string_keeps_order(self, mixed_catalog):
        assert ids(sort_properties(mixed_catalog, "newest")) == [1, 2, 3, 4, 5, 6]


class TestApplyFilters:
    """Tests for the full filter/sort pipeline."""

    def test_default_spec(self, two_property_catalog):
        """Default filters return everything, cheapest first."""
        assert ids(apply_filters(two_property_catalog, FilterSpec())) == [2, 1]

    def test_roi_sort(self, two_property_catalog):
        spec = FilterSpec(sort_key=SortKey.ROI_HIGH)
        assert ids(apply_filters(two_property_catalog, spec)) == [2, 1]

    def test_type_filter(self, two_property_catalog):
        spec = FilterSpec(property_type="villa")
        assert ids(apply_filters(two_property_catalog, spec)) == [1]

    def test_search_filter(self, two_property_catalog):
        spec = FilterSpec(search_text="loft")
        assert ids(apply_filters(two_property_catalog, spec)) == [2]

    def test_price_window(self, mixed_catalog):
        spec = FilterSpec(price_range=(150000, 450000))
        assert ids(apply_filters(mixed_catalog, spec)) == [2, 4, 3]

    def test_roi_window(self, mixed_catalog):
        spec = FilterSpec(roi_range=(7.5, 9), sort_key=SortKey.ROI_HIGH)
        assert ids(apply_filters(mixed_catalog, spec)) == [2, 6, 4]

    def test_inverted_price_range_empty(self, mixed_catalog):
        spec = FilterSpec(price_range=(900000, 100000))
        assert apply_filters(mixed_catalog, spec) == []

    def test_unknown_type_empty(self, mixed_catalog):
        assert apply_filters(mixed_catalog, FilterSpec(property_type="castle")) == []

    def test_empty_catalog(self):
        assert apply_filters([], FilterSpec()) == []

    def test_inputs_not_mutated(self, mixed_catalog):
        """Catalog order and filters are unchanged after a call."""
        before = list(mixed_catalog)
        spec = FilterSpec(sort_key=SortKey.PRICE_HIGH)
        result = apply_filters(mixed_catalog, spec)
        assert mixed_catalog == before
        assert spec == FilterSpec(sort_key=SortKey.PRICE_HIGH)
        assert result is not mixed_catalog

    def test_idempotent(self, mixed_catalog):
        spec = FilterSpec(search_text="a", sort_key=SortKey.ROI_HIGH)
        assert apply_filters(mixed_catalog, spec) == apply_filters(mixed_catalog, spec)

    def test_accepts_tuple_catalog(self, mixed_catalog):
        result = apply_filters(tuple(mixed_catalog), FilterSpec())
        assert isinstance(result, list)
        assert len(result) == 6
