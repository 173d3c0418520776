"""Property-based tests using Hypothesis.

Checks the filter engine laws over arbitrary catalogs and specifications:
subset, predicate, ordering and idempotence.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from property_browser.domain.filtering.engine import apply_filters
from property_browser.domain.models.filters import ALL_TYPES, FilterSpec, SortKey
from property_browser.domain.models.listing import Property, PropertyType


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

words = st.text(alphabet="abcLoftVila ", max_size=12)
prices = st.floats(min_value=0, max_value=2_000_000, allow_nan=False, allow_infinity=False)
rois = st.floats(min_value=0, max_value=15, allow_nan=False, allow_infinity=False)
types = st.sampled_from(list(PropertyType))


@st.composite
def catalogs(draw):
    rows = draw(st.lists(st.tuples(words, words, prices, rois, types), max_size=15))
    return [
        Property(id=i, title=title, location=location, price=price, roi=roi, type=ptype)
        for i, (title, location, price, roi, ptype) in enumerate(rows)
    ]


@st.composite
def specs(draw):
    return FilterSpec(
        search_text=draw(st.text(alphabet="abcLoft", max_size=3)),
        price_range=(draw(prices), draw(prices)),
        roi_range=(draw(rois), draw(rois)),
        property_type=draw(st.sampled_from([ALL_TYPES] + [t.value for t in PropertyType])),
        sort_key=draw(st.sampled_from(list(SortKey))),
    )


def satisfies(prop: Property, spec: FilterSpec) -> bool:
    needle = spec.search_text.lower()
    return (
        (needle == "" or needle in prop.title.lower() or needle in prop.location.lower())
        and spec.price_range[0] <= prop.price <= spec.price_range[1]
        and spec.roi_range[0] <= prop.roi <= spec.roi_range[1]
        and (spec.property_type == ALL_TYPES or prop.type.value == spec.property_type)
    )


# ---------------------------------------------------------------------------
# apply_filters
# ---------------------------------------------------------------------------


class TestApplyFiltersProperties:

    @given(catalogs(), specs())
    def test_result_is_subset(self, catalog, spec):
        """No record is synthesized or duplicated."""
        result = apply_filters(catalog, spec)
        assert len({p.id for p in result}) == len(result)
        assert all(p in catalog for p in result)

    @given(catalogs(), specs())
    def test_exactly_matching_records(self, catalog, spec):
        """Every retained record matches; every matching record is retained."""
        result = apply_filters(catalog, spec)
        assert all(satisfies(p, spec) for p in result)
        assert {p.id for p in result} == {p.id for p in catalog if satisfies(p, spec)}

    @given(catalogs(), specs())
    def test_idempotent(self, catalog, spec):
        assert apply_filters(catalog, spec) == apply_filters(catalog, spec)

    @settings(max_examples=50)
    @given(catalogs(), specs())
    def test_sorting_laws(self, catalog, spec):
        result = apply_filters(catalog, spec)
        pairs = list(zip(result, result[1:]))
        if spec.sort_key is SortKey.PRICE_LOW:
            assert all(a.price <= b.price for a, b in pairs)
        elif spec.sort_key is SortKey.PRICE_HIGH:
            assert all(a.price >= b.price for a, b in pairs)
        elif spec.sort_key is SortKey.ROI_HIGH:
            assert all(a.roi >= b.roi for a, b in pairs)
        else:
            positions = [catalog.index(p) for p in result]
            assert positions == sorted(positions)

    @given(catalogs())
    def test_default_window_keeps_in_range_catalog(self, catalog):
        """Default filters keep everything inside the default windows."""
        inside = [p for p in catalog if p.price <= 1_000_000 and p.roi <= 10]
        result = apply_filters(catalog, FilterSpec())
        assert {p.id for p in result} == {p.id for p in inside}
