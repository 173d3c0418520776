"""Filter panel components.

Each widget is bound to one ViewState action through an on_change callback,
so the controller is updated before the page body is rendered.
"""

from __future__ import annotations

from collections.abc import Sequence

import streamlit as st

from property_browser.application.view_state import ViewState
from property_browser.domain.models.filters import ALL_TYPES, SortKey
from property_browser.domain.models.listing import Property, PropertyType
from property_browser.services.catalog import catalog_bounds, property_types
from property_browser.ui.helpers import format_currency, format_roi
from property_browser.ui.state import (
    PRICE_MAX_KEY,
    PRICE_MIN_KEY,
    ROI_MAX_KEY,
    ROI_MIN_KEY,
    SEARCH_KEY,
    SORT_KEY,
    TYPE_KEY,
    SessionManager,
)

SORT_OPTIONS = [SortKey.PRICE_LOW.value, SortKey.PRICE_HIGH.value, SortKey.ROI_HIGH.value]


def type_options(catalog: Sequence[Property]) -> list[str]:
    """The 'all' sentinel followed by the types present in the catalog."""
    return [ALL_TYPES] + [t.value for t in property_types(catalog)]


def range_placeholders(catalog: Sequence[Property]) -> dict[str, str]:
    """Placeholder text for the range inputs, showing the catalog extremes."""
    placeholders = {
        PRICE_MIN_KEY: "Min Price",
        PRICE_MAX_KEY: "Max Price",
        ROI_MIN_KEY: "Min ROI",
        ROI_MAX_KEY: "Max ROI",
    }
    if not catalog:
        return placeholders

    bounds = catalog_bounds(catalog)
    placeholders[PRICE_MIN_KEY] += f" ({format_currency(bounds['price_min'])})"
    placeholders[PRICE_MAX_KEY] += f" ({format_currency(bounds['price_max'])})"
    placeholders[ROI_MIN_KEY] += f" ({format_roi(bounds['roi_min'])})"
    placeholders[ROI_MAX_KEY] += f" ({format_roi(bounds['roi_max'])})"
    return placeholders


def type_label(value: str) -> str:
    """Human-readable label for a type option."""
    if value == ALL_TYPES:
        return "All Types"
    return PropertyType(value).label


def sort_label(value: str) -> str:
    return SortKey.parse(value).label


def _on_search(view: ViewState) -> None:
    view.set_search(st.session_state[SEARCH_KEY])


def _on_price(view: ViewState) -> None:
    view.set_price_range(st.session_state[PRICE_MIN_KEY], st.session_state[PRICE_MAX_KEY])


def _on_roi(view: ViewState) -> None:
    view.set_roi_range(st.session_state[ROI_MIN_KEY], st.session_state[ROI_MAX_KEY])


def _on_type(view: ViewState) -> None:
    view.set_property_type(st.session_state[TYPE_KEY])


def _on_sort(view: ViewState) -> None:
    view.set_sort_key(st.session_state[SORT_KEY])


def _on_reset(view: ViewState) -> None:
    view.reset()
    SessionManager.sync_widgets(view.spec)


def render_filter_panel(view: ViewState) -> None:
    """Render search, range, type and sort controls plus the reset button.

    Args:
        view: Session ViewState the controls write to
    """
    st.markdown("### 🔎 Filters")

    st.text_input(
        "Search",
        key=SEARCH_KEY,
        placeholder="Search by title or location...",
        on_change=_on_search,
        args=(view,),
    )

    placeholders = range_placeholders(view.catalog)

    st.markdown("**Price Range**")
    st.text_input("Min Price", key=PRICE_MIN_KEY, placeholder=placeholders[PRICE_MIN_KEY],
                  on_change=_on_price, args=(view,))
    st.text_input("Max Price", key=PRICE_MAX_KEY, placeholder=placeholders[PRICE_MAX_KEY],
                  on_change=_on_price, args=(view,))

    st.markdown("**ROI Range (%)**")
    st.text_input("Min ROI", key=ROI_MIN_KEY, placeholder=placeholders[ROI_MIN_KEY],
                  on_change=_on_roi, args=(view,))
    st.text_input("Max ROI", key=ROI_MAX_KEY, placeholder=placeholders[ROI_MAX_KEY],
                  on_change=_on_roi, args=(view,))

    st.selectbox(
        "Property Type",
        options=type_options(view.catalog),
        key=TYPE_KEY,
        format_func=type_label,
        on_change=_on_type,
        args=(view,),
    )

    st.selectbox(
        "Sort By",
        options=SORT_OPTIONS,
        key=SORT_KEY,
        format_func=sort_label,
        on_change=_on_sort,
        args=(view,),
    )

    st.button(
        "Reset Filters",
        use_container_width=True,
        on_click=_on_reset,
        args=(view,),
    )
