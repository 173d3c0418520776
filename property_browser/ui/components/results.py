"""Result display components: header, property cards and empty state."""

from __future__ import annotations

import streamlit as st

from property_browser.application.view_state import FilterOutcome, ViewState
from property_browser.core.settings import get_settings
from property_browser.domain.models.filters import ViewMode
from property_browser.domain.models.listing import Property
from property_browser.ui.helpers import format_currency, format_roi, resolve_image
from property_browser.ui.state import init_state

VIEW_MODE_KEY = "view_mode"
VIEW_MODE_ICONS = {ViewMode.GRID.value: "▦ Grid", ViewMode.LIST.value: "☰ List"}


def _on_view_mode(view: ViewState) -> None:
    view.set_view_mode(st.session_state[VIEW_MODE_KEY])


def render_results_header(view: ViewState) -> None:
    """Render result count and the grid/list toggle."""
    init_state({VIEW_MODE_KEY: view.view_mode.value})

    col_count, col_toggle = st.columns([0.7, 0.3])
    with col_count:
        st.caption(view.outcome.summary)
    with col_toggle:
        st.radio(
            "Layout",
            options=[m.value for m in ViewMode],
            key=VIEW_MODE_KEY,
            format_func=VIEW_MODE_ICONS.get,
            horizontal=True,
            label_visibility="collapsed",
            on_change=_on_view_mode,
            args=(view,),
        )


def render_no_results() -> None:
    """Render empty state when no property matches."""
    st.info("No properties found matching your criteria.")


def _render_metrics(prop: Property) -> None:
    c1, c2 = st.columns(2)
    with c1:
        st.caption("Price")
        st.markdown(f"**:blue[{format_currency(prop.price)}]**")
    with c2:
        st.caption("Expected ROI")
        st.markdown(f"**:green[{format_roi(prop.roi)}]**")


def render_property_card(view: ViewState, prop: Property) -> None:
    """Render one property card in the current layout.

    Args:
        view: Session ViewState (receives detail navigation)
        prop: Property to display
    """
    with st.container(border=True):
        if view.view_mode is ViewMode.GRID:
            image = resolve_image(prop.image, get_settings().assets_dir)
            if image:
                st.image(image, use_container_width=True)
            st.caption(prop.type.label)
            st.markdown(f"#### {prop.title}")
            st.caption(prop.location)
            _render_metrics(prop)
            st.button(
                "View Details",
                key=f"details_{prop.id}",
                type="primary",
                use_container_width=True,
                on_click=view.open_detail,
                args=(prop.id,),
            )
        else:
            col_img, col_body, col_metrics = st.columns([0.3, 0.4, 0.3])
            with col_img:
                image = resolve_image(prop.image, get_settings().assets_dir)
                if image:
                    st.image(image, use_container_width=True)
                st.caption(prop.type.label)
            with col_body:
                st.markdown(f"#### {prop.title}")
                st.caption(prop.location)
                st.button(
                    "View Details",
                    key=f"details_{prop.id}",
                    type="primary",
                    on_click=view.open_detail,
                    args=(prop.id,),
                )
            with col_metrics:
                _render_metrics(prop)


def render_property_grid(view: ViewState, outcome: FilterOutcome, columns: int = 3) -> None:
    """Render the result list as a grid or a vertical list."""
    if view.view_mode is ViewMode.LIST:
        for prop in outcome.properties:
            render_property_card(view, prop)
        return

    props = list(outcome.properties)
    for start in range(0, len(props), columns):
        cols = st.columns(columns)
        for col, prop in zip(cols, props[start:start + columns]):
            with col:
                render_property_card(view, prop)
