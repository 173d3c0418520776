"""Main page rendering.

Composes all UI components into the listing browser page.
"""

from __future__ import annotations

import streamlit as st

from property_browser.application.view_state import ViewState
from property_browser.core.settings import get_settings
from property_browser.services.exporter import export_csv
from property_browser.ui.components.charts import render_price_roi_scatter
from property_browser.ui.components.filters import render_filter_panel
from property_browser.ui.components.results import (
    render_no_results,
    render_property_grid,
    render_results_header,
)
from property_browser.ui.state import SessionManager


def render_header() -> None:
    """Render page header."""
    st.title("Available Properties")
    st.caption("Find your next investment opportunity")
    st.divider()


def render_detail_notice(view: ViewState) -> None:
    """Show which property the detail view was requested for."""
    property_id = SessionManager.get_requested_detail()
    if property_id is None:
        return
    prop = next((p for p in view.catalog if p.id == property_id), None)
    if prop is None:
        SessionManager.clear_detail()
        return
    col_msg, col_close = st.columns([0.85, 0.15])
    with col_msg:
        st.success(f"Opening details for **{prop.title}** (`?property={prop.id}`)")
    with col_close:
        st.button("Close", key="close_detail", on_click=SessionManager.clear_detail)


def render_main_page(view: ViewState) -> None:
    """Render the filter panel and the current results.

    Args:
        view: Session ViewState, already refreshed
    """
    settings = get_settings()

    render_header()
    render_detail_notice(view)

    col_filters, col_results = st.columns([0.25, 0.75], gap="large")

    with col_filters:
        render_filter_panel(view)

    with col_results:
        render_results_header(view)
        outcome = view.outcome

        if outcome.is_empty:
            render_no_results()
        else:
            render_property_grid(view, outcome, columns=settings.grid_columns)

            if settings.enable_chart:
                with st.expander("📈 Price vs ROI", expanded=False):
                    render_price_roi_scatter(outcome.properties, key="results")

            if settings.enable_export:
                st.download_button(
                    "Download results (CSV)",
                    data=export_csv(outcome.properties),
                    file_name="properties.csv",
                    mime="text/csv",
                )

    if settings.debug_mode:
        with st.expander("🐞 Debug", expanded=False):
            st.json(view.spec.model_dump(mode="json"))
