"""Chart components for result visualization."""

from __future__ import annotations

from collections.abc import Sequence

import plotly.express as px
import streamlit as st

from property_browser.domain.models.listing import Property
from property_browser.services.exporter import properties_to_frame


def render_price_roi_scatter(properties: Sequence[Property], key: str = "scatter") -> None:
    """Render a Price / ROI scatter plot of the current results.

    Args:
        properties: Filtered, sorted properties
        key: Unique key for chart
    """
    if not properties:
        return

    df_chart = properties_to_frame(properties)

    fig = px.scatter(
        df_chart,
        x="price",
        y="roi",
        color="type",
        hover_name="title",
        hover_data=["location"],
        labels={"price": "Price ($)", "roi": "Expected ROI (%)", "type": "Type"},
        title="Price vs Expected ROI",
    )
    fig.update_traces(marker={"size": 12})

    st.plotly_chart(fig, use_container_width=True, key=f"price_roi_scatter_{key}")
