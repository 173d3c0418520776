"""Session state management for the Streamlit app.

Provides a centralized interface for managing Streamlit session state,
with type-safe accessors and default values. The ViewState controller lives
in session state so it survives Streamlit reruns within one browser session.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import streamlit as st

from property_browser.application.navigation import DetailIntent
from property_browser.application.view_state import ViewState
from property_browser.core.logging import get_logger
from property_browser.core.settings import get_settings
from property_browser.domain.models.filters import FilterSpec
from property_browser.domain.models.listing import Property

T = TypeVar("T")

log = get_logger(__name__)

# Widget keys bound to filter fields
SEARCH_KEY = "search_text"
PRICE_MIN_KEY = "price_min"
PRICE_MAX_KEY = "price_max"
ROI_MIN_KEY = "roi_min"
ROI_MAX_KEY = "roi_max"
TYPE_KEY = "property_type"
SORT_KEY = "sort_key"


def get_state(key: str, default: T) -> T:
    """Get a value from session state with a default.

    Args:
        key: Session state key
        default: Default value if key not present

    Returns:
        Value from session state or default
    """
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values with defaults.

    Only sets values that don't already exist.
    """
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def format_bound(value: float, blank_zero: bool = False) -> str:
    """Render a range bound as input text ("" for zero when requested)."""
    if blank_zero and value == 0:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def widget_values(spec: FilterSpec) -> dict[str, Any]:
    """Widget contents mirroring a filter specification."""
    return {
        SEARCH_KEY: spec.search_text,
        PRICE_MIN_KEY: format_bound(spec.price_range[0], blank_zero=True),
        PRICE_MAX_KEY: format_bound(spec.price_range[1], blank_zero=True),
        ROI_MIN_KEY: format_bound(spec.roi_range[0]),
        ROI_MAX_KEY: format_bound(spec.roi_range[1]),
        TYPE_KEY: spec.property_type,
        SORT_KEY: spec.sort_key.value,
    }


class SessionManager:
    """Manages all session state for the app."""

    DEFAULTS = {
        "view_state": None,
        "detail_property_id": None,
    }

    @classmethod
    def initialize(cls) -> None:
        """Initialize all session state with defaults."""
        init_state(cls.DEFAULTS)

        # Hydrate from URL if present
        params = st.query_params
        if "property" in params:
            try:
                set_state("detail_property_id", int(params["property"]))
            except ValueError:
                log.warning("invalid_property_query_param", value=params["property"])

    @classmethod
    def get_view_state(cls, catalog: Sequence[Property]) -> ViewState:
        """Get the session's ViewState, creating it on first access."""
        view = get_state("view_state", None)
        if view is None:
            view = ViewState(
                catalog,
                view_mode=get_settings().default_view_mode,
                navigator=cls.navigate_to_detail,
            )
            set_state("view_state", view)
            init_state(widget_values(view.spec))
            log.info("view_state_created", catalog_size=len(view.catalog))
        return view

    @classmethod
    def sync_widgets(cls, spec: FilterSpec) -> None:
        """Overwrite widget contents from a specification (after reset)."""
        for key, value in widget_values(spec).items():
            set_state(key, value)

    @classmethod
    def navigate_to_detail(cls, intent: DetailIntent) -> None:
        """Follow a detail intent by recording it in the URL."""
        set_state("detail_property_id", intent.property_id)
        st.query_params["property"] = str(intent.property_id)

    @classmethod
    def get_requested_detail(cls) -> int | None:
        return get_state("detail_property_id", None)

    @classmethod
    def clear_detail(cls) -> None:
        set_state("detail_property_id", None)
        if "property" in st.query_params:
            del st.query_params["property"]
