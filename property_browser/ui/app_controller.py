"""Application controller - orchestrates UI and business logic.

Each function represents a distinct phase of the page flow: load the
catalog, obtain the session's view state, and bring its outcome up to date.
"""

from __future__ import annotations

import streamlit as st

from property_browser.application.view_state import ResultStatus, ViewState
from property_browser.core.exceptions import CatalogError
from property_browser.core.logging import bind_catalog_context, get_logger
from property_browser.core.settings import get_settings
from property_browser.domain.models.listing import Property
from property_browser.services.catalog import load_catalog
from property_browser.ui.state import SessionManager, get_state, set_state

log = get_logger(__name__)


def load_session_catalog() -> tuple[Property, ...] | None:
    """Load the catalog once per session.

    An empty tuple is a valid catalog; ``None`` means loading failed.

    Returns:
        Catalog tuple, or None after reporting a load failure
    """
    catalog = get_state("catalog", None)
    if catalog is None:
        try:
            catalog = load_catalog()
        except CatalogError as e:
            log.error("catalog_load_failed", error=str(e))
            st.error(f"Could not load property catalog: {e}")
            return None
        set_state("catalog", catalog)

    bind_catalog_context(len(catalog), source=get_settings().catalog_path or "bundled")
    return catalog


def prepare_view(catalog: tuple[Property, ...]) -> ViewState:
    """Get the session ViewState and make sure filters have been applied."""
    view = SessionManager.get_view_state(catalog)
    if view.outcome.status is ResultStatus.PENDING:
        view.refresh()
    return view
