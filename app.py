"""Main Application Entry Point.

Run with ``streamlit run app.py``. Orchestrates UI components and services
via app_controller.
"""

import os
import sys

import streamlit as st

# Add project root to path if not present (for running from root)
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from property_browser.core.logging import get_logger
from property_browser.ui.app_controller import load_session_catalog, prepare_view
from property_browser.ui.pages.main import render_main_page
from property_browser.ui.state import SessionManager


def main() -> None:
    """Main application entry point."""
    # Streamlit configuration (must be first Streamlit call)
    st.set_page_config(
        page_title="Available Properties",
        page_icon="🏢",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    log = get_logger(__name__)

    # 1. Initialize session
    SessionManager.initialize()

    # 2. Load catalog (exit early if loading failed)
    catalog = load_session_catalog()
    if catalog is None:
        return

    # 3. Obtain view state and apply filters
    view = prepare_view(catalog)
    log.debug("page_rendered", matched=view.outcome.count, view_mode=view.view_mode.value)

    # 4. Render page
    render_main_page(view)


if __name__ == "__main__":
    main()
