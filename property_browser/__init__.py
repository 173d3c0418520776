"""
property_browser - Real Estate Investment Listing Browser

Browse a static catalog of investment properties: search, filter by price,
ROI and type, sort, and switch between grid and list layouts.

Modules:
    - core: Settings, logging and exceptions
    - domain: Pydantic listing models and the filter engine
    - application: View state controller and detail navigation
    - services: Catalog loading and result export
    - ui: Streamlit pages and UI components
"""

__version__ = "1.2.0"
