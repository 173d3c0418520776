"""Custom exceptions for property_browser.

Domain-specific exception types for catalog loading and navigation.
Filtering never raises: malformed user input is coerced instead.
"""

from __future__ import annotations

from typing import Any


class PropertyBrowserError(Exception):
    """Base exception for all property_browser errors."""
    pass


# --- Catalog Errors ---

class CatalogError(PropertyBrowserError):
    """Invalid or inconsistent catalog data."""
    pass


class DataLoadError(CatalogError):
    """Failed to load or parse the catalog file."""

    def __init__(self, path: Any, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Could not load catalog from '{path}'"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class DuplicatePropertyError(CatalogError):
    """Two catalog records share the same identifier."""

    def __init__(self, property_id: Any):
        self.property_id = property_id
        super().__init__(f"Duplicate property id in catalog: {property_id}")


# --- Navigation Errors ---

class PropertyNotFoundError(PropertyBrowserError):
    """A detail view was requested for an id absent from the catalog."""

    def __init__(self, property_id: Any):
        self.property_id = property_id
        super().__init__(f"No property with id {property_id} in catalog")

