"""Core infrastructure: settings, logging and exceptions."""

from .exceptions import (
    CatalogError,
    DataLoadError,
    DuplicatePropertyError,
    PropertyBrowserError,
    PropertyNotFoundError,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    # Exceptions
    "PropertyBrowserError",
    "CatalogError",
    "DataLoadError",
    "DuplicatePropertyError",
    "PropertyNotFoundError",
]
