"""Services: catalog source and result export."""

from .catalog import catalog_bounds, load_catalog, load_catalog_from_disk, property_types
from .exporter import export_csv, properties_to_frame

__all__ = [
    "load_catalog",
    "load_catalog_from_disk",
    "catalog_bounds",
    "property_types",
    "export_csv",
    "properties_to_frame",
]
