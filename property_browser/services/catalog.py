"""Catalog source.

Loads the static property catalog from a JSON file and validates every
record. The catalog is read once at startup and never modified.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from property_browser.core.exceptions import DataLoadError, DuplicatePropertyError
from property_browser.core.logging import get_logger
from property_browser.core.settings import get_settings
from property_browser.domain.models.listing import Property, PropertyType

log = get_logger(__name__)

BUNDLED_CATALOG = Path(__file__).parent.parent / "data" / "properties.json"


def parse_catalog(records: Sequence[dict[str, Any]]) -> tuple[Property, ...]:
    """Validate raw records into an ordered catalog.

    Args:
        records: Raw dicts in catalog order

    Returns:
        Tuple of Property in the same order

    Raises:
        ValidationError: If a record is malformed
        DuplicatePropertyError: If two records share an id
    """
    catalog = tuple(Property(**item) for item in records)

    seen: set[int] = set()
    for prop in catalog:
        if prop.id in seen:
            raise DuplicatePropertyError(prop.id)
        seen.add(prop.id)

    return catalog


def load_catalog_from_disk(path: str | Path) -> tuple[Property, ...]:
    """Load and validate a catalog JSON file.

    Args:
        path: Path to a JSON array of property records

    Returns:
        Validated catalog

    Raises:
        DataLoadError: If the file is unreadable, not JSON, or has invalid records
        DuplicatePropertyError: If two records share an id
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw_data = json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(path, "file not found") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(path, f"invalid JSON at line {e.lineno}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError(path, str(e)) from e

    if not isinstance(raw_data, list):
        raise DataLoadError(path, "expected a JSON array of properties")

    try:
        catalog = parse_catalog(raw_data)
    except (ValidationError, TypeError) as e:
        raise DataLoadError(path, str(e)) from e

    log.info("catalog_loaded", path=str(path), count=len(catalog))
    return catalog


def load_catalog(path: str | Path | None = None) -> tuple[Property, ...]:
    """Load the configured catalog.

    Falls back to ``settings.catalog_path`` and then to the bundled sample.
    """
    if path is None:
        path = get_settings().catalog_path or BUNDLED_CATALOG
    return load_catalog_from_disk(path)


def catalog_bounds(catalog: Sequence[Property]) -> dict[str, float]:
    """Min/max price and ROI across the catalog (zeros when empty)."""
    if not catalog:
        return {"price_min": 0.0, "price_max": 0.0, "roi_min": 0.0, "roi_max": 0.0}
    prices = [p.price for p in catalog]
    rois = [p.roi for p in catalog]
    return {
        "price_min": min(prices),
        "price_max": max(prices),
        "roi_min": min(rois),
        "roi_max": max(rois),
    }


def property_types(catalog: Sequence[Property]) -> list[PropertyType]:
    """Distinct property types present in the catalog, in enum order."""
    present = {p.type for p in catalog}
    return [t for t in PropertyType if t in present]
