"""Export of the current result list.

Turns the filtered, sorted properties into a DataFrame or CSV bytes for a
download button. Only results are exported, never the filter state.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from property_browser.core.logging import get_logger
from property_browser.domain.models.listing import Property

log = get_logger(__name__)

EXPORT_COLUMNS = ["id", "title", "location", "type", "price", "roi"]


def properties_to_frame(properties: Sequence[Property]) -> pd.DataFrame:
    """Build a DataFrame of results, one row per property in result order.

    Args:
        properties: Properties to export

    Returns:
        DataFrame with EXPORT_COLUMNS
    """
    rows = [
        {
            "id": p.id,
            "title": p.title,
            "location": p.location,
            "type": p.type.value,
            "price": p.price,
            "roi": p.roi,
        }
        for p in properties
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_csv(properties: Sequence[Property]) -> bytes:
    """Render results as UTF-8 CSV."""
    df = properties_to_frame(properties)
    log.info("results_exported", count=len(df))
    return df.to_csv(index=False).encode("utf-8")
