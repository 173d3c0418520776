"""Filter specification and view enumerations.

The filter specification is an immutable value. Every user action produces a
new specification with one field replaced; nothing is edited in place.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Sentinel for "no type constraint"
ALL_TYPES = "all"

# Documented defaults
DEFAULT_PRICE_MIN = 0.0
DEFAULT_PRICE_MAX = 1_000_000.0
DEFAULT_ROI_MIN = 0.0
DEFAULT_ROI_MAX = 10.0


class SortKey(str, Enum):
    """Closed set of result orderings.

    NONE keeps catalog order. Unrecognised keys parse to NONE rather than
    raising.
    """

    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    ROI_HIGH = "roi-high"
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> SortKey:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NONE

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS = {
    SortKey.PRICE_LOW: "Price: Low to High",
    SortKey.PRICE_HIGH: "Price: High to Low",
    SortKey.ROI_HIGH: "Highest ROI",
    SortKey.NONE: "Catalog order",
}


class ViewMode(str, Enum):
    """Presentational layout toggle."""

    GRID = "grid"
    LIST = "list"


class FilterSpec(BaseModel):
    """Current combination of search text, ranges, type constraint and sort key.

    Ranges are inclusive (min, max) pairs. min <= max is not checked; an
    inverted range matches nothing.
    """

    search_text: str = Field(default="", description="Case-insensitive substring")
    price_range: tuple[float, float] = Field(
        default=(DEFAULT_PRICE_MIN, DEFAULT_PRICE_MAX), description="Inclusive price window"
    )
    roi_range: tuple[float, float] = Field(
        default=(DEFAULT_ROI_MIN, DEFAULT_ROI_MAX), description="Inclusive ROI window (%)"
    )
    property_type: str = Field(default=ALL_TYPES, description="PropertyType value or 'all'")
    sort_key: SortKey = Field(default=SortKey.PRICE_LOW)

    model_config = {
        "frozen": True,
    }

    @field_validator("property_type", mode="before")
    @classmethod
    def normalize_property_type(cls, v: Any) -> str:
        """Store enum members and mixed-case names as their plain value."""
        if isinstance(v, Enum):
            v = v.value
        if v is None:
            return ALL_TYPES
        return str(v).strip().lower() or ALL_TYPES

    @field_validator("sort_key", mode="before")
    @classmethod
    def parse_sort_key(cls, v: Any) -> SortKey:
        return SortKey.parse(v)

    @property
    def is_default(self) -> bool:
        return self == FilterSpec()

    def replace(self, **changes: Any) -> FilterSpec:
        """Return a validated copy with the given fields replaced."""
        return type(self)(**{**self.model_dump(), **changes})
