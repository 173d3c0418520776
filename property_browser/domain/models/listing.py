"""Property listing data models.

A listing is one read-only catalog record: an investment property with its
asking price and expected return on investment.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class PropertyType(str, Enum):
    """Fixed set of property categories offered in the catalog."""

    APARTMENT = "apartment"
    VILLA = "villa"
    OFFICE = "office"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Property(BaseModel):
    """Validated catalog record.

    Instances are frozen: the catalog never changes during a session.
    """

    # Identity
    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Listing headline")
    location: str = Field(..., description="City / neighbourhood")

    # Investment figures
    price: float = Field(..., ge=0, description="Asking price in currency units")
    roi: float = Field(..., ge=0, description="Expected return on investment in %")

    # Classification
    type: PropertyType = Field(..., description="Property category")

    # Opaque reference resolved by the renderer
    image: str = Field(default="", description="Image URL or asset path")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: object) -> object:
        """Accept type names regardless of case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
